"""
Job Listing Service

Post-processing for job listings pulled from several job boards:
- normalize each provider's employment type codes
- merge batches, drop duplicates, newest first
- pagination metadata

Fetching from the boards happens outside this package; only the resulting
JobListing objects come in here.
"""

import math
from typing import Iterable, List, Optional

from loguru import logger

from coursepath.schemas.schemas import JobListing, JobType, Pagination


# Adzuna contract_type -> JobType
CONTRACT_TYPES = {
    "permanent": JobType.full_time,
    "contract": JobType.contract,
    "part_time": JobType.part_time,
}

# Remotive job_type -> JobType
JOB_TYPES = {
    "full_time": JobType.full_time,
    "contract": JobType.contract,
    "part_time": JobType.part_time,
    "internship": JobType.internship,
}


def map_contract_type(contract_type: Optional[str]) -> JobType:
    """Map an Adzuna contract type to a JobType. Unknown or missing -> full-time."""
    if not contract_type:
        return JobType.full_time
    return CONTRACT_TYPES.get(contract_type.lower(), JobType.full_time)


def map_job_type(job_type: Optional[str]) -> JobType:
    """Map a Remotive job type to a JobType. Unknown or missing -> full-time."""
    if not job_type:
        return JobType.full_time
    return JOB_TYPES.get(job_type.lower(), JobType.full_time)


def merge_job_listings(*batches: Iterable[JobListing], limit: Optional[int] = None) -> List[JobListing]:
    """
    Combine job listings from several sources.

    Args:
        *batches: Listings from each job board (or the local database)
        limit: Maximum number of listings to return (all if None)

    Returns:
        Listings de-duplicated on (source, external_id), first one kept,
        sorted by posted date, newest first.
    """
    seen = set()
    jobs: List[JobListing] = []

    for batch in batches:
        for job in batch:
            key = (job.source, job.external_id)
            if key in seen:
                logger.debug(f"Dropping duplicate listing {job.source}:{job.external_id}")
                continue
            seen.add(key)
            jobs.append(job)

    # Stable sort keeps source order for identical dates
    jobs.sort(key=lambda job: job.posted_date.timestamp(), reverse=True)

    if limit is not None:
        return jobs[:max(0, limit)]
    return jobs


def paginate(total: int, page: int = 1, limit: int = 20) -> Pagination:
    """
    Build pagination metadata.

    Raises:
        pydantic.ValidationError: If page < 1 or limit is outside 1-100
    """
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return Pagination(page=page, limit=limit, total=total, total_pages=total_pages)

"""
Degree Progress Service

Credits earned vs credits required, class standing, and a rough
time-to-graduation estimate. Everything here works on plain numbers or on
the PlannedCourse rows of a student's academic path.
"""

import math
from typing import Iterable, Optional

from loguru import logger

from coursepath.core.config import get_settings
from coursepath.schemas.schemas import (
    CourseStatus, GradedCourse, GraduationEstimate, PathSummary, PlannedCourse
)
from coursepath.services.grades import calculate_gpa
from coursepath.utils.rounding import round_half_up


# Progress percentage at which each standing starts (highest first)
PROGRESS_THRESHOLDS = [
    ("Graduate", 100),
    ("Senior", 75),
    ("Junior", 50),
    ("Sophomore", 25),
    ("Freshman", 0),
]


def calculate_progress(completed_credits: float, total_credits: float) -> int:
    """
    Calculate progress percentage towards graduation.

    Returns round(100 * completed / total), clamped to [0, 100].
    A non-positive total has no meaningful ratio and returns 0.
    """
    if total_credits <= 0:
        logger.debug(f"Progress requested with total_credits={total_credits}, returning 0")
        return 0

    return max(0, min(100, round_half_up(completed_credits / total_credits * 100)))


def estimate_time_to_graduation(
    remaining_credits: float,
    credits_per_semester: Optional[int] = None
) -> GraduationEstimate:
    """
    Estimate semesters and years left, assuming two semesters a year.

    Args:
        remaining_credits: Credits still to earn
        credits_per_semester: Course load per semester (settings.credits_per_semester by default)

    Raises:
        ValueError: If credits_per_semester is not positive
    """
    if credits_per_semester is None:
        credits_per_semester = get_settings().credits_per_semester

    if credits_per_semester <= 0:
        raise ValueError("credits_per_semester must be positive")

    if remaining_credits <= 0:
        return GraduationEstimate(semesters=0, years=0)

    semesters = math.ceil(remaining_credits / credits_per_semester)
    years = math.ceil(semesters / 2)

    return GraduationEstimate(semesters=semesters, years=years)


def class_standing(progress_percentage: float) -> str:
    """Map a progress percentage (0-100) to Freshman/Sophomore/Junior/Senior/Graduate."""
    for standing, threshold in PROGRESS_THRESHOLDS:
        if progress_percentage >= threshold:
            return standing
    return "Freshman"


def summarize_path(
    courses: Iterable[PlannedCourse],
    total_credits: Optional[int] = None
) -> PathSummary:
    """
    Aggregate a student's academic path.

    - completed credits: courses with status "completed"
    - planned credits: "planned" and "enrolled" courses
    - GPA: completed courses that have a grade
    - dropped courses count for nothing

    Args:
        courses: Rows of the student's academic path
        total_credits: Credits needed to graduate (settings.total_credits_required by default)
    """
    settings = get_settings()
    if total_credits is None:
        total_credits = settings.total_credits_required

    completed_credits = 0
    planned_credits = 0
    graded = []

    for course in courses:
        if course.status == CourseStatus.completed:
            completed_credits += course.credits
            if course.grade and course.credits > 0:
                graded.append(GradedCourse(grade=course.grade, credits=course.credits))
        elif course.status in (CourseStatus.planned, CourseStatus.enrolled):
            planned_credits += course.credits

    progress = calculate_progress(completed_credits, total_credits)
    remaining = max(0, total_credits - completed_credits)
    estimate = estimate_time_to_graduation(remaining, settings.credits_per_semester)

    return PathSummary(
        total_credits=total_credits,
        completed_credits=completed_credits,
        planned_credits=planned_credits,
        gpa=round(calculate_gpa(graded), 2),
        progress_percentage=progress,
        standing=class_standing(progress),
        remaining_credits=remaining,
        semesters_remaining=estimate.semesters,
        years_remaining=estimate.years
    )

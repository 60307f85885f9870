"""
Pydantic Schemas - Service Inputs and Outputs

All data structures passed in and out of the services in one file for simplicity.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class CourseStatus(str, Enum):
    planned = "planned"
    enrolled = "enrolled"
    completed = "completed"
    dropped = "dropped"


class JobType(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    internship = "internship"
    co_op = "co-op"
    contract = "contract"


# ============================================================
# GRADE SCHEMAS
# ============================================================

class GradedCourse(BaseModel):
    grade: str
    credits: int = Field(..., gt=0)


# ============================================================
# COURSE SCHEMAS
# ============================================================

class CourseNode(BaseModel):
    """One vertex of the prerequisite graph. Edges point to prerequisites."""
    id: str
    prerequisites: List[str] = []

class PlannedCourse(BaseModel):
    course_id: str
    semester: Optional[str] = None
    status: CourseStatus = CourseStatus.planned
    grade: Optional[str] = None
    credits: int = Field(0, ge=0)

class Semester(BaseModel):
    season: str
    year: int


# ============================================================
# ACADEMIC PATH SCHEMAS
# ============================================================

class GraduationEstimate(BaseModel):
    semesters: int
    years: int

class PathSummary(BaseModel):
    total_credits: int
    completed_credits: int
    planned_credits: int
    gpa: float
    progress_percentage: int = Field(..., ge=0, le=100)
    standing: str
    remaining_credits: int
    semesters_remaining: int
    years_remaining: int


# ============================================================
# SKILLS SCHEMAS
# ============================================================

class SkillsMatch(BaseModel):
    matched_skills: List[str] = []
    missing_skills: List[str] = []
    match_percentage: int = Field(0, ge=0, le=100)


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobListing(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    description: Optional[str] = None
    employment_type: JobType = JobType.full_time
    application_url: Optional[str] = None
    posted_date: datetime
    source: str
    external_id: str
    salary_min: Optional[float] = Field(None, ge=0)
    salary_max: Optional[float] = Field(None, ge=0)
    remote_friendly: bool = False


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class Pagination(BaseModel):
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1, le=100)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)

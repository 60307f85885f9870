"""
Schemas module - data passed in and out of the services.
"""
from coursepath.schemas.schemas import (
    CourseStatus, JobType,
    GradedCourse, CourseNode, PlannedCourse, Semester,
    GraduationEstimate, PathSummary, SkillsMatch,
    JobListing, Pagination
)

__all__ = [
    "CourseStatus", "JobType",
    "GradedCourse", "CourseNode", "PlannedCourse", "Semester",
    "GraduationEstimate", "PathSummary", "SkillsMatch",
    "JobListing", "Pagination"
]

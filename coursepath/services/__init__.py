"""
Services module - pure academic and career calculations.

Usage:
    from coursepath.services import calculate_gpa, sort_courses_by_prerequisites
"""
from coursepath.services.grades import GRADE_POINTS, calculate_gpa, grade_points, meets_minimum_gpa
from coursepath.services.progress import (
    calculate_progress, estimate_time_to_graduation, class_standing, summarize_path
)
from coursepath.services.prerequisites import sort_courses_by_prerequisites, extract_course_code
from coursepath.services.skills import (
    calculate_skills_match, derive_skills_from_courses, categorize_skill, SKILL_CATEGORIES
)
from coursepath.services.jobs import map_contract_type, map_job_type, merge_job_listings, paginate

__all__ = [
    "GRADE_POINTS",
    "calculate_gpa",
    "grade_points",
    "meets_minimum_gpa",
    "calculate_progress",
    "estimate_time_to_graduation",
    "class_standing",
    "summarize_path",
    "sort_courses_by_prerequisites",
    "extract_course_code",
    "calculate_skills_match",
    "derive_skills_from_courses",
    "categorize_skill",
    "SKILL_CATEGORIES",
    "map_contract_type",
    "map_job_type",
    "merge_job_listings",
    "paginate",
]

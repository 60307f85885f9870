"""
GPA Service

PURPOSE:
Turn letter grades into a credit-weighted grade point average on a 4.0 scale.

HOW IT WORKS:
1. Look up each course's grade in GRADE_POINTS
2. Multiply the points by the course credits
3. Divide the sum by the credits of every course that had a usable grade

Withdrawals (W) and incompletes (I) are listed in the table so the frontend can
show them, but they carry no quality points and no attempted credits, so they
are left out of the average just like unknown codes. This is deliberate: a
0.0 entry in GRADE_POINTS does not mean the credits count as attempted.
"""

from typing import Iterable, Optional

from loguru import logger

from coursepath.core.config import get_settings
from coursepath.schemas.schemas import GradedCourse


GRADE_POINTS = {
    "A+": 4.0, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0, "W": 0.0, "I": 0.0,
}

NON_GPA_GRADES = frozenset({"W", "I"})


def grade_points(grade: str) -> Optional[float]:
    """Return the grade points for a letter grade, or None if it doesn't count toward GPA."""
    if grade in NON_GPA_GRADES:
        return None
    return GRADE_POINTS.get(grade)


def calculate_gpa(courses: Iterable[GradedCourse]) -> float:
    """
    Calculate GPA from grades and credits.

    Args:
        courses: Graded courses (grade code + credit hours)

    Returns:
        Float between 0.0 and 4.0. Returns 0.0 for empty input or when
        no grade maps to grade points.
    """
    total_points = 0.0
    total_credits = 0

    for course in courses:
        points = grade_points(course.grade)
        if points is None:
            logger.debug(f"Skipping grade {course.grade!r} in GPA calculation")
            continue
        total_points += points * course.credits
        total_credits += course.credits

    if total_credits == 0:
        return 0.0

    return total_points / total_credits


def meets_minimum_gpa(gpa: float, minimum: Optional[float] = None) -> bool:
    """Check a GPA against the graduation minimum (settings.min_gpa by default)."""
    if minimum is None:
        minimum = get_settings().min_gpa
    return gpa >= minimum

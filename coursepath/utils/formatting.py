"""
Formatting Utilities

Display helpers shared by the frontend and backend:
- Semester names ("Fall 2024")
- Salaries in USD
- Dates ("January 5, 2024")
- Email sanity check
"""

import re
from datetime import date

from coursepath.schemas.schemas import Semester
from coursepath.utils.rounding import round_half_up


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def format_semester(season: str, year: int) -> str:
    """Format semester name consistently."""
    return f"{season} {year}"


def parse_semester(semester: str) -> Semester:
    """
    Parse semester string into components.

    Raises:
        ValueError: If the string isn't "<Season> <year>"
    """
    parts = semester.split()
    if len(parts) != 2 or not parts[1].isdigit():
        raise ValueError(f"Invalid semester: {semester!r}")
    return Semester(season=parts[0], year=int(parts[1]))


def format_currency(amount: float) -> str:
    """Format salary as whole US dollars: 150000 -> "$150,000". Halves round away from zero."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${round_half_up(abs(amount)):,}"


def format_date(value: date) -> str:
    """Format date for display: "January 5, 2024"."""
    return f"{value:%B} {value.day}, {value.year}"


def is_valid_email(email: str) -> bool:
    """Validate email format."""
    return EMAIL_PATTERN.fullmatch(email) is not None

#!/usr/bin/env python3
"""
Service Smoke Test Script

Runs every service once against a small sample academic path and prints
the results. No database or network needed.

Run: python scripts/test_services.py
"""
import sys
sys.path.insert(0, '.')

from coursepath.core.config import get_settings
from coursepath.core.logging import setup_logger
from coursepath.schemas.schemas import CourseNode, CourseStatus, PlannedCourse
from coursepath.services import (
    calculate_skills_match,
    derive_skills_from_courses,
    sort_courses_by_prerequisites,
    summarize_path,
)


SAMPLE_PATH = [
    PlannedCourse(course_id="CS 180", semester="Fall 2024", status=CourseStatus.completed, grade="A", credits=4),
    PlannedCourse(course_id="MA 161", semester="Fall 2024", status=CourseStatus.completed, grade="B+", credits=5),
    PlannedCourse(course_id="CS 182", semester="Spring 2025", status=CourseStatus.enrolled, credits=3),
    PlannedCourse(course_id="CS 251", semester="Fall 2025", status=CourseStatus.planned, credits=3),
]

SAMPLE_GRAPH = [
    CourseNode(id="CS 251", prerequisites=["CS 182", "CS 240"]),
    CourseNode(id="CS 240", prerequisites=["CS 180"]),
    CourseNode(id="CS 182", prerequisites=["CS 180", "MA 161"]),
    CourseNode(id="CS 180"),
]


def main():
    settings = get_settings()
    setup_logger(settings)

    print("=" * 50)
    print("COURSEPATH - SERVICE SMOKE TEST")
    print("=" * 50)

    print("\n[1] Academic path summary...")
    summary = summarize_path(SAMPLE_PATH)
    print(f"    GPA: {summary.gpa}")
    print(f"    Progress: {summary.progress_percentage}% ({summary.standing})")
    print(f"    Remaining: {summary.remaining_credits} credits, ~{summary.semesters_remaining} semesters")

    print("\n[2] Prerequisite order...")
    order = sort_courses_by_prerequisites(SAMPLE_GRAPH)
    print(f"    {' -> '.join(order)}")

    print("\n[3] Skills match...")
    skills = derive_skills_from_courses([("CS 180", "Programming in Java")])
    match = calculate_skills_match(skills, ["Java", "SQL", "Programming"])
    print(f"    Matched: {match.matched_skills}")
    print(f"    Missing: {match.missing_skills}")
    print(f"    Match: {match.match_percentage}%")

    print("\n" + "=" * 50)
    print("Smoke test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()

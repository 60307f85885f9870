"""
Prerequisite Ordering Service

PURPOSE:
Order courses so that every prerequisite comes before the course that needs it.

HOW IT WORKS:
Depth-first traversal with three states per course id:
- unvisited: not seen yet
- in progress: on the current traversal path
- done: already placed in the result

Courses are started in input order and their prerequisites are visited in the
order they are listed. Reaching an in-progress course means a cycle; that edge
is ignored rather than raising. Prerequisite ids that are not in the input have
nothing to expand, so they are placed as leaves the first time they are seen.

The traversal keeps its own stack instead of recursing, so long prerequisite
chains can't run into the interpreter recursion limit.
"""

import re
from typing import Dict, Iterator, List, Sequence, Tuple

from loguru import logger

from coursepath.schemas.schemas import CourseNode


IN_PROGRESS = 1
DONE = 2

COURSE_CODE_PATTERN = re.compile(r"^([A-Z]{2,4})\s*(\d{3,4})")


def sort_courses_by_prerequisites(courses: Sequence[CourseNode]) -> List[str]:
    """
    Sort courses by prerequisites (topological sort, cycle tolerant).

    Args:
        courses: Course nodes; each lists the ids of its prerequisites

    Returns:
        Course ids with prerequisites first. Every input id appears exactly once.
        Ties between unrelated courses keep input order.
    """
    # First occurrence of a duplicated id defines its prerequisites
    nodes: Dict[str, CourseNode] = {}
    for course in courses:
        nodes.setdefault(course.id, course)

    state: Dict[str, int] = {}
    result: List[str] = []

    for course in courses:
        if course.id in state:
            continue

        state[course.id] = IN_PROGRESS
        stack: List[Tuple[str, Iterator[str]]] = [(course.id, iter(nodes[course.id].prerequisites))]

        while stack:
            course_id, prereqs = stack[-1]

            for prereq_id in prereqs:
                status = state.get(prereq_id)
                if status == DONE:
                    continue
                if status == IN_PROGRESS:
                    logger.debug(f"Ignoring cyclic prerequisite {course_id} -> {prereq_id}")
                    continue
                if prereq_id not in nodes:
                    # Unknown course: nothing to expand, place it as a leaf
                    state[prereq_id] = DONE
                    result.append(prereq_id)
                    continue

                state[prereq_id] = IN_PROGRESS
                stack.append((prereq_id, iter(nodes[prereq_id].prerequisites)))
                break
            else:
                stack.pop()
                state[course_id] = DONE
                result.append(course_id)

    return result


def extract_course_code(course_string: str) -> str:
    """
    Extract course code from full course string.

    "CS180 Problem Solving" -> "CS 180". Strings without a leading code
    are returned unchanged.
    """
    match = COURSE_CODE_PATTERN.match(course_string)
    return f"{match.group(1)} {match.group(2)}" if match else course_string

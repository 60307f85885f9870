"""
Tests for prerequisite ordering.
"""
import pytest

from coursepath.schemas.schemas import CourseNode
from coursepath.services.prerequisites import extract_course_code, sort_courses_by_prerequisites


def graph(edges):
    """Build course nodes from {id: [prerequisite ids]}, keeping dict order."""
    return [CourseNode(id=course_id, prerequisites=prereqs) for course_id, prereqs in edges.items()]


def assert_prerequisites_first(order, courses):
    position = {course_id: i for i, course_id in enumerate(order)}
    for course in courses:
        for prereq in course.prerequisites:
            if prereq in position:
                assert position[prereq] < position[course.id], f"{prereq} should come before {course.id}"


class TestSortCourses:

    def test_chain(self):
        courses = graph({"A": ["B"], "B": ["C"], "C": []})
        assert sort_courses_by_prerequisites(courses) == ["C", "B", "A"]

    def test_chain_reverse_input(self):
        courses = graph({"C": [], "B": ["C"], "A": ["B"]})
        assert sort_courses_by_prerequisites(courses) == ["C", "B", "A"]

    def test_empty(self):
        assert sort_courses_by_prerequisites([]) == []

    def test_independent_courses_keep_input_order(self):
        courses = graph({"MA 161": [], "CS 180": [], "ENGL 106": []})
        assert sort_courses_by_prerequisites(courses) == ["MA 161", "CS 180", "ENGL 106"]

    def test_prerequisites_visited_in_listed_order(self):
        courses = graph({"CS 251": ["CS 182", "CS 240"], "CS 240": [], "CS 182": []})
        assert sort_courses_by_prerequisites(courses) == ["CS 182", "CS 240", "CS 251"]

    def test_diamond(self):
        courses = graph({
            "CS 307": ["CS 251", "CS 252"],
            "CS 251": ["CS 180"],
            "CS 252": ["CS 180"],
            "CS 180": [],
        })
        order = sort_courses_by_prerequisites(courses)

        assert order == ["CS 180", "CS 251", "CS 252", "CS 307"]
        assert_prerequisites_first(order, courses)

    def test_two_cycle_terminates(self):
        courses = graph({"A": ["B"], "B": ["A"]})
        order = sort_courses_by_prerequisites(courses)

        assert sorted(order) == ["A", "B"]
        assert order == ["B", "A"]

    def test_self_reference(self):
        courses = graph({"A": ["A"], "B": ["A"]})
        assert sort_courses_by_prerequisites(courses) == ["A", "B"]

    def test_longer_cycle_with_tail(self):
        courses = graph({"A": ["B"], "B": ["C"], "C": ["A", "D"], "D": []})
        order = sort_courses_by_prerequisites(courses)

        assert sorted(order) == ["A", "B", "C", "D"]
        assert order.index("D") < order.index("C")

    def test_missing_prerequisite_is_a_leaf(self):
        courses = graph({"CS 251": ["CS 182", "MA 261"], "CS 182": []})
        order = sort_courses_by_prerequisites(courses)

        assert order == ["CS 182", "MA 261", "CS 251"]
        assert order.count("MA 261") == 1

    def test_missing_prerequisite_shared_is_emitted_once(self):
        courses = graph({"A": ["X"], "B": ["X"]})
        assert sort_courses_by_prerequisites(courses) == ["X", "A", "B"]

    def test_duplicate_ids_first_definition_wins(self):
        courses = [
            CourseNode(id="A", prerequisites=["B"]),
            CourseNode(id="B"),
            CourseNode(id="A", prerequisites=["C"]),
        ]
        assert sort_courses_by_prerequisites(courses) == ["B", "A"]

    def test_every_course_once(self):
        courses = graph({
            "A": ["B", "C"], "B": ["C", "A"], "C": ["C"], "D": ["B"], "E": [],
        })
        order = sort_courses_by_prerequisites(courses)

        assert sorted(order) == ["A", "B", "C", "D", "E"]
        assert len(order) == len(set(order))

    def test_does_not_mutate_input(self):
        courses = graph({"A": ["B"], "B": ["A"]})
        before = [course.model_copy(deep=True) for course in courses]

        sort_courses_by_prerequisites(courses)

        assert courses == before

    def test_idempotent(self):
        courses = graph({"A": ["B", "Z"], "B": ["C"], "C": ["A"], "D": []})
        assert sort_courses_by_prerequisites(courses) == sort_courses_by_prerequisites(courses)

    def test_resorting_in_output_order_is_stable(self):
        courses = graph({
            "CS 307": ["CS 251", "CS 252"],
            "CS 251": ["CS 180", "MA 261"],
            "CS 252": ["CS 250"],
            "CS 250": ["CS 180"],
            "CS 180": [],
            "MA 261": [],
        })
        order = sort_courses_by_prerequisites(courses)
        by_id = {course.id: course for course in courses}

        resorted = sort_courses_by_prerequisites([by_id[course_id] for course_id in order])

        assert resorted == order

    def test_long_chain_does_not_overflow(self):
        size = 5000
        courses = [CourseNode(id=str(i), prerequisites=[str(i + 1)]) for i in range(size)]
        courses.append(CourseNode(id=str(size)))

        order = sort_courses_by_prerequisites(courses)

        assert order == [str(i) for i in range(size, -1, -1)]


class TestExtractCourseCode:

    @pytest.mark.parametrize("text,expected", [
        ("CS 180", "CS 180"),
        ("CS180 Problem Solving", "CS 180"),
        ("MATH 261 - Multivariate Calculus", "MATH 261"),
        ("ECE  2001", "ECE 2001"),
        ("Intro to Programming", "Intro to Programming"),
        ("cs 180", "cs 180"),
    ])
    def test_extract(self, text, expected):
        assert extract_course_code(text) == expected

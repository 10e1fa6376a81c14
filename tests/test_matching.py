from __future__ import annotations

import pytest

from curriculum_audit.matching import (
    MalformedCourseNumber,
    course_number_key,
    course_number_matches,
    matches,
    normalize_course_number,
)
from curriculum_audit.models import Course, CoursePattern


def test_exact_match() -> None:
    assert matches(CoursePattern("CSCI", "2300"), Course("CSCI", "2300", 4)) is True


def test_department_must_be_equal() -> None:
    assert matches(CoursePattern("MATH", "2300"), Course("CSCI", "2300", 4)) is False


def test_digit_mismatch() -> None:
    assert matches(CoursePattern("CSCI", "2300"), Course("CSCI", "2310", 4)) is False


def test_wildcard_in_pattern() -> None:
    pattern = CoursePattern("CSCI", "4xxx")
    assert pattern.matches(Course("CSCI", "4380", 4)) is True
    assert pattern.matches(Course("CSCI", "2300", 4)) is False


def test_wildcard_in_course_number() -> None:
    transfer = Course("CSCI", "4xxx", 4)
    assert matches(CoursePattern("CSCI", "4380"), transfer) is True
    assert matches(CoursePattern("CSCI", "43x0"), transfer) is True
    assert matches(CoursePattern("CSCI", "2300"), transfer) is False


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ("4xxx", "4380"),
        ("4xx0", "43x1"),
        ("xxxx", "1234"),
        ("2x00", "2100"),
        ("1x3x", "2x3x"),
        ("12x4", "1294"),
    ],
)
def test_wildcard_placement_is_symmetric(left: str, right: str) -> None:
    forward = matches(CoursePattern("PHIL", left), Course("PHIL", right, 4))
    backward = matches(CoursePattern("PHIL", right), Course("PHIL", left, 4))
    assert forward == backward
    expected = all(a == b or "x" in (a, b) for a, b in zip(left, right))
    assert forward == expected


def test_upper_case_wildcard_and_department_are_canonicalized() -> None:
    course = Course(" csci ", "4XXX", 4)
    assert course.department == "CSCI"
    assert course.number == "4xxx"
    assert course.code == "CSCI 4xxx"
    assert CoursePattern("csci", "2XX0").number == "2xx0"


@pytest.mark.parametrize("number", ["123", "12345", "12a4", "", "4-00"])
def test_malformed_course_numbers_fail_fast(number: str) -> None:
    with pytest.raises(MalformedCourseNumber):
        Course("CSCI", number, 4)
    with pytest.raises(MalformedCourseNumber):
        CoursePattern("CSCI", number)


def test_matcher_rejects_width_mismatch() -> None:
    with pytest.raises(MalformedCourseNumber):
        course_number_matches("4xxx", "430")


def test_malformed_course_number_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        normalize_course_number("99")


def test_negative_credits_rejected() -> None:
    with pytest.raises(ValueError):
        Course("CSCI", "2300", -1)


def test_course_number_key() -> None:
    assert course_number_key("3020") == 3020
    assert course_number_key("4xxx") == 4000
    assert course_number_key("2x10") == 2000
    assert course_number_key("xxxx") == 0


def test_courses_compare_by_identity() -> None:
    first = Course("PHIL", "2110", 4)
    retake = Course("PHIL", "2110", 4)
    assert first != retake
    assert first in [first]
    assert retake not in [first]

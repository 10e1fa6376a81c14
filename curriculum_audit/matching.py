"""
Course pattern matching.

A requirement names the courses it accepts with a department code and a
fixed-width course-number mask, e.g. ``CSCI 4xxx`` or ``MATH 2010``. A
wildcard in either the mask or the course's own number matches any digit at
that position, so a transfer credit recorded as ``CSCI 4xxx`` satisfies a
requirement for ``CSCI 4xxx`` and also one for ``CSCI 4xx0``.

This module has no dependencies on the rest of the package.
"""

from .config import COURSE_NUMBER_WIDTH, WILDCARD


class MalformedCourseNumber(ValueError):
    """Raised when a course number is not a canonical fixed-width code."""

    def __init__(self, number, width: int = COURSE_NUMBER_WIDTH):
        self.number = number
        self.width = width
        super().__init__(
            f"Malformed course number {number!r}: expected {width} digits or '{WILDCARD}'"
        )


def normalize_course_number(number) -> str:
    """
    Validate a course number and return its canonical form.

    Surrounding whitespace is stripped and an upper-case wildcard is lowered.

    Raises:
        MalformedCourseNumber: if the number has the wrong width or contains
            anything other than digits and wildcards
    """
    text = str(number).strip().lower()
    if len(text) != COURSE_NUMBER_WIDTH:
        raise MalformedCourseNumber(number)
    for ch in text:
        if ch != WILDCARD and not ch.isdigit():
            raise MalformedCourseNumber(number)
    return text


def course_number_matches(mask: str, number: str) -> bool:
    """
    Compare a course-number mask against a course number position by position.

    Raises:
        MalformedCourseNumber: if the two numbers differ in width
    """
    if len(mask) != len(number):
        raise MalformedCourseNumber(number if len(number) != COURSE_NUMBER_WIDTH else mask)
    for expected, actual in zip(mask, number):
        if expected == WILDCARD or actual == WILDCARD:
            continue
        if expected != actual:
            return False
    return True


def matches(pattern, course) -> bool:
    """Check if a course is accepted by a course pattern."""
    if pattern.department != course.department:
        return False
    return course_number_matches(pattern.number, course.number)


def course_number_key(number: str) -> int:
    """
    Numeric ranking key for a course number.

    Literal numbers rank by their value. A number holding a wildcard is
    generic ("4xxx") and ranks as its leading digit times 1000, which puts it
    alongside the literal courses of the same level.
    """
    if WILDCARD in number:
        lead = number[0]
        return int(lead) * 1000 if lead.isdigit() else 0
    return int(number)

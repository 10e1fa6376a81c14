"""
Course data models.

Contains the Course dataclass that represents one completed course on a
student's record, and the CoursePattern used by requirements to describe
which courses they accept.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import UNASSIGNED_SET_NAME
from ..matching import matches, normalize_course_number


@dataclass(eq=False)
class Course:
    """
    A single completed course from the student's record.

    Courses compare by identity: a student who retakes "PHIL 2110" has two
    distinct Course objects, and each can be placed in a different
    requirement set.

    Attributes:
        department: Department code (e.g., "CSCI")
        number: Fixed-width course number (e.g., "2300", or "4xxx" for
            generic transfer credit)
        credits: Credits earned
        term: Academic term (e.g., "Fall 2013")
        grade: Letter grade as recorded
        pass_no_credit: True when taken pass/no-credit
        communication_intensive: True for communication-intensive sections
        requirement_set_name: Name of the requirement set this course has
            been placed in; None until autopopulation or a manual move
        title: Human-readable course title
    """
    department: str
    number: str
    credits: float
    term: str = ""
    grade: Optional[str] = None
    pass_no_credit: bool = False
    communication_intensive: bool = False
    requirement_set_name: Optional[str] = None
    title: str = ""

    def __post_init__(self):
        self.department = self.department.strip().upper()
        self.number = normalize_course_number(self.number)
        if self.credits < 0:
            raise ValueError(f"Negative credits for {self.code}: {self.credits}")

    @property
    def code(self) -> str:
        """Display code, e.g. "CSCI 2300"."""
        return f"{self.department} {self.number}"

    @property
    def is_assigned(self) -> bool:
        """True once placed in a real requirement set (not the catch-all)."""
        return bool(self.requirement_set_name) and self.requirement_set_name != UNASSIGNED_SET_NAME


@dataclass(frozen=True)
class CoursePattern:
    """
    Department code plus a course-number mask, e.g. CSCI 4xxx.

    Defined by curriculum data and never mutated.
    """
    department: str
    number: str

    def __post_init__(self):
        object.__setattr__(self, "department", self.department.strip().upper())
        object.__setattr__(self, "number", normalize_course_number(self.number))

    def matches(self, course: Course) -> bool:
        return matches(self, course)

    def __str__(self):
        return f"{self.department} {self.number}"

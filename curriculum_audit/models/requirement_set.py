"""
Requirement set and curriculum data models.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import RESERVED_SET_NAMES


@dataclass
class RequirementSet:
    """
    A named section of a degree curriculum (e.g., "Computer Science Core").

    Set-level rules are checked before the requirement allocation:
    - depth_required: needs a 4xxx course in a department with a 2xxx course
    - max_pass_no_credit_credits: cap on pass/no-credit credits
    - credits_needed: minimum graded (non pass/no-credit) credits
    - set_requirements: evaluated over the whole course list, typically
      exclusions ("no MATH 1xxx courses count here")

    applied_courses is the live list of courses placed in this set during
    the current audit run.
    """
    name: str
    requirements: list = field(default_factory=list)
    set_requirements: list = field(default_factory=list)
    applied_courses: list = field(default_factory=list)
    depth_required: bool = False
    credits_needed: float = 0
    max_pass_no_credit_credits: float = 0
    description: str = ""

    @property
    def is_reserved(self) -> bool:
        """True for the catch-all and free-elective buckets."""
        return self.name in RESERVED_SET_NAMES

    def holds(self, course) -> bool:
        """Identity check against the applied-course list."""
        return any(applied is course for applied in self.applied_courses)


@dataclass
class Curriculum:
    """
    Ordered requirement sets for one student's declared program.

    Order is autopopulation priority: earlier sets get first pick of the
    student's courses.
    """
    name: str
    requirement_sets: list = field(default_factory=list)
    communication_intensive_needed: int = 0

    def __iter__(self):
        return iter(self.requirement_sets)

    def __len__(self):
        return len(self.requirement_sets)

    def find(self, name: str) -> Optional[RequirementSet]:
        """Look up a requirement set by name; None if the program has none."""
        for requirement_set in self.requirement_sets:
            if requirement_set.name == name:
                return requirement_set
        return None

    def set_holding(self, course) -> Optional[RequirementSet]:
        """The requirement set whose applied list contains this course, if any."""
        for requirement_set in self.requirement_sets:
            if requirement_set.holds(course):
                return requirement_set
        return None

"""
Requirement data models.

A Requirement is the immutable definition of one rule inside a requirement
set. Its fulfillment state lives in a separate RequirementProgress object
that is built fresh for every evaluation, so repeated evaluations of the
same set can never drift apart.
"""

from dataclasses import dataclass, field
from typing import Iterable

from .course import Course


@dataclass(frozen=True, eq=False)
class Requirement:
    """
    One named rule inside a requirement set.

    SATISFACTION RULE:
    ------------------
    A normal requirement is satisfied once the courses applied to it number
    at least ``courses_needed`` AND their credits add up to at least
    ``credits_needed``:

        courses_needed=1, credits_needed=0   "any one CSCI 4xxx course"
        courses_needed=0, credits_needed=8   "8 credits of MATH 4xxx"
        courses_needed=2, credits_needed=8   "two courses totalling 8 credits"

    An exclusion requirement inverts this: a matching course forbids rather
    than permits counting, so it is satisfied only while nothing has been
    applied to it.
    """
    name: str
    patterns: tuple
    exclusion: bool = False
    courses_needed: int = 1
    credits_needed: float = 0
    description: str = ""

    def match(self, course: Course) -> bool:
        """Check if the course is covered by any of this requirement's patterns."""
        return any(pattern.matches(course) for pattern in self.patterns)

    def start(self) -> "RequirementProgress":
        """Fresh, empty fulfillment state for this requirement."""
        return RequirementProgress(self)

    def evaluate(self, courses: Iterable[Course]) -> "RequirementProgress":
        """Apply every matching course and return the resulting state."""
        progress = self.start()
        for course in courses:
            if self.match(course):
                progress.apply(course)
        return progress


@dataclass
class RequirementProgress:
    """Fulfillment state of one requirement during a single evaluation."""
    requirement: Requirement
    courses: list = field(default_factory=list)

    @property
    def credits(self) -> float:
        return sum(c.credits for c in self.courses)

    @property
    def is_fulfilled(self) -> bool:
        if self.requirement.exclusion:
            return not self.courses
        return (len(self.courses) >= self.requirement.courses_needed
                and self.credits >= self.requirement.credits_needed)

    def apply(self, course: Course) -> bool:
        """
        Count one course toward this requirement.

        Returns:
            True if the requirement is satisfied after applying the course
        """
        self.courses.append(course)
        return self.is_fulfilled

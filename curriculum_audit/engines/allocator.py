"""
Requirement Allocation Engine.

This module decides which of a requirement set's requirements each course is
credited toward when several requirements compete for the same courses.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..models import Course, Requirement

logger = logging.getLogger(__name__)


@dataclass
class Allocation:
    """
    Outcome of one allocation pass.

    progress holds one RequirementProgress per requirement, in the order the
    requirements were given. assignments maps each credited course to the
    requirement it was used for; a course appears at most once.
    """
    progress: list = field(default_factory=list)
    assignments: dict = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """True when every requirement ended satisfied."""
        return all(p.is_fulfilled for p in self.progress)

    def requirement_for(self, course: Course) -> Optional[Requirement]:
        return self.assignments.get(course)

    def progress_for(self, requirement: Requirement):
        for item in self.progress:
            if item.requirement is requirement:
                return item
        return None


@dataclass
class _Candidates:
    """Working entry: a requirement's state plus the courses it could still take."""
    progress: object
    courses: list


class RequirementAllocator:
    """
    Assigns courses to requirements, most constrained first.

    ALGORITHM:
    ----------
    1. For every requirement, list the courses it matches.
    2. Pick the "weakest link": the requirement with the fewest candidates
       left (first one wins a tie).
    3. From its candidates, pick the "most selective" course: the one that
       the fewest remaining requirements could use (first one wins a tie).
    4. Take that course out of every candidate list and apply it to the
       weakest link. A requirement that is now satisfied drops out.
    5. Repeat until no requirement has candidates left.

    This is a greedy heuristic, not an exact bipartite matching. Scarce
    courses go to the requirements that need them most, which gets the
    common cases right in O(requirements x courses) per step. Ties always
    break by input order, so the same input gives the same assignment.

    Exclusion requirements never take courses away from the others. They
    see every course in the list, and end up unsatisfied if any matches.
    """

    def allocate(self, requirements: list, courses: list) -> Allocation:
        """
        Allocate courses across requirements.

        Args:
            requirements: Requirement definitions of one requirement set
            courses: Candidate courses, in priority order

        Returns:
            Allocation with fresh progress for every requirement
        """
        allocation = Allocation(progress=[r.start() for r in requirements])

        working = []
        for progress in allocation.progress:
            requirement = progress.requirement
            if requirement.exclusion:
                for course in courses:
                    if requirement.match(course):
                        progress.apply(course)
                continue
            if progress.is_fulfilled:
                continue
            candidates = [c for c in courses if requirement.match(c)]
            working.append(_Candidates(progress, candidates))

        while True:
            active = [entry for entry in working if entry.courses]
            if not active:
                break

            weakest = min(active, key=lambda entry: len(entry.courses))
            course = min(weakest.courses, key=lambda c: self._demand(c, working))

            for entry in working:
                if course in entry.courses:
                    entry.courses.remove(course)

            allocation.assignments[course] = weakest.progress.requirement
            logger.debug("Allocated %s to %r", course.code, weakest.progress.requirement.name)

            if weakest.progress.apply(course):
                working.remove(weakest)

        return allocation

    @staticmethod
    def _demand(course: Course, working: list) -> int:
        """How many requirements still list this course as a candidate."""
        return sum(1 for entry in working if course in entry.courses)

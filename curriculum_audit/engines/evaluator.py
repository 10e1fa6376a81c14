"""
Requirement Set Evaluation Engine.

This module decides whether a requirement set is fulfilled by a list of
courses, and whether one more course may be placed in a set.
"""

import logging
from typing import Optional

from ..config import ADVANCED_TIER, INTRODUCTORY_TIER
from ..models import (
    Course,
    RequirementSet,
    RequirementAuditResult,
    RequirementSetAuditResult,
)
from .allocator import RequirementAllocator

logger = logging.getLogger(__name__)


def graded_credits(courses: list) -> float:
    """Credits from courses that were not taken pass/no-credit."""
    return sum(c.credits for c in courses if not c.pass_no_credit)


def pass_no_credit_credits(courses: list) -> float:
    return sum(c.credits for c in courses if c.pass_no_credit)


def meets_depth(courses: list) -> bool:
    """
    Check the depth rule: a 4xxx course in a department that also has a
    2xxx course in the same list.
    """
    intro_departments = {c.department for c in courses if c.number.startswith(INTRODUCTORY_TIER)}
    return any(
        c.department in intro_departments and c.number.startswith(ADVANCED_TIER)
        for c in courses
    )


class RequirementSetEvaluator:
    """
    Evaluates requirement sets.

    EVALUATION ORDER:
    -----------------
    fulfills() checks the rules below in order and stops at the first failure:

    1. Depth rule (only if the set has one)
    2. Pass/no-credit credits must not exceed the set's cap
    3. Graded credits must reach the set's minimum
    4. Every set-level requirement must hold over the whole course list
    5. The allocator must satisfy every requirement of the set

    Nothing is cached between calls. Each evaluation allocates from scratch,
    so asking the same question twice gives the same answer.
    """

    def __init__(self, allocator: Optional[RequirementAllocator] = None):
        self.allocator = allocator or RequirementAllocator()

    def fulfills(self, requirement_set: RequirementSet, courses: Optional[list]) -> bool:
        """Check whether the given courses fulfill the requirement set."""
        if courses is None:
            return False
        if self._rule_failure(requirement_set, courses) is not None:
            return False
        return self.allocator.allocate(requirement_set.requirements, courses).is_complete

    def is_fulfilled(self, requirement_set: RequirementSet) -> bool:
        """Check the set against its own applied courses."""
        return self.fulfills(requirement_set, requirement_set.applied_courses)

    def can_apply_course(self, requirement_set: RequirementSet, course: Course) -> bool:
        """
        Check whether a course may be placed in this set.

        The reserved buckets accept anything. Otherwise the course must not
        match any exclusion requirement, and must match at least one normal
        requirement that the set's current courses leave unsatisfied.
        """
        if requirement_set.is_reserved:
            return True

        for requirement in requirement_set.set_requirements:
            if requirement.exclusion and requirement.match(course):
                return False

        allocation = self.allocator.allocate(
            requirement_set.requirements, requirement_set.applied_courses
        )

        positive_match = False
        for progress in allocation.progress:
            if not progress.requirement.match(course):
                continue
            if progress.requirement.exclusion:
                return False
            positive_match = positive_match or not progress.is_fulfilled
        return positive_match

    def apply_course(self, requirement_set: RequirementSet, course: Course):
        """
        Place a course in the set.

        No checks are made here; call can_apply_course first.
        """
        requirement_set.applied_courses.append(course)

    def remove_course(self, requirement_set: RequirementSet, course: Course) -> bool:
        """Take a course out of the set. Returns False if it was not there."""
        for index, applied in enumerate(requirement_set.applied_courses):
            if applied is course:
                del requirement_set.applied_courses[index]
                return True
        return False

    def audit(self, requirement_set: RequirementSet) -> RequirementSetAuditResult:
        """
        Evaluate the set against its applied courses, with full detail.

        The requirement breakdown always comes from a fresh allocation, even
        when an earlier set-level rule already failed, so the report can show
        progress on every requirement.
        """
        courses = requirement_set.applied_courses
        allocation = self.allocator.allocate(requirement_set.requirements, courses)

        failure_reason = self._rule_failure(requirement_set, courses)
        if failure_reason is None and not allocation.is_complete:
            failure_reason = "requirements"

        requirement_results = [
            RequirementAuditResult(
                name=progress.requirement.name,
                exclusion=progress.requirement.exclusion,
                courses_needed=progress.requirement.courses_needed,
                credits_needed=progress.requirement.credits_needed,
                applied_courses=list(progress.courses),
                credits_applied=progress.credits,
                is_satisfied=progress.is_fulfilled,
            )
            for progress in allocation.progress
        ]

        return RequirementSetAuditResult(
            name=requirement_set.name,
            description=requirement_set.description,
            is_fulfilled=failure_reason is None,
            failure_reason=failure_reason,
            applied_courses=list(courses),
            graded_credits=graded_credits(courses),
            pass_no_credit_credits=pass_no_credit_credits(courses),
            credits_needed=requirement_set.credits_needed,
            requirements=requirement_results,
        )

    def _rule_failure(self, requirement_set: RequirementSet, courses: list) -> Optional[str]:
        """First failing set-level rule (steps 1-4), or None if all hold."""
        if requirement_set.depth_required and not meets_depth(courses):
            return "depth"

        if pass_no_credit_credits(courses) > requirement_set.max_pass_no_credit_credits:
            return "pass_no_credit_cap"

        if graded_credits(courses) < requirement_set.credits_needed:
            return "credits"

        for requirement in requirement_set.set_requirements:
            if not requirement.evaluate(courses).is_fulfilled:
                logger.debug("%s fails set requirement %r", requirement_set.name, requirement.name)
                return f"set_requirement:{requirement.name}"

        return None

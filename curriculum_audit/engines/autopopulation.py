"""
Autopopulation Engine.

This module places a student's courses into the requirement sets of their
curriculum without any manual input.
"""

import logging
from typing import Iterable, Optional

from ..config import (
    BROAD_DISTRIBUTION_SET_NAME,
    FREE_ELECTIVES_SET_NAME,
    HUMANITIES_DEPARTMENTS,
    SOCIAL_SCIENCE_DEPARTMENTS,
    UNASSIGNED_SET_NAME,
)
from ..matching import course_number_key
from ..models import Course, Curriculum, RequirementSet
from .evaluator import RequirementSetEvaluator

logger = logging.getLogger(__name__)


class CourseBucket:
    """
    Courses of one department group, ranked by course number.

    Courses are grouped under course_number_key(). pop_highest() serves the
    group with the highest key, and within a group the course that came
    first in the student's list.
    """

    def __init__(self, courses: Iterable[Course] = ()):
        self._groups = {}
        for course in courses:
            self.add(course)

    def add(self, course: Course):
        self._groups.setdefault(course_number_key(course.number), []).append(course)

    def pop_highest(self) -> Optional[Course]:
        """Remove and return the next course, or None when empty."""
        if not self._groups:
            return None
        key = max(self._groups)
        group = self._groups[key]
        course = group.pop(0)
        if not group:
            del self._groups[key]
        return course

    def __len__(self):
        return sum(len(group) for group in self._groups.values())

    def __bool__(self):
        return bool(self._groups)


class AutopopulationEngine:
    """
    Fills a curriculum's requirement sets from a student's course list.

    ═══════════════════════════════════════════════════════════════════════════
    FILL ORDER
    ═══════════════════════════════════════════════════════════════════════════

    1. NAMED SETS: every set in curriculum order, except the broad
       distribution set and the two reserved buckets. Each takes every
       unplaced course it will accept, in course-list order.

    2. BROAD DISTRIBUTION (HASS): alternates between the humanities and
       social science buckets, highest course number first, until the set
       is fulfilled or both buckets run dry.

    3. FREE ELECTIVES: every course still unplaced (or sitting in the
       catch-all) is offered to the free elective bucket.

    4. CATCH-ALL: anything left over goes to "Unapplied Courses".

    Free electives run after HASS so the free bucket cannot take a course HASS
    would have counted.

    Each placed course is labelled with the name of its set, and a course is
    never placed in more than one set. A course parked in the catch-all
    leaves it when any other set takes it.
    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, evaluator: Optional[RequirementSetEvaluator] = None,
                 broad_distribution_set_name: str = BROAD_DISTRIBUTION_SET_NAME,
                 humanities_departments: Iterable[str] = HUMANITIES_DEPARTMENTS,
                 social_science_departments: Iterable[str] = SOCIAL_SCIENCE_DEPARTMENTS):
        self.evaluator = evaluator or RequirementSetEvaluator()
        self.broad_distribution_set_name = broad_distribution_set_name
        self.humanities_departments = tuple(humanities_departments)
        self.social_science_departments = tuple(social_science_departments)

    def autopopulate(self, curriculum: Curriculum, courses: list):
        """
        Place every course of the list into the curriculum's sets.

        Mutates the sets' applied-course lists and each course's
        requirement_set_name in place.
        """
        catch_all = curriculum.find(UNASSIGNED_SET_NAME)
        placed = self.fill_named_sets(curriculum, courses)

        broad_set = curriculum.find(self.broad_distribution_set_name)
        if broad_set is not None:
            placed += self.fill_broad_distribution(broad_set, courses, catch_all)

        placed += self.fill_free_electives(curriculum, courses)

        if catch_all is not None:
            self.route_unassigned(catch_all, courses)

        logger.info(
            "Autopopulated %s: %d of %d courses placed",
            curriculum.name, len(placed), len(courses),
        )

    def fill_named_sets(self, curriculum: Curriculum, courses: list) -> list:
        """
        Single greedy pass over the structured sets.

        Returns:
            Courses placed during this pass
        """
        catch_all = curriculum.find(UNASSIGNED_SET_NAME)
        placed = []
        for requirement_set in curriculum:
            if requirement_set.is_reserved or requirement_set.name == self.broad_distribution_set_name:
                continue
            for course in courses:
                if course.is_assigned:
                    continue
                if self.evaluator.can_apply_course(requirement_set, course):
                    self._place(requirement_set, course, catch_all)
                    placed.append(course)
        return placed

    def fill_broad_distribution(self, requirement_set: RequirementSet, courses: list,
                                catch_all: Optional[RequirementSet] = None) -> list:
        """
        Alternating fill of the broad distribution set.

        Each round takes the highest-numbered course from the humanities
        bucket, then from the social science bucket. A course is placed only
        if the set accepts it at that moment, but it leaves its bucket either
        way and is not offered again. A placed course is taken out of
        catch_all when one is given.

        Returns:
            Courses placed in the set
        """
        humanities, social_science = self._buckets(courses)
        placed = []

        while not self.evaluator.is_fulfilled(requirement_set):
            for bucket in (humanities, social_science):
                course = bucket.pop_highest()
                if course is None:
                    continue
                if self.evaluator.can_apply_course(requirement_set, course):
                    self._place(requirement_set, course, catch_all)
                    placed.append(course)
                else:
                    logger.debug("%s rejected %s; discarded from bucket", requirement_set.name, course.code)

            if not humanities and not social_science:
                break

        return placed

    def fill_free_electives(self, curriculum: Curriculum, courses: list) -> list:
        """
        Offer every unplaced course to the free elective bucket.

        Courses parked in the catch-all count as unplaced and move over.
        """
        free_electives = curriculum.find(FREE_ELECTIVES_SET_NAME)
        if free_electives is None:
            return []

        catch_all = curriculum.find(UNASSIGNED_SET_NAME)
        placed = []
        for course in courses:
            if course.is_assigned:
                continue
            if self.evaluator.can_apply_course(free_electives, course):
                self._place(free_electives, course, catch_all)
                placed.append(course)
        return placed

    def route_unassigned(self, requirement_set: RequirementSet, courses: list) -> list:
        """Put every course no other set took into the catch-all."""
        routed = []
        for course in courses:
            if course.is_assigned or requirement_set.holds(course):
                continue
            self._place(requirement_set, course)
            routed.append(course)
        return routed

    def _buckets(self, courses: list) -> tuple:
        humanities = CourseBucket()
        social_science = CourseBucket()
        for course in courses:
            if course.is_assigned:
                continue
            if course.department in self.humanities_departments:
                humanities.add(course)
            elif course.department in self.social_science_departments:
                social_science.add(course)
        return humanities, social_science

    def _place(self, requirement_set: RequirementSet, course: Course,
               catch_all: Optional[RequirementSet] = None):
        if catch_all is not None and catch_all is not requirement_set:
            self.evaluator.remove_course(catch_all, course)
        self.evaluator.apply_course(requirement_set, course)
        course.requirement_set_name = requirement_set.name
        logger.debug("Placed %s in %s", course.code, requirement_set.name)

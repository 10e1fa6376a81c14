"""
Curriculum Auditor - Main Orchestrator.

This module contains the CurriculumAuditor class that connects the
algorithm layer to the presentation layer.
"""

import logging
from typing import Optional

from .data import DataLoader
from .engines import AutopopulationEngine, RequirementSetEvaluator
from .models import AuditReport, Course, Curriculum, RequirementSet
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class CurriculumAuditor:
    """
    Main interface for the curriculum audit system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Receives a curriculum and a student's courses
    2. Calls the engines to place courses and evaluate requirement sets
    3. Passes the resulting AuditReport to the presentation layer

    Every audit works on the objects it was handed. Load a fresh curriculum
    and course list per student (DataLoader does this) and audits never
    interfere with each other.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        auditor = CurriculumAuditor()

        # Full audit with terminal display
        report = auditor.run_audit("curriculum.json", "courses.json")

        # Or drive the engines directly (no display)
        auditor.autopopulate(curriculum, courses)
        report = auditor.evaluate_audit_report(curriculum, courses)

        # Interactive move between sets
        auditor.move_course(curriculum, course, "HASS")
    """

    def __init__(self, loader: Optional[DataLoader] = None,
                 evaluator: Optional[RequirementSetEvaluator] = None,
                 autopopulation_engine: Optional[AutopopulationEngine] = None):
        self.loader = loader or DataLoader()
        self.evaluator = evaluator or RequirementSetEvaluator()
        self.autopopulation_engine = autopopulation_engine or AutopopulationEngine(self.evaluator)
        self.display = TerminalDisplay()

    def run_audit(self, curriculum_path, courses_path, autopopulate: bool = True,
                  moves: Optional[list] = None) -> AuditReport:
        """
        Run a complete audit and display results.

        Args:
            curriculum_path: Path to the curriculum JSON document
            courses_path: Path to the student's course JSON document
            autopopulate: Place courses automatically before evaluating
            moves: Optional (course code, set name) pairs applied after
                autopopulation, in order

        Returns:
            The AuditReport that was displayed
        """
        curriculum = self.loader.load_curriculum(curriculum_path)
        courses = self.loader.load_courses(courses_path)

        self.display.print_student_info(self.loader.load_student(courses_path))

        if autopopulate:
            self.autopopulate(curriculum, courses)

        for code, set_name in moves or []:
            course = self.find_course(courses, code)
            if course is None:
                self.display.print_error(f"No course {code} on record")
                continue
            moved = self.move_course(curriculum, course, set_name)
            self.display.print_move_result(course, set_name, moved)

        report = self.evaluate_audit_report(curriculum, courses)
        self.display.print_audit_report(report)
        return report

    def autopopulate(self, curriculum: Curriculum, courses: list):
        """Place courses into the curriculum's requirement sets in place."""
        self.autopopulation_engine.autopopulate(curriculum, courses)

    def evaluate_audit_report(self, curriculum: Curriculum, courses: list) -> AuditReport:
        """
        Evaluate every requirement set against its applied courses.

        Nothing is mutated; calling this twice gives the same report.
        """
        set_results = [self.evaluator.audit(requirement_set) for requirement_set in curriculum]
        unapplied = [c for c in courses if curriculum.set_holding(c) is None]
        communication_intensive = sum(1 for c in courses if c.communication_intensive)

        report = AuditReport(
            curriculum_name=curriculum.name,
            sets=set_results,
            unapplied_courses=unapplied,
            communication_intensive_count=communication_intensive,
            communication_intensive_needed=curriculum.communication_intensive_needed,
        )
        logger.info(
            "Audit of %s: %d/%d sets fulfilled",
            curriculum.name, report.fulfilled_count, len(report.sets),
        )
        return report

    def can_apply_course(self, requirement_set: RequirementSet, course: Course) -> bool:
        return self.evaluator.can_apply_course(requirement_set, course)

    def apply_course(self, requirement_set: RequirementSet, course: Course):
        self.evaluator.apply_course(requirement_set, course)

    def move_course(self, curriculum: Curriculum, course: Course, set_name: str) -> bool:
        """
        Move a course into another requirement set.

        The course is taken out of whichever set holds it and offered to the
        target. If the target refuses, the course goes back where it was.

        Returns:
            True if the course now sits in the target set
        """
        target = curriculum.find(set_name)
        if target is None:
            return False
        if target.holds(course):
            return True

        source = curriculum.set_holding(course)
        position = None
        if source is not None:
            position = next(i for i, c in enumerate(source.applied_courses) if c is course)
            self.evaluator.remove_course(source, course)

        if self.evaluator.can_apply_course(target, course):
            self.evaluator.apply_course(target, course)
            course.requirement_set_name = target.name
            logger.info("Moved %s to %s", course.code, target.name)
            return True

        if source is not None:
            source.applied_courses.insert(position, course)
        return False

    @staticmethod
    def find_course(courses: list, code: str) -> Optional[Course]:
        """First course on record whose display code matches, e.g. "PHIL 2110"."""
        wanted = " ".join(code.upper().replace("-", " ").split())
        for course in courses:
            if course.code.upper() == wanted:
                return course
        return None

"""
Audit result data models.

Contains dataclasses for representing the results of an audit run. These
are plain data handed to the reporting layer; nothing here recomputes state.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RequirementAuditResult:
    """
    Result of allocating courses to a single requirement.

    Example for "Upper-level CSCI elective":
        name: "Upper-level CSCI elective"
        exclusion: False
        courses_needed: 2
        credits_needed: 0
        applied_courses: [CSCI 4380, CSCI 4430]
        credits_applied: 8
        is_satisfied: True
    """
    name: str
    exclusion: bool
    courses_needed: int
    credits_needed: float
    applied_courses: list      # Course objects credited toward this requirement
    credits_applied: float
    is_satisfied: bool


@dataclass
class RequirementSetAuditResult:
    """
    Result of evaluating one requirement set against its applied courses.

    failure_reason names the first rule that failed, in evaluation order:
    "depth", "pass_no_credit_cap", "credits", "set_requirement:<name>" or
    "requirements". It is None when the set is fulfilled.
    """
    name: str
    description: str
    is_fulfilled: bool
    failure_reason: Optional[str]
    applied_courses: list      # Course objects, each carrying its set label
    graded_credits: float
    pass_no_credit_credits: float
    credits_needed: float
    requirements: list = field(default_factory=list)  # RequirementAuditResult


@dataclass
class AuditReport:
    """
    Complete audit of one student's courses against one curriculum.
    """
    curriculum_name: str
    sets: list                       # RequirementSetAuditResult, curriculum order
    unapplied_courses: list          # Courses in no requirement set
    communication_intensive_count: int
    communication_intensive_needed: int = 0

    @property
    def fulfilled_count(self) -> int:
        return sum(1 for s in self.sets if s.is_fulfilled)

    @property
    def communication_intensive_satisfied(self) -> bool:
        return self.communication_intensive_count >= self.communication_intensive_needed

    @property
    def overall_satisfied(self) -> bool:
        return all(s.is_fulfilled for s in self.sets) and self.communication_intensive_satisfied

    def find(self, name: str) -> Optional[RequirementSetAuditResult]:
        for result in self.sets:
            if result.name == name:
                return result
        return None

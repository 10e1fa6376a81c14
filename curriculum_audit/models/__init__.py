"""
Data models for the curriculum audit system.

This package contains all dataclasses used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, CoursePattern
from .requirement import Requirement, RequirementProgress
from .requirement_set import RequirementSet, Curriculum
from .audit import RequirementAuditResult, RequirementSetAuditResult, AuditReport

__all__ = [
    # Course models
    "Course",
    "CoursePattern",
    # Requirement models
    "Requirement",
    "RequirementProgress",
    "RequirementSet",
    "Curriculum",
    # Audit results
    "RequirementAuditResult",
    "RequirementSetAuditResult",
    "AuditReport",
]

"""
Allocation, evaluation and autopopulation engines.

This package contains all the engines that perform the core business logic
of the audit system.
"""

from .allocator import Allocation, RequirementAllocator
from .evaluator import RequirementSetEvaluator
from .autopopulation import AutopopulationEngine, CourseBucket

__all__ = [
    "Allocation",
    "RequirementAllocator",
    "RequirementSetEvaluator",
    "AutopopulationEngine",
    "CourseBucket",
]

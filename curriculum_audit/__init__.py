"""
Curriculum Audit Package
========================

Checks a student's completed courses against a structured degree curriculum
and reports which requirement sets are fulfilled.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌──────────────────────┐  ┌────────────────────────┐  │
│  │  matching   │→ │ RequirementAllocator │→ │RequirementSetEvaluator │  │
│  │ (patterns)  │  │ (weakest link first) │  │ (set-level rules)      │  │
│  └─────────────┘  └──────────────────────┘  └────────────────────────┘  │
│                                                        │                │
│  ┌─────────────┐               ┌────────────────────────────────────┐  │
│  │ DataLoader  │               │       AutopopulationEngine         │  │
│  │   (I/O)     │               │ (named sets → HASS → free → rest)  │  │
│  └─────────────┘               └────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay - formats and prints an AuditReport                    │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     CurriculumAuditor                                    │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

curriculum_audit/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── matching.py          # Course-number format and pattern matching
├── auditor.py           # CurriculumAuditor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes
│   ├── course.py        # Course, CoursePattern
│   ├── requirement.py   # Requirement, RequirementProgress
│   ├── requirement_set.py # RequirementSet, Curriculum
│   └── audit.py         # RequirementAuditResult, RequirementSetAuditResult, AuditReport
│
├── data/
│   └── loader.py        # DataLoader
│
├── engines/
│   ├── allocator.py     # RequirementAllocator, Allocation
│   ├── evaluator.py     # RequirementSetEvaluator
│   └── autopopulation.py # AutopopulationEngine, CourseBucket
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from curriculum_audit import CurriculumAuditor, DataLoader

    loader = DataLoader()
    curriculum = loader.load_curriculum("data/sample_curriculum.json")
    courses = loader.load_courses("data/sample_courses.json")

    auditor = CurriculumAuditor(loader)
    auditor.autopopulate(curriculum, courses)
    report = auditor.evaluate_audit_report(curriculum, courses)

Running from command line:

    python -m curriculum_audit

"""

# Version
__version__ = "1.0.0"

# Main exports
from .auditor import CurriculumAuditor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    CoursePattern,
    Requirement,
    RequirementProgress,
    RequirementSet,
    Curriculum,
    RequirementAuditResult,
    RequirementSetAuditResult,
    AuditReport,
)

# Engine exports (for advanced use)
from .engines import (
    Allocation,
    RequirementAllocator,
    RequirementSetEvaluator,
    AutopopulationEngine,
    CourseBucket,
)

# Matching exports
from .matching import MalformedCourseNumber, matches

# Data exports
from .data import DataLoader

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    UNASSIGNED_SET_NAME,
    FREE_ELECTIVES_SET_NAME,
    BROAD_DISTRIBUTION_SET_NAME,
    HUMANITIES_DEPARTMENTS,
    SOCIAL_SCIENCE_DEPARTMENTS,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CurriculumAuditor",
    "main",
    # Models
    "Course",
    "CoursePattern",
    "Requirement",
    "RequirementProgress",
    "RequirementSet",
    "Curriculum",
    "RequirementAuditResult",
    "RequirementSetAuditResult",
    "AuditReport",
    # Engines
    "Allocation",
    "RequirementAllocator",
    "RequirementSetEvaluator",
    "AutopopulationEngine",
    "CourseBucket",
    # Matching
    "MalformedCourseNumber",
    "matches",
    # Data
    "DataLoader",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "UNASSIGNED_SET_NAME",
    "FREE_ELECTIVES_SET_NAME",
    "BROAD_DISTRIBUTION_SET_NAME",
    "HUMANITIES_DEPARTMENTS",
    "SOCIAL_SCIENCE_DEPARTMENTS",
]

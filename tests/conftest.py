from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from curriculum_audit.models import Course, CoursePattern, Requirement, RequirementSet  # noqa: E402


def _course(code: str, credits: float = 4, **kwargs) -> Course:
    department, number = code.split()
    return Course(department=department, number=number, credits=credits, **kwargs)


def _requirement(name: str, *codes: str, **kwargs) -> Requirement:
    patterns = tuple(CoursePattern(*code.split()) for code in codes)
    return Requirement(name=name, patterns=patterns, **kwargs)


@pytest.fixture
def course():
    """Factory: course("CSCI 2300", credits=4, pass_no_credit=True)."""
    return _course


@pytest.fixture
def requirement():
    """Factory: requirement("Core", "CSCI 2xxx", "CSCI 4xxx", courses_needed=2)."""
    return _requirement


@pytest.fixture
def requirement_set():
    """Factory for RequirementSet with keyword overrides."""

    def _make(name: str = "Core", *requirements: Requirement, **kwargs) -> RequirementSet:
        return RequirementSet(name=name, requirements=list(requirements), **kwargs)

    return _make

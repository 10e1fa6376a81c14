"""
Data loading and caching.

This module reads curriculum definitions and student course lists from JSON
documents and builds model objects from them.
"""

import json
import logging
import re
from pathlib import Path

from ..config import PASS_NO_CREDIT_GRADES
from ..models import Course, CoursePattern, Curriculum, Requirement, RequirementSet

logger = logging.getLogger(__name__)

# "CSCI 4xxx", "CSCI-4xxx" or "CSCI4xxx"
CODE_RX = re.compile(r"^\s*([A-Za-z]+)[\s\-]*(\S+)\s*$")


def parse_code(code: str) -> tuple:
    """
    Split a course code into department and number.

    Raises:
        ValueError: if the code has no department prefix
    """
    match = CODE_RX.match(code)
    if not match:
        raise ValueError(f"Unrecognized course code: {code!r}")
    return match.group(1), match.group(2)


class DataLoader:
    """
    Loads curriculum and course documents.

    WHY CACHING: The same curriculum document is typically audited against
    many students. Raw JSON is cached per path so the file is read once.

    WHY FRESH OBJECTS: Requirement sets carry live applied-course lists and
    courses carry set labels, both mutated during an audit. Every call to
    load_curriculum() / load_courses() builds a brand new object graph from
    the cached JSON, so two audits never share mutable state.

    DOCUMENT SHAPES:
    - Curriculum: {"name", "communication_intensive_needed",
      "requirement_sets": [{"name", "description", "credits_needed",
      "max_pass_no_credit_credits", "depth_required",
      "requirements": [...], "set_requirements": [...]}]}
    - Requirement: {"name", "patterns": ["CSCI 4xxx", ...], "exclusion",
      "courses_needed", "credits_needed", "description"}
    - Courses: {"student": {...}, "courses": [{"department", "number",
      "credits", "term", "grade", "pass_no_credit",
      "communication_intensive", "title"}]}; "code": "CSCI 2300" may stand
      in for department + number.

    Usage:
        loader = DataLoader()
        curriculum = loader.load_curriculum("data/sample_curriculum.json")
        courses = loader.load_courses("data/sample_courses.json")
    """

    def __init__(self):
        self._documents = {}  # Keyed by resolved path

    def load_document(self, path) -> dict:
        """Read and cache a JSON document."""
        filepath = Path(path).resolve()
        if filepath not in self._documents:
            if not filepath.exists():
                raise FileNotFoundError(f"No document found at: {filepath}")
            with open(filepath, "r") as f:
                self._documents[filepath] = json.load(f)
            logger.debug("Loaded %s", filepath)
        return self._documents[filepath]

    def load_curriculum(self, path) -> Curriculum:
        return self.curriculum_from_dict(self.load_document(path))

    def load_courses(self, path) -> list:
        return self.courses_from_dict(self.load_document(path))

    def load_student(self, path) -> dict:
        """Student identification block of a course document."""
        return self.load_document(path).get("student", {})

    def curriculum_from_dict(self, data: dict) -> Curriculum:
        requirement_sets = [self.requirement_set_from_dict(s) for s in data.get("requirement_sets", [])]
        return Curriculum(
            name=data.get("name", ""),
            requirement_sets=requirement_sets,
            communication_intensive_needed=data.get("communication_intensive_needed", 0),
        )

    def requirement_set_from_dict(self, data: dict) -> RequirementSet:
        return RequirementSet(
            name=data["name"],
            description=data.get("description", ""),
            requirements=[self.requirement_from_dict(r) for r in data.get("requirements", [])],
            set_requirements=[self.requirement_from_dict(r) for r in data.get("set_requirements", [])],
            depth_required=data.get("depth_required", False),
            credits_needed=data.get("credits_needed", 0),
            max_pass_no_credit_credits=data.get("max_pass_no_credit_credits", 0),
        )

    def requirement_from_dict(self, data: dict) -> Requirement:
        patterns = tuple(self.pattern_from_value(p) for p in data["patterns"])
        return Requirement(
            name=data["name"],
            patterns=patterns,
            exclusion=data.get("exclusion", False),
            courses_needed=data.get("courses_needed", 1),
            credits_needed=data.get("credits_needed", 0),
            description=data.get("description", ""),
        )

    def pattern_from_value(self, value) -> CoursePattern:
        """Accepts "CSCI 4xxx" or {"department": "CSCI", "number": "4xxx"}."""
        if isinstance(value, str):
            department, number = parse_code(value)
        else:
            department, number = value["department"], value["number"]
        return CoursePattern(department, number)

    def courses_from_dict(self, data: dict) -> list:
        return [self.course_from_dict(c) for c in data.get("courses", [])]

    def course_from_dict(self, data: dict) -> Course:
        if "code" in data:
            department, number = parse_code(data["code"])
        else:
            department, number = data["department"], data["number"]

        grade = data.get("grade")
        pass_no_credit = data.get("pass_no_credit")
        if pass_no_credit is None:
            pass_no_credit = grade in PASS_NO_CREDIT_GRADES

        return Course(
            department=department,
            number=number,
            credits=data.get("credits", 0),
            term=data.get("term", ""),
            grade=grade,
            pass_no_credit=pass_no_credit,
            communication_intensive=data.get("communication_intensive", False),
            title=data.get("title", ""),
        )

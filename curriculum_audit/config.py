"""
Configuration constants for the curriculum audit system.

This module contains all configuration values and constants used throughout
the audit engine. Centralizing these makes it easy to adjust behavior when
the registrar changes naming conventions or department groupings.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
SAMPLE_CURRICULUM_PATH = DATA_DIR / "sample_curriculum.json"
SAMPLE_COURSES_PATH = DATA_DIR / "sample_courses.json"


# =============================================================================
# COURSE NUMBER FORMAT
# =============================================================================
# Course numbers are fixed-width. Any position of a requirement pattern may be
# a wildcard, and synthetic course numbers (transfer credit such as "4xxx")
# may carry wildcards too. "X" is accepted on input and stored as "x".

COURSE_NUMBER_WIDTH = 4
WILDCARD = "x"


# =============================================================================
# RESERVED REQUIREMENT SETS
# =============================================================================

# Catch-all bucket: accepts anything, holds courses nothing else wanted
UNASSIGNED_SET_NAME = "Unapplied Courses"

# Residual bucket: accepts anything not already placed, always filled last
FREE_ELECTIVES_SET_NAME = "Free Electives"

RESERVED_SET_NAMES = frozenset({UNASSIGNED_SET_NAME, FREE_ELECTIVES_SET_NAME})


# =============================================================================
# BROAD DISTRIBUTION (HASS)
# =============================================================================
# The humanities, arts and social sciences set is filled by alternating
# between the two buckets below, highest course number first.

BROAD_DISTRIBUTION_SET_NAME = "HASS"

HUMANITIES_DEPARTMENTS = (
    "IHSS",
    "ARTS",
    "LANG",
    "LITR",
    "COMM",
    "WRIT",
    "STSH",
    "PHIL",
)

# IHSS appears in both lists; humanities is checked first.
SOCIAL_SCIENCE_DEPARTMENTS = (
    "COGS",
    "STSS",
    "ECON",
    "PSYC",
    "IHSS",
)


# =============================================================================
# DEPTH RULE
# =============================================================================
# A depth requirement needs an advanced-tier course in a department where the
# student also took an introductory-tier course.

INTRODUCTORY_TIER = "2"
ADVANCED_TIER = "4"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Used by the loader when a course document has no explicit pass_no_credit flag
PASS_NO_CREDIT_GRADES = {"P", "NC"}


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

"""
Course catalog and the ordinal scales used by the recommendation engine.

The catalog order is significant: every score vector produced by the engine
is a 5-tuple whose index ``i`` refers to ``COURSE_CATALOG[i]`` in every stage.

Three small enums describe the ordinal inputs:
  - ``Course``        — the five recommendable courses, in catalog order.
  - ``Difficulty``    — preferred course difficulty (1-3).
  - ``LearningStyle`` — dominant learning modality (1-4).

Usage example::

    from course_recommender.taxonomy.course_catalog import Course, course_index

    course_index(Course.WEB_DEVELOPMENT)   # -> 1

This module has NO imports from any other ``course_recommender`` package.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from types import MappingProxyType


class Course(StrEnum):
    """Recommendable course; the value is the display name used on the wire."""

    GAMING = "Gaming"
    WEB_DEVELOPMENT = "Web Development"
    FUZZY_LOGIC = "Fuzzy Logic"
    DATABASE_DESIGN = "Database Design"
    SOFTWARE_VALIDATION = "Software Validation & Verification"


class Difficulty(IntEnum):
    """Preferred course difficulty."""

    EASY = 1
    MODERATE = 2
    DIFFICULT = 3


class LearningStyle(IntEnum):
    """Dominant learning modality."""

    VISUAL = 1
    KINESTHETIC = 2
    READING_WRITING = 3
    AUDITORY = 4


# Catalog order == score-vector index order.  Do not reorder.
COURSE_CATALOG: tuple[Course, ...] = (
    Course.GAMING,
    Course.WEB_DEVELOPMENT,
    Course.FUZZY_LOGIC,
    Course.DATABASE_DESIGN,
    Course.SOFTWARE_VALIDATION,
)

N_COURSES = len(COURSE_CATALOG)

# Per-course ``probability_*`` key in the wire payload.
WIRE_SCORE_KEYS: MappingProxyType[Course, str] = MappingProxyType({
    Course.GAMING:              "probability_Gaming",
    Course.WEB_DEVELOPMENT:     "probability_WebDevelopment",
    Course.FUZZY_LOGIC:         "probability_FuzzyLogic",
    Course.DATABASE_DESIGN:     "probability_DatabaseDesign",
    Course.SOFTWARE_VALIDATION: "probability_SoftwareValidation_Verification",
})

# CGPA input scale (1-5) -> representative grade point for display.
_CGPA_DISPLAY: MappingProxyType[int, float] = MappingProxyType({
    5: 3.75,   # 3.5-4.0
    4: 3.25,   # 3.0-3.4
    3: 2.75,   # 2.5-2.9
    2: 2.25,   # 2.0-2.4
    1: 1.5,    # 1.0-1.9
})


def course_index(course: Course) -> int:
    """Return the score-vector index of ``course``."""
    return COURSE_CATALOG.index(course)


def cgpa_to_gpa(cgpa: float) -> float:
    """Convert a 1-5 CGPA band to a representative grade point for display.

    Values outside the five known bands are returned unchanged.  Never used
    for scoring.
    """
    if float(cgpa).is_integer():
        return _CGPA_DISPLAY.get(int(cgpa), cgpa)
    return cgpa

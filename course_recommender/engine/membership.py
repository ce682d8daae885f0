"""
Triangular membership functions and the named fuzzy sets of each input.

A fuzzy set is a ``(a, b, c)`` triangle: membership rises linearly from 0 at
``a`` to 1 at ``b`` and falls back to 0 at ``c``.  The outer test
(``x <= a or x >= c`` -> 0) is applied before the peak test, so shoulder sets
whose peak sits on an edge (``[1, 1, 3]``, ``[3, 5, 5]``) report 0 at that
edge.

Breakpoints are fixed design constants.  Changing any of them changes every
recommendation, so they live here as module-level tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

Triangle = tuple[float, float, float]
FuzzySets = Mapping[str, Triangle]

CGPA_SETS: FuzzySets = MappingProxyType({
    "low":    (1.0, 1.0, 3.0),
    "medium": (2.0, 3.0, 4.0),
    "high":   (3.0, 5.0, 5.0),
})

SUBJECT_SETS: FuzzySets = MappingProxyType({
    "low":    (0.0, 0.0, 2.0),
    "medium": (1.0, 2.5, 4.0),
    "high":   (3.0, 5.0, 5.0),
})

INTEREST_SETS: FuzzySets = MappingProxyType({
    "low":    (1.0, 1.0, 3.0),
    "medium": (2.0, 3.0, 4.0),
    "high":   (3.0, 5.0, 5.0),
})

DIFFICULTY_SETS: FuzzySets = MappingProxyType({
    "easy":      (0.5, 1.0, 1.5),
    "moderate":  (1.5, 2.0, 2.5),
    "difficult": (2.5, 3.0, 3.5),
})

LEARNING_STYLE_SETS: FuzzySets = MappingProxyType({
    "visual":          (0.5, 1.0, 1.5),
    "kinesthetic":     (1.5, 2.0, 2.5),
    "reading_writing": (2.5, 3.0, 3.5),
    "auditory":        (3.5, 4.0, 4.5),
})


def triangular_membership(x: float, a: float, b: float, c: float) -> float:
    """Degree of membership of ``x`` in the triangle ``(a, b, c)``.

    Returns:
        0.0 for ``x <= a`` or ``x >= c``; 1.0 at ``x == b``; linear in between.
    """
    if x <= a or x >= c:
        return 0.0
    if x == b:
        return 1.0
    if x < b:
        return (x - a) / (b - a)
    return (c - x) / (c - b)


def fuzzify(x: float, sets: FuzzySets) -> dict[str, float]:
    """Return ``{set_name: membership}`` for ``x`` over every set in ``sets``."""
    return {name: triangular_membership(x, *tri) for name, tri in sets.items()}


def cgpa_membership(cgpa: float) -> dict[str, float]:
    return fuzzify(cgpa, CGPA_SETS)


def subject_membership(grade: float) -> dict[str, float]:
    return fuzzify(grade, SUBJECT_SETS)


def interest_membership(level: float) -> dict[str, float]:
    return fuzzify(level, INTEREST_SETS)


def difficulty_membership(difficulty: float) -> dict[str, float]:
    return fuzzify(difficulty, DIFFICULTY_SETS)


def learning_style_membership(style: float) -> dict[str, float]:
    return fuzzify(style, LEARNING_STYLE_SETS)

"""
Course ranker: turns a final score vector into a ``RecommendationResult``.

Ranking rule: score descending; equal scores keep catalog order (lower
index first).  The top two entries become the primary and alternative
recommendations, and their scores double as confidence values.
"""

from __future__ import annotations

from collections.abc import Sequence

from course_recommender.models.recommendation import CourseScore, RecommendationResult
from course_recommender.taxonomy.course_catalog import COURSE_CATALOG, N_COURSES


def rank_courses(scores: Sequence[float]) -> tuple[CourseScore, ...]:
    """Attach course and index to each score and sort, best first.

    Args:
        scores: Final score vector, index-aligned with ``COURSE_CATALOG``.

    Returns:
        All courses as ``CourseScore`` in rank order.
    """
    if len(scores) != N_COURSES:
        raise ValueError(f"Score vector must have {N_COURSES} entries, got {len(scores)}.")

    entries = [
        CourseScore(course=course, score=score, index=idx)
        for idx, (course, score) in enumerate(zip(COURSE_CATALOG, scores))
    ]
    # Primary: score descending.  Secondary: catalog index ascending.
    return tuple(sorted(entries, key=lambda e: (-e.score, e.index)))


def build_result(scores: Sequence[float]) -> RecommendationResult:
    """Rank ``scores`` and assemble the full recommendation record."""
    ranked = rank_courses(scores)
    first, second = ranked[0], ranked[1]
    return RecommendationResult(
        primary=first.course,
        alternative=second.course,
        primary_confidence=first.confidence,
        alternative_confidence=second.confidence,
        scores=tuple(scores),
        ranked=ranked,
    )

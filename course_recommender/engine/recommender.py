"""
Recommendation entry point.

``recommend(record)`` runs the fixed six-stage pipeline:

    1. subject_scores()          — weighted subject grades
    2. interest_scores()         — weighted interest group means
    3. evaluate_fuzzy_rules()    — Mamdani rule bonus
    4. combine()                 — subject + interest + 0.3 * bonus
    5. adjust_by_preferences()   — difficulty, then learning-style multipliers
    6. apply_floor() + build_result()

Each call is a pure function of its input: no state is kept between calls,
so the engine can be shared between threads without locking.

``recommend_from_payload(payload)`` is the boundary helper for hosts that
receive untrusted form/JSON data; it coerces fields to their documented
defaults before scoring and therefore never fails on malformed values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from course_recommender.engine.ranker import build_result
from course_recommender.engine.rules import evaluate_fuzzy_rules
from course_recommender.engine.scorer import (
    adjust_by_preferences,
    apply_floor,
    combine,
    interest_scores,
    subject_scores,
)
from course_recommender.models.attributes import AttributeRecord
from course_recommender.models.recommendation import RecommendationResult

logger = logging.getLogger(__name__)


class RecommendationError(RuntimeError):
    """Scoring failed unexpectedly; no partial result is available."""


def recommend(record: AttributeRecord) -> RecommendationResult:
    """Score all five courses for ``record`` and rank them.

    Args:
        record: Student attributes (already coerced / defaulted).

    Returns:
        Complete ``RecommendationResult``.

    Raises:
        RecommendationError: If any stage raises.  The original exception is
            chained as ``__cause__``.
    """
    try:
        subject = subject_scores(record)
        logger.debug("Subject scores: %s", subject)

        interest = interest_scores(record)
        logger.debug("Interest scores: %s", interest)

        bonus = evaluate_fuzzy_rules(record)
        logger.debug("Fuzzy bonus: %s", bonus)

        combined = combine(subject, interest, bonus)
        logger.debug("Combined scores: %s", combined)

        adjusted = adjust_by_preferences(combined, record.difficulty, record.learning_style)
        logger.debug("Adjusted scores: %s", adjusted)

        result = build_result(apply_floor(adjusted))
    except Exception as exc:
        logger.exception("Recommendation failed")
        raise RecommendationError(f"Failed to compute recommendation: {exc}") from exc

    logger.info(
        "Recommended %s (%.3f), alternative %s (%.3f)",
        result.primary.value,
        result.primary_confidence,
        result.alternative.value,
        result.alternative_confidence,
    )
    return result


def recommend_from_payload(payload: Optional[Mapping[str, Any]]) -> RecommendationResult:
    """Coerce an untrusted mapping to an ``AttributeRecord`` and recommend."""
    record = AttributeRecord.from_payload(payload)
    logger.debug("Coerced input: %s", record.to_payload())
    return recommend(record)

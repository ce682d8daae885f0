"""
course_recommender — fuzzy-logic course recommendation engine.

Quick use::

    from course_recommender import AttributeRecord, recommend

    result = recommend(AttributeRecord(cgpa=4, programming=5, difficulty=1))
    result.primary, result.primary_confidence
"""

from course_recommender.engine.recommender import (
    RecommendationError,
    recommend,
    recommend_from_payload,
)
from course_recommender.models.attributes import AttributeRecord
from course_recommender.models.recommendation import RecommendationResult

__version__ = "1.0.0"

__all__ = [
    "AttributeRecord",
    "RecommendationError",
    "RecommendationResult",
    "recommend",
    "recommend_from_payload",
]

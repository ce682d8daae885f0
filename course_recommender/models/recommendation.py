"""
Recommendation output models.

``CourseScore`` pairs a course with its final score and catalog index.

``RecommendationResult`` is the engine output: the top-2 courses, their
confidences (equal to their final scores, not probabilities), the full
score vector in catalog order, and the full ranked list.

``ScoreDeviation`` and ``SelfTestReport`` describe the outcome of the
canonical regression scenario (see ``engine/selftest.py``).

All models are frozen; a result is never mutated after the engine builds it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from course_recommender.taxonomy.course_catalog import (
    COURSE_CATALOG,
    N_COURSES,
    WIRE_SCORE_KEYS,
    Course,
)


class CourseScore(BaseModel):
    """One (course, score) entry of the ranked list.

    Attributes:
        course: The course.
        score: Final adjusted score (>= 0.1).
        index: Catalog index of the course (0-4).
    """

    model_config = ConfigDict(frozen=True)

    course: Course
    score: float
    index: int

    @property
    def confidence(self) -> float:
        """Confidence is the final score itself."""
        return self.score

    def to_payload(self) -> dict[str, Any]:
        return {
            "course": self.course.value,
            "score": self.score,
            "confidence": self.score,
            "index": self.index,
        }


class RecommendationResult(BaseModel):
    """Complete engine output for one attribute record.

    Attributes:
        primary: Highest-ranked course.
        alternative: Second-ranked course.
        primary_confidence: Final score of ``primary``.
        alternative_confidence: Final score of ``alternative``.
        scores: Final score vector, index-aligned with ``COURSE_CATALOG``.
        ranked: All five courses, highest score first; equal scores keep
            catalog order.
    """

    model_config = ConfigDict(frozen=True)

    primary: Course
    alternative: Course
    primary_confidence: float
    alternative_confidence: float
    scores: tuple[float, ...]
    ranked: tuple[CourseScore, ...]

    @field_validator("scores", "ranked")
    @classmethod
    def validate_length(cls, v: tuple) -> tuple:
        if len(v) != N_COURSES:
            raise ValueError(f"expected {N_COURSES} entries, got {len(v)}.")
        return v

    @model_validator(mode="after")
    def validate_ranking_consistency(self) -> "RecommendationResult":
        if self.ranked[0].course != self.primary or self.ranked[1].course != self.alternative:
            raise ValueError("primary/alternative must match the top of the ranked list.")
        return self

    def score_for(self, course: Course) -> float:
        return self.scores[COURSE_CATALOG.index(course)]

    def scores_by_course(self) -> dict[Course, float]:
        """Return ``{course: score}`` in catalog order."""
        return dict(zip(COURSE_CATALOG, self.scores))

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by the web front end."""
        payload: dict[str, Any] = {
            "firstRecommendedCourse": self.primary.value,
            "alternativeRecommendedCourse": self.alternative.value,
            "firstConfidence": self.primary_confidence,
            "secondConfidence": self.alternative_confidence,
        }
        for course, score in self.scores_by_course().items():
            payload[WIRE_SCORE_KEYS[course]] = score
        payload["allScores"] = [entry.to_payload() for entry in self.ranked]
        return payload


class ScoreDeviation(BaseModel):
    """Expected vs. actual score for one course in the self-test."""

    model_config = ConfigDict(frozen=True)

    course: Course
    expected: float
    actual: float
    tolerance: float

    @property
    def difference(self) -> float:
        return abs(self.expected - self.actual)

    @property
    def within_tolerance(self) -> bool:
        return self.difference <= self.tolerance


class SelfTestReport(BaseModel):
    """Outcome of the canonical regression scenario.

    ``passed`` reflects the ranking contract (primary and secondary course).
    Per-course score drift is reported separately in ``deviations`` so that a
    reference score that the rule tables cannot reach shows up as a visible
    deviation instead of masking the ranking check.
    """

    model_config = ConfigDict(frozen=True)

    expected_primary: Course
    expected_secondary: Course
    result: RecommendationResult
    deviations: tuple[ScoreDeviation, ...]

    @property
    def primary_match(self) -> bool:
        return self.result.primary == self.expected_primary

    @property
    def secondary_match(self) -> bool:
        return self.result.alternative == self.expected_secondary

    @property
    def passed(self) -> bool:
        return self.primary_match and self.secondary_match

    @property
    def scores_within_tolerance(self) -> bool:
        return all(d.within_tolerance for d in self.deviations)

    def to_payload(self) -> dict[str, Any]:
        return {
            "success": True,
            "data": self.result.to_payload(),
            "expected": {
                "firstRecommendedCourse": self.expected_primary.value,
                "secondRecommendedCourse": self.expected_secondary.value,
                "expectedScores": {d.course.value: d.expected for d in self.deviations},
            },
            "actual": {
                "primary": self.result.primary.value,
                "secondary": self.result.alternative.value,
                "scores": {d.course.value: d.actual for d in self.deviations},
            },
            "comparison": {
                "primaryMatch": self.primary_match,
                "secondaryMatch": self.secondary_match,
                "scoreDifferences": [
                    {
                        "course": d.course.value,
                        "expected": d.expected,
                        "actual": d.actual,
                        "difference": f"{d.difference:.3f}",
                    }
                    for d in self.deviations
                ],
            },
        }

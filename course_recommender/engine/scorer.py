"""
Linear scoring stages: subject grades, interests, combination and adjustment.

Every stage returns a ``ScoreVector``, a 5-tuple index-aligned with
``COURSE_CATALOG`` (Gaming, Web Development, Fuzzy Logic, Database Design,
Software Validation & Verification).

Subject scoring
---------------
For each subject grade ``>= 1.5``::

    scores[course] += (grade / 5.0) * SUBJECT_WEIGHTS[subject][course]

Interest scoring
----------------
For each course group, over the member interests ``>= 1.5``::

    scores[course] += (sum(level * weight) / n_counted) / 5.0

A group with no counted interest contributes nothing.

Combination and adjustment
--------------------------
    combined = subject + interest + 0.3 * fuzzy_bonus
    combined *= DIFFICULTY_MULTIPLIERS[difficulty]     (per course, if any)
    combined *= LEARNING_STYLE_MULTIPLIERS[style]      (per course, if any)
    final    = max(combined, 0.1)

The hard 1.5 threshold here is independent of the continuous memberships in
``rules.py``; the two heuristics are blended, not unified.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from course_recommender.models.attributes import AttributeRecord
from course_recommender.taxonomy.course_catalog import (
    N_COURSES,
    Course,
    Difficulty,
    LearningStyle,
    course_index,
)

logger = logging.getLogger(__name__)

ScoreVector = tuple[float, ...]

SCORE_THRESHOLD = 1.5
SCALE_MAX = 5.0
FUZZY_BONUS_WEIGHT = 0.3
SCORE_FLOOR = 0.1

# subject field -> {course: weight}; iteration order is the accumulation order.
SUBJECT_WEIGHTS: Mapping[str, Mapping[Course, float]] = MappingProxyType({
    "programming": MappingProxyType({
        Course.GAMING:              0.7,
        Course.WEB_DEVELOPMENT:     1.0,
        Course.FUZZY_LOGIC:         0.6,
        Course.DATABASE_DESIGN:     0.8,
        Course.SOFTWARE_VALIDATION: 0.9,
    }),
    "multimedia": MappingProxyType({
        Course.GAMING:          1.0,
        Course.WEB_DEVELOPMENT: 0.8,
    }),
    "machine_learning": MappingProxyType({
        Course.FUZZY_LOGIC: 1.0,
    }),
    "database": MappingProxyType({
        Course.DATABASE_DESIGN: 1.0,
    }),
    "software_engineering": MappingProxyType({
        Course.WEB_DEVELOPMENT:     0.8,
        Course.SOFTWARE_VALIDATION: 1.0,
    }),
})

# (course, ((interest field, weight), ...)) in catalog order.
INTEREST_GROUPS: tuple[tuple[Course, tuple[tuple[str, float], ...]], ...] = (
    (Course.GAMING, (
        ("data_science",           1.0),
        ("web_development",        0.8),
        ("mobile_app_development", 0.9),
    )),
    (Course.WEB_DEVELOPMENT, (
        ("web_development", 0.9),
        ("cybersecurity",   1.0),
        ("uiux_design",     0.8),
    )),
    (Course.FUZZY_LOGIC, (
        ("artificial_intelligence", 1.0),
        ("uiux_design",             0.8),
        ("iot",                     0.9),
    )),
    (Course.DATABASE_DESIGN, (
        ("cybersecurity",   0.8),
        ("database_design", 1.0),
    )),
    (Course.SOFTWARE_VALIDATION, (
        ("artificial_intelligence",     0.7),
        ("software_validation_testing", 1.0),
    )),
)

DIFFICULTY_MULTIPLIERS: Mapping[Difficulty, Mapping[Course, float]] = MappingProxyType({
    Difficulty.EASY: MappingProxyType({
        Course.WEB_DEVELOPMENT: 1.2,
        Course.DATABASE_DESIGN: 1.2,
    }),
    Difficulty.MODERATE: MappingProxyType({
        Course.GAMING:              1.1,
        Course.SOFTWARE_VALIDATION: 1.1,
    }),
    Difficulty.DIFFICULT: MappingProxyType({
        Course.FUZZY_LOGIC: 1.2,
    }),
})

LEARNING_STYLE_MULTIPLIERS: Mapping[LearningStyle, Mapping[Course, float]] = MappingProxyType({
    LearningStyle.VISUAL: MappingProxyType({
        Course.GAMING:          1.1,
        Course.FUZZY_LOGIC:     1.1,
        Course.DATABASE_DESIGN: 1.1,
    }),
    LearningStyle.KINESTHETIC: MappingProxyType({
        Course.GAMING:          1.15,
        Course.WEB_DEVELOPMENT: 1.15,
        Course.DATABASE_DESIGN: 1.15,
    }),
    LearningStyle.READING_WRITING: MappingProxyType({
        Course.WEB_DEVELOPMENT:     1.1,
        Course.SOFTWARE_VALIDATION: 1.1,
    }),
    LearningStyle.AUDITORY: MappingProxyType({
        Course.FUZZY_LOGIC:         1.05,
        Course.SOFTWARE_VALIDATION: 1.05,
    }),
})


def zero_vector() -> list[float]:
    return [0.0] * N_COURSES


def subject_scores(record: AttributeRecord) -> ScoreVector:
    """Score courses from subject grades.

    Grades below ``SCORE_THRESHOLD`` (including 0 = not taken) contribute
    nothing.
    """
    scores = zero_vector()
    for subject, weights in SUBJECT_WEIGHTS.items():
        grade = getattr(record, subject)
        if not grade >= SCORE_THRESHOLD:  # NaN never passes
            continue
        normalized = grade / SCALE_MAX
        for course, weight in weights.items():
            scores[course_index(course)] += normalized * weight
        logger.debug("Subject %s contribution -> %s", subject, scores)
    return tuple(scores)


def interest_scores(record: AttributeRecord) -> ScoreVector:
    """Score courses from interest levels (weighted mean per course group)."""
    scores = zero_vector()
    for course, members in INTEREST_GROUPS:
        total = 0.0
        count = 0
        for field, weight in members:
            level = getattr(record, field)
            if level >= SCORE_THRESHOLD:
                total += level * weight
                count += 1
        if count > 0:
            contribution = total / count / SCALE_MAX
            scores[course_index(course)] += contribution
            logger.debug("Interest group %s: +%.4f", course.value, contribution)
    return tuple(scores)


def combine(
    subject: Sequence[float],
    interest: Sequence[float],
    fuzzy_bonus: Sequence[float],
) -> ScoreVector:
    """Return ``subject + interest + 0.3 * fuzzy_bonus`` elementwise."""
    _check_length(subject, interest, fuzzy_bonus)
    combined = [s + i for s, i in zip(subject, interest)]
    return tuple(c + f * FUZZY_BONUS_WEIGHT for c, f in zip(combined, fuzzy_bonus))


def adjust_by_preferences(
    scores: Sequence[float],
    difficulty: float,
    learning_style: float,
) -> ScoreVector:
    """Apply the difficulty multipliers, then the learning-style multipliers.

    Values outside the known scales leave the scores unchanged.
    """
    _check_length(scores)
    adjusted = list(scores)
    for table, key in (
        (DIFFICULTY_MULTIPLIERS, difficulty),
        (LEARNING_STYLE_MULTIPLIERS, learning_style),
    ):
        for course, factor in table.get(key, {}).items():
            adjusted[course_index(course)] *= factor
    return tuple(adjusted)


def apply_floor(scores: Sequence[float], floor: float = SCORE_FLOOR) -> ScoreVector:
    """Clamp every score to at least ``floor`` so no course reads as unviable."""
    return tuple(max(score, floor) for score in scores)


def _check_length(*vectors: Sequence[float]) -> None:
    for vec in vectors:
        if len(vec) != N_COURSES:
            raise ValueError(f"Score vector must have {N_COURSES} entries, got {len(vec)}.")

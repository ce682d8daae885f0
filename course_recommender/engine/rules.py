"""
Fuzzy rule layer: Mamdani min-AND / max-OR over triangular memberships.

Each course has two rules describing alternative qualifying profiles:

  - a *high* profile (high CGPA, high programming grade, ...), and
  - a *medium* profile (medium CGPA, medium programming grade, ...) that
    pairs with a different learning style.

A rule's activation is the minimum of its five membership degrees.  A
course's bonus is the maximum of its two activations.  No defuzzification
is applied; the raw activation (0-1) is the bonus, which the scorer weights
by 0.3.

Antecedent dimensions
---------------------
  cgpa            -> CGPA_SETS            (low / medium / high)
  programming     -> SUBJECT_SETS         (low / medium / high)
  difficulty      -> DIFFICULTY_SETS      (easy / moderate / difficult)
  learning_style  -> LEARNING_STYLE_SETS  (visual / kinesthetic / ...)
  <interest>      -> INTEREST_SETS        (low / medium / high)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from course_recommender.engine.membership import (
    cgpa_membership,
    difficulty_membership,
    interest_membership,
    learning_style_membership,
    subject_membership,
)
from course_recommender.engine.scorer import ScoreVector, zero_vector
from course_recommender.models.attributes import AttributeRecord
from course_recommender.taxonomy.course_catalog import Course, course_index

logger = logging.getLogger(__name__)

Antecedent = tuple[str, str]  # (dimension, fuzzy set name)

# Interest dimensions the rule table reads.
RULE_INTERESTS: tuple[str, ...] = (
    "data_science",
    "web_development",
    "cybersecurity",
    "artificial_intelligence",
    "game_development",
    "iot",
    "software_validation_testing",
)


@dataclass(frozen=True)
class FuzzyRule:
    """One rule: ``course`` is favoured to the degree ``min(antecedents)``.

    Attributes:
        course:      Course whose bonus this rule feeds.
        profile:     ``"high"`` or ``"medium"``, the qualifying profile.
        antecedents: ``(dimension, set name)`` pairs combined with AND (min).
    """

    course: Course
    profile: str
    antecedents: tuple[Antecedent, ...]

    def activation(self, memberships: dict[str, dict[str, float]]) -> float:
        return min(memberships[dim][name] for dim, name in self.antecedents)


def _high(interest: str, difficulty: str, style: str) -> tuple[Antecedent, ...]:
    return (
        ("cgpa", "high"),
        ("programming", "high"),
        (interest, "high"),
        ("difficulty", difficulty),
        ("learning_style", style),
    )


def _medium(
    interest: str, interest_set: str, difficulty: str, style: str
) -> tuple[Antecedent, ...]:
    return (
        ("cgpa", "medium"),
        ("programming", "medium"),
        (interest, interest_set),
        ("difficulty", difficulty),
        ("learning_style", style),
    )


RULES: tuple[FuzzyRule, ...] = (
    FuzzyRule(Course.GAMING, "high",
              _high("game_development", "moderate", "visual")),
    FuzzyRule(Course.GAMING, "medium",
              _medium("game_development", "medium", "moderate", "kinesthetic")),

    FuzzyRule(Course.WEB_DEVELOPMENT, "high",
              _high("web_development", "easy", "reading_writing")),
    FuzzyRule(Course.WEB_DEVELOPMENT, "medium",
              _medium("web_development", "medium", "easy", "kinesthetic")),

    FuzzyRule(Course.FUZZY_LOGIC, "high",
              _high("artificial_intelligence", "difficult", "visual")),
    FuzzyRule(Course.FUZZY_LOGIC, "medium",
              _medium("iot", "medium", "difficult", "auditory")),

    FuzzyRule(Course.DATABASE_DESIGN, "high",
              _high("data_science", "easy", "visual")),
    FuzzyRule(Course.DATABASE_DESIGN, "medium",
              _medium("data_science", "medium", "easy", "kinesthetic")),

    FuzzyRule(Course.SOFTWARE_VALIDATION, "high",
              _high("cybersecurity", "moderate", "auditory")),
    FuzzyRule(Course.SOFTWARE_VALIDATION, "medium",
              _medium("software_validation_testing", "high", "moderate", "reading_writing")),
)


def compute_memberships(record: AttributeRecord) -> dict[str, dict[str, float]]:
    """Fuzzify every dimension the rule table reads."""
    memberships = {
        "cgpa": cgpa_membership(record.cgpa),
        "programming": subject_membership(record.programming),
        "difficulty": difficulty_membership(record.difficulty),
        "learning_style": learning_style_membership(record.learning_style),
    }
    for interest in RULE_INTERESTS:
        memberships[interest] = interest_membership(getattr(record, interest))
    return memberships


def evaluate_fuzzy_rules(record: AttributeRecord) -> ScoreVector:
    """Return the per-course fuzzy bonus (max of rule activations, 0-1)."""
    memberships = compute_memberships(record)
    bonus = zero_vector()
    for rule in RULES:
        idx = course_index(rule.course)
        activation = rule.activation(memberships)
        bonus[idx] = max(bonus[idx], activation)
        if activation > 0:
            logger.debug(
                "Rule %s/%s fired: %.4f", rule.course.value, rule.profile, activation
            )
    return tuple(bonus)

"""
Tests for course_recommender/engine/scorer.py.

What we test
------------
subject_scores():
  - Not-taken / below-threshold grades contribute exactly 0.
  - A grade exactly at the 1.5 threshold counts.
  - Programming fans out to every course with its weight table.
  - Canonical profile vector.
  - Monotonic in each subject grade above the threshold.

interest_scores():
  - Default interests (1) contribute 0.
  - Weighted mean over counted members only.
  - Canonical profile vector.

combine() / adjust_by_preferences() / apply_floor():
  - Fuzzy bonus is weighted by 0.3.
  - Difficulty then style multipliers compose on the same slot.
  - Unknown difficulty / style leaves scores unchanged.
  - Floor lifts values below 0.1 and leaves others unchanged.
  - Wrong-length vectors raise ValueError.
"""

from __future__ import annotations

import pytest

from course_recommender.engine.scorer import (
    FUZZY_BONUS_WEIGHT,
    SCORE_FLOOR,
    SCORE_THRESHOLD,
    SUBJECT_WEIGHTS,
    adjust_by_preferences,
    apply_floor,
    combine,
    interest_scores,
    subject_scores,
)
from course_recommender.models.attributes import SUBJECT_FIELDS, AttributeRecord
from course_recommender.taxonomy.course_catalog import Course, course_index

ZERO = (0.0, 0.0, 0.0, 0.0, 0.0)


# ── subject_scores ────────────────────────────────────────────────────────────

class TestSubjectScores:
    def test_no_subjects_taken(self, default_record):
        assert subject_scores(default_record) == ZERO

    @pytest.mark.parametrize("subject", SUBJECT_FIELDS)
    def test_below_threshold_contributes_nothing(self, subject):
        record = AttributeRecord(**{subject: 1.4})
        assert subject_scores(record) == ZERO

    def test_threshold_is_inclusive(self):
        scores = subject_scores(AttributeRecord(database=SCORE_THRESHOLD))
        assert scores[course_index(Course.DATABASE_DESIGN)] == pytest.approx(0.3)

    def test_programming_fans_out_to_all_courses(self):
        scores = subject_scores(AttributeRecord(programming=5))
        assert scores == pytest.approx((0.7, 1.0, 0.6, 0.8, 0.9))

    def test_multimedia_only_touches_gaming_and_web(self):
        scores = subject_scores(AttributeRecord(multimedia=5))
        assert scores == pytest.approx((1.0, 0.8, 0.0, 0.0, 0.0))

    def test_software_engineering_mapping(self):
        scores = subject_scores(AttributeRecord(software_engineering=5))
        assert scores == pytest.approx((0.0, 0.8, 0.0, 0.0, 1.0))

    def test_canonical_profile(self, canonical_record):
        assert subject_scores(canonical_record) == pytest.approx(
            (1.56, 2.24, 1.28, 1.44, 1.52)
        )

    def test_out_of_range_grade_flows_through(self):
        scores = subject_scores(AttributeRecord(machine_learning=10))
        assert scores[course_index(Course.FUZZY_LOGIC)] == pytest.approx(2.0)

    @pytest.mark.parametrize("subject", SUBJECT_FIELDS)
    def test_monotonic_in_each_subject(self, subject):
        grades = [1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0]
        vectors = [subject_scores(AttributeRecord(**{subject: g})) for g in grades]
        for course in SUBJECT_WEIGHTS[subject]:
            idx = course_index(course)
            series = [v[idx] for v in vectors]
            assert series == sorted(series)


# ── interest_scores ───────────────────────────────────────────────────────────

class TestInterestScores:
    def test_default_interests_contribute_nothing(self, default_record):
        assert interest_scores(default_record) == ZERO

    def test_single_interest_feeds_every_group_it_belongs_to(self):
        scores = interest_scores(AttributeRecord(cybersecurity=5))
        # Web group: 5*1.0/1/5 ; DB group: 5*0.8/1/5
        assert scores == pytest.approx((0.0, 1.0, 0.0, 0.8, 0.0))

    def test_weighted_mean_over_counted_members(self):
        scores = interest_scores(AttributeRecord(web_development=4, cybersecurity=2))
        assert scores[course_index(Course.WEB_DEVELOPMENT)] == pytest.approx(0.56)
        assert scores[course_index(Course.GAMING)] == pytest.approx(0.64)
        assert scores[course_index(Course.DATABASE_DESIGN)] == pytest.approx(0.32)

    def test_below_threshold_member_not_counted(self):
        # dataScience below threshold -> Gaming mean over mobileAppDevelopment only
        scores = interest_scores(AttributeRecord(data_science=1, mobile_app_development=5))
        assert scores[course_index(Course.GAMING)] == pytest.approx(0.9)

    def test_game_development_is_not_an_interest_input(self):
        assert interest_scores(AttributeRecord(game_development=5)) == ZERO

    def test_canonical_profile(self, canonical_record):
        assert interest_scores(canonical_record) == pytest.approx(
            (12.7 / 15, 11.8 / 15, 0.78, 0.7, 0.78)
        )


# ── combine / adjust / floor ──────────────────────────────────────────────────

class TestCombine:
    def test_fuzzy_bonus_weight(self):
        combined = combine(ZERO, ZERO, (1.0, 0.5, 0.0, 0.0, 0.0))
        assert combined == pytest.approx((FUZZY_BONUS_WEIGHT, 0.15, 0.0, 0.0, 0.0))

    def test_elementwise_sum(self):
        combined = combine((1, 2, 3, 4, 5), (0.5, 0.5, 0.5, 0.5, 0.5), ZERO)
        assert combined == pytest.approx((1.5, 2.5, 3.5, 4.5, 5.5))

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError, match="5 entries"):
            combine((1.0, 2.0), ZERO, ZERO)


class TestAdjustByPreferences:
    ONES = (1.0, 1.0, 1.0, 1.0, 1.0)

    @pytest.mark.parametrize("difficulty,expected", [
        (1, (1.0, 1.2, 1.0, 1.2, 1.0)),
        (2, (1.1, 1.0, 1.0, 1.0, 1.1)),
        (3, (1.0, 1.0, 1.2, 1.0, 1.0)),
    ])
    def test_difficulty_multipliers(self, difficulty, expected):
        # style 0 is outside the scale -> only the difficulty table applies
        assert adjust_by_preferences(self.ONES, difficulty, 0) == pytest.approx(expected)

    @pytest.mark.parametrize("style,expected", [
        (1, (1.1, 1.0, 1.1, 1.1, 1.0)),
        (2, (1.15, 1.15, 1.0, 1.15, 1.0)),
        (3, (1.0, 1.1, 1.0, 1.0, 1.1)),
        (4, (1.0, 1.0, 1.05, 1.0, 1.05)),
    ])
    def test_learning_style_multipliers(self, style, expected):
        assert adjust_by_preferences(self.ONES, 0, style) == pytest.approx(expected)

    def test_multipliers_compose_on_same_slot(self):
        # difficulty 2 (Gaming x1.1) then kinesthetic (Gaming x1.15)
        adjusted = adjust_by_preferences(self.ONES, 2, 2)
        assert adjusted[course_index(Course.GAMING)] == pytest.approx(1.1 * 1.15)

    def test_unknown_values_leave_scores_unchanged(self):
        assert adjust_by_preferences(self.ONES, 7, 2.5) == self.ONES

    def test_float_scale_values_match(self):
        assert adjust_by_preferences(self.ONES, 3.0, 4.0) == pytest.approx(
            (1.0, 1.0, 1.2 * 1.05, 1.0, 1.05)
        )


class TestApplyFloor:
    def test_lifts_small_values(self):
        assert apply_floor((0.0, 0.05, 0.1, 0.5, 2.0)) == (SCORE_FLOOR, SCORE_FLOOR, 0.1, 0.5, 2.0)

    def test_custom_floor(self):
        assert apply_floor((0.0, 1.0), floor=0.5) == (0.5, 1.0)

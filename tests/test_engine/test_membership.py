"""
Tests for course_recommender/engine/membership.py.

What we test
------------
triangular_membership():
  - 0 at both feet, 1 at the peak, linear on each side.
  - Monotonic non-decreasing on [a, b] and non-increasing on [b, c].
  - 0 outside the support.
  - Shoulder sets report 0 on the edge that coincides with the peak.

Named fuzzy sets:
  - Breakpoints of every dimension match the design constants.
  - Learning-style sets are disjoint.
"""

from __future__ import annotations

import pytest

from course_recommender.engine.membership import (
    CGPA_SETS,
    DIFFICULTY_SETS,
    INTEREST_SETS,
    LEARNING_STYLE_SETS,
    SUBJECT_SETS,
    cgpa_membership,
    difficulty_membership,
    fuzzify,
    interest_membership,
    learning_style_membership,
    subject_membership,
    triangular_membership,
)


class TestTriangularMembership:
    def test_zero_at_feet(self):
        assert triangular_membership(2.0, 2.0, 3.0, 4.0) == 0.0
        assert triangular_membership(4.0, 2.0, 3.0, 4.0) == 0.0

    def test_one_at_peak(self):
        assert triangular_membership(3.0, 2.0, 3.0, 4.0) == 1.0

    def test_linear_rising_edge(self):
        assert triangular_membership(2.5, 2.0, 3.0, 4.0) == pytest.approx(0.5)
        assert triangular_membership(2.25, 2.0, 3.0, 4.0) == pytest.approx(0.25)

    def test_linear_falling_edge(self):
        assert triangular_membership(3.5, 2.0, 3.0, 4.0) == pytest.approx(0.5)
        assert triangular_membership(3.75, 2.0, 3.0, 4.0) == pytest.approx(0.25)

    def test_zero_outside_support(self):
        assert triangular_membership(-10.0, 2.0, 3.0, 4.0) == 0.0
        assert triangular_membership(10.0, 2.0, 3.0, 4.0) == 0.0

    def test_asymmetric_triangle(self):
        # subject "medium": (1, 2.5, 4)
        assert triangular_membership(3.25, 1.0, 2.5, 4.0) == pytest.approx(0.5)
        assert triangular_membership(1.75, 1.0, 2.5, 4.0) == pytest.approx(0.5)

    def test_monotonic_on_each_side(self):
        a, b, c = 1.0, 2.5, 4.0
        rising = [triangular_membership(a + i * (b - a) / 10, a, b, c) for i in range(11)]
        falling = [triangular_membership(b + i * (c - b) / 10, a, b, c) for i in range(11)]
        assert rising == sorted(rising)
        assert falling == sorted(falling, reverse=True)

    def test_right_shoulder_edge_is_zero(self):
        # "high" = (3, 5, 5): x == c is checked before x == b
        assert triangular_membership(5.0, 3.0, 5.0, 5.0) == 0.0
        assert triangular_membership(4.0, 3.0, 5.0, 5.0) == pytest.approx(0.5)

    def test_left_shoulder_edge_is_zero(self):
        # "low" = (1, 1, 3): x == a is checked before x == b
        assert triangular_membership(1.0, 1.0, 1.0, 3.0) == 0.0
        assert triangular_membership(2.0, 1.0, 1.0, 3.0) == pytest.approx(0.5)


class TestFuzzySets:
    def test_cgpa_breakpoints(self):
        assert CGPA_SETS["low"] == (1.0, 1.0, 3.0)
        assert CGPA_SETS["medium"] == (2.0, 3.0, 4.0)
        assert CGPA_SETS["high"] == (3.0, 5.0, 5.0)

    def test_subject_breakpoints(self):
        assert SUBJECT_SETS["low"] == (0.0, 0.0, 2.0)
        assert SUBJECT_SETS["medium"] == (1.0, 2.5, 4.0)
        assert SUBJECT_SETS["high"] == (3.0, 5.0, 5.0)

    def test_interest_breakpoints(self):
        assert INTEREST_SETS == CGPA_SETS

    def test_difficulty_breakpoints(self):
        assert DIFFICULTY_SETS["easy"] == (0.5, 1.0, 1.5)
        assert DIFFICULTY_SETS["moderate"] == (1.5, 2.0, 2.5)
        assert DIFFICULTY_SETS["difficult"] == (2.5, 3.0, 3.5)

    def test_learning_style_breakpoints(self):
        assert LEARNING_STYLE_SETS["visual"] == (0.5, 1.0, 1.5)
        assert LEARNING_STYLE_SETS["kinesthetic"] == (1.5, 2.0, 2.5)
        assert LEARNING_STYLE_SETS["reading_writing"] == (2.5, 3.0, 3.5)
        assert LEARNING_STYLE_SETS["auditory"] == (3.5, 4.0, 4.5)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CGPA_SETS["low"] = (0.0, 0.0, 0.0)  # type: ignore[index]


class TestNamedMemberships:
    def test_cgpa_medium_peak(self):
        assert cgpa_membership(3) == {"low": 0.0, "medium": 1.0, "high": 0.0}

    def test_cgpa_four_straddles_medium_and_high(self):
        m = cgpa_membership(4)
        assert m["medium"] == 0.0
        assert m["high"] == pytest.approx(0.5)

    def test_subject_not_taken_has_no_membership(self):
        assert subject_membership(0) == {"low": 0.0, "medium": 0.0, "high": 0.0}

    def test_interest_membership_keys(self):
        assert set(interest_membership(3)) == {"low", "medium", "high"}

    @pytest.mark.parametrize("difficulty,expected", [
        (1, "easy"), (2, "moderate"), (3, "difficult"),
    ])
    def test_difficulty_single_active_set(self, difficulty, expected):
        m = difficulty_membership(difficulty)
        assert m[expected] == 1.0
        assert sum(m.values()) == 1.0

    @pytest.mark.parametrize("style,expected", [
        (1, "visual"), (2, "kinesthetic"), (3, "reading_writing"), (4, "auditory"),
    ])
    def test_learning_style_sets_are_disjoint(self, style, expected):
        m = learning_style_membership(style)
        assert m[expected] == 1.0
        assert sum(m.values()) == 1.0

    def test_fuzzify_uses_all_sets(self):
        assert list(fuzzify(2.0, DIFFICULTY_SETS)) == ["easy", "moderate", "difficult"]

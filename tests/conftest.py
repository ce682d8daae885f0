"""
Shared pytest fixtures for the course recommender test suite.

Provides:
  - Sample ``AttributeRecord`` factories (canonical, defaults, profiles that
    fire individual fuzzy rules).
  - ``restore_root_logging``: undoes ``configure_logging()`` side effects on
    the root logger after a test.
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from course_recommender.engine.selftest import CANONICAL_PAYLOAD
from course_recommender.models.attributes import AttributeRecord


# ── Sample records ────────────────────────────────────────────────────────────

@pytest.fixture
def canonical_payload() -> dict:
    """The regression profile as a camelCase payload dict."""
    return dict(CANONICAL_PAYLOAD)


@pytest.fixture
def canonical_record(canonical_payload: dict) -> AttributeRecord:
    """The regression profile (expected primary: Web Development)."""
    return AttributeRecord(**canonical_payload)


@pytest.fixture
def default_record() -> AttributeRecord:
    """All attributes at their documented defaults."""
    return AttributeRecord()


@pytest.fixture
def gaming_medium_profile() -> AttributeRecord:
    """Fires the Gaming medium-profile rule at full strength.

    cgpa 3 (medium=1), programming 2.5 (medium=1), gameDevelopment 3
    (medium=1), difficulty 2 (moderate=1), learningStyle 2 (kinesthetic=1).
    """
    return AttributeRecord(
        cgpa=3,
        programming=2.5,
        game_development=3,
        difficulty=2,
        learning_style=2,
    )


@pytest.fixture
def web_high_profile() -> AttributeRecord:
    """Fires the Web Development high-profile rule at 0.5.

    cgpa 4 (high=0.5), programming 4 (high=0.5), webDevelopment 4
    (high=0.5), difficulty 1 (easy=1), learningStyle 3 (reading/writing=1).
    """
    return AttributeRecord(
        cgpa=4,
        programming=4,
        web_development=4,
        difficulty=1,
        learning_style=3,
    )


# ── Logging isolation ─────────────────────────────────────────────────────────

@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Snapshot root logger handlers/level and restore them after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)

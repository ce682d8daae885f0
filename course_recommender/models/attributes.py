"""
Student attribute record, the single input of the recommendation engine.

``AttributeRecord`` holds one value per scored attribute.  Attribute names are
snake_case in Python; the camelCase names used by form/JSON payloads
(``machineLearning``, ``learningStyle``, ...) are accepted as aliases and
emitted by ``to_payload()``.

Scales (no bounds are enforced; out-of-range values flow through unclamped):
  - ``cgpa``               1-5
  - subject grades         0 (not taken) or 1-5
  - interest levels        1-5
  - ``difficulty``         1-3
  - ``learning_style``     1-4

Boundary coercion
-----------------
``AttributeRecord.from_payload()`` converts an untrusted mapping the same way
the original web form host did (``parseInt(value) || default``):

  - ints are kept; finite floats are truncated toward zero;
  - strings are read from their leading integer prefix (``"4.7"`` -> 4);
  - anything else (bools, None, NaN, non-numeric text, lists, integers
    beyond float range) is missing;
  - missing values *and zero* are replaced by the field default.

Coercion never raises.  Direct construction (``AttributeRecord(cgpa=4.5)``)
skips coercion and keeps float values as given.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

SUBJECT_FIELDS: tuple[str, ...] = (
    "programming",
    "multimedia",
    "machine_learning",
    "database",
    "software_engineering",
)

INTEREST_FIELDS: tuple[str, ...] = (
    "data_science",
    "web_development",
    "cybersecurity",
    "artificial_intelligence",
    "mobile_app_development",
    "game_development",
    "uiux_design",
    "iot",
    "database_design",
    "software_validation_testing",
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class AttributeRecord(BaseModel):
    """Student attributes scored by the engine.

    Attributes:
        cgpa: Academic standing band, 1-5.  Default 3.
        programming: Programming grade, 0 = not taken.  Default 0.
        multimedia: Multimedia grade.  Default 0.
        machine_learning: Machine learning grade.  Default 0.
        database: Database grade.  Default 0.
        software_engineering: Software engineering grade.  Default 0.
        data_science .. software_validation_testing: Interest levels, 1-5.
            Default 1 (below the scoring threshold).
        difficulty: Preferred difficulty, 1-3.  Default 2 (moderate).
        learning_style: Learning modality, 1-4.  Default 1 (visual).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    cgpa: float = 3

    # Subject grades
    programming: float = 0
    multimedia: float = 0
    machine_learning: float = 0
    database: float = 0
    software_engineering: float = 0

    # Interest levels
    data_science: float = 1
    web_development: float = 1
    cybersecurity: float = 1
    artificial_intelligence: float = 1
    mobile_app_development: float = 1
    game_development: float = 1
    uiux_design: float = 1
    iot: float = 1
    database_design: float = 1
    software_validation_testing: float = 1

    # Preferences
    difficulty: float = 2
    learning_style: float = 1

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "AttributeRecord":
        """Build a record from an untrusted mapping, defaulting bad fields.

        Both camelCase and snake_case keys are accepted (camelCase wins when
        both are present).  Unknown keys are ignored.
        """
        payload = payload or {}
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            raw = payload[alias] if alias in payload else payload.get(name)
            values[name] = coerce_field(raw, field.default)
            if raw is not None and values[name] != raw:
                logger.debug("Coerced %s: %r -> %r", alias, raw, values[name])
        return cls(**values)

    def to_payload(self) -> dict[str, float]:
        """Return the record as a camelCase dict (wire format)."""
        return self.model_dump(by_alias=True)

    def subject_grades(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in SUBJECT_FIELDS}

    def interest_levels(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in INTEREST_FIELDS}


# ── Coercion helpers ──────────────────────────────────────────────────────────


def parse_int(value: Any) -> Optional[int]:
    """Parse ``value`` as an integer the way a lenient form host would.

    Returns ``None`` when no integer can be read, including integers too
    large to score as a float.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        parsed = int(value)
    elif isinstance(value, numbers.Real):
        value = float(value)
        if not math.isfinite(value):
            return None
        parsed = int(value)
    elif isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if not match:
            return None
        try:
            parsed = int(match.group(1))
        except ValueError:  # longer than sys.get_int_max_str_digits()
            return None
    else:
        return None
    try:
        float(parsed)
    except OverflowError:
        return None
    return parsed


def coerce_field(value: Any, default: float) -> float:
    """Return the parsed integer, or ``default`` when missing or zero."""
    parsed = parse_int(value)
    return parsed if parsed else default

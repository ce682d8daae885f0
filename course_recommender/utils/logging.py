"""
Logging setup for the course recommender CLI.

``configure_logging(config)`` is called once by each CLI command, after the
config is loaded and before the engine runs.  Library modules only ever ask
for ``logging.getLogger(__name__)``.

What gets logged where:
  - ``engine.recommender`` traces each stage vector at DEBUG and the final
    pick at INFO.
  - ``engine.selftest`` warns once per drifting course, passing ``course``
    and ``difference`` as ``extra=`` fields.
  - ``models.attributes`` reports coerced payload fields at DEBUG.

Console output goes to stderr; stdout is reserved for command results.

With ``json_format = true`` each line is one object, extras at top level::

    {"ts": "2026-03-01T09:12:44Z", "level": "WARNING",
     "logger": "course_recommender.engine.selftest",
     "msg": "Self-test score drift for ...", "course": "...", "difference": 0.363}
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from course_recommender.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonLinesFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    ``exc`` when an exception is attached, then any ``extra=`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict = {
            "ts": ts.strftime(TIMESTAMP_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )
        return json.dumps(entry, default=str)


def build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonLinesFormatter()
    formatter = logging.Formatter(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)
    formatter.converter = time.gmtime
    return formatter


def _handler(target: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    target.setLevel(level)
    target.setFormatter(formatter)
    return target


def configure_logging(config: "LoggingConfig") -> None:
    """Replace the root logger's handlers according to ``config``.

    Installs a stderr handler and, when ``config.log_file`` is non-empty, a
    UTF-8 file handler (parent directories are created).  Both share the
    level and formatter.

    Args:
        config: ``[logging]`` section of ``AppConfig``.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    formatter = build_formatter(config.json_format)

    handlers = [_handler(logging.StreamHandler(sys.stderr), level, formatter)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _handler(logging.FileHandler(log_path, encoding="utf-8"), level, formatter)
        )

    logging.basicConfig(level=level, handlers=handlers, force=True)

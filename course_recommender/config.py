"""
Configuration for the course recommender CLI.

``load_config()`` merges, later sources winning:

  1. the main TOML file: ``--config PATH`` or ``config/default.toml``;
  2. ``local.toml`` beside the main file, if present (gitignored);
  3. ``COURSE_RECOMMENDER_*`` environment variables, including those
     supplied by a project-root ``.env`` file (python-dotenv; real
     environment variables take precedence over ``.env``).

Only ambient settings live here: logging, self-test tolerance and export
location.  Scoring weights and membership breakpoints are engine constants.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class SelfTestConfig(BaseModel):
    """Regression scenario settings."""

    model_config = ConfigDict(frozen=True)

    tolerance: float = 0.01

    @field_validator("tolerance")
    @classmethod
    def validate_tolerance(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"tolerance must be > 0, got {v}.")
        return v


class OutputConfig(BaseModel):
    """Where and how exported results are written."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"
    json_indent: int = 2

    @field_validator("json_indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"json_indent must be >= 0, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration, built once per process.

    CLI commands receive an ``AppConfig`` instance constructed by
    ``load_config()``, which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    selftest: SelfTestConfig = SelfTestConfig()
    output: OutputConfig = OutputConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

ENV_PREFIX = "COURSE_RECOMMENDER_"


def _parse_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# env var suffix -> (section, key, parser); section None = top level.
_ENV_OVERRIDES: tuple[tuple[str, Optional[str], str, Callable[[str], Any]], ...] = (
    ("LOG_LEVEL", "logging", "level", str),
    ("OUTPUT_DIR", "output", "output_dir", str),
    ("DEBUG", None, "debug", _parse_flag),
)


def _find_project_root() -> Path:
    """Nearest ancestor of this package holding ``pyproject.toml``.

    Falls back to the package's parent directory (installed, non-editable).
    """
    here = Path(__file__).resolve()
    for candidate in here.parents[:3]:
        if (candidate / "pyproject.toml").exists():
            return candidate
    return here.parent.parent


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit TOML file.  Defaults to
            ``<project_root>/config/default.toml``; if that file is absent
            the built-in model defaults apply.

    Returns:
        Validated, frozen ``AppConfig``.

    Raises:
        FileNotFoundError: ``config_path`` was given but does not exist.
        pydantic.ValidationError: A merged value fails validation.
    """
    root = _find_project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    raw: dict[str, Any] = {}
    for layer in _config_layers(config_path, root):
        raw = _deep_merge(raw, _read_toml(layer))

    return _build_app_config(_apply_env_overrides(raw, os.environ))


def _config_layers(config_path: Optional[Path], root: Path) -> list[Path]:
    """TOML files to merge, lowest precedence first.

    The main file (explicit or default) is followed by a ``local.toml`` in
    the same directory when one exists.
    """
    if config_path is not None:
        main = Path(config_path)
        if not main.exists():
            raise FileNotFoundError(f"Config file not found: {main}")
    else:
        main = root / "config" / "default.toml"
        if not main.exists():
            return []
    local = main.parent / "local.toml"
    return [main, local] if local.exists() else [main]


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(raw: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Overlay non-empty ``COURSE_RECOMMENDER_*`` variables onto ``raw``."""
    for suffix, section, key, parse in _ENV_OVERRIDES:
        value = environ.get(ENV_PREFIX + suffix)
        if not value:
            continue
        target = raw if section is None else raw.setdefault(section, {})
        target[key] = parse(value)
    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    # ``debug`` may sit at top level (env override) or under [project].
    project = raw.get("project", {})
    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        selftest=SelfTestConfig(**raw.get("selftest", {})),
        output=OutputConfig(**raw.get("output", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )

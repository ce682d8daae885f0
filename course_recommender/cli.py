"""
Course Recommender command line.

Every command loads the merged ``AppConfig`` first, then sets up logging,
then reads its inputs and calls the engine.  Results are printed to stdout
and log lines go to stderr, so ``--json`` output can be piped as-is.

Usage::

    pip install -e .
    course-recommender --help
    course-recommender recommend --file student.json
    course-recommender recommend --set cgpa=4 --set programming=5 --set difficulty=1
    echo '{"cgpa": 4}' | course-recommender recommend --file - --json
    course-recommender self-test
    course-recommender catalog
    course-recommender validate-config
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import typer

if TYPE_CHECKING:
    from course_recommender.config import AppConfig

app = typer.Typer(
    name="course-recommender",
    help="Fuzzy-logic course recommender: scores five courses from a student profile.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None) -> "AppConfig":
    """Return the merged config; on any config problem print ``[ERROR]`` and exit 1."""
    import tomllib

    from pydantic import ValidationError

    from course_recommender.config import load_config

    try:
        return load_config(Path(config_path) if config_path else None)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
    raise typer.Exit(code=1)


def _startup(config_path: Optional[str]) -> "AppConfig":
    """Load config and install logging handlers; first step of every engine command."""
    from course_recommender.utils.logging import configure_logging

    config = _load_config_or_exit(config_path)
    configure_logging(config.logging)
    return config


def _read_payload(source: str) -> dict[str, Any]:
    """Read a JSON object from ``source`` (a path, or ``-`` for stdin)."""
    try:
        if source == "-":
            raw = json.loads(sys.stdin.read() or "{}")
        else:
            with open(source, encoding="utf-8") as f:
                raw = json.load(f)
    except (ValueError, OSError) as exc:  # JSON and UTF-8 decode errors are ValueErrors
        typer.echo(f"[ERROR] Could not read input JSON: {exc}", err=True)
        raise typer.Exit(code=1)

    if not isinstance(raw, dict):
        typer.echo("[ERROR] Input JSON must be an object of attribute values.", err=True)
        raise typer.Exit(code=1)
    return raw


def _parse_assignments(pairs: list[str]) -> dict[str, str]:
    """Parse ``key=value`` strings from ``--set`` options."""
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            typer.echo(f"[ERROR] Expected key=value, got '{pair}'.", err=True)
            raise typer.Exit(code=1)
        parsed[key.strip()] = value.strip()
    return parsed


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend_cmd(
    input_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="JSON file with attribute values ('-' reads stdin).",
    ),
    assignments: Optional[list[str]] = typer.Option(
        None,
        "--set",
        "-s",
        help="Attribute override as key=value (repeatable), e.g. --set cgpa=4.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result payload as JSON instead of a table.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the result to this file (.json payload or .csv ranking).",
    ),
    export: bool = typer.Option(
        False,
        "--export",
        help="Write a timestamped JSON result under config.output.output_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Recommend a course for one student profile.

    Attributes missing from the input (or not parseable as integers) fall
    back to their documented defaults: cgpa=3, subject grades=0,
    interests=1, difficulty=2, learningStyle=1.
    """
    from course_recommender.engine.recommender import RecommendationError, recommend
    from course_recommender.models.attributes import AttributeRecord
    from course_recommender.reporting.export import default_export_path, export_result
    from course_recommender.reporting.formatters import (
        format_attribute_summary,
        format_recommendation,
    )

    config = _startup(config_path)

    payload: dict[str, Any] = _read_payload(input_file) if input_file else {}
    payload.update(_parse_assignments(assignments or []))

    record = AttributeRecord.from_payload(payload)
    try:
        result = recommend(record)
    except RecommendationError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_payload(), indent=config.output.json_indent))
    else:
        typer.echo(format_attribute_summary(record))
        typer.echo(format_recommendation(result))

    targets: list[Path] = []
    if output:
        targets.append(Path(output))
    if export:
        targets.append(default_export_path(Path(config.output.output_dir)))
    for target in targets:
        written = export_result(result, target, indent=config.output.json_indent)
        typer.echo(f"[OK] Result written to {written}", err=True)


@app.command("self-test")
def self_test(
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the comparison payload as JSON.",
    ),
    tolerance: Optional[float] = typer.Option(
        None,
        "--tolerance",
        help="Score tolerance override (default: config.selftest.tolerance).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Run the canonical regression profile and compare with the reference.

    Exits with code 1 if the primary or secondary course differs from the
    reference.  Score drift is reported but does not fail the command.
    """
    from course_recommender.engine.recommender import RecommendationError
    from course_recommender.engine.selftest import run_self_test
    from course_recommender.reporting.formatters import format_self_test_report

    config = _startup(config_path)

    if tolerance is None:
        tolerance = config.selftest.tolerance
    elif tolerance <= 0:
        typer.echo(f"[ERROR] --tolerance must be > 0, got {tolerance}.", err=True)
        raise typer.Exit(code=1)

    try:
        report = run_self_test(tolerance)
    except RecommendationError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(report.to_payload(), indent=config.output.json_indent))
    else:
        typer.echo(format_self_test_report(report))

    if not report.passed:
        raise typer.Exit(code=1)


@app.command("catalog")
def catalog() -> None:
    """List the five courses and the preference multipliers that boost them."""
    from course_recommender.engine.scorer import (
        DIFFICULTY_MULTIPLIERS,
        LEARNING_STYLE_MULTIPLIERS,
    )
    from course_recommender.reporting.formatters import format_catalog

    typer.echo(format_catalog(dict(DIFFICULTY_MULTIPLIERS), dict(LEARNING_STYLE_MULTIPLIERS)))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="TOML file to check instead of config/default.toml.",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Also dump the merged config as JSON.",
    ),
) -> None:
    """Load and validate the merged configuration, then summarise it.

    Environment overrides are applied, so this shows the values the other
    commands will actually use.  Exits 1 on an invalid or missing file.
    """
    config = _load_config_or_exit(config_path)

    summary = [
        ("Log level", config.logging.level),
        ("Log file", config.logging.log_file or "(stderr only)"),
        ("JSON log lines", config.logging.json_format),
        ("Self-test tolerance", config.selftest.tolerance),
        ("Export directory", config.output.output_dir),
        ("JSON indent", config.output.json_indent),
        ("Debug", config.debug),
    ]
    typer.echo("[OK] Configuration is valid.")
    typer.echo("")
    for label, value in summary:
        typer.echo(f"  {label + ':':<22}{value}")

    if show_full:
        typer.echo("")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()

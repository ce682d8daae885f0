"""
ASCII terminal formatters for CLI commands.

All formatters accept finished engine objects and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Score bars
----------
Each ranked course gets a proportional bar scaled to the best score so the
gap between the primary and alternative recommendation is visible at a
glance::

     1  Web Development                      3.329  ##############################
     2  Software Validation & Verification   2.783  #########################
"""

from __future__ import annotations

from course_recommender.models.attributes import (
    INTEREST_FIELDS,
    SUBJECT_FIELDS,
    AttributeRecord,
)
from course_recommender.models.recommendation import RecommendationResult, SelfTestReport
from course_recommender.taxonomy.course_catalog import (
    COURSE_CATALOG,
    Difficulty,
    LearningStyle,
    cgpa_to_gpa,
)

BAR_WIDTH = 30
_COURSE_COL = 36


def format_score_bar(score: float, best: float, width: int = BAR_WIDTH) -> str:
    """Return a ``#`` bar proportional to ``score / best``."""
    if best <= 0:
        return ""
    return "#" * max(0, round(width * score / best))


def _scale_label(value: float, scale: type[Difficulty] | type[LearningStyle]) -> str:
    try:
        return scale(value).name.replace("_", "/").lower()
    except ValueError:
        return "unrecognised"


# ── Input summary ─────────────────────────────────────────────────────────────


def format_attribute_summary(record: AttributeRecord) -> str:
    """Format the (coerced) input record as an indented block.

    Args:
        record: The record that was scored.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("=== Student Profile ===")
    lines.append(f"  CGPA band:      {record.cgpa:g} (~{cgpa_to_gpa(record.cgpa):g} GPA)")
    lines.append(
        f"  Difficulty:     {record.difficulty:g} "
        f"({_scale_label(record.difficulty, Difficulty)})"
    )
    lines.append(
        f"  Learning style: {record.learning_style:g} "
        f"({_scale_label(record.learning_style, LearningStyle)})"
    )

    grades = record.subject_grades()
    taken = ", ".join(f"{name}={grades[name]:g}" for name in SUBJECT_FIELDS if grades[name])
    lines.append(f"  Subjects:       {taken or '(none taken)'}")

    levels = record.interest_levels()
    lines.append(
        "  Interests:      "
        + ", ".join(f"{name}={levels[name]:g}" for name in INTEREST_FIELDS)
    )
    return "\n".join(lines)


# ── Recommendation ────────────────────────────────────────────────────────────


def format_recommendation(result: RecommendationResult) -> str:
    """Format a recommendation as a ranked table with score bars.

    Args:
        result: Engine output.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Course Recommendation ===")
    lines.append(f"  Primary:     {result.primary.value} ({result.primary_confidence:.3f})")
    lines.append(
        f"  Alternative: {result.alternative.value} ({result.alternative_confidence:.3f})"
    )
    lines.append("")

    header = f"  {'Rank':>4}  {'Course':<{_COURSE_COL}}  {'Score':>6}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2 + BAR_WIDTH + 2))

    best = result.ranked[0].score
    for rank, entry in enumerate(result.ranked, start=1):
        lines.append(
            f"  {rank:>4}  {entry.course.value:<{_COURSE_COL}}  {entry.score:>6.3f}  "
            f"{format_score_bar(entry.score, best)}"
        )

    return "\n".join(lines)


# ── Self-test ─────────────────────────────────────────────────────────────────


def format_self_test_report(report: SelfTestReport) -> str:
    """Format the regression scenario comparison.

    Args:
        report: Output of ``run_self_test()``.

    Returns:
        Multi-line string ending with a ``[PASS]`` / ``[FAIL]`` line.
    """

    def _mark(ok: bool) -> str:
        return "ok" if ok else "MISMATCH"

    result = report.result
    lines: list[str] = []
    lines.append("")
    lines.append("=== Self-Test: Canonical Profile ===")
    lines.append(
        f"  Primary:   expected {report.expected_primary.value:<{_COURSE_COL}} "
        f"got {result.primary.value}  [{_mark(report.primary_match)}]"
    )
    lines.append(
        f"  Secondary: expected {report.expected_secondary.value:<{_COURSE_COL}} "
        f"got {result.alternative.value}  [{_mark(report.secondary_match)}]"
    )
    lines.append("")

    header = (
        f"  {'Course':<{_COURSE_COL}}  {'Expected':>8}  {'Actual':>8}  "
        f"{'Diff':>7}  {'Status':>8}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for dev in report.deviations:
        status = "ok" if dev.within_tolerance else "DRIFT"
        lines.append(
            f"  {dev.course.value:<{_COURSE_COL}}  {dev.expected:>8.3f}  "
            f"{dev.actual:>8.3f}  {dev.difference:>7.3f}  {status:>8}"
        )

    lines.append("")
    if report.passed:
        lines.append("[PASS] Ranking matches the reference result.")
    else:
        lines.append("[FAIL] Ranking differs from the reference result.")
    if not report.scores_within_tolerance:
        drifted = sum(1 for d in report.deviations if not d.within_tolerance)
        lines.append(f"  {drifted} course score(s) outside tolerance -- see DRIFT rows.")
    return "\n".join(lines)


# ── Catalog ───────────────────────────────────────────────────────────────────


def format_catalog(
    difficulty_multipliers: dict,
    style_multipliers: dict,
) -> str:
    """List the catalog with the preference multipliers that touch each course.

    Args:
        difficulty_multipliers: ``{Difficulty: {Course: factor}}``.
        style_multipliers:      ``{LearningStyle: {Course: factor}}``.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Course Catalog ===")
    header = f"  {'Idx':>3}  {'Course':<{_COURSE_COL}}  Boosted by"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2 + 30))
    for idx, course in enumerate(COURSE_CATALOG):
        boosts: list[str] = []
        for level, table in difficulty_multipliers.items():
            if course in table:
                boosts.append(f"difficulty={level.name.lower()} x{table[course]:g}")
        for style, table in style_multipliers.items():
            if course in table:
                boosts.append(f"style={style.name.lower()} x{table[course]:g}")
        lines.append(f"  {idx:>3}  {course.value:<{_COURSE_COL}}  {', '.join(boosts) or '-'}")
    return "\n".join(lines)

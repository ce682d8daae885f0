"""
File export for recommendation results.

``export_result()`` picks the format from the file extension:

  - ``.csv``  one row per course in rank order (``flatten_ranked_for_export``);
  - anything else: the JSON wire payload of ``RecommendationResult``.

The low-level writers take plain ``list[dict]`` / ``dict`` data, create
missing parent directories and return the path they wrote.
"""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path

from course_recommender.models.recommendation import RecommendationResult

RANKED_FIELDNAMES = ["rank", "course", "index", "score", "confidence", "recommended"]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` as UTF-8 CSV with a header row.

    Columns follow ``fieldnames`` (default: keys of the first record); keys
    outside the columns are dropped.  An empty ``records`` list writes an
    empty file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    columns = fieldnames or list(records[0])
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(data: dict | list, path: Path, indent: int = 2) -> Path:
    """Write ``data`` as indented JSON; non-JSON values are stringified."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=indent, default=str), encoding="utf-8")
    return path


def flatten_ranked_for_export(result: RecommendationResult) -> list[dict]:
    """Return one flat row per course in rank order.

    Each row contains ``rank`` (1-based), ``course``, ``index`` (catalog
    position), ``score``, ``confidence`` and ``recommended`` (``"primary"``,
    ``"alternative"`` or ``""``).
    """
    labels = {1: "primary", 2: "alternative"}
    return [
        {
            "rank":        rank,
            "course":      entry.course.value,
            "index":       entry.index,
            "score":       entry.score,
            "confidence":  entry.confidence,
            "recommended": labels.get(rank, ""),
        }
        for rank, entry in enumerate(result.ranked, start=1)
    ]


def export_result(
    result: RecommendationResult,
    path: Path,
    indent: int = 2,
) -> Path:
    """Export ``result`` by file extension: ``.csv`` ranked rows, else JSON payload."""
    if path.suffix.lower() == ".csv":
        return export_to_csv(flatten_ranked_for_export(result), path, RANKED_FIELDNAMES)
    return export_to_json(result.to_payload(), path, indent=indent)


def default_export_path(output_dir: Path, now: datetime | None = None) -> Path:
    """Return ``<output_dir>/recommendation_<UTC timestamp>.json``."""
    now = now or datetime.now(tz=timezone.utc)
    return output_dir / f"recommendation_{now.strftime('%Y%m%dT%H%M%SZ')}.json"

"""Tests for course_recommender/reporting/export.py."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone

from course_recommender.engine.ranker import build_result
from course_recommender.reporting.export import (
    RANKED_FIELDNAMES,
    default_export_path,
    export_result,
    export_to_csv,
    export_to_json,
    flatten_ranked_for_export,
)

SCORES = (0.4, 0.9, 0.2, 0.7, 0.1)


class TestExportToCsv:
    def test_writes_header_and_rows(self, tmp_path):
        path = export_to_csv([{"a": 1, "b": 2}, {"a": 3, "b": 4}], tmp_path / "out.csv")
        with path.open(encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert rows == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_empty_records_writes_empty_file(self, tmp_path):
        path = export_to_csv([], tmp_path / "empty.csv")
        assert path.read_text(encoding="utf-8") == ""

    def test_creates_parent_dirs(self, tmp_path):
        path = export_to_csv([{"a": 1}], tmp_path / "nested" / "dir" / "out.csv")
        assert path.exists()


class TestExportToJson:
    def test_round_trip(self, tmp_path):
        path = export_to_json({"x": [1, 2]}, tmp_path / "out.json", indent=4)
        assert json.loads(path.read_text(encoding="utf-8")) == {"x": [1, 2]}


class TestFlattenRanked:
    def test_rank_order_and_labels(self):
        rows = flatten_ranked_for_export(build_result(SCORES))
        assert [r["rank"] for r in rows] == [1, 2, 3, 4, 5]
        assert rows[0]["course"] == "Web Development"
        assert rows[0]["recommended"] == "primary"
        assert rows[1]["recommended"] == "alternative"
        assert all(r["recommended"] == "" for r in rows[2:])
        assert list(rows[0]) == RANKED_FIELDNAMES


class TestExportResult:
    def test_csv_by_extension(self, tmp_path):
        path = export_result(build_result(SCORES), tmp_path / "ranking.CSV")
        with path.open(encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 5
        assert rows[0]["course"] == "Web Development"

    def test_json_payload_otherwise(self, tmp_path):
        path = export_result(build_result(SCORES), tmp_path / "result.json")
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["firstRecommendedCourse"] == "Web Development"
        assert len(payload["allScores"]) == 5


def test_default_export_path(tmp_path):
    now = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)
    path = default_export_path(tmp_path, now=now)
    assert path == tmp_path / "recommendation_20240305T140709Z.json"

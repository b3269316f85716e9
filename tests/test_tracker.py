import csv
import json
from pathlib import Path

import pytest

from backpack import Backpack
from backpack.planning.tracker import Tracker
from backpack.quality_metrics.core import compute_backpack_metrics, compute_result_metrics


def _rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_pack_log_appends_one_row_per_call(tmp_path: Path, sample_items, additional_items):
    tracker = Tracker(out_dir=str(tmp_path / "out"))
    bp = Backpack(100)
    bp.pack(sample_items, 3, tracker=tracker)
    bp.pack(additional_items, 2, tracker=tracker)

    rows = _rows(tracker.pack_log_path)
    assert [r["call_index"] for r in rows] == ["0", "1"]
    assert rows[0]["remaining_before"] == "100"
    assert rows[0]["remaining_after"] == "5"
    assert json.loads(rows[0]["selected_json"]) == [[155, 40], [115, 30], [90, 25]]
    assert rows[1]["value"] == "5"
    assert rows[1]["remaining_after"] == "4"


def test_batch_order_reflects_last_call(tmp_path: Path, sample_items):
    tracker = Tracker(out_dir=str(tmp_path))
    Backpack(100).pack(sample_items, 1, tracker=tracker)
    rows = _rows(tmp_path / "batch_items.csv")
    assert [(r["value"], r["weight"]) for r in rows] == [
        ("200", "50"), ("155", "40"), ("115", "30"), ("90", "25"),
    ]


def test_snapshots(tmp_path: Path, sample_items):
    tracker = Tracker(out_dir=str(tmp_path))
    bp = Backpack(100)
    bp.try_to_pack(sample_items, 3)

    rows = _rows(tracker.write_packed_items_csv(bp))
    assert [(r["value"], r["weight"]) for r in rows] == [("155", "40"), ("115", "30"), ("90", "25")]

    (summary,) = _rows(tracker.write_backpack_summary_csv(bp))
    assert float(summary["Total Value"]) == 360.0
    assert float(summary["Utilization"]) == 95.0


def test_backpack_metrics(sample_items):
    bp = Backpack(100)
    metrics = compute_backpack_metrics(bp)
    assert metrics["Utilization"] == 0.0
    assert metrics["Value Per Weight"] == 0.0

    bp.try_to_pack(sample_items, 3)
    metrics = compute_backpack_metrics(bp)
    assert metrics["Used"] == 95.0
    assert metrics["Remaining"] == 5.0
    assert metrics["Items Packed"] == 3.0
    assert metrics["Value Per Weight"] == pytest.approx(360 / 95)


def test_result_metrics(sample_items):
    result = Backpack(100).pack(sample_items, 2)
    kpis = compute_result_metrics(result)
    assert kpis["Fill"] == 95.0
    assert kpis["Candidates Evaluated"] == 10.0

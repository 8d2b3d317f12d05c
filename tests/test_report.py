"""Tests for report formatting and metrics output."""

import json

import numpy as np

from microhash.benchmark import BenchmarkResult, format_report, format_table
from microhash.benchmark.report import TABLE_BOTTOM, TABLE_HEADER, TABLE_TOP, format_row, write_metrics_json


def make_result(name="micro_hash_int32_rob", collisions=0, deviation=39.740234375):
    return BenchmarkResult(
        name=name,
        iterations=10_000_000,
        precision=12,
        collisions=collisions,
        mean_deviation=deviation,
        max_load=2600,
        gini=0.01,
        elapsed=1.5,
        counts=np.zeros(4096, dtype=np.int64),
    )


def test_row_layout():
    """Test a row matches the documented table."""
    assert format_row(make_result()) == "| micro_hash_int32_rob    | 0            | 39.740234375000 |"
    assert (
        format_row(make_result("micro_hash_int6432_wang", 11580, 39.16650390625))
        == "| micro_hash_int6432_wang | 11580        | 39.166503906250 |"
    )


def test_long_names_are_truncated():
    row = format_row(make_result(name="x" * 40))
    assert row.startswith("| " + "x" * 23 + " | ")


def test_table_framing():
    table = format_table([make_result(), make_result("int32_wang")]).splitlines()
    assert table[0] == TABLE_TOP
    assert table[1] == TABLE_HEADER
    assert table[-1] == TABLE_BOTTOM
    assert len(table) == 6
    assert all(len(line) == len(TABLE_HEADER) for line in table[:3])


def test_report_preamble():
    report = format_report([make_result()], 10_000_000, 12)
    assert report.splitlines()[:2] == [
        "Iterating over 10000000 random values...",
        "Precision set to 12",
    ]


def test_write_metrics_json(tmp_path):
    path = tmp_path / "metrics" / "bench.json"
    write_metrics_json(path, {"iterations": 10}, [make_result()])

    data = json.loads(path.read_text())
    assert data["config"] == {"iterations": 10}
    assert data["results"][0]["name"] == "micro_hash_int32_rob"
    assert data["results"][0]["collisions"] == 0
    assert "torch_version" in data["hardware"]

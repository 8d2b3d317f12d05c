"""Tests for the benchmark command line."""

import json

import pytest

from microhash.benchmark.report import TABLE_HEADER
from microhash.benchmark.run import main


def test_cli_runs_and_reports(tmp_path, capsys):
    out = tmp_path / "metrics.json"
    code = main([
        "--hash", "int32_wang",
        "--hash", "int64_wang",
        "--iterations", "2000",
        "--precision", "4",
        "--workers", "1",
        "--out", str(out),
    ])

    assert code == 0
    stdout = capsys.readouterr().out
    assert "Iterating over 2000 random values..." in stdout
    assert TABLE_HEADER in stdout
    assert "| int32_wang " in stdout
    assert "| int64_wang " in stdout

    data = json.loads(out.read_text())
    assert [r["name"] for r in data["results"]] == ["int32_wang", "int64_wang"]
    assert data["config"]["precision"] == 4


def test_cli_config_file_with_override(tmp_path, capsys):
    config = tmp_path / "bench.yaml"
    config.write_text("iterations: 500\nprecision: 3\n")
    code = main(["--config", str(config), "--precision", "2", "--hash", "int32_rob", "--workers", "1"])

    assert code == 0
    stdout = capsys.readouterr().out
    assert "Iterating over 500 random values..." in stdout
    assert "Precision set to 2" in stdout


def test_cli_plot(tmp_path):
    plot = tmp_path / "buckets.pdf"
    code = main(["--hash", "int32_wang2", "--iterations", "500", "--precision", "3",
                 "--workers", "1", "--plot", str(plot)])
    assert code == 0
    assert plot.exists()


def test_cli_rejects_bad_config(tmp_path):
    with pytest.raises(SystemExit):
        main(["--iterations", "0", "--workers", "1"])
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.yaml")])

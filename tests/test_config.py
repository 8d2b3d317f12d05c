"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from microhash.config import BenchmarkConfig, HashSetConfig, load_config

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_defaults():
    cfg = BenchmarkConfig()
    assert cfg.iterations == 10_000_000
    assert cfg.precision == 12
    assert cfg.num_buckets == 4096
    assert cfg.seed == 6969
    assert cfg.hashset == HashSetConfig(initial_capacity=16, max_load_factor=0.7)


def test_shipped_config_matches_defaults():
    cfg = BenchmarkConfig.from_dict(load_config(PROJECT_ROOT / "configs" / "benchmark.yaml"))
    assert cfg == BenchmarkConfig()


def test_from_dict_nested_hashset():
    cfg = BenchmarkConfig.from_dict({"iterations": 10, "hashset": {"initial_capacity": 8}})
    assert cfg.iterations == 10
    assert cfg.hashset.initial_capacity == 8
    assert cfg.hashset.max_load_factor == 0.7


def test_to_dict_round_trip():
    cfg = BenchmarkConfig(iterations=123, precision=5, device="cpu")
    assert BenchmarkConfig.from_dict(cfg.to_dict()) == cfg


@pytest.mark.parametrize(
    "kwargs",
    [
        {"iterations": 0},
        {"precision": 0},
        {"precision": 33},
        {"chunk_size": 0},
        {"device": "tpu"},
        {"seed": -1},
    ],
)
def test_invalid_benchmark_config(kwargs):
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="Unknown"):
        BenchmarkConfig.from_dict({"iteration": 10})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_capacity": 12},
        {"initial_capacity": 0},
        {"max_load_factor": 1.0},
        {"max_load_factor": 0.0},
    ],
)
def test_invalid_hashset_config(kwargs):
    with pytest.raises(ValueError):
        HashSetConfig(**kwargs)


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_empty(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_torch_device_cpu():
    import torch

    assert BenchmarkConfig(device="cpu").torch_device() == torch.device("cpu")


def test_torch_device_cuda_unavailable(monkeypatch):
    import torch

    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)
    with pytest.raises(RuntimeError, match="CUDA"):
        BenchmarkConfig(device="cuda").torch_device()

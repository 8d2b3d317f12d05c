"""Pytest configuration and fixtures."""

import pytest

from microhash.config import BenchmarkConfig


@pytest.fixture
def small_config():
    """Benchmark config small enough for unit tests (16 buckets)."""
    return BenchmarkConfig(iterations=1000, precision=4, chunk_size=256)


@pytest.fixture
def identity():
    """Hash function returning its key (probe start = key mod capacity)."""
    return lambda key: key

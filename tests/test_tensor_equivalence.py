"""Tests for vectorized hashes and generator blocks against the scalar path."""

import random

import pytest
import torch

from microhash.benchmark.lcg import LCG32, LCG64, LCG64_NARROW, LinearCongruentialGenerator
from microhash.hashing import CATALOGUE
from microhash.hashing.tensor import TENSOR_HASHES, logical_right_shift, to_tensor, to_unsigned

EDGE_KEYS = [0, 1, 61, 69, 2**16, 2**31, 2**32 - 1, 2**32, 2**63 - 1, 2**63, 2**64 - 1]


@pytest.mark.parametrize("name", sorted(TENSOR_HASHES))
def test_tensor_hash_bit_exact(name):
    """Test that tensor hashes match the scalar functions exactly."""
    spec = CATALOGUE[name]
    rng = random.Random(42)
    keys = EDGE_KEYS + [rng.randint(0, 2**64 - 1) for _ in range(500)]

    scalar = [spec.fn(k) for k in keys]
    vectorized = to_unsigned(TENSOR_HASHES[name](to_tensor(keys)), spec.result_bits)

    assert vectorized == scalar, f"{name} tensor path differs from scalar path"


def test_logical_right_shift():
    """Test zero-fill shift of values with the top bit set."""
    x = to_tensor([2**64 - 1, 2**63])
    assert to_unsigned(logical_right_shift(x, 60)) == [0xF, 0x8]
    assert to_unsigned(logical_right_shift(x, 0)) == [2**64 - 1, 2**63]


def test_to_tensor_round_trip():
    values = [0, 2**32, 2**63, 2**64 - 1]
    t = to_tensor(values)
    assert t.dtype == torch.int64
    assert to_unsigned(t) == values


@pytest.mark.parametrize("params", [LCG32, LCG64, LCG64_NARROW])
def test_next_block_matches_next(params):
    """Test jump-ahead blocks reproduce the scalar sequence."""
    block_gen = LinearCongruentialGenerator(params, seed=6969)
    scalar_gen = LinearCongruentialGenerator(params, seed=6969)

    for n in (1, 100, 37):
        block = to_unsigned(block_gen.next_block(n), params.bits)
        expected = [scalar_gen.next() for _ in range(n)]
        assert block == expected
        assert block_gen.state == scalar_gen.state


def test_lcg_first_values():
    """Test the first step of each generator."""
    assert LinearCongruentialGenerator(LCG32, 6969).next() == (1664525 * 6969 + 1013904223) % 2**32
    assert LinearCongruentialGenerator(LCG64, 6969).next() == (
        6364136223846793005 * 6969 + 1442695040888963407
    ) % 2**64
    # narrow state keeps only the low 32 bits of the 64-bit step
    assert LinearCongruentialGenerator(LCG64_NARROW, 6969).next() == (
        6364136223846793005 * 6969 + 1442695040888963407
    ) % 2**32


def test_next_block_rejects_empty():
    gen = LinearCongruentialGenerator(LCG32, seed=1)
    with pytest.raises(ValueError):
        gen.next_block(0)


@pytest.mark.skipif(not torch.cuda.is_available(), reason="CUDA not available")
def test_tensor_hash_cpu_gpu_equivalence():
    """Test CPU and GPU produce identical hashes."""
    keys = EDGE_KEYS + list(range(1000))
    for name, fn in TENSOR_HASHES.items():
        cpu = fn(to_tensor(keys))
        gpu = fn(to_tensor(keys, device=torch.device("cuda")))
        assert torch.equal(cpu, gpu.cpu()), name

"""Test integer hash functions against fixed outputs."""

import pytest

from microhash.hashing import int32_rob, int32_wang, int32_wang2, int64_wang, int6432_wang

# (key, int32_wang, int32_wang2, int32_rob, int64_wang, int6432_wang)
KNOWN = [
    (0, 3232319850, 3399731875, 1800329511, 8633297058295171728, 720020139),
    (1, 663891101, 316017654, 3028713910, 6614235796240398542, 357654460),
    (69, 1996054380, 997652134, 3520986216, 13850554458354621012, 3203181446),
    (0xFFFFFFFF, 1895078355, 3176528920, 4268016002, 3951248609533570916, 4204653761),
]


@pytest.mark.parametrize("key,wang,wang2,rob,w64,w6432", KNOWN)
def test_known_outputs(key, wang, wang2, rob, w64, w6432):
    """Test bit-exact outputs for fixed keys."""
    assert int32_wang(key) == wang
    assert int32_wang2(key) == wang2
    assert int32_rob(key) == rob
    assert int64_wang(key) == w64
    assert int6432_wang(key) == w6432


def test_int32_wang_69():
    """The documented example: hashing 69 with int32_wang."""
    assert int32_wang(69) == 1996054380


def test_64bit_max_key():
    """Test all-ones 64-bit key."""
    assert int64_wang(0xFFFFFFFFFFFFFFFF) == 2272383144869939092
    assert int6432_wang(0xFFFFFFFFFFFFFFFF) == 532412650


def test_determinism():
    """Test that repeated calls give the same hash."""
    for fn in (int32_wang, int32_wang2, int32_rob, int64_wang, int6432_wang):
        assert fn(123456789) == fn(123456789)


@pytest.mark.parametrize("fn", [int32_wang, int32_wang2, int32_rob, int6432_wang])
def test_32bit_range(fn):
    """Test 32-bit results stay in [0, 2^32)."""
    for key in (0, 1, 2**31, 2**32 - 1, 2**63, 2**64 - 1):
        assert 0 <= fn(key) < 2**32


def test_64bit_range():
    """Test int64_wang results stay in [0, 2^64)."""
    for key in (0, 1, 2**32, 2**63, 2**64 - 1):
        assert 0 <= int64_wang(key) < 2**64


def test_32bit_hashes_truncate_wide_keys():
    """Keys wider than 32 bits are reduced to their low 32 bits."""
    assert int32_wang(2**32 + 69) == int32_wang(69)
    assert int32_rob(2**40 + 1) == int32_rob(1)
    assert int32_wang2(-1) == int32_wang2(0xFFFFFFFF)

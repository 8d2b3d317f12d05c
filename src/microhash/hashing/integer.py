"""Integer hash functions.

Avalanche mixers built from shift/xor/multiply/add sequences. Each function
takes one unsigned integer and returns one unsigned integer of a fixed width.
Inputs wider than the key width are truncated first, so every function is
defined for every Python int.

Credits: Thomas Wang (int32_wang, int32_wang2, int64_wang, int6432_wang),
Robert Jenkins (int32_rob).
"""

from microhash.hashing.mix import u32, u64


def int32_wang(a: int) -> int:
    """Thomas Wang's 32-bit multiplicative mix.

    Args:
        a: 32-bit key

    Returns:
        32-bit hash

    Example:
        >>> int32_wang(69)
        1996054380
    """
    a = u32(a)
    a = (a ^ 61) ^ (a >> 16)
    a = u32(a + (a << 3))
    a = a ^ (a >> 4)
    a = u32(a * 0x27D4EB2D)
    a = a ^ (a >> 15)
    return a


def int32_wang2(key: int) -> int:
    """Thomas Wang's 32-bit shift mix (the multiply is key * 2057)."""
    key = u32(key)
    key = u32(~key + (key << 15))  # (key << 15) - key - 1
    key = key ^ (key >> 12)
    key = u32(key + (key << 2))
    key = key ^ (key >> 4)
    key = u32(key * 2057)
    key = key ^ (key >> 16)
    return key


def int32_rob(a: int) -> int:
    """Robert Jenkins' six-step 32-bit integer hash."""
    a = u32(a)
    a = u32((a + 0x7ED55D16) + (a << 12))
    a = (a ^ 0xC761C23C) ^ (a >> 19)
    a = u32((a + 0x165667B1) + (a << 5))
    a = u32((a + 0xD3A2646C) ^ (a << 9))
    a = u32((a + 0xFD7046C5) + (a << 3))
    a = (a ^ 0xB55A4F09) ^ (a >> 16)
    return a


def int64_wang(key: int) -> int:
    """Thomas Wang's 64-bit to 64-bit mix.

    Args:
        key: 64-bit key

    Returns:
        64-bit hash
    """
    key = u64(key)
    key = u64(~key + (key << 21))  # (key << 21) - key - 1
    key = key ^ (key >> 24)
    key = u64((key + (key << 3)) + (key << 8))  # key * 265
    key = key ^ (key >> 14)
    key = u64((key + (key << 2)) + (key << 4))  # key * 21
    key = key ^ (key >> 28)
    key = u64(key + (key << 31))
    return key


def int6432_wang(key: int) -> int:
    """Thomas Wang's 64-bit to 32-bit mix.

    The whole sequence runs in 64 bits; only the final value is narrowed.
    """
    key = u64(key)
    key = u64(~key + (key << 18))  # (key << 18) - key - 1
    key = key ^ (key >> 31)
    key = u64(key * 21)
    key = key ^ (key >> 11)
    key = u64(key + (key << 6))
    key = key ^ (key >> 22)
    return u32(key)

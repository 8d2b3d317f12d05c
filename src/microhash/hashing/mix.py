"""Fixed-width integer helpers.

Python ints are unbounded, so every hash step is masked back into the
unsigned 32- or 64-bit domain. All helpers are pure and platform-independent.
"""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def u32(x: int) -> int:
    """Force integer into unsigned 32-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 32-bit integer (value modulo 2^32)
    """
    return x & MASK32


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 64-bit integer (value modulo 2^64)
    """
    return x & MASK64


def rotl64(x: int, n: int) -> int:
    """Rotate a 64-bit value left by n bits (0 < n < 64)."""
    x = u64(x)
    return u64((x << n) | (x >> (64 - n)))


def rotr64(x: int, n: int) -> int:
    """Rotate a 64-bit value right by n bits (0 < n < 64)."""
    x = u64(x)
    return u64((x >> n) | (x << (64 - n)))


def u64_to_i64(x: int) -> int:
    """Reinterpret an unsigned 64-bit value as two's complement int64.

    Needed when handing uint64 constants to torch.int64 tensors.
    """
    x = u64(x)
    return x - (1 << 64) if x >= (1 << 63) else x

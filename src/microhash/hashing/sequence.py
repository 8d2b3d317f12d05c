"""Byte-sequence and string hash functions.

Byte hashes consume the whole buffer, including NUL bytes. String hashes
treat their input as a null-terminated string: hashing stops at the first
NUL byte or at the end of the input, whichever comes first. ``str`` input is
encoded as UTF-8 before hashing.
"""

from typing import Union

from microhash.hashing.mix import rotl64, rotr64, u32, u64

BytesLike = Union[bytes, bytearray, memoryview]
StrLike = Union[str, bytes, bytearray, memoryview]


def _as_bytes(data: StrLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _c_string(data: StrLike) -> bytes:
    """Return the bytes up to (not including) the first NUL."""
    raw = _as_bytes(data)
    end = raw.find(b"\x00")
    return raw if end < 0 else raw[:end]


def bytes_curl(data: BytesLike) -> int:
    """64-bit hash used by curl's hash tables.

    Bytes >= 0x80 are sign-extended before being mixed in, matching a
    signed-char reading of the buffer.

    Args:
        data: Buffer to hash (may be empty)

    Returns:
        64-bit hash; 5381 for an empty buffer
    """
    h = 5381
    for byte in _as_bytes(data):
        j = byte if byte < 0x80 else u64(byte - 0x100)
        h = u64(h + (h << 5))
        h ^= j
    return h


def bytes_jenkins(data: BytesLike) -> int:
    """Jenkins one-at-a-time hash.

    Args:
        data: Buffer to hash (may be empty)

    Returns:
        32-bit hash; 0 for an empty buffer

    Example:
        >>> hex(bytes_jenkins(b"a"))
        '0xca2e9442'
    """
    h = 0
    for byte in _as_bytes(data):
        h = u32(h + byte)
        h = u32(h + (h << 10))
        h ^= h >> 6
    h = u32(h + (h << 3))
    h ^= h >> 11
    h = u32(h + (h << 15))
    return h


def str_stb(data: StrLike, seed: int = 0) -> int:
    """String hash from stb_ds.

    Rotate-accumulates every character into ``seed`` and finishes with a
    Wang-style 64-bit mix that re-uses the seed.

    Args:
        data: String to hash
        seed: 64-bit seed

    Returns:
        64-bit hash
    """
    seed = u64(seed)
    h = seed
    for c in _c_string(data):
        h = u64(rotl64(h, 9) + c)

    h ^= seed
    h = u64(~h + (h << 18))
    h = rotr64(h, 31)
    h = u64(h * 21)
    h = rotr64(h, 11)
    h = u64(h + (h << 6))
    h ^= rotr64(h, 22)
    return u64(h + seed)


def str_djb2(data: StrLike) -> int:
    """Dan Bernstein's djb2: ``hash * 33 + c`` seeded with 5381.

    Example:
        >>> str_djb2("hello")
        210714636441
    """
    h = 5381
    for c in _c_string(data):
        h = u64((h << 5) + h + c)
    return h


def str_sdbm(data: StrLike) -> int:
    """sdbm hash, the gawk form of ``hash * 65599 + c``."""
    h = 0
    for c in _c_string(data):
        h = u64(c + (h << 6) + (h << 16) - h)
    return h

"""Hash functions for microhash."""

from .base import HashFunction, HashSpec
from .catalogue import CATALOGUE, INTEGER_HASHES, get_hash
from .integer import int32_rob, int32_wang, int32_wang2, int64_wang, int6432_wang
from .sequence import bytes_curl, bytes_jenkins, str_djb2, str_sdbm, str_stb

__all__ = [
    "HashFunction",
    "HashSpec",
    "CATALOGUE",
    "INTEGER_HASHES",
    "get_hash",
    # Integer
    "int32_wang",
    "int32_wang2",
    "int32_rob",
    "int64_wang",
    "int6432_wang",
    # Bytes
    "bytes_curl",
    "bytes_jenkins",
    # Strings
    "str_stb",
    "str_djb2",
    "str_sdbm",
]

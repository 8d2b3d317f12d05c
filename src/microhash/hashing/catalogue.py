"""Catalogue of the available hash functions."""

from typing import Dict, List

from microhash.hashing.base import HashSpec
from microhash.hashing.integer import (
    int32_rob,
    int32_wang,
    int32_wang2,
    int64_wang,
    int6432_wang,
)
from microhash.hashing.sequence import (
    bytes_curl,
    bytes_jenkins,
    str_djb2,
    str_sdbm,
    str_stb,
)

CATALOGUE: Dict[str, HashSpec] = {
    spec.name: spec
    for spec in (
        HashSpec("int32_wang", int32_wang, "int", 32, 32),
        HashSpec("int32_wang2", int32_wang2, "int", 32, 32),
        HashSpec("int32_rob", int32_rob, "int", 32, 32),
        HashSpec("int64_wang", int64_wang, "int", 64, 64),
        HashSpec("int6432_wang", int6432_wang, "int", 64, 32),
        HashSpec("bytes_curl", bytes_curl, "bytes", 0, 64),
        HashSpec("bytes_jenkins", bytes_jenkins, "bytes", 0, 32),
        HashSpec("str_stb", str_stb, "str", 0, 64),
        HashSpec("str_djb2", str_djb2, "str", 0, 64),
        HashSpec("str_sdbm", str_sdbm, "str", 0, 64),
    )
}

INTEGER_HASHES: List[str] = [
    name for name, spec in CATALOGUE.items() if spec.kind == "int"
]


def get_hash(name: str) -> HashSpec:
    """Look up a catalogue entry by name.

    Raises:
        KeyError: If no hash function has that name
    """
    if name not in CATALOGUE:
        raise KeyError(
            f"Unknown hash function {name!r}; available: {sorted(CATALOGUE)}"
        )
    return CATALOGUE[name]

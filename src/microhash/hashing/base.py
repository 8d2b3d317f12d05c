"""Base hash function interface."""

from dataclasses import dataclass
from typing import Any, Protocol


class HashFunction(Protocol):
    """
    Protocol for the hash functions in the catalogue.

    A hash function is a pure mapping from a key to an unsigned integer.
    It holds no state and never fails for a key of the right kind.
    """

    def __call__(self, key: Any) -> int:
        ...


@dataclass(frozen=True)
class HashSpec:
    """Catalogue entry describing one hash function.

    Attributes:
        name: Public name (e.g. "int32_wang")
        fn: The hash function itself
        kind: Key kind: "int", "bytes" or "str"
        key_bits: Key width for integer hashes, 0 for sequence hashes
        result_bits: Width of the returned hash (32 or 64)
    """

    name: str
    fn: HashFunction
    kind: str
    key_bits: int
    result_bits: int

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.kind not in ("int", "bytes", "str"):
            raise ValueError(f"kind must be 'int', 'bytes' or 'str', got {self.kind}")
        if self.result_bits not in (32, 64):
            raise ValueError(f"result_bits must be 32 or 64, got {self.result_bits}")
        if self.kind == "int" and self.key_bits not in (32, 64):
            raise ValueError(f"key_bits must be 32 or 64, got {self.key_bits}")

    def __call__(self, key: Any) -> int:
        return self.fn(key)

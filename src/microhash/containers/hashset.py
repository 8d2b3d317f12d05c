"""Open-addressing hash set.

Elements live directly in a backing list; a parallel ``bytearray`` records
the state of each slot. Collisions are resolved by linear probing starting at
``hash(key) & (capacity - 1)``. Removal leaves a tombstone (DELETED) that
keeps later probe chains intact and is reused by the next insert that passes
over it. Tombstones are only discarded when the table grows.
"""

import operator
from enum import IntEnum
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from microhash.config import HashSetConfig

T = TypeVar("T")


class SlotState(IntEnum):
    EMPTY = 0
    USED = 1
    DELETED = 2


_EMPTY = SlotState.EMPTY
_USED = SlotState.USED
_DELETED = SlotState.DELETED


class TableFullError(RuntimeError):
    """A probe cycled through every slot without finding room.

    The load-factor guard makes this unreachable; seeing it means the table
    invariants were broken.
    """


class OpenAddressingSet(Generic[T]):
    """Resizable set of unique elements with linear probing and tombstones.

    Not thread-safe: each instance must be used from a single thread.

    Example:
        >>> s = OpenAddressingSet(hash_fn=int32_wang)
        >>> s.insert(42)
        True
        >>> s.insert(42)
        False
        >>> s.remove(42), s.contains(42)
        (True, False)
    """

    def __init__(
        self,
        hash_fn: Callable[[T], int],
        eq_fn: Callable[[T, T], bool] = operator.eq,
        config: Optional[HashSetConfig] = None,
    ) -> None:
        """Initialize the set.

        Args:
            hash_fn: Maps an element to a non-negative integer
            eq_fn: Equality predicate between two elements
            config: Capacity and load-factor settings (defaults: 16, 0.7)
        """
        self.hash_fn = hash_fn
        self.eq_fn = eq_fn
        self.config = config if config is not None else HashSetConfig()

        self._data: Optional[List[Optional[T]]] = None
        self._state: Optional[bytearray] = None
        self.size = 0
        self.capacity = 0
        self.init()

    def init(self) -> None:
        """Allocate empty storage at the initial capacity, dropping any contents."""
        self._allocate(self.config.initial_capacity)

    def free(self) -> None:
        """Release the backing storage.

        The set is unusable afterwards until init() is called again.
        """
        self._data = None
        self._state = None
        self.size = 0
        self.capacity = 0

    def _allocate(self, capacity: int) -> None:
        self._data = [None] * capacity
        self._state = bytearray(capacity)
        self.size = 0
        self.capacity = capacity

    def _check_alive(self) -> None:
        if self._state is None:
            raise RuntimeError("OpenAddressingSet used after free(); call init() first")

    def _probe(self, key: T) -> Tuple[int, int]:
        """Walk the probe sequence for key.

        Returns:
            (match, free) where match is the index of the USED slot equal to
            key (or -1) and free is the first reusable slot on the path, a
            tombstone if one was passed, else the terminating EMPTY slot
            (or -1 if the table has neither).
        """
        state = self._state
        data = self._data
        mask = self.capacity - 1
        start = idx = self.hash_fn(key) & mask
        tombstone = -1

        while True:
            slot = state[idx]
            if slot == _EMPTY:
                return -1, (tombstone if tombstone >= 0 else idx)
            if slot == _USED:
                if self.eq_fn(data[idx], key):
                    return idx, -1
            elif tombstone < 0:
                tombstone = idx
            idx = (idx + 1) & mask
            if idx == start:
                return -1, tombstone

    def _resize(self, new_capacity: int) -> None:
        """Rehash every USED element into fresh storage of new_capacity.

        Tombstones are not carried over; size is unchanged.
        """
        old_data = self._data
        old_state = self._state
        self._allocate(new_capacity)

        for i, slot in enumerate(old_state):
            if slot == _USED:
                value = old_data[i]
                _, free = self._probe(value)
                self._data[free] = value
                self._state[free] = _USED
                self.size += 1

    def insert(self, key: T) -> bool:
        """Add key if no equal element is present.

        Grows the table first when storing key would push the load factor
        above the configured maximum, doubling as many times as that takes.

        Returns:
            True if key was added, False if an equal element already exists

        Raises:
            TableFullError: If no slot is available (invariant violation)
        """
        self._check_alive()
        match, free = self._probe(key)
        if match >= 0:
            return False

        new_capacity = self.capacity
        while (self.size + 1) / new_capacity > self.config.max_load_factor:
            new_capacity *= 2
        if new_capacity != self.capacity:
            self._resize(new_capacity)
            _, free = self._probe(key)

        if free < 0:
            raise TableFullError(
                f"no free slot for key among {self.capacity} slots (size={self.size})"
            )

        self._data[free] = key
        self._state[free] = _USED
        self.size += 1
        return True

    def contains(self, key: T) -> bool:
        """Return True iff an element equal to key is stored."""
        self._check_alive()
        match, _ = self._probe(key)
        return match >= 0

    def remove(self, key: T) -> bool:
        """Remove the element equal to key, leaving a tombstone.

        Returns:
            True if an element was removed, False if none was present
        """
        self._check_alive()
        match, _ = self._probe(key)
        if match < 0:
            return False
        self._state[match] = _DELETED
        self._data[match] = None
        self.size -= 1
        return True

    @property
    def load_factor(self) -> float:
        if self.capacity == 0:
            return 0.0
        return self.size / self.capacity

    @property
    def tombstones(self) -> int:
        """Number of DELETED slots waiting for reuse or the next resize."""
        if self._state is None:
            return 0
        return self._state.count(_DELETED)

    def slot_state(self, index: int) -> SlotState:
        """State of the slot at index (for diagnostics and tests)."""
        self._check_alive()
        return SlotState(self._state[index])

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[T]:
        self._check_alive()
        state = self._state
        for i, value in enumerate(self._data):
            if state[i] == _USED:
                yield value

    def __enter__(self) -> "OpenAddressingSet[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.free()

    def __repr__(self) -> str:
        return (
            f"OpenAddressingSet(size={self.size}, capacity={self.capacity}, "
            f"tombstones={self.tombstones})"
        )

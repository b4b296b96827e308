"""
Dynamic array implementation of Sequence.

Elements live contiguously in a backing store whose capacity grows
geometrically, giving amortized O(1) appends and O(1) indexed access.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ordseq.interfaces.sequence import Sequence
from ordseq.models.ordering import OrderingPolicy

logger = logging.getLogger(__name__)


class DynamicArraySequence(Sequence):
    """
    Array-backed Sequence.

    Invariants maintained:
    1. 0 <= size <= capacity
    2. Elements occupy slots [0, size) with no gaps; slots [size, capacity)
       hold None
    3. Capacity only grows, except on an explicit compact()
    """

    # Capacity of a new, empty sequence
    DEFAULT_INITIAL_CAPACITY = 10

    # Capacity multiplier applied when the store is full
    DEFAULT_GROWTH_FACTOR = 1.5

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        growth_factor: float = DEFAULT_GROWTH_FACTOR,
    ) -> None:
        """
        Initialize the sequence.

        Args:
            source: Optional elements to copy in. The source is copied, never
                    aliased.
            initial_capacity: Starting capacity. Raised to len(source) if the
                              source is larger.
            growth_factor: Multiplier applied to the capacity when it is
                           exhausted. Must be greater than 1.
        """
        if initial_capacity < 0:
            raise ValueError(f"initial_capacity must be >= 0, got {initial_capacity}")
        if growth_factor <= 1:
            raise ValueError(f"growth_factor must be > 1, got {growth_factor}")

        super().__init__()
        items = list(source) if source is not None else []
        capacity = max(initial_capacity, len(items))

        self._store: list[Any] = items + [None] * (capacity - len(items))
        self._size: int = len(items)
        self._growth_factor = growth_factor

    @property
    def capacity(self) -> int:
        return len(self._store)

    def size(self) -> int:
        return self._size

    def get(self, index: int) -> Any:
        """Return the element at index. O(1)"""
        self._check_element_index(index)
        return self._store[index]

    def set(self, index: int, value: Any) -> Any:
        """Replace the element at index, returning the old one. O(1)"""
        self._check_element_index(index)
        old_value = self._store[index]
        self._store[index] = value
        return old_value

    def append(self, value: Any) -> None:
        """Add value at the end. Amortized O(1)"""
        if self._size == self.capacity:
            self._grow(self._size + 1)

        self._store[self._size] = value
        self._size += 1
        self._mod_count += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert value at index, shifting [index, size) right. O(size - index)"""
        self._check_position_index(index)
        if self._size == self.capacity:
            self._grow(self._size + 1)

        self._store[index + 1 : self._size + 1] = self._store[index : self._size]
        self._store[index] = value
        self._size += 1
        self._mod_count += 1

    def remove_at(self, index: int) -> Any:
        """Remove the element at index, shifting [index + 1, size) left. O(size - index)"""
        self._check_element_index(index)
        value = self._store[index]

        self._store[index : self._size - 1] = self._store[index + 1 : self._size]
        self._size -= 1
        self._store[self._size] = None
        self._mod_count += 1
        return value

    def remove_first_value(self, value: Any) -> bool:
        """Remove the first element equal to value. O(size)"""
        for index in range(self._size):
            if self._store[index] == value:
                self.remove_at(index)
                return True
        return False

    def remove_all_matching(self, predicate: Callable[[Any], bool]) -> int:
        """Remove every element satisfying predicate. O(size)"""
        survivors = [value for value in self._store[: self._size] if not predicate(value)]
        removed = self._size - len(survivors)
        if removed == 0:
            return 0

        self._store[: len(survivors)] = survivors
        self._store[len(survivors) : self._size] = [None] * removed
        self._size = len(survivors)
        self._mod_count += 1
        return removed

    def sort_with(self, policy: OrderingPolicy) -> None:
        """Stable sort using policy. O(N log N)"""
        # sorted() is stable and leaves the store untouched if the policy raises
        ordered = sorted(self._store[: self._size], key=policy.sort_key())
        self._store[: self._size] = ordered
        self._mod_count += 1

    def clear(self) -> None:
        """Remove every element, keeping the current capacity."""
        self._store[: self._size] = [None] * self._size
        self._size = 0
        self._mod_count += 1

    def ensure_capacity(self, min_capacity: int) -> None:
        """Grow the store so it can hold at least min_capacity elements."""
        if min_capacity > self.capacity:
            self._grow(min_capacity)

    def compact(self) -> None:
        """Shrink the capacity to the current size."""
        if self.capacity == self._size:
            return

        logger.debug("Compacting store from capacity %d to %d", self.capacity, self._size)
        self._store = self._store[: self._size]

    def iterator(self, start: int | None = None, end: int | None = None) -> Iterator[Any]:
        start, end = self._resolve_range(start, end)
        return _RangeIterator(self, start, end)

    def __reversed__(self) -> Iterator[Any]:
        return _ReverseIterator(self)

    def _grow(self, min_capacity: int) -> None:
        """Move the elements into a larger store."""
        new_capacity = max(min_capacity, int(self.capacity * self._growth_factor))
        logger.debug("Growing store from capacity %d to %d", self.capacity, new_capacity)

        new_store: list[Any] = [None] * new_capacity
        new_store[: self._size] = self._store[: self._size]
        self._store = new_store


class _RangeIterator(Iterator[Any]):
    """Fail-fast iterator over a slot range of a DynamicArraySequence."""

    def __init__(self, sequence: DynamicArraySequence, start: int, end: int) -> None:
        self._sequence = sequence
        self._index = start
        self._end = end
        self._expected_mod_count = sequence._mod_count

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        self._sequence._check_not_modified(self._expected_mod_count)
        if self._index >= self._end:
            raise StopIteration

        value = self._sequence._store[self._index]
        self._index += 1
        return value


class _ReverseIterator(Iterator[Any]):
    """Fail-fast iterator over a DynamicArraySequence from the last slot to the first."""

    def __init__(self, sequence: DynamicArraySequence) -> None:
        self._sequence = sequence
        self._index = sequence._size - 1
        self._expected_mod_count = sequence._mod_count

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        self._sequence._check_not_modified(self._expected_mod_count)
        if self._index < 0:
            raise StopIteration

        value = self._sequence._store[self._index]
        self._index -= 1
        return value

"""
Sequence abstract base class shared by the array-backed and linked containers.
"""

from abc import abstractmethod
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

from ordseq.interfaces.range_iterable import RangeIterable
from ordseq.models.exceptions import IndexOutOfRangeError, InvalidCursorStateError
from ordseq.models.ordering import OrderingPolicy


class Sequence(RangeIterable):
    """
    Abstract base class for ordered, index-addressable containers.

    Indices are zero-based and never negative. Insertion accepts positions in
    [0, size]; every other indexed operation accepts [0, size). Any
    operation that fails leaves the container exactly as it was.

    Iterators are fail-fast: a structural modification (anything that adds,
    removes or reorders elements) made while an iterator is live causes the
    iterator's next step to raise InvalidCursorStateError.

    Implementations:
    - DynamicArraySequence: contiguous backing store, O(1) indexed access
    - LinkedSequence: doubly linked nodes, O(1) head/tail operations
    """

    def __init__(self) -> None:
        # Bumped on every structural modification; iterators compare against it
        self._mod_count: int = 0

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of elements.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def get(self, index: int) -> Any:
        """
        Return the element at ``index``.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size).
        """
        pass

    @abstractmethod
    def set(self, index: int, value: Any) -> Any:
        """
        Replace the element at ``index`` and return the previous one.

        Not a structural modification.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size).
        """
        pass

    @abstractmethod
    def append(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        pass

    @abstractmethod
    def insert_at(self, index: int, value: Any) -> None:
        """
        Insert ``value`` so that it ends up at ``index``.

        Elements previously at [index, size) move one position right.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size].
        """
        pass

    @abstractmethod
    def remove_at(self, index: int) -> Any:
        """
        Remove and return the element at ``index``.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size).
        """
        pass

    @abstractmethod
    def remove_first_value(self, value: Any) -> bool:
        """
        Remove the first element equal to ``value``.

        Returns:
            True if an element was found and removed, False otherwise.
        """
        pass

    @abstractmethod
    def remove_all_matching(self, predicate: Callable[[Any], bool]) -> int:
        """
        Remove every element satisfying ``predicate`` in a single pass.

        Survivors keep their relative order. The predicate is evaluated for
        every element before anything is removed, so a raising predicate
        leaves the container untouched.

        Returns:
            The number of elements removed.
        """
        pass

    @abstractmethod
    def sort_with(self, policy: OrderingPolicy) -> None:
        """
        Stable sort of the whole sequence using ``policy``.

        Elements the policy considers EQUAL keep their relative order. If the
        policy raises, the exception propagates and the order is unchanged.

        Time complexity: O(N log N)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""
        pass

    @abstractmethod
    def iterator(self, start: int | None = None, end: int | None = None) -> Iterator[Any]:
        pass

    @abstractmethod
    def __reversed__(self) -> Iterator[Any]:
        """Return a fail-fast iterator from the last element to the first."""
        pass

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return self.size() == 0

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(
        self, start: int | None = None, end: int | None = None
    ) -> AsyncIterator[Any]:
        return _AsyncRangeIterator(self.iterator(start, end))

    def index_of(self, value: Any) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        for index, element in enumerate(self):
            if element == value:
                return index
        return -1

    def last_index_of(self, value: Any) -> int:
        """Return the index of the last element equal to ``value``, or -1."""
        found = -1
        for index, element in enumerate(self):
            if element == value:
                found = index
        return found

    def contains(self, value: Any) -> bool:
        return self.index_of(value) != -1

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def extend(self, values: Iterable[Any]) -> bool:
        """
        Append every element of ``values`` in order.

        Returns:
            True if at least one element was added.
        """
        # Materialise first so extending a sequence with itself terminates
        pending = list(values)
        for value in pending:
            self.append(value)
        return len(pending) > 0

    def remove_all_in(self, values: Iterable[Any]) -> bool:
        """
        Remove every element equal to any element of ``values``.

        Membership uses a hash set when the values are hashable and falls
        back to a linear scan otherwise (O(N * M)).

        Returns:
            True if at least one element was removed.
        """
        candidates = list(values)
        try:
            lookup = frozenset(candidates)
        except TypeError:
            lookup = None

        def _member(element: Any) -> bool:
            if lookup is not None:
                try:
                    return element in lookup
                except TypeError:
                    pass
            return element in candidates

        return self.remove_all_matching(_member) > 0

    def to_list(self) -> list[Any]:
        """Return the elements as a new Python list."""
        return list(self)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def _check_element_index(self, index: int) -> None:
        """Validate an index of an existing element, [0, size)."""
        if not 0 <= index < self.size():
            raise IndexOutOfRangeError(index, self.size())

    def _check_position_index(self, index: int) -> None:
        """Validate an insertion position, [0, size]."""
        if not 0 <= index <= self.size():
            raise IndexOutOfRangeError(index, self.size())

    def _resolve_range(self, start: int | None, end: int | None) -> tuple[int, int]:
        """Fill in defaults for a [start, end) range and validate it."""
        size = self.size()
        start = 0 if start is None else start
        end = size if end is None else end
        if not 0 <= start <= size:
            raise IndexOutOfRangeError(start, size)
        if not start <= end <= size:
            raise IndexOutOfRangeError(end, size)
        return start, end

    def _check_not_modified(self, expected_mod_count: int) -> None:
        if self._mod_count != expected_mod_count:
            raise InvalidCursorStateError("sequence was structurally modified during iteration")


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async view over a synchronous in-memory range iterator (no I/O)."""

    def __init__(self, source: Iterator[Any]) -> None:
        self._source = source

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._source)
        except StopIteration:
            raise StopAsyncIteration from None

"""
RangeIterable protocol for containers that support index-range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for containers that can be iterated over a range of positions.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all elements in index order."""
        pass

    @abstractmethod
    def iterator(self, start: int | None = None, end: int | None = None) -> Iterator[Any]:
        """
        Return an iterator over the elements at positions [start, end).

        Args:
            start: First index (inclusive). If None, starts from the beginning.
            end: Last index (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding elements in index order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all elements in index order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: int | None = None, end: int | None = None
    ) -> AsyncIterator[Any]:
        """
        Return an async iterator over the elements at positions [start, end).

        Args:
            start: First index (inclusive). If None, starts from the beginning.
            end: Last index (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding elements in index order.
        """
        pass

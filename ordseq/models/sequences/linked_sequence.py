"""
Doubly linked list implementation of Sequence.

Optimized for head/tail work and for removal during traversal through a
Cursor, at the cost of O(N) indexed access.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from ordseq.interfaces.sequence import Sequence
from ordseq.models.exceptions import (
    EmptySequenceError,
    IndexOutOfRangeError,
    InvalidCursorStateError,
)
from ordseq.models.ordering import OrderingPolicy

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """Node in a LinkedSequence. Owned exclusively by one sequence."""

    value: Any
    prev: "Node | None" = field(default=None, repr=False)
    next: "Node | None" = field(default=None, repr=False)


class LinkedSequence(Sequence):
    """
    Doubly linked implementation of Sequence.

    Properties maintained:
    1. head.prev and tail.next are None
    2. The chain is acyclic
    3. size equals the number of nodes reachable from head
    4. A node removed from the chain has both links cleared
    """

    def __init__(self, source: Iterable[Any] | None = None) -> None:
        super().__init__()
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size: int = 0

        if source is not None:
            for value in source:
                self._link_last(value)

    def size(self) -> int:
        return self._size

    def push_front(self, value: Any) -> None:
        """Add value before the head. O(1)"""
        self._link_first(value)

    def push_back(self, value: Any) -> None:
        """Add value after the tail. O(1)"""
        self._link_last(value)

    def append(self, value: Any) -> None:
        self._link_last(value)

    def pop_front(self) -> Any:
        """Remove and return the head value. O(1)"""
        if self._head is None:
            raise EmptySequenceError("pop_front")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the tail value. O(1)"""
        if self._tail is None:
            raise EmptySequenceError("pop_back")
        return self._unlink(self._tail)

    def peek_front(self) -> Any:
        if self._head is None:
            raise EmptySequenceError("peek_front")
        return self._head.value

    def peek_back(self) -> Any:
        if self._tail is None:
            raise EmptySequenceError("peek_back")
        return self._tail.value

    def get(self, index: int) -> Any:
        """Return the value at index. O(min(index, size - index))"""
        self._check_element_index(index)
        return self._node_at(index).value

    def set(self, index: int, value: Any) -> Any:
        """Replace the value at index, returning the old one. O(min(index, size - index))"""
        self._check_element_index(index)
        node = self._node_at(index)
        old_value = node.value
        node.value = value
        return old_value

    def insert_at(self, index: int, value: Any) -> None:
        """Insert value at index. O(min(index, size - index))"""
        self._check_position_index(index)
        if index == self._size:
            self._link_last(value)
        else:
            self._link_before(value, self._node_at(index))

    def remove_at(self, index: int) -> Any:
        """Remove and return the value at index. O(min(index, size - index))"""
        self._check_element_index(index)
        return self._unlink(self._node_at(index))

    def remove_first_value(self, value: Any) -> bool:
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return True
            node = node.next
        return False

    def remove_all_matching(self, predicate: Callable[[Any], bool]) -> int:
        """Remove every node whose value satisfies predicate. O(size)"""
        doomed = [node for node in self._nodes() if predicate(node.value)]
        for node in doomed:
            self._unlink(node)
        return len(doomed)

    def last_index_of(self, value: Any) -> int:
        """Walk backwards from the tail. O(size)"""
        index = self._size - 1
        node = self._tail
        while node is not None:
            if node.value == value:
                return index
            node = node.prev
            index -= 1
        return -1

    def sort_with(self, policy: OrderingPolicy) -> None:
        """
        Stable sort by relinking the existing nodes. O(N log N)

        No node is allocated or freed. The new order is computed in full
        before any link changes, so a raising policy leaves the chain intact.
        """
        sort_key = policy.sort_key()
        ordered = sorted(self._nodes(), key=lambda node: sort_key(node.value))

        prev: Node | None = None
        for node in ordered:
            node.prev = prev
            if prev is None:
                self._head = node
            else:
                prev.next = node
            prev = node

        if prev is not None:
            prev.next = None
        self._tail = prev
        self._mod_count += 1
        logger.debug("Relinked %d nodes in sorted order", self._size)

    def clear(self) -> None:
        for node in list(self._nodes()):
            node.prev = None
            node.next = None
        self._head = None
        self._tail = None
        self._size = 0
        self._mod_count += 1

    def open_cursor(self, index: int = 0) -> "Cursor":
        """
        Return a Cursor positioned just before the element at index.

        open_cursor() starts before the head; open_cursor(len(seq)) starts
        after the tail, ready for backward traversal.
        """
        self._check_position_index(index)
        return Cursor(self, index)

    def iterator(self, start: int | None = None, end: int | None = None) -> Iterator[Any]:
        start, end = self._resolve_range(start, end)
        first = self._node_at(start) if start < end else None
        return _RangeIterator(self, first, end - start)

    def __reversed__(self) -> Iterator[Any]:
        return _ReverseIterator(self)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        """Walk to the node at a valid index from whichever end is closer."""
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _link_first(self, value: Any) -> Node:
        node = Node(value=value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1
        self._mod_count += 1
        return node

    def _link_last(self, value: Any) -> Node:
        node = Node(value=value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        self._mod_count += 1
        return node

    def _link_before(self, value: Any, successor: Node) -> Node:
        predecessor = successor.prev
        node = Node(value=value, prev=predecessor, next=successor)
        successor.prev = node
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node
        self._size += 1
        self._mod_count += 1
        return node

    def _unlink(self, node: Node) -> Any:
        """Detach node from the chain and return its value. O(1)"""
        predecessor = node.prev
        successor = node.next

        if predecessor is None:
            self._head = successor
        else:
            predecessor.next = successor

        if successor is None:
            self._tail = predecessor
        else:
            successor.prev = predecessor

        node.prev = None
        node.next = None
        self._size -= 1
        self._mod_count += 1
        return node.value


class CursorState(IntEnum):
    """Lifecycle of a Cursor."""

    FRESH = 0  # No element returned since creation, removal or insertion
    AFTER_NEXT = 1
    AFTER_PREVIOUS = 2
    INVALID = 3  # Sequence modified through another path


class Cursor(Iterator[Any]):
    """
    Bidirectional traversal handle over a LinkedSequence.

    The cursor sits between two elements. next() and previous() step over an
    element and return it; remove_current() and set_current() act on the
    element most recently stepped over. Any structural modification of the
    sequence not made through this cursor invalidates it, after which every
    call raises InvalidCursorStateError.

    Also a Python iterator: ``for value in cursor`` walks forward and may
    call remove_current() inside the loop body.
    """

    def __init__(self, sequence: LinkedSequence, index: int) -> None:
        self._sequence = sequence
        self._next: Node | None = sequence._node_at(index) if index < sequence._size else None
        self._next_index = index
        self._last_returned: Node | None = None
        self._state = CursorState.FRESH
        self._expected_mod_count = sequence._mod_count

    @property
    def state(self) -> CursorState:
        if self._sequence._mod_count != self._expected_mod_count:
            self._invalidate()
        return self._state

    def has_next(self) -> bool:
        self._check_valid()
        return self._next_index < self._sequence._size

    def has_previous(self) -> bool:
        self._check_valid()
        return self._next_index > 0

    def next_index(self) -> int:
        """Index of the element next() would return (size at the end)."""
        self._check_valid()
        return self._next_index

    def previous_index(self) -> int:
        """Index of the element previous() would return (-1 at the start)."""
        self._check_valid()
        return self._next_index - 1

    def next(self) -> Any:
        """
        Advance over the next element and return it.

        Raises:
            IndexOutOfRangeError: If the cursor is already after the tail.
            InvalidCursorStateError: If the cursor has been invalidated.
        """
        if not self.has_next():
            raise IndexOutOfRangeError(self._next_index, self._sequence._size)

        node = self._next
        self._next = node.next
        self._next_index += 1
        self._last_returned = node
        self._state = CursorState.AFTER_NEXT
        return node.value

    def previous(self) -> Any:
        """
        Step back over the previous element and return it.

        Raises:
            IndexOutOfRangeError: If the cursor is already before the head.
            InvalidCursorStateError: If the cursor has been invalidated.
        """
        if not self.has_previous():
            raise IndexOutOfRangeError(self._next_index - 1, self._sequence._size)

        node = self._sequence._tail if self._next is None else self._next.prev
        self._next = node
        self._next_index -= 1
        self._last_returned = node
        self._state = CursorState.AFTER_PREVIOUS
        return node.value

    def remove_current(self) -> Any:
        """
        Remove the element last returned by next() or previous(). O(1)

        Returns:
            The removed value.

        Raises:
            InvalidCursorStateError: If no element has been stepped over since
                the cursor was opened, or since the last removal or insertion.
        """
        node = self._require_current("remove_current")
        successor = node.next

        self._sequence._unlink(node)
        if self._next is node:
            # Stepped over by previous(): the cursor now sits before the successor
            self._next = successor
        else:
            self._next_index -= 1

        self._last_returned = None
        self._state = CursorState.FRESH
        self._expected_mod_count = self._sequence._mod_count
        return node.value

    def set_current(self, value: Any) -> Any:
        """Replace the element last returned by next() or previous(), returning the old value."""
        node = self._require_current("set_current")
        old_value = node.value
        node.value = value
        return old_value

    def insert(self, value: Any) -> None:
        """
        Insert value at the cursor position.

        The new element is placed before whatever next() would return, so a
        following next() is unaffected and previous() returns the new value.
        """
        self._check_valid()
        if self._next is None:
            self._sequence._link_last(value)
        else:
            self._sequence._link_before(value, self._next)

        self._next_index += 1
        self._last_returned = None
        self._state = CursorState.FRESH
        self._expected_mod_count = self._sequence._mod_count

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def _check_valid(self) -> None:
        if self.state == CursorState.INVALID:
            raise InvalidCursorStateError("cursor invalidated by a modification made outside it")

    def _require_current(self, operation: str) -> Node:
        self._check_valid()
        if self._last_returned is None:
            raise InvalidCursorStateError(
                f"{operation}() requires a preceding next() or previous()"
            )
        return self._last_returned

    def _invalidate(self) -> None:
        self._state = CursorState.INVALID
        self._next = None
        self._last_returned = None


class _RangeIterator(Iterator[Any]):
    """Fail-fast iterator over a run of nodes in a LinkedSequence."""

    def __init__(self, sequence: LinkedSequence, first: Node | None, count: int) -> None:
        self._sequence = sequence
        self._node = first
        self._remaining = count
        self._expected_mod_count = sequence._mod_count

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        self._sequence._check_not_modified(self._expected_mod_count)
        if self._remaining == 0:
            raise StopIteration

        node = self._node
        self._node = node.next
        self._remaining -= 1
        return node.value


class _ReverseIterator(Iterator[Any]):
    """Fail-fast iterator walking a LinkedSequence from tail to head."""

    def __init__(self, sequence: LinkedSequence) -> None:
        self._sequence = sequence
        self._node = sequence._tail
        self._expected_mod_count = sequence._mod_count

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        self._sequence._check_not_modified(self._expected_mod_count)
        if self._node is None:
            raise StopIteration

        node = self._node
        self._node = node.prev
        return node.value

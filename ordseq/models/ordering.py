"""
Ordering policies: composable two-argument comparison functions.

A policy answers whether one element sorts before, alongside, or after
another. Policies are immutable; every combinator returns a new policy
wrapping the ones it was built from.
"""

from collections.abc import Callable
from enum import IntEnum
from functools import cmp_to_key
from typing import Any


class Ordering(IntEnum):
    """Result of comparing two elements."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, result: int) -> "Ordering":
        """Normalise any integer comparison result by its sign."""
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


class OrderingPolicy:
    """
    A total order over some element type.

    Wraps a callable ``fn(a, b)`` returning an Ordering or any int whose sign
    gives the result (the ``cmp`` convention). Exceptions raised by ``fn``
    propagate to the caller of ``compare`` and of any sort using the policy.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Any, Any], int]) -> None:
        self._fn = fn

    def compare(self, a: Any, b: Any) -> Ordering:
        """Compare two elements."""
        return Ordering.of(self._fn(a, b))

    def __call__(self, a: Any, b: Any) -> Ordering:
        return self.compare(a, b)

    def reversed(self) -> "OrderingPolicy":
        return reverse_order(self)

    def then_by(self, other: "OrderingPolicy") -> "OrderingPolicy":
        return then_by(self, other)

    def then_comparing(
        self, key: Callable[[Any], Any], policy: "OrderingPolicy | None" = None
    ) -> "OrderingPolicy":
        """Break ties by comparing ``key(element)``, optionally with ``policy``."""
        return then_by(self, comparing(key, policy))

    def nulls_first(self) -> "OrderingPolicy":
        return nulls_first(self)

    def nulls_last(self) -> "OrderingPolicy":
        return nulls_last(self)

    def sort_key(self) -> Callable[[Any], Any]:
        """Return a key wrapper usable with ``sorted()`` and ``list.sort()``."""
        return cmp_to_key(self.compare)


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


_NATURAL_ORDER = OrderingPolicy(_natural)


def natural_order() -> OrderingPolicy:
    """Order elements by their own ``<`` and ``>`` operators."""
    return _NATURAL_ORDER


def reverse_order(policy: OrderingPolicy | None = None) -> OrderingPolicy:
    """
    Reverse a policy.

    Args:
        policy: Policy to reverse. Defaults to natural order.

    Returns:
        A policy returning GREATER where ``policy`` returns LESS and vice versa.
    """
    inner = policy if policy is not None else _NATURAL_ORDER
    return OrderingPolicy(lambda a, b: inner.compare(a, b).reverse())


def comparing(
    key: Callable[[Any], Any], policy: OrderingPolicy | None = None
) -> OrderingPolicy:
    """
    Order elements by an extracted key.

    Args:
        key: Extracts the sort key from an element.
        policy: Policy applied to the extracted keys. Defaults to natural order.
    """
    inner = policy if policy is not None else _NATURAL_ORDER
    return OrderingPolicy(lambda a, b: inner.compare(key(a), key(b)))


def case_insensitive_order() -> OrderingPolicy:
    """Order strings ignoring case."""
    return comparing(str.casefold)


def then_by(first: OrderingPolicy, second: OrderingPolicy) -> OrderingPolicy:
    """
    Chain two policies: ``second`` decides only when ``first`` returns EQUAL.

    Sorting stably with the result yields a multi-key ordering.
    """

    def _compare(a: Any, b: Any) -> Ordering:
        result = first.compare(a, b)
        if result != Ordering.EQUAL:
            return result
        return second.compare(a, b)

    return OrderingPolicy(_compare)


def nulls_first(policy: OrderingPolicy) -> OrderingPolicy:
    """Treat None as less than any present value; present values use ``policy``."""

    def _compare(a: Any, b: Any) -> Ordering:
        if a is None:
            return Ordering.EQUAL if b is None else Ordering.LESS
        if b is None:
            return Ordering.GREATER
        return policy.compare(a, b)

    return OrderingPolicy(_compare)


def nulls_last(policy: OrderingPolicy) -> OrderingPolicy:
    """Treat None as greater than any present value; present values use ``policy``."""

    def _compare(a: Any, b: Any) -> Ordering:
        if a is None:
            return Ordering.EQUAL if b is None else Ordering.GREATER
        if b is None:
            return Ordering.LESS
        return policy.compare(a, b)

    return OrderingPolicy(_compare)

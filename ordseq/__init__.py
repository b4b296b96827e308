"""
Ordered sequence containers with pluggable ordering policies.

This package provides:
- OrderingPolicy - composable comparisons (reverse, then_by, nulls_first/last)
- DynamicArraySequence - amortized O(1) append, O(1) indexed access
- LinkedSequence - O(1) head/tail operations and Cursor-based removal
"""

from ordseq.models import (
    EmptySequenceError,
    IndexOutOfRangeError,
    InvalidCursorStateError,
    Ordering,
    OrderingPolicy,
    SequenceError,
    case_insensitive_order,
    comparing,
    natural_order,
    nulls_first,
    nulls_last,
    reverse_order,
    then_by,
)
from ordseq.models.sequences import Cursor, CursorState, DynamicArraySequence, LinkedSequence
from ordseq.interfaces import Sequence

__all__ = [
    "Cursor",
    "CursorState",
    "DynamicArraySequence",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "InvalidCursorStateError",
    "LinkedSequence",
    "Ordering",
    "OrderingPolicy",
    "Sequence",
    "SequenceError",
    "case_insensitive_order",
    "comparing",
    "natural_order",
    "nulls_first",
    "nulls_last",
    "reverse_order",
    "then_by",
]

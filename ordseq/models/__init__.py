"""
Data models for the container library.
"""

from ordseq.models.exceptions import (
    EmptySequenceError,
    IndexOutOfRangeError,
    InvalidCursorStateError,
    SequenceError,
)
from ordseq.models.ordering import (
    Ordering,
    OrderingPolicy,
    case_insensitive_order,
    comparing,
    natural_order,
    nulls_first,
    nulls_last,
    reverse_order,
    then_by,
)

__all__ = [
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "InvalidCursorStateError",
    "SequenceError",
    "Ordering",
    "OrderingPolicy",
    "case_insensitive_order",
    "comparing",
    "natural_order",
    "nulls_first",
    "nulls_last",
    "reverse_order",
    "then_by",
]

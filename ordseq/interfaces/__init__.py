"""
Abstract base classes for the sequence containers.
"""

from ordseq.interfaces.range_iterable import RangeIterable
from ordseq.interfaces.sequence import Sequence

__all__ = ["RangeIterable", "Sequence"]

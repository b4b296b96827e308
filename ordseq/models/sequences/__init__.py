"""
Sequence container implementations.
"""

from ordseq.models.sequences.dynamic_array import DynamicArraySequence
from ordseq.models.sequences.linked_sequence import Cursor, CursorState, LinkedSequence

__all__ = ["Cursor", "CursorState", "DynamicArraySequence", "LinkedSequence"]

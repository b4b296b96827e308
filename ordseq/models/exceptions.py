"""
Custom exceptions for the sequence containers.
"""


class SequenceError(Exception):
    """Base class for all container errors."""


class IndexOutOfRangeError(SequenceError, IndexError):
    """
    Raised when an index falls outside the valid bounds for an operation.

    Insertion accepts [0, size]; every other indexed operation accepts
    [0, size).
    """

    def __init__(self, index: int, size: int):
        """
        Initialize range error.

        Args:
            index: The offending index.
            size: Size of the container at the time of the call.
        """
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for sequence of size {size}")


class EmptySequenceError(SequenceError, LookupError):
    """Raised when a head/tail operation is attempted on an empty sequence."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() called on an empty sequence")


class InvalidCursorStateError(SequenceError, RuntimeError):
    """
    Raised when a cursor or iterator is misused.

    Covers removing before any move, removing twice without a move in
    between, and using a cursor after the sequence was structurally
    modified through another path.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)

"""Exception hierarchy for SeqWalk.

Every error raised by the library derives from SeqWalkError, and also from
the closest builtin exception so callers that already catch IndexError or
ValueError keep working.
"""

from typing import Any


class SeqWalkError(Exception):
    """Base class for all SeqWalk errors."""
    pass


class OutOfRangeError(SeqWalkError, IndexError):
    """Raised when a position is not a currently valid container index."""

    def __init__(self, position: Any, count: int):
        self.position = position
        self.count = count
        super().__init__(
            f"Position {position!r} out of range for container of {count} element(s)"
        )


class InvalidModeError(SeqWalkError, ValueError):
    """Raised when a traversal mode is outside the supported set."""

    def __init__(self, mode: Any, choices=None):
        self.mode = mode
        message = f"Unknown traversal mode: {mode!r}"
        if choices:
            message += f". Choose from: {', '.join(choices)}"
        super().__init__(message)


class TraversalExhaustedError(SeqWalkError, LookupError):
    """Raised when reading the current element of a finished traversal."""
    pass


class InvalidConfigError(SeqWalkError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass

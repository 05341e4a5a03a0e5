"""Configuration system for SeqWalk.

Defines the closed set of traversal modes and the dataclass users fill in
to describe a traversal: which direction, and how much of the sequence
to visit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .errors import InvalidModeError


class TraversalMode(Enum):
    """Direction in which a container is walked."""
    FORWARD = "forward"     # Insertion order
    REVERSE = "reverse"     # Reverse insertion order

    @classmethod
    def parse(cls, value: Union['TraversalMode', str]) -> 'TraversalMode':
        """Resolve a mode from an enum member or a (case-insensitive) name.

        Args:
            value: TraversalMode member or one of its names/aliases

        Returns:
            The matching TraversalMode

        Raises:
            InvalidModeError: If value does not name a supported mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            mode = _MODE_ALIASES.get(value.strip().lower())
            if mode is not None:
                return mode
        raise InvalidModeError(value, choices=sorted(_MODE_ALIASES))


_MODE_ALIASES = {
    'forward': TraversalMode.FORWARD,
    'fwd': TraversalMode.FORWARD,
    'normal': TraversalMode.FORWARD,
    'reverse': TraversalMode.REVERSE,
    'rev': TraversalMode.REVERSE,
}


@dataclass
class TraversalConfig:
    """Complete configuration for walking a container.

    Used by the high-level API. The traversal itself always visits the
    whole container; skip and max_items only trim what the API yields.
    """

    mode: TraversalMode = TraversalMode.FORWARD
    max_items: Optional[int] = None  # Stop after yielding this many
    skip: int = 0                    # Elements passed over before yielding

    @classmethod
    def forward(cls) -> 'TraversalConfig':
        """Config for a full walk in insertion order."""
        return cls(mode=TraversalMode.FORWARD)

    @classmethod
    def reverse(cls) -> 'TraversalConfig':
        """Config for a full walk in reverse insertion order."""
        return cls(mode=TraversalMode.REVERSE)

    @classmethod
    def head(cls, n: int) -> 'TraversalConfig':
        """Config yielding the first n elements.

        Args:
            n: Number of elements to yield

        Returns:
            TraversalConfig limited to the first n elements
        """
        return cls(mode=TraversalMode.FORWARD, max_items=n)

    @classmethod
    def tail(cls, n: int) -> 'TraversalConfig':
        """Config yielding the last n elements, newest first.

        Args:
            n: Number of elements to yield

        Returns:
            TraversalConfig limited to the last n elements
        """
        return cls(mode=TraversalMode.REVERSE, max_items=n)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, TraversalMode):
            errors.append(f"mode must be a TraversalMode, got {self.mode!r}")

        if self.max_items is not None:
            if isinstance(self.max_items, bool) or not isinstance(self.max_items, int):
                errors.append("max_items must be an integer")
            elif self.max_items < 0:
                errors.append("max_items cannot be negative")

        if isinstance(self.skip, bool) or not isinstance(self.skip, int):
            errors.append("skip must be an integer")
        elif self.skip < 0:
            errors.append("skip cannot be negative")

        return errors

"""Core abstractions for SeqWalk.

This module contains the container, the traversal contract with its
strategies, and the factory that selects among them.
"""

from ..errors import (
    SeqWalkError,
    OutOfRangeError,
    InvalidModeError,
    TraversalExhaustedError,
    InvalidConfigError,
)
from .container import OrderedContainer
from .traverser import (
    ABSENT,
    Absent,
    Traversal,
    StepTraversal,
    ForwardTraversal,
    ReverseTraversal,
)
from .factory import TraversalFactory, create_traversal

__all__ = [
    "SeqWalkError",
    "OutOfRangeError",
    "InvalidModeError",
    "TraversalExhaustedError",
    "InvalidConfigError",
    "OrderedContainer",
    "ABSENT",
    "Absent",
    "Traversal",
    "StepTraversal",
    "ForwardTraversal",
    "ReverseTraversal",
    "TraversalFactory",
    "create_traversal",
]

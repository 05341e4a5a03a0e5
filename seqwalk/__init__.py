"""SeqWalk - Ordered Sequence Traversal Library.

SeqWalk separates *what* is stored from *how* it is walked. An
OrderedContainer holds elements; a TraversalFactory hands out independent
cursors that visit them forward or in reverse.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from seqwalk import OrderedContainer, TraversalFactory, TraversalMode

    container = OrderedContainer(["A", "B", "C"])
    traversal = TraversalFactory().create(container, TraversalMode.REVERSE)

    element = traversal.first()
    while not traversal.is_done:
        print(element)
        element = traversal.next()
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SeqWalkError,
    OutOfRangeError,
    InvalidModeError,
    TraversalExhaustedError,
    InvalidConfigError,
)
from .config import TraversalConfig, TraversalMode
from .core import (
    ABSENT,
    Absent,
    OrderedContainer,
    Traversal,
    StepTraversal,
    ForwardTraversal,
    ReverseTraversal,
    TraversalFactory,
    create_traversal,
)
from .api import traverse, collect, visit_all, count_visited

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "SeqWalkError",
    "OutOfRangeError",
    "InvalidModeError",
    "TraversalExhaustedError",
    "InvalidConfigError",
    # Config
    "TraversalConfig",
    "TraversalMode",
    # Core
    "ABSENT",
    "Absent",
    "OrderedContainer",
    "Traversal",
    "StepTraversal",
    "ForwardTraversal",
    "ReverseTraversal",
    "TraversalFactory",
    "create_traversal",
    # API
    "traverse",
    "collect",
    "visit_all",
    "count_visited",
]

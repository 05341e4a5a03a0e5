"""Traversal factory for SeqWalk.

Selects and constructs the Traversal matching a requested TraversalMode.
Unknown modes are rejected; there is no fallback strategy.
"""

import logging
from typing import Any, Dict, List, Type

from ..config import TraversalMode
from .container import OrderedContainer, T
from ..errors import InvalidModeError
from .traverser import ForwardTraversal, ReverseTraversal, Traversal

logger = logging.getLogger(__name__)


class TraversalFactory:
    """Stateless factory mapping traversal modes to strategies.

    Example:
        >>> factory = TraversalFactory()
        >>> traversal = factory.create(container, TraversalMode.REVERSE)
    """

    _strategies: Dict[TraversalMode, Type[Traversal]] = {
        TraversalMode.FORWARD: ForwardTraversal,
        TraversalMode.REVERSE: ReverseTraversal,
    }

    def create(self, container: OrderedContainer[T], mode: Any) -> Traversal[T]:
        """Create a fresh traversal bound to a container.

        Args:
            container: Container to walk
            mode: TraversalMode member or mode name ("forward", "reverse", ...)

        Returns:
            New Traversal with its own cursor

        Raises:
            InvalidModeError: If mode is not a supported TraversalMode
        """
        resolved = TraversalMode.parse(mode)
        strategy = self._strategies.get(resolved)
        if strategy is None:
            raise InvalidModeError(mode, choices=[m.value for m in self._strategies])

        logger.debug("Creating %s over %r", strategy.__name__, container)
        return strategy(container)

    def available_modes(self) -> List[TraversalMode]:
        """Return the modes this factory can construct."""
        return list(self._strategies)


_default_factory = TraversalFactory()


def create_traversal(container: OrderedContainer[T], mode: Any = TraversalMode.FORWARD) -> Traversal[T]:
    """Create a traversal with the default factory.

    Args:
        container: Container to walk
        mode: TraversalMode member or mode name

    Returns:
        New Traversal instance

    Raises:
        InvalidModeError: If mode is not recognized
    """
    return _default_factory.create(container, mode)

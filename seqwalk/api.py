"""High-level API for SeqWalk.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the factory and step protocol for ease
of use in simple cases.
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, TypeVar

from .config import TraversalConfig, TraversalMode
from .core.container import OrderedContainer
from .core.factory import TraversalFactory
from .core.traverser import Traversal
from .errors import InvalidConfigError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def visit_all(traversal: Traversal[T], visitor: Callable[[T], Any]) -> int:
    """Drive a traversal through the canonical loop, calling visitor per element.

    The traversal is restarted with first(), so a partially consumed
    traversal is walked from the beginning.

    Args:
        traversal: Traversal to drive
        visitor: Callable invoked once with each element

    Returns:
        Number of elements visited
    """
    visited = 0
    element = traversal.first()
    while not traversal.is_done:
        visitor(element)
        visited += 1
        element = traversal.next()
    return visited


def traverse(
    container: OrderedContainer[T],
    mode: Any = TraversalMode.FORWARD,
    max_items: Optional[int] = None,
    skip: int = 0,
    config: Optional[TraversalConfig] = None,
    factory: Optional[TraversalFactory] = None,
) -> Iterator[T]:
    """Simple interface for walking a container.

    Args:
        container: Container to walk
        mode: TraversalMode member or mode name (ignored if config is given)
        max_items: Stop after yielding this many elements
        skip: Number of leading elements (in traversal order) to pass over
        config: Full configuration; overrides mode, max_items and skip
        factory: Factory used to build the traversal

    Yields:
        Elements in the configured order

    Raises:
        InvalidModeError: If mode is not recognized
        InvalidConfigError: If the configuration fails validation

    Example:
        >>> container = OrderedContainer(["A", "B", "C"])
        >>> list(traverse(container, "reverse"))
        ['C', 'B', 'A']
    """
    if config is None:
        config = TraversalConfig(
            mode=TraversalMode.parse(mode),
            max_items=max_items,
            skip=skip,
        )

    config_errors = config.validate()
    if config_errors:
        raise InvalidConfigError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )

    if factory is None:
        factory = TraversalFactory()
    traversal = factory.create(container, config.mode)

    return _walk(traversal, config)


def _walk(traversal: Traversal[T], config: TraversalConfig) -> Iterator[T]:
    """Generator half of traverse(), so validation errors raise eagerly."""
    yielded = 0
    skipped = 0
    element = traversal.first()
    while not traversal.is_done:
        if config.max_items is not None and yielded >= config.max_items:
            break
        if skipped < config.skip:
            skipped += 1
        else:
            yield element
            yielded += 1
        element = traversal.next()

    logger.debug("Traversal %s finished: %d yielded, %d skipped",
                 config.mode.value, yielded, skipped)


def collect(container: OrderedContainer[T], mode: Any = TraversalMode.FORWARD, **kwargs) -> List[T]:
    """Walk a container and return the elements as a list.

    Args:
        container: Container to walk
        mode: TraversalMode member or mode name
        **kwargs: Additional options (see traverse)

    Returns:
        List of elements in traversal order
    """
    return list(traverse(container, mode, **kwargs))


def count_visited(container: OrderedContainer[T], mode: Any = TraversalMode.FORWARD) -> int:
    """Count the elements a full traversal visits.

    Always equals container.count() when the container is not
    appended to during the walk.

    Args:
        container: Container to walk
        mode: TraversalMode member or mode name

    Returns:
        Number of elements visited
    """
    traversal = TraversalFactory().create(container, mode)
    return visit_all(traversal, lambda element: None)

"""Traversal strategies for SeqWalk.

A Traversal is a cursor over an OrderedContainer. It is driven with the
step protocol first()/next()/is_done/current:

    element = traversal.first()
    while not traversal.is_done:
        visit(element)
        element = traversal.next()

Forward and reverse walks differ only in where the cursor starts and which
way it moves, so both are expressed by a single StepTraversal.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Iterator, TypeVar, Union

from ..config import TraversalMode
from .container import OrderedContainer
from ..errors import TraversalExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Absent(Enum):
    """Marker type for "no element at the cursor"."""
    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


# Returned by first()/next() when the cursor sits on the completion boundary.
# Distinct from None so that None remains a legal element.
ABSENT = Absent.ABSENT


class Traversal(ABC, Generic[T]):
    """Abstract base class for traversal strategies.

    Traversals hold a non-owning reference to their container and a private
    cursor. Any number of traversals may walk the same container at once
    without affecting each other.
    """

    mode: TraversalMode

    def __init__(self, container: OrderedContainer[T]):
        """Initialize traversal with a container.

        Args:
            container: OrderedContainer to walk
        """
        self.container = container

    @abstractmethod
    def first(self) -> Union[T, Absent]:
        """Reset the cursor to the starting boundary.

        Returns:
            The element at the start, or ABSENT if the container is empty
        """
        pass

    @abstractmethod
    def next(self) -> Union[T, Absent]:
        """Advance the cursor one step.

        Returns:
            The element at the new position, or ABSENT once the walk is done
        """
        pass

    @property
    @abstractmethod
    def is_done(self) -> bool:
        """True once the cursor has reached the completion boundary."""
        pass

    @property
    @abstractmethod
    def current(self) -> T:
        """Element under the cursor.

        Raises:
            TraversalExhaustedError: If is_done is True
        """
        pass

    def __iter__(self) -> Iterator[T]:
        """Run the canonical loop from first(), yielding each element.

        Restarts the cursor, so iterating twice visits everything twice.
        """
        element = self.first()
        while not self.is_done:
            yield element
            element = self.next()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(container={self.container!r})"


class StepTraversal(Traversal[T]):
    """Traversal that moves a fixed step through positions.

    Subclasses only choose the direction. With step = +1 the walk starts at
    0 and completes at count(); with step = -1 it starts at count()-1 and
    completes at -1.
    """

    step: int = 1

    def __init__(self, container: OrderedContainer[T]):
        super().__init__(container)
        self._position = self._start_position()

    @property
    def position(self) -> int:
        """Raw cursor position, possibly equal to the completion boundary."""
        return self._position

    def _start_position(self) -> int:
        if self.step > 0:
            return 0
        return self.container.count() - 1

    def _element_or_absent(self) -> Union[T, Absent]:
        if self.is_done:
            return ABSENT
        return self.container.at(self._position)

    def first(self) -> Union[T, Absent]:
        self._position = self._start_position()
        return self._element_or_absent()

    def next(self) -> Union[T, Absent]:
        # Exhausted cursors stay on the boundary
        if self.is_done:
            return ABSENT

        self._position += self.step
        if self.is_done:
            logger.debug("%s reached completion boundary at position %d",
                         self.__class__.__name__, self._position)
        return self._element_or_absent()

    @property
    def is_done(self) -> bool:
        if self.step > 0:
            return self._position >= self.container.count()
        return self._position < 0

    @property
    def current(self) -> T:
        if self.is_done:
            raise TraversalExhaustedError(
                f"{self.__class__.__name__} is exhausted; check is_done before reading current"
            )
        return self.container.at(self._position)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(container={self.container!r}, "
                f"position={self._position})")


class ForwardTraversal(StepTraversal[T]):
    """Visits elements in insertion order."""
    mode = TraversalMode.FORWARD
    step = 1


class ReverseTraversal(StepTraversal[T]):
    """Visits elements in reverse insertion order."""
    mode = TraversalMode.REVERSE
    step = -1

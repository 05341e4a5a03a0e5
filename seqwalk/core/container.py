"""OrderedContainer abstraction for SeqWalk.

The container is intentionally kept simple - it owns the elements and
answers two questions: how many are there, and what sits at a position.
Traversal order lives in the Traversal strategies, never here.
"""

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar, TYPE_CHECKING

from ..errors import OutOfRangeError

if TYPE_CHECKING:
    from .factory import TraversalFactory
    from .traverser import Traversal

T = TypeVar('T')


class OrderedContainer(Generic[T]):
    """Append-only sequence with positional read access.

    Positions are contiguous integers 0..count()-1. The container never
    reorders its elements and is never mutated by a traversal.
    """

    def __init__(self, elements: Optional[Iterable[T]] = None):
        """Create a container, optionally seeded with elements.

        Args:
            elements: Initial elements, appended in iteration order
        """
        self._items: List[T] = []
        if elements is not None:
            for element in elements:
                self.append(element)

    def append(self, element: T) -> None:
        """Add an element at the end."""
        self._items.append(element)

    def count(self) -> int:
        """Return the current number of elements."""
        return len(self._items)

    def at(self, position: int) -> T:
        """Return the element at a position.

        Negative positions are rejected rather than counted from the end.

        Args:
            position: Index in the range 0 <= position < count()

        Returns:
            The element stored at position

        Raises:
            OutOfRangeError: If position is not a currently valid index
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise OutOfRangeError(position, len(self._items))
        if position < 0 or position >= len(self._items):
            raise OutOfRangeError(position, len(self._items))
        return self._items[position]

    def create_traversal(self, mode: Any = None,
                         factory: Optional['TraversalFactory'] = None) -> 'Traversal[T]':
        """Ask a factory for a traversal bound to this container.

        Args:
            mode: TraversalMode or mode name (defaults to forward)
            factory: Factory to delegate to (defaults to TraversalFactory())

        Returns:
            A fresh Traversal over this container
        """
        from .factory import TraversalFactory
        from ..config import TraversalMode

        if factory is None:
            factory = TraversalFactory()
        if mode is None:
            mode = TraversalMode.FORWARD
        return factory.create(self, mode)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate in insertion order through a forward traversal."""
        return iter(self.create_traversal())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(count={len(self._items)})"

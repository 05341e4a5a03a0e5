"""Test fixtures for SeqWalk consumers.

These fixtures make it easy to assert on what a traversal visited
without writing ad-hoc accumulator lambdas in every test.
"""

from typing import Any, Iterable, List

from ..core.container import OrderedContainer


class RecordingVisitor:
    """Visitor that remembers every element it was called with.

    Example:
        visitor = RecordingVisitor()
        visit_all(container.create_traversal("reverse"), visitor)
        assert visitor.visited == ["C", "B", "A"]
    """

    def __init__(self):
        self.visited: List[Any] = []

    def __call__(self, element: Any) -> None:
        self.visited.append(element)

    @property
    def call_count(self) -> int:
        return len(self.visited)

    def reset(self) -> None:
        self.visited.clear()


def make_container(elements: Iterable[Any]) -> OrderedContainer:
    """Build a container by appending elements one at a time."""
    container = OrderedContainer()
    for element in elements:
        container.append(element)
    return container

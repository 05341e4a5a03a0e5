"""Unit tests for traversal strategies.

Tests the step protocol (first/next/is_done/current) of the forward
and reverse strategies, focusing on ordering and boundary behaviour.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from seqwalk import (
    ABSENT,
    OrderedContainer,
    ForwardTraversal,
    ReverseTraversal,
    StepTraversal,
    Traversal,
    TraversalExhaustedError,
    TraversalMode,
)


def drive(traversal):
    """Run the canonical loop and return what it visited."""
    visited = []
    element = traversal.first()
    while not traversal.is_done:
        visited.append(element)
        element = traversal.next()
    return visited


class TestForwardTraversal(unittest.TestCase):
    """Test insertion-order traversal."""

    def setUp(self):
        self.container = OrderedContainer(["A", "B", "C"])

    def test_visits_in_insertion_order(self):
        self.assertEqual(drive(ForwardTraversal(self.container)), ["A", "B", "C"])

    def test_first_returns_element_at_zero(self):
        traversal = ForwardTraversal(self.container)
        self.assertEqual(traversal.first(), "A")
        self.assertEqual(traversal.position, 0)
        self.assertFalse(traversal.is_done)

    def test_next_steps_forward(self):
        traversal = ForwardTraversal(self.container)
        traversal.first()
        self.assertEqual(traversal.next(), "B")
        self.assertEqual(traversal.current, "B")
        self.assertEqual(traversal.next(), "C")
        self.assertEqual(traversal.position, 2)

    def test_next_at_last_element_returns_absent(self):
        traversal = ForwardTraversal(self.container)
        traversal.first()
        traversal.next()
        traversal.next()
        self.assertIs(traversal.next(), ABSENT)
        self.assertTrue(traversal.is_done)
        self.assertEqual(traversal.position, 3)

    def test_first_restarts_a_finished_walk(self):
        traversal = ForwardTraversal(self.container)
        drive(traversal)
        self.assertTrue(traversal.is_done)
        self.assertEqual(traversal.first(), "A")
        self.assertFalse(traversal.is_done)

    def test_mode(self):
        self.assertEqual(ForwardTraversal.mode, TraversalMode.FORWARD)


class TestReverseTraversal(unittest.TestCase):
    """Test reverse insertion-order traversal."""

    def setUp(self):
        self.container = OrderedContainer(["A", "B", "C"])

    def test_visits_in_reverse_order(self):
        self.assertEqual(drive(ReverseTraversal(self.container)), ["C", "B", "A"])

    def test_first_returns_last_element(self):
        traversal = ReverseTraversal(self.container)
        self.assertEqual(traversal.first(), "C")
        self.assertEqual(traversal.position, 2)

    def test_boundary_is_minus_one(self):
        traversal = ReverseTraversal(self.container)
        drive(traversal)
        self.assertTrue(traversal.is_done)
        self.assertEqual(traversal.position, -1)

    def test_current_tracks_cursor(self):
        traversal = ReverseTraversal(self.container)
        traversal.first()
        self.assertEqual(traversal.current, "C")
        traversal.next()
        self.assertEqual(traversal.current, "B")

    def test_mode(self):
        self.assertEqual(ReverseTraversal.mode, TraversalMode.REVERSE)


class TestExhaustion(unittest.TestCase):
    """Test behaviour once the completion boundary is reached."""

    def test_repeated_next_is_idempotent(self):
        for strategy, boundary in ((ForwardTraversal, 2), (ReverseTraversal, -1)):
            with self.subTest(strategy=strategy.__name__):
                traversal = strategy(OrderedContainer(["A", "B"]))
                drive(traversal)
                for _ in range(5):
                    self.assertIs(traversal.next(), ABSENT)
                    self.assertTrue(traversal.is_done)
                    self.assertEqual(traversal.position, boundary)

    def test_current_after_completion_raises(self):
        for strategy in (ForwardTraversal, ReverseTraversal):
            with self.subTest(strategy=strategy.__name__):
                traversal = strategy(OrderedContainer(["A"]))
                drive(traversal)
                with self.assertRaises(TraversalExhaustedError):
                    traversal.current

    def test_exhausted_error_is_lookup_error(self):
        traversal = ForwardTraversal(OrderedContainer())
        with self.assertRaises(LookupError):
            traversal.current


class TestEmptyContainer(unittest.TestCase):
    """Test strategies over an empty container."""

    def test_first_returns_absent_and_is_done(self):
        for strategy in (ForwardTraversal, ReverseTraversal):
            with self.subTest(strategy=strategy.__name__):
                traversal = strategy(OrderedContainer())
                self.assertIs(traversal.first(), ABSENT)
                self.assertTrue(traversal.is_done)

    def test_loop_body_never_runs(self):
        for strategy in (ForwardTraversal, ReverseTraversal):
            with self.subTest(strategy=strategy.__name__):
                self.assertEqual(drive(strategy(OrderedContainer())), [])

    def test_next_on_empty_stays_on_boundary(self):
        traversal = ReverseTraversal(OrderedContainer())
        traversal.first()
        self.assertIs(traversal.next(), ABSENT)
        self.assertEqual(traversal.position, -1)


class TestAbsentMarker(unittest.TestCase):
    """Test the ABSENT marker."""

    def test_absent_is_falsy(self):
        self.assertFalse(ABSENT)

    def test_absent_is_not_none(self):
        self.assertIsNot(ABSENT, None)
        self.assertEqual(repr(ABSENT), "ABSENT")

    def test_none_elements_are_visited(self):
        """None payloads are distinguishable from the end of the walk."""
        container = OrderedContainer([None, None])
        self.assertEqual(drive(ForwardTraversal(container)), [None, None])


class TestIterationProtocol(unittest.TestCase):
    """Test that for-loops follow the canonical loop."""

    def test_for_loop_matches_canonical_loop(self):
        container = OrderedContainer(["A", "B", "C"])
        for strategy in (ForwardTraversal, ReverseTraversal):
            with self.subTest(strategy=strategy.__name__):
                self.assertEqual(list(strategy(container)), drive(strategy(container)))

    def test_iterating_twice_restarts(self):
        traversal = ReverseTraversal(OrderedContainer([1, 2]))
        self.assertEqual(list(traversal), [2, 1])
        self.assertEqual(list(traversal), [2, 1])


class TestStrategyHierarchy(unittest.TestCase):
    """Test the shape of the strategy classes."""

    def test_both_strategies_share_step_traversal(self):
        self.assertTrue(issubclass(ForwardTraversal, StepTraversal))
        self.assertTrue(issubclass(ReverseTraversal, StepTraversal))
        self.assertEqual(ForwardTraversal.step, 1)
        self.assertEqual(ReverseTraversal.step, -1)

    def test_traversal_is_abstract(self):
        with self.assertRaises(TypeError):
            Traversal(OrderedContainer())


if __name__ == "__main__":
    unittest.main()

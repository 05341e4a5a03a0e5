"""Testing utilities for SeqWalk consumers."""

from .fixtures import RecordingVisitor, make_container

__all__ = ['RecordingVisitor', 'make_container']

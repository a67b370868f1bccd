"""
Binary max-heap algorithms for Python sequences.

The package exposes the four classic heap operations (push, pop, make,
sort) working in place on any mutable random-access sequence, plus
read-only heap checks. See ``heapalgo.algorithms.heap`` for the
preconditions each operation expects.
"""

from .algorithms import (
    is_heap,
    is_heap_until,
    make_heap,
    pop_heap,
    push_heap,
    sort_heap,
)

__version__ = "0.1.0"

__all__ = [
    "push_heap",
    "pop_heap",
    "make_heap",
    "sort_heap",
    "is_heap",
    "is_heap_until",
]

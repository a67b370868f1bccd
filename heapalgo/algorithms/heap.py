"""In-place binary max-heap algorithms over a random-access sequence.

A heap range is a mutable sequence plus two positions ``first`` and
``last`` describing the half-open slice ``[first, last)``. The functions
here never allocate storage and never change the length of the sequence:
growing the sequence before :func:`push_heap` and shrinking it after
:func:`pop_heap` is the caller's job.

Preconditions
-------------
• ``push_heap``: ``[first, last - 1)`` is already a heap.
• ``pop_heap`` / ``sort_heap``: ``[first, last)`` is already a heap.
• ``make_heap``: none.

Violating a precondition is a logic error. The result is some
permutation of the range, no exception is raised for it.

Ordering
--------
Every function takes an optional ``comp(a, b)`` meaning "a is less than
b" (a strict weak ordering). The default is ``operator.lt``. The element
at ``first`` is always the greatest under ``comp``, so ``comp=operator.gt``
gives a min-heap.

Usage::

    xs = [3, 1, 4, 1, 5]
    make_heap(xs)            # xs[0] is now the largest item
    xs.append(9)
    push_heap(xs)            # restores the heap after an append
    pop_heap(xs)             # moves the largest item to xs[-1]
    top = xs.pop()
    sort_heap(xs)            # ascending order, heap is consumed
"""

from __future__ import annotations
import operator
from typing import Any, Callable, MutableSequence, Optional, Tuple, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], bool]


# -----------------------------
# Internal helpers
# -----------------------------
def _bounds(seq: MutableSequence[T], first: int, last: Optional[int]) -> Tuple[int, int]:
    """Resolve an omitted ``last`` to the end of ``seq``."""
    if last is None:
        last = len(seq)
    return first, last


def _sift_up(
    seq: MutableSequence[T], first: int, hole: int, top: int, value: T, comp: Compare
) -> None:
    """Move the hole toward ``top`` while its parent is less than ``value``.

    Ancestors of ``hole`` up to ``top`` must already be heap-ordered.
    Ties stop the climb.
    """
    while hole > top:
        parent = (hole - 1) // 2
        if not comp(seq[first + parent], value):
            break
        seq[first + hole] = seq[first + parent]
        hole = parent
    seq[first + hole] = value


def _adjust_heap(
    seq: MutableSequence[T], first: int, hole: int, length: int, value: T, comp: Compare
) -> None:
    """Percolate the hole down to a leaf, then sift ``value`` back up.

    The descent always promotes the larger child (the right one on ties).
    The closing sift-up is bounded by the starting hole, not the root.
    """
    top = hole
    child = 2 * hole + 2
    while child < length:
        if comp(seq[first + child], seq[first + child - 1]):
            child -= 1
        seq[first + hole] = seq[first + child]
        hole = child
        child = 2 * (child + 1)
    if child == length:
        # Only a left child remains.
        seq[first + hole] = seq[first + child - 1]
        hole = child - 1
    _sift_up(seq, first, hole, top, value, comp)


# -----------------------------
# Public API
# -----------------------------
def push_heap(
    seq: MutableSequence[T],
    first: int = 0,
    last: Optional[int] = None,
    *,
    comp: Optional[Compare] = None,
) -> None:
    """Sift ``seq[last - 1]`` into the heap ``[first, last - 1)`` (O(log n))."""
    first, last = _bounds(seq, first, last)
    if last - first < 2:
        return
    _sift_up(seq, first, last - first - 1, 0, seq[last - 1], comp or operator.lt)


def pop_heap(
    seq: MutableSequence[T],
    first: int = 0,
    last: Optional[int] = None,
    *,
    comp: Optional[Compare] = None,
) -> None:
    """Move the largest item to ``last - 1`` and re-heap the rest (O(log n)).

    ``[first, last)`` must hold at least one element. Afterwards
    ``[first, last - 1)`` is a heap of the remaining items; call
    ``seq.pop()`` to complete an extract-max.
    """
    first, last = _bounds(seq, first, last)
    value = seq[last - 1]
    seq[last - 1] = seq[first]
    _adjust_heap(seq, first, 0, last - 1 - first, value, comp or operator.lt)


def make_heap(
    seq: MutableSequence[T],
    first: int = 0,
    last: Optional[int] = None,
    *,
    comp: Optional[Compare] = None,
) -> None:
    """Rearrange ``[first, last)`` into a heap, bottom-up, in O(n) time."""
    first, last = _bounds(seq, first, last)
    length = last - first
    if length < 2:
        return
    comp = comp or operator.lt
    # Last node that has at least one child.
    for hole in range((length - 2) // 2, -1, -1):
        _adjust_heap(seq, first, hole, length, seq[first + hole], comp)


def sort_heap(
    seq: MutableSequence[T],
    first: int = 0,
    last: Optional[int] = None,
    *,
    comp: Optional[Compare] = None,
) -> None:
    """Turn the heap ``[first, last)`` into an ascending run (O(n log n)).

    Repeatedly pops the maximum to the back of a shrinking window, which
    consumes the heap.
    """
    first, last = _bounds(seq, first, last)
    while last - first > 1:
        pop_heap(seq, first, last, comp=comp)
        last -= 1


def is_heap_until(
    seq: MutableSequence[T],
    first: int = 0,
    last: Optional[int] = None,
    *,
    comp: Optional[Compare] = None,
) -> int:
    """Return the end of the longest heap-ordered prefix of ``[first, last)``."""
    first, last = _bounds(seq, first, last)
    comp = comp or operator.lt
    for child in range(1, last - first):
        if comp(seq[first + (child - 1) // 2], seq[first + child]):
            return first + child
    return last


def is_heap(
    seq: MutableSequence[T],
    first: int = 0,
    last: Optional[int] = None,
    *,
    comp: Optional[Compare] = None,
) -> bool:
    """Return True if ``[first, last)`` satisfies the max-heap invariant."""
    first, last = _bounds(seq, first, last)
    return is_heap_until(seq, first, last, comp=comp) == last

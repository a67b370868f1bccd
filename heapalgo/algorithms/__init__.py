from .heap import (
    is_heap,
    is_heap_until,
    make_heap,
    pop_heap,
    push_heap,
    sort_heap,
)

__all__ = [
    "push_heap",
    "pop_heap",
    "make_heap",
    "sort_heap",
    "is_heap",
    "is_heap_until",
]

"""
Functional interface over the heap backends.

Front-ends pick a backend by name and then only use the six calls below, so
any backend can be swapped in without touching the caller:

    heap = make_heap("lazy", [10, 5, 15])
    insert(heap, 1)
    minimum(heap)        # 1
    extract_min(heap)    # 1
    merge(heap, other)   # other is left empty
    to_sequence(heap)    # [5, 10, 15, ...]
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type, TypeVar

from .datastructures import LazyBinomialHeap, MergeableHeap, SortedLinkedHeap, UnsortedLinkedHeap

T = TypeVar("T")

HEAP_KINDS: Dict[str, Type[MergeableHeap]] = {
    "lazy": LazyBinomialHeap,
    "unsorted": UnsortedLinkedHeap,
    "sorted": SortedLinkedHeap,
}


def make_heap(kind: str = "lazy", keys: Optional[Iterable[T]] = None) -> MergeableHeap[T]:
    """Create a heap of the given backend, optionally seeded with *keys*.

    Raises:
        ValueError: if *kind* is not a key of ``HEAP_KINDS``.
    """
    try:
        cls = HEAP_KINDS[kind]
    except KeyError:
        choices = ", ".join(sorted(HEAP_KINDS))
        raise ValueError(f"unknown heap kind {kind!r} (choose from {choices})") from None
    return cls(keys)


def insert(heap: MergeableHeap[T], key: T) -> None:
    heap.insert(key)


def minimum(heap: MergeableHeap[T]) -> Optional[T]:
    return heap.minimum()


def extract_min(heap: MergeableHeap[T]) -> Optional[T]:
    return heap.extract_min()


def merge(heap_a: MergeableHeap[T], heap_b: MergeableHeap[T]) -> None:
    """Move all of *heap_b* into *heap_a*; *heap_b* is empty afterwards."""
    heap_a.merge(heap_b)


def to_sequence(heap: MergeableHeap[T]) -> List[T]:
    """Keys of *heap* in sorted order; the heap keeps all of them."""
    return heap.to_sequence()

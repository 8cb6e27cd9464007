"""Mergeable priority queues: a lazy binomial heap and two linked-list heaps."""

from .datastructures import (
    LazyBinomialHeap,
    MergeableHeap,
    SortedLinkedHeap,
    UnsortedLinkedHeap,
)
from .heaps import HEAP_KINDS, extract_min, insert, make_heap, merge, minimum, to_sequence

__version__ = "0.1.0"

__all__ = [
    "MergeableHeap",
    "LazyBinomialHeap",
    "UnsortedLinkedHeap",
    "SortedLinkedHeap",
    "HEAP_KINDS",
    "make_heap",
    "insert",
    "minimum",
    "extract_min",
    "merge",
    "to_sequence",
]

from .mergeable_heap import MergeableHeap
from .lazy_binomial_heap import LazyBinomialHeap
from .unsorted_heap import UnsortedLinkedHeap
from .sorted_heap import SortedLinkedHeap

__all__ = [
    "MergeableHeap",
    "LazyBinomialHeap",
    "UnsortedLinkedHeap",
    "SortedLinkedHeap",
]

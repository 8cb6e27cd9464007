from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, TypeVar

from .linked_list import _ListNode
from .mergeable_heap import MergeableHeap

T = TypeVar("T")


class SortedLinkedHeap(MergeableHeap[T]):
    """Mergeable heap over a doubly-linked list kept in non-decreasing order.

    The minimum is always the head, so minimum and extract_min are O(1).
    Insert and merge pay for it: both walk the list (O(n) and O(n + m)).
    """

    __slots__ = ("_head", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_ListNode[T]] = None
        self._size = 0
        if it is not None:
            for key in it:
                self.insert(key)

    def insert(self, key: T) -> None:
        """Insert *key* by merging a one-element heap into this one (O(n))."""
        self._check_key(key)
        single: SortedLinkedHeap[T] = SortedLinkedHeap()
        single._head = _ListNode(key)
        single._size = 1
        self.merge(single)

    def minimum(self) -> Optional[T]:
        """Return the head key (O(1))."""
        return self._head.key if self._head is not None else None

    def extract_min(self) -> Optional[T]:
        """Pop the head node (O(1))."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        node.next = None
        self._size -= 1
        return node.key

    def merge(self, other: MergeableHeap[T]) -> None:
        """Two-way merge of both sorted lists; *other* is left empty (O(n + m)).

        On equal keys this heap's node comes first.
        """
        self._check_mergeable(other)
        assert isinstance(other, SortedLinkedHeap)
        theirs = other._head
        if theirs is None:
            return

        mine = self._head
        prev: Optional[_ListNode[T]] = None
        while mine is not None and theirs is not None:
            if not theirs.key < mine.key:
                prev, mine = mine, mine.next
                continue
            # Move their head in front of ours
            nxt = theirs.next
            if prev is None:
                self._head = theirs
            else:
                prev.next = theirs
            theirs.prev = prev
            theirs.next = mine
            mine.prev = theirs
            prev, theirs = theirs, nxt

        if theirs is not None:
            # Our list ran out; the rest of theirs is already in order
            if prev is None:
                self._head = theirs
            else:
                prev.next = theirs
            theirs.prev = prev

        self._size += other._size
        other._head = None
        other._size = 0

    def to_sequence(self) -> List[T]:
        """Walk the list; already sorted, so nothing is drained."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.key
            node = node.next

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SortedLinkedHeap({list(self)!r})"

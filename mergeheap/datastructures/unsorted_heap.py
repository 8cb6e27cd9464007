from __future__ import annotations
from typing import Iterable, Iterator, Optional, TypeVar

from .linked_list import _ListNode
from .mergeable_heap import MergeableHeap

T = TypeVar("T")


class UnsortedLinkedHeap(MergeableHeap[T]):
    """Mergeable heap over an unsorted doubly-linked list.

    Keys are appended in arrival order and the minimum node is cached, so
    insert, minimum and merge are O(1); extract_min must rescan for the next
    minimum and is O(n).
    """

    __slots__ = ("_head", "_tail", "_min", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_ListNode[T]] = None
        self._tail: Optional[_ListNode[T]] = None
        self._min: Optional[_ListNode[T]] = None
        self._size = 0
        if it is not None:
            for key in it:
                self.insert(key)

    def _nodes(self) -> Iterator[_ListNode[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _update_min(self) -> None:
        best = self._head
        for node in self._nodes():
            if node.key < best.key:  # type: ignore[union-attr]
                best = node
        self._min = best

    def insert(self, key: T) -> None:
        """Append *key* to the list (O(1))."""
        self._check_key(key)
        node = _ListNode(key)
        is_min = self._min is None or key < self._min.key
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        if is_min:
            self._min = node
        self._size += 1

    def minimum(self) -> Optional[T]:
        """Return the cached minimum (O(1))."""
        return self._min.key if self._min is not None else None

    def extract_min(self) -> Optional[T]:
        """Unlink the minimum node, then rescan for the new one (O(n))."""
        node = self._min
        if node is None:
            return None

        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.next = node.prev = None
        self._size -= 1

        self._update_min()
        return node.key

    def merge(self, other: MergeableHeap[T]) -> None:
        """Concatenate *other*'s list after this one and empty *other* (O(1))."""
        self._check_mergeable(other)
        assert isinstance(other, UnsortedLinkedHeap)
        if other._head is None:
            return

        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
            other._head.prev = self._tail
        self._tail = other._tail
        if self._min is None or other._min.key < self._min.key:  # type: ignore[union-attr]
            self._min = other._min
        self._size += other._size

        other._head = other._tail = other._min = None
        other._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        # Arrival order, not sorted order
        for node in self._nodes():
            yield node.key

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"UnsortedLinkedHeap({list(self)!r})"

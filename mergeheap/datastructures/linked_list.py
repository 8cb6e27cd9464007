from __future__ import annotations
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _ListNode(Generic[T]):
    """A node of a doubly-linked list (used by the linked-list heaps)."""

    __slots__ = ("key", "next", "prev")

    def __init__(self, key: T) -> None:
        self.key = key
        self.next: Optional[_ListNode[T]] = None
        self.prev: Optional[_ListNode[T]] = None

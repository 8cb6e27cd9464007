from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .mergeable_heap import MergeableHeap

T = TypeVar("T")

logger = logging.getLogger(__name__)


class _BinomialNode(Generic[T]):
    """A vertex of a binomial tree in left-child/right-sibling form."""

    __slots__ = ("key", "degree", "child", "sibling")

    def __init__(self, key: T) -> None:
        self.key = key
        self.degree = 0
        self.child: Optional[_BinomialNode[T]] = None
        self.sibling: Optional[_BinomialNode[T]] = None


def _link(a: _BinomialNode[T], b: _BinomialNode[T]) -> _BinomialNode[T]:
    """Join two trees of equal degree into one tree of degree + 1.

    The root with the smaller key wins (``a`` on ties) and the loser becomes
    its first child.
    """
    assert a.degree == b.degree, f"linking degree {a.degree} with degree {b.degree}"
    if b.key < a.key:
        a, b = b, a
    b.sibling = a.child
    a.child = b
    a.degree += 1
    return a


class LazyBinomialHeap(MergeableHeap[T]):
    """A lazy binomial heap: a forest of heap-ordered binomial trees.

    Roots are kept in a singly-linked list that is only consolidated during
    ``extract_min``, so ``insert`` and ``merge`` are O(1) and ``extract_min``
    is O(log n) amortized (O(n) for a single call right after many merges).
    """

    __slots__ = ("_head", "_tail", "_min", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_BinomialNode[T]] = None
        self._tail: Optional[_BinomialNode[T]] = None
        self._min: Optional[_BinomialNode[T]] = None
        self._size = 0
        if it is not None:
            for key in it:
                self.insert(key)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _roots(self) -> Iterator[_BinomialNode[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.sibling

    def _unlink_min(self) -> _BinomialNode[T]:
        """Cut the minimum root out of the root list (O(r) in roots)."""
        target = self._min
        prev: Optional[_BinomialNode[T]] = None
        node = self._head
        # No back-pointers, so walk until the predecessor of the min root
        while node is not target:
            prev, node = node, node.sibling  # type: ignore[union-attr]
        if prev is None:
            self._head = target.sibling  # type: ignore[union-attr]
        else:
            prev.sibling = target.sibling  # type: ignore[union-attr]
        if target is self._tail:
            self._tail = prev
        self._size -= 1
        return target  # type: ignore[return-value]

    def _append_roots(self, first: _BinomialNode[T]) -> None:
        """Splice a sibling chain starting at *first* onto the end of the root list."""
        last = first
        while last.sibling is not None:
            last = last.sibling
        if self._tail is None:
            self._head = first
        else:
            self._tail.sibling = first
        self._tail = last

    def _consolidate(self) -> None:
        """Link equal-degree roots until every root degree is distinct."""
        if self._head is None:
            return

        # A tree of degree d holds 2**d nodes, so no degree reaches
        # size.bit_length(); the extra bucket absorbs the last carry.
        buckets: List[List[_BinomialNode[T]]] = [[] for _ in range(self._size.bit_length() + 1)]
        roots_in = 0
        node = self._head
        while node is not None:
            nxt = node.sibling
            node.sibling = None
            buckets[node.degree].append(node)
            roots_in += 1
            node = nxt

        links = 0
        for degree in range(len(buckets)):
            bucket = buckets[degree]
            while len(bucket) > 1:
                b = bucket.pop()
                a = bucket.pop()
                buckets[degree + 1].append(_link(a, b))
                links += 1

        self._head = self._tail = None
        for bucket in buckets:
            if bucket:
                tree = bucket[0]
                if self._tail is None:
                    self._head = tree
                else:
                    self._tail.sibling = tree
                self._tail = tree

        logger.debug("consolidated %d roots into %d trees with %d links", roots_in, roots_in - links, links)

    def _update_min(self) -> None:
        """Rescan the root list for the smallest key."""
        best = self._head
        for node in self._roots():
            if node.key < best.key:  # type: ignore[union-attr]
                best = node
        self._min = best

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, key: T) -> None:
        """Append a degree-0 tree holding *key* to the root list (O(1))."""
        self._check_key(key)
        node = _BinomialNode(key)
        # Compare before linking so a failed comparison leaves the heap untouched
        is_min = self._min is None or key < self._min.key
        if self._tail is None:
            self._head = node
        else:
            self._tail.sibling = node
        self._tail = node
        if is_min:
            self._min = node
        self._size += 1

    def minimum(self) -> Optional[T]:
        """Return the smallest key without removing it (O(1))."""
        return self._min.key if self._min is not None else None

    def extract_min(self) -> Optional[T]:
        """Remove and return the smallest key (O(log n) amortized)."""
        if self._min is None:
            return None

        node = self._unlink_min()
        if node.child is not None:
            self._append_roots(node.child)

        self._consolidate()
        self._update_min()

        key = node.key
        node.child = None
        node.sibling = None
        return key

    def merge(self, other: MergeableHeap[T]) -> None:
        """Splice *other*'s root list onto this one and empty *other* (O(1)).

        No consolidation happens here; equal-degree roots are left for the
        next ``extract_min``.
        """
        self._check_mergeable(other)
        assert isinstance(other, LazyBinomialHeap)
        if other._head is None:
            return

        if self._tail is None:
            self._head = other._head
        else:
            self._tail.sibling = other._head
        self._tail = other._tail
        if self._min is None or other._min.key < self._min.key:  # type: ignore[union-attr]
            self._min = other._min
        self._size += other._size
        logger.debug("merged %d nodes, heap now holds %d", other._size, self._size)

        other._head = other._tail = other._min = None
        other._size = 0

    def clear(self) -> None:
        """Drop every node, unlinking the forest iteratively (O(n))."""
        pending: List[_BinomialNode[T]] = []
        if self._head is not None:
            pending.append(self._head)
        while pending:
            node = pending.pop()
            if node.sibling is not None:
                pending.append(node.sibling)
            if node.child is not None:
                pending.append(node.child)
            node.sibling = node.child = None
        self._head = self._tail = self._min = None
        self._size = 0

    # -----------------------------
    # Introspection
    # -----------------------------
    def root_count(self) -> int:
        return sum(1 for _ in self._roots())

    def root_degrees(self) -> List[int]:
        """Degrees of the roots in root-list order."""
        return [node.degree for node in self._roots()]

    def breadth_first(self) -> Iterator[T]:
        """Yield keys level by level, starting with the whole root list."""
        level = list(self._roots())
        while level:
            nxt: List[_BinomialNode[T]] = []
            for node in level:
                yield node.key
                child = node.child
                while child is not None:
                    nxt.append(child)
                    child = child.sibling
            level = nxt

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.breadth_first()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LazyBinomialHeap({list(self.breadth_first())!r})"

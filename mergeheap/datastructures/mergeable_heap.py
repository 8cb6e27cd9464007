from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class MergeableHeap(ABC, Generic[T]):
    """Common interface of the mergeable min-heaps.

    Every backend supports MAKE-HEAP (the constructor), INSERT, MINIMUM,
    EXTRACT-MIN and UNION (``merge``). ``None`` is never a valid key: it is
    what ``minimum`` and ``extract_min`` return on an empty heap.
    """

    __slots__ = ()

    # -----------------------------
    # Primitive operations
    # -----------------------------
    @abstractmethod
    def insert(self, key: T) -> None:
        """Insert *key* into the heap."""

    @abstractmethod
    def minimum(self) -> Optional[T]:
        """Return the smallest key without removing it, or None if empty."""

    @abstractmethod
    def extract_min(self) -> Optional[T]:
        """Remove and return the smallest key, or None if empty."""

    @abstractmethod
    def merge(self, other: MergeableHeap[T]) -> None:
        """Move every key of *other* into this heap, leaving *other* empty."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield the keys in storage order without changing the heap."""

    # -----------------------------
    # Derived operations
    # -----------------------------
    def sort(self) -> List[T]:
        """Return the keys in non-decreasing order, keeping them in the heap.

        Drains the heap into a fresh heap of the same class, then merges the
        fresh heap back, so only the four primitives are used.
        """
        drained = type(self)()
        keys: List[T] = []
        while len(self):
            key = self.extract_min()
            keys.append(key)  # type: ignore[arg-type]
            drained.insert(key)  # type: ignore[arg-type]
        self.merge(drained)
        return keys

    def to_sequence(self) -> List[T]:
        """Keys in sorted order, for display."""
        return self.sort()

    def _check_key(self, key: T) -> None:
        if key is None:
            raise ValueError(f"{type(self).__name__} cannot store None")

    def _check_mergeable(self, other: MergeableHeap[T]) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot merge {type(other).__name__} into {type(self).__name__}"
            )
        if other is self:
            raise ValueError("cannot merge a heap into itself")

    def __bool__(self) -> bool:
        return len(self) != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}(size={len(self)})"

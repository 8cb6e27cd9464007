"""
Seed heaps from a text file.

The file holds up to two lines of whitespace-separated integers. The first
line fills heap A and the second fills heap B; a missing line means an empty
heap. Blank trailing lines are ignored, anything else after line two is an
error.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .datastructures import MergeableHeap
from .heaps import make_heap

logger = logging.getLogger(__name__)


class HeapFileError(ValueError):
    """Raised when a heap file cannot be turned into keys."""


def parse_keys(line: str, lineno: int = 1) -> List[int]:
    """Convert one line of whitespace-separated integers into keys.

    Raises:
        HeapFileError: if a token is not an integer.
    """
    keys: List[int] = []
    for token in line.split():
        try:
            keys.append(int(token))
        except ValueError:
            raise HeapFileError(f"line {lineno}: {token!r} is not an integer") from None
    return keys


def load_heaps(path: str, kind: str = "lazy") -> Tuple[MergeableHeap[int], MergeableHeap[int]]:
    """Read *path* and return the two heaps it describes."""
    with open(path, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()

    for lineno, extra in enumerate(lines[2:], start=3):
        if extra.strip():
            raise HeapFileError(f"line {lineno}: expected at most two heap lines")

    seeds = [parse_keys(line, lineno) for lineno, line in enumerate(lines[:2], start=1)]
    while len(seeds) < 2:
        seeds.append([])

    heap_a = make_heap(kind, seeds[0])
    heap_b = make_heap(kind, seeds[1])
    logger.info("loaded %d keys into A and %d keys into B from %s", len(heap_a), len(heap_b), path)
    return heap_a, heap_b

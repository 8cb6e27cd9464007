"""
Timing benchmark for the heap backends.

Every benchmark is split into an untimed setup step, which builds the heaps and
keys it needs, and the timed operation itself. Sizes grow as
``base * 2**i``; the mean and standard deviation (ms) of each size are written
to a CSV file and echoed to the console.
"""

from __future__ import annotations

import csv
import random
import statistics
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from . import config
from .heaps import HEAP_KINDS, make_heap

Setup = Callable[[str, List[int]], Any]
Timed = Callable[[Any], object]

CSV_HEADER = ["Heap Kind", "Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"]


def random_keys(size: int, rng: Optional[random.Random] = None) -> List[int]:
    rng = rng or random
    return [rng.randint(0, 1_000_000) for _ in range(size)]


def time_operation(setup: Setup, timed: Timed, kind: str, size: int,
                   iterations: int = config.BENCH_ITERATIONS) -> Tuple[float, float]:
    """Return mean and standard deviation (ms) of *timed* over fresh setups."""
    samples = []
    for _ in range(iterations):
        state = setup(kind, random_keys(size))
        start = time.perf_counter()
        timed(state)
        samples.append((time.perf_counter() - start) * 1000)
    spread = statistics.stdev(samples) if len(samples) > 1 else 0.0
    return statistics.mean(samples), spread


# ----------------------------
# Operations
# ----------------------------

def _empty_heap_and_keys(kind: str, keys: List[int]):
    return make_heap(kind), keys


def _insert_all(state) -> None:
    heap, keys = state
    for key in keys:
        heap.insert(key)


def _filled_heap(kind: str, keys: List[int]):
    return make_heap(kind, keys)


def _drain(heap) -> None:
    while heap:
        heap.extract_min()


def _singleton_heaps(kind: str, keys: List[int]):
    return make_heap(kind), [make_heap(kind, [key]) for key in keys]


def _merge_all_then_extract(state) -> None:
    # One extraction afterwards pays for the consolidation merges deferred
    heap, singles = state
    for single in singles:
        heap.merge(single)
    heap.extract_min()


OPERATIONS: Dict[str, Tuple[Setup, Timed]] = {
    "insert": (_empty_heap_and_keys, _insert_all),
    "extract": (_filled_heap, _drain),
    "merge": (_singleton_heaps, _merge_all_then_extract),
}


def run_benchmarks(output_file: str, kinds: Sequence[str] = tuple(HEAP_KINDS),
                   base_input: int = config.BENCH_BASE_INPUT, steps: int = config.BENCH_STEPS,
                   iterations: int = config.BENCH_ITERATIONS,
                   out: Optional[Console] = None) -> List[list]:
    """Time every operation on every backend and size; return the CSV rows."""
    out = out or Console(highlight=False)
    sizes = [base_input * 2 ** i for i in range(steps)]
    rows: List[list] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)
        for kind in kinds:
            for op_name, (setup, timed) in OPERATIONS.items():
                for size in sizes:
                    mean, spread = time_operation(setup, timed, kind, size, iterations)
                    row = [kind, size, op_name, f"{mean:.3f}", f"{spread:.3f}"]
                    writer.writerow(row)
                    rows.append(row)
                    out.print(f"{kind:<9} {op_name:<8} n={size:<8} "
                              f"{mean:>10.3f} ms ± {spread:.3f}")

    out.print(f"[green]wrote {len(rows)} measurements to[/green] {escape(output_file)}")
    return rows

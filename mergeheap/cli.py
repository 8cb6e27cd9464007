"""
Mergeable Heap Command-Line Interface (CLI)

This script drives the heap backends from the terminal via subcommands. It
ties together:
- The functional heap interface (make / insert / minimum / extract / merge)
- File seeding of two heaps from a text file
- An interactive shell over two heaps A and B
- The timing benchmark

Usage examples:
    python -m mergeheap.cli demo --kind lazy
    python -m mergeheap.cli load --path heaps.txt --kind sorted
    python -m mergeheap.cli shell --path heaps.txt
    python -m mergeheap.cli bench --path bench.csv --base 50 --steps 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

from . import config
from .benchmark import run_benchmarks
from .datastructures import MergeableHeap
from .heaps import HEAP_KINDS, extract_min, insert, make_heap, merge, minimum, to_sequence
from .loader import HeapFileError, load_heaps

logger = logging.getLogger(__name__)

console = Console(highlight=False)


# -------------------------------------------------------------------
# Utility: formatting
# -------------------------------------------------------------------
def format_keys(keys: Iterable[object]) -> str:
    """Render keys as ``5, 10, 15.``, or ``empty.`` when there are none."""
    keys = list(keys)
    if not keys:
        return "empty."
    return ", ".join(str(k) for k in keys) + "."


def print_heap(name: str, heap: MergeableHeap, out: Console) -> None:
    """Display a heap's keys in sorted order."""
    out.print(f"[bold cyan]{name}[/bold cyan]: {format_keys(to_sequence(heap))}")


def print_storage(name: str, heap: MergeableHeap, out: Console) -> None:
    """Display a heap's keys in storage order, leaving the heap as it is."""
    out.print(f"[bold cyan]{name}[/bold cyan]: {format_keys(heap)}")


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_demo(args, out: Console = console) -> int:
    """Walk through basic ordering and merge ordering on one backend."""
    out.print(f"[bold]Basic ordering ({args.kind})[/bold]")
    heap = make_heap(args.kind)
    for key in (10, 5, 15):
        insert(heap, key)
        out.print(f"  insert {key}")
    out.print(f"  minimum -> [green]{minimum(heap)}[/green]")
    while True:
        key = extract_min(heap)
        out.print("  extract_min -> absent" if key is None else f"  extract_min -> [green]{key}[/green]")
        if key is None:
            break

    out.print(f"[bold]Merge ordering ({args.kind})[/bold]")
    heap_a = make_heap(args.kind, [10, 5])
    heap_b = make_heap(args.kind, [15, 20])
    print_heap("A", heap_a, out)
    print_heap("B", heap_b, out)
    merge(heap_a, heap_b)
    out.print("  merge B into A")
    print_heap("A", heap_a, out)
    print_heap("B", heap_b, out)
    return 0


def cmd_load(args, out: Console = console) -> int:
    """Seed two heaps from a file, merge them and show the result."""
    heap_a, heap_b = load_heaps(args.path, args.kind)
    print_heap("A", heap_a, out)
    print_heap("B", heap_b, out)
    merge(heap_a, heap_b)
    out.print("[bold]After merging B into A[/bold]")
    print_heap("A", heap_a, out)
    return 0


def cmd_bench(args, out: Console = console) -> int:
    """Time the backends and write the measurements to CSV."""
    run_benchmarks(args.path, kinds=args.kinds, base_input=args.base,
                   steps=args.steps, iterations=args.iterations, out=out)
    return 0


# -------------------------------------------------------------------
# Interactive shell
# -------------------------------------------------------------------
SHELL_HELP = """\
insert <n> [n ...]  insert keys into the active heap
min                 show the minimum of the active heap
extract             remove and show the minimum of the active heap
union               merge the other heap into the active heap
print               show both heaps in storage order (no changes)
sort                drain and restore the active heap, showing the order
use a|b             switch the active heap
help                show this message
quit                leave the shell"""


class HeapShell:
    """Line-oriented command loop over two heaps named A and B."""

    def __init__(self, heap_a: MergeableHeap, heap_b: MergeableHeap, out: Console = console) -> None:
        self.heaps: Dict[str, MergeableHeap] = {"a": heap_a, "b": heap_b}
        self.active = "a"
        self.out = out

    @property
    def other(self) -> str:
        return "b" if self.active == "a" else "a"

    def prompt(self) -> str:
        return f"{self.active.upper()}> "

    def error(self, message: str) -> None:
        self.out.print(f"[red]error:[/red] {escape(message)}")

    def handle(self, line: str) -> bool:
        """Run one command; return False when the shell should stop."""
        words = line.split()
        if not words:
            return True
        cmd, rest = words[0].lower(), words[1:]
        heap = self.heaps[self.active]

        if cmd in ("quit", "exit", "q"):
            return False
        if cmd == "help":
            self.out.print(SHELL_HELP, markup=False)
        elif cmd == "insert":
            if not rest:
                self.error("insert needs at least one key")
                return True
            try:
                keys = [int(word) for word in rest]
            except ValueError as exc:
                self.error(str(exc))
                return True
            for key in keys:
                insert(heap, key)
            self.out.print(f"inserted {len(keys)} key(s) into {self.active.upper()}")
        elif cmd == "min":
            key = minimum(heap)
            self.out.print("empty." if key is None else f"[green]{key}[/green]")
        elif cmd == "extract":
            key = extract_min(heap)
            self.out.print("empty." if key is None else f"[green]{key}[/green]")
        elif cmd == "union":
            merge(heap, self.heaps[self.other])
            self.out.print(f"merged {self.other.upper()} into {self.active.upper()}")
        elif cmd == "print":
            print_storage("A", self.heaps["a"], self.out)
            print_storage("B", self.heaps["b"], self.out)
        elif cmd == "sort":
            self.out.print(format_keys(heap.sort()))
        elif cmd == "use":
            if len(rest) != 1 or rest[0].lower() not in self.heaps:
                self.error("use a|b")
                return True
            self.active = rest[0].lower()
        else:
            self.error(f"unknown command {cmd!r} (try 'help')")
        return True

    def run(self, lines: Optional[Iterable[str]] = None) -> None:
        """Process *lines*, or prompt on the console until quit or EOF."""
        if lines is not None:
            for line in lines:
                if not self.handle(line):
                    return
            return
        while True:
            try:
                line = self.out.input(self.prompt())
            except (EOFError, KeyboardInterrupt):
                self.out.print()
                return
            if not self.handle(line):
                return


def cmd_shell(args, out: Console = console) -> int:
    """Start the interactive shell, optionally seeded from a file."""
    if args.path:
        heap_a, heap_b = load_heaps(args.path, args.kind)
    else:
        heap_a, heap_b = make_heap(args.kind), make_heap(args.kind)
    out.print(f"[bold]mergeable heap shell[/bold] ({args.kind}); type 'help' for commands")
    HeapShell(heap_a, heap_b, out).run()
    return 0


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m mergeheap.cli", description="Mergeable heap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    sub = p.add_subparsers(dest="cmd", required=True)
    kinds = sorted(HEAP_KINDS)

    # --- walkthrough ---
    s = sub.add_parser("demo", help="Show insert / extract / merge on one backend")
    s.add_argument("--kind", choices=kinds, default=config.DEFAULT_KIND)
    s.set_defaults(func=cmd_demo)

    # --- file seeding ---
    s = sub.add_parser("load", help="Load two heaps from a file and merge them")
    s.add_argument("--path", required=True)
    s.add_argument("--kind", choices=kinds, default=config.DEFAULT_KIND)
    s.set_defaults(func=cmd_load)

    # --- interactive ---
    s = sub.add_parser("shell", help="Interactive shell over two heaps")
    s.add_argument("--path", default=None)
    s.add_argument("--kind", choices=kinds, default=config.DEFAULT_KIND)
    s.set_defaults(func=cmd_shell)

    # --- benchmark ---
    s = sub.add_parser("bench", help="Benchmark the backends into a CSV file")
    s.add_argument("--path", required=True)
    s.add_argument("--base", type=int, default=config.BENCH_BASE_INPUT)
    s.add_argument("--steps", type=int, default=config.BENCH_STEPS)
    s.add_argument("--iterations", type=int, default=config.BENCH_ITERATIONS)
    s.add_argument("--kind", dest="kinds", action="append", choices=kinds, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv: Optional[List[str]] = None, out: Console = console) -> int:
    """CLI entry point when invoked via `python -m mergeheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cmd == "bench" and not args.kinds:
        args.kinds = list(HEAP_KINDS)

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
                        format=config.LOG_FORMAT)

    try:
        return args.func(args, out)
    except (HeapFileError, OSError) as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        out.print(f"[red]error:[/red] {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

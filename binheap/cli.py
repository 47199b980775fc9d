"""
Binary Heap Command-Line Interface (CLI)

This script exposes the heap library via subcommands for quick
experiments. It ties together:
- The Heap data structure (build, sort, merge, change-key)
- A walkthrough of the main operations (demo)
- The benchmark runner (CSV report)

Usage examples:
    python -m binheap.cli demo
    python -m binheap.cli build 5 3 8 1 9 --min
    python -m binheap.cli sort 4 1 3 --reverse
    python -m binheap.cli merge --left 1 3 5 --right 2 4 6 --min
    python -m binheap.cli change-key 1 3 5 --index 2 --value 0 --min
    python -m binheap.cli benchmark --path report.csv --rounds 4
"""

import argparse
import logging
import sys

from .datastructures.heap import Heap
from . import benchmark

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: pretty-print a heap
# -------------------------------------------------------------------
def print_heap(label, heap):
    """Display a heap's array order, or a placeholder when empty."""
    if heap.is_empty:
        print(f"{label}: (empty)")
        return
    print(f"{label}: {heap}")


def polarity_name(heap):
    return "min" if heap.is_min_heap else "max"


def drain(heap):
    """Pop every item from a heap, returning them in extraction order."""
    out = []
    while heap:
        out.append(heap.pop())
    return out


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Walk through build, peek, push, pop, change-key and merge."""
    print("Min-Heap:")
    min_heap = Heap([5, 3, 8, 1, 9], is_min_heap=True)
    print_heap("Heap", min_heap)
    print(f"Minimum: {min_heap.peek()}")

    min_heap.push(0)
    print_heap("After push 0", min_heap)

    print(f"Popped minimum: {min_heap.pop()}")
    print_heap("After pop", min_heap)

    min_heap.change_key(2, 2)
    print_heap("After change_key(2, 2)", min_heap)

    print()
    print("Max-Heap:")
    max_heap = Heap([1, 5, 3, 7, 2])
    print_heap("Heap", max_heap)
    print(f"Maximum: {max_heap.peek()}")

    max_heap.push(10)
    print_heap("After push 10", max_heap)

    print()
    heap1 = Heap([1, 3, 5], is_min_heap=True)
    heap2 = Heap([2, 4, 6], is_min_heap=True)
    merged = heap1.merge(heap2)
    print(f"Merge: {heap1} + {heap2} = {merged}")


def cmd_build(args):
    """Build a heap from the given values and show its root."""
    heap = Heap(args.values, is_min_heap=args.min)
    print_heap(f"{polarity_name(heap)}-heap", heap)
    if heap:
        print(f"Root: {heap.peek()}")


def cmd_sort(args):
    """Heap-sort the given values by repeated pops."""
    # A max-heap drains in descending order, a min-heap in ascending order
    heap = Heap(args.values, is_min_heap=not args.reverse)
    print(" ".join(str(v) for v in drain(heap)))


def cmd_merge(args):
    """Merge two heaps and show the result plus its extraction order."""
    left = Heap(args.left, is_min_heap=args.min)
    right = Heap(args.right, is_min_heap=args.min)
    merged = left.merge(right)
    logger.debug("merged %d + %d items", len(left), len(right))
    print_heap("Merged", merged)
    print("Pop order: " + " ".join(str(v) for v in drain(merged)))


def cmd_change_key(args):
    """Change the key at an index and show the heap before and after."""
    heap = Heap(args.values, is_min_heap=args.min)
    print_heap("Before", heap)
    heap.change_key(args.index, args.value)
    print_heap("After", heap)


# -------------------------------------------------------------------
# Benchmarks
# -------------------------------------------------------------------
def cmd_benchmark(args):
    """Run the heap benchmark and write a CSV report."""
    rows = benchmark.run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        seed=args.seed,
    )
    for size, op_name, avg_time, std_time, avg_space in rows:
        print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time} ms | "
              f"Std: {std_time} ms | Avg Space: {avg_space} bytes")
    print(f"Benchmark results written to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m binheap.cli", description="Binary heap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- walkthrough ---
    s = sub.add_parser("demo", help="Walk through the heap operations")
    s.set_defaults(func=cmd_demo)

    # --- heap operations ---
    s = sub.add_parser("build", help="Build a heap from values")
    s.add_argument("values", type=int, nargs="*")
    s.add_argument("--min", action="store_true", help="Build a min-heap (default: max-heap)")
    s.set_defaults(func=cmd_build)

    s = sub.add_parser("sort", help="Heap-sort values")
    s.add_argument("values", type=int, nargs="*")
    s.add_argument("--reverse", action="store_true", help="Sort in descending order")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("merge", help="Merge two heaps")
    s.add_argument("--left", type=int, nargs="*", default=[])
    s.add_argument("--right", type=int, nargs="*", default=[])
    s.add_argument("--min", action="store_true", help="Use min-heaps (default: max-heaps)")
    s.set_defaults(func=cmd_merge)

    s = sub.add_parser("change-key", help="Change the value at a heap index")
    s.add_argument("values", type=int, nargs="*")
    s.add_argument("--index", type=int, required=True)
    s.add_argument("--value", type=int, required=True)
    s.add_argument("--min", action="store_true", help="Use a min-heap (default: max-heap)")
    s.set_defaults(func=cmd_change_key)

    # --- benchmarks ---
    s = sub.add_parser("benchmark", help="Benchmark heap operations into a CSV report")
    s.add_argument("--path", default=benchmark.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=benchmark.DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=0)
    s.set_defaults(func=cmd_benchmark)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m binheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (IndexError, ValueError) as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Heap benchmark runner.

Times the core heap operations over exponentially growing inputs and
writes one CSV row per (operation, input size) pair with the average and
standard deviation of wall time plus the average memory footprint.

Usage:
    python -m binheap.cli benchmark --path heap_performance.csv
"""

import csv
import logging
import random
import statistics
import sys
import time

from .datastructures.heap import Heap

logger = logging.getLogger(__name__)

# Defaults used by the CLI
DEFAULT_OUTPUT_CSV = "heap_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 12
DEFAULT_ITERATIONS = 5
DEFAULT_SPACE_ITERATIONS = 3

HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: random.Random):
    """Generate a list of random integers of given size."""
    return [rng.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, rng: random.Random, iterations: int = DEFAULT_ITERATIONS):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def heap_size_bytes(heap: Heap) -> int:
    """Estimate memory held by a heap: the object, its list and its items."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._data)
    for item in heap._data:
        total += sys.getsizeof(item)
    return total


def measure_space_efficiency(operation, input_size: int, rng: random.Random, iterations: int = DEFAULT_SPACE_ITERATIONS):
    """Return average memory used by the heap an operation leaves behind (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        sizes.append(heap_size_bytes(operation(data)))
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data):
    heap = Heap(is_min_heap=True)
    for item in data:
        heap.push(item)
    return heap


def bench_pop(data):
    heap = Heap(data, is_min_heap=True)
    while heap:
        heap.pop()
    return heap


def bench_peek(data):
    heap = Heap(data, is_min_heap=True)
    for _ in range(min(3, len(data))):
        heap.peek()
    return heap


def bench_change_key(data):
    heap = Heap(data, is_min_heap=True)
    n = len(heap)
    # Alternate between lowering and raising keys spread across the array
    for i in range(0, n, max(1, n // 16)):
        heap.change_key(i, -i if i % 2 else data[i] * 2)
    return heap


def bench_merge(data):
    half = len(data) // 2
    return Heap(data[:half], is_min_heap=True).merge(Heap(data[half:], is_min_heap=True))


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "peek": bench_peek,
    "change_key": bench_change_key,
    "merge": bench_merge,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    rounds: int = DEFAULT_ROUNDS,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int = 0,
):
    """Run exponential performance tests for heap operations.

    Returns the rows written to `output_file` (header excluded).
    """
    if base_input < 1 or rounds < 1 or iterations < 1:
        raise ValueError("base_input, rounds and iterations must all be >= 1")

    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, rng, iterations)
                avg_space = measure_space_efficiency(op_func, size, rng)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                logger.debug("%-10s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Avg Space: %.0f bytes",
                             op_name, size, avg_time, std_time, avg_space)

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows

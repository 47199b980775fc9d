import csv
import random

import pytest

from binheap import benchmark
from binheap.datastructures import Heap


def test_run_benchmarks_rows_match_csv(tmp_path):
    path = tmp_path / "heap.csv"
    rows = benchmark.run_benchmarks(str(path), base_input=8, rounds=3, iterations=2)

    with open(path, newline="") as f:
        written = list(csv.reader(f))
    assert written[0] == benchmark.HEADER
    assert [[str(c) for c in r] for r in rows] == written[1:]

    sizes = sorted({r[0] for r in rows})
    assert sizes == [8, 16, 32]
    assert {r[1] for r in rows} == set(benchmark.OPERATIONS)


def test_run_benchmarks_validates_arguments(tmp_path):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), base_input=0)


def test_generate_random_list_is_seeded():
    a = benchmark.generate_random_list(10, random.Random(7))
    b = benchmark.generate_random_list(10, random.Random(7))
    assert a == b
    assert len(a) == 10


@pytest.mark.parametrize("name", list(benchmark.OPERATIONS))
def test_operations_leave_a_valid_heap(name):
    data = benchmark.generate_random_list(50, random.Random(3))
    heap = benchmark.OPERATIONS[name](data)
    assert isinstance(heap, Heap)
    items = heap.to_list()
    for i in range(1, len(items)):
        assert items[(i - 1) // 2] <= items[i]


def test_heap_size_bytes_grows_with_items():
    small = benchmark.heap_size_bytes(Heap([1]))
    large = benchmark.heap_size_bytes(Heap(range(1000, 2000)))
    assert large > small

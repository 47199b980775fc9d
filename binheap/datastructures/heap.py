from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class EmptyHeapError(IndexError):
    """Raised when reading or removing the root of an empty heap."""


class Heap(Generic[T]):
    """A binary heap with selectable polarity and bulk heapify support.

    Implementation notes
    --------------------
    • Storage is a plain Python list laid out as a complete binary tree:
      the children of index i live at 2i+1 and 2i+2.
    • Polarity is fixed at construction. The default is a max-heap.
    • Every ordering decision goes through `_compare`, which negates the
      natural order for max-heaps, so the sift routines are polarity-agnostic.
    • An optional `key` callable projects elements to the values compared.
    """

    __slots__ = ("_data", "_is_min", "_key")

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        is_min_heap: bool = False,
        key: Optional[Callable[[T], Any]] = None,
    ) -> None:
        self._data: List[T] = []
        self._is_min = is_min_heap
        self._key = key
        if it is not None:
            self._data = list(it)
            self._heapify()  # Bulk build in O(n) instead of repeated pushes

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _compare(self, a: T, b: T) -> int:
        """Three-way comparison of a and b, reversed for max-heaps."""
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        result = (a > b) - (a < b)
        return result if self._is_min else -result

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if self._compare(data[idx], data[parent]) >= 0:
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data = self._data
        n = len(data)
        while True:
            left = 2 * idx + 1
            right = 2 * idx + 2
            best = idx
            if left < n and self._compare(data[left], data[best]) < 0:
                best = left
            if right < n and self._compare(data[right], data[best]) < 0:
                best = right
            if best == idx:
                break
            self._swap(idx, best)
            idx = best

    def _heapify(self) -> None:
        """Transform the current list into a heap in-place in O(n) time."""
        n = len(self._data)
        for i in reversed(range(n // 2)):
            self._sift_down(i)

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def is_min_heap(self) -> bool:
        return self._is_min

    @property
    def count(self) -> int:
        return len(self._data)

    @property
    def is_empty(self) -> bool:
        return len(self._data) == 0

    def push(self, item: T) -> None:
        """Push item onto the heap (O(log n))."""
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T:
        """Pop and return the root item (O(log n))."""
        if not self._data:
            raise EmptyHeapError("pop from empty heap")
        data = self._data
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the root item without removing it (O(1))."""
        if not self._data:
            raise EmptyHeapError("peek on empty heap")
        return self._data[0]

    def change_key(self, index: int, value: T) -> None:
        """Replace the item at `index` and restore heap order (O(log n)).

        The item only needs to travel in the direction it moved: towards the
        root if it now ranks ahead of the value it replaced, towards the
        leaves otherwise. Negative indices are rejected, not normalized.
        """
        n = len(self._data)
        if not 0 <= index < n:
            raise IndexError(f"heap index {index} out of range for heap of size {n}")
        old = self._data[index]
        self._data[index] = value
        if self._compare(value, old) < 0:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def merge(self, other: "Heap[T]") -> "Heap[T]":
        """Return a new heap holding the items of both heaps.

        Neither operand is modified. The result takes this heap's polarity
        and key, whatever the polarity of `other`.
        """
        if not isinstance(other, Heap):
            raise TypeError(f"cannot merge Heap with {type(other).__name__}")
        return Heap(self._data + other._data, is_min_heap=self._is_min, key=self._key)

    def replace(self, item: T) -> T:
        """Pop and return the root item, then push a new item (O(log n))."""
        if not self._data:
            raise EmptyHeapError("replace on empty heap")
        top = self._data[0]
        self._data[0] = item
        self._sift_down(0)
        return top

    def pushpop(self, item: T) -> T:
        """Push item then pop the root in a single O(log n) operation."""
        if self._data and self._compare(self._data[0], item) < 0:
            item, self._data[0] = self._data[0], item
            self._sift_down(0)
        return item

    def clear(self) -> None:
        self._data.clear()

    def to_list(self) -> List[T]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __str__(self) -> str:
        return ", ".join(str(x) for x in self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r}, is_min_heap={self._is_min})"


class MinHeap(Heap[T]):
    """A heap that surfaces the smallest item."""

    __slots__ = ()

    def __init__(self, it: Optional[Iterable[T]] = None, key: Optional[Callable[[T], Any]] = None) -> None:
        super().__init__(it, is_min_heap=True, key=key)


class MaxHeap(Heap[T]):
    """A heap that surfaces the largest item."""

    __slots__ = ()

    def __init__(self, it: Optional[Iterable[T]] = None, key: Optional[Callable[[T], Any]] = None) -> None:
        super().__init__(it, is_min_heap=False, key=key)

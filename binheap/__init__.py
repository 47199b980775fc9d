"""Array-backed binary heap with selectable min/max polarity."""

from .datastructures import EmptyHeapError, Heap, MaxHeap, MinHeap

__version__ = "0.1.0"

__all__ = [
    "EmptyHeapError",
    "Heap",
    "MaxHeap",
    "MinHeap",
]

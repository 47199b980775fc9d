from .heap import EmptyHeapError, Heap, MaxHeap, MinHeap

__all__ = [
    "EmptyHeapError",
    "Heap",
    "MaxHeap",
    "MinHeap",
]

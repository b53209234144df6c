from .binomial_heap import (
    EmptyHeapError,
    Heap,
    HeapInvariantError,
    Node,
    delete_min,
    drain,
    empty,
    find_min,
    flatten,
    from_iterable,
    insert,
    is_empty,
    meld,
    rank,
    singleton,
    size,
    validate,
)
from .interface import BinomialHeap, HeapInterface

__all__ = [
    "EmptyHeapError",
    "HeapInvariantError",
    "Heap",
    "Node",
    "empty",
    "is_empty",
    "singleton",
    "rank",
    "insert",
    "find_min",
    "delete_min",
    "meld",
    "flatten",
    "size",
    "from_iterable",
    "drain",
    "validate",
    "HeapInterface",
    "BinomialHeap",
]

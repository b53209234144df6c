"""
Priority-queue helpers built on the meldable heap.

Small consumers of the five heap primitives:
- Sorting a batch of values (`heap_sort`)
- Picking the k smallest values (`k_smallest`)
- Merging already-sorted runs (`merge_sorted`) or whole heaps (`merge_heaps`)
"""

from __future__ import annotations
from itertools import islice
from typing import Iterable, List, TypeVar

from .datastructures import Heap, drain, empty, from_iterable, meld

T = TypeVar("T")


# -----------------------------------------------------------
# Sorting
# -----------------------------------------------------------
def heap_sort(values: Iterable[T]) -> List[T]:
    """Return *values* in non-decreasing order (duplicates kept)."""
    return list(drain(from_iterable(values)))


def k_smallest(values: Iterable[T], k: int) -> List[T]:
    """Return the ``k`` smallest values in ascending order.

    ``k <= 0`` gives an empty list; a ``k`` larger than the input gives
    every value, sorted.
    """
    if not isinstance(k, int) or isinstance(k, bool):
        raise TypeError(f"k must be an int, got {type(k).__name__}")
    if k <= 0:
        return []
    return list(islice(drain(from_iterable(values)), k))


# -----------------------------------------------------------
# Merging
# -----------------------------------------------------------
def merge_heaps(heaps: Iterable[Heap[T]]) -> Heap[T]:
    """Meld every heap in *heaps* into one."""
    result: Heap[T] = empty()
    for h in heaps:
        result = meld(result, h)
    return result


def merge_sorted(*runs: Iterable[T]) -> List[T]:
    """Merge sorted (or unsorted) runs into one ascending list.

    Each run becomes its own heap; the heaps are melded and drained, so the
    output is the multiset union of all runs in order.
    """
    return list(drain(merge_heaps(from_iterable(run) for run in runs)))

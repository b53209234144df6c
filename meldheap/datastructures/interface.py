from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, TypeVar

from . import binomial_heap
from .binomial_heap import Heap

T = TypeVar("T")


class HeapInterface(ABC, Generic[T]):
    """The five meldable priority queue primitives as a swappable object.

    Code written against this interface (the property tests, for instance)
    can be pointed at any implementation that builds its forests out of
    :class:`~meldheap.datastructures.binomial_heap.Node`.
    """

    @abstractmethod
    def empty(self) -> Heap[T]:
        ...

    @abstractmethod
    def is_empty(self, heap: Heap[T]) -> bool:
        ...

    @abstractmethod
    def insert(self, x: T, heap: Heap[T]) -> Heap[T]:
        ...

    @abstractmethod
    def find_min(self, heap: Heap[T]) -> T:
        ...

    @abstractmethod
    def delete_min(self, heap: Heap[T]) -> Heap[T]:
        ...

    @abstractmethod
    def meld(self, h1: Heap[T], h2: Heap[T]) -> Heap[T]:
        ...

    # -----------------------------
    # Built on the primitives
    # -----------------------------
    def flatten(self, heap: Heap[T]) -> List[T]:
        """Every value held by *heap*, in no particular order."""
        return binomial_heap.flatten(heap)

    def drain(self, heap: Heap[T]) -> Iterator[T]:
        """Yield the minimum, delete it, repeat until the heap is empty."""
        while not self.is_empty(heap):
            yield self.find_min(heap)
            heap = self.delete_min(heap)


class BinomialHeap(HeapInterface[T]):
    """Functional binomial heap backed by :mod:`binomial_heap`."""

    def empty(self) -> Heap[T]:
        return binomial_heap.empty()

    def is_empty(self, heap: Heap[T]) -> bool:
        return binomial_heap.is_empty(heap)

    def insert(self, x: T, heap: Heap[T]) -> Heap[T]:
        return binomial_heap.insert(x, heap)

    def find_min(self, heap: Heap[T]) -> T:
        return binomial_heap.find_min(heap)

    def delete_min(self, heap: Heap[T]) -> Heap[T]:
        return binomial_heap.delete_min(heap)

    def meld(self, h1: Heap[T], h2: Heap[T]) -> Heap[T]:
        return binomial_heap.meld(h1, h2)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "BinomialHeap()"

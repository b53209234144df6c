from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class EmptyHeapError(IndexError):
    """Raised when the minimum of an empty heap is requested or removed."""


class HeapInvariantError(ValueError):
    """Raised by :func:`validate` when a forest breaks heap order or rank shape."""


class Node(Generic[T]):
    """One tree of the forest: a value and its child subtrees.

    Nodes are immutable values. Children are kept in descending-rank order
    (the child of largest rank comes first), which is the order in which
    linking prepends them.
    """

    __slots__ = ("_value", "_children")

    def __init__(self, value: T, children: Iterable[Node[T]] = ()) -> None:
        self._value = value
        self._children: Tuple[Node[T], ...] = tuple(children)

    @property
    def value(self) -> T:
        return self._value

    @property
    def children(self) -> Tuple[Node[T], ...]:
        return self._children

    @property
    def rank(self) -> int:
        return len(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._value == other._value and self._children == other._children

    def __hash__(self) -> int:
        return hash((self._value, self._children))

    def __repr__(self) -> str:  # pragma: no cover - trivial
        if not self._children:
            return f"Node({self._value!r})"
        return f"Node({self._value!r}, {list(self._children)!r})"


# A heap is the forest of its root trees.
Heap = Tuple[Node[T], ...]


# -----------------------------
# Internal helpers
# -----------------------------
def _link(a: Node[T], b: Node[T]) -> Node[T]:
    """Combine two trees of equal rank into one tree of rank + 1.

    The root with the larger value becomes the first child of the other;
    on equal values *a* stays on top.
    """
    if b.value < a.value:
        a, b = b, a
    return Node(a.value, (b,) + a.children)


def _by_rank(heap: Heap[T]) -> List[Node[T]]:
    # Stable, so forests that are already rank-ordered keep their layout.
    return sorted(heap, key=rank)


def _min_index(heap: Heap[T]) -> int:
    """Index of the first root holding the smallest value (linear scan)."""
    best = 0
    for i in range(1, len(heap)):
        if heap[i].value < heap[best].value:
            best = i
    return best


# -----------------------------
# Public API
# -----------------------------
def empty() -> Heap[T]:
    """Return the empty heap (a forest with no roots)."""
    return ()


def is_empty(heap: Heap[T]) -> bool:
    return not heap


def singleton(x: T) -> Heap[T]:
    """Return a one-tree forest holding *x* in a rank-0 node."""
    return (Node(x),)


def rank(node: Node[T]) -> int:
    """Number of children of *node*."""
    return len(node.children)


def insert(x: T, heap: Heap[T]) -> Heap[T]:
    """Return a new heap with *x* added: a meld with a singleton (O(log n))."""
    return meld(singleton(x), heap)


def find_min(heap: Heap[T]) -> T:
    """Return the smallest value stored in *heap*.

    Each root is the minimum of its own tree, so only the roots are scanned.
    Raises ``EmptyHeapError`` when the heap is empty.
    """
    if not heap:
        raise EmptyHeapError("find_min on empty heap")
    return heap[_min_index(heap)].value


def delete_min(heap: Heap[T]) -> Heap[T]:
    """Return a new heap without one occurrence of the minimum.

    The minimum root is removed and its children, reversed into ascending
    rank order, are melded back with the remaining roots.
    Raises ``EmptyHeapError`` when the heap is empty.
    """
    if not heap:
        raise EmptyHeapError("delete_min on empty heap")
    i = _min_index(heap)
    smallest = heap[i]
    rest = heap[:i] + heap[i + 1:]
    return meld(tuple(reversed(smallest.children)), rest)


def meld(h1: Heap[T], h2: Heap[T]) -> Heap[T]:
    """Return the union of two heaps (duplicates kept).

    Both root sequences are walked in ascending rank order while a carry
    tree is propagated, the same way a carry moves through binary addition:
    two trees of the current rank are linked into the carry, a lone tree is
    emitted, and with three of them the carry is emitted and the other two
    are linked into the next carry.
    """
    a = _by_rank(h1)
    b = _by_rank(h2)
    i = j = 0
    carry: Optional[Node[T]] = None
    out: List[Node[T]] = []

    while i < len(a) or j < len(b) or carry is not None:
        ranks = []
        if i < len(a):
            ranks.append(a[i].rank)
        if j < len(b):
            ranks.append(b[j].rank)
        if carry is not None:
            ranks.append(carry.rank)
        r = min(ranks)

        group: List[Node[T]] = []
        if carry is not None and carry.rank == r:
            group.append(carry)
            carry = None
        if i < len(a) and a[i].rank == r:
            group.append(a[i])
            i += 1
        if j < len(b) and b[j].rank == r:
            group.append(b[j])
            j += 1

        if len(group) == 1:
            out.append(group[0])
        elif len(group) == 2:
            carry = _link(group[0], group[1])
        else:
            out.append(group[0])
            carry = _link(group[1], group[2])

    return tuple(out)


# -----------------------------
# Enumeration and helpers
# -----------------------------
def flatten(heap: Heap[T]) -> List[T]:
    """Return every value in the forest (root first, then its subtrees).

    The order is a depth-first walk and carries no ordering guarantee.
    """
    values: List[T] = []
    stack = list(reversed(heap))
    while stack:
        node = stack.pop()
        values.append(node.value)
        stack.extend(reversed(node.children))
    return values


def size(heap: Heap[T]) -> int:
    """Total number of values in the forest, counting every node."""
    count = 0
    stack = list(heap)
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(node.children)
    return count


def from_iterable(values: Iterable[T]) -> Heap[T]:
    """Build a heap by inserting *values* one after another."""
    heap: Heap[T] = empty()
    for v in values:
        heap = insert(v, heap)
    return heap


def drain(heap: Heap[T]) -> Iterator[T]:
    """Yield values in non-decreasing order by repeated find/delete of the minimum.

    The heap passed in is left untouched.
    """
    while heap:
        yield find_min(heap)
        heap = delete_min(heap)


def validate(heap: Heap[T], strict: bool = False) -> None:
    """Check heap order and rank shape of every tree in *heap*.

    Every child must hold a value no smaller than its parent and have a
    rank below its parent's. With ``strict=True`` the canonical binomial
    shape is required as well: a node of rank ``r`` has children of ranks
    ``r-1, ..., 0`` in that order, and no two roots share a rank.
    Raises ``HeapInvariantError`` on the first violation found.
    """
    if strict:
        root_ranks = [root.rank for root in heap]
        if len(set(root_ranks)) != len(root_ranks):
            raise HeapInvariantError(f"duplicate root ranks {sorted(root_ranks)}")

    stack = list(heap)
    while stack:
        node = stack.pop()
        r = node.rank
        for pos, child in enumerate(node.children):
            if child.value < node.value:
                raise HeapInvariantError(
                    f"child {child.value!r} is smaller than its parent {node.value!r}"
                )
            if child.rank >= r:
                raise HeapInvariantError(
                    f"child {child.value!r} has rank {child.rank} under a parent of rank {r}"
                )
            if strict and child.rank != r - 1 - pos:
                raise HeapInvariantError(
                    f"child {child.value!r} has rank {child.rank}, expected {r - 1 - pos}"
                )
            stack.append(child)

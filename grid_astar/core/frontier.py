"""Binary min-heap of search nodes ordered by ``f_cost``."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Iterator, List, Tuple

from .errors import EmptyFrontier
from .node import SearchNode


class Frontier:
    """Priority queue of :class:`SearchNode` ordered ascending by ``f_cost``.

    There is no decrease-key: the same state may be pushed several times
    and stale copies stay in the heap until popped. Among equal ``f_cost``
    entries the order returned is an implementation detail of the heap.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, SearchNode]] = []
        # heapq compares tuples element-wise; the counter keeps it from
        # ever comparing two nodes.
        self._counter = count()

    def push(self, node: SearchNode) -> None:
        heappush(self._heap, (node.f_cost, next(self._counter), node))

    def pop(self) -> SearchNode:
        """Remove and return a node with minimal ``f_cost``."""

        if not self._heap:
            raise EmptyFrontier("pop from an empty frontier")
        return heappop(self._heap)[2]

    def peek(self) -> SearchNode:
        if not self._heap:
            raise EmptyFrontier("peek at an empty frontier")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def snapshot(self) -> Tuple[SearchNode, ...]:
        """Return the current contents in heap order without consuming them."""

        return tuple(entry[2] for entry in self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self.snapshot())


__all__ = ["Frontier"]

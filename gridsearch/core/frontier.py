# gridsearch/core/frontier.py
#!/usr/bin/env python3
"""
Frontier orderings for the search loop.

All three expose the same small surface: push(cell, key), pop(), is_empty()
and len(). FIFO and LIFO ignore the key; the priority frontier pops the
lowest key, FIFO among equal keys (seq counter, same trick as the A* PQ).
"""

import heapq
from collections import deque
from typing import Deque, Dict, List, Tuple

from gridsearch.core.errors import EmptyFrontierError
from gridsearch.core.types import Algorithm, Cell


class FifoFrontier:
    """Queue. BFS."""

    def __init__(self):
        self._items: Deque[Cell] = deque()

    def push(self, cell: Cell, key: float = 0) -> None:
        self._items.append(cell)

    def pop(self) -> Cell:
        if not self._items:
            raise EmptyFrontierError("pop from empty FIFO frontier")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier:
    """Stack. DFS."""

    def __init__(self):
        self._items: List[Cell] = []

    def push(self, cell: Cell, key: float = 0) -> None:
        self._items.append(cell)

    def pop(self) -> Cell:
        if not self._items:
            raise EmptyFrontierError("pop from empty LIFO frontier")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier:
    """
    Min-heap keyed on (key, seq). A* and greedy best-first.

    Pushing a cell that is already queued replaces its old entry: the old one
    stays in the heap but is skipped when it surfaces (lazy deletion), so each
    cell has at most one live entry and len() counts live entries only.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Cell]] = []  # (key, seq, cell)
        self._live: Dict[Cell, int] = {}                # cell -> seq of its live entry
        self._seq = 0

    def _bump(self) -> int:
        self._seq += 1
        return self._seq

    def _prune(self) -> None:
        while self._heap:
            _, seq, cell = self._heap[0]
            if self._live.get(cell) == seq:
                return
            heapq.heappop(self._heap)

    def push(self, cell: Cell, key: float = 0) -> None:
        seq = self._bump()
        self._live[cell] = seq
        heapq.heappush(self._heap, (key, seq, cell))

    def pop(self) -> Cell:
        self._prune()
        if not self._heap:
            raise EmptyFrontierError("pop from empty priority frontier")
        _, _, cell = heapq.heappop(self._heap)
        del self._live[cell]
        return cell

    def is_empty(self) -> bool:
        self._prune()
        return not self._heap

    def __len__(self) -> int:
        return len(self._live)


def make_frontier(algorithm: Algorithm):
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.BFS:
        return FifoFrontier()
    if algorithm is Algorithm.DFS:
        return LifoFrontier()
    return PriorityFrontier()

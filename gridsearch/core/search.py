# gridsearch/core/search.py
#!/usr/bin/env python3
"""
One search loop for BFS, DFS, A* and greedy best-first, one expansion per step().

Implements the stepping API the callers drive:
- run = SearchRun(grid, algorithm, heuristic)
- run.step() -> StepEvent while running, then the SearchResult (repeated on
  every later call)
- iter(run) yields every StepEvent and finally the SearchResult

The four strategies differ only in:
- the frontier ordering (FIFO, LIFO, priority), see frontier.py
- the priority rule for the priority frontier:
    A*      cost[current] + h(neighbor, goal)   (h accumulates as the step cost)
    greedy  h(neighbor, goal)
  BFS/DFS record a neighbour once, on first discovery.

The goal test happens when a cell is popped, for all four strategies.
explored_count counts cells the first time they get a parent (start excluded).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Union

from gridsearch.core.frontier import make_frontier
from gridsearch.core.heuristics import Heuristic, heuristic_fn
from gridsearch.core.paths import reconstruct
from gridsearch.core.types import (
    Algorithm, Cell, Grid, NoPath, PathFound, SearchResult, StepEvent,
)

logger = logging.getLogger(__name__)

PriorityFn = Callable[[Cell, int], int]  # (neighbor, cost of current) -> key


class SearchStatus(Enum):
    READY = "ready"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchState:
    """Everything one run mutates. Built fresh by SearchRun.reset()."""
    frontier: object
    obstacles: FrozenSet[Cell]
    parents: Dict[Cell, Optional[Cell]] = field(default_factory=dict)
    cost: Dict[Cell, int] = field(default_factory=dict)
    explored: int = 0
    expanded: int = 0
    status: SearchStatus = SearchStatus.READY


def priority_fn(algorithm: Algorithm, heuristic: Heuristic, goal: Cell) -> Optional[PriorityFn]:
    """Key function for the priority frontier, or None for insertion-ordered strategies."""
    algorithm = Algorithm.parse(algorithm)
    h = heuristic_fn(heuristic)
    if algorithm is Algorithm.ASTAR:
        return lambda n, g_cur: g_cur + h(n, goal)
    if algorithm is Algorithm.GREEDY:
        return lambda n, g_cur: h(n, goal)
    return None


class SearchRun:
    def __init__(self, grid: Grid, algorithm: Union[str, Algorithm] = Algorithm.BFS,
                 heuristic: Union[str, Heuristic] = Heuristic.MANHATTAN):
        self.grid = grid
        self.algorithm = Algorithm.parse(algorithm)
        self.heuristic = Heuristic.parse(heuristic)
        self._priority = priority_fn(self.algorithm, self.heuristic, grid.goal)
        self.state: Optional[SearchState] = None
        self._result: Optional[SearchResult] = None
        self.reset()

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Drop all state and seed the frontier with the start cell."""
        # obstacles are copied so edits to the grid mid-run cannot leak in
        self.state = SearchState(frontier=make_frontier(self.algorithm),
                                 obstacles=frozenset(self.grid.obstacles))
        self._result = None

        s = self.grid.start
        self.state.parents[s] = None
        self.state.cost[s] = 0
        self.state.frontier.push(s, 0)

    @property
    def status(self) -> SearchStatus:
        return self.state.status

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[SearchResult]:
        return self._result

    # -------------------- main stepping logic --------------------

    def step(self) -> Union[StepEvent, SearchResult]:
        """
        Run ONE expansion:
          - Frontier empty: finish with NoPath.
          - Pop the next cell; if it is the goal, finish with PathFound.
          - Else record and queue its open neighbours.
        """
        if self._result is not None:
            return self._result

        st = self.state
        if st.status is SearchStatus.READY:
            st.status = SearchStatus.RUNNING
            logger.debug("%s/%s: %s -> %s on %dx%d, %d obstacles",
                         self.algorithm.name, self.heuristic.name,
                         self.grid.start, self.grid.goal,
                         self.grid.width, self.grid.height, len(st.obstacles))

        if st.frontier.is_empty():
            st.status = SearchStatus.EXHAUSTED
            self._result = NoPath(explored_count=st.explored)
            logger.debug("%s: no path after exploring %d cells", self.algorithm.name, st.explored)
            return self._result

        current = st.frontier.pop()
        st.expanded += 1

        if current == self.grid.goal:
            st.status = SearchStatus.FOUND
            path, nodes_in_path = reconstruct(st.parents, current)
            self._result = PathFound(path=tuple(path), explored_count=st.explored)
            logger.debug("%s: path of %d nodes, %d explored",
                         self.algorithm.name, nodes_in_path, st.explored)
            return self._result

        discovered: List[Cell] = []
        for n in self.grid.neighbors(current):
            if n in st.obstacles:
                continue
            if self._relax(current, n):
                discovered.append(n)

        return StepEvent(current=current, discovered=tuple(discovered),
                         explored_count=st.explored)

    def _relax(self, current: Cell, n: Cell) -> bool:
        """Record n under current if the strategy allows; True when n is new."""
        st = self.state
        first_visit = n not in st.parents

        if self._priority is None:
            if not first_visit:
                return False
            st.parents[n] = current
            st.frontier.push(n)
        else:
            new_cost = self._priority(n, st.cost[current])
            if not first_visit and new_cost >= st.cost[n]:
                return False
            st.cost[n] = new_cost
            st.parents[n] = current
            st.frontier.push(n, new_cost)

        if first_visit:
            st.explored += 1
        return first_visit

    # -------------------- drivers --------------------

    def __iter__(self) -> Iterator[Union[StepEvent, SearchResult]]:
        while True:
            item = self.step()
            yield item
            if self._result is not None:
                return

    def solve(self) -> SearchResult:
        """Step until finished and return the result."""
        while self._result is None:
            self.step()
        return self._result

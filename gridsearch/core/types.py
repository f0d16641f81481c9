# gridsearch/core/types.py
#!/usr/bin/env python3
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Set, Union

from gridsearch.core.errors import InvalidGridError

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (col, row)


class Algorithm(Enum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"
    GREEDY = "greedy"

    @classmethod
    def parse(cls, value: Union[str, "Algorithm"]) -> "Algorithm":
        """Accept an Algorithm, its value or its name, case-insensitive ("a*" too)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("*", "star").replace("-", "").replace("_", "")
        aliases = {"gbfs": "greedy", "greedybfs": "greedy"}
        key = aliases.get(key, key)
        for algo in cls:
            if key == algo.value:
                return algo
        raise ValueError(f"unknown algorithm: {value!r}")


@dataclass
class Grid:
    width: int
    height: int
    start: Cell
    goal: Cell
    cell_size: int = 1
    obstacles: Set[Cell] = field(default_factory=set)

    def __post_init__(self):
        self.start = tuple(self.start)
        self.goal = tuple(self.goal)
        self.obstacles = {tuple(c) for c in self.obstacles}

        if self.width <= 0 or self.height <= 0:
            raise InvalidGridError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.cell_size <= 0:
            raise InvalidGridError(f"cell size must be positive, got {self.cell_size}")
        if not self.in_bounds(self.start):
            raise InvalidGridError(f"start {self.start} out of bounds")
        if not self.in_bounds(self.goal):
            raise InvalidGridError(f"goal {self.goal} out of bounds")
        if self.start == self.goal:
            raise InvalidGridError(f"start and goal are the same cell {self.start}")
        if self.start in self.obstacles:
            raise InvalidGridError(f"start {self.start} is an obstacle")
        if self.goal in self.obstacles:
            raise InvalidGridError(f"goal {self.goal} is an obstacle")
        outside = [c for c in self.obstacles if not self.in_bounds(c)]
        if outside:
            raise InvalidGridError(f"obstacles out of bounds: {sorted(outside)}")

    # -------------------- queries --------------------

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def free_cells(self) -> int:
        return self.total_cells - len(self.obstacles)

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, c: Cell) -> bool:
        return tuple(c) in self.obstacles

    def neighbors(self, c: Cell) -> List[Cell]:
        """4-connected neighbours in the order left, right, up, down.

        Directions that leave the grid are dropped, so a border cell gets
        fewer than four and never itself. Obstacles are not filtered here.
        """
        x, y = c
        candidates = [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
        return [n for n in candidates if self.in_bounds(n)]

    # -------------------- pixel mapping --------------------

    def to_pixel(self, c: Cell) -> Tuple[int, int]:
        """Top-left pixel of a cell."""
        x, y = c
        return x * self.cell_size, y * self.cell_size

    def cell_at(self, px: int, py: int) -> Cell:
        """Snap a pixel position onto the cell containing it (not bounds-checked)."""
        return int(px) // self.cell_size, int(py) // self.cell_size

    # -------------------- edits (between runs only) --------------------

    def add_obstacle(self, c: Cell) -> bool:
        c = tuple(c)
        if c in (self.start, self.goal) or c in self.obstacles or not self.in_bounds(c):
            logger.debug("add_obstacle(%s) ignored", c)
            return False
        self.obstacles.add(c)
        return True

    def remove_obstacle(self, c: Cell) -> bool:
        c = tuple(c)
        if c not in self.obstacles:
            logger.debug("remove_obstacle(%s) ignored", c)
            return False
        self.obstacles.remove(c)
        return True


@dataclass(frozen=True)
class StepEvent:
    current: Cell
    discovered: Tuple[Cell, ...] = ()
    explored_count: int = 0


@dataclass(frozen=True)
class PathFound:
    path: Tuple[Cell, ...]
    explored_count: int

    @property
    def nodes_in_path(self) -> int:
        # start is not counted
        return len(self.path) - 1


@dataclass(frozen=True)
class NoPath:
    explored_count: int


SearchResult = Union[PathFound, NoPath]

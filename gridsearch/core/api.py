# gridsearch/core/api.py
#!/usr/bin/env python3
"""
Entry points an outer layer (editor, CLI, viewer) calls.

Grids are validated on construction, so every function below either returns
a usable Grid / SearchRun or raises before any search work starts.
"""

import dataclasses
import random
from typing import Optional, Union

from gridsearch.core import obstacles as _obstacles
from gridsearch.core.heuristics import Heuristic
from gridsearch.core.search import SearchRun
from gridsearch.core.types import Algorithm, Cell, Grid, SearchResult


def configure(width: int, height: int, cell_size: int = 1,
              start: Optional[Cell] = None, goal: Optional[Cell] = None) -> Grid:
    """Empty grid; start defaults to the top-left corner, goal to the bottom-right."""
    if start is None:
        start = (0, 0)
    if goal is None:
        goal = (width - 1, height - 1)
    return Grid(width=width, height=height, start=start, goal=goal, cell_size=cell_size)


def set_start_goal(grid: Grid, start: Cell, goal: Cell) -> Grid:
    return dataclasses.replace(grid, start=start, goal=goal, obstacles=set(grid.obstacles))


def generate_obstacles(grid: Grid, count: int, rng: Optional[random.Random] = None) -> Grid:
    """Copy of grid with a fresh random obstacle set of exactly count cells."""
    return dataclasses.replace(grid, obstacles=_obstacles.generate(grid, count, rng))


def random_grid(width: int, height: int, cell_size: int = 1, obstacle_count: int = 0,
                rng: Optional[random.Random] = None) -> Grid:
    """Random start and goal, then obstacle_count random obstacles."""
    rng = rng or random.Random()
    start, goal = _obstacles.place_start_goal(width, height, rng)
    grid = Grid(width=width, height=height, start=start, goal=goal, cell_size=cell_size)
    if obstacle_count:
        grid = generate_obstacles(grid, obstacle_count, rng)
    return grid


def add_obstacle(grid: Grid, cell: Cell) -> bool:
    return grid.add_obstacle(cell)


def remove_obstacle(grid: Grid, cell: Cell) -> bool:
    return grid.remove_obstacle(cell)


def run(grid: Grid, algorithm: Union[str, Algorithm] = Algorithm.BFS,
        heuristic: Union[str, Heuristic] = Heuristic.MANHATTAN) -> SearchRun:
    """Lazy run: iterate it (or call step()) to get StepEvents, then the result."""
    return SearchRun(grid, algorithm, heuristic)


def solve(grid: Grid, algorithm: Union[str, Algorithm] = Algorithm.BFS,
          heuristic: Union[str, Heuristic] = Heuristic.MANHATTAN) -> SearchResult:
    return SearchRun(grid, algorithm, heuristic).solve()

# gridsearch/core/obstacles.py
#!/usr/bin/env python3
"""Random layouts: obstacle sets and start/goal placement."""

import logging
import random
from typing import Optional, Set, Tuple

from gridsearch.core.errors import ImpossibleDensityError, InvalidGridError
from gridsearch.core.types import Cell, Grid

logger = logging.getLogger(__name__)


def _random_cell(rng: random.Random, width: int, height: int) -> Cell:
    return rng.randrange(width), rng.randrange(height)


def generate(grid: Grid, target_count: int, rng: Optional[random.Random] = None) -> Set[Cell]:
    """
    Sample distinct random cells, never start or goal, until target_count are chosen.

    The grid is not modified. Two cells are reserved for start and goal, so at
    most total_cells - 2 obstacles fit.
    """
    capacity = grid.total_cells - 2
    if target_count < 0 or target_count > capacity:
        raise ImpossibleDensityError(
            f"cannot place {target_count} obstacles on a {grid.width}x{grid.height} grid "
            f"(at most {capacity})")
    rng = rng or random.Random()

    reserved = {grid.start, grid.goal}
    chosen: Set[Cell] = set()
    if target_count > capacity // 2:
        # dense request: shuffle the free cells instead of rejection sampling
        pool = [(x, y) for y in range(grid.height) for x in range(grid.width)
                if (x, y) not in reserved]
        chosen = set(rng.sample(pool, target_count))
    else:
        while len(chosen) < target_count:
            c = _random_cell(rng, grid.width, grid.height)
            if c not in reserved:
                chosen.add(c)

    logger.debug("placed %d obstacles on %dx%d", len(chosen), grid.width, grid.height)
    return chosen


def place_start_goal(width: int, height: int,
                     rng: Optional[random.Random] = None) -> Tuple[Cell, Cell]:
    """Two distinct random cells: (start, goal)."""
    if width <= 0 or height <= 0 or width * height < 2:
        raise InvalidGridError(f"a {width}x{height} grid has no room for start and goal")
    rng = rng or random.Random()
    start = _random_cell(rng, width, height)
    goal = _random_cell(rng, width, height)
    while goal == start:
        goal = _random_cell(rng, width, height)
    return start, goal

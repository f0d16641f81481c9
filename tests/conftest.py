import random

import pytest

from gridsearch.core.api import configure, random_grid
from gridsearch.core.heuristics import Heuristic
from gridsearch.core.types import Algorithm, Grid

ALGORITHMS = list(Algorithm)
HEURISTICS = list(Heuristic)


@pytest.fixture
def grid3():
    """3x3, no obstacles, corner to corner."""
    return configure(3, 3, 1)


@pytest.fixture
def walled_goal():
    """5x5 with the centre goal boxed in on all four sides."""
    return Grid(width=5, height=5, start=(0, 0), goal=(2, 2),
                obstacles={(1, 2), (3, 2), (2, 1), (2, 3)})


@pytest.fixture
def random_grids():
    """A handful of reproducible 12x10 grids at roughly 25% density."""
    return [random_grid(12, 10, 20, 30, random.Random(seed)) for seed in range(8)]

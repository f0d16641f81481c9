# gridsearch/core/heuristics.py
#!/usr/bin/env python3
"""
Distance estimates between two cells.

Both return ints. Euclidean is truncated toward zero, so on a 4-connected grid
it underestimates more than Manhattan does; neither is used as a step cost
except by the A* cost rule in search.py.
"""

import math
from enum import Enum
from typing import Callable, Union

from gridsearch.core.types import Cell

HeuristicFn = Callable[[Cell, Cell], int]


def manhattan(a: Cell, b: Cell) -> int:
    (ax, ay), (bx, by) = a, b
    return abs(ax - bx) + abs(ay - by)


def euclidean(a: Cell, b: Cell) -> int:
    (ax, ay), (bx, by) = a, b
    return int(math.sqrt((ax - bx) ** 2 + (ay - by) ** 2))


class Heuristic(Enum):
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"

    @classmethod
    def parse(cls, value: Union[str, "Heuristic"]) -> "Heuristic":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for h in cls:
            if key == h.value:
                return h
        raise ValueError(f"unknown heuristic: {value!r}")


_FUNCTIONS = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.EUCLIDEAN: euclidean,
}


def heuristic_fn(h: Heuristic) -> HeuristicFn:
    return _FUNCTIONS[Heuristic.parse(h)]

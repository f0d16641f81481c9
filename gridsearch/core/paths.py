# gridsearch/core/paths.py
#!/usr/bin/env python3
from typing import Dict, List, Optional, Tuple

from gridsearch.core.types import Cell


def reconstruct(parents: Dict[Cell, Optional[Cell]], goal: Cell) -> Tuple[List[Cell], int]:
    """
    Walk parent links back from goal to the cell whose parent is None (start).

    Returns (path start..goal inclusive, nodes_in_path) where nodes_in_path
    leaves the start out. KeyError if goal was never reached.
    """
    path: List[Cell] = []
    cur: Optional[Cell] = goal
    while cur is not None:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path, len(path) - 1

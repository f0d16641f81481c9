# gridsearch/app/cli.py
#!/usr/bin/env python3
"""
Headless driver: random grid -> search -> explored / path counts.

    gridsearch                         # one run with the configured algorithm
    gridsearch --algorithm astar --heuristic euclidean --seed 7
    gridsearch --compare               # all four algorithms on the same grid
    gridsearch --compare --runs 20 --csv out/raw.csv
    gridsearch --steps                 # one line per expansion

Defaults come from gridsearch.core.config (environment), flags override them.
"""

import argparse
import csv
import logging
import os
import random
import statistics
import sys
import time
from typing import Dict, List, Optional, Sequence

from gridsearch.core import api
from gridsearch.core.config import Settings, load_settings, parse_log_level
from gridsearch.core.errors import PathfindingError
from gridsearch.core.heuristics import Heuristic
from gridsearch.core.types import Algorithm, Grid, PathFound, StepEvent

logger = logging.getLogger(__name__)

ALL_ALGOS = [Algorithm.BFS, Algorithm.DFS, Algorithm.ASTAR, Algorithm.GREEDY]


def _algorithm(value: str) -> Algorithm:
    try:
        return Algorithm.parse(value)
    except ValueError as ex:
        raise argparse.ArgumentTypeError(str(ex))


def _heuristic(value: str) -> Heuristic:
    try:
        return Heuristic.parse(value)
    except ValueError as ex:
        raise argparse.ArgumentTypeError(str(ex))


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsearch",
                                     description="Run grid pathfinding searches on random grids.")
    parser.add_argument("--width", type=int, default=settings.width)
    parser.add_argument("--height", type=int, default=settings.height)
    parser.add_argument("--cell-size", type=int, default=settings.cell_size)
    parser.add_argument("--obstacles", type=int, default=settings.obstacle_count,
                        help="number of random obstacles (0 for an empty grid)")
    parser.add_argument("--algorithm", type=_algorithm, default=settings.algorithm,
                        help="bfs | dfs | astar | greedy")
    parser.add_argument("--heuristic", type=_heuristic, default=settings.heuristic,
                        help="manhattan | euclidean")
    parser.add_argument("--seed", type=int, default=settings.seed)
    parser.add_argument("--compare", action="store_true", help="run all four algorithms")
    parser.add_argument("--runs", type=int, default=1, help="random grids to average over")
    parser.add_argument("--csv", default=None, help="write raw per-run rows to this file")
    parser.add_argument("--steps", action="store_true", help="print every expansion")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


# ---------- runs ----------
def run_single(grid: Grid, algorithm: Algorithm, heuristic: Heuristic,
               on_step=None) -> Dict[str, object]:
    t0 = time.perf_counter()
    steps = 0
    result = None
    for item in api.run(grid, algorithm, heuristic):
        if isinstance(item, StepEvent):
            steps += 1
            if on_step is not None:
                on_step(steps, item)
        else:
            result = item
    elapsed = time.perf_counter() - t0

    found = isinstance(result, PathFound)
    return {
        "algorithm": algorithm.name,
        "heuristic": heuristic.value,
        "width": grid.width,
        "height": grid.height,
        "obstacles": len(grid.obstacles),
        "start": grid.start,
        "goal": grid.goal,
        "found": found,
        "explored": result.explored_count,
        "path_nodes": result.nodes_in_path if found else 0,
        "expansions": steps,
        "elapsed_sec": elapsed,
    }


def aggregate_results(rows: List[Dict[str, object]]) -> List[Dict[str, object]]:
    grouped: Dict[str, List[Dict[str, object]]] = {}
    for r in rows:
        grouped.setdefault(r["algorithm"], []).append(r)

    summary = []
    for algo, items in grouped.items():
        found = [it for it in items if it["found"]]
        summary.append({
            "algorithm": algo,
            "count": len(items),
            "found_rate": len(found) / len(items),
            "explored_avg": statistics.mean(it["explored"] for it in items),
            "path_nodes_avg": statistics.mean(it["path_nodes"] for it in found) if found else 0,
            "elapsed_sec_avg": statistics.mean(it["elapsed_sec"] for it in items),
        })
    return summary


def write_csv(path: str, rows: List[Dict[str, object]]) -> None:
    if not rows:
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


# ---------- output ----------
def _print_step(n: int, event: StepEvent) -> None:
    added = ", ".join(str(c) for c in event.discovered) or "-"
    print(f"step {n}: {event.current} +[{added}] explored={event.explored_count}")


def _print_row(row: Dict[str, object]) -> None:
    print(f"{row['algorithm']} ({row['heuristic']})")
    if not row["found"]:
        print("NO PATH AVAILABLE")
    print(f"Nodes explored: {row['explored']}")
    if row["found"]:
        print(f"Nodes in path: {row['path_nodes']}")


def _print_compare_line(row: Dict[str, object]) -> None:
    path = row["path_nodes"] if row["found"] else "no path"
    print(f"{row['algorithm']:<8} explored={row['explored']:<5} path={path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = load_settings()
        args = build_parser(settings).parse_args(argv)
        logging.basicConfig(level=parse_log_level(args.log_level),
                            format="%(levelname)s %(name)s: %(message)s")
    except PathfindingError as ex:
        print(f"gridsearch: {ex}", file=sys.stderr)
        return 2

    algos = ALL_ALGOS if args.compare else [args.algorithm]
    seed_base = args.seed if args.seed is not None else int(time.time())
    rows: List[Dict[str, object]] = []

    try:
        for i in range(max(1, args.runs)):
            rng = random.Random(seed_base + i)
            grid = api.random_grid(args.width, args.height, args.cell_size, args.obstacles, rng)
            if args.runs <= 1:
                print(f"{grid.width}x{grid.height}, {len(grid.obstacles)} obstacles, "
                      f"start {grid.start}, goal {grid.goal}")
            for algo in algos:
                row = run_single(grid, algo, args.heuristic,
                                 on_step=_print_step if args.steps else None)
                row["seed"] = seed_base + i
                rows.append(row)
                if args.runs <= 1:
                    (_print_compare_line if args.compare else _print_row)(row)
    except PathfindingError as ex:
        logger.error("%s", ex)
        return 2

    if args.runs > 1:
        for s in aggregate_results(rows):
            print(f"{s['algorithm']:<8} runs={s['count']} found={s['found_rate']:.0%} "
                  f"explored_avg={s['explored_avg']:.1f} path_avg={s['path_nodes_avg']:.1f}")

    if args.csv:
        write_csv(args.csv, rows)
        print(f"Wrote results to {args.csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# gridsearch/core/config.py
#!/usr/bin/env python3
"""
Defaults for grids and runs, overridable from the environment.

- ENV: GRIDSEARCH_WIDTH, GRIDSEARCH_HEIGHT, GRIDSEARCH_CELL_SIZE,
       GRIDSEARCH_OBSTACLES, GRIDSEARCH_ALGORITHM, GRIDSEARCH_HEURISTIC,
       GRIDSEARCH_SEED, GRIDSEARCH_LOG_LEVEL
- CLI flags (see gridsearch.app.cli) override the environment.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from gridsearch.core.errors import ConfigError
from gridsearch.core.heuristics import Heuristic
from gridsearch.core.types import Algorithm

# ---------- Defaults (the original 600x600 px board of 20 px cells) ----------
GRID_WIDTH = 30
GRID_HEIGHT = 30
CELL_SIZE = 20
OBSTACLE_COUNT = 200
ALGORITHM = Algorithm.BFS
HEURISTIC = Heuristic.MANHATTAN
LOG_LEVEL = "WARNING"

ENV_PREFIX = "GRIDSEARCH_"


@dataclass
class Settings:
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    cell_size: int = CELL_SIZE
    obstacle_count: int = OBSTACLE_COUNT
    algorithm: Algorithm = ALGORITHM
    heuristic: Heuristic = HEURISTIC
    seed: Optional[int] = None
    log_level: str = LOG_LEVEL


def _int(environ: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def parse_log_level(value: str) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log level: {value!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    s = Settings(
        width=_int(env, "WIDTH", GRID_WIDTH),
        height=_int(env, "HEIGHT", GRID_HEIGHT),
        cell_size=_int(env, "CELL_SIZE", CELL_SIZE),
        obstacle_count=_int(env, "OBSTACLES", OBSTACLE_COUNT),
        seed=_int(env, "SEED", None),
    )
    try:
        s.algorithm = Algorithm.parse(env.get(ENV_PREFIX + "ALGORITHM", ALGORITHM))
        s.heuristic = Heuristic.parse(env.get(ENV_PREFIX + "HEURISTIC", HEURISTIC))
    except ValueError as ex:
        raise ConfigError(str(ex)) from None
    s.log_level = parse_log_level(env.get(ENV_PREFIX + "LOG_LEVEL", LOG_LEVEL))
    return s

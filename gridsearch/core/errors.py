# gridsearch/core/errors.py
#!/usr/bin/env python3
"""Exceptions raised by the pathfinding core.

"No path" is not an error; it comes back as a NoPath result.
"""


class PathfindingError(Exception):
    """Base class for everything the core raises on purpose."""


class InvalidGridError(PathfindingError, ValueError):
    """Bad dimensions, or start/goal out of bounds, equal, or blocked."""


class ImpossibleDensityError(PathfindingError, ValueError):
    """More obstacles requested than the grid can hold."""


class EmptyFrontierError(PathfindingError, IndexError):
    """pop() on an empty frontier. A programming error, not a search outcome."""


class ConfigError(PathfindingError, ValueError):
    """A setting from the environment or command line could not be parsed."""

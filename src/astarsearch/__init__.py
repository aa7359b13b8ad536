
"""astarsearch: A* search over caller-defined state spaces.

Public API:
- search / find_path / AStar with SearchParams, SearchStats and Outcome
- Frontier (indexed binary heap with decrease-key)
- Policy protocol for state spaces
- demo state spaces: scenarios, maze, kruskal
"""
from .astar import AStar, Outcome, SearchParams, SearchStats, find_path, search
from .core.types import Policy
from .errors import NotFoundError, SearchError, SearchStoppedError
from .frontier import Entry, Frontier
from . import kruskal, maze, scenarios

__all__ = [
    "AStar", "Outcome", "SearchParams", "SearchStats", "find_path", "search",
    "Policy", "NotFoundError", "SearchError", "SearchStoppedError", "Entry", "Frontier",
    "kruskal", "maze", "scenarios",
]

__version__ = "0.1.0"

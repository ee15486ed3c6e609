"""Search for the shortest pattern with an exact numeric value.

This module implements an A* frontier search with branch-and-bound pruning
over any path type that follows ``protocols.SearchPath``.
"""

from .heuristics import estimate_total_moves
from .astar import AStarPathGenerator, QueuedPath, SearchStatistics, create_generator

__all__ = [
    'estimate_total_moves',
    'AStarPathGenerator',
    'QueuedPath',
    'SearchStatistics',
    'create_generator'
]

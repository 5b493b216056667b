"""
Graph traversal engine package.

This package provides:
- Frontier with LIFO/FIFO dequeue disciplines
- Identity-keyed visited set
- GraphWalker implementing visit-once DFS and BFS
"""

from .frontier import Discipline, Frontier
from .visited import VisitedSet
from .engine import GraphView, GraphWalker, TraversalResult, bfs, dfs

__all__ = [
    'Discipline', 'Frontier', 'VisitedSet',
    'GraphView', 'GraphWalker', 'TraversalResult', 'bfs', 'dfs',
]

"""
graphwalk: visit-once DFS/BFS over linked and arena graphs.

This package provides:
- Linked (shared-reference) and arena (handle-indexed) graph models
- A frontier/visited-set traversal engine shared by DFS and BFS
- YAML graph definitions and networkx interoperability
"""

from .graph import Edge, LinkedGraph, Node, NodeArena
from .traversal import Discipline, GraphWalker, bfs, dfs

__version__ = "0.1.0"

__all__ = [
    'Edge', 'Node', 'LinkedGraph', 'NodeArena',
    'Discipline', 'GraphWalker', 'bfs', 'dfs',
]

"""
Graph model package.

Two representations of the same directed, weighted graph:
- Linked: Node objects refer to their destination Node objects
- Arena: nodes live in a NodeArena and edges store destination handles
"""

from .errors import GraphDefinitionError
from .model import Edge, Node, LinkedGraph, LinkedView
from .arena import ArenaEdge, ArenaNode, NodeArena
from .loader import GraphDefinition, load_definition, dump_definition

__all__ = [
    'GraphDefinitionError',
    'Edge', 'Node', 'LinkedGraph', 'LinkedView',
    'ArenaEdge', 'ArenaNode', 'NodeArena',
    'GraphDefinition', 'load_definition', 'dump_definition',
]

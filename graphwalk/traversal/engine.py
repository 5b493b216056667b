"""
Graph Walker

Visit-once traversal over a directed, possibly cyclic graph.
DFS and BFS share a single algorithm; the only difference between them is
the dequeue discipline of the frontier.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Protocol

from ..graph.model import LinkedView
from .frontier import Discipline, Frontier
from .visited import VisitedSet

logger = logging.getLogger(__name__)

Visitor = Callable[[Any], None]


class GraphView(Protocol):
    """How the walker sees one graph representation"""

    def identity(self, node: Any) -> Hashable:
        ...

    def children(self, node: Any) -> Iterable[Any]:
        ...


@dataclass
class WalkStats:
    """Counters filled in while a walk runs"""
    nodes_visited: int = 0
    edges_examined: int = 0
    max_frontier_size: int = 0


@dataclass
class TraversalResult:
    """Result of a collected traversal"""
    start_node: Any
    nodes: List[Any]  # Visit order
    ids: List[Hashable]  # Identities in visit order
    metadata: Dict = field(default_factory=dict)


class GraphWalker:
    """
    Traversal engine over a graph view.

    The view decides what a node's identity is and how its children are
    reached, so the same walker runs over linked Node objects (the default)
    and over a NodeArena (pass the arena as the view).
    """

    def __init__(self, view: Optional[GraphView] = None):
        """
        Initialize the walker.

        Args:
            view: Graph view to traverse through. Defaults to LinkedView.
        """
        self.view = view if view is not None else LinkedView()

    def dfs(self, start: Any, visit_fn: Visitor) -> None:
        """Depth-first traversal from `start` (LIFO frontier)."""
        self.iterate_all(start, Frontier(Discipline.LIFO), visit_fn)

    def bfs(self, start: Any, visit_fn: Visitor) -> None:
        """Breadth-first traversal from `start` (FIFO frontier)."""
        self.iterate_all(start, Frontier(Discipline.FIFO), visit_fn)

    def iterate_all(self, start: Any, frontier: Frontier, visit_fn: Visitor) -> None:
        """
        Visit every node reachable from `start` exactly once.

        The visitor runs inline in dequeue order. If it raises, the exception
        propagates and the walk stops at the failing node.

        Args:
            start: Start node (required)
            frontier: Empty frontier; its discipline fixes the order
            visit_fn: Callback invoked once per distinct node
        """
        _require_start(start)
        for node in self._discover(start, frontier, WalkStats()):
            visit_fn(node)

    def walk(self, start: Any, discipline: Discipline = Discipline.LIFO) -> Iterator[Any]:
        """
        Lazily yield nodes in traversal order.

        The iterator is finite and cannot be restarted. Each call gets its
        own frontier and visited set.
        """
        _require_start(start)
        return self._discover(start, Frontier(discipline), WalkStats())

    def traverse(self, start: Any, discipline: Discipline = Discipline.LIFO) -> TraversalResult:
        """
        Run a full traversal and collect the visit order.

        Returns:
            TraversalResult with the visited nodes, their ids and counters
        """
        _require_start(start)
        discipline = Discipline(discipline)
        stats = WalkStats()
        nodes = list(self._discover(start, Frontier(discipline), stats))

        return TraversalResult(
            start_node=start,
            nodes=nodes,
            ids=[self.view.identity(node) for node in nodes],
            metadata={
                'discipline': discipline.value,
                'total_nodes_visited': stats.nodes_visited,
                'total_edges_examined': stats.edges_examined,
                'max_frontier_size': stats.max_frontier_size
            }
        )

    def _discover(self, start: Any, frontier: Frontier, stats: WalkStats) -> Iterator[Any]:
        """Core loop shared by every entry point."""
        visited = VisitedSet(key=self.view.identity)

        visited.insert(start)
        frontier.enqueue(start)
        stats.max_frontier_size = max(stats.max_frontier_size, len(frontier))

        logger.debug(f"Walking from {self.view.identity(start)} ({frontier.discipline.value})")

        while True:
            current = frontier.dequeue()
            if current is None:
                break

            stats.nodes_visited += 1
            yield current

            for child in self.view.children(current):
                stats.edges_examined += 1
                # Only newly discovered nodes enter the frontier
                if visited.insert(child):
                    frontier.enqueue(child)
            stats.max_frontier_size = max(stats.max_frontier_size, len(frontier))

        logger.debug(
            f"Walk finished: {stats.nodes_visited} nodes visited, "
            f"{stats.edges_examined} edges examined"
        )


def _require_start(start: Any) -> None:
    if start is None:
        raise TypeError("A start node is required")


_default_walker = GraphWalker()


def dfs(start: Any, visit_fn: Visitor, view: Optional[GraphView] = None) -> None:
    """Depth-first traversal with a default (linked) or given view"""
    walker = _default_walker if view is None else GraphWalker(view)
    walker.dfs(start, visit_fn)


def bfs(start: Any, visit_fn: Visitor, view: Optional[GraphView] = None) -> None:
    """Breadth-first traversal with a default (linked) or given view"""
    walker = _default_walker if view is None else GraphWalker(view)
    walker.bfs(start, visit_fn)

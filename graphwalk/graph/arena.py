"""
Arena Graph Model

All nodes live in a single NodeArena and are addressed by a stable integer
handle (their insertion index). Edges store destination handles instead of
node references, so the arena is the only owner and node lifetime is the
arena's lifetime.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

from .errors import GraphDefinitionError, validate_node_id, validate_weight


@dataclass(frozen=True)
class ArenaEdge:
    """Weighted link to the node at `destination` in the owning arena"""
    weight: int
    destination: int


@dataclass(eq=False)
class ArenaNode:
    """
    Vertex stored in a NodeArena.

    `handle` is the node's index in the arena and `id` its caller-facing
    identity. The arena keeps the two one-to-one, and equality/hashing use
    the id only.
    """
    handle: int
    id: int
    edges: Sequence[ArenaEdge] = field(default_factory=list)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ArenaNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class NodeArena:
    """
    Owning store for arena nodes.

    Also acts as the walker's view over its own nodes: `identity` returns the
    node id and `children` resolves destination handles back to nodes.
    """

    def __init__(self, name: str = "graph"):
        self.name = name
        self._nodes: List[ArenaNode] = []
        self._handles: Dict[int, int] = {}  # node id -> handle
        self._edge_count = 0
        self._sealed = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, node_id: int) -> int:
        """
        Store a new node and return its handle.

        Raises:
            GraphDefinitionError: if the id is invalid or already present
        """
        self._check_open()
        validate_node_id(node_id)
        if node_id in self._handles:
            raise GraphDefinitionError(f"Duplicate node id {node_id} in {self.name!r}")
        handle = len(self._nodes)
        self._nodes.append(ArenaNode(handle, node_id))
        self._handles[node_id] = handle
        return handle

    def add_edge(self, source: int, destination: int, weight: int = 1) -> ArenaEdge:
        """
        Append an edge between two handles.

        Raises:
            IndexError: if either handle is not in the arena
        """
        self._check_open()
        validate_weight(weight)
        for handle in (source, destination):
            self._check_handle(handle)
        edge = ArenaEdge(weight, destination)
        self._nodes[source].edges.append(edge)
        self._edge_count += 1
        return edge

    def add_edge_by_id(self, source_id: int, destination_id: int, weight: int = 1) -> ArenaEdge:
        """Append an edge between two node ids."""
        self._check_open()
        for node_id in (source_id, destination_id):
            if node_id not in self._handles:
                raise GraphDefinitionError(
                    f"Edge {source_id}->{destination_id} references unknown node {node_id}"
                )
        return self.add_edge(self._handles[source_id], self._handles[destination_id], weight)

    def _check_handle(self, handle: int) -> None:
        if not 0 <= handle < len(self._nodes):
            raise IndexError(f"Handle {handle} out of range [0, {len(self._nodes)})")

    def _check_open(self) -> None:
        if self._sealed:
            raise GraphDefinitionError(f"Arena {self.name!r} is sealed; construction is finished")

    def seal(self) -> "NodeArena":
        """
        Finish construction.

        Each node's edge list becomes a tuple and further add_node/add_edge
        calls raise GraphDefinitionError.
        """
        for node in self._nodes:
            node.edges = tuple(node.edges)
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def node(self, handle: int) -> ArenaNode:
        self._check_handle(handle)
        return self._nodes[handle]

    def node_by_id(self, node_id: int) -> ArenaNode:
        """Look up a node by id (KeyError if missing)"""
        return self._nodes[self._handles[node_id]]

    def handle_of(self, node_id: int) -> int:
        return self._handles[node_id]

    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, node_id) -> bool:
        return node_id in self._handles

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ArenaNode]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"NodeArena(name={self.name!r}, nodes={len(self._nodes)}, edges={self._edge_count})"

    # ------------------------------------------------------------------
    # Walker view
    # ------------------------------------------------------------------

    def identity(self, node: ArenaNode) -> int:
        # Handles are only meaningful inside the arena that issued them
        if not 0 <= node.handle < len(self._nodes) or self._nodes[node.handle] is not node:
            raise ValueError(f"Node {node.id} does not belong to arena {self.name!r}")
        return node.id

    def children(self, node: ArenaNode) -> Iterator[ArenaNode]:
        for edge in node.edges:
            yield self._nodes[edge.destination]

"""
Linked Graph Model

Nodes hold direct references to their destination nodes. A node may be the
destination of any number of edges and stays alive as long as anything points
to it, so the graph needs no owning container at traversal time.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Sequence

from .errors import GraphDefinitionError, validate_node_id, validate_weight


@dataclass(frozen=True)
class Edge:
    """Weighted link to a destination node. Weight is not used by traversal."""
    weight: int
    destination_node: "Node"

    def __repr__(self) -> str:
        return f"Edge(weight={self.weight}, destination={self.destination_node.id})"


@dataclass(eq=False)
class Node:
    """
    Identified vertex owning its outgoing edges.

    Equality and hashing use the id only, so two Node objects with the same
    id are the same vertex no matter what their edge lists contain.
    """
    id: int
    children: Sequence[Edge] = field(default_factory=list)

    def children_edges(self) -> Iterator[Edge]:
        """Iterate outgoing edges in edge-list order"""
        return iter(self.children)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        # Destination ids only; a full repr would recurse around cycles
        destinations = [edge.destination_node.id for edge in self.children]
        return f"Node(id={self.id}, children={destinations})"


class LinkedView:
    """Adapts linked Node objects to the walker."""

    def identity(self, node: Node) -> int:
        return node.id

    def children(self, node: Node) -> Iterator[Node]:
        for edge in node.children_edges():
            yield edge.destination_node


class LinkedGraph:
    """
    Builder and index for a linked graph.

    Nodes are created once per id; edges are appended in call order while
    the graph is being built. Traversal only needs the Node objects, the
    container is a convenience for construction and lookup.

    seal() ends construction: edge lists become tuples and the add_* methods
    stop accepting changes.
    """

    view = LinkedView()

    def __init__(self, name: str = "graph"):
        self.name = name
        self._nodes: Dict[int, Node] = {}
        self._edge_count = 0
        self._sealed = False

    def add_node(self, node_id: int) -> Node:
        """
        Create a node with no edges.

        Raises:
            GraphDefinitionError: if the id is invalid or already present
        """
        self._check_open()
        validate_node_id(node_id)
        if node_id in self._nodes:
            raise GraphDefinitionError(f"Duplicate node id {node_id} in {self.name!r}")
        node = Node(node_id)
        self._nodes[node_id] = node
        return node

    def add_edge(self, source_id: int, destination_id: int, weight: int = 1) -> Edge:
        """
        Append an edge from source to destination.

        Both endpoints must already exist. Parallel edges and self-loops are
        allowed.
        """
        self._check_open()
        validate_weight(weight)
        for node_id in (source_id, destination_id):
            if node_id not in self._nodes:
                raise GraphDefinitionError(
                    f"Edge {source_id}->{destination_id} references unknown node {node_id}"
                )
        edge = Edge(weight, self._nodes[destination_id])
        self._nodes[source_id].children.append(edge)
        self._edge_count += 1
        return edge

    def _check_open(self) -> None:
        if self._sealed:
            raise GraphDefinitionError(f"Graph {self.name!r} is sealed; construction is finished")

    def seal(self) -> "LinkedGraph":
        """Freeze every node's edge list and reject further construction"""
        for node in self._nodes.values():
            node.children = tuple(node.children)
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def node(self, node_id: int) -> Node:
        """Look up a node by id (KeyError if missing)"""
        return self._nodes[node_id]

    def nodes(self) -> Iterable[Node]:
        return self._nodes.values()

    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        return f"LinkedGraph(name={self.name!r}, nodes={len(self._nodes)}, edges={self._edge_count})"

"""networkx interoperability for both graph representations."""

from typing import Union

import networkx as nx

from .arena import NodeArena
from .errors import GraphDefinitionError
from .model import LinkedGraph


def to_networkx(graph: Union[LinkedGraph, NodeArena]) -> nx.MultiDiGraph:
    """
    Create a networkx graph from a linked graph or an arena.

    Parallel edges are kept as separate multi-edges, each carrying a
    `weight` attribute. Node and edge insertion order follow the source.
    """
    G = nx.MultiDiGraph(name=graph.name)

    if isinstance(graph, NodeArena):
        for node in graph:
            G.add_node(node.id)
        for node in graph:
            for edge in node.edges:
                G.add_edge(node.id, graph.node(edge.destination).id, weight=edge.weight)
    else:
        for node in graph:
            G.add_node(node.id)
        for node in graph:
            for edge in node.children_edges():
                G.add_edge(node.id, edge.destination_node.id, weight=edge.weight)

    return G


def from_networkx(G: nx.DiGraph, name: str = None, default_weight: int = 1) -> NodeArena:
    """
    Build a NodeArena from a directed networkx graph.

    Node ids must be non-negative integers. Edges are added in networkx
    iteration order and read the `weight` attribute when present.
    """
    if not G.is_directed():
        raise GraphDefinitionError("Only directed networkx graphs can be converted.")

    arena = NodeArena(name or G.graph.get("name") or "graph")
    for node_id in G.nodes():
        arena.add_node(node_id)
    for source, destination, data in G.edges(data=True):
        arena.add_edge_by_id(source, destination, data.get("weight", default_weight))
    return arena.seal()

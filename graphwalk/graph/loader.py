"""
Graph Definition Loader

Loads YAML graph definitions and builds them into either graph
representation. Format:

    name: diamond
    nodes: [1, 2, 3]
    edges:
      - {from: 1, to: 2, weight: 1}
      - {from: 2, to: 3}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .arena import NodeArena
from .errors import GraphDefinitionError, validate_node_id, validate_weight
from .model import LinkedGraph

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1


@dataclass(frozen=True)
class GraphDefinition:
    """Validated, representation-neutral description of a graph"""
    name: str
    node_ids: Tuple[int, ...]
    edges: Tuple[Tuple[int, int, int], ...] = field(default_factory=tuple)  # (source, destination, weight)

    @classmethod
    def from_dict(cls, raw: Any, default_name: str = "graph",
                  default_weight: int = DEFAULT_WEIGHT) -> GraphDefinition:
        """
        Parse and validate a raw mapping (as loaded from YAML).

        Args:
            raw: Mapping with optional 'name', optional 'nodes' and 'edges'
            default_name: Name used when the mapping has none
            default_weight: Weight for edges that do not set one

        Raises:
            GraphDefinitionError: on any structural or value problem
        """
        if not isinstance(raw, dict):
            raise GraphDefinitionError("Graph definition must be a mapping.")

        name = raw.get("name") or default_name
        if not isinstance(name, str):
            raise GraphDefinitionError(f"Graph name must be a string, got {name!r}")

        raw_edges = raw.get("edges")
        if raw_edges is None:
            raw_edges = []
        if not isinstance(raw_edges, list):
            raise GraphDefinitionError("Graph 'edges' must be a list.")

        edges: List[Tuple[int, int, int]] = []
        for position, entry in enumerate(raw_edges):
            if not isinstance(entry, dict):
                raise GraphDefinitionError(f"Invalid edge spec at position {position}: {entry!r}")
            if "from" not in entry or "to" not in entry:
                raise GraphDefinitionError(f"Edge at position {position} needs 'from' and 'to': {entry!r}")
            source = validate_node_id(entry["from"])
            destination = validate_node_id(entry["to"])
            weight = validate_weight(entry.get("weight", default_weight))
            edges.append((source, destination, weight))

        raw_nodes = raw.get("nodes")
        if raw_nodes is None:
            # Implicit node list: edge endpoints in order of first appearance
            seen: Dict[int, None] = {}
            for source, destination, _ in edges:
                seen.setdefault(source)
                seen.setdefault(destination)
            node_ids = list(seen)
        else:
            if not isinstance(raw_nodes, list):
                raise GraphDefinitionError("Graph 'nodes' must be a list.")
            node_ids = [validate_node_id(n) for n in raw_nodes]
            declared = set()
            duplicates = set()
            for n in node_ids:
                if n in declared:
                    duplicates.add(n)
                declared.add(n)
            if duplicates:
                raise GraphDefinitionError(f"Duplicate node ids in {name!r}: {sorted(duplicates)}")
            for source, destination, _ in edges:
                for endpoint in (source, destination):
                    if endpoint not in declared:
                        raise GraphDefinitionError(
                            f"Edge {source}->{destination} references undeclared node {endpoint}"
                        )

        if not node_ids:
            raise GraphDefinitionError(f"Graph {name!r} has no nodes.")

        return cls(name=name, node_ids=tuple(node_ids), edges=tuple(edges))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "nodes": list(self.node_ids),
            "edges": [
                {"from": source, "to": destination, "weight": weight}
                for source, destination, weight in self.edges
            ],
        }

    def build_linked(self) -> LinkedGraph:
        """Build a linked (shared-reference) graph"""
        graph = LinkedGraph(self.name)
        for node_id in self.node_ids:
            graph.add_node(node_id)
        for source, destination, weight in self.edges:
            graph.add_edge(source, destination, weight)
        return graph.seal()

    def build_arena(self) -> NodeArena:
        """Build an arena (handle-indexed) graph"""
        arena = NodeArena(self.name)
        for node_id in self.node_ids:
            arena.add_node(node_id)
        for source, destination, weight in self.edges:
            arena.add_edge_by_id(source, destination, weight)
        return arena.seal()


def load_definition(path: Union[str, Path], default_weight: Optional[int] = None) -> GraphDefinition:
    """
    Load a graph definition from a YAML file.

    Args:
        path: YAML file path
        default_weight: Weight for edges without one (DEFAULT_WEIGHT if None)

    Returns:
        Validated GraphDefinition
    """
    path = Path(path)
    with open(path, 'r') as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise GraphDefinitionError(f"Could not parse {path}: {e}") from e

    definition = GraphDefinition.from_dict(
        raw,
        default_name=path.stem,
        default_weight=DEFAULT_WEIGHT if default_weight is None else default_weight
    )
    logger.info(
        f"Loaded graph {definition.name!r} from {path}: "
        f"{len(definition.node_ids)} nodes, {len(definition.edges)} edges"
    )
    return definition


def dump_definition(definition: GraphDefinition, path: Union[str, Path]) -> Path:
    """Write a graph definition to a YAML file and return the path"""
    path = Path(path)
    with open(path, 'w') as f:
        yaml.safe_dump(definition.to_dict(), f, sort_keys=False, default_flow_style=None)
    logger.info(f"Wrote graph {definition.name!r} to {path}")
    return path

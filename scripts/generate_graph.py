#!/usr/bin/env python3
"""
Generate a random graph definition for traversal experiments.

Edges are drawn uniformly at random, so the output usually contains cycles,
self-loops and parallel edges.
"""
import sys
import random
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphwalk.graph import GraphDefinition, dump_definition
from graphwalk.utils import configure_logging


def generate_definition(nodes: int, edges: int, seed: int = None,
                        max_weight: int = 10, name: str = "random") -> GraphDefinition:
    """
    Build a random graph definition.

    Args:
        nodes: Number of nodes (ids 0..nodes-1)
        edges: Number of edges
        seed: Random seed for reproducible output
        max_weight: Largest edge weight drawn
        name: Graph name

    Returns:
        GraphDefinition with the generated nodes and edges
    """
    if nodes < 1:
        raise ValueError("A graph needs at least one node")

    rng = random.Random(seed)
    node_ids = tuple(range(nodes))
    edge_list = tuple(
        (rng.randrange(nodes), rng.randrange(nodes), rng.randint(0, max_weight))
        for _ in range(edges)
    )
    return GraphDefinition(name=name, node_ids=node_ids, edges=edge_list)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Generate a random graph definition YAML')
    parser.add_argument('--nodes', type=int, default=100, help='Number of nodes (default: 100)')
    parser.add_argument('--edges', type=int, default=300, help='Number of edges (default: 300)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--max-weight', type=int, default=10, help='Largest edge weight (default: 10)')
    parser.add_argument('--name', default='random', help='Graph name')
    parser.add_argument('-o', '--output', required=True, help='Output YAML path')
    args = parser.parse_args(argv)

    configure_logging()

    definition = generate_definition(
        args.nodes, args.edges, seed=args.seed, max_weight=args.max_weight, name=args.name
    )
    path = dump_definition(definition, args.output)

    print(f"✅ Wrote {len(definition.node_ids)} nodes and {len(definition.edges)} edges to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

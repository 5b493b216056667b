#!/usr/bin/env python3
"""Walk a YAML graph definition depth-first or breadth-first."""
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphwalk.graph import GraphDefinitionError, load_definition
from graphwalk.traversal import Discipline, GraphWalker
from graphwalk.utils import Config, configure_logging, get_graphs_path


def main(argv=None) -> int:
    """Load a graph definition and print its traversal order."""
    parser = argparse.ArgumentParser(description='Visit every node reachable from a start node')
    parser.add_argument(
        'graph',
        nargs='?',
        default=str(get_graphs_path("diamond.yaml")),
        help='Graph definition YAML (default: graphs/diamond.yaml)'
    )
    parser.add_argument(
        '--start',
        type=int,
        required=True,
        help='Id of the start node'
    )
    parser.add_argument(
        '--order',
        choices=['dfs', 'bfs'],
        default=Config.DEFAULT_ORDER,
        help=f'Traversal order (default: {Config.DEFAULT_ORDER})'
    )
    parser.add_argument(
        '--arena',
        action='store_true',
        help='Walk the arena representation instead of the linked one'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help=f'Logging level (default: {Config.LOG_LEVEL})'
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        definition = load_definition(args.graph, default_weight=Config.DEFAULT_WEIGHT)
    except (OSError, GraphDefinitionError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.arena:
        graph = definition.build_arena()
        walker = GraphWalker(graph)
        lookup = graph.node_by_id
    else:
        graph = definition.build_linked()
        walker = GraphWalker(graph.view)
        lookup = graph.node

    try:
        start = lookup(args.start)
    except KeyError:
        print(f"❌ Start node {args.start} not found in {definition.name!r}", file=sys.stderr)
        return 1

    result = walker.traverse(start, Discipline.from_order(args.order))

    for node_id in result.ids:
        print(node_id)

    metadata = result.metadata
    print(
        f"\n✅ {args.order.upper()} from {args.start} over {definition.name!r}: "
        f"{metadata['total_nodes_visited']}/{len(graph)} nodes visited, "
        f"{metadata['total_edges_examined']} edges examined",
        file=sys.stderr
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

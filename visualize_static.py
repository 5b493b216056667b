#!/usr/bin/env python3
"""
Generate a static visualization of a traversal.

Usage:
    python visualize_static.py graphs/diamond.yaml --start 1 --order bfs
"""

import argparse
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from graphwalk.graph import GraphDefinitionError, load_definition
from graphwalk.graph.convert import to_networkx
from graphwalk.traversal import Discipline, GraphWalker
from graphwalk.utils import Config, configure_logging, get_graphs_path


def create_graph(definition, start_id, order):
    """Build the networkx graph and annotate nodes with their visit rank."""
    arena = definition.build_arena()
    result = GraphWalker(arena).traverse(arena.node_by_id(start_id), Discipline.from_order(order))

    G = to_networkx(arena)
    ranks = {node_id: rank for rank, node_id in enumerate(result.ids)}
    for node_id in G.nodes():
        G.nodes[node_id]['rank'] = ranks.get(node_id)

    return G, result


def get_node_color(rank, total):
    """Color visited nodes along a gradient; unvisited nodes are grey."""
    if rank is None:
        return '#BDBDBD'
    return plt.cm.viridis(rank / max(total - 1, 1))


def visualize_graph(G, result, order, output_file='traversal_graph.png'):
    """Create and save visualization."""
    fig, ax = plt.subplots(1, 1, figsize=(12, 10))
    fig.suptitle(
        f'{order.upper()} over {G.graph.get("name", "graph")} from {result.ids[0]} '
        f'({result.metadata["total_nodes_visited"]} of {G.number_of_nodes()} nodes visited)',
        fontsize=14,
        fontweight='bold'
    )

    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

    total = len(result.ids)
    node_colors = [get_node_color(G.nodes[node]['rank'], total) for node in G.nodes()]
    node_sizes = [1500 if node == result.ids[0] else 800 for node in G.nodes()]

    nx.draw_networkx_nodes(
        G, pos,
        node_color=node_colors,
        node_size=node_sizes,
        alpha=0.9,
        edgecolors='black',
        linewidths=2,
        ax=ax
    )

    nx.draw_networkx_edges(
        G, pos,
        edge_color='gray',
        arrows=True,
        arrowsize=15,
        arrowstyle='->',
        width=2,
        alpha=0.6,
        connectionstyle='arc3,rad=0.1',
        ax=ax
    )

    # "id (#rank)" labels
    labels = {
        node: f"{node}" if G.nodes[node]['rank'] is None else f"{node} (#{G.nodes[node]['rank'] + 1})"
        for node in G.nodes()
    }
    nx.draw_networkx_labels(G, pos, labels, font_size=9, font_weight='bold', ax=ax)

    stats_text = (
        f'Visit order: {", ".join(str(i) for i in result.ids)}\n'
        f'Edges examined: {result.metadata["total_edges_examined"]}\n'
        f'Max frontier: {result.metadata["max_frontier_size"]}'
    )
    ax.text(
        0.98, 0.98, stats_text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment='top',
        horizontalalignment='right',
        bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.8)
    )

    ax.axis('off')
    plt.tight_layout()

    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\n✅ Visualization saved to: {output_file}")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Render a traversal of a graph definition')
    parser.add_argument('graph', nargs='?', default=str(get_graphs_path("diamond.yaml")))
    parser.add_argument('--start', type=int, required=True)
    parser.add_argument('--order', choices=['dfs', 'bfs'], default=Config.DEFAULT_ORDER)
    parser.add_argument('-o', '--output', default='traversal_graph.png')
    args = parser.parse_args(argv)

    configure_logging()

    try:
        definition = load_definition(args.graph, default_weight=Config.DEFAULT_WEIGHT)
    except (OSError, GraphDefinitionError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.start not in definition.node_ids:
        print(f"❌ Start node {args.start} not found in {definition.name!r}", file=sys.stderr)
        return 1

    print("🎨 Walking graph...")
    G, result = create_graph(definition, args.start, args.order)
    print(f"✅ Visited {len(result.ids)} nodes")

    visualize_graph(G, result, args.order, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

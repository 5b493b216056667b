"""
Tests for YAML graph definitions and the graph builders.
"""

import pytest

from graphwalk.graph import (
    GraphDefinition,
    GraphDefinitionError,
    LinkedGraph,
    NodeArena,
    dump_definition,
    load_definition,
)
from graphwalk.utils import get_graphs_path


class TestLoadDefinition:
    """Parsing and validation of graph definition files"""

    def test_bundled_diamond(self, diamond_definition):
        definition = load_definition(get_graphs_path("diamond.yaml"))

        assert definition.name == "diamond"
        assert definition.node_ids == diamond_definition.node_ids
        assert definition.edges == diamond_definition.edges

    def test_weight_defaults(self, write_yaml):
        path = write_yaml("edges:\n  - {from: 1, to: 2}\n  - {from: 2, to: 1, weight: 7}\n")

        assert load_definition(path).edges == ((1, 2, 1), (2, 1, 7))
        assert load_definition(path, default_weight=0).edges == ((1, 2, 0), (2, 1, 7))

    def test_implicit_nodes_in_first_appearance_order(self, write_yaml):
        path = write_yaml("edges:\n  - {from: 3, to: 1}\n  - {from: 1, to: 2}\n  - {from: 2, to: 3}\n")
        assert load_definition(path).node_ids == (3, 1, 2)

    def test_name_defaults_to_file_stem(self, write_yaml):
        path = write_yaml("nodes: [1]\n", filename="solo.yaml")
        definition = load_definition(path)

        assert definition.name == "solo"
        assert definition.edges == ()

    @pytest.mark.parametrize("text,message", [
        ("- 1\n- 2\n", "must be a mapping"),
        ("", "must be a mapping"),
        ("edges: {from: 1, to: 2}\n", "'edges' must be a list"),
        ("edges: ''\n", "'edges' must be a list"),
        ("edges: {}\n", "'edges' must be a list"),
        ("edges: 0\n", "'edges' must be a list"),
        ("nodes: 1\n", "'nodes' must be a list"),
        ("edges:\n  - [1, 2]\n", "Invalid edge spec at position 0"),
        ("edges:\n  - {from: 1}\n", "needs 'from' and 'to'"),
        ("edges:\n  - {from: -1, to: 2}\n", "Invalid node id"),
        ("edges:\n  - {from: a, to: 2}\n", "Invalid node id"),
        ("edges:\n  - {from: 1, to: 2, weight: -3}\n", "Invalid edge weight"),
        ("edges:\n  - {from: 1, to: 2, weight: 1.5}\n", "Invalid edge weight"),
        ("nodes: [1, 2, 2, 1]\n", "Duplicate node ids"),
        ("nodes: [1]\nedges:\n  - {from: 1, to: 2}\n", "undeclared node 2"),
        ("name: empty\n", "has no nodes"),
        ("nodes: [true]\n", "Invalid node id"),
    ])
    def test_invalid_definitions(self, write_yaml, text, message):
        with pytest.raises(GraphDefinitionError, match=message):
            load_definition(write_yaml(text))

    def test_malformed_yaml(self, write_yaml):
        with pytest.raises(GraphDefinitionError, match="Could not parse"):
            load_definition(write_yaml("edges: [\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_definition(tmp_path / "missing.yaml")

    def test_dump_then_load(self, tmp_path, cycles_definition):
        path = dump_definition(cycles_definition, tmp_path / "out.yaml")
        assert load_definition(path) == cycles_definition


class TestBuilders:
    """LinkedGraph and NodeArena construction rules"""

    def test_build_linked(self, diamond_definition):
        graph = diamond_definition.build_linked()

        assert isinstance(graph, LinkedGraph)
        assert len(graph) == 5
        assert graph.edge_count() == 7
        assert [edge.destination_node.id for edge in graph.node(2).children_edges()] == [4, 3]
        # Shared destination: every edge into 4 points at the same object
        assert graph.node(2).children[0].destination_node is graph.node(3).children[0].destination_node

    def test_build_arena(self, diamond_definition):
        arena = diamond_definition.build_arena()

        assert isinstance(arena, NodeArena)
        assert len(arena) == 5
        assert arena.edge_count() == 7
        assert [node.handle for node in arena] == [0, 1, 2, 3, 4]
        node_2 = arena.node_by_id(2)
        assert [arena.node(edge.destination).id for edge in node_2.edges] == [4, 3]
        assert arena.handle_of(5) == 4

    def test_built_linked_graph_is_sealed(self, diamond_definition):
        graph = diamond_definition.build_linked()

        assert graph.sealed
        assert all(isinstance(node.children, tuple) for node in graph)
        with pytest.raises(GraphDefinitionError, match="sealed"):
            graph.add_node(6)
        with pytest.raises(GraphDefinitionError, match="sealed"):
            graph.add_edge(5, 1)
        assert graph.edge_count() == 7
        assert 6 not in graph

    def test_built_arena_is_sealed(self, diamond_definition):
        arena = diamond_definition.build_arena()

        assert arena.sealed
        assert all(isinstance(node.edges, tuple) for node in arena)
        with pytest.raises(GraphDefinitionError, match="sealed"):
            arena.add_node(6)
        with pytest.raises(GraphDefinitionError, match="sealed"):
            arena.add_edge(4, 0)
        with pytest.raises(GraphDefinitionError, match="sealed"):
            arena.add_edge_by_id(5, 1)
        assert arena.edge_count() == 7

    def test_hand_built_graph_stays_open_until_sealed(self):
        graph = LinkedGraph("open")
        graph.add_node(1)
        graph.add_edge(1, 1)
        assert not graph.sealed

        assert graph.seal() is graph
        assert graph.node(1).children == (graph.node(1).children[0],)

    @pytest.mark.parametrize("container", [LinkedGraph, NodeArena])
    def test_duplicate_id_rejected(self, container):
        graph = container("dupes")
        graph.add_node(1)
        with pytest.raises(GraphDefinitionError, match="Duplicate node id 1"):
            graph.add_node(1)

    def test_linked_edge_to_unknown_node(self):
        graph = LinkedGraph()
        graph.add_node(1)
        with pytest.raises(GraphDefinitionError, match="unknown node 2"):
            graph.add_edge(1, 2)

    def test_arena_unknown_handle_and_id(self):
        arena = NodeArena()
        arena.add_node(10)
        with pytest.raises(IndexError):
            arena.add_edge(0, 1)
        with pytest.raises(IndexError):
            arena.node(3)
        with pytest.raises(GraphDefinitionError, match="unknown node 11"):
            arena.add_edge_by_id(10, 11)
        with pytest.raises(KeyError):
            arena.node_by_id(11)

    def test_membership(self, diamond_linked, diamond_arena):
        assert 3 in diamond_linked
        assert 3 in diamond_arena
        assert 6 not in diamond_linked
        assert 6 not in diamond_arena
        with pytest.raises(KeyError):
            diamond_linked.node(6)

    def test_node_identity_equality(self, diamond_definition):
        linked_a = diamond_definition.build_linked()
        linked_b = diamond_definition.build_linked()

        assert linked_a.node(1) == linked_b.node(1)
        assert linked_a.node(1) is not linked_b.node(1)
        assert len({linked_a.node(1), linked_b.node(1)}) == 1
        assert linked_a.node(1) != linked_a.node(2)

    def test_repr_survives_cycles(self, cycles_definition):
        graph = cycles_definition.build_linked()
        assert repr(graph.node(3)) == "Node(id=3, children=[1, 3, 4])"
        assert repr(graph.node(3).children[2]) == "Edge(weight=2, destination=4)"

    def test_definition_round_trips_through_dict(self, cycles_definition):
        assert GraphDefinition.from_dict(cycles_definition.to_dict()) == cycles_definition

"""
Pytest configuration and fixtures for traversal engine tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphwalk.graph import GraphDefinition, load_definition
from graphwalk.utils import get_graphs_path


# 1->2, 1->3, 2->4, 2->3, 3->4, 3->5, 4->5
DIAMOND_EDGES = [(1, 2), (1, 3), (2, 4), (2, 3), (3, 4), (3, 5), (4, 5)]


@pytest.fixture(scope="session")
def diamond_definition():
    """Reference five-node graph used throughout the tests"""
    return GraphDefinition(
        name="diamond",
        node_ids=(1, 2, 3, 4, 5),
        edges=tuple((src, dst, 1) for src, dst in DIAMOND_EDGES)
    )


@pytest.fixture
def diamond_linked(diamond_definition):
    """Diamond graph as linked Node objects"""
    return diamond_definition.build_linked()


@pytest.fixture
def diamond_arena(diamond_definition):
    """Diamond graph stored in a NodeArena"""
    return diamond_definition.build_arena()


@pytest.fixture(scope="session")
def cycles_definition():
    """Bundled graph with cycles, a self-loop, parallel edges and an unreachable node"""
    return load_definition(get_graphs_path("cycles.yaml"))


@pytest.fixture
def recorder():
    """Visitor that records the ids it is called with"""
    class Recorder:
        def __init__(self):
            self.ids = []

        def __call__(self, node):
            self.ids.append(node.id)

    return Recorder()


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a temporary file and return its path"""
    def _write(text, filename="graph.yaml"):
        path = tmp_path / filename
        path.write_text(text)
        return path
    return _write

# wgraph/tests/conftest.py
import os
import sys

import pytest

# Add the project root (the parent of tests/) to sys.path so `from wgraph import Graph` works
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from concrete_edges_graph import ConcreteEdgesGraph  # noqa: E402
from concrete_vertices_graph import ConcreteVerticesGraph  # noqa: E402

IMPLEMENTATIONS = [ConcreteEdgesGraph, ConcreteVerticesGraph]


@pytest.fixture(params=IMPLEMENTATIONS, ids=lambda cls: cls.__name__)
def empty_instance(request):
    """Factory for an empty graph; every contract test runs once per representation."""
    return request.param

"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from flownet.graph.graph import Graph
from flownet.schema.loader import parse_network_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def graph() -> Graph:
    """Return an empty graph."""
    return Graph()


@pytest.fixture
def vertices(graph):
    """Return three vertices a, b, c of the graph fixture."""
    return graph.create_vertex("a"), graph.create_vertex("b"), graph.create_vertex("c")


@pytest.fixture
def directed(vertices):
    """Return a directed edge a -> b."""
    a, b, _ = vertices
    return a.create_edge_to(b)


@pytest.fixture
def undirected(vertices):
    """Return an undirected edge a -- b."""
    a, b, _ = vertices
    return a.create_edge(b)


@pytest.fixture
def network_yaml() -> str:
    """Return a small network description."""
    return """
name: demo
vertices:
  - a
  - id: b
    attributes:
      role: hub
edges:
  - from: a
    to: b
    weight: 1.5
    capacity: 10
    flow: 3
  - "b -- c"
"""


@pytest.fixture
def network_model(network_yaml):
    """Return the parsed demo network."""
    return parse_network_from_string(network_yaml)

"""Graph layer: vertices, directed and undirected edges with capacity and flow."""

from .attributes import AttributeBag, AttributeBagNamespaced, AttributeBagReference
from .errors import (
    BadMethodCallError,
    GraphError,
    InvalidArgumentError,
    LogicError,
    OutOfBoundsError,
    RangeError,
)
from .flow import FlowBudget
from .edge import Edge, EdgeDirected, EdgeUndirected
from .vertex import Vertex
from .graph import Graph
from .builder import build_graph

__all__ = [
    "AttributeBag",
    "AttributeBagNamespaced",
    "AttributeBagReference",
    "BadMethodCallError",
    "GraphError",
    "InvalidArgumentError",
    "LogicError",
    "OutOfBoundsError",
    "RangeError",
    "FlowBudget",
    "Edge",
    "EdgeDirected",
    "EdgeUndirected",
    "Vertex",
    "Graph",
    "build_graph",
]

"""Vertices of a graph and their edge adjacency."""

import logging
from typing import TYPE_CHECKING, Any, Hashable

from .attributes import AttributeBagReference
from .edge import distinct_vertices
from .errors import BadMethodCallError, InvalidArgumentError

if TYPE_CHECKING:
    from .edge import Edge, EdgeDirected, EdgeUndirected
    from .graph import Graph

logger = logging.getLogger(__name__)


class Vertex:
    """A node of a graph.

    Vertices are created through `Graph.create_vertex()`, which registers
    them. A vertex keeps the list of edges attached to it; edges and the
    graph keep that list up to date.
    """

    def __init__(self, graph: "Graph", vertex_id: Hashable):
        self._graph = graph
        self._id = vertex_id
        self._edges: list["Edge"] = []
        self._attributes: dict[str, Any] = {}

    def get_id(self) -> Hashable:
        return self._id

    def get_graph(self) -> "Graph":
        return self._graph

    # -------------------------------------------------------------------------
    # Edge adjacency
    # -------------------------------------------------------------------------

    def add_edge(self, edge: "Edge") -> None:
        """Attach an edge to this vertex. Called by the graph."""
        self._edges.append(edge)

    def remove_edge(self, edge: "Edge") -> None:
        """Detach an edge from this vertex.

        Raises:
            InvalidArgumentError: If the edge is not attached here.
        """
        for index, attached in enumerate(self._edges):
            if attached is edge:
                del self._edges[index]
                return
        raise InvalidArgumentError(
            f"Edge {edge!r} is not attached to vertex {self._id!r}", "edge"
        )

    def get_edges(self) -> list["Edge"]:
        """Get all attached edges."""
        return list(self._edges)

    def get_edges_out(self) -> list["Edge"]:
        """Get attached edges that can be traversed away from this vertex."""
        return [edge for edge in self._edges if edge.has_vertex_start(self)]

    def get_edges_in(self) -> list["Edge"]:
        """Get attached edges that can be traversed towards this vertex."""
        return [edge for edge in self._edges if edge.has_vertex_target(self)]

    def get_edges_to(self, vertex: "Vertex") -> list["Edge"]:
        """Get edges leading from this vertex to the given one."""
        return [edge for edge in self._edges if edge.is_connection(self, vertex)]

    def has_edge_to(self, vertex: "Vertex") -> bool:
        return any(edge.is_connection(self, vertex) for edge in self._edges)

    def has_edge_from(self, vertex: "Vertex") -> bool:
        return any(edge.is_connection(vertex, self) for edge in self._edges)

    def get_vertices_edge_to(self) -> list["Vertex"]:
        """Get the vertices reachable over one outgoing edge, without repeats."""
        return distinct_vertices(
            edge.get_vertex_to_from(self) for edge in self.get_edges_out()
        )

    def get_vertices_edge_from(self) -> list["Vertex"]:
        """Get the vertices reaching this one over one edge, without repeats."""
        return distinct_vertices(
            edge.get_vertex_from_to(self) for edge in self.get_edges_in()
        )

    def create_edge_to(self, vertex: "Vertex") -> "EdgeDirected":
        """Create a directed edge from this vertex to the given one."""
        return self._graph.create_edge_directed(self, vertex)

    def create_edge(self, vertex: "Vertex") -> "EdgeUndirected":
        """Create an undirected edge between this vertex and the given one."""
        return self._graph.create_edge_undirected(self, vertex)

    def destroy(self) -> None:
        """Destroy all attached edges, then remove this vertex from its graph."""
        for edge in list(self._edges):
            edge.destroy()
        self._graph.remove_vertex(self)
        logger.debug("Destroyed vertex %r", self._id)

    def __copy__(self):
        raise BadMethodCallError("Vertices cannot be copied")

    def __deepcopy__(self, memo):
        raise BadMethodCallError("Vertices cannot be copied")

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.get_attribute_bag().get_attribute(name, default)

    def set_attribute(self, name: str, value: Any) -> None:
        self.get_attribute_bag().set_attribute(name, value)

    def get_attribute_bag(self) -> AttributeBagReference:
        return AttributeBagReference(self._attributes)

    def __repr__(self) -> str:
        return f"Vertex({self._id!r})"

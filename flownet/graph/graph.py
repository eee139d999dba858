"""Graph registry of vertices and edges."""

import itertools
import logging
from typing import Any, Hashable

import networkx as nx

from .attributes import AttributeBagReference
from .edge import Edge, EdgeDirected, EdgeUndirected
from .errors import BadMethodCallError, InvalidArgumentError, OutOfBoundsError
from .vertex import Vertex

logger = logging.getLogger(__name__)


class Graph:
    """A graph of vertices connected by directed and undirected edges.

    The graph is the only place where vertices and edges are created, so
    every live edge is registered with exactly one graph and attached to
    each of its vertices.
    """

    def __init__(self):
        """Initialize an empty graph."""
        self._vertices: dict[Hashable, Vertex] = {}
        self._edges: list[Edge] = []
        self._attributes: dict[str, Any] = {}
        self._next_id = itertools.count()

    # -------------------------------------------------------------------------
    # Vertex management
    # -------------------------------------------------------------------------

    def create_vertex(self, vertex_id: Hashable | None = None) -> Vertex:
        """Create and register a new vertex.

        Args:
            vertex_id: The vertex id. Omit to use the next free integer id.

        Returns:
            The new vertex.

        Raises:
            InvalidArgumentError: If a vertex with this id already exists.
        """
        if vertex_id is None:
            vertex_id = next(self._next_id)
            while vertex_id in self._vertices:
                vertex_id = next(self._next_id)
        elif vertex_id in self._vertices:
            raise InvalidArgumentError(
                f"Vertex {vertex_id!r} already exists", "vertex_id"
            )

        vertex = Vertex(self, vertex_id)
        self._vertices[vertex_id] = vertex
        logger.debug("Created vertex %r", vertex_id)
        return vertex

    def get_vertex(self, vertex_id: Hashable) -> Vertex:
        """Get a vertex by id.

        Raises:
            OutOfBoundsError: If no vertex has this id.
        """
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise OutOfBoundsError(
                f"Vertex {vertex_id!r} does not exist", vertex_id
            ) from None

    def has_vertex(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._vertices

    def get_vertices(self) -> list[Vertex]:
        """Get all vertices in creation order."""
        return list(self._vertices.values())

    def remove_vertex(self, vertex: Vertex) -> None:
        """Deregister a vertex. Called by `Vertex.destroy()`.

        Raises:
            InvalidArgumentError: If the vertex is not part of this graph.
        """
        if self._vertices.get(vertex.get_id()) is not vertex:
            raise InvalidArgumentError(
                f"Vertex {vertex!r} does not exist in this graph", "vertex"
            )
        del self._vertices[vertex.get_id()]

    # -------------------------------------------------------------------------
    # Edge management
    # -------------------------------------------------------------------------

    def create_edge_directed(self, start: Vertex, target: Vertex) -> EdgeDirected:
        """Create a directed edge from `start` to `target`.

        Raises:
            InvalidArgumentError: If a vertex is not part of this graph.
        """
        self._check_own_vertices(start, target)
        return self._register(EdgeDirected(start, target))

    def create_edge_undirected(self, a: Vertex, b: Vertex) -> EdgeUndirected:
        """Create an undirected edge between `a` and `b`.

        Raises:
            InvalidArgumentError: If a vertex is not part of this graph.
        """
        self._check_own_vertices(a, b)
        return self._register(EdgeUndirected(a, b))

    def get_edges(self) -> list[Edge]:
        """Get all edges in creation order."""
        return list(self._edges)

    def has_edge(self, edge: Edge) -> bool:
        return any(registered is edge for registered in self._edges)

    def remove_edge(self, edge: Edge) -> None:
        """Deregister an edge. Called by `Edge.destroy()`.

        Raises:
            InvalidArgumentError: If the edge is not part of this graph.
        """
        for index, registered in enumerate(self._edges):
            if registered is edge:
                del self._edges[index]
                return
        raise InvalidArgumentError(
            f"Edge {edge!r} does not exist in this graph", "edge"
        )

    def create_edge_clone(self, edge: Edge) -> Edge:
        """Create a copy of an edge between the same vertices in the same roles.

        Weight, capacity, flow and attributes are copied; the attributes of
        the new edge are independent of the original's.

        Args:
            edge: An edge of this graph.

        Returns:
            The new, registered edge.
        """
        return self._clone(edge, inverted=False)

    def create_edge_clone_inverted(self, edge: Edge) -> Edge:
        """Create a copy of an edge with start and target swapped.

        For undirected edges this is the same as `create_edge_clone()`.
        """
        return self._clone(edge, inverted=True)

    def _clone(self, edge: Edge, inverted: bool) -> Edge:
        if not self.has_edge(edge):
            raise InvalidArgumentError(
                f"Edge {edge!r} does not exist in this graph", "edge"
            )

        if isinstance(edge, EdgeDirected):
            start, target = edge.get_vertex_start(), edge.get_vertex_end()
            if inverted:
                start, target = target, start
            clone: Edge = EdgeDirected(start, target)
        else:
            ends = edge.get_vertices()
            a, b = ends[0], ends[-1]
            clone = EdgeUndirected(a, b)

        clone.set_weight(edge.get_weight())
        clone.set_capacity_and_flow(edge.get_capacity(), edge.get_flow())
        clone.get_attribute_bag().set_attributes(edge.get_attribute_bag())
        logger.debug("Cloned %r%s", edge, " inverted" if inverted else "")
        return self._register(clone)

    def _register(self, edge: Edge) -> Edge:
        self._edges.append(edge)
        for vertex in edge.get_vertices():
            vertex.add_edge(edge)
        logger.debug("Created %r", edge)
        return edge

    def _check_own_vertices(self, *vertices: Vertex) -> None:
        for vertex in vertices:
            if self._vertices.get(vertex.get_id()) is not vertex:
                raise InvalidArgumentError(
                    f"Vertex {vertex!r} does not exist in this graph", "vertex"
                )

    def __copy__(self):
        raise BadMethodCallError("Graphs cannot be copied")

    def __deepcopy__(self, memo):
        raise BadMethodCallError("Graphs cannot be copied")

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.get_attribute_bag().get_attribute(name, default)

    def set_attribute(self, name: str, value: Any) -> None:
        self.get_attribute_bag().set_attribute(name, value)

    def get_attribute_bag(self) -> AttributeBagReference:
        return AttributeBagReference(self._attributes)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export the graph as a networkx MultiDiGraph.

        Directed edges become one arc, undirected edges two opposite arcs
        sharing the same key. Arc data holds weight, capacity, flow, the
        edge direction and the edge attributes.

        Returns:
            A new networkx graph keyed by vertex id.
        """
        nx_graph = nx.MultiDiGraph()
        nx_graph.graph.update(self._attributes)

        for vertex in self._vertices.values():
            nx_graph.add_node(vertex.get_id(), **vertex.get_attribute_bag())

        for key, edge in enumerate(self._edges):
            data = {
                **edge.get_attribute_bag(),
                "weight": edge.get_weight(),
                "capacity": edge.get_capacity(),
                "flow": edge.get_flow(),
                "directed": edge.is_directed,
            }
            ends = edge.get_vertices_start()
            if isinstance(edge, EdgeDirected):
                arcs = [(edge.get_vertex_start(), edge.get_vertex_end())]
            elif edge.is_loop():
                arcs = [(ends[0], ends[0])]
            else:
                arcs = [(ends[0], ends[1]), (ends[1], ends[0])]

            for u, v in arcs:
                nx_graph.add_edge(u.get_id(), v.get_id(), key=key, **data)

        return nx_graph

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"

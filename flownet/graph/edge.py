"""Directed and undirected edges with weight, capacity and flow."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .attributes import AttributeBagReference
from .errors import BadMethodCallError, InvalidArgumentError, LogicError
from .flow import FlowBudget, Number

if TYPE_CHECKING:
    from .graph import Graph
    from .vertex import Vertex

logger = logging.getLogger(__name__)


def distinct_vertices(vertices: Iterable["Vertex"]) -> list["Vertex"]:
    """Drop repeated vertices (by identity), keeping first-seen order."""
    seen: set[int] = set()
    result = []
    for vertex in vertices:
        if id(vertex) not in seen:
            seen.add(id(vertex))
            result.append(vertex)
    return result


class Edge(ABC):
    """A connection between vertices of a graph.

    Edges are created by a Graph (or by a Vertex on behalf of its graph)
    and hold plain references to their vertices; the graph and vertices
    own the edge's place in the structure. Subclasses decide which
    endpoints count as start and target.
    """

    def __init__(self):
        self._budget = FlowBudget()
        self._attributes: dict[str, Any] = {}

    # -------------------------------------------------------------------------
    # Vertex relationships
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_vertices_start(self) -> list["Vertex"]:
        """Get the vertices this edge can be traversed from."""

    @abstractmethod
    def get_vertices_target(self) -> list["Vertex"]:
        """Get the vertices this edge can be traversed to."""

    @abstractmethod
    def has_vertex_start(self, vertex: "Vertex") -> bool:
        """Check whether the vertex is a valid start of this edge."""

    @abstractmethod
    def has_vertex_target(self, vertex: "Vertex") -> bool:
        """Check whether the vertex is a valid target of this edge."""

    @abstractmethod
    def is_connection(self, from_vertex: "Vertex", to_vertex: "Vertex") -> bool:
        """Check whether this edge leads from one vertex to the other."""

    @abstractmethod
    def is_loop(self) -> bool:
        """Check whether all endpoints are the same vertex."""

    @abstractmethod
    def get_vertex_to_from(self, start: "Vertex") -> "Vertex":
        """Get the vertex reached from `start` over this edge.

        Raises:
            InvalidArgumentError: If `start` is not a valid start vertex.
        """

    @abstractmethod
    def get_vertex_from_to(self, end: "Vertex") -> "Vertex":
        """Get the vertex that reaches `end` over this edge.

        Raises:
            InvalidArgumentError: If `end` is not a valid end vertex.
        """

    @abstractmethod
    def get_vertices(self) -> list["Vertex"]:
        """Get every vertex this edge touches, without repeats."""

    @property
    def is_directed(self) -> bool:
        return False

    # -------------------------------------------------------------------------
    # Weight, capacity and flow
    # -------------------------------------------------------------------------

    def get_weight(self) -> Number | None:
        """Get the weight, or None if unset."""
        return self._budget.weight

    def set_weight(self, weight: Number | None) -> "Edge":
        """Set a new weight, or None to unset it.

        Raises:
            InvalidArgumentError: If the weight is not numeric.
        """
        self._budget.set_weight(weight)
        return self

    def get_capacity(self) -> Number | None:
        """Get the capacity, or None if the edge is unbounded."""
        return self._budget.capacity

    def get_capacity_remaining(self) -> Number | None:
        """Get capacity minus flow, or None if the edge is unbounded.

        A flow that is not tracked counts as zero.
        """
        return self._budget.capacity_remaining()

    def set_capacity(self, capacity: Number | None) -> "Edge":
        """Set a new capacity, or None to remove the bound.

        Raises:
            InvalidArgumentError: If the capacity is not numeric or negative.
            RangeError: If the current flow exceeds the new capacity.
        """
        self._budget.set_capacity(capacity)
        return self

    def get_flow(self) -> Number | None:
        """Get the flow, or None if not tracked."""
        return self._budget.flow

    def set_flow(self, flow: Number | None) -> "Edge":
        """Set a new flow, or None to stop tracking it.

        Raises:
            InvalidArgumentError: If the flow is not numeric or negative.
            RangeError: If the flow exceeds the current capacity.
        """
        self._budget.set_flow(flow)
        return self

    def set_capacity_and_flow(
        self, capacity: Number | None, flow: Number | None
    ) -> "Edge":
        """Set capacity and flow in one step.

        Unlike two separate setter calls, no intermediate state has to
        satisfy the flow <= capacity bound; only the final pair does.

        Raises:
            InvalidArgumentError: If either value is not numeric or negative.
            RangeError: If the flow exceeds the capacity.
        """
        self._budget.set_capacity_and_flow(capacity, flow)
        return self

    def is_saturated(self) -> bool:
        """Check whether a bounded edge has no capacity left."""
        return self._budget.is_saturated()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def get_graph(self) -> "Graph":
        """Get the graph this edge belongs to.

        Raises:
            LogicError: If the edge is not attached to any vertex.
        """
        for vertex in self.get_vertices():
            return vertex.get_graph()

        raise LogicError("Internal error: edge is not attached to any vertex")

    def destroy(self) -> None:
        """Remove this edge from its graph and from every attached vertex.

        The edge must not be used afterwards.
        """
        graph = self.get_graph()
        graph.remove_edge(self)
        for vertex in self.get_vertices():
            vertex.remove_edge(self)
        logger.debug("Destroyed %r", self)

    def create_edge_clone(self) -> "Edge":
        """Create a new edge between the same vertices in the same roles."""
        return self.get_graph().create_edge_clone(self)

    def create_edge_clone_inverted(self) -> "Edge":
        """Create a new edge between the same vertices in opposite direction."""
        return self.get_graph().create_edge_clone_inverted(self)

    def __copy__(self):
        raise BadMethodCallError(
            "Edges cannot be copied, use create_edge_clone() instead"
        )

    def __deepcopy__(self, memo):
        raise BadMethodCallError(
            "Edges cannot be copied, use create_edge_clone() instead"
        )

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get an attribute value, or `default` if it is not set."""
        return self.get_attribute_bag().get_attribute(name, default)

    def set_attribute(self, name: str, value: Any) -> None:
        """Insert or overwrite an attribute."""
        self.get_attribute_bag().set_attribute(name, value)

    def get_attribute_bag(self) -> AttributeBagReference:
        """Get a bag sharing this edge's attributes."""
        return AttributeBagReference(self._attributes)


class EdgeDirected(Edge):
    """Edge leading from one start vertex to one target vertex."""

    def __init__(self, start: "Vertex", target: "Vertex"):
        super().__init__()
        self._start = start
        self._target = target

    @property
    def is_directed(self) -> bool:
        return True

    def get_vertex_start(self) -> "Vertex":
        return self._start

    def get_vertex_end(self) -> "Vertex":
        return self._target

    def get_vertices_start(self) -> list["Vertex"]:
        return [self._start]

    def get_vertices_target(self) -> list["Vertex"]:
        return [self._target]

    def get_vertices(self) -> list["Vertex"]:
        return distinct_vertices([self._start, self._target])

    def has_vertex_start(self, vertex: "Vertex") -> bool:
        return self._start is vertex

    def has_vertex_target(self, vertex: "Vertex") -> bool:
        return self._target is vertex

    def is_connection(self, from_vertex: "Vertex", to_vertex: "Vertex") -> bool:
        return self._start is from_vertex and self._target is to_vertex

    def is_loop(self) -> bool:
        return self._start is self._target

    def get_vertex_to_from(self, start: "Vertex") -> "Vertex":
        if self._start is not start:
            raise InvalidArgumentError(
                f"Invalid start vertex {start!r} for edge {self!r}", "start"
            )
        return self._target

    def get_vertex_from_to(self, end: "Vertex") -> "Vertex":
        if self._target is not end:
            raise InvalidArgumentError(
                f"Invalid end vertex {end!r} for edge {self!r}", "end"
            )
        return self._start

    def __repr__(self) -> str:
        return f"EdgeDirected({self._start.get_id()!r} -> {self._target.get_id()!r})"


class EdgeUndirected(Edge):
    """Edge that can be traversed in both directions between two vertices."""

    def __init__(self, a: "Vertex", b: "Vertex"):
        super().__init__()
        self._a = a
        self._b = b

    def get_vertices_start(self) -> list["Vertex"]:
        return self.get_vertices()

    def get_vertices_target(self) -> list["Vertex"]:
        return self.get_vertices()

    def get_vertices(self) -> list["Vertex"]:
        return distinct_vertices([self._a, self._b])

    def has_vertex_start(self, vertex: "Vertex") -> bool:
        return self._a is vertex or self._b is vertex

    def has_vertex_target(self, vertex: "Vertex") -> bool:
        # Same as start, both ends are symmetric
        return self.has_vertex_start(vertex)

    def is_connection(self, from_vertex: "Vertex", to_vertex: "Vertex") -> bool:
        return (self._a is from_vertex and self._b is to_vertex) or (
            self._b is from_vertex and self._a is to_vertex
        )

    def is_loop(self) -> bool:
        return self._a is self._b

    def get_vertex_to_from(self, start: "Vertex") -> "Vertex":
        if self._a is start:
            return self._b
        if self._b is start:
            return self._a
        raise InvalidArgumentError(
            f"Vertex {start!r} is not an end of edge {self!r}", "start"
        )

    def get_vertex_from_to(self, end: "Vertex") -> "Vertex":
        if self._a is end:
            return self._b
        if self._b is end:
            return self._a
        raise InvalidArgumentError(
            f"Vertex {end!r} is not an end of edge {self!r}", "end"
        )

    def __repr__(self) -> str:
        return f"EdgeUndirected({self._a.get_id()!r} -- {self._b.get_id()!r})"

"""Checks over the edges of a graph."""

from ..graph.graph import Graph
from .base import ValidationResult, edge_label


def check_flow_tracking(graph: Graph) -> ValidationResult:
    """Check for bounded edges whose flow is not tracked.

    Remaining capacity of such an edge is reported as if the flow were
    zero, which may hide a missing flow value.

    Args:
        graph: The graph to check.

    Returns:
        ValidationResult with warnings for untracked flows.
    """
    result = ValidationResult()

    for edge in graph.get_edges():
        if edge.get_capacity() is not None and edge.get_flow() is None:
            result.add_warning(
                code="UNTRACKED_FLOW",
                message=(
                    f"Edge has a capacity of {edge.get_capacity()} "
                    "but no flow, remaining capacity assumes a flow of 0"
                ),
                edge=edge_label(edge),
                capacity=edge.get_capacity(),
            )

    return result


def check_loops(graph: Graph) -> ValidationResult:
    """Check for edges that start and end at the same vertex."""
    result = ValidationResult()

    for edge in graph.get_edges():
        if edge.is_loop():
            result.add_warning(
                code="LOOP_EDGE",
                message="Edge is a loop",
                edge=edge_label(edge),
            )

    return result


def check_saturation(graph: Graph) -> ValidationResult:
    """Report edges with no remaining capacity."""
    result = ValidationResult()

    for edge in graph.get_edges():
        if edge.is_saturated():
            result.add_info(
                code="SATURATED_EDGE",
                message=f"Edge is saturated, flow equals capacity of {edge.get_capacity()}",
                edge=edge_label(edge),
                capacity=edge.get_capacity(),
                flow=edge.get_flow(),
            )

    return result


def check_parallel_edges(graph: Graph) -> ValidationResult:
    """Check for distinct edges connecting the same vertices in the same way.

    Two directed edges are parallel if they share start and target; two
    undirected edges if they share both ends in either order. A directed
    and an undirected edge are never parallel.
    """
    result = ValidationResult()
    reported: set[int] = set()
    edges = graph.get_edges()

    for index, edge in enumerate(edges):
        if id(edge) in reported:
            continue
        start = edge.get_vertices_start()[0]
        target = edge.get_vertex_to_from(start)

        parallel = [
            other
            for other in edges[index + 1 :]
            if other.is_directed == edge.is_directed
            and other.is_connection(start, target)
        ]
        if parallel:
            reported.update(id(other) for other in parallel)
            result.add_warning(
                code="PARALLEL_EDGE",
                message=f"{len(parallel) + 1} edges connect the same vertices",
                edge=edge_label(edge),
                count=len(parallel) + 1,
            )

    return result

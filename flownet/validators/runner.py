"""Check runner that orchestrates all edge checks."""

from pathlib import Path

from ..graph.builder import build_graph
from ..graph.graph import Graph
from ..schema.loader import parse_network
from .base import ValidationResult
from .edge_checks import (
    check_flow_tracking,
    check_loops,
    check_parallel_edges,
    check_saturation,
)


def run_checks(graph: Graph) -> ValidationResult:
    """Run all checks on a graph.

    Args:
        graph: The graph to check.

    Returns:
        Combined ValidationResult from all checks.
    """
    result = ValidationResult()

    result.merge(check_flow_tracking(graph))
    result.merge(check_loops(graph))
    result.merge(check_parallel_edges(graph))
    result.merge(check_saturation(graph))

    return result


def validate_network_file(path: str | Path) -> ValidationResult:
    """Load a network file, build its graph and check it.

    Args:
        path: Path to the YAML network file.

    Returns:
        ValidationResult from all checks.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the network fails validation.
    """
    model = parse_network(path)
    graph = build_graph(model)
    return run_checks(graph)

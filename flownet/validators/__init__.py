"""Checks over the edges of a flow network."""

from .base import Severity, ValidationIssue, ValidationResult, edge_label
from .edge_checks import (
    check_flow_tracking,
    check_loops,
    check_parallel_edges,
    check_saturation,
)
from .runner import run_checks, validate_network_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "edge_label",
    "check_flow_tracking",
    "check_loops",
    "check_parallel_edges",
    "check_saturation",
    "run_checks",
    "validate_network_file",
]

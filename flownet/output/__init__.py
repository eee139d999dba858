"""Output formatting for the command-line interface."""

from .formatter import format_edges, format_validation_result

__all__ = ["format_edges", "format_validation_result"]

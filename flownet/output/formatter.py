"""Output formatting for check results and edge listings."""

import json
from typing import Literal

from ..graph.graph import Graph
from ..validators.base import Severity, ValidationIssue, ValidationResult, edge_label


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a check result for output.

    Args:
        result: The check result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    errors = result.errors
    warnings = result.warnings

    lines.append("ERRORS:")
    if errors:
        for issue in errors:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("WARNINGS:")
    if warnings:
        for issue in warnings:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    if result.infos:
        lines.append("")
        lines.append("INFO:")
        for issue in result.infos:
            lines.append(f"  {_format_issue_text(issue)}")

    # Summary
    lines.append("")
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = f"[{issue.edge}] " if issue.edge else ""

    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    return f"{symbol} {issue.code}: {location}{issue.message}"


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "edge": issue.edge,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def format_edges(graph: Graph, format: Literal["text", "json"] = "text") -> str:
    """Format the edges of a graph with their weight, capacity and flow.

    Args:
        graph: The graph whose edges to list.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    rows = [
        {
            "edge": edge_label(edge),
            "directed": edge.is_directed,
            "weight": edge.get_weight(),
            "capacity": edge.get_capacity(),
            "flow": edge.get_flow(),
            "remaining": edge.get_capacity_remaining(),
        }
        for edge in graph.get_edges()
    ]

    if format == "json":
        return json.dumps({"edges": rows}, indent=2, default=str)

    if not rows:
        return "(no edges)"

    columns = ["edge", "weight", "capacity", "flow", "remaining"]
    cells = [[_cell(row[c]) for c in columns] for row in rows]
    widths = [
        max(len(c), *(len(line[i]) for line in cells)) for i, c in enumerate(columns)
    ]

    lines = ["  ".join(c.upper().ljust(w) for c, w in zip(columns, widths)).rstrip()]
    for line in cells:
        lines.append("  ".join(v.ljust(w) for v, w in zip(line, widths)).rstrip())
    lines.append("")
    lines.append(f"{len(rows)} edge(s)")
    return "\n".join(lines)


def _cell(value) -> str:
    return "-" if value is None else str(value)

"""Base classes for check results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..graph.edge import Edge


class Severity(str, Enum):
    """Severity level of a check issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


def edge_label(edge: Edge) -> str:
    """Describe an edge by its endpoints, e.g. "a -> b" or "a -- b"."""
    arrow = "->" if edge.is_directed else "--"
    start = edge.get_vertices_start()[0]
    target = edge.get_vertex_to_from(start)
    return f"{start.get_id()} {arrow} {target.get_id()}"


@dataclass
class ValidationIssue:
    """A single issue found on an edge or on the graph."""

    code: str
    message: str
    severity: Severity
    edge: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        location = f" [{self.edge}]" if self.edge else ""
        return f"{self.severity.value.upper()}: {self.code}{location} - {self.message}"


@dataclass
class ValidationResult:
    """Result of running checks on a graph."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get all info-level issues."""
        return [i for i in self.issues if i.severity == Severity.INFO]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def is_valid(self) -> bool:
        """Check if the graph is valid (no errors)."""
        return not self.has_errors

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def _add(
        self,
        severity: Severity,
        code: str,
        message: str,
        edge: str | None,
        details: dict[str, Any],
    ) -> None:
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                edge=edge,
                details=details,
            )
        )

    def add_error(
        self, code: str, message: str, edge: str | None = None, **details: Any
    ) -> None:
        """Add an error issue."""
        self._add(Severity.ERROR, code, message, edge, details)

    def add_warning(
        self, code: str, message: str, edge: str | None = None, **details: Any
    ) -> None:
        """Add a warning issue."""
        self._add(Severity.WARNING, code, message, edge, details)

    def add_info(
        self, code: str, message: str, edge: str | None = None, **details: Any
    ) -> None:
        """Add an informational issue."""
        self._add(Severity.INFO, code, message, edge, details)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)

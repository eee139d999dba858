"""Graph-related exceptions."""


class GraphError(Exception):
    """Base exception for graph, vertex and edge errors."""

    pass


class InvalidArgumentError(GraphError, ValueError):
    """Raised when a value or vertex is not acceptable for the operation."""

    def __init__(self, message: str, argument: str | None = None):
        self.argument = argument
        super().__init__(message)


class OutOfBoundsError(InvalidArgumentError):
    """Raised when a vertex id does not exist in the graph."""

    def __init__(self, message: str, vertex_id=None):
        self.vertex_id = vertex_id
        super().__init__(message, "vertex_id")


class RangeError(GraphError, ValueError):
    """Raised when a valid value violates the flow <= capacity bound."""

    def __init__(
        self,
        message: str,
        capacity: int | float | None = None,
        flow: int | float | None = None,
    ):
        self.capacity = capacity
        self.flow = flow
        super().__init__(message)


class LogicError(GraphError, RuntimeError):
    """Raised when an internal invariant of the graph structure is broken."""

    pass


class BadMethodCallError(GraphError, TypeError):
    """Raised when an operation is not supported on this object."""

    pass

"""Errors raised while reading a network description."""


class SchemaLoadError(Exception):
    """Raised when a network file is missing, unreadable or not YAML.

    Attributes:
        path: The offending file, or None when parsing a string.
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(Exception):
    """Raised when a network description is well-formed YAML but invalid.

    Covers both pydantic field errors and edges whose flow exceeds their
    capacity once the graph is built.

    Attributes:
        errors: One dict per problem with "loc" (e.g. "edges.2.flow"),
            "msg" and "type" keys.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)

"""Schema layer for parsing and validating YAML network descriptions."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import EdgeSpec, NetworkModel, VertexSpec
from .loader import load_yaml, parse_network, parse_network_from_string

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "EdgeSpec",
    "NetworkModel",
    "VertexSpec",
    "load_yaml",
    "parse_network",
    "parse_network_from_string",
]

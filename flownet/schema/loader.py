"""Reading network descriptions from YAML files and strings."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import NetworkModel


def load_yaml(path: str | Path) -> dict:
    """Read a network file into its raw mapping.

    An empty file is an empty network, so it yields an empty dict.

    Args:
        path: Path to the YAML network file.

    Returns:
        The top-level mapping (vertices, edges, attributes, name).

    Raises:
        SchemaLoadError: If the file is missing, unreadable, not YAML or
            not a mapping at the top level.
    """
    path = Path(path)

    if not path.is_file():
        reason = "File not found" if not path.exists() else "Not a file"
        raise SchemaLoadError(f"{reason}: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return _require_mapping(data, str(path))


def parse_network(path: str | Path) -> NetworkModel:
    """Read and validate a network file.

    Args:
        path: Path to the YAML network file.

    Returns:
        The validated NetworkModel, ready for `build_graph()`.

    Raises:
        SchemaLoadError: If the file cannot be read as YAML.
        SchemaValidationError: If vertices or edges are invalid.
    """
    return _parse_network_data(load_yaml(path))


def parse_network_from_string(yaml_string: str) -> NetworkModel:
    """Validate a network description given as YAML text.

    Args:
        yaml_string: The YAML document.

    Returns:
        The validated NetworkModel.

    Raises:
        SchemaLoadError: If the text is not YAML or not a mapping.
        SchemaValidationError: If vertices or edges are invalid.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    return _parse_network_data(_require_mapping(data))


def _require_mapping(data, path: str | None = None) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )
    return data


def _parse_network_data(data: dict) -> NetworkModel:
    """Validate raw data, flattening pydantic errors to dotted locations."""
    try:
        return NetworkModel.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Network description has {len(errors)} error(s)", errors
        ) from e

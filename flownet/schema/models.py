"""Pydantic models for flownet network descriptions."""

import math
import re
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

VertexId = str | int

# "a -> b" for directed, "a -- b" for undirected edges
_SHORTHAND = re.compile(r"^\s*(?P<from>\S+?)\s*(?P<arrow>->|--)\s*(?P<to>\S+)\s*$")
_INTEGER = re.compile(r"^-?\d+$")


def _shorthand_id(token: str) -> VertexId:
    # Same typing as a plain YAML scalar, so "1 -> 2" matches `vertices: [1, 2]`
    return int(token) if _INTEGER.match(token) else token


class VertexSpec(BaseModel):
    """A vertex of the network."""

    id: VertexId
    attributes: dict[str, Any] = Field(default_factory=dict)


class EdgeSpec(BaseModel):
    """An edge between two vertices."""

    from_vertex: VertexId = Field(alias="from")
    to: VertexId
    directed: bool = True
    weight: int | float | None = None
    capacity: int | float | None = None
    flow: int | float | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data: Any) -> Any:
        """Expand "a -> b" / "a -- b" strings into edge mappings."""
        if isinstance(data, str):
            match = _SHORTHAND.match(data)
            if not match:
                raise ValueError(
                    f"Invalid edge shorthand {data!r}, expected 'a -> b' or 'a -- b'"
                )
            return {
                "from": _shorthand_id(match["from"]),
                "to": _shorthand_id(match["to"]),
                "directed": match["arrow"] == "->",
            }
        return data

    @field_validator("weight", "capacity", "flow", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        """Reject YAML booleans, which pydantic would accept as numbers."""
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    @field_validator("capacity", "flow")
    @classmethod
    def check_non_negative(cls, value: int | float | None) -> int | float | None:
        """Capacity and flow must be real numbers and not negative."""
        if value is not None and math.isnan(value):
            raise ValueError("must be a real number, not NaN")
        if value is not None and value < 0:
            raise ValueError("must not be negative")
        return value


class NetworkModel(BaseModel):
    """Root model for a network YAML file."""

    name: str | None = None
    vertices: list[VertexSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_vertices(cls, data: Any) -> Any:
        """Allow vertices as a list of bare ids."""
        if not isinstance(data, dict):
            return data

        vertices = data.get("vertices", [])
        if isinstance(vertices, list):
            data["vertices"] = [
                {"id": v} if isinstance(v, (str, int)) else v for v in vertices
            ]

        return data

    @model_validator(mode="after")
    def check_unique_vertices(self) -> "NetworkModel":
        """Vertex ids must be unique."""
        seen: set[VertexId] = set()
        for vertex in self.vertices:
            if vertex.id in seen:
                raise ValueError(f"Duplicate vertex id {vertex.id!r}")
            seen.add(vertex.id)
        return self

    def get_vertex_ids(self) -> list[VertexId]:
        """Get all vertex ids, declared ones first, then edge endpoints."""
        ids: list[VertexId] = [v.id for v in self.vertices]
        for edge in self.edges:
            for vertex_id in (edge.from_vertex, edge.to):
                if vertex_id not in ids:
                    ids.append(vertex_id)
        return ids

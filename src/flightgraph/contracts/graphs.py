"""Graph configuration exchange format using Pydantic models.

Configurations are exchanged as lists of plain dicts with camelCase curve keys.
These models describe that shape for hosting applications that persist or
receive configurations; the adaptation core itself works on plain dicts and
never raises on malformed content.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class Curve(BaseModel):
    """Raw value to display value transform."""

    offset: float = 0.0
    power: float = Field(default=1.0, gt=0)
    input_range: float = Field(default=500.0, alias="inputRange")
    output_range: float = Field(default=1.0, alias="outputRange")
    steps: int | float | None = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("offset", "input_range", "output_range")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("curve values must be finite")
        return v


class GraphField(BaseModel):
    name: str
    curve: Curve | None = None
    color: str | None = None
    # Kept as given when it is not an integer, e.g. "default"
    smoothing: int | str | None = None

    model_config = ConfigDict(extra="allow")


class Graph(BaseModel):
    label: str = ""
    height: int | float | None = Field(default=None, ge=1)
    fields: List[GraphField] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @field_validator("fields", mode="before")
    @classmethod
    def _names_to_fields(cls, v: Any) -> Any:
        # Templates may list bare field names.
        if isinstance(v, list):
            return [{"name": f} if isinstance(f, str) else f for f in v]
        return v


_GRAPH_LIST = TypeAdapter(List[Graph])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_graphs(data: Any) -> List[Graph]:
    """Validate exchanged data into :class:`Graph` models.

    Raises ``pydantic.ValidationError`` when the structure is malformed.
    """
    return _GRAPH_LIST.validate_python(data)


def dump_graphs(graphs: Iterable[Graph | Mapping[str, Any]]) -> List[dict]:
    """Return JSON-safe dicts in the exchange format, unset values omitted."""
    models = [g if isinstance(g, Graph) else Graph.model_validate(g) for g in graphs]
    return [m.model_dump(mode="json", by_alias=True, exclude_none=True) for m in models]


__all__ = ["Curve", "GraphField", "Graph", "parse_graphs", "dump_graphs"]

"""Pydantic model for the graph settings file."""
from __future__ import annotations

import re
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import DEFAULT_HEIGHT, PALETTE

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Settings(BaseModel):
    palette: List[str] = Field(default_factory=lambda: list(PALETTE), min_length=1)
    default_height: float = Field(default=DEFAULT_HEIGHT, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, v: List[str]) -> List[str]:
        for i, color in enumerate(v):
            if not _HEX_COLOR.match(color):
                raise ValueError(f"palette[{i}] must be a hex color, got {color!r}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


__all__ = ["Settings"]

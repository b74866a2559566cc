"""Graph settings loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .schema import Settings

__all__ = ["load_settings"]


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise TypeError(f"Top-level YAML at {path} must be a mapping")
        return data


def _graphs_section(d: Mapping[str, Any], source: str) -> Dict[str, Any]:
    extra = set(d.keys()) - {"graphs"}
    if extra:
        raise ValueError(f"unexpected top-level keys: {sorted(extra)}")
    section = d.get("graphs") or {}
    if not isinstance(section, Mapping):
        raise TypeError(f"'graphs' in {source} must be a mapping, got {type(section).__name__}")
    return dict(section)


def load_settings(
    path: str | Path | None = None,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Load settings from ``path`` and return a validated :class:`Settings`.

    The file holds a single ``graphs:`` mapping.  A missing file (or no path at
    all) yields the built-in defaults.  ``overrides`` uses the same
    ``{"graphs": {...}}`` shape; each key it sets replaces the file's value
    (settings are flat, so the palette list is replaced, not extended).
    """

    cfg = _graphs_section(_read_yaml(path), str(path)) if path is not None else {}
    if overrides:
        cfg.update(_graphs_section(overrides, "overrides"))

    return Settings.model_validate(cfg)

"""Upgrade persisted graph configurations to current field names."""
from __future__ import annotations

import re
from typing import Any, Dict, List, Literal

from .utils.logging import logger

_LEGACY_GYRO = re.compile(r"^gyroData(.+)$")


def load(config: List[Dict[str, Any]] | None) -> List[Dict[str, Any]] | Literal[False]:
    """Translate legacy field names in ``config`` and return it.

    ``gyroData<suffix>`` fields are renamed to ``gyroADC<suffix>`` in place.
    A missing configuration (``None``) returns ``False``; an empty list is a
    valid configuration and is returned unchanged.
    """
    if config is None:
        return False

    renamed = 0
    for graph in config:
        for field in graph.get("fields", ()):
            m = _LEGACY_GYRO.match(field.get("name", ""))
            if m:
                field["name"] = "gyroADC" + m.group(1)
                renamed += 1

    if renamed:
        logger.info("Renamed %d legacy gyroData field(s) to gyroADC", renamed)
    return config


__all__ = ["load"]

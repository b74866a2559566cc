from __future__ import annotations

from typing import List

# Colors handed out, in order, to fields that have none.
PALETTE: List[str] = [
    "#fb8072",  # red
    "#8dd3c7",  # cyan
    "#ffffb3",  # yellow
    "#bebada",  # purple
    "#80b1d3",
    "#fdb462",
    "#b3de69",
    "#fccde5",
    "#d9d9d9",
    "#bc80bd",
    "#ccebc5",
    "#ffed6f",
]

DEFAULT_HEIGHT: float = 1

__all__ = ["PALETTE", "DEFAULT_HEIGHT"]

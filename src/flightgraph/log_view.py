"""Flight log collaborator interface.

The adapter only needs a handful of read-only queries from a decoded log.
:class:`FlightLogView` spells them out; :class:`ArrayFlightLog` is a small
implementation backed by a numpy frame array.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, Sequence

import numpy as np


class FlightLogView(Protocol):
    def main_field_names(self) -> Sequence[str]: ...

    def main_field_index(self, name: str) -> Optional[int]: ...

    def sys_config(self) -> Mapping[str, Any]: ...

    def stats(self) -> Mapping[str, Any]: ...


class ArrayFlightLog:
    """In-memory log: one column per main field, one row per frame."""

    def __init__(
        self,
        field_names: Sequence[str],
        frames: Any = None,
        sys_config: Optional[Mapping[str, Any]] = None,
    ):
        self._names = list(field_names)
        self._index = {name: i for i, name in enumerate(self._names)}
        n = len(self._names)
        if frames is None:
            frames = np.empty((0, n), dtype=float)
        arr = np.asarray(frames, dtype=float)
        if arr.ndim == 1 and n:
            arr = arr.reshape(1, -1)
        if arr.ndim != 2 or arr.shape[1] != n:
            raise ValueError(f"frames must have shape (T, {n}), got {arr.shape}")
        self.frames = arr
        self._sys_config = dict(sys_config or {})
        self._stats: Dict[str, Any] | None = None

    def main_field_names(self) -> list[str]:
        return self._names

    def main_field_index(self, name: str) -> Optional[int]:
        return self._index.get(name)

    def sys_config(self) -> Dict[str, Any]:
        return self._sys_config

    def stats(self) -> Dict[str, Any]:
        """Return ``{"field": {index: {"min": ..., "max": ...}}}``.

        Columns with no finite samples have no entry.
        """
        if self._stats is None:
            field_stats: Dict[int, Dict[str, float]] = {}
            if self.frames.shape[0]:
                finite = np.isfinite(self.frames)
                has_data = finite.any(axis=0)
                masked = np.where(finite, self.frames, np.nan)
                with np.errstate(invalid="ignore"):
                    lo = np.nanmin(np.where(has_data, masked, 0.0), axis=0)
                    hi = np.nanmax(np.where(has_data, masked, 0.0), axis=0)
                for i in np.flatnonzero(has_data):
                    field_stats[int(i)] = {"min": float(lo[i]), "max": float(hi[i])}
            self._stats = {"field": field_stats}
        return self._stats


__all__ = ["FlightLogView", "ArrayFlightLog"]

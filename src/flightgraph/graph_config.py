"""Holder of the current graph configuration."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .adapt import adapt_graphs
from .config.schema import Settings
from .events import Handle, Notifier
from .log_view import FlightLogView
from .utils.logging import logger

CHANGE = "change"


class GraphConfig:
    """Current list of resolved graphs plus a ``"change"`` notification.

    Each graph is ``{"label": ..., "height": ..., "fields": [{"name": ...,
    "curve": {"offset", "power", "inputRange", "outputRange", "steps"?},
    "color": ..., "smoothing": ...}, ...]}``.
    """

    def __init__(self, graphs: Optional[Sequence[Dict[str, Any]]] = None, *, settings: Optional[Settings] = None):
        self._graphs: Tuple[Dict[str, Any], ...] = tuple(graphs or ())
        self.settings = settings or Settings()
        self.events = Notifier()

    # ------------------------------------------------------------------
    def get_graphs(self) -> Tuple[Dict[str, Any], ...]:
        """Return the current graphs as a tuple; the sequence cannot be edited in place."""
        return self._graphs

    def set_graphs(self, new_graphs: Sequence[Dict[str, Any]]) -> None:
        """Replace the whole configuration, then notify ``"change"`` observers."""
        self._graphs = tuple(new_graphs)
        logger.debug("Graph configuration replaced (%d graph(s))", len(new_graphs))
        self.events.emit(CHANGE)

    # ------------------------------------------------------------------
    def on(self, event: str, callback: Callable[[], object]) -> Handle:
        return self.events.on(event, callback)

    def off(self, handle: Handle) -> bool:
        return self.events.off(handle)

    # ------------------------------------------------------------------
    def adapt_graphs(self, flight_log: FlightLogView, graphs: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """Resolve ``graphs`` against ``flight_log`` and install the result."""
        new_graphs = adapt_graphs(
            flight_log,
            graphs,
            palette=self.settings.palette,
            default_height=self.settings.default_height,
        )
        self.set_graphs(new_graphs)
        return new_graphs


__all__ = ["GraphConfig", "CHANGE"]

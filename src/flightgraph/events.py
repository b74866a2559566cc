"""Synchronous publish/observe helper."""

from __future__ import annotations

import itertools
from typing import Callable, Dict, List, Tuple

Callback = Callable[[], object]
Handle = Tuple[str, int]


class Notifier:
    """Named events with an explicit, ordered list of callbacks per event.

    Callbacks run synchronously inside :meth:`emit`, in registration order.
    Exceptions raised by a callback propagate to the emitter.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[str, List[Tuple[int, Callback]]] = {}
        self._ids = itertools.count()

    def on(self, event: str, callback: Callback) -> Handle:
        if not callable(callback):
            raise TypeError(f"callback for {event!r} must be callable")
        cid = next(self._ids)
        self._callbacks.setdefault(event, []).append((cid, callback))
        return (event, cid)

    def off(self, handle: Handle) -> bool:
        """Unregister ``handle``; return ``False`` if it was not registered."""
        event, cid = handle
        entries = self._callbacks.get(event, [])
        for i, (other, _) in enumerate(entries):
            if other == cid:
                del entries[i]
                return True
        return False

    def emit(self, event: str) -> None:
        # Snapshot so callbacks may (un)subscribe while being notified.
        for _, callback in list(self._callbacks.get(event, ())):
            callback()

    def listener_count(self, event: str) -> int:
        return len(self._callbacks.get(event, ()))


__all__ = ["Notifier", "Handle"]

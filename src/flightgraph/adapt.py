"""Reconcile graph configurations against the fields of a specific log.

A stored or template configuration names fields loosely: wildcard groups such
as ``motor[all]``, fields a given craft may not log, and curves or colors that
may be missing.  :func:`adapt_graphs` turns it into a resolved configuration in
which every field exists in the log and carries a curve, a color and a
smoothing amount.
"""

from __future__ import annotations

import math
import re
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .config.defaults import DEFAULT_HEIGHT, PALETTE
from .heuristics import default_curve_for_field, default_smoothing_for_field
from .log_view import FlightLogView
from .utils.logging import logger

Graph = Dict[str, Any]
GraphField = Dict[str, Any]

_WILDCARD = re.compile(r"^(.+)\[all\]\Z")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_smoothing(value: Any) -> Any:
    """Return ``value`` as an int when it has a leading integer, else unchanged.

    ``"150"`` gives ``150``, ``"150ms"`` gives ``150`` and ``2.9`` gives ``2``;
    ``"abc"``, booleans and non-finite floats are returned as they are.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else value
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        if m:
            return int(m.group(1))
    return value


def expand_field(field: Mapping[str, Any], log_field_names: Sequence[str], flight_log: FlightLogView) -> List[GraphField]:
    """Return clones of ``field`` for every concrete log field it names.

    A wildcard ``root[all]`` yields one clone per ``root[<n>]`` in log order;
    any other name yields one clone if the log has it and none otherwise.
    """
    name = field.get("name", "")
    m = _WILDCARD.match(name)
    if m:
        root = m.group(1)
        name_re = re.compile("^" + re.escape(root) + r"\[[0-9]+\]\Z")
        out = []
        for log_name in log_field_names:
            if name_re.match(log_name):
                clone = deepcopy(dict(field))
                clone["name"] = log_name
                out.append(clone)
        logger.debug("Expanded %s to %d field(s)", name, len(out))
        return out

    if flight_log.main_field_index(name) is None:
        logger.debug("Dropping field %r: not present in this log", name)
        return []
    return [deepcopy(dict(field))]


class _ColorCycle:
    """Palette cursor scoped to one graph."""

    def __init__(self, palette: Sequence[str]):
        self.palette = palette
        self.index = 0

    def next(self) -> str:
        color = self.palette[self.index % len(self.palette)]
        self.index += 1
        return color


def _apply_defaults(field: GraphField, flight_log: FlightLogView, colors: _ColorCycle) -> GraphField:
    name = field["name"]
    default_curve = default_curve_for_field(flight_log, name)

    curve = field.get("curve")
    if curve is None:
        field["curve"] = default_curve
    else:
        # Curve shape carries over between logs; calibration endpoints don't.
        merged = dict(default_curve)
        merged.update(curve)
        merged["offset"] = default_curve["offset"]
        merged["inputRange"] = default_curve["inputRange"]
        field["curve"] = merged

    if field.get("color") is None:
        field["color"] = colors.next()

    smoothing = field.get("smoothing")
    if smoothing is None or smoothing == "default":
        field["smoothing"] = default_smoothing_for_field(flight_log, name)
    else:
        field["smoothing"] = parse_smoothing(smoothing)

    return field


def adapt_graph(
    flight_log: FlightLogView,
    graph: Mapping[str, Any],
    *,
    palette: Sequence[str] = PALETTE,
    default_height: float = DEFAULT_HEIGHT,
    log_field_names: Sequence[str] | None = None,
) -> Graph:
    """Resolve a single graph; see :func:`adapt_graphs`."""
    if log_field_names is None:
        log_field_names = flight_log.main_field_names()

    new_graph: Graph = deepcopy({k: v for k, v in graph.items() if k != "fields"})
    if new_graph.get("height") is None:
        new_graph["height"] = default_height
    new_graph["fields"] = []

    colors = _ColorCycle(palette)
    for field in graph.get("fields") or ():
        for resolved in expand_field(field, log_field_names, flight_log):
            new_graph["fields"].append(_apply_defaults(resolved, flight_log, colors))
    return new_graph


def adapt_graphs(
    flight_log: FlightLogView,
    graphs: Iterable[Mapping[str, Any]],
    *,
    palette: Sequence[str] = PALETTE,
    default_height: float = DEFAULT_HEIGHT,
) -> List[Graph]:
    """Return a resolved copy of ``graphs`` suited to ``flight_log``.

    Parameters
    ----------
    flight_log:
        The log the configuration will be displayed against.
    graphs:
        Graph dicts ``{"label", "height"?, "fields": [{"name", ...}]}``.  They
        are not modified.
    palette:
        Colors assigned, cycling per graph, to fields without a color.
    default_height:
        Height given to graphs that have none.

    Notes
    -----
    Fields missing from the log are dropped silently.  ``offset`` and
    ``inputRange`` of every curve are recomputed from the log; every other
    value already present on a field is kept.
    """
    log_field_names = list(flight_log.main_field_names())
    return [
        adapt_graph(
            flight_log,
            graph,
            palette=palette,
            default_height=default_height,
            log_field_names=log_field_names,
        )
        for graph in graphs
    ]


__all__ = ["adapt_graphs", "adapt_graph", "expand_field", "parse_smoothing"]

"""Built-in graph templates."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .config.defaults import DEFAULT_HEIGHT
from .log_view import FlightLogView

EXAMPLE_GRAPHS: List[Dict[str, Any]] = [
    {"label": "Motors", "fields": ["motor[all]", "servo[5]"]},
    {"label": "Gyros", "fields": ["gyroADC[all]"]},
    {"label": "PIDs", "fields": ["axisSum[all]"]},
    {"label": "Gyro + PID roll", "fields": ["axisP[0]", "axisI[0]", "axisD[0]", "gyroADC[0]"]},
    {"label": "Gyro + PID pitch", "fields": ["axisP[1]", "axisI[1]", "axisD[1]", "gyroADC[1]"]},
    {"label": "Gyro + PID yaw", "fields": ["axisP[2]", "axisI[2]", "axisD[2]", "gyroADC[2]"]},
    {"label": "Accelerometers", "fields": ["accSmooth[all]"]},
]


def example_graphs(
    flight_log: FlightLogView | None = None,
    graph_names: Optional[Iterable[str]] = None,
) -> List[Dict[str, Any]]:
    """Return suggested graph configurations as unresolved templates.

    Parameters
    ----------
    flight_log:
        Accepted for a uniform call signature; field availability is checked
        later by :func:`flightgraph.adapt.adapt_graphs`.
    graph_names:
        If given, only templates whose label is listed are returned, in
        catalog order.
    """
    wanted = set(graph_names) if graph_names is not None else None

    result: List[Dict[str, Any]] = []
    for src in EXAMPLE_GRAPHS:
        if wanted is not None and src["label"] not in wanted:
            continue
        result.append(
            {
                "label": src["label"],
                "fields": [{"name": name} for name in src["fields"]],
                "height": src.get("height", DEFAULT_HEIGHT),
            }
        )
    return result


__all__ = ["EXAMPLE_GRAPHS", "example_graphs"]

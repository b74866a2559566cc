"""Default display curves and smoothing per field family.

Each rule is a ``(pattern, builder)`` pair tried in order; the first pattern
that matches the field name supplies the default.  Builders receive the log's
system configuration so calibration endpoints follow the craft that produced
the log.  A builder returns ``None`` when the system configuration lacks the
values it needs, in which case the field is scaled from its observed range.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .log_view import FlightLogView

Curve = Dict[str, float]
CurveRule = Tuple["re.Pattern[str]", Callable[[Mapping[str, Any]], Optional[Curve]]]


def _curve(offset: float, power: float, input_range: float, output_range: float = 1.0) -> Curve:
    return {
        "offset": offset,
        "power": power,
        "inputRange": input_range,
        "outputRange": output_range,
    }


def _motor(sys: Mapping[str, Any]) -> Optional[Curve]:
    high, low = sys.get("motorOutputHigh"), sys.get("motorOutputLow")
    if high is None or low is None:
        return None
    return _curve(-(high + low) / 2, 1.0, (high - low) / 2)


def _gyro(sys: Mapping[str, Any]) -> Optional[Curve]:
    scale = sys.get("gyroScale")
    if not scale:
        return None
    return _curve(0, 0.25, 2.0e-5 / scale)


def _acc(sys: Mapping[str, Any]) -> Optional[Curve]:
    acc_1g = sys.get("acc_1G")
    if acc_1g is None:
        return None
    # Reasonable typical maximum for acc
    return _curve(0, 0.5, acc_1g * 3.0)


def _rc_command(sys: Mapping[str, Any]) -> Curve:
    rc_rate = sys.get("rcRate") or 100
    return _curve(0, 0.8, 500 * rc_rate / 100)


CURVE_RULES: Tuple[CurveRule, ...] = (
    (re.compile(r"^motor\["), _motor),
    (re.compile(r"^servo\["), lambda sys: _curve(-1500, 1.0, 500)),
    (re.compile(r"^gyroADC\["), _gyro),
    (re.compile(r"^accSmooth\["), _acc),
    (re.compile(r"^axis.+\["), lambda sys: _curve(0, 0.3, 400)),
    (re.compile(r"^rcCommand\[3\]\Z"), lambda sys: _curve(-1500, 1.0, 500)),  # throttle
    (re.compile(r"^rcCommand\[2\]\Z"), lambda sys: _curve(0, 0.8, 500)),  # yaw
    (re.compile(r"^rcCommand\["), _rc_command),
    (re.compile(r"^heading\[2\]\Z"), lambda sys: _curve(-math.pi, 1.0, math.pi)),
    (re.compile(r"^heading\["), lambda sys: _curve(0, 1.0, math.pi)),
    (re.compile(r"^sonar"), lambda sys: _curve(-200, 1.0, 200)),
)

SMOOTHING_RULES: Tuple[Tuple["re.Pattern[str]", int], ...] = (
    (re.compile(r"^motor\["), 5000),
    (re.compile(r"^servo\["), 5000),
    (re.compile(r"^gyroADC\["), 3000),
    (re.compile(r"^accSmooth\["), 3000),
    (re.compile(r"^axis.+\["), 3000),
)


def _curve_from_stats(flight_log: FlightLogView, field_name: str) -> Curve:
    """Center and scale the field on its whole-log observed range."""
    index = flight_log.main_field_index(field_name)
    field_stat = None
    if index is not None:
        field_stat = (flight_log.stats() or {}).get("field", {}).get(index)

    if not field_stat:
        return _curve(0, 1.0, 500)
    lo, hi = field_stat["min"], field_stat["max"]
    return _curve(-(hi + lo) / 2, 1.0, max((hi - lo) / 2, 1.0))


def default_curve_for_field(flight_log: FlightLogView, field_name: str) -> Curve:
    """Return a fresh default curve dict for ``field_name`` in ``flight_log``."""
    sys_config = flight_log.sys_config() or {}
    for pattern, build in CURVE_RULES:
        if pattern.match(field_name):
            curve = build(sys_config)
            if curve is not None:
                return curve
            break
    return _curve_from_stats(flight_log, field_name)


def default_smoothing_for_field(flight_log: FlightLogView | None, field_name: str) -> int:
    for pattern, smoothing in SMOOTHING_RULES:
        if pattern.match(field_name):
            return smoothing
    return 0


__all__ = [
    "CURVE_RULES",
    "SMOOTHING_RULES",
    "default_curve_for_field",
    "default_smoothing_for_field",
]

"""flightgraph top-level API.

External users can simply ``from flightgraph import GraphConfig, load``.
"""

from .adapt import adapt_graphs
from .config import PALETTE, Settings, load_settings
from .examples import example_graphs
from .graph_config import GraphConfig
from .heuristics import default_curve_for_field, default_smoothing_for_field
from .log_view import ArrayFlightLog, FlightLogView
from .migrate import load

__all__ = [
    "ArrayFlightLog",
    "FlightLogView",
    "GraphConfig",
    "PALETTE",
    "Settings",
    "adapt_graphs",
    "default_curve_for_field",
    "default_smoothing_for_field",
    "example_graphs",
    "load",
    "load_settings",
]

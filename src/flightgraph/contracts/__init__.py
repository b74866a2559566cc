"""Public data contracts."""
from .graphs import Curve, Graph, GraphField, dump_graphs, parse_graphs

__all__ = ["Curve", "Graph", "GraphField", "dump_graphs", "parse_graphs"]

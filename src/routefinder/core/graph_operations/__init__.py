"""Graph import/export and statistics."""

from .metrics import GraphSummary, summarize
from .serialization import (
    graph_from_dict,
    graph_to_csv,
    graph_to_dict,
    parse_graph_csv,
    read_graph_file,
)

__all__ = [
    "GraphSummary",
    "graph_from_dict",
    "graph_to_csv",
    "graph_to_dict",
    "parse_graph_csv",
    "read_graph_file",
    "summarize",
]

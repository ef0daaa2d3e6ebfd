"""Graph serialization and deserialization operations.

This module provides functionality for importing/exporting graphs and
rendering routes:
- CSV edge lists (``from,to,weight`` per line)
- JSON graph documents, validated against a JSON schema on import
- Text, CSV and dict renderings of a Route
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...utils.validation import validate_graph_document
from ..exceptions import GraphFormatError, ValidationError
from ..graph import Graph
from ..graph_paths.models import Route
from ..models import Edge, Vertex

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"
CSV_HEADER = "from,to,weight"


def parse_graph_csv(text: str, directed: bool = True) -> Graph:
    """Create a graph from CSV edge lines.

    Each non-blank line holds ``from,to,weight``. Lines starting with ``#``
    are comments and an optional ``from,to,weight`` header is skipped. The
    vertex set is every endpoint, in order of first appearance.

    Args:
        text: CSV content
        directed: Whether the edges are one-way

    Returns:
        The parsed graph

    Raises:
        GraphFormatError: If a line is malformed or no edges are present
    """
    edges: List[Edge] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if not edges and line.replace(" ", "").lower() == CSV_HEADER:
            continue

        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 3:
            raise GraphFormatError(
                f"Line {line_number}: invalid edge format '{line}' (expected: from,to,weight)"
            )
        from_vertex, to_vertex, weight_text = parts
        try:
            weight = float(weight_text)
        except ValueError as e:
            raise GraphFormatError(f"Line {line_number}: invalid weight '{weight_text}'") from e
        try:
            edges.append(Edge(from_vertex, to_vertex, weight))
        except (ValidationError, ValueError) as e:
            raise GraphFormatError(f"Line {line_number}: {e}") from e

    if not edges:
        raise GraphFormatError("Empty graph definition")

    logger.debug("Parsed %d edges from CSV", len(edges))
    return Graph.from_edges(edges, directed=directed)


def graph_to_csv(graph: Graph) -> str:
    """Render the graph's edges as sorted ``from,to,weight`` lines."""
    lines = sorted(f"{e.from_vertex},{e.to_vertex},{e.weight}" for e in graph.get_edges())
    return "\n".join(lines)


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Convert graph to a JSON-compatible graph document."""
    vertices: List[Union[str, Dict[str, str]]] = []
    for vertex_id in graph.get_vertex_ids():
        vertex = graph.get_vertex(vertex_id)
        if vertex is not None and vertex.label is not None:
            vertices.append({"id": vertex.id, "label": vertex.label})
        else:
            vertices.append(vertex_id)

    return {
        "schema_version": SCHEMA_VERSION,
        "directed": graph.directed,
        "vertices": vertices,
        "edges": [
            {"from": edge.from_vertex, "to": edge.to_vertex, "weight": edge.weight}
            for edge in graph.get_edges()
        ],
    }


def graph_to_json(graph: Graph, indent: Optional[int] = 2) -> str:
    """Convert graph to a JSON string."""
    return json.dumps(graph_to_dict(graph), indent=indent)


def graph_from_dict(data: Any, directed: bool = True) -> Graph:
    """Create a graph from a graph document.

    Args:
        data: Decoded graph document
        directed: Used when the document has no ``directed`` key

    Raises:
        GraphFormatError: If the document violates the graph schema or holds
            an unusable edge
    """
    result = validate_graph_document(data)
    if not result.is_valid:
        raise GraphFormatError("Invalid graph document: " + "; ".join(result.errors))

    try:
        edges = [Edge(item["from"], item["to"], item["weight"]) for item in data["edges"]]
        is_directed = data.get("directed", directed)
        if "vertices" not in data:
            return Graph.from_edges(edges, directed=is_directed)

        vertices = [
            Vertex(item) if isinstance(item, str) else Vertex(item["id"], item.get("label"))
            for item in data["vertices"]
        ]
    except (ValidationError, ValueError) as e:
        raise GraphFormatError(f"Invalid graph document: {e}") from e

    declared = {vertex.id for vertex in vertices}
    for edge in edges:
        if edge.from_vertex not in declared or edge.to_vertex not in declared:
            logger.warning("Ignoring edge %s: endpoint not in the vertex list", edge)
    return Graph(vertices, edges, directed=is_directed)


def read_graph_file(path: Union[str, Path], directed: bool = True) -> Graph:
    """Read a graph from a ``.json`` document or a CSV edge list.

    Raises:
        GraphFormatError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphFormatError(f"Error reading file {path}: {e}") from e

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"Invalid JSON in {path}: {e}") from e
        return graph_from_dict(data, directed=directed)
    return parse_graph_csv(content, directed=directed)


def route_to_string(route: Route) -> str:
    """Human-readable route: ``A → B → C (Total Distance: 3.0)``."""
    return f"{' → '.join(route.vertices)} (Total Distance: {route.total_distance})"


def route_to_csv(route: Route) -> str:
    """Route as one CSV line: the vertices followed by the distance."""
    return f"{','.join(route.vertices)},{route.total_distance}"


def route_to_dict(route: Route) -> Dict[str, Any]:
    """Convert route to a JSON-compatible dictionary."""
    return {
        "vertices": list(route.vertices),
        "total_distance": route.total_distance,
        "hops": route.hops,
    }

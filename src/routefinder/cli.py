"""Command Line Interface for the route finder.

This module provides a CLI for finding routes in a weighted graph. Graphs are
read from a CSV edge list or a JSON graph document; without ``--graph`` a
built-in template is used (the five-vertex sample graph by default).

The CLI supports the following commands:
    - find: Find a route between two vertices
    - all: Find the shortest route from one vertex to every other vertex
    - show: Display graph statistics and its CSV form
    - demo: Run every algorithm on the sample graph

Exit codes: 0 on success, 1 when a search reports an error (unknown vertex,
no path), 2 on invalid input.

Example Usage:
    python -m routefinder find A E --algorithm bidirectional
    python -m routefinder find "(0,0)" "(2,2)" --template grid --algorithm a_star --heuristic manhattan
    python -m routefinder all A --graph data/roads.csv --undirected
    python -m routefinder show --graph data/roads.json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from routefinder.core.exceptions import GraphFormatError
from routefinder.core.graph import Graph
from routefinder.core.graph_operations.metrics import summarize
from routefinder.core.graph_operations.serialization import (
    graph_to_csv,
    read_graph_file,
    route_to_csv,
    route_to_dict,
    route_to_string,
)
from routefinder.core.graph_paths import Algorithm, PathFinding, Route, SearchResult
from routefinder.core.heuristics import METRICS, get_heuristic
from routefinder.core.templates import TEMPLATES, sample_graph

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SEARCH_ERROR = 1
EXIT_INPUT_ERROR = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _algorithm(value: str) -> Algorithm:
    try:
        return Algorithm.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="routefinder", description="Optimal route finder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Graph source options shared by the graph commands
    source = argparse.ArgumentParser(add_help=False)
    group = source.add_mutually_exclusive_group()
    group.add_argument("--graph", metavar="FILE", help="CSV edge list or .json graph document")
    group.add_argument(
        "--template", choices=sorted(TEMPLATES), default="sample", help="Built-in graph"
    )
    source.add_argument(
        "--undirected", action="store_true", help="Treat every edge as two-way"
    )

    find = subparsers.add_parser("find", parents=[source], help="Find a route")
    find.add_argument("start", help="Start vertex ID")
    find.add_argument("end", help="End vertex ID")
    find.add_argument(
        "--algorithm",
        type=_algorithm,
        default=Algorithm.DIJKSTRA,
        help="dijkstra (default), bfs, a_star or bidirectional",
    )
    find.add_argument(
        "--heuristic",
        choices=["zero", *sorted(METRICS)],
        help="A* heuristic; coordinate heuristics read positions from vertex IDs",
    )
    find.add_argument("--format", choices=["text", "csv", "json"], default="text")

    all_routes = subparsers.add_parser(
        "all", parents=[source], help="Find routes from one vertex to every vertex"
    )
    all_routes.add_argument("start", help="Start vertex ID")

    subparsers.add_parser("show", parents=[source], help="Show graph statistics")
    subparsers.add_parser("demo", help="Run every algorithm on the sample graph")

    return parser


def load_graph(args: argparse.Namespace) -> Graph:
    """Load the graph selected by ``--graph`` or ``--template``."""
    if args.graph:
        return read_graph_file(args.graph, directed=not args.undirected)
    graph = TEMPLATES[args.template]()
    if args.undirected and graph.directed:
        vertices = [graph.get_vertex(vertex_id) for vertex_id in graph.get_vertex_ids()]
        graph = Graph(vertices, graph.get_edges(), directed=False)
    return graph


def _print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _render_route(route: Route, fmt: str, algorithm: Algorithm) -> str:
    if fmt == "csv":
        return route_to_csv(route)
    if fmt == "json":
        return json.dumps({"algorithm": algorithm.value, **route_to_dict(route)})
    return route_to_string(route)


def _report(result: SearchResult[Route], fmt: str, algorithm: Algorithm) -> int:
    if not result.ok:
        _print_error(result.error.message)
        return EXIT_SEARCH_ERROR
    print(_render_route(result.value, fmt, algorithm))
    return EXIT_OK


def cmd_find(args: argparse.Namespace) -> int:
    graph = load_graph(args)
    heuristic = None
    if args.heuristic:
        if args.algorithm is not Algorithm.A_STAR:
            logger.warning("--heuristic only applies to a_star; ignoring it")
        elif graph.has_vertex(args.end):
            # An unknown end is left for the search to report
            heuristic = get_heuristic(args.heuristic, goal=args.end)

    result = PathFinding.find_route(graph, args.start, args.end, args.algorithm, heuristic)
    return _report(result, args.format, args.algorithm)


def cmd_all(args: argparse.Namespace) -> int:
    graph = load_graph(args)
    result = PathFinding.all_routes(graph, args.start)
    if not result.ok:
        _print_error(result.error.message)
        return EXIT_SEARCH_ERROR

    table = result.value
    for vertex_id in graph.get_vertex_ids():
        route = table.get(vertex_id)
        rendered = route_to_string(route) if route else "No path found"
        print(f"{args.start} → {vertex_id}: {rendered}")
    return EXIT_OK


def cmd_show(args: argparse.Namespace) -> int:
    graph = load_graph(args)
    summary = summarize(graph)
    print(f"Vertices: {summary.vertex_count}")
    print(f"Edges: {summary.edge_count}")
    print(f"Type: {'Directed' if summary.directed else 'Undirected'}")
    print(f"Average edge weight: {summary.average_edge_weight:.2f}")
    if summary.most_connected_vertex is not None:
        print(f"Most connected vertex: {summary.most_connected_vertex}")
    print()
    print(graph_to_csv(graph))
    return EXIT_OK


def cmd_demo(args: argparse.Namespace) -> int:
    graph = sample_graph()
    print(f"Sample graph: {graph.vertex_count} vertices, {graph.edge_count} edges, undirected")

    for algorithm in Algorithm:
        result = PathFinding.find_route(graph, "A", "E", algorithm)
        rendered = route_to_string(result.value) if result.ok else result.error.message
        print(f"{algorithm.value:>13}: {rendered}")

    print("\nAll routes from A:")
    table = PathFinding.all_routes(graph, "A").unwrap()
    for vertex_id in graph.get_vertex_ids():
        print(f"   A → {vertex_id}: {route_to_string(table.routes[vertex_id])}")

    print("\nGraph in CSV format:")
    print(graph_to_csv(graph))
    return EXIT_OK


COMMANDS = {
    "find": cmd_find,
    "all": cmd_all,
    "show": cmd_show,
    "demo": cmd_demo,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        return COMMANDS[args.command](args)
    except (GraphFormatError, ValueError) as e:
        _print_error(str(e))
        return EXIT_INPUT_ERROR

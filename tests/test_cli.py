"""
Tests for the command line interface.
"""

import json

import pytest

from routefinder import cli


def test_find_default_graph(capsys):
    """Test finding a route on the sample graph."""
    assert cli.main(["find", "A", "E"]) == cli.EXIT_OK
    assert capsys.readouterr().out == "A → C → B → D → E (Total Distance: 10.0)\n"


def test_find_with_algorithm(capsys):
    """Test selecting BFS."""
    assert cli.main(["find", "A", "E", "--algorithm", "bfs"]) == 0
    assert capsys.readouterr().out.strip() == "A → C → E (Total Distance: 12.0)"


@pytest.mark.parametrize("algorithm", ["dijkstra", "a_star", "astar", "bidirectional"])
def test_find_csv_format(capsys, algorithm):
    """Test CSV output for the weight-optimal algorithms."""
    assert cli.main(["find", "A", "E", "--algorithm", algorithm, "--format", "csv"]) == 0
    assert capsys.readouterr().out.strip() == "A,C,B,D,E,10.0"


def test_find_json_format(capsys):
    """Test JSON output."""
    assert cli.main(["find", "A", "D", "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "algorithm": "dijkstra",
        "vertices": ["A", "C", "B", "D"],
        "total_distance": 8.0,
        "hops": 3,
    }


def test_find_on_grid_with_heuristic(capsys):
    """Test A* with a coordinate heuristic on the grid template."""
    args = ["find", "(0,0)", "(2,2)", "--template", "grid", "--algorithm", "a_star"]
    assert cli.main(args + ["--heuristic", "manhattan"]) == 0
    assert capsys.readouterr().out.strip().endswith("(Total Distance: 4.0)")


def test_find_unknown_vertex(capsys):
    """Test search errors exit with code 1."""
    assert cli.main(["find", "A", "Z"]) == cli.EXIT_SEARCH_ERROR
    assert capsys.readouterr().err.strip() == "Error: End vertex 'Z' not found in graph"


def test_heuristic_needs_coordinates(capsys):
    """Test a coordinate heuristic on IDs without coordinates is an input error."""
    args = ["find", "A", "E", "--algorithm", "a_star", "--heuristic", "euclidean"]
    assert cli.main(args) == cli.EXIT_INPUT_ERROR
    assert "does not contain coordinates" in capsys.readouterr().err


def test_find_from_csv_file(tmp_path, capsys):
    """Test graphs loaded from a CSV file, directed by default."""
    path = tmp_path / "chain.csv"
    path.write_text("A,B,1\nB,C,2\n", encoding="utf-8")

    assert cli.main(["find", "A", "C", "--graph", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "A → B → C (Total Distance: 3.0)"

    assert cli.main(["find", "C", "A", "--graph", str(path)]) == cli.EXIT_SEARCH_ERROR
    assert "No path found from 'C' to 'A'" in capsys.readouterr().err

    assert cli.main(["find", "C", "A", "--graph", str(path), "--undirected"]) == 0
    assert capsys.readouterr().out.strip() == "C → B → A (Total Distance: 3.0)"


def test_bad_graph_file(tmp_path, capsys):
    """Test unreadable or malformed graph files exit with code 2."""
    assert cli.main(["find", "A", "B", "--graph", str(tmp_path / "none.csv")]) == 2
    assert "Error reading file" in capsys.readouterr().err

    path = tmp_path / "bad.csv"
    path.write_text("A,B\n", encoding="utf-8")
    assert cli.main(["show", "--graph", str(path)]) == 2
    assert "Line 1" in capsys.readouterr().err


def test_unknown_algorithm_is_usage_error():
    """Test argparse rejects unknown algorithms."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["find", "A", "E", "--algorithm", "greedy"])
    assert exc_info.value.code == 2


def test_all_routes(capsys):
    """Test routes from one vertex to every vertex."""
    assert cli.main(["all", "A"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0] == "A → A: A (Total Distance: 0.0)"
    assert "A → E: A → C → B → D → E (Total Distance: 10.0)" in lines


def test_all_routes_unreachable(capsys):
    """Test unreachable vertices on the directed linear template."""
    assert cli.main(["all", "C", "--template", "linear"]) == 0
    out = capsys.readouterr().out
    assert "C → A: No path found" in out
    assert "C → D: C → D (Total Distance: 1.0)" in out


def test_all_routes_unknown_start(capsys):
    """Test an unknown source exits with code 1."""
    assert cli.main(["all", "Z"]) == 1
    assert "Start vertex 'Z' not found in graph" in capsys.readouterr().err


def test_show(capsys):
    """Test graph statistics output."""
    assert cli.main(["show", "--template", "city"]) == 0
    out = capsys.readouterr().out
    assert "Vertices: 5" in out
    assert "Edges: 6" in out
    assert "Type: Undirected" in out
    assert "New York,Boston,215.0" in out


def test_demo(capsys):
    """Test the demo runs every algorithm."""
    assert cli.main(["demo"]) == 0
    out = capsys.readouterr().out
    assert out.count("A → C → B → D → E (Total Distance: 10.0)") >= 4
    assert "bfs: A → C → E (Total Distance: 12.0)" in out
    assert "A,B,4.0" in out


def test_no_command_prints_help(capsys):
    """Test running without a command shows usage."""
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_heuristic_with_unknown_end(capsys):
    """Test an unknown end is a search error even with a coordinate heuristic."""
    args = ["find", "(0,0)", "Z", "--template", "grid", "--algorithm", "a_star"]
    assert cli.main(args + ["--heuristic", "manhattan"]) == cli.EXIT_SEARCH_ERROR
    assert capsys.readouterr().err.strip() == "Error: End vertex 'Z' not found in graph"


def test_undirected_template(capsys):
    """Test --undirected makes a directed template two-way."""
    assert cli.main(["find", "D", "A", "--template", "linear"]) == cli.EXIT_SEARCH_ERROR
    capsys.readouterr()

    assert cli.main(["find", "D", "A", "--template", "linear", "--undirected"]) == 0
    assert capsys.readouterr().out.strip() == "D → C → B → A (Total Distance: 3.0)"


def test_complete_template(capsys):
    """Test the complete-graph template is reachable from the CLI."""
    assert cli.main(["show", "--template", "complete"]) == 0
    out = capsys.readouterr().out
    assert "Vertices: 5" in out
    assert "Edges: 10" in out

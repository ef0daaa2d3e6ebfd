"""
Tests for graph document schema validation.
"""

from routefinder.utils.validation import ValidationResult, validate_graph_document


def test_valid_document():
    """Test a complete document passes."""
    result = validate_graph_document(
        {
            "schema_version": "1.0",
            "directed": True,
            "vertices": ["A", {"id": "B", "label": "Bravo"}],
            "edges": [{"from": "A", "to": "B", "weight": 1.5}],
        }
    )
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []
    assert bool(result)


def test_missing_vertex_list_warns():
    """Test documents without vertices pass with a warning."""
    result = validate_graph_document({"edges": []})
    assert result.is_valid
    assert result.warnings


def test_errors_name_their_location():
    """Test each violation is reported with its path."""
    result = validate_graph_document(
        {"edges": [{"from": "A", "to": "B"}, {"from": "", "to": "B", "weight": 1}]}
    )
    assert not result.is_valid
    assert any(error.startswith("edges/0") and "weight" in error for error in result.errors)
    assert any(error.startswith("edges/1/from") for error in result.errors)


def test_rejects_whitespace_ids_and_extra_keys():
    """Test blank IDs and unknown keys are violations."""
    assert not validate_graph_document({"vertices": [" "], "edges": []}).is_valid
    assert not validate_graph_document({"edges": [], "nodes": []}).is_valid
    assert not validate_graph_document(
        {"edges": [{"from": "A", "to": "B", "weight": True}]}
    ).is_valid


def test_non_object_document():
    """Test the root must be an object."""
    result = validate_graph_document([])
    assert not result.is_valid
    assert result.errors[0].startswith("<root>")
    assert isinstance(result, ValidationResult)


def test_every_violation_reported_once():
    """Test each violation appears exactly once."""
    result = validate_graph_document({"edges": [{"from": "A", "to": "B", "weight": -1}]})
    assert not result.is_valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("edges/0/weight")

"""
Schema validation for graph documents.

A graph document is the JSON form produced by
``graph_operations.serialization.graph_to_dict``::

    {
        "directed": true,
        "vertices": ["A", {"id": "B", "label": "Bravo"}],
        "edges": [{"from": "A", "to": "B", "weight": 1.5}]
    }

``vertices`` is optional; when omitted the vertex set is every edge endpoint.
"""

from typing import Any, Dict, List

from jsonschema import Draft7Validator

from .base import ValidationResult

_VERTEX_ID = {"type": "string", "minLength": 1, "pattern": r"\S"}

GRAPH_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "schema_version": {"type": "string"},
        "directed": {"type": "boolean"},
        "vertices": {
            "type": "array",
            "items": {
                "oneOf": [
                    _VERTEX_ID,
                    {
                        "type": "object",
                        "properties": {
                            "id": _VERTEX_ID,
                            "label": {"type": ["string", "null"]},
                        },
                        "required": ["id"],
                        "additionalProperties": False,
                    },
                ]
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "from": _VERTEX_ID,
                    "to": _VERTEX_ID,
                    "weight": {"type": "number", "minimum": 0},
                },
                "required": ["from", "to", "weight"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["edges"],
    "additionalProperties": False,
}

_VALIDATOR = Draft7Validator(GRAPH_DOCUMENT_SCHEMA)


def validate_graph_document(document: Any) -> ValidationResult:
    """
    Validate a decoded graph document against ``GRAPH_DOCUMENT_SCHEMA``.

    Every violation is reported, each prefixed with the JSON path of the
    offending value.

    Example:
        >>> validate_graph_document({"edges": []}).is_valid
        True
    """
    errors: List[str] = []
    warnings: List[str] = []

    violations = sorted(_VALIDATOR.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    for error in violations:
        location = "/".join(str(part) for part in error.path) or "<root>"
        errors.append(f"{location}: {error.message}")

    if not errors and isinstance(document, dict) and "vertices" not in document:
        warnings.append("No vertex list; vertices are taken from edge endpoints")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        context={"schema": "graph_document"},
    )

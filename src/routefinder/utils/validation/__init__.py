"""
Validation package for routefinder.

This package checks external graph documents before they are turned into
``Graph`` instances.
"""

from .base import ValidationResult
from .schema import GRAPH_DOCUMENT_SCHEMA, validate_graph_document

__all__ = [
    "GRAPH_DOCUMENT_SCHEMA",
    "ValidationResult",
    "validate_graph_document",
]

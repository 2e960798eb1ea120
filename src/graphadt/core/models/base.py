"""
Core domain models base module for the graph ADT.

This module provides the argument validation functions shared by the models
and by every graph implementation. Each function raises before the caller has
touched any state.
"""

from collections.abc import Hashable
from typing import Any

from ..exceptions import InvalidVertexError, InvalidWeightError


def validate_vertex(value: Any, name: str = "vertex") -> None:
    """Validate that a vertex label is present and hashable."""
    if value is None:
        raise InvalidVertexError(f"{name} must not be None")
    if not isinstance(value, Hashable):
        raise InvalidVertexError(f"{name} must be hashable, got {type(value).__name__}")
    try:
        hash(value)
    except TypeError as e:
        # tuples holding unhashable members pass the isinstance check
        raise InvalidVertexError(f"{name} must be hashable: {e}") from e


def validate_weight(weight: Any, minimum: int = 0) -> None:
    """Validate that a weight is an integer no smaller than minimum."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(f"weight must be an int, got {type(weight).__name__}")
    if weight < minimum:
        raise InvalidWeightError(f"weight {weight} must be >= {minimum}")

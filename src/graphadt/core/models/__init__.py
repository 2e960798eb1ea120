"""
Core domain models package for the graph ADT.

This package provides the edge record and vertex object the graph
implementations are built from, plus the shared argument validators.
"""

from .base import validate_vertex, validate_weight
from .edge import Edge
from .vertex import Vertex

__all__ = [
    # Base utilities
    "validate_vertex",
    "validate_weight",
    # Models
    "Edge",
    "Vertex",
]

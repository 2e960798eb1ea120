"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    InvalidVertexError,
    InvalidWeightError,
    RepInvariantError,
    ValidationError,
)
from .models import Edge, Vertex
from .types import GraphProtocol, VertexLabel, Weight
from .graph import AdjacencyMapGraph, EdgeListGraph, Graph

__all__ = [
    "AdjacencyMapGraph",
    "Edge",
    "EdgeListGraph",
    "Graph",
    "GraphConfig",
    "GraphProtocol",
    "InvalidVertexError",
    "InvalidWeightError",
    "RepInvariantError",
    "ValidationError",
    "Vertex",
    "VertexLabel",
    "Weight",
]

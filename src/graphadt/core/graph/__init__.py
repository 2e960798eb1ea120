"""
Graph module for the graphadt package.

This module provides the graph contract and its two interchangeable
representations:
- EdgeListGraph: a vertex set plus a list of immutable edge records
- AdjacencyMapGraph: per-vertex objects owning their outgoing edges

Both honour the same contract and cannot be told apart by callers.
"""

from .base import Graph
from .edges import EdgeListGraph
from .vertices import AdjacencyMapGraph

__all__ = [
    "Graph",
    "EdgeListGraph",
    "AdjacencyMapGraph",
]

"""
graphadt - Mutable Weighted Directed Graph Abstract Data Type

This package provides a weighted, directed graph over hashable vertex labels
with two interchangeable representations behind one contract:

- EdgeListGraph stores a vertex set and a list of immutable edge records
- AdjacencyMapGraph stores per-vertex outgoing adjacency mappings

It also includes validation utilities for auditing any graph's invariants
through its public interface.
"""

__version__ = "0.1.0"
__author__ = "graphadt Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("graphadt requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.graph import AdjacencyMapGraph, EdgeListGraph, Graph
from .core.models import Edge

__all__ = [
    "AdjacencyMapGraph",
    "Edge",
    "EdgeListGraph",
    "Graph",
    "GraphConfig",
]

"""
Edge-collection graph representation.

This module provides EdgeListGraph, which stores the vertex labels in a set and
the edges as an unordered list of immutable Edge records. Every mutation and
query scans the edge list, so operations are O(E); adding a vertex is O(1)
amortized. The representation trades query speed for an invariant that is easy
to check: edges are value objects and cannot change after construction.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set

from ..config import GraphConfig
from ..models.base import validate_vertex
from ..models.edge import Edge
from ..types import VertexLabel
from .base import Graph

logger = logging.getLogger(__name__)


class EdgeListGraph(Graph[VertexLabel]):
    """
    Graph stored as a vertex set plus a list of edge records.

    Attributes:
        _vertices (Set[VertexLabel]): All vertex labels
        _edges (List[Edge]): One record per existing edge, in no particular order
    """

    _logger = logger

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config)
        self._vertices: Set[VertexLabel] = set()
        self._edges: List[Edge[VertexLabel]] = []
        self._check_rep()

    def add(self, vertex: VertexLabel) -> bool:
        validate_vertex(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        self._debug("Added vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: VertexLabel, target: VertexLabel, weight: int) -> int:
        self._validate_set_arguments(source, target, weight)

        previous = 0
        for index, edge in enumerate(self._edges):
            if edge.connects(source, target):
                previous = edge.weight
                del self._edges[index]
                break

        if weight > 0:
            self._vertices.add(source)
            self._vertices.add(target)
            self._edges.append(Edge(source, target, weight))
            self._debug("Set edge %r -> %r to %d (was %d)", source, target, weight, previous)
        elif previous:
            self._debug("Removed edge %r -> %r (was %d)", source, target, previous)

        self._check_rep()
        return previous

    def remove(self, vertex: VertexLabel) -> bool:
        validate_vertex(vertex)
        if vertex not in self._vertices:
            return False

        self._vertices.remove(vertex)
        edge_count = len(self._edges)
        self._edges = [edge for edge in self._edges if not edge.touches(vertex)]
        self._debug(
            "Removed vertex %r and %d incident edge(s)", vertex, edge_count - len(self._edges)
        )

        self._check_rep()
        return True

    def vertices(self) -> Set[VertexLabel]:
        return set(self._vertices)

    def sources(self, target: VertexLabel) -> Dict[VertexLabel, int]:
        validate_vertex(target, "target")
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: VertexLabel) -> Dict[VertexLabel, int]:
        validate_vertex(source, "source")
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def has_vertex(self, vertex: VertexLabel) -> bool:
        validate_vertex(vertex)
        return vertex in self._vertices

    def get_edges(self) -> Iterator[Edge[VertexLabel]]:
        return iter(list(self._edges))

    def get_edge_count(self) -> int:
        return len(self._edges)

    def invariant_errors(self) -> List[str]:
        errors = []
        seen = set()
        for edge in self._edges:
            if edge.source not in self._vertices:
                errors.append(f"edge {edge} has source outside the vertex set")
            if edge.target not in self._vertices:
                errors.append(f"edge {edge} has target outside the vertex set")
            if isinstance(edge.weight, bool) or not isinstance(edge.weight, int) or edge.weight < 1:
                errors.append(f"edge {edge} has non-positive weight")
            if edge.key in seen:
                errors.append(f"duplicate edge for pair {edge.key!r}")
            seen.add(edge.key)
        return errors

    def __str__(self) -> str:
        vertices = ", ".join(str(vertex) for vertex in self._ordered(self._vertices))
        lines = [f"Vertices: [{vertices}]", "Edges:"]
        lines.extend(f"  {edge}" for edge in self._edges)
        return "\n".join(lines)

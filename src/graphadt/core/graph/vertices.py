"""
Adjacency-map graph representation.

This module provides AdjacencyMapGraph, which stores one Vertex object per
label. Each vertex owns the mapping from its outgoing neighbors to edge
weights; there is no reverse index. Consequently:

- ``targets`` is a dictionary lookup plus an O(out-degree) copy
- ``sources`` scans every vertex, O(V + E)
- ``remove`` deletes the vertex object and then scans every remaining vertex
  to drop edges pointing at the removed label
"""

import logging
from typing import Dict, List, Optional, Set

from ..config import GraphConfig
from ..models.base import validate_vertex
from ..models.vertex import Vertex
from ..types import VertexLabel
from .base import Graph

logger = logging.getLogger(__name__)


class AdjacencyMapGraph(Graph[VertexLabel]):
    """
    Graph stored as per-vertex outgoing adjacency mappings.

    Attributes:
        _vertices (Dict[VertexLabel, Vertex]): Label -> vertex object, in
            insertion order
    """

    _logger = logger

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config)
        self._vertices: Dict[VertexLabel, Vertex[VertexLabel]] = {}
        self._check_rep()

    def _get_or_create(self, label: VertexLabel) -> Vertex[VertexLabel]:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label, check_rep=self.config.check_rep)
            self._vertices[label] = vertex
            self._debug("Added vertex %r", label)
        return vertex

    def add(self, vertex: VertexLabel) -> bool:
        validate_vertex(vertex)
        if vertex in self._vertices:
            return False
        self._get_or_create(vertex)
        self._check_rep()
        return True

    def set(self, source: VertexLabel, target: VertexLabel, weight: int) -> int:
        self._validate_set_arguments(source, target, weight)

        if weight == 0:
            # Only an existing edge can be removed, and its endpoints already exist.
            origin = self._vertices.get(source)
            previous = origin.remove_target(target) if origin is not None else 0
            if previous:
                self._debug("Removed edge %r -> %r (was %d)", source, target, previous)
        else:
            origin = self._get_or_create(source)
            self._get_or_create(target)
            previous = origin.set_target(target, weight)
            self._debug("Set edge %r -> %r to %d (was %d)", source, target, weight, previous)

        self._check_rep()
        return previous

    def remove(self, vertex: VertexLabel) -> bool:
        validate_vertex(vertex)
        removed = self._vertices.pop(vertex, None)
        if removed is None:
            return False

        edge_count = removed.out_degree()
        for other in self._vertices.values():
            if other.remove_target(vertex):
                edge_count += 1
        self._debug("Removed vertex %r and %d incident edge(s)", vertex, edge_count)

        self._check_rep()
        return True

    def vertices(self) -> Set[VertexLabel]:
        return set(self._vertices)

    def sources(self, target: VertexLabel) -> Dict[VertexLabel, int]:
        validate_vertex(target, "target")
        return {
            label: vertex.get_weight(target)
            for label, vertex in self._vertices.items()
            if vertex.has_target(target)
        }

    def targets(self, source: VertexLabel) -> Dict[VertexLabel, int]:
        validate_vertex(source, "source")
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.targets

    def has_vertex(self, vertex: VertexLabel) -> bool:
        validate_vertex(vertex)
        return vertex in self._vertices

    def get_weight(self, source: VertexLabel, target: VertexLabel) -> int:
        validate_vertex(source, "source")
        validate_vertex(target, "target")
        vertex = self._vertices.get(source)
        return vertex.get_weight(target) if vertex is not None else 0

    def get_edge_count(self) -> int:
        return sum(vertex.out_degree() for vertex in self._vertices.values())

    def invariant_errors(self) -> List[str]:
        errors = []
        for label, vertex in self._vertices.items():
            if vertex.label != label:
                errors.append(f"vertex {vertex.label!r} is stored under label {label!r}")
            errors.extend(vertex.invariant_errors())
            for target in vertex.targets:
                if target not in self._vertices:
                    errors.append(f"edge {label!r} -> {target!r} has target outside the graph")
        return errors

    def __str__(self) -> str:
        if not self._vertices:
            return "<empty graph>"
        return "\n".join(str(self._vertices[label]) for label in self._ordered(self._vertices))

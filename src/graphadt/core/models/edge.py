"""
Edge models for the graph ADT.

This module defines the immutable record representing a single directed,
weighted connection between two vertices.
"""

from dataclasses import dataclass
from typing import Generic, Tuple

from ..types import VertexLabel
from .base import validate_vertex, validate_weight


@dataclass(frozen=True)
class Edge(Generic[VertexLabel]):
    """
    Immutable directed edge.

    An Edge is a value object: two edges are equal when their source, target
    and weight are equal, and edges can be stored in sets. A weight of zero
    means "no edge", so an Edge always carries a weight of at least one.

    Attributes:
        source (VertexLabel): Label of the vertex the edge leaves
        target (VertexLabel): Label of the vertex the edge enters
        weight (int): Edge weight, at least 1
    """

    source: VertexLabel
    target: VertexLabel
    weight: int

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_vertex(self.source, "source")
        validate_vertex(self.target, "target")
        validate_weight(self.weight, minimum=1)

    @property
    def key(self) -> Tuple[VertexLabel, VertexLabel]:
        """The ordered (source, target) pair identifying this edge in a graph."""
        return (self.source, self.target)

    def connects(self, source: VertexLabel, target: VertexLabel) -> bool:
        """Check whether this edge goes from source to target."""
        return self.source == source and self.target == target

    def touches(self, vertex: VertexLabel) -> bool:
        """Check whether vertex is either endpoint of this edge."""
        return self.source == vertex or self.target == vertex

    def with_weight(self, weight: int) -> "Edge[VertexLabel]":
        """Return a copy of this edge carrying a different weight."""
        return Edge(self.source, self.target, weight)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"

"""
Graph contract for the mutable, weighted, directed graph ADT.

This module provides the abstract Graph class every representation implements.
The six abstract operations (add, set, remove, vertices, sources, targets) are
the whole contract; the remaining methods are derived from them once here and
may be overridden by an implementation that can answer more cheaply.

Contract invariants, holding before and after every public operation:
- every edge's source and target are members of the vertex set
- every stored edge weight is a positive int; weight 0 means "no edge"
- vertex labels are unique

Every accessor returns a fresh collection. Mutating it never reaches the graph.
"""

import logging
from abc import ABC, abstractmethod
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from ..config import GraphConfig
from ..exceptions import RepInvariantError
from ..models.base import validate_vertex, validate_weight
from ..models.edge import Edge
from ..types import VertexLabel

logger = logging.getLogger(__name__)

G = TypeVar("G", bound="Graph")


class Graph(ABC, Generic[VertexLabel]):
    """
    Mutable weighted directed graph over hashable vertex labels.

    Implementations differ only in how they store vertices and edges; callers
    must not be able to tell them apart through this interface.

    Attributes:
        config (GraphConfig): Debug and logging switches for this instance
    """

    _logger = logger

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Instance configuration. A default
                GraphConfig is created when omitted.
        """
        self.config = config if config is not None else GraphConfig()

    # --- Contract ------------------------------------------------------------

    @abstractmethod
    def add(self, vertex: VertexLabel) -> bool:
        """
        Add a vertex to the graph.

        Args:
            vertex: Label of the vertex to add

        Returns:
            bool: True if the vertex was added, False if it was already present

        Raises:
            InvalidVertexError: If vertex is None or unhashable
        """

    @abstractmethod
    def set(self, source: VertexLabel, target: VertexLabel, weight: int) -> int:
        """
        Add, change or remove the edge from source to target.

        With a positive weight, missing endpoints are added as vertices and the
        edge is created or overwritten. With weight 0 the edge is removed if it
        exists; no vertices are created.

        Args:
            source: Label of the source vertex
            target: Label of the target vertex
            weight: New edge weight, 0 to remove the edge

        Returns:
            int: The previous weight of the edge, 0 if it did not exist

        Raises:
            InvalidVertexError: If source or target is None or unhashable
            InvalidWeightError: If weight is negative or not an int
        """

    @abstractmethod
    def remove(self, vertex: VertexLabel) -> bool:
        """
        Remove a vertex and every edge it is an endpoint of.

        Args:
            vertex: Label of the vertex to remove

        Returns:
            bool: True if the vertex was removed, False if it was not present

        Raises:
            InvalidVertexError: If vertex is None or unhashable
        """

    @abstractmethod
    def vertices(self) -> Set[VertexLabel]:
        """Get a snapshot of the vertex labels."""

    @abstractmethod
    def sources(self, target: VertexLabel) -> Dict[VertexLabel, int]:
        """
        Get the vertices with an edge into target.

        Args:
            target: Label of the target vertex

        Returns:
            Dict[VertexLabel, int]: Source label -> edge weight, empty if none

        Raises:
            InvalidVertexError: If target is None or unhashable
        """

    @abstractmethod
    def targets(self, source: VertexLabel) -> Dict[VertexLabel, int]:
        """
        Get the vertices with an edge out of source.

        Args:
            source: Label of the source vertex

        Returns:
            Dict[VertexLabel, int]: Target label -> edge weight, empty if none

        Raises:
            InvalidVertexError: If source is None or unhashable
        """

    @abstractmethod
    def invariant_errors(self) -> List[str]:
        """Describe every violation of the representation invariant."""

    # --- Derived operations --------------------------------------------------

    def has_vertex(self, vertex: VertexLabel) -> bool:
        """Check if a vertex exists in the graph."""
        validate_vertex(vertex)
        return vertex in self.vertices()

    def has_edge(self, source: VertexLabel, target: VertexLabel) -> bool:
        """Check if an edge exists from source to target."""
        return self.get_weight(source, target) > 0

    def get_weight(self, source: VertexLabel, target: VertexLabel) -> int:
        """Get the weight of the edge from source to target, 0 if there is none."""
        validate_vertex(target, "target")
        return self.targets(source).get(target, 0)

    def get_edges(self) -> Iterator[Edge[VertexLabel]]:
        """Get an iterator over a snapshot of all edges."""
        edges = [
            Edge(source, target, weight)
            for source in self.vertices()
            for target, weight in self.targets(source).items()
        ]
        return iter(edges)

    def get_edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        return sum(len(self.targets(vertex)) for vertex in self.vertices())

    def get_degree(self, vertex: VertexLabel, reverse: bool = False) -> int:
        """Get the out-degree of a vertex, or its in-degree if reverse is True."""
        if reverse:
            return len(self.sources(vertex))
        return len(self.targets(vertex))

    @classmethod
    def from_edges(
        cls: Type[G],
        edges: Iterable[Union[Edge, Tuple[Any, Any, int]]],
        config: Optional[GraphConfig] = None,
    ) -> G:
        """
        Create a graph holding the given edges.

        Args:
            edges: Edge records or (source, target, weight) tuples, applied in
                order with ``set``; later duplicates overwrite earlier ones
            config: Configuration for the new graph

        Returns:
            A new graph of the calling class
        """
        graph = cls(config=config)
        for edge in edges:
            if not isinstance(edge, Edge):
                edge = Edge(*edge)
            graph.set(edge.source, edge.target, edge.weight)
        return graph

    # --- Internal helpers ----------------------------------------------------

    def _validate_set_arguments(self, source: Any, target: Any, weight: Any) -> None:
        validate_vertex(source, "source")
        validate_vertex(target, "target")
        validate_weight(weight)

    def _debug(self, message: str, *args: Any) -> None:
        if self.config.log_mutations:
            self._logger.debug(message, *args)

    def _check_rep(self) -> None:
        """Raise RepInvariantError if debug checking is on and the rep is broken."""
        if not self.config.check_rep:
            return
        errors = self.invariant_errors()
        if errors:
            self._logger.error(
                f"{type(self).__name__} invariant violated with {len(errors)} error(s)"
            )
            raise RepInvariantError(f"{type(self).__name__} is inconsistent", errors)

    @staticmethod
    def _ordered(labels: Iterable[VertexLabel]) -> List[VertexLabel]:
        """Labels in a stable order for rendering."""
        return sorted(labels, key=str)

    # --- Python protocols ----------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)

    def __len__(self) -> int:
        return len(self.vertices())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.vertices() == other.vertices() and set(self.get_edges()) == set(
            other.get_edges()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={self.get_edge_count()})"

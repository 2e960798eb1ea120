"""
Core type definitions and protocols.

This module provides the type variables, aliases and protocols shared by the
graph contract, its implementations and the validation utilities.
"""

from typing import Dict, Hashable, Protocol, Set, TypeVar

VertexLabel = TypeVar("VertexLabel", bound=Hashable)
"""Type of the opaque, hashable labels identifying vertices."""

Weight = int
"""Edge weight. Stored edges always carry a weight of at least one."""


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations."""

    def vertices(self) -> Set[Hashable]:
        """Get a snapshot of all vertex labels."""
        ...

    def sources(self, target: Hashable) -> Dict[Hashable, Weight]:
        """Get vertices with an edge into target, mapped to edge weights."""
        ...

    def targets(self, source: Hashable) -> Dict[Hashable, Weight]:
        """Get vertices with an edge out of source, mapped to edge weights."""
        ...

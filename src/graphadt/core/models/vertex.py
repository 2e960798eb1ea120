"""
Vertex models for the graph ADT.

This module defines the mutable vertex object used by the adjacency-map graph.
Each vertex owns the mapping from its outgoing neighbors to edge weights and
keeps that mapping consistent on its own, independently of the graph holding
it.
"""

import logging
from typing import Dict, Generic, List

from ..exceptions import RepInvariantError
from ..types import VertexLabel
from .base import validate_vertex, validate_weight

logger = logging.getLogger(__name__)


class Vertex(Generic[VertexLabel]):
    """
    A labelled vertex with its outgoing edges.

    The outgoing mapping is private; ``targets`` hands out a copy. Setting a
    target to weight zero removes the entry, so every stored weight is at
    least one.

    Attributes:
        label (VertexLabel): The vertex label (read-only)
        check_rep (bool): Whether the local invariant is checked after mutation
    """

    __slots__ = ("_label", "_targets", "check_rep")

    def __init__(self, label: VertexLabel, check_rep: bool = __debug__):
        validate_vertex(label, "label")
        self._label = label
        self._targets: Dict[VertexLabel, int] = {}
        self.check_rep = check_rep
        self._check_rep()

    @property
    def label(self) -> VertexLabel:
        return self._label

    @property
    def targets(self) -> Dict[VertexLabel, int]:
        """Copy of the outgoing neighbor -> weight mapping."""
        return dict(self._targets)

    def has_target(self, target: VertexLabel) -> bool:
        return target in self._targets

    def get_weight(self, target: VertexLabel) -> int:
        """Weight of the edge to target, 0 if there is none."""
        return self._targets.get(target, 0)

    def out_degree(self) -> int:
        return len(self._targets)

    def set_target(self, target: VertexLabel, weight: int) -> int:
        """
        Create, update or delete the outgoing edge to target.

        Args:
            target: Label of the neighbor
            weight: New weight; 0 deletes the edge

        Returns:
            int: The previous weight, 0 if there was no edge

        Raises:
            InvalidVertexError: If target is None or unhashable
            InvalidWeightError: If weight is negative or not an int
        """
        validate_vertex(target, "target")
        validate_weight(weight)
        if weight == 0:
            return self.remove_target(target)
        previous = self._targets.get(target, 0)
        self._targets[target] = weight
        self._check_rep()
        return previous

    def remove_target(self, target: VertexLabel) -> int:
        """Delete the outgoing edge to target, returning its weight (0 if absent)."""
        previous = self._targets.pop(target, 0)
        self._check_rep()
        return previous

    def invariant_errors(self) -> List[str]:
        """Describe every violation of this vertex's local invariant."""
        errors = []
        if self._label is None:
            errors.append("vertex label is None")
        for target, weight in self._targets.items():
            if target is None:
                errors.append(f"vertex {self._label!r} has a None target")
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
                errors.append(f"vertex {self._label!r} -> {target!r} has weight {weight!r}")
        return errors

    def _check_rep(self) -> None:
        if not self.check_rep:
            return
        errors = self.invariant_errors()
        if errors:
            logger.error("Vertex invariant violated for %r: %s", self._label, errors)
            raise RepInvariantError(f"vertex {self._label!r} is inconsistent", errors)

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, targets={self._targets!r})"

    def __str__(self) -> str:
        return f"{self._label} -> {self._targets}"

"""
Data Integrity Validation Components for graphadt

This module audits graphs and edges from the outside. It relies only on the
public Graph contract, so the same checks apply to every representation and
can be run after an arbitrary sequence of operations.

The module implements validation for:
- Edge endpoints being members of the vertex set
- Edge weights being positive integers
- Agreement between ``sources`` and ``targets`` for every vertex pair
- Edge count consistency
"""

from typing import Any, Dict, List, Tuple

from ...core.models.edge import Edge
from ...core.types import GraphProtocol
from .base import ValidationResult


class GraphIntegrityValidator:
    """
    Validator for ensuring data integrity of graphs and edges.

    This class provides static methods for validating graphs through their
    public contract. It never inspects internal storage, so a passing result
    means the graph looks consistent to any caller.
    """

    @staticmethod
    def _validate_weight(pair: Tuple[Any, Any], weight: Any) -> List[str]:
        """
        Validate a single edge weight.

        Args:
            pair: The (source, target) pair the weight belongs to
            weight: Value reported for the pair

        Returns:
            List[str]: List of validation error messages
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            return [f"Weight for {pair!r} must be an int, got {type(weight).__name__}"]
        if weight < 1:
            return [f"Weight for {pair!r} must be positive, got {weight}"]
        return []

    @staticmethod
    def _collect_adjacency(
        graph: GraphProtocol,
    ) -> Tuple[Dict[Tuple[Any, Any], Any], Dict[Tuple[Any, Any], Any]]:
        """Gather every pair reported by ``targets`` and by ``sources``."""
        outgoing: Dict[Tuple[Any, Any], Any] = {}
        incoming: Dict[Tuple[Any, Any], Any] = {}
        for vertex in graph.vertices():
            for target, weight in graph.targets(vertex).items():
                outgoing[(vertex, target)] = weight
            for source, weight in graph.sources(vertex).items():
                incoming[(source, vertex)] = weight
        return outgoing, incoming

    @staticmethod
    def validate_graph(graph: GraphProtocol) -> ValidationResult:
        """
        Validate graph integrity.

        Performs validation of the graph including:
        - Endpoint membership of every edge
        - Edge weight domain
        - Consistency between outgoing and incoming views
        - Edge count, when the graph reports one

        Args:
            graph: Graph to validate

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        errors: List[str] = []
        warnings: List[str] = []

        vertices = graph.vertices()
        outgoing, incoming = GraphIntegrityValidator._collect_adjacency(graph)

        for pair, weight in outgoing.items():
            source, target = pair
            if target not in vertices:
                errors.append(f"Edge {source!r} -> {target!r} targets a missing vertex")
            errors.extend(GraphIntegrityValidator._validate_weight(pair, weight))
            if source == target:
                warnings.append(f"Self-loop on {source!r}")

        for pair, weight in incoming.items():
            source, target = pair
            if source not in vertices:
                errors.append(f"Edge {source!r} -> {target!r} comes from a missing vertex")
            if pair not in outgoing:
                errors.append(f"Edge {source!r} -> {target!r} is reported only by sources()")
            elif outgoing[pair] != weight:
                errors.append(
                    f"Edge {source!r} -> {target!r} has weight {outgoing[pair]} in targets() "
                    f"but {weight} in sources()"
                )

        for pair in outgoing.keys() - incoming.keys():
            errors.append(f"Edge {pair[0]!r} -> {pair[1]!r} is reported only by targets()")

        get_edge_count = getattr(graph, "get_edge_count", None)
        if get_edge_count is not None and get_edge_count() != len(outgoing):
            errors.append(
                f"Edge count {get_edge_count()} does not match the {len(outgoing)} "
                "edges reported by targets()"
            )

        return ValidationResult.from_messages(
            errors,
            warnings,
            context={"vertex_count": len(vertices), "edge_count": len(outgoing)},
        )

    @staticmethod
    def validate_edge(edge: Edge) -> ValidationResult:
        """
        Validate an edge record.

        Edge records validate themselves on construction; this catches records
        altered afterwards, for example through ``object.__setattr__``.

        Args:
            edge: Edge instance to validate

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        errors = []
        if edge.source is None:
            errors.append("Source vertex is required")
        if edge.target is None:
            errors.append("Target vertex is required")
        errors.extend(GraphIntegrityValidator._validate_weight(edge.key, edge.weight))

        return ValidationResult.from_messages(
            errors,
            context={"source": edge.source, "target": edge.target},
        )

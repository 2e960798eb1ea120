"""
Tests for the graph integrity validator.
"""

from typing import Dict, Set

import pytest

from graphadt.core.graph import AdjacencyMapGraph, EdgeListGraph
from graphadt.core.models import Edge
from graphadt.utils.validation import GraphIntegrityValidator, ValidationResult


class FakeGraph:
    """Minimal read-only graph whose answers can be made inconsistent."""

    def __init__(self, vertices: Set[str], out: Dict[str, Dict[str, int]], into: Dict[str, Dict[str, int]]):
        self._vertices = vertices
        self._out = out
        self._into = into

    def vertices(self) -> Set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> Dict[str, int]:
        return dict(self._into.get(target, {}))

    def targets(self, source: str) -> Dict[str, int]:
        return dict(self._out.get(source, {}))


@pytest.mark.parametrize("graph_class", [EdgeListGraph, AdjacencyMapGraph])
def test_valid_graph(graph_class):
    """Test validation of a consistent graph."""
    graph = graph_class.from_edges([("A", "B", 1), ("B", "C", 2), ("C", "C", 3)])
    result = GraphIntegrityValidator.validate_graph(graph)

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == ["Self-loop on 'C'"]
    assert result.context == {"vertex_count": 3, "edge_count": 3}


def test_empty_graph_is_valid():
    """Test validation of an empty graph."""
    result = GraphIntegrityValidator.validate_graph(EdgeListGraph())
    assert result == ValidationResult(
        is_valid=True, errors=[], warnings=[], context={"vertex_count": 0, "edge_count": 0}
    )


def test_missing_endpoint_detected():
    """Test that an edge to a vertex outside the vertex set is reported."""
    graph = FakeGraph({"A"}, out={"A": {"B": 1}}, into={"B": {"A": 1}})
    result = GraphIntegrityValidator.validate_graph(graph)

    assert not result.is_valid
    assert "Edge 'A' -> 'B' targets a missing vertex" in result.errors


def test_non_positive_weight_detected():
    """Test that zero and non-integer weights are reported."""
    graph = FakeGraph(
        {"A", "B"},
        out={"A": {"B": 0}, "B": {"A": 1.5}},
        into={"B": {"A": 0}, "A": {"B": 1.5}},
    )
    result = GraphIntegrityValidator.validate_graph(graph)

    assert not result.is_valid
    assert "Weight for ('A', 'B') must be positive, got 0" in result.errors
    assert "Weight for ('B', 'A') must be an int, got float" in result.errors


def test_sources_targets_disagreement_detected():
    """Test that the outgoing and incoming views must agree."""
    graph = FakeGraph(
        {"A", "B", "C"},
        out={"A": {"B": 1}, "B": {"C": 2}},
        into={"B": {"A": 5}, "A": {"C": 1}},
    )
    result = GraphIntegrityValidator.validate_graph(graph)

    assert not result.is_valid
    assert "Edge 'A' -> 'B' has weight 1 in targets() but 5 in sources()" in result.errors
    assert "Edge 'C' -> 'A' is reported only by sources()" in result.errors
    assert "Edge 'B' -> 'C' is reported only by targets()" in result.errors


def test_edge_count_mismatch_detected():
    """Test that a wrong edge count is reported."""
    graph = EdgeListGraph.from_edges([("A", "B", 1)])
    graph.get_edge_count = lambda: 2  # type: ignore[method-assign]
    result = GraphIntegrityValidator.validate_graph(graph)

    assert not result.is_valid
    assert any("Edge count 2" in error for error in result.errors)


def test_validate_edge():
    """Test edge record validation."""
    assert GraphIntegrityValidator.validate_edge(Edge("A", "B", 1)).is_valid

    tampered = Edge("A", "B", 1)
    object.__setattr__(tampered, "weight", -4)
    result = GraphIntegrityValidator.validate_edge(tampered)
    assert not result.is_valid
    assert result.errors == ["Weight for ('A', 'B') must be positive, got -4"]
    assert result.context == {"source": "A", "target": "B"}

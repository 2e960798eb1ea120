"""Shared test fixtures."""

from typing import Callable, Type

import pytest

from graphadt.core.config import GraphConfig
from graphadt.core.graph import AdjacencyMapGraph, EdgeListGraph, Graph

GRAPH_CLASSES = [EdgeListGraph, AdjacencyMapGraph]


@pytest.fixture(params=GRAPH_CLASSES, ids=["edge_list", "adjacency_map"])
def graph_class(request) -> Type[Graph]:
    """Fixture providing each graph implementation in turn."""
    return request.param


@pytest.fixture
def empty_instance(graph_class) -> Callable[[], Graph]:
    """Fixture providing a factory for new empty graphs of the implementation under test."""
    return lambda: graph_class(config=GraphConfig(check_rep=True))


@pytest.fixture
def graph(empty_instance) -> Graph:
    """Fixture providing an empty graph with invariant checking enabled."""
    return empty_instance()

"""
Tests for graph configuration.
"""

from graphadt.core.config import GraphConfig
from graphadt.core.graph import AdjacencyMapGraph, EdgeListGraph


def test_default_config():
    """Test configuration defaults."""
    config = GraphConfig()
    assert config.check_rep is __debug__
    assert config.log_mutations is True


def test_config_repr():
    """Test configuration representation."""
    config = GraphConfig(check_rep=False, log_mutations=False)
    assert repr(config) == "GraphConfig(check_rep=False, log_mutations=False)"


def test_graphs_get_independent_default_configs():
    """Test that graphs without an explicit config do not share one."""
    first = EdgeListGraph()
    second = AdjacencyMapGraph()
    first.config.log_mutations = False
    assert second.config.log_mutations is True


def test_graph_keeps_given_config():
    """Test that an explicit config is used as given."""
    config = GraphConfig(check_rep=False)
    graph = EdgeListGraph(config=config)
    assert graph.config is config

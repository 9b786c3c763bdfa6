import pytest

from socnet.graph.stats import graph_stats
from socnet.graph.store import Graph, GraphError


def test_add_edge_is_symmetric():
    graph = Graph()
    graph.add_edge(1, 2, 0.5)
    graph.add_edge(2, 3, 0.3)

    n1 = graph.neighbors(1)
    assert len(n1) == 1
    assert n1[0].target == 2 and n1[0].probability == 0.5
    assert [(e.target, e.probability) for e in graph.neighbors(2)] == [(1, 0.5), (3, 0.3)]
    assert [(e.target, e.probability) for e in graph.neighbors(3)] == [(2, 0.3)]


def test_every_edge_has_mirror():
    graph = Graph.from_edges([(1, 2, 0.1), (2, 3, 0.2), (3, 1, 0.9), (4, 1, 0.0)])
    for u in graph.nodes():
        for edge in graph.neighbors(u):
            mirrored = [(e.target, e.probability) for e in graph.neighbors(edge.target)]
            assert (u, edge.probability) in mirrored


def test_unknown_node_is_empty():
    graph = Graph.from_edges([(1, 2, 0.5)])
    assert len(graph.neighbors(999)) == 0
    assert graph.neighbor_ids(999) == set()
    assert graph.degree(999) == 0
    assert 999 not in graph


def test_parallel_edges_are_kept():
    graph = Graph.from_edges([(1, 2, 0.5), (1, 2, 0.5)])
    assert graph.degree(1) == 2
    assert graph.neighbor_ids(1) == {2}
    assert graph.num_edges() == 2


def test_invalid_probability_rejected():
    graph = Graph()
    with pytest.raises(GraphError):
        graph.add_edge(1, 2, 1.5)
    assert len(graph) == 0


def test_nodes_sorted_and_index():
    graph = Graph.from_edges([(5, 3, 0.1), (1, 5, 0.1)])
    assert graph.nodes() == [1, 3, 5]
    index = graph.index()
    assert index.nodes == [1, 3, 5]
    assert index.adjacency[2] == [1, 0]

    graph.add_edge(3, 7, 0.1)
    assert graph.index().nodes == [1, 3, 5, 7]


def test_graph_stats():
    stats = graph_stats(Graph.from_edges([(1, 2, 0.5), (2, 3, 0.5), (2, 4, 0.5)]))
    assert stats.nodes == 4
    assert stats.edges == 3
    assert stats.max_degree == 3
    assert stats.avg_degree == pytest.approx(1.5)
    assert graph_stats(Graph()).nodes == 0

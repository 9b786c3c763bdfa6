import math

import pytest

from socnet.config import RecommendConfig
from socnet.graph.store import Graph
from socnet.similarity.scorer import (
    adamic_adar,
    candidate_pool,
    common_neighbors,
    influence_potential,
    jaccard,
    recommend,
    recommend_ids,
)


def _square() -> Graph:
    return Graph.from_edges([(1, 2, 0.5), (1, 3, 0.5), (4, 2, 0.5), (4, 3, 0.5)])


def test_jaccard_identity():
    assert jaccard(_square(), 1, 4) == 1.0


def test_jaccard_empty_union():
    graph = _square()
    assert jaccard(graph, 100, 200) == 0.0


def test_common_neighbors_excludes_endpoints():
    graph = Graph.from_edges([(1, 2, 0.5), (1, 3, 0.5), (2, 3, 0.5)])
    assert common_neighbors(graph, 1, 2) == 1
    assert common_neighbors(_square(), 1, 4) == 2
    assert common_neighbors(graph, 1, 99) == 0


def test_adamic_adar_skips_degree_one():
    assert adamic_adar(_square(), 1, 4) == pytest.approx(2.0 / math.log(2))
    leaf = Graph.from_edges([(1, 2, 0.5)])
    assert adamic_adar(leaf, 1, 1) == 0.0


def test_influence_potential_capped():
    assert influence_potential(0) == 0.0
    assert influence_potential(3) == pytest.approx(0.3)
    assert influence_potential(25) == 1.0


def test_candidate_pool_is_friends_of_friends():
    graph = Graph.from_edges([(1, 2, 0.5), (2, 3, 0.5), (2, 4, 0.5), (1, 4, 0.5), (3, 5, 0.5)])
    assert candidate_pool(graph, 1) == {3}


def test_recommend_scores():
    recs = recommend(_square(), 1, 5)
    assert len(recs) == 1
    rec = recs[0]
    assert rec.candidate_id == 4
    assert rec.common_neighbors == 2
    assert rec.jaccard == 1.0
    assert rec.influence_potential == pytest.approx(0.2)
    expected = 0.5 * (2.0 / math.log(2)) + 0.3 * 1.0 + 0.2 * 0.2
    assert rec.combined_score == pytest.approx(expected)


def test_recommend_orders_and_truncates():
    # 1 shares two friends with 4 and one with 5
    graph = Graph.from_edges(
        [(1, 2, 0.5), (1, 3, 0.5), (4, 2, 0.5), (4, 3, 0.5), (5, 2, 0.5), (6, 3, 0.5)]
    )
    ids = recommend_ids(graph, 1, 10)
    assert ids[0] == 4
    assert set(ids) == {4, 5, 6}
    assert recommend_ids(graph, 1, 1) == [4]
    assert recommend(graph, 1, 0) == []


def test_recommend_ties_by_candidate_id():
    graph = Graph.from_edges([(1, 2, 0.5), (2, 9, 0.5), (2, 7, 0.5), (2, 8, 0.5)])
    assert recommend_ids(graph, 1, 3) == [7, 8, 9]


def test_recommend_custom_weights():
    cfg = RecommendConfig(adamic_adar_weight=0.0, jaccard_weight=1.0, influence_weight=0.0)
    recs = recommend(_square(), 1, 5, cfg)
    assert recs[0].combined_score == pytest.approx(1.0)


def test_recommend_unknown_user():
    assert recommend(_square(), 42, 5) == []


def test_recommend_scaling_factor():
    rec = recommend(_square(), 1, 5, scaling_factor=0.5)[0]
    assert rec.influence_potential == pytest.approx(1.0)
    expected = 0.5 * (2.0 / math.log(2)) + 0.3 * 1.0 + 0.2 * 1.0
    assert rec.combined_score == pytest.approx(expected)

"""
Neighbourhood similarity and friend recommendation.

Scores for a pair (u, v) are built from their distinct neighbour sets:

- common neighbours: |N(u) ∩ N(v)| without u and v themselves
- Jaccard: |N(u) ∩ N(v)| / |N(u) ∪ N(v)|
- Adamic-Adar: sum of 1 / ln(deg(w)) over shared neighbours w with deg(w) > 1
- influence potential: min(1, 0.1 * common neighbours)

References:
- Liben-Nowell, D., & Kleinberg, J. (2007). The link-prediction problem for social networks
- Adamic, L. A., & Adar, E. (2003). Friends and neighbors on the Web
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Set

from socnet.config import RecommendConfig
from socnet.graph.store import Graph, NodeID


@dataclass(frozen=True)
class RecommendationScore:
    candidate_id: NodeID
    common_neighbors: int
    jaccard: float
    adamic_adar: float
    influence_potential: float
    combined_score: float


def common_neighbors(graph: Graph, u: NodeID, v: NodeID) -> int:
    shared = graph.neighbor_ids(u) & graph.neighbor_ids(v)
    shared.discard(u)
    shared.discard(v)
    return len(shared)


def jaccard(graph: Graph, u: NodeID, v: NodeID) -> float:
    n_u = graph.neighbor_ids(u)
    n_v = graph.neighbor_ids(v)
    union = n_u | n_v
    if not union:
        return 0.0
    return len(n_u & n_v) / len(union)


def adamic_adar(graph: Graph, u: NodeID, v: NodeID) -> float:
    score = 0.0
    for w in sorted(graph.neighbor_ids(u) & graph.neighbor_ids(v)):
        degree = graph.degree(w)
        if degree > 1:
            score += 1.0 / math.log(degree)
    return score


def influence_potential(count: int, scaling_factor: float = 0.1) -> float:
    return min(1.0, scaling_factor * count)


def candidate_pool(graph: Graph, user: NodeID) -> Set[NodeID]:
    """Friends of friends of ``user`` that are neither ``user`` nor its friends."""
    direct = graph.neighbor_ids(user)
    excluded = direct | {user}
    pool: Set[NodeID] = set()
    for friend in direct:
        pool.update(graph.neighbor_ids(friend) - excluded)
    return pool


def score_candidate(
    graph: Graph,
    user: NodeID,
    candidate: NodeID,
    cfg: RecommendConfig | None = None,
    scaling_factor: float = 0.1,
) -> RecommendationScore:
    cfg = cfg or RecommendConfig()
    count = common_neighbors(graph, user, candidate)
    jac = jaccard(graph, user, candidate)
    aa = adamic_adar(graph, user, candidate)
    potential = influence_potential(count, scaling_factor)
    combined = (
        cfg.adamic_adar_weight * aa
        + cfg.jaccard_weight * jac
        + cfg.influence_weight * potential
    )
    return RecommendationScore(
        candidate_id=candidate,
        common_neighbors=count,
        jaccard=jac,
        adamic_adar=aa,
        influence_potential=potential,
        combined_score=combined,
    )


def recommend(
    graph: Graph,
    user: NodeID,
    k: int = 10,
    cfg: RecommendConfig | None = None,
    scaling_factor: float = 0.1,
) -> List[RecommendationScore]:
    """Top ``k`` candidates by combined score, ties broken by ascending id.

    ``scaling_factor`` should match the cascade config so influence potential
    agrees with the activation probability used in simulation.
    """
    if k <= 0:
        return []
    scores = [score_candidate(graph, user, c, cfg, scaling_factor) for c in candidate_pool(graph, user)]
    scores.sort(key=lambda s: (-s.combined_score, s.candidate_id))
    return scores[:k]


def recommend_ids(graph: Graph, user: NodeID, k: int = 10) -> List[NodeID]:
    return [score.candidate_id for score in recommend(graph, user, k)]

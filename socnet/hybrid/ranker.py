from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping

import numpy as np

from socnet.centrality.betweenness import compute_betweenness
from socnet.config import CascadeConfig, HybridConfig, RecommendConfig
from socnet.graph.store import Graph, NodeID
from socnet.cascades.simulator import estimate_spread
from socnet.similarity.scorer import recommend


@dataclass(frozen=True)
class HybridCandidate:
    candidate_id: NodeID
    hybrid_score: float
    combined_score: float
    centrality: float


@dataclass
class ImpactEntry:
    candidate_id: NodeID
    common_neighbors: int
    influence_probability: float


@dataclass
class ImpactReport:
    user: NodeID
    seeds: List[NodeID]
    baseline_spread: int
    recommendations: List[ImpactEntry] = field(default_factory=list)


def rank_hybrid(
    graph: Graph,
    user: NodeID,
    k: int = 10,
    centrality: Mapping[NodeID, float] | None = None,
    cfg: HybridConfig | None = None,
    rec_cfg: RecommendConfig | None = None,
    scaling_factor: float = 0.1,
) -> List[HybridCandidate]:
    """
    Blend similarity with betweenness for friend suggestions.

    hybrid = 0.7 * combined_score + 0.3 * (centrality / 100)

    The divisor only brings raw betweenness near the similarity range; it is
    not a normalization.
    """
    cfg = cfg or HybridConfig()
    if k <= 0:
        return []
    pool = recommend(graph, user, cfg.pool_size, rec_cfg, scaling_factor)
    if not pool:
        return []
    if centrality is None:
        centrality = compute_betweenness(graph)

    ranked = []
    for rec in pool:
        bc = float(centrality.get(rec.candidate_id, 0.0))
        score = cfg.similarity_weight * rec.combined_score + cfg.centrality_weight * (bc / cfg.centrality_scale)
        ranked.append(
            HybridCandidate(
                candidate_id=rec.candidate_id,
                hybrid_score=score,
                combined_score=rec.combined_score,
                centrality=bc,
            )
        )
    ranked.sort(key=lambda c: (-c.hybrid_score, c.candidate_id))
    return ranked[:k]


def recommendation_impact(
    graph: Graph,
    user: NodeID,
    seeds: Iterable[NodeID],
    num_trials: int,
    rng: np.random.Generator,
    k: int = 5,
    cfg: CascadeConfig | None = None,
    rec_cfg: RecommendConfig | None = None,
) -> ImpactReport:
    """Baseline spread of ``seeds`` plus the influence potential of each top recommendation."""
    cfg = cfg or CascadeConfig()
    seeds = sorted(set(seeds))
    baseline = estimate_spread(graph, seeds, num_trials, rng, cfg)
    report = ImpactReport(user=user, seeds=seeds, baseline_spread=baseline)
    for rec in recommend(graph, user, k, rec_cfg, cfg.scaling_factor):
        report.recommendations.append(
            ImpactEntry(
                candidate_id=rec.candidate_id,
                common_neighbors=rec.common_neighbors,
                influence_probability=rec.influence_potential,
            )
        )
    return report

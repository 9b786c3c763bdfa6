from __future__ import annotations

import logging
from dataclasses import asdict
from typing import List, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

from socnet.cascades.selector import select_seeds
from socnet.cascades.simulator import estimate_spread
from socnet.centrality.betweenness import compute_betweenness, ranked_centrality, top_k_central
from socnet.config import CascadeConfig
from socnet.deadline import Deadline
from socnet.graph.stats import GraphStats
from socnet.graph.store import Graph, NodeID
from socnet.hybrid.ranker import HybridCandidate, ImpactReport
from socnet.rng import RNGManager
from socnet.similarity.scorer import RecommendationScore


def stats_frame(stats: GraphStats) -> pd.DataFrame:
    return pd.DataFrame([asdict(stats)])


def centrality_frame(scores: Mapping[NodeID, float], k: int | None = None) -> pd.DataFrame:
    ranked = ranked_centrality(scores)
    if k is not None:
        ranked = ranked[:k]
    frame = pd.DataFrame(ranked, columns=["node", "betweenness"])
    frame.insert(0, "rank", np.arange(1, len(frame) + 1))
    return frame


def recommendation_frame(recs: Sequence[RecommendationScore]) -> pd.DataFrame:
    columns = [
        "candidate_id",
        "common_neighbors",
        "jaccard",
        "adamic_adar",
        "influence_potential",
        "combined_score",
    ]
    return pd.DataFrame([asdict(r) for r in recs], columns=columns)


def hybrid_frame(candidates: Sequence[HybridCandidate]) -> pd.DataFrame:
    columns = ["candidate_id", "hybrid_score", "combined_score", "centrality"]
    return pd.DataFrame([asdict(c) for c in candidates], columns=columns)


def impact_frame(report: ImpactReport) -> pd.DataFrame:
    frame = pd.DataFrame(
        [asdict(entry) for entry in report.recommendations],
        columns=["candidate_id", "common_neighbors", "influence_probability"],
    )
    frame["baseline_spread"] = report.baseline_spread
    return frame


def compare_strategies(
    graph: Graph,
    k: int,
    rngs: RNGManager,
    eval_trials: int = 500,
    trials_per_eval: int = 50,
    cfg: CascadeConfig | None = None,
    scores: Mapping[NodeID, float] | None = None,
    deadline: Deadline | None = None,
) -> pd.DataFrame:
    """
    Spread of the top-k betweenness nodes against greedy seeds.

    Greedy search draws from ``rngs.numpy`` and is the only step bounded by
    ``deadline``. Each seed set is then scored over the full ``eval_trials``
    with its own spawned generator.
    """
    cfg = cfg or CascadeConfig()
    if scores is None:
        scores = compute_betweenness(graph)
    strategies: List[Tuple[str, List[NodeID]]] = [
        ("betweenness", top_k_central(graph, k, scores)),
        ("greedy", select_seeds(graph, k, trials_per_eval, rngs.numpy, cfg, deadline)),
    ]

    rows = []
    n_nodes = max(len(graph), 1)
    for (name, seeds), eval_rng in zip(strategies, rngs.spawn(len(strategies))):
        spread = estimate_spread(graph, seeds, eval_trials, eval_rng, cfg)
        logging.info("Strategy %s: seeds=%s spread=%d", name, seeds, spread)
        rows.append(
            {
                "strategy": name,
                "seeds": " ".join(str(s) for s in seeds),
                "n_seeds": len(seeds),
                "spread": spread,
                "spread_fraction": spread / n_nodes,
            }
        )
    return pd.DataFrame(rows)

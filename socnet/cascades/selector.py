"""
Greedy Seed Selection
======================
Grows a seed set one node at a time, each round adding the candidate whose
inclusion gives the largest estimated spread.

Candidates are scanned in ascending node order and only a strictly larger
estimate replaces the current best, so the lowest id wins ties. A round whose
best estimate does not exceed zero adds nothing.

Activation probabilities depend on graph structure rather than fixed per-edge
inputs, so this is a heuristic without the usual (1 - 1/e) bound.
"""

from __future__ import annotations

import logging
from typing import List, Set, Tuple

import numpy as np

from socnet.config import CascadeConfig
from socnet.deadline import Deadline
from socnet.graph.store import Graph, NodeID
from socnet.cascades.simulator import CommonNeighborCache, estimate_spread


def _best_candidate(
    graph: Graph,
    selected: Set[NodeID],
    trials_per_eval: int,
    rng: np.random.Generator,
    cfg: CascadeConfig,
    deadline: Deadline | None,
    cache: CommonNeighborCache,
) -> Tuple[NodeID | None, int, bool]:
    best_node = None
    best_spread = 0
    for candidate in graph.nodes():
        if candidate in selected:
            continue
        if deadline is not None and deadline.expired():
            return best_node, best_spread, True
        spread = estimate_spread(
            graph,
            selected | {candidate},
            trials_per_eval,
            rng,
            cfg,
            cache=cache,
        )
        if spread > best_spread:
            best_spread = spread
            best_node = candidate
    return best_node, best_spread, False


def select_seeds(
    graph: Graph,
    k: int,
    trials_per_eval: int,
    rng: np.random.Generator,
    cfg: CascadeConfig | None = None,
    deadline: Deadline | None = None,
) -> List[NodeID]:
    """Return at most ``k`` distinct seeds in the order they were picked."""
    cfg = cfg or CascadeConfig()
    cache = CommonNeighborCache(graph)
    selected: List[NodeID] = []
    selected_set: Set[NodeID] = set()

    logging.info("Starting greedy seed selection (k=%d, trials=%d)", k, trials_per_eval)
    for round_idx in range(k):
        node, spread, expired = _best_candidate(
            graph, selected_set, trials_per_eval, rng, cfg, deadline, cache
        )
        if expired:
            # A partially scanned round is discarded.
            logging.warning("Seed selection stopped in round %d (deadline)", round_idx + 1)
            break
        if node is None:
            logging.info("Round %d added no seed", round_idx + 1)
            continue
        selected.append(node)
        selected_set.add(node)
        logging.info("Seed %d: node %s (estimated spread %d)", round_idx + 1, node, spread)
    return selected

"""
Independent Cascade Simulation
===============================
Monte-Carlo estimate of the spread of a seed set.

Each newly activated node gets a single chance to activate every inactive
neighbour. The activation probability of edge (u, v) is derived from the
graph itself, min(1, 0.1 * |common neighbours of u and v|), unless the
config selects the probability stored on the edge.

References:
- Kempe, D., Kleinberg, J., & Tardos, E. (2003). Maximizing the spread of influence
  through a social network
- Goldenberg, J., Libai, B., & Muller, E. (2001). Talk of the network
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Dict, Iterable, Set, Tuple

import numpy as np

from socnet.config import CascadeConfig
from socnet.deadline import Deadline
from socnet.graph.store import Edge, Graph, NodeID
from socnet.similarity.scorer import common_neighbors, influence_potential

ActivationFn = Callable[[NodeID, Edge], float]


class CommonNeighborCache:
    """Memoized common-neighbour counts for one read-only graph."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._counts: Dict[Tuple[NodeID, NodeID], int] = {}

    def count(self, u: NodeID, v: NodeID) -> int:
        key = (u, v) if u <= v else (v, u)
        cached = self._counts.get(key)
        if cached is None:
            cached = common_neighbors(self.graph, u, v)
            self._counts[key] = cached
        return cached

    def __len__(self) -> int:
        return len(self._counts)


def activation_function(
    graph: Graph,
    cfg: CascadeConfig,
    cache: CommonNeighborCache | None = None,
) -> ActivationFn:
    if cfg.activation == "edge":
        return lambda u, edge: edge.probability
    cache = cache if cache is not None else CommonNeighborCache(graph)
    scaling = cfg.scaling_factor
    return lambda u, edge: influence_potential(cache.count(u, edge.target), scaling)


def run_trial(
    graph: Graph,
    seeds: Iterable[NodeID],
    rng: np.random.Generator,
    probability: ActivationFn,
) -> Set[NodeID]:
    """Run one cascade to quiescence and return the activated nodes."""
    ordered = sorted(set(seeds))
    active: Set[NodeID] = set(ordered)
    frontier = deque(ordered)
    while frontier:
        u = frontier.popleft()
        for edge in graph.neighbors(u):
            v = edge.target
            if v in active:
                continue
            if rng.random() < probability(u, edge):
                active.add(v)
                frontier.append(v)
    return active


def estimate_spread(
    graph: Graph,
    seeds: Iterable[NodeID],
    num_trials: int,
    rng: np.random.Generator,
    cfg: CascadeConfig | None = None,
    deadline: Deadline | None = None,
    cache: CommonNeighborCache | None = None,
) -> int:
    """
    Floor of the mean number of activated nodes over ``num_trials`` cascades.

    Returns 0 for an empty seed set or a non-positive trial count. If the
    deadline expires, the mean covers the trials completed so far.
    """
    seeds = set(seeds)
    if not seeds or num_trials <= 0:
        return 0
    cfg = cfg or CascadeConfig()
    probability = activation_function(graph, cfg, cache)

    total = 0
    completed = 0
    for _ in range(num_trials):
        if deadline is not None and deadline.expired():
            logging.warning("Spread estimate stopped after %d/%d trials (deadline)", completed, num_trials)
            break
        total += len(run_trial(graph, seeds, rng, probability))
        completed += 1

    if completed == 0:
        return 0
    return total // completed

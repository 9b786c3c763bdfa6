"""
Betweenness Centrality
=======================
Brandes' two-phase accumulation over unweighted hop distance.

For every source s:
1. BFS from s counting shortest paths (sigma) and recording predecessors
2. Replay the BFS order backwards, accumulating pair dependencies (delta)

Totals are halved at the end because each unordered pair of endpoints is
reached once from either side. Edge probabilities play no part here.

References:
- Brandes, U. (2001). A faster algorithm for betweenness centrality
- Freeman, L. C. (1977). A set of measures of centrality based on betweenness
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Mapping, Tuple

from socnet.graph.store import Graph, GraphIndex, NodeID


def _single_source_dependencies(index: GraphIndex, source: int) -> List[float]:
    n = len(index.nodes)
    adjacency = index.adjacency
    dist = [-1] * n
    sigma = [0] * n
    preds: List[List[int]] = [[] for _ in range(n)]
    order: List[int] = []

    dist[source] = 0
    sigma[source] = 1
    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)
        next_dist = dist[v] + 1
        for w in adjacency[v]:
            if dist[w] < 0:
                dist[w] = next_dist
                queue.append(w)
            if dist[w] == next_dist:
                sigma[w] += sigma[v]
                preds[w].append(v)

    delta = [0.0] * n
    for w in reversed(order):
        if sigma[w] == 0:
            continue
        coeff = (1.0 + delta[w]) / sigma[w]
        for v in preds[w]:
            delta[v] += sigma[v] * coeff
    delta[source] = 0.0
    return delta


def compute_betweenness(graph: Graph) -> Dict[NodeID, float]:
    """Unnormalized betweenness for every node, keyed in ascending node order."""
    index = graph.index()
    totals = [0.0] * len(index.nodes)
    for source in range(len(index.nodes)):
        delta = _single_source_dependencies(index, source)
        for i, value in enumerate(delta):
            totals[i] += value
    return {node: totals[i] / 2.0 for i, node in enumerate(index.nodes)}


def ranked_centrality(scores: Mapping[NodeID, float]) -> List[Tuple[NodeID, float]]:
    """Descending score, ties broken by ascending node id."""
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))


def top_k_central(
    graph: Graph,
    k: int,
    scores: Mapping[NodeID, float] | None = None,
) -> List[NodeID]:
    if k <= 0:
        return []
    if scores is None:
        scores = compute_betweenness(graph)
    return [node for node, _ in ranked_centrality(scores)[:k]]

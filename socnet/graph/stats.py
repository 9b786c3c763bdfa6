from __future__ import annotations

from dataclasses import dataclass

from socnet.graph.store import Graph


@dataclass(frozen=True)
class GraphStats:
    nodes: int
    edges: int
    max_degree: int
    avg_degree: float


def graph_stats(graph: Graph) -> GraphStats:
    degrees = [graph.degree(node) for node in graph.nodes()]
    if not degrees:
        return GraphStats(nodes=0, edges=0, max_degree=0, avg_degree=0.0)
    return GraphStats(
        nodes=len(degrees),
        edges=sum(degrees) // 2,
        max_degree=max(degrees),
        avg_degree=sum(degrees) / len(degrees),
    )

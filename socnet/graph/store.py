from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Sequence, Set, Tuple

NodeID = Hashable

_EMPTY: Tuple["Edge", ...] = ()


class GraphError(ValueError):
    pass


@dataclass(frozen=True)
class Edge:
    target: NodeID
    # Read by the cascade simulator only when activation == "edge".
    probability: float


@dataclass(frozen=True)
class GraphIndex:
    """Contiguous relabeling of a graph: node ``nodes[i]`` has index ``i``."""

    nodes: List[NodeID]
    adjacency: List[List[int]]


class Graph:
    """Undirected multigraph stored as per-node incident edge lists.

    Every ``add_edge(u, v, p)`` writes both directions, so for each stored
    ``u -> v`` with probability ``p`` there is a ``v -> u`` with the same
    ``p``. Repeated pairs are kept as parallel edges.
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeID, List[Edge]] = {}
        self._index: GraphIndex | None = None

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[NodeID, NodeID, float]]) -> "Graph":
        graph = cls()
        for u, v, p in edges:
            graph.add_edge(u, v, p)
        return graph

    def add_edge(self, u: NodeID, v: NodeID, probability: float) -> None:
        if not 0.0 <= probability <= 1.0:
            raise GraphError(f"edge ({u}, {v}) probability {probability} outside [0, 1]")
        self._adj.setdefault(u, []).append(Edge(v, probability))
        self._adj.setdefault(v, []).append(Edge(u, probability))
        self._index = None

    def neighbors(self, node: NodeID) -> Sequence[Edge]:
        return self._adj.get(node, _EMPTY)

    def neighbor_ids(self, node: NodeID) -> Set[NodeID]:
        return {edge.target for edge in self._adj.get(node, _EMPTY)}

    def degree(self, node: NodeID) -> int:
        return len(self._adj.get(node, _EMPTY))

    def nodes(self) -> List[NodeID]:
        return sorted(self._adj)

    def num_edges(self) -> int:
        return sum(len(edges) for edges in self._adj.values()) // 2

    def index(self) -> GraphIndex:
        if self._index is None:
            nodes = self.nodes()
            position = {node: i for i, node in enumerate(nodes)}
            adjacency = [[position[edge.target] for edge in self._adj[node]] for node in nodes]
            self._index = GraphIndex(nodes=nodes, adjacency=adjacency)
        return self._index

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.num_edges()})"

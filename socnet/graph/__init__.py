from socnet.graph.store import Edge, Graph, GraphError, GraphIndex, NodeID
from socnet.graph.loader import LoadResult, load_edge_list, parse_edge_list
from socnet.graph.stats import GraphStats, graph_stats

__all__ = [
    "Edge",
    "Graph",
    "GraphError",
    "GraphIndex",
    "NodeID",
    "LoadResult",
    "load_edge_list",
    "parse_edge_list",
    "GraphStats",
    "graph_stats",
]

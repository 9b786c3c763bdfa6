from socnet.centrality.betweenness import compute_betweenness, ranked_centrality, top_k_central

__all__ = ["compute_betweenness", "ranked_centrality", "top_k_central"]

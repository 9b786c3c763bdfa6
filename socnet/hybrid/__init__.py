from socnet.hybrid.ranker import (
    HybridCandidate,
    ImpactEntry,
    ImpactReport,
    rank_hybrid,
    recommendation_impact,
)

__all__ = [
    "HybridCandidate",
    "ImpactEntry",
    "ImpactReport",
    "rank_hybrid",
    "recommendation_impact",
]

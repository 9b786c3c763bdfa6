from socnet.similarity.scorer import (
    RecommendationScore,
    adamic_adar,
    candidate_pool,
    common_neighbors,
    influence_potential,
    jaccard,
    recommend,
    recommend_ids,
    score_candidate,
)

__all__ = [
    "RecommendationScore",
    "adamic_adar",
    "candidate_pool",
    "common_neighbors",
    "influence_potential",
    "jaccard",
    "recommend",
    "recommend_ids",
    "score_candidate",
]

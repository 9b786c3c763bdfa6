"""
Influence Cascades
===================
Independent-cascade spread estimation and greedy influence maximization.

Key features:
1. Monte-Carlo spread estimate with a caller-supplied numpy Generator
2. Structure-derived activation probability (shared-neighbour overlap)
3. Greedy seed selection with deterministic tie-breaking
4. Deadline checks between trials and between candidate evaluations
"""

from socnet.cascades.simulator import (
    CommonNeighborCache,
    activation_function,
    estimate_spread,
    run_trial,
)

from socnet.cascades.selector import select_seeds

__all__ = [
    "CommonNeighborCache",
    "activation_function",
    "estimate_spread",
    "run_trial",
    "select_seeds",
]

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass
class RNGManager:
    seed: int

    def __post_init__(self) -> None:
        self.numpy = np.random.default_rng(self.seed)

    def spawn(self, n: int) -> List[np.random.Generator]:
        """Independent child generators, e.g. one per strategy under comparison."""
        return [np.random.default_rng(s) for s in np.random.SeedSequence(self.seed).spawn(n)]

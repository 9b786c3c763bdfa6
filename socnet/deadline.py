from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class Deadline:
    """Cooperative cancellation for long simulation loops.

    Checked between cascade trials and between greedy candidate evaluations;
    work already finished is kept when it expires.
    """

    seconds: float | None = None
    started_at: float = field(default_factory=time.monotonic)

    @classmethod
    def from_seconds(cls, seconds: float | None) -> "Deadline":
        return cls(seconds)

    def expired(self) -> bool:
        if self.seconds is None:
            return False
        return time.monotonic() - self.started_at >= self.seconds

"""
Spatial Trail - Sample Clock
Turns an irregular millisecond timestamp stream into per-step elapsed seconds
"""

from typing import Optional


class SampleClock:
    """Per-step delta tracker tolerant of jitter and clock rollback"""

    def __init__(self):
        self.last_now_ms: Optional[float] = None

    def tick(self, now_ms: float) -> float:
        """
        Return seconds elapsed since the previous tick.

        The first call establishes the baseline and returns 0. A timestamp
        earlier than the baseline yields 0 and becomes the new baseline.
        """
        if self.last_now_ms is None:
            self.last_now_ms = now_ms
            return 0.0

        delta_seconds = max(0.0, (now_ms - self.last_now_ms) / 1000.0)
        self.last_now_ms = now_ms
        return delta_seconds

    def reset(self) -> None:
        self.last_now_ms = None

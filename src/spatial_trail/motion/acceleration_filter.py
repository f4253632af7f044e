"""
Spatial Trail - Acceleration Filter
Threshold gate that drops near-stationary noise before integration
"""

from .models import AccelerationSample

DEFAULT_THRESHOLD = 1.0


class AccelerationFilter:
    """Accepts samples whose horizontal acceleration exceeds a threshold"""

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        if threshold < 0:
            raise ValueError("Acceleration threshold must be non-negative")
        self.threshold = threshold

    def accept(self, sample: AccelerationSample) -> bool:
        # Vertical axis carries gravity bias and is never tracked
        return abs(sample.ax) > self.threshold or abs(sample.az) > self.threshold

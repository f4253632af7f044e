"""
Trail data models
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..motion.models import Vector3


@dataclass(frozen=True)
class TrailMarker:
    """Recorded point along the path; ordered by sequence_index"""
    position: Vector3
    sequence_index: int
    recorded_at_ms: float
    handle: Optional[Any] = None


@dataclass(frozen=True)
class TrailSegment:
    """Pairing of two consecutive markers"""
    from_marker: TrailMarker
    to_marker: TrailMarker

    def __post_init__(self):
        if self.to_marker.sequence_index != self.from_marker.sequence_index + 1:
            raise ValueError("Segments join consecutive markers only")

    @property
    def length(self) -> float:
        return self.from_marker.position.distance_to(self.to_marker.position)

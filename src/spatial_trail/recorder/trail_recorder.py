"""
Trail Recorder
Polls the bound position source at a bounded rate and drops markers
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .models import TrailMarker, TrailSegment
from ..config import TrailSettings
from ..errors import ConfigurationError
from ..motion.models import Vector3
from ..platform import TrailRenderer
from ..sources.base import PositionSource

logger = logging.getLogger(__name__)


class RecorderState(Enum):
    IDLE = "idle"
    ARMED = "armed"


class TrailRecorder:
    """
    Rate-limited, distance-gated marker recorder.

    The interval gate is independent of how often the source updates, so the
    recording frequency does not follow the sensor or render rate. Markers
    are append-only and their sequence indices are gap-free.
    """

    def __init__(self,
                 renderer: TrailRenderer,
                 settings: TrailSettings,
                 source: Optional[PositionSource] = None):
        self.renderer = renderer
        self.settings = settings
        self.source: Optional[PositionSource] = None
        self.state = RecorderState.IDLE

        self._markers: List[TrailMarker] = []
        self.last_position = Vector3.zero()
        self.last_sample_time_ms: Optional[float] = None

        self.stats = {
            'samples_taken': 0,
            'gated_by_interval': 0,
            'gated_by_distance': 0
        }

        if source is not None:
            self.bind(source)

    def bind(self, source: PositionSource) -> None:
        """Attach the position source to poll; arms the recorder"""
        if source is None:
            raise ConfigurationError("TrailRecorder requires a position source")
        self.source = source
        self.state = RecorderState.ARMED
        logger.info(f"Trail recorder bound to {source.kind} source")

    @property
    def markers(self) -> Tuple[TrailMarker, ...]:
        return tuple(self._markers)

    def segments(self) -> List[TrailSegment]:
        return [
            TrailSegment(self._markers[i - 1], self._markers[i])
            for i in range(1, len(self._markers))
        ]

    def maybe_sample(self, now_ms: float) -> Optional[TrailMarker]:
        """
        Sample the source if the interval has elapsed.

        Returns the new marker when one was emitted, otherwise None.
        """
        if self.source is None:
            raise ConfigurationError("TrailRecorder sampled before a position source was bound")

        if (self.last_sample_time_ms is not None
                and now_ms - self.last_sample_time_ms < self.settings.interval_ms):
            self.stats['gated_by_interval'] += 1
            return None

        position = self.source.current_position()
        self.stats['samples_taken'] += 1

        marker = None
        if not self._markers:
            marker = self._drop_marker(position, now_ms)
        else:
            distance = self._markers[-1].position.distance_to(position)
            if distance >= self.settings.min_distance:
                marker = self._drop_marker(position, now_ms)
            else:
                self.stats['gated_by_distance'] += 1

        self.last_position = position
        self.last_sample_time_ms = now_ms
        return marker

    def _drop_marker(self, position: Vector3, now_ms: float) -> TrailMarker:
        handle = self.renderer.draw_marker(position, self.settings.marker_style())
        marker = TrailMarker(
            position=position,
            sequence_index=len(self._markers),
            recorded_at_ms=now_ms,
            handle=handle
        )

        if self._markers:
            previous = self._markers[-1]
            self.renderer.draw_segment(previous.position, position, self.settings.segment_style())

        self._markers.append(marker)
        logger.debug(f"Dropped marker #{marker.sequence_index} at {position}")
        return marker

    def get_statistics(self) -> Dict[str, Any]:
        return {
            'state': self.state.value,
            'source': self.source.kind if self.source else None,
            'markers': len(self._markers),
            'segments': max(0, len(self._markers) - 1),
            **self.stats
        }

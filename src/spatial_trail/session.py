"""
Trail Session
Wires capability negotiation, the selected position source and the recorder
"""

import logging
from typing import Any, Dict, Optional

from .config import TrailSettings, load_settings
from .errors import ConfigurationError
from .platform import PlatformCapabilities, TrailRenderer
from .recorder import TrailRecorder
from .sources import (
    DeadReckoningSource, NegotiationResult, PositionSource, negotiate_position_source
)
from .sources.negotiation import StatusCallback

logger = logging.getLogger(__name__)


class TrailSession:
    """One recording session: negotiate once, then tick until closed"""

    def __init__(self,
                 platform: PlatformCapabilities,
                 renderer: TrailRenderer,
                 settings: Optional[TrailSettings] = None,
                 status: Optional[StatusCallback] = None):
        self.platform = platform
        self.settings = settings or load_settings()
        self.status = status
        self.recorder = TrailRecorder(renderer, self.settings)
        self.negotiation: Optional[NegotiationResult] = None
        self.closed = False

    @property
    def source(self) -> Optional[PositionSource]:
        return self.negotiation.source if self.negotiation else None

    async def start(self) -> NegotiationResult:
        """Select a position source, start it and arm the recorder"""
        if self.negotiation is not None:
            raise ConfigurationError("Capability negotiation already ran for this session")
        if self.closed:
            raise ConfigurationError("Session is closed")

        logger.info("Starting trail session")
        result = await negotiate_position_source(self.platform, self.settings, self.status)
        self.negotiation = result

        result.source.start_tracking()
        self.recorder.bind(result.source)
        return result

    def tick(self, now_ms: float) -> None:
        """Per-frame update: advance the source, then maybe record a marker"""
        if self.negotiation is None or self.closed:
            return
        self.negotiation.source.tick(now_ms)
        self.recorder.maybe_sample(now_ms)

    def reset(self) -> bool:
        """Re-zero dead reckoning; other sources have no drift to clear"""
        source = self.source
        if isinstance(source, DeadReckoningSource):
            source.reset()
            return True
        return False

    def close(self) -> None:
        """Tear down sensor and pointer subscriptions"""
        if self.closed:
            return
        self.closed = True
        if self.source is not None:
            self.source.stop()
        logger.info("Trail session closed")

    def get_status(self) -> Dict[str, Any]:
        status: Dict[str, Any] = {
            'started': self.negotiation is not None,
            'closed': self.closed,
            'source': self.negotiation.kind if self.negotiation else None,
            'capabilities': None,
            'recorder': self.recorder.get_statistics()
        }
        if self.negotiation is not None:
            caps = self.negotiation.capabilities
            status['capabilities'] = {
                'has_absolute_tracking': caps.has_absolute_tracking,
                'has_motion_sensor': caps.has_motion_sensor,
                'has_orientation_sensor': caps.has_orientation_sensor
            }
        if isinstance(self.source, DeadReckoningSource):
            status['dead_reckoning'] = self.source.get_statistics()
        return status

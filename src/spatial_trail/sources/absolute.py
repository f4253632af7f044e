"""
Absolute spatial tracking source.

Reads the viewer's world position from a reference space established by the
platform's spatial tracking system.
"""

import logging

from .base import PositionSource
from ..motion.models import Vector3
from ..platform import ReferenceSpace

logger = logging.getLogger(__name__)


class AbsoluteTrackingSource(PositionSource):
    """Position source backed by a platform reference space"""

    kind = "absolute"

    def __init__(self, reference_space: ReferenceSpace):
        super().__init__()
        self.reference_space = reference_space
        self._last_known = Vector3.zero()
        self._read_failing = False

    def current_position(self) -> Vector3:
        if not self.is_tracking:
            return Vector3.zero()

        try:
            position = self.reference_space.viewer_position()
        except Exception as e:
            if not self._read_failing:
                logger.warning(f"Viewer pose unavailable, holding last position: {e}")
            self._read_failing = True
            return self._last_known

        self._read_failing = False
        if position is not None:
            self._last_known = position
        return self._last_known

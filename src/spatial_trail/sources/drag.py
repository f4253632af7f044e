"""
Drag emulation source.

Manual fallback when neither spatial tracking nor motion sensing is usable:
single-pointer drags move a synthetic position across the horizontal plane.
"""

import logging
from typing import Dict, Optional, Tuple

from .base import PositionSource
from ..motion.models import Vector3
from ..platform import PlatformCapabilities, PointerEvent, PointerKind

logger = logging.getLogger(__name__)

DEFAULT_MOVE_SPEED = 0.01


class DragEmulationSource(PositionSource):
    """Converts pointer-drag deltas into a position offset; never fails"""

    kind = "drag"

    def __init__(self,
                 move_speed: float = DEFAULT_MOVE_SPEED,
                 platform: Optional[PlatformCapabilities] = None):
        super().__init__()
        if move_speed <= 0:
            raise ValueError("Drag move speed must be positive")
        self.move_speed = move_speed
        self.platform = platform

        self._offset = Vector3.zero()
        self._pointers: Dict[int, Tuple[float, float]] = {}
        self._dragging = False
        self._last_point: Optional[Tuple[float, float]] = None

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def start_tracking(self) -> None:
        if self.is_tracking:
            return
        if self.platform is not None:
            try:
                self._track_subscription(
                    self.platform.subscribe_pointer_drag(self.handle_pointer_event)
                )
            except Exception as e:
                # Still usable through on_drag_delta()
                logger.warning(f"Pointer subscription failed: {e}")
        super().start_tracking()

    def handle_pointer_event(self, event: PointerEvent) -> None:
        """Track gesture state and forward single-pointer move deltas"""
        if not self.is_tracking:
            return

        if event.kind is PointerKind.DOWN:
            self._pointers[event.pointer_id] = (event.x, event.y)
            if len(self._pointers) == 1:
                self._dragging = True
                self._last_point = (event.x, event.y)
            else:
                # Multi-pointer input is ambiguous: end the drag
                self._end_drag()

        elif event.kind is PointerKind.MOVE:
            if event.pointer_id not in self._pointers:
                return
            self._pointers[event.pointer_id] = (event.x, event.y)
            if not self._dragging or len(self._pointers) != 1 or self._last_point is None:
                return
            dx = event.x - self._last_point[0]
            dy = event.y - self._last_point[1]
            self._last_point = (event.x, event.y)
            self.on_drag_delta(dx, dy)

        else:
            self._pointers.pop(event.pointer_id, None)
            self._end_drag()

    def on_drag_delta(self, dx: float, dy: float) -> None:
        """Screen x maps to world x, screen y maps to world z"""
        if not self.is_tracking or not self._dragging:
            return
        self._offset = Vector3(
            self._offset.x + dx * self.move_speed,
            self._offset.y,
            self._offset.z + dy * self.move_speed
        )

    def current_position(self) -> Vector3:
        return self._offset

    def stop(self) -> None:
        self._pointers.clear()
        self._end_drag()
        super().stop()

    def _end_drag(self) -> None:
        self._dragging = False
        self._last_point = None

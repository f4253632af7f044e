"""
Spatial Trail - Platform Collaborators
Interfaces the host provides for capability queries, sensor input and drawing
"""

import logging
from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

from .motion.models import AccelerationSample, Vector3

logger = logging.getLogger(__name__)


class PermissionState(Enum):
    """Outcome of a runtime sensor permission request"""
    GRANTED = "granted"
    DENIED = "denied"


class PointerKind(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    """Screen-space pointer event from the host's input layer"""
    kind: PointerKind
    pointer_id: int
    x: float
    y: float


class Subscription(Protocol):
    def unsubscribe(self) -> None:
        ...


class ReferenceSpace(Protocol):
    """Coordinate frame that reports the viewer's tracked world position"""

    def viewer_position(self) -> Optional[Vector3]:
        ...


class PlatformCapabilities(Protocol):
    """Device capability queries and sensor subscriptions"""

    async def is_absolute_tracking_supported(self) -> bool:
        ...

    async def request_reference_space(self, kind: str) -> ReferenceSpace:
        ...

    def has_motion_sensor(self) -> bool:
        ...

    def has_orientation_sensor(self) -> bool:
        ...

    async def request_motion_permission(self) -> PermissionState:
        ...

    def subscribe_acceleration(self, callback: Callable[[AccelerationSample], None]) -> Subscription:
        ...

    def subscribe_pointer_drag(self, callback: Callable[[PointerEvent], None]) -> Subscription:
        ...


class TrailRenderer(Protocol):
    """Scene collaborator that draws markers and connecting segments"""

    def draw_marker(self, position: Vector3, style: Dict[str, Any]) -> Any:
        ...

    def draw_segment(self, start: Vector3, end: Vector3, style: Dict[str, Any]) -> Any:
        ...


class CallbackSubscription:
    """Unsubscribe handle wrapping a teardown callable; safe to call twice"""

    def __init__(self, teardown: Callable[[], None], name: str = "subscription"):
        self._teardown: Optional[Callable[[], None]] = teardown
        self.name = name

    def unsubscribe(self) -> None:
        if self._teardown is None:
            return
        teardown, self._teardown = self._teardown, None
        teardown()
        logger.debug(f"Unsubscribed {self.name}")

"""
Capability negotiation.

Runs once at startup and picks exactly one position source, in priority
order: absolute tracking, then dead reckoning, then drag emulation. Every
step may fail; drag emulation cannot, so selection always terminates.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from .absolute import AbsoluteTrackingSource
from .base import PositionSource
from .dead_reckoning import DeadReckoningSource
from .drag import DragEmulationSource
from ..config import TrailSettings
from ..errors import CapabilityUnavailable, PermissionDenied
from ..platform import PermissionState, PlatformCapabilities

logger = logging.getLogger(__name__)

StatusCallback = Callable[[str], None]


@dataclass(frozen=True)
class CapabilityFlags:
    """Platform capabilities as observed during negotiation"""
    has_absolute_tracking: bool = False
    has_motion_sensor: bool = False
    has_orientation_sensor: bool = False


@dataclass(frozen=True)
class NegotiationResult:
    source: PositionSource
    capabilities: CapabilityFlags

    @property
    def kind(self) -> str:
        return self.source.kind


async def negotiate_position_source(platform: PlatformCapabilities,
                                    settings: TrailSettings,
                                    status: Optional[StatusCallback] = None) -> NegotiationResult:
    """Select the best available position source for this session"""

    has_absolute = await _query_absolute_tracking(platform, settings)
    has_motion = _query_flag(platform.has_motion_sensor, "motion sensor")
    has_orientation = _query_flag(platform.has_orientation_sensor, "orientation sensor")
    capabilities = CapabilityFlags(has_absolute, has_motion, has_orientation)

    # 1. Absolute spatial tracking
    if has_absolute:
        try:
            space = await _with_timeout(
                platform.request_reference_space(settings.reference_space_kind),
                settings.capability_timeout_s,
                "reference space"
            )
            if space is None:
                raise CapabilityUnavailable("reference space", settings.reference_space_kind)
            logger.info(f"✅ Absolute tracking selected ({settings.reference_space_kind})")
            return NegotiationResult(AbsoluteTrackingSource(space), capabilities)
        except Exception as e:
            logger.warning(f"Reference space request failed, falling back: {e}")

    # 2. Inertial dead reckoning
    try:
        await _acquire_motion_permission(platform, settings, has_motion)
        logger.info("✅ Dead reckoning selected")
        return NegotiationResult(DeadReckoningSource(platform, settings), capabilities)
    except PermissionDenied as e:
        logger.warning(f"{e}, falling back to drag emulation")
        _notify(status, "Motion sensor access denied. Drag to move.")
    except CapabilityUnavailable as e:
        logger.info(f"{e}, falling back to drag emulation")
        _notify(status, "Motion sensing unavailable. Drag to move.")
    except Exception as e:
        logger.error(f"Motion permission request failed: {e}")
        _notify(status, "Motion sensing unavailable. Drag to move.")

    # 3. Drag emulation, always available
    logger.info("✅ Drag emulation selected")
    return NegotiationResult(
        DragEmulationSource(settings.drag_move_speed, platform), capabilities
    )


async def _with_timeout(awaitable: Awaitable[Any], timeout_s: float, capability: str) -> Any:
    """Await a platform call; an unanswered call counts as an absent capability"""
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_s)
    except asyncio.TimeoutError:
        raise CapabilityUnavailable(capability, f"no answer after {timeout_s}s") from None


async def _query_absolute_tracking(platform: PlatformCapabilities, settings: TrailSettings) -> bool:
    try:
        supported = await _with_timeout(
            platform.is_absolute_tracking_supported(),
            settings.capability_timeout_s,
            "absolute tracking"
        )
        return bool(supported)
    except Exception as e:
        logger.warning(f"Absolute tracking query failed: {e}")
        return False


def _query_flag(query: Callable[[], bool], name: str) -> bool:
    try:
        return bool(query())
    except Exception as e:
        logger.warning(f"{name} query failed: {e}")
        return False


async def _acquire_motion_permission(platform: PlatformCapabilities,
                                     settings: TrailSettings,
                                     has_motion: bool) -> None:
    """Raise unless motion sensing is present and permitted"""
    if not has_motion:
        raise CapabilityUnavailable("motion sensor")

    state = await _with_timeout(
        platform.request_motion_permission(),
        settings.permission_timeout_s,
        "motion sensor"
    )

    if state is not PermissionState.GRANTED:
        raise PermissionDenied("motion")


def _notify(status: Optional[StatusCallback], message: str) -> None:
    if status is not None:
        status(message)

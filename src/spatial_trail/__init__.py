"""
Spatial Trail - breadcrumb trails of user movement through 3D space
Position sources with inertial dead reckoning and a rate-limited trail recorder
"""

__version__ = "1.0.0"
__author__ = "Spatial Platform Team"

from .config import TrailSettings, load_settings
from .errors import TrailError, CapabilityUnavailable, PermissionDenied, ConfigurationError
from .motion import Vector3, AccelerationSample, MotionState
from .platform import CallbackSubscription, PermissionState, PointerEvent, PointerKind
from .recorder import TrailMarker, TrailSegment, TrailRecorder
from .sources import (
    PositionSource, AbsoluteTrackingSource, DeadReckoningSource, DragEmulationSource,
    CapabilityFlags, NegotiationResult, negotiate_position_source
)
from .session import TrailSession

__all__ = [
    "TrailSettings",
    "load_settings",
    "TrailError",
    "CapabilityUnavailable",
    "PermissionDenied",
    "ConfigurationError",
    "Vector3",
    "AccelerationSample",
    "MotionState",
    "CallbackSubscription",
    "PermissionState",
    "PointerEvent",
    "PointerKind",
    "TrailMarker",
    "TrailSegment",
    "TrailRecorder",
    "PositionSource",
    "AbsoluteTrackingSource",
    "DeadReckoningSource",
    "DragEmulationSource",
    "CapabilityFlags",
    "NegotiationResult",
    "negotiate_position_source",
    "TrailSession",
]

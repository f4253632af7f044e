"""
Spatial Trail - Position Sources
Absolute tracking, dead reckoning and drag emulation behind one interface
"""

from .base import PositionSource
from .absolute import AbsoluteTrackingSource
from .dead_reckoning import DeadReckoningSource
from .drag import DragEmulationSource
from .negotiation import CapabilityFlags, NegotiationResult, negotiate_position_source

__all__ = [
    'PositionSource',
    'AbsoluteTrackingSource',
    'DeadReckoningSource',
    'DragEmulationSource',
    'CapabilityFlags',
    'NegotiationResult',
    'negotiate_position_source'
]

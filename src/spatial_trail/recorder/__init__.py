"""
Trail recording components
"""

from .models import TrailMarker, TrailSegment
from .trail_recorder import RecorderState, TrailRecorder

__all__ = ['TrailMarker', 'TrailSegment', 'RecorderState', 'TrailRecorder']

"""
Spatial Trail - Motion Package
Inertial dead-reckoning building blocks
"""

from .models import Vector3, AccelerationSample, MotionState, MotionMetrics
from .sample_clock import SampleClock
from .acceleration_filter import AccelerationFilter
from .integrators import (
    VelocityIntegrator, PositionIntegrator,
    DAMPING_PER_SAMPLE, DAMPING_TIME_SCALED
)

__all__ = [
    'Vector3',
    'AccelerationSample',
    'MotionState',
    'MotionMetrics',
    'SampleClock',
    'AccelerationFilter',
    'VelocityIntegrator',
    'PositionIntegrator',
    'DAMPING_PER_SAMPLE',
    'DAMPING_TIME_SCALED'
]

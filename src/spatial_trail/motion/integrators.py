"""
Spatial Trail - Motion Integrators
Acceleration -> velocity on sensor cadence, velocity -> position on tick cadence
"""

import numpy as np
import logging

from .models import AccelerationSample, MotionState, Vector3

logger = logging.getLogger(__name__)

DAMPING_PER_SAMPLE = "per_sample"
DAMPING_TIME_SCALED = "time_scaled"

# Horizontal plane axes (x, z); y is held constant
_HORIZONTAL = [0, 2]


class VelocityIntegrator:
    """
    Integrates filtered acceleration into horizontal velocity with damping.

    In per-sample mode the damping factor is applied once for every accepted
    sample, so the steady-state velocity depends on the sensor event rate.
    Time-scaled mode applies ``damping ** delta_seconds`` instead.
    """

    def __init__(self, damping_mode: str = DAMPING_PER_SAMPLE):
        if damping_mode not in (DAMPING_PER_SAMPLE, DAMPING_TIME_SCALED):
            raise ValueError(f"Unknown damping mode: {damping_mode}")
        self.damping_mode = damping_mode

    def integrate(self,
                  velocity: Vector3,
                  sample: AccelerationSample,
                  delta_seconds: float,
                  sensitivity: float,
                  damping: float) -> Vector3:
        """Return the velocity after applying one accepted sample"""
        v = velocity.to_array()
        accel = np.array([sample.ax, sample.ay, sample.az], dtype=float)

        factor = self._damping_factor(damping, delta_seconds)
        v[_HORIZONTAL] = (v[_HORIZONTAL] + accel[_HORIZONTAL] * delta_seconds * sensitivity) * factor

        return Vector3.from_array(v)

    def _damping_factor(self, damping: float, delta_seconds: float) -> float:
        if self.damping_mode == DAMPING_TIME_SCALED:
            return damping ** delta_seconds
        return damping


class PositionIntegrator:
    """Advances position by the last known velocity once per render tick"""

    def integrate(self, position: Vector3, velocity: Vector3) -> Vector3:
        return Vector3(position.x + velocity.x, position.y, position.z + velocity.z)

    def reset(self, state: MotionState) -> None:
        """Clear accumulated drift; visible on the next read"""
        state.reset()
        logger.debug("Motion state reset to origin")

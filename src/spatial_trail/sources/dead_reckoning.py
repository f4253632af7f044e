"""
Inertial dead-reckoning source.

Acceleration samples arrive on the sensor's own cadence and update velocity;
render ticks advance position from the last computed velocity. The two
streams interleave on one thread, so no locking is needed.
"""

import logging
from typing import Any, Dict, Optional

from .base import PositionSource
from ..config import TrailSettings
from ..motion import (
    AccelerationFilter, AccelerationSample, MotionMetrics, MotionState,
    PositionIntegrator, SampleClock, Vector3, VelocityIntegrator
)
from ..platform import PlatformCapabilities

logger = logging.getLogger(__name__)


class DeadReckoningSource(PositionSource):
    """Estimates position by integrating filtered, damped acceleration"""

    kind = "dead_reckoning"

    def __init__(self, platform: Optional[PlatformCapabilities], settings: TrailSettings):
        super().__init__()
        self.platform = platform
        self.settings = settings

        self.state = MotionState()
        self.metrics = MotionMetrics()

        self.sample_clock = SampleClock()
        self.tick_clock = SampleClock()
        self.acceleration_filter = AccelerationFilter(settings.acceleration_threshold)
        self.velocity_integrator = VelocityIntegrator(settings.damping_mode)
        self.position_integrator = PositionIntegrator()

        # Milliseconds of tick time since the last acceleration sample
        self._idle_ms = 0.0

    def start_tracking(self) -> None:
        if self.is_tracking:
            return
        if self.platform is not None:
            self._track_subscription(
                self.platform.subscribe_acceleration(self.on_acceleration)
            )
        super().start_tracking()

    def on_acceleration(self, sample: AccelerationSample) -> None:
        """Sensor-event handler: update velocity from one sample"""
        if not self.is_tracking:
            return

        self.metrics.samples_received += 1
        delta_seconds = self.sample_clock.tick(sample.timestamp_ms)
        self.state.last_sample_time_ms = sample.timestamp_ms
        self._idle_ms = 0.0

        if not self.acceleration_filter.accept(sample):
            self.metrics.samples_rejected += 1
            return

        self.metrics.samples_accepted += 1
        self.state.velocity = self.velocity_integrator.integrate(
            self.state.velocity,
            sample,
            delta_seconds,
            self.settings.sensitivity,
            self.settings.damping
        )

    def tick(self, now_ms: float) -> None:
        """Render-tick handler: advance position by the current velocity"""
        if not self.is_tracking:
            return

        self.metrics.ticks += 1
        self._idle_ms += self.tick_clock.tick(now_ms) * 1000.0

        timeout = self.settings.velocity_idle_timeout_ms
        if (timeout is not None and self._idle_ms >= timeout
                and self.state.velocity != Vector3.zero()):
            self.state.velocity = Vector3.zero()
            self.metrics.idle_decays += 1
            logger.debug(f"No acceleration for {self._idle_ms:.0f} ms, velocity zeroed")

        self.state.position = self.position_integrator.integrate(
            self.state.position, self.state.velocity
        )

    def current_position(self) -> Vector3:
        return self.state.position

    def current_velocity(self) -> Vector3:
        return self.state.velocity

    def reset(self) -> None:
        """Zero velocity and position; capability selection is kept"""
        self.position_integrator.reset(self.state)
        self.sample_clock.reset()
        self._idle_ms = 0.0
        self.metrics.resets += 1
        logger.info("🔄 Dead-reckoning state reset to origin")

    def get_statistics(self) -> Dict[str, Any]:
        return {
            'is_tracking': self.is_tracking,
            'metrics': {
                'samples_received': self.metrics.samples_received,
                'samples_accepted': self.metrics.samples_accepted,
                'samples_rejected': self.metrics.samples_rejected,
                'acceptance_rate': self.metrics.acceptance_rate,
                'ticks': self.metrics.ticks,
                'resets': self.metrics.resets,
                'idle_decays': self.metrics.idle_decays
            },
            'state': self.state.to_dict(),
            'damping_mode': self.velocity_integrator.damping_mode
        }

"""
Spatial Trail - Motion Data Models
Value types shared by the integrators, position sources and recorder
"""

import numpy as np
from typing import Any, Dict, Optional
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector3:
    """Immutable world-frame coordinate; y is vertical"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> 'Vector3':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values) -> 'Vector3':
        """Build from any 3-element sequence or numpy array"""
        arr = np.asarray(values, dtype=float)
        if arr.shape != (3,):
            raise ValueError("Vector3 requires exactly 3 components")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def distance_to(self, other: 'Vector3') -> float:
        """Euclidean distance to another point"""
        return float(np.linalg.norm(self.to_array() - other.to_array()))

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.to_array()))

    def to_list(self) -> list:
        return [self.x, self.y, self.z]

    def __str__(self) -> str:
        return f"{self.x:.2f}, {self.y:.2f}, {self.z:.2f}"


@dataclass(frozen=True)
class AccelerationSample:
    """Single accelerometer reading as delivered by the platform"""
    ax: float
    ay: float
    az: float
    timestamp_ms: float

    def __post_init__(self):
        """Validate sample on initialization"""
        values = np.array([self.ax, self.ay, self.az, self.timestamp_ms], dtype=float)
        if not np.all(np.isfinite(values)):
            raise ValueError("Acceleration sample must contain finite values")


@dataclass
class MotionMetrics:
    """Dead-reckoning counters"""
    samples_received: int = 0
    samples_accepted: int = 0
    samples_rejected: int = 0
    ticks: int = 0
    resets: int = 0
    idle_decays: int = 0

    @property
    def acceptance_rate(self) -> float:
        if self.samples_received == 0:
            return 0.0
        return self.samples_accepted / self.samples_received


@dataclass
class MotionState:
    """Velocity and position estimate owned by the dead-reckoning source"""
    velocity: Vector3 = field(default_factory=Vector3.zero)
    position: Vector3 = field(default_factory=Vector3.zero)
    last_sample_time_ms: Optional[float] = None

    def reset(self) -> None:
        """Zero velocity and position; forget the last sample time"""
        self.velocity = Vector3.zero()
        self.position = Vector3.zero()
        self.last_sample_time_ms = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'velocity': self.velocity.to_list(),
            'position': self.position.to_list(),
            'last_sample_time_ms': self.last_sample_time_ms,
        }

"""
Configuration management
Environment-based settings for trail recording and dead reckoning
"""

import re
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class TrailSettings(BaseSettings):
    """Trail recorder and position source settings from environment"""

    # Recording
    interval_ms: float = Field(default=200.0, gt=0, description="Minimum time between samples")
    min_distance: float = Field(default=0.1, ge=0, description="Movement needed to drop a marker")

    # Marker appearance
    marker_size: float = Field(default=0.05, gt=0, description="Marker sphere radius")
    color: str = Field(default="#ff6b6b", description="Marker and segment colour")
    emissive_intensity: float = Field(default=0.3, ge=0, le=1)
    segment_opacity: float = Field(default=0.7, ge=0, le=1)

    # Dead reckoning
    acceleration_threshold: float = Field(default=1.0, ge=0)
    sensitivity: float = Field(default=0.1, gt=0)
    damping: float = Field(default=0.95, gt=0, le=1)
    damping_mode: Literal["per_sample", "time_scaled"] = "per_sample"
    velocity_idle_timeout_ms: Optional[float] = Field(default=None, gt=0)

    # Drag emulation
    drag_move_speed: float = Field(default=0.01, gt=0)

    # Capability negotiation
    reference_space_kind: str = "local-floor"
    permission_timeout_s: float = Field(default=5.0, gt=0)
    capability_timeout_s: float = Field(default=3.0, gt=0, description="Limit on each capability query")

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRAIL_",
        extra="ignore",
    )

    @field_validator("color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"Colour must be a hex string like #ff6b6b, got {value!r}")
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def marker_style(self) -> Dict[str, Any]:
        """Style handed to the renderer for each marker"""
        return {
            "radius": self.marker_size,
            "color": self.color,
            "emissive": self.color,
            "emissive_intensity": self.emissive_intensity,
        }

    def segment_style(self) -> Dict[str, Any]:
        """Style handed to the renderer for each connecting segment"""
        return {
            "color": self.color,
            "opacity": self.segment_opacity,
        }


def load_settings(**overrides: Any) -> TrailSettings:
    """Build and validate settings once; invalid values raise ConfigurationError"""
    try:
        return TrailSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid trail settings: {e}") from e

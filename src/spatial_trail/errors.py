"""
Spatial Trail - Error Taxonomy
Failures raised while selecting a position source or wiring the recorder
"""


class TrailError(Exception):
    """Base class for all trail tracking errors"""


class CapabilityUnavailable(TrailError):
    """Absolute tracking or motion sensing is not present on this platform"""

    def __init__(self, capability: str, reason: str = ""):
        self.capability = capability
        self.reason = reason
        message = f"Capability unavailable: {capability}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PermissionDenied(TrailError):
    """User declined access to orientation/motion sensors"""

    def __init__(self, permission: str = "motion"):
        self.permission = permission
        super().__init__(f"Permission denied: {permission}")


class ConfigurationError(TrailError):
    """Invalid settings or a recorder used without a position source"""

import asyncio

import pytest

from spatial_trail import CallbackSubscription, PermissionState, TrailSettings, Vector3


class FakeReferenceSpace:
    def __init__(self, positions=None):
        self.positions = list(positions or [])
        self.fail = False

    def viewer_position(self):
        if self.fail:
            raise RuntimeError("pose lost")
        if not self.positions:
            return None
        return self.positions.pop(0)


class FakePlatform:
    """Scriptable platform collaborator"""

    def __init__(self,
                 absolute=False,
                 reference_space=None,
                 motion_sensor=True,
                 orientation_sensor=True,
                 permission=PermissionState.GRANTED,
                 permission_delay=0.0,
                 unanswered=()):
        self.absolute = absolute
        self.reference_space = reference_space
        self.motion_sensor = motion_sensor
        self.orientation_sensor = orientation_sensor
        self.permission = permission
        self.permission_delay = permission_delay
        self.unanswered = set(unanswered)
        self.permission_requests = 0
        self.acceleration_callbacks = []
        self.pointer_callbacks = []

    async def _never_answer(self, name):
        if name in self.unanswered:
            await asyncio.Event().wait()

    async def is_absolute_tracking_supported(self):
        await self._never_answer("absolute")
        return self.absolute

    async def request_reference_space(self, kind):
        await self._never_answer("reference_space")
        if isinstance(self.reference_space, Exception):
            raise self.reference_space
        return self.reference_space

    def has_motion_sensor(self):
        return self.motion_sensor

    def has_orientation_sensor(self):
        return self.orientation_sensor

    async def request_motion_permission(self):
        self.permission_requests += 1
        if self.permission_delay:
            await asyncio.sleep(self.permission_delay)
        if isinstance(self.permission, Exception):
            raise self.permission
        return self.permission

    def subscribe_acceleration(self, callback):
        self.acceleration_callbacks.append(callback)
        return CallbackSubscription(
            lambda: self.acceleration_callbacks.remove(callback), "acceleration"
        )

    def subscribe_pointer_drag(self, callback):
        self.pointer_callbacks.append(callback)
        return CallbackSubscription(
            lambda: self.pointer_callbacks.remove(callback), "pointer"
        )

    def emit_acceleration(self, sample):
        for callback in list(self.acceleration_callbacks):
            callback(sample)

    def emit_pointer(self, event):
        for callback in list(self.pointer_callbacks):
            callback(event)


class RecordingRenderer:
    def __init__(self):
        self.markers = []
        self.segments = []

    def draw_marker(self, position, style):
        self.markers.append((position, style))
        return f"marker-{len(self.markers) - 1}"

    def draw_segment(self, start, end, style):
        self.segments.append((start, end, style))
        return f"segment-{len(self.segments) - 1}"


class ScriptedSource:
    """Position source returning a fixed position per call"""

    kind = "scripted"

    def __init__(self, positions):
        self.positions = list(positions)
        self.position = Vector3.zero()

    def current_position(self):
        if self.positions:
            self.position = self.positions.pop(0)
        return self.position

    def tick(self, now_ms):
        pass


@pytest.fixture
def settings():
    return TrailSettings()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def platform():
    return FakePlatform()

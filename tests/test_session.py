import asyncio

import pytest

from conftest import FakePlatform, FakeReferenceSpace

from spatial_trail import (
    AccelerationSample, ConfigurationError, PermissionState, PointerEvent,
    PointerKind, TrailSession, TrailSettings, Vector3
)


def test_dead_reckoning_session_records_trail(renderer):
    platform = FakePlatform()
    session = TrailSession(platform, renderer, TrailSettings())
    result = asyncio.run(session.start())
    assert result.kind == "dead_reckoning"
    assert len(platform.acceleration_callbacks) == 1

    session.tick(0)
    assert len(renderer.markers) == 1

    platform.emit_acceleration(AccelerationSample(0.0, 0.0, 0.0, 0.0))
    platform.emit_acceleration(AccelerationSample(20.0, 9.8, 0.0, 100.0))
    for t in range(16, 400, 16):
        session.tick(t)

    assert len(renderer.markers) >= 2
    assert len(renderer.segments) == len(renderer.markers) - 1

    status = session.get_status()
    assert status['source'] == "dead_reckoning"
    assert status['capabilities']['has_motion_sensor']
    assert status['dead_reckoning']['metrics']['samples_accepted'] == 1


def test_reset_rezeroes_without_renegotiating(renderer):
    platform = FakePlatform()
    session = TrailSession(platform, renderer)
    asyncio.run(session.start())
    platform.emit_acceleration(AccelerationSample(0.0, 0.0, 0.0, 0.0))
    platform.emit_acceleration(AccelerationSample(5.0, 0.0, 5.0, 200.0))
    session.tick(0)

    assert session.reset()
    assert session.source.current_position() == Vector3.zero()
    assert platform.permission_requests == 1


def test_start_runs_once(renderer):
    session = TrailSession(FakePlatform(), renderer)
    asyncio.run(session.start())
    with pytest.raises(ConfigurationError):
        asyncio.run(session.start())


def test_drag_session_and_close(renderer):
    messages = []
    platform = FakePlatform(permission=PermissionState.DENIED)
    session = TrailSession(platform, renderer, status=messages.append)
    result = asyncio.run(session.start())
    assert result.kind == "drag"
    assert messages

    session.tick(0)
    platform.emit_pointer(PointerEvent(PointerKind.DOWN, 1, 100, 100))
    platform.emit_pointer(PointerEvent(PointerKind.MOVE, 1, 110, 130))
    session.tick(200)
    assert renderer.markers[-1][0].x == pytest.approx(0.1)
    assert renderer.markers[-1][0].z == pytest.approx(0.3)
    assert not session.reset()

    session.close()
    session.close()
    assert platform.pointer_callbacks == []
    session.tick(400)
    assert len(renderer.markers) == 2


def test_absolute_session_follows_reference_space(renderer):
    space = FakeReferenceSpace([Vector3(0.0, 1.6, 0.0), Vector3(0.0, 1.6, -1.0)])
    session = TrailSession(FakePlatform(absolute=True, reference_space=space), renderer)
    asyncio.run(session.start())
    session.tick(0)
    session.tick(200)
    positions = [marker[0] for marker in renderer.markers]
    assert positions == [Vector3(0.0, 1.6, 0.0), Vector3(0.0, 1.6, -1.0)]


def test_tick_before_start_is_ignored(renderer):
    session = TrailSession(FakePlatform(), renderer)
    session.tick(0)
    assert renderer.markers == []
    assert session.get_status()['started'] is False


def test_invalid_environment_settings_raise_configuration_error(renderer, monkeypatch):
    monkeypatch.setenv("TRAIL_DAMPING", "2.5")
    with pytest.raises(ConfigurationError):
        TrailSession(FakePlatform(), renderer)

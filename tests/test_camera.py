import pytest

from painter3d.camera import Camera, clamp_pitch


@pytest.mark.parametrize("value", [-1e9, -180.0, -90.0, -45.5, 0.0, 12.0, 90.0, 91.0, 1e9])
def test_clamp_pitch_range_and_idempotence(value):
    once = clamp_pitch(value)
    assert -90.0 <= once <= 90.0
    assert clamp_pitch(once) == once


def test_clamp_pitch_custom_limit():
    assert clamp_pitch(50.0, limit=45.0) == 45.0
    assert clamp_pitch(-50.0, limit=45.0) == -45.0


def test_look_clamps_pitch_but_not_yaw():
    cam = Camera()
    for _ in range(100):
        cam.look(10.0, 10.0)
    assert cam.rx == 90.0
    assert cam.ry == 1000.0


def test_snapshot_is_independent_copy():
    cam = Camera(x=1, y=2, z=3, rx=4, ry=5, rz=6, fov=70)
    snap = cam.snapshot()
    cam.x = 100.0
    cam.ry = -5.0
    assert snap == Camera(x=1, y=2, z=3, rx=4, ry=5, rz=6, fov=70)


def test_position_and_rotation():
    cam = Camera(x=1, y=2, z=3, rx=4, ry=5, rz=6)
    assert cam.position == (1, 2, 3)
    assert cam.rotation == (4, 5, 6)


@pytest.mark.parametrize("fov", [0.0, -10.0, 180.0, 270.0, float("nan")])
def test_camera_rejects_unusable_fov(fov):
    with pytest.raises(ValueError):
        Camera(fov=fov)


def test_fov_assignment_is_checked():
    cam = Camera(fov=60.0)
    with pytest.raises(ValueError):
        cam.fov = 0.0
    assert cam.fov == 60.0
    cam.fov = 179.5
    assert cam.snapshot().fov == 179.5

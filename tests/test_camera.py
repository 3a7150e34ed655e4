from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from engine.camera import MAX_PITCH, Camera
from engine.math3d import Mat4, Vec3


def test_default_forward_is_minus_z() -> None:
    camera = Camera()
    assert camera.forward == Vec3(0.0, 0.0, -1.0)


def test_projection_is_built_once_from_lens_settings() -> None:
    camera = Camera(fov=math.pi / 3, aspect=16 / 9, near=0.5, far=50.0)
    expected = Mat4.perspective(math.pi / 3, 16 / 9, 0.5, 50.0)
    assert camera.projection_matrix.values == expected.values
    camera.position = Vec3(3.0, 0.0, 0.0)
    assert camera.projection_matrix.values == expected.values


def test_pitch_clamps_exactly_at_limit() -> None:
    camera = Camera()
    for _ in range(20):
        camera.update_orientation(0.0, 10000.0, 0.003)
        assert camera.pitch >= -MAX_PITCH
    assert camera.pitch == -MAX_PITCH

    for _ in range(20):
        camera.update_orientation(0.0, -10000.0, 0.003)
    assert camera.pitch == MAX_PITCH
    assert MAX_PITCH < math.pi / 2


def test_mouse_down_looks_down_and_right_turns_right() -> None:
    camera = Camera()
    camera.update_orientation(100.0, 50.0, 0.003)
    assert camera.yaw == pytest.approx(0.3)
    assert camera.pitch == pytest.approx(-0.15)
    assert camera.forward.x > 0.0
    assert camera.forward.y < 0.0


def test_forward_is_unit_length() -> None:
    camera = Camera()
    camera.yaw = 1.1
    camera.pitch = -0.7
    assert camera.forward.length() == pytest.approx(1.0)


def test_quarter_yaw_faces_plus_x() -> None:
    camera = Camera()
    camera.yaw = math.pi / 2
    assert camera.forward.x == pytest.approx(1.0)
    assert camera.forward.z == pytest.approx(0.0, abs=1e-12)


def test_view_matrix_tracks_position() -> None:
    camera = Camera(Vec3(0.0, 0.0, 5.0))
    camera.position = Vec3(2.0, 1.0, -3.0)
    origin = camera.view_matrix.transform_point(camera.position)
    assert origin.length() == pytest.approx(0.0, abs=1e-12)


def test_diagonal_movement_is_not_faster() -> None:
    camera = Camera()
    step = camera.movement_delta(1.0, 1.0, speed=1.0, delta=1.0)
    assert step.length() == pytest.approx(1.0)
    assert step.x == pytest.approx(math.sqrt(0.5))
    assert step.z == pytest.approx(-math.sqrt(0.5))
    assert step.y == 0.0


def test_movement_scales_with_speed_and_delta() -> None:
    camera = Camera()
    step = camera.movement_delta(1.0, 0.0, speed=2.0, delta=0.25)
    assert step.z == pytest.approx(-0.5)
    assert camera.movement_delta(0.0, 0.0, speed=2.0, delta=0.25) == Vec3(0.0, 0.0, 0.0)


def test_strafe_right_follows_yaw() -> None:
    camera = Camera()
    camera.yaw = math.pi / 2
    step = camera.movement_delta(0.0, 1.0, speed=1.0, delta=1.0)
    # Facing +X, right is +Z.
    assert step.x == pytest.approx(0.0, abs=1e-12)
    assert step.z == pytest.approx(1.0)
    assert camera.right().z == pytest.approx(1.0)


def test_movement_ignores_pitch() -> None:
    camera = Camera()
    camera.pitch = -1.2
    step = camera.movement_delta(1.0, 0.0, speed=1.0, delta=1.0)
    assert step.y == 0.0
    assert step.length() == pytest.approx(1.0)

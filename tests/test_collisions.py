from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from cubes.player import Player
from engine.camera import Camera
from engine.ecs import GameObject, Transform
from engine.math3d import Vec3
from engine.physics import (
    AABB,
    CollisionResponse,
    camera_collides,
    find_blocking_object,
    resolve_axis_move,
)


def _box(
    x: float,
    y: float,
    z: float,
    scale: Vec3 = Vec3(1.0, 1.0, 1.0),
    response: CollisionResponse = CollisionResponse.BLOCK,
    is_light: bool = False,
) -> GameObject:
    return GameObject(
        transform=Transform(position=Vec3(x, y, z), scale=scale),
        collision_response=response,
        is_light=is_light,
    )


def test_unit_cube_blocks_within_padded_half_extent() -> None:
    objects = [_box(0.0, 0.0, 0.0)]
    assert camera_collides(0.69, 0.0, 0.0, objects)
    assert not camera_collides(0.71, 0.0, 0.0, objects)
    assert camera_collides(0.0, -0.69, 0.0, objects)
    assert not camera_collides(0.0, 0.0, 0.71, objects)


def test_camera_height_is_part_of_the_test() -> None:
    objects = [_box(0.0, 0.0, 0.0)]
    assert camera_collides(0.0, 0.0, 0.69, objects)
    assert not camera_collides(0.0, 0.0, 0.71, objects)


def test_scale_widens_the_box() -> None:
    objects = [_box(0.0, 0.0, 0.0, scale=Vec3(3.0, 1.0, 1.0))]
    assert camera_collides(1.65, 0.0, 0.0, objects)
    assert not camera_collides(1.75, 0.0, 0.0, objects)


def test_light_marker_never_blocks() -> None:
    light = _box(0.0, 0.0, 0.0, is_light=True)
    assert find_blocking_object(0.0, 0.0, 0.0, [light]) is None


def test_first_hit_in_order_wins() -> None:
    first = _box(0.0, 0.0, 0.0)
    second = _box(0.3, 0.0, 0.0)
    assert find_blocking_object(0.2, 0.0, 0.0, [first, second]) is first
    assert find_blocking_object(0.2, 0.0, 0.0, [second, first]) is second


def test_aabb_touching_faces_do_not_overlap() -> None:
    a = AABB.around(Vec3(0.0, 0.0, 0.0), Vec3(0.5, 0.5, 0.5))
    b = AABB.around(Vec3(1.0, 0.0, 0.0), Vec3(0.5, 0.5, 0.5))
    c = AABB.around(Vec3(0.9, 0.0, 0.0), Vec3(0.5, 0.5, 0.5))
    assert not a.overlaps(b)
    assert a.overlaps(c)
    assert a.contains(Vec3(0.5, 0.5, 0.5))


def test_blocked_axis_is_rejected_while_other_axis_slides() -> None:
    wall = _box(1.0, 0.0, 0.0, scale=Vec3(1.0, 1.0, 10.0))
    camera = Camera(Vec3(0.25, 0.0, 0.0))
    player = Player(camera, radius=0.2)

    player.apply_step(Vec3(0.1, 0.0, -0.1), [wall])

    assert camera.position.x == pytest.approx(0.25)
    assert camera.position.z == pytest.approx(-0.1)


def test_free_move_commits_both_axes() -> None:
    camera = Camera(Vec3(0.0, 0.0, 0.0))
    player = Player(camera)
    player.apply_step(Vec3(0.1, 0.0, -0.2), [_box(5.0, 0.0, 5.0)])
    assert camera.position.x == pytest.approx(0.1)
    assert camera.position.z == pytest.approx(-0.2)


def test_push_moves_the_object_and_the_camera() -> None:
    crate = _box(1.0, 0.0, 0.0, response=CollisionResponse.PUSH)
    result = resolve_axis_move(Vec3(0.25, 0.0, 0.0), Vec3(0.1, 0.0, 0.0), [crate])

    assert result.moved
    assert result.pushed
    assert result.hit is crate
    assert crate.transform.position.x == pytest.approx(1.1)
    assert crate.transform.model_matrix[12] == pytest.approx(1.1)


def test_push_into_a_wall_is_blocked() -> None:
    crate = _box(1.0, 0.0, 0.0, response=CollisionResponse.PUSH)
    wall = _box(2.05, 0.0, 0.0)
    result = resolve_axis_move(Vec3(0.25, 0.0, 0.0), Vec3(0.1, 0.0, 0.0), [crate, wall])

    assert not result.moved
    assert not result.pushed
    assert crate.transform.position.x == 1.0


def test_block_response_leaves_object_alone() -> None:
    wall = _box(1.0, 0.0, 0.0)
    result = resolve_axis_move(Vec3(0.25, 0.0, 0.0), Vec3(0.1, 0.0, 0.0), [wall])
    assert not result.moved
    assert result.hit is wall
    assert wall.transform.position.x == 1.0


def test_player_pushes_crate_along_x() -> None:
    crate = _box(1.0, 0.0, 0.0, response=CollisionResponse.PUSH)
    camera = Camera(Vec3(0.25, 0.0, 0.0))
    Player(camera).apply_step(Vec3(0.1, 0.0, 0.0), [crate])
    assert camera.position.x == pytest.approx(0.35)
    assert crate.transform.position.x == pytest.approx(1.1)

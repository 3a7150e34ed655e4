from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from .math3d import Vec3

if TYPE_CHECKING:
    from .ecs import GameObject


CAMERA_RADIUS = 0.2


class CollisionResponse(Enum):
    """What happens when the camera walks into an object."""

    BLOCK = "block"
    PUSH = "push"


@dataclass
class AABB:
    min: Vec3
    max: Vec3

    @staticmethod
    def around(center: Vec3, half: Vec3) -> "AABB":
        return AABB(center - half, center + half)

    def contains(self, point: Vec3) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )

    def overlaps(self, other: "AABB") -> bool:
        # Strict: boxes that only share a face do not overlap.
        return (
            self.min.x < other.max.x and self.max.x > other.min.x
            and self.min.y < other.max.y and self.max.y > other.min.y
            and self.min.z < other.max.z and self.max.z > other.min.z
        )


@dataclass
class MoveResult:
    moved: bool
    hit: Optional["GameObject"] = None
    pushed: bool = False


def object_bounds(obj: "GameObject", padding: float = 0.0, position: Optional[Vec3] = None) -> AABB:
    """World-space box of a unit cube scaled by the object's transform."""
    t = obj.transform
    center = position if position is not None else t.position
    half = Vec3(
        0.5 * t.scale.x + padding,
        0.5 * t.scale.y + padding,
        0.5 * t.scale.z + padding,
    )
    return AABB.around(center, half)


def find_blocking_object(
    x: float,
    z: float,
    camera_y: float,
    objects: Iterable["GameObject"],
    radius: float = CAMERA_RADIUS,
) -> Optional["GameObject"]:
    """First non-light object whose padded box contains (x, camera_y, z), if any."""
    point = Vec3(x, camera_y, z)
    for obj in objects:
        if obj.is_light:
            continue
        if object_bounds(obj, radius).contains(point):
            return obj
    return None


def camera_collides(
    x: float,
    z: float,
    camera_y: float,
    objects: Iterable["GameObject"],
    radius: float = CAMERA_RADIUS,
) -> bool:
    return find_blocking_object(x, z, camera_y, objects, radius) is not None


def try_push(obj: "GameObject", delta: Vec3, objects: Iterable["GameObject"]) -> bool:
    """Shift ``obj`` by ``delta`` unless it would then overlap another solid object."""
    target = obj.transform.position + delta
    moved_box = object_bounds(obj, position=target)
    for other in objects:
        if other is obj or other.is_light:
            continue
        if moved_box.overlaps(object_bounds(other)):
            return False
    obj.transform.position = target
    return True


def resolve_axis_move(
    position: Vec3,
    delta: Vec3,
    objects: list["GameObject"],
    radius: float = CAMERA_RADIUS,
) -> MoveResult:
    """Test a single-axis camera move and apply the hit object's response.

    The camera itself is not touched; ``moved`` tells the caller whether to
    commit ``position + delta``.
    """
    candidate = position + delta
    hit = find_blocking_object(candidate.x, candidate.z, position.y, objects, radius)
    if hit is None:
        return MoveResult(moved=True)
    if hit.collision_response is not CollisionResponse.PUSH:
        return MoveResult(moved=False, hit=hit)

    previous = hit.transform.position
    if not try_push(hit, delta, objects):
        return MoveResult(moved=False, hit=hit)
    # The camera may still run into something standing beside the pushed box.
    if find_blocking_object(candidate.x, candidate.z, position.y, objects, radius) is not None:
        hit.transform.position = previous
        return MoveResult(moved=False, hit=hit)
    return MoveResult(moved=True, hit=hit, pushed=True)

from __future__ import annotations

import math
from typing import Optional

from .math3d import Mat4, Vec3, normalize

WORLD_UP = Vec3(0.0, 1.0, 0.0)

# Just short of straight up/down so look_at never gets forward parallel to up.
MAX_PITCH = math.pi / 2 - 0.01


class Camera:
    """First-person camera. Yaw and pitch are in radians.

    ``forward`` and ``view_matrix`` are rebuilt whenever position, yaw or
    pitch is assigned. The projection is fixed at construction.
    """

    def __init__(
        self,
        position: Optional[Vec3] = None,
        fov: float = math.pi / 4,
        aspect: float = 4.0 / 3.0,
        near: float = 0.1,
        far: float = 100.0,
    ) -> None:
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.projection_matrix = Mat4.perspective(fov, aspect, near, far)
        self.up = WORLD_UP

        self._position = position if position is not None else Vec3(0.0, 0.0, 5.0)
        self._yaw = 0.0
        self._pitch = 0.0
        self.forward = Vec3(0.0, 0.0, -1.0)
        self.view_matrix = Mat4.identity()
        self.recalculate_view_matrix()

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        self._position = value
        self.recalculate_view_matrix()

    @property
    def yaw(self) -> float:
        return self._yaw

    @yaw.setter
    def yaw(self, value: float) -> None:
        self._yaw = value
        self.recalculate_view_matrix()

    @property
    def pitch(self) -> float:
        return self._pitch

    @pitch.setter
    def pitch(self, value: float) -> None:
        self._pitch = max(-MAX_PITCH, min(MAX_PITCH, value))
        self.recalculate_view_matrix()

    def update_orientation(self, dx: float, dy: float, sensitivity: float) -> None:
        """Apply a mouse delta. Moving the mouse down (dy > 0) looks down."""
        self._yaw += dx * sensitivity
        self._pitch = max(-MAX_PITCH, min(MAX_PITCH, self._pitch - dy * sensitivity))
        self.recalculate_view_matrix()

    def recalculate_view_matrix(self) -> None:
        cos_pitch = math.cos(self._pitch)
        self.forward = Vec3(
            cos_pitch * math.sin(self._yaw),
            math.sin(self._pitch),
            -cos_pitch * math.cos(self._yaw),
        )
        self.view_matrix = Mat4.look_at(self._position, self._position + self.forward, self.up)

    def right(self) -> Vec3:
        return Vec3(math.cos(self._yaw), 0.0, math.sin(self._yaw))

    def movement_delta(self, move_forward: float, move_right: float, speed: float, delta: float) -> Vec3:
        """World-space XZ displacement for this frame's WASD input.

        The combined direction is normalized so diagonals are not faster.
        Y is always zero.
        """
        right = self.right()
        dir_x = math.sin(self._yaw) * move_forward + right.x * move_right
        dir_z = -math.cos(self._yaw) * move_forward + right.z * move_right
        direction = normalize(dir_x, 0.0, dir_z)
        return direction * (speed * delta)

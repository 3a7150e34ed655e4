from __future__ import annotations

from typing import Optional

from .math3d import Mat4, Vec3
from .physics import CollisionResponse


class Transform:
    """Position, yaw and scale of one object plus the derived model matrix.

    Vec3 is immutable, so the only way to change a transform is to assign one
    of its properties, and every assignment rebuilds ``model_matrix``.
    """

    def __init__(
        self,
        position: Optional[Vec3] = None,
        rotation: Optional[Vec3] = None,
        scale: Optional[Vec3] = None,
    ) -> None:
        self._position = position if position is not None else Vec3(0.0, 0.0, 0.0)
        # Only rotation.y (yaw about world Y) is used.
        self._rotation = rotation if rotation is not None else Vec3(0.0, 0.0, 0.0)
        self._scale = scale if scale is not None else Vec3(1.0, 1.0, 1.0)
        self._model_matrix = Mat4.identity()
        self.recalculate_model_matrix()

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        self._position = value
        self.recalculate_model_matrix()

    @property
    def rotation(self) -> Vec3:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Vec3) -> None:
        self._rotation = value
        self.recalculate_model_matrix()

    @property
    def scale(self) -> Vec3:
        return self._scale

    @scale.setter
    def scale(self, value: Vec3) -> None:
        self._scale = value
        self.recalculate_model_matrix()

    @property
    def model_matrix(self) -> Mat4:
        return self._model_matrix

    def recalculate_model_matrix(self) -> None:
        rot_scale = Mat4.rotation_y(self._rotation.y) @ Mat4.scale(self._scale)
        self._model_matrix = Mat4.translation(self._position) @ rot_scale


class GameObject:
    """A drawable box in the scene.

    ``mesh`` and ``material`` are shared with other objects and never owned.
    The light marker (``is_light``) is drawn unlit and ignored by collision.
    """

    def __init__(
        self,
        mesh: object = None,
        material: object = None,
        transform: Optional[Transform] = None,
        is_light: bool = False,
        collision_response: CollisionResponse = CollisionResponse.BLOCK,
        spin_speed: float = 0.0,
        name: str = "",
    ) -> None:
        self.transform = transform if transform is not None else Transform()
        self.mesh = mesh
        self.material = material
        self.is_light = is_light
        self.collision_response = collision_response
        # radians per second about world Y
        self.spin_speed = spin_speed
        self.name = name

    def update(self, delta: float) -> None:
        if self.spin_speed:
            rot = self.transform.rotation
            self.transform.rotation = Vec3(rot.x, rot.y + self.spin_speed * delta, rot.z)
        self.transform.recalculate_model_matrix()

    def __repr__(self) -> str:
        return f"GameObject(name={self.name!r}, position={self.transform.position!r}, is_light={self.is_light})"

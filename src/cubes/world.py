from __future__ import annotations

from typing import List, Optional

from engine.camera import Camera
from engine.ecs import GameObject, Transform
from engine.logger import EngineLogger
from engine.math3d import Vec3
from engine.physics import CollisionResponse
from engine.scene import Scene
from engine.state import RenderCommand, RenderItem

from . import config
from .config import Settings
from .player import InputSource, Player


class World:
    """The demo scene, its camera, and the per-frame update."""

    def __init__(
        self,
        settings: Settings,
        aspect: float,
        mesh: object = None,
        material: object = None,
        logger: Optional[EngineLogger] = None,
    ) -> None:
        self.settings = settings
        self.mesh = mesh
        self.material = material
        self.camera = Camera(
            Vec3(*config.CAMERA_START),
            fov=settings.fov,
            aspect=aspect,
            near=settings.near,
            far=settings.far,
        )
        self.player = Player(
            self.camera,
            move_speed=settings.move_speed,
            sensitivity=settings.mouse_sensitivity,
            radius=settings.camera_radius,
            log=logger.channel("collision") if logger else None,
        )
        self._camera_log = logger.channel("camera") if logger else None
        self.scene = Scene()
        self.rotating_cube = self._spawn_rotating_cube()
        self._spawn_light()
        self._spawn_light_ring()

    @property
    def light(self) -> Optional[GameObject]:
        return self.scene.light()

    def _spawn(self, position: Vec3, **kwargs) -> GameObject:
        obj = GameObject(self.mesh, self.material, Transform(position=position), **kwargs)
        return self.scene.add(obj)

    def _spawn_rotating_cube(self) -> GameObject:
        response = CollisionResponse.PUSH if self.settings.pushable_center_cube else CollisionResponse.BLOCK
        return self._spawn(
            Vec3(*config.ROTATING_CUBE_POSITION),
            collision_response=response,
            spin_speed=self.settings.cube_spin_speed,
            name="rotating_cube",
        )

    def _spawn_light(self) -> GameObject:
        light = self._spawn(Vec3(*config.LIGHT_POSITION), is_light=True, name="light")
        s = config.LIGHT_SCALE
        light.transform.scale = Vec3(s, s, s)
        return light

    def _spawn_light_ring(self) -> List[GameObject]:
        center = self.light.transform.position
        return [
            self._spawn(Vec3(center.x + ox, 0.0, center.z + oz), name=f"ring_{i}")
            for i, (ox, oz) in enumerate(config.LIGHT_RING_OFFSETS)
        ]

    def tick(self, delta: float, input_state: InputSource) -> RenderCommand:
        """Advance one frame and describe what to draw.

        Order matters: the camera must finish moving before the view matrix
        is read for the light position.
        """
        self.player.look(input_state)
        self.player.move(delta, input_state, self.scene.colliders())
        self.camera.recalculate_view_matrix()
        self.scene.update(delta)

        light_view = self.camera.view_matrix.transform_point(self.light.transform.position)
        if self._camera_log:
            self._camera_log.debug(
                "camera pos=%s yaw=%.3f pitch=%.3f", self.camera.position, self.camera.yaw, self.camera.pitch
            )

        items = [
            RenderItem(mesh=obj.mesh, material=obj.material, model=obj.transform.model_matrix, is_light=obj.is_light)
            for obj in self.scene
        ]
        return RenderCommand(
            view=self.camera.view_matrix,
            projection=self.camera.projection_matrix,
            light_view_position=light_view,
            items=items,
        )


def initialize(
    settings: Settings,
    aspect: Optional[float] = None,
    mesh: object = None,
    material: object = None,
    logger: Optional[EngineLogger] = None,
) -> World:
    """Validate settings and build the running demo world."""
    settings.validate()
    return World(settings, aspect if aspect is not None else settings.aspect, mesh, material, logger)

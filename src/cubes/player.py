from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

import pygame

from engine.camera import Camera
from engine.ecs import GameObject
from engine.logger import ChannelLogger
from engine.math3d import Vec3
from engine.physics import resolve_axis_move

from . import config


class InputSource(Protocol):
    pointer_captured: bool

    def key_state(self, key: int) -> bool: ...

    def consume_mouse_delta(self) -> Tuple[float, float]: ...


class Player:
    """Mouse look and planar WASD movement for the camera."""

    def __init__(
        self,
        camera: Camera,
        move_speed: float = config.MOVE_SPEED,
        sensitivity: float = config.MOUSE_SENSITIVITY,
        radius: float = config.CAMERA_RADIUS,
        log: Optional[ChannelLogger] = None,
    ) -> None:
        self.camera = camera
        self.move_speed = move_speed
        self.sensitivity = sensitivity
        self.radius = radius
        self._log = log

    def look(self, input_state: InputSource) -> None:
        # Always consume so motion from one frame is never applied twice.
        dx, dy = input_state.consume_mouse_delta()
        if not input_state.pointer_captured:
            return
        if dx or dy:
            self.camera.update_orientation(dx, dy, self.sensitivity)

    @staticmethod
    def movement_input(input_state: InputSource) -> Tuple[float, float]:
        move_forward = 0.0
        move_right = 0.0
        if input_state.key_state(pygame.K_w):
            move_forward += 1.0
        if input_state.key_state(pygame.K_s):
            move_forward -= 1.0
        if input_state.key_state(pygame.K_d):
            move_right += 1.0
        if input_state.key_state(pygame.K_a):
            move_right -= 1.0
        return move_forward, move_right

    def move(self, delta: float, input_state: InputSource, colliders: List[GameObject]) -> None:
        move_forward, move_right = self.movement_input(input_state)
        if move_forward == 0.0 and move_right == 0.0:
            return
        step = self.camera.movement_delta(move_forward, move_right, self.move_speed, delta)
        self.apply_step(step, colliders)

    def apply_step(self, step: Vec3, colliders: List[GameObject]) -> None:
        """Commit ``step`` one axis at a time (X, then Z) so the camera slides along walls."""
        if step.x != 0.0:
            result = resolve_axis_move(self.camera.position, Vec3(step.x, 0.0, 0.0), colliders, self.radius)
            self._report(result, "x")
            if result.moved:
                pos = self.camera.position
                self.camera.position = Vec3(pos.x + step.x, pos.y, pos.z)
        if step.z != 0.0:
            result = resolve_axis_move(self.camera.position, Vec3(0.0, 0.0, step.z), colliders, self.radius)
            self._report(result, "z")
            if result.moved:
                pos = self.camera.position
                self.camera.position = Vec3(pos.x, pos.y, pos.z + step.z)

    def _report(self, result, axis: str) -> None:
        if self._log is None or result.hit is None:
            return
        if result.pushed:
            self._log.debug("Pushed %r along %s", result.hit, axis)
        else:
            self._log.debug("Blocked by %r along %s", result.hit, axis)

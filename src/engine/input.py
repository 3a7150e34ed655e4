from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pygame

from .logger import ChannelLogger


class InputState:
    """Keyboard state plus mouse motion accumulated while the pointer is captured.

    Left click captures the pointer, Escape releases it. Mouse motion is only
    recorded while captured and is handed out once by ``consume_mouse_delta``.
    """

    def __init__(self, log: Optional[ChannelLogger] = None) -> None:
        self._log = log
        self._mouse_dx = 0.0
        self._mouse_dy = 0.0
        self.keys: Optional[Sequence[bool]] = None
        self.pointer_captured = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self.pointer_captured:
                self.capture()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            if self.pointer_captured:
                self.release()
        elif event.type == pygame.MOUSEMOTION and self.pointer_captured:
            dx, dy = event.rel
            self._mouse_dx += dx
            self._mouse_dy += dy

    def update(self) -> None:
        self.keys = pygame.key.get_pressed()

    def capture(self) -> None:
        self.pointer_captured = True
        self._set_grab(True)
        # Discard the jump from wherever the cursor was before the grab.
        self._mouse_dx = 0.0
        self._mouse_dy = 0.0
        if self._log:
            self._log.info("Pointer captured")

    def release(self) -> None:
        self.pointer_captured = False
        self._set_grab(False)
        self._mouse_dx = 0.0
        self._mouse_dy = 0.0
        if self._log:
            self._log.info("Pointer released")

    def key_state(self, key: int) -> bool:
        if self.keys is None:
            return False
        return bool(self.keys[key])

    def consume_mouse_delta(self) -> Tuple[float, float]:
        delta = (self._mouse_dx, self._mouse_dy)
        self._mouse_dx = 0.0
        self._mouse_dy = 0.0
        return delta

    @staticmethod
    def _set_grab(grabbed: bool) -> None:
        # Without a window there is nothing to grab.
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.event.set_grab(grabbed)
            pygame.mouse.set_visible(not grabbed)
            if grabbed:
                # Flush the relative motion accumulated before the grab.
                pygame.mouse.get_rel()

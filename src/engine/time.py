from __future__ import annotations

from typing import Optional

import pygame


class Time:
    """Frame delta from successive timestamps, in seconds.

    The first tick reports a delta of zero.
    """

    def __init__(self) -> None:
        self.last: Optional[float] = None
        self.delta = 0.0
        self.fps = 0.0

    def tick(self, now: Optional[float] = None) -> float:
        if now is None:
            now = pygame.time.get_ticks() / 1000.0
        if self.last is None:
            self.last = now
        self.delta = now - self.last
        self.last = now
        if self.delta > 0:
            self.fps = 1.0 / self.delta
        return self.delta

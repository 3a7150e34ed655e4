from __future__ import annotations

from typing import Optional

import pygame

from .input import InputState
from .logger import EngineLogger
from .renderer import Renderer
from .time import Time


class App:
    """Window, OpenGL context, event pump and frame timer.

    Context creation failures propagate as ``pygame.error`` and shader
    failures as ``ShaderError``; both are fatal.
    """

    def __init__(self, width: int, height: int, title: str, logger: Optional[EngineLogger] = None) -> None:
        pygame.init()

        # Must be set BEFORE creating the OpenGL context.
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE)
        pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)

        pygame.display.set_mode((width, height), pygame.OPENGL | pygame.DOUBLEBUF)
        pygame.display.set_caption(title)
        self.title = title
        self.width = width
        self.height = height

        render_log = logger.channel("render") if logger else None
        input_log = logger.channel("input") if logger else None
        if render_log:
            render_log.info("Created %dx%d OpenGL window", width, height)
        self.renderer = Renderer(render_log)
        self.renderer.resize(width, height)
        self.time = Time()
        self.input = InputState(input_log)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def poll(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            self.input.handle_event(event)
        self.input.update()
        return True

    def set_caption(self, text: str) -> None:
        pygame.display.set_caption(text)

    def swap(self) -> None:
        pygame.display.flip()

    def shutdown(self) -> None:
        pygame.quit()

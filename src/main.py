from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pygame

from cubes import config
from cubes.config import Settings
from cubes.world import initialize
from engine.app import App
from engine.logger import EngineLogger
from engine.mesh import create_cube
from engine.shader import ShaderError


def main(settings_path: Optional[Path] = None) -> int:
    try:
        settings = Settings.load(settings_path)
    except ValueError as exc:
        EngineLogger().root.error("Invalid settings.json: %s", exc)
        return 1

    logger = EngineLogger(settings.log_level, settings.log_channels)
    log = logger.root

    try:
        settings.validate()
        app = App(settings.window_width, settings.window_height, config.WINDOW_TITLE, logger)
    except (ValueError, ShaderError, pygame.error) as exc:
        log.error("Startup failed: %s", exc)
        pygame.quit()
        return 1

    cube_mesh = create_cube(1.0)
    world = initialize(settings, app.aspect, mesh=cube_mesh, material=app.renderer.material, logger=logger)
    log.info("Scene ready with %d objects; click to capture the mouse, Esc to release", len(world.scene))

    caption_timer = 0.0
    running = True
    while running:
        running = app.poll()
        delta = app.time.tick()

        command = world.tick(delta, app.input)
        app.renderer.render(command)

        caption_timer += delta
        if caption_timer >= 1.0:
            caption_timer = 0.0
            app.set_caption(f"{config.WINDOW_TITLE} - {app.time.fps:.0f} fps")

        app.swap()

    cube_mesh.destroy()
    app.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Demo tuning constants and the optional settings.json overrides."""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from engine.logger import DEFAULT_CHANNELS

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Cubes"

FOV = math.pi / 4
NEAR = 0.1
FAR = 100.0

MOUSE_SENSITIVITY = 0.003
MOVE_SPEED = 2.0  # units per second
CAMERA_RADIUS = 0.2
CUBE_SPIN_SPEED = 0.5  # radians per second

CAMERA_START = (0.0, 0.0, 5.0)
ROTATING_CUBE_POSITION = (0.0, 0.0, -5.0)
LIGHT_POSITION = (2.0, 0.0, -3.0)
LIGHT_SCALE = 0.2
# XZ offsets of the ring of cubes around the light.
LIGHT_RING_OFFSETS = (
    (3.0, 0.0),
    (-4.0, 0.0),
    (0.0, 4.0),
    (0.0, -4.0),
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
)

# settings.json key -> Settings field
_KEYS = {
    "windowWidth": "window_width",
    "windowHeight": "window_height",
    "fov": "fov",
    "near": "near",
    "far": "far",
    "mouseSensitivity": "mouse_sensitivity",
    "moveSpeed": "move_speed",
    "cameraRadius": "camera_radius",
    "cubeSpinSpeed": "cube_spin_speed",
    "pushableCenterCube": "pushable_center_cube",
}


def _checked(key: str, value: object, default: object) -> object:
    """``value`` converted to the type of ``default``, or ``ValueError``.

    JSON booleans are also ints in Python, so they are only accepted for
    boolean fields.
    """
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(default, int):
            if float(value).is_integer():
                return int(value)
        else:
            return float(value)
    raise ValueError(f"{key}: expected {type(default).__name__}, got {value!r}")


@dataclass
class Settings:
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    fov: float = FOV
    near: float = NEAR
    far: float = FAR
    mouse_sensitivity: float = MOUSE_SENSITIVITY
    move_speed: float = MOVE_SPEED
    camera_radius: float = CAMERA_RADIUS
    cube_spin_speed: float = CUBE_SPIN_SPEED
    pushable_center_cube: bool = True
    log_level: int = logging.INFO
    log_channels: Dict[str, bool] = field(default_factory=lambda: DEFAULT_CHANNELS.copy())

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Read settings.json.

        A missing or malformed file yields the defaults. A well-formed file
        with a value of the wrong type raises ``ValueError``.
        """
        path = path or Path("settings.json")
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()

        settings = cls()
        for key, attr in _KEYS.items():
            if key in data:
                setattr(settings, attr, _checked(key, data[key], getattr(settings, attr)))

        if "logLevel" in data:
            level = getattr(logging, str(data["logLevel"]).upper(), None)
            # logging also exposes non-level names such as BASIC_FORMAT.
            if not isinstance(level, int) or isinstance(level, bool):
                raise ValueError(f"logLevel: unknown level {data['logLevel']!r}")
            settings.log_level = level

        channels = data.get("logChannels", {})
        if not isinstance(channels, dict):
            raise ValueError(f"logChannels must be an object, got {type(channels).__name__}")
        for name, enabled in channels.items():
            if not isinstance(enabled, bool):
                raise ValueError(f"logChannels.{name} must be true or false, got {enabled!r}")
            settings.log_channels[name] = enabled
        return settings

    @property
    def aspect(self) -> float:
        return self.window_width / self.window_height

    def validate(self) -> "Settings":
        """Reject values that would produce a degenerate projection or motion."""
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(f"window size must be positive, got {self.window_width}x{self.window_height}")
        if not 0.0 < self.fov < math.pi:
            raise ValueError(f"fov must be in (0, pi) radians, got {self.fov}")
        if self.near <= 0.0:
            raise ValueError(f"near plane must be positive, got {self.near}")
        if self.far <= self.near:
            raise ValueError(f"far plane ({self.far}) must be beyond near plane ({self.near})")
        if self.move_speed < 0.0 or self.mouse_sensitivity < 0.0 or self.camera_radius < 0.0:
            raise ValueError("speeds, sensitivity and camera radius must not be negative")
        return self

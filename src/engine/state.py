"""Per-frame render hand-off between the world update and the renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .math3d import Mat4, Vec3


@dataclass
class RenderItem:
    mesh: object
    material: object
    model: Mat4
    is_light: bool = False


@dataclass
class RenderCommand:
    """Everything the renderer needs for one frame, in draw order."""

    view: Mat4
    projection: Mat4
    light_view_position: Vec3
    items: List[RenderItem] = field(default_factory=list)

from __future__ import annotations

from typing import Iterator, List, Optional

from .ecs import GameObject


class Scene:
    """Ordered collection of game objects. Insertion order is draw order."""

    def __init__(self) -> None:
        self.game_objects: List[GameObject] = []

    def add(self, game_object: GameObject) -> GameObject:
        self.game_objects.append(game_object)
        return game_object

    def update(self, delta: float) -> None:
        for obj in self.game_objects:
            obj.update(delta)

    def colliders(self) -> List[GameObject]:
        return [obj for obj in self.game_objects if not obj.is_light]

    def light(self) -> Optional[GameObject]:
        for obj in self.game_objects:
            if obj.is_light:
                return obj
        return None

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.game_objects)

    def __len__(self) -> int:
        return len(self.game_objects)

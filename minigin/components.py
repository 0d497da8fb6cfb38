"""General-purpose components that move their owner."""

from __future__ import annotations

import math
from typing import Iterable

from .gameobject import Component, GameObject


class RotationComponent(Component):
    """Moves the owner in a circle around its parent's origin."""

    def __init__(
        self, owner: GameObject, radius: float, rotation_speed: float
    ) -> None:
        super().__init__(owner)
        self.radius = radius
        self.rotation_speed = rotation_speed
        self.angle = 0.0

    def update(self, delta_time: float) -> None:
        owner = self.owner
        if owner is None:
            return
        self.angle += self.rotation_speed * delta_time
        if self.angle >= 360.0:
            self.angle -= 360.0
        radians = math.radians(self.angle)
        owner.set_local_position(
            (self.radius * math.cos(radians), self.radius * math.sin(radians), 0.0)
        )


class TranslationComponent(Component):
    """Shifts the owner by an offset on request."""

    def translate(self, offset: Iterable[float]) -> None:
        """Set the owner's local position to its world position plus ``offset``."""
        owner = self.owner
        dx, dy, dz = offset
        x, y, z = owner.world_position
        owner.set_local_position((x + dx, y + dy, z + dz))
"""Health, frame-rate display, a damage command and the disc registry."""

from __future__ import annotations

from typing import ClassVar, Optional, Sequence

from ..commands import Command
from ..events import Event
from ..gameobject import Component, GameObject
from ..rendering_components import TextComponent

GridPos = tuple[int, int]


class HealthComponent(Component):
    """Counts lives and announces every change through ``on_health_changed``."""

    def __init__(self, owner: Optional[GameObject]) -> None:
        super().__init__(owner)
        self.on_health_changed = Event()
        self._lives = 3

    def take_damage(self) -> None:
        """Lose one life and notify subscribers."""
        self._lives -= 1
        self.on_health_changed()

    @property
    def lives(self) -> int:
        return self._lives


class FPSComponent(Component):
    """Measures frames per second and shows them in the owner's text component."""

    def __init__(self, owner: Optional[GameObject]) -> None:
        super().__init__(owner)
        self._fps = 0.0

    def update(self, delta_time: float) -> None:
        if delta_time > 0.0:
            self._fps = 1.0 / delta_time
        owner = self.owner
        if owner is not None:
            text = owner.get_component(TextComponent)
            if text is not None:
                text.set_text(f"{self._fps:.1f} FPS")

    @property
    def fps(self) -> float:
        return self._fps


class KillCommand(Command):
    """Takes one life from the health component of a game object."""

    def __init__(self, game_object: Optional[GameObject]) -> None:
        self._game_object = game_object

    def execute(self) -> None:
        if self._game_object is None:
            return
        health = self._game_object.get_component(HealthComponent)
        if health is not None:
            health.take_damage()


def _key(grid_pos: Sequence[int]) -> GridPos:
    x, y = grid_pos
    return (int(x), int(y))


class DiscManager:
    """Remembers which disc sits at which grid position."""

    _instance: ClassVar[Optional[DiscManager]] = None

    def __init__(self) -> None:
        self._discs: dict[GridPos, GameObject] = {}

    @classmethod
    def get_instance(cls) -> DiscManager:
        """Return the shared registry, creating it on first use."""
        if DiscManager._instance is None:
            DiscManager._instance = cls()
        return DiscManager._instance

    def register_disc(self, grid_pos: Sequence[int], disc: GameObject) -> None:
        """Place ``disc`` at ``grid_pos``, replacing any disc already there."""
        self._discs[_key(grid_pos)] = disc

    def get_disc_at(self, grid_pos: Sequence[int]) -> Optional[GameObject]:
        return self._discs.get(_key(grid_pos))

    @property
    def remaining_discs(self) -> int:
        return len(self._discs)

    def clear(self) -> None:
        self._discs.clear()
"""Scenes of game objects and the manager that switches between them."""

from __future__ import annotations

import logging
from typing import Optional

from .gameobject import GameObject
from .input import InputManager
from .rendering_components import TextComponent, TextureComponent
from .singleton import Singleton

logger = logging.getLogger(__name__)


class Scene:
    """A named collection of game objects updated and drawn together.

    Added objects join at the end of the next update; a clear request takes
    effect at the start of the next update and skips that frame.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._objects: list[GameObject] = []
        self._pending: list[GameObject] = []
        self._clear_requested = False

    @property
    def name(self) -> str:
        return self._name

    def add(self, game_object: GameObject) -> None:
        self._pending.append(game_object)

    def remove(self, game_object: GameObject) -> None:
        self._objects = [o for o in self._objects if o is not game_object]

    def remove_all(self) -> None:
        self._clear_requested = True

    def update(self, delta_time: float) -> None:
        if self._clear_requested:
            self._objects.clear()
            self._clear_requested = False
            return

        survivors = []
        for game_object in self._objects:
            if game_object.is_marked_for_destroy:
                continue
            game_object.update(delta_time)
            survivors.append(game_object)
        self._objects = survivors

        if self._pending:
            self._objects.extend(self._pending)
            self._pending = []

    def render(self) -> None:
        """Draw textured objects from lowest to highest depth, then text on top."""
        textured = []
        for game_object in self._objects:
            texture = game_object.get_component(TextureComponent)
            if texture is not None:
                textured.append((texture.depth, game_object))
        for _, game_object in sorted(textured, key=lambda pair: pair[0]):
            game_object.render()

        for game_object in self._objects:
            text = game_object.get_component(TextComponent)
            if text is not None:
                text.render()

    def render_ui(self) -> None:
        for game_object in self._objects:
            game_object.render_ui()

    @property
    def all_objects(self) -> list[GameObject]:
        return list(self._objects)


class SceneManager(Singleton):
    """Creates scenes and forwards frame work to the active one."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []
        self._active: Optional[Scene] = None

    def create_scene(self, name: str) -> Scene:
        """Create a scene called ``name``, replacing any scene of that name."""
        for scene in self._scenes:
            if scene.name == name:
                if self._active is scene:
                    self._active = None
                self._scenes.remove(scene)
                break

        InputManager.get_instance().clear_controller_commands()
        scene = Scene(name)
        self._scenes.append(scene)
        return scene

    def set_active_scene(self, name: str) -> None:
        """Activate the scene called ``name``; with no such scene none is active."""
        for scene in self._scenes:
            if scene.name == name:
                self._active = scene
                return
        logger.error("Scene '%s' not found!", name)
        self._active = None

    @property
    def active_scene(self) -> Optional[Scene]:
        return self._active

    def update(self, delta_time: float) -> None:
        if self._active is not None:
            self._active.update(delta_time)

    def render(self) -> None:
        if self._active is not None:
            self._active.render()

    def render_ui(self) -> None:
        if self._active is not None:
            self._active.render_ui()
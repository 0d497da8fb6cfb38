"""Textures, fonts and a cache that loads them from a data directory."""

from __future__ import annotations

import weakref
from pathlib import Path
from typing import Union

import pygame

from .singleton import Singleton

Color = tuple[int, int, int, int]


class ResourceError(RuntimeError):
    """A texture or font could not be loaded."""


class Texture2D:
    """An image ready to be drawn."""

    def __init__(self, surface: pygame.Surface) -> None:
        if surface is None:
            raise ValueError("texture surface must not be None")
        self.surface = surface

    @classmethod
    def from_file(cls, full_path: Union[str, Path]) -> Texture2D:
        """Load an image file; raise ResourceError if it cannot be read."""
        try:
            surface = pygame.image.load(str(full_path))
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load texture: {exc}") from exc
        return cls(surface)

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()


class Font:
    """A TrueType font at one point size."""

    def __init__(self, full_path: Union[str, Path], size: int) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font = pygame.font.Font(str(full_path), size)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load font: {exc}") from exc
        self.size = size

    def render(self, text: str, color: Color) -> Texture2D:
        """Render ``text`` antialiased in ``color`` as a texture."""
        try:
            surface = self._font.render(text, True, color)
        except pygame.error as exc:
            raise ResourceError(f"Render text failed: {exc}") from exc
        return Texture2D(surface)


def _drop_unused(cache: dict) -> None:
    for key in list(cache):
        ref = weakref.ref(cache.pop(key))
        survivor = ref()
        if survivor is not None:
            cache[key] = survivor
        survivor = None


class ResourceManager(Singleton):
    """Loads textures and fonts relative to a data directory and caches them.

    Textures are cached by file name, fonts by file name and size.
    """

    def __init__(self) -> None:
        self._data_path = Path()
        self._textures: dict[str, Texture2D] = {}
        self._fonts: dict[tuple[str, int], Font] = {}

    def init(self, data_path: Union[str, Path]) -> None:
        self._data_path = Path(data_path)
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise ResourceError(f"Failed to load support for fonts: {exc}") from exc

    def load_texture(self, file: str) -> Texture2D:
        full_path = self._data_path / file
        key = full_path.name
        if key not in self._textures:
            self._textures[key] = Texture2D.from_file(full_path)
        return self._textures[key]

    def load_font(self, file: str, size: int) -> Font:
        full_path = self._data_path / file
        key = (full_path.name, size)
        if key not in self._fonts:
            self._fonts[key] = Font(full_path, size)
        return self._fonts[key]

    def unload_unused_resources(self) -> None:
        """Forget every cached resource that nothing else still uses."""
        _drop_unused(self._textures)
        _drop_unused(self._fonts)
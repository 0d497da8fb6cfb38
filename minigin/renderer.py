"""Draws textures onto a target surface and drives a frame's rendering."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame

from .resources import Texture2D
from .singleton import Singleton

Color = tuple[int, int, int, int]


def _crop(source: pygame.Surface, rect: tuple[int, int, int, int]) -> Optional[pygame.Surface]:
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return None
    cropped = pygame.Surface((w, h), pygame.SRCALPHA)
    cropped.blit(source, (0, 0), pygame.Rect(x, y, w, h))
    return cropped


class Renderer(Singleton):
    """Owns the target surface, its clear colour and texture drawing."""

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None
        self._clear_color: Color = (0, 0, 0, 0)

    def init(self, surface: pygame.Surface) -> None:
        """Use ``surface`` as the target of all drawing."""
        if surface is None:
            raise RuntimeError("Renderer needs a target surface")
        self._surface = surface

    @property
    def surface(self) -> Optional[pygame.Surface]:
        return self._surface

    @property
    def background_color(self) -> Color:
        return self._clear_color

    def set_background_color(self, color: Sequence[int]) -> None:
        r, g, b, a = color
        self._clear_color = (int(r), int(g), int(b), int(a))

    def _target(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("Renderer is not initialised")
        return self._surface

    def render(self, scene_manager=None) -> None:
        """Clear the target, draw the scenes and their interface, then present."""
        target = self._target()
        if scene_manager is None:
            from .scene import SceneManager

            scene_manager = SceneManager.get_instance()

        target.fill(self._clear_color)
        scene_manager.render()
        scene_manager.render_ui()

        if pygame.display.get_init() and pygame.display.get_surface() is target:
            pygame.display.flip()

    def destroy(self) -> None:
        """Release the target surface."""
        self._surface = None

    def render_texture(
        self,
        texture: Texture2D,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
        src_rect: Optional[Sequence[float]] = None,
        scale: Optional[float] = None,
    ) -> None:
        """Draw ``texture`` with its top-left corner at ``(x, y)``.

        Without ``src_rect`` the whole texture is drawn, at its own size or at
        ``width`` by ``height``. With ``src_rect`` (x, y, w, h) only that part
        is drawn, sized by ``scale`` or by ``width`` and ``height``.
        """
        target = self._target()
        if (width is None) != (height is None):
            raise ValueError("width and height must be given together")

        if src_rect is not None:
            sx, sy, sw, sh = src_rect
            if scale is not None:
                size = (int(sw * scale), int(sh * scale))
            elif width is not None:
                size = (int(width), int(height))
            else:
                size = (int(sw), int(sh))
            image = _crop(texture.surface, (int(sx), int(sy), int(sw), int(sh)))
            if image is None:
                return
        else:
            image = texture.surface
            size = (int(width), int(height)) if width is not None else image.get_size()

        if size != image.get_size():
            if size[0] <= 0 or size[1] <= 0:
                return
            image = pygame.transform.scale(image, size)
        target.blit(image, (int(x), int(y)))
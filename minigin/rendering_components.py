"""Components that draw a texture or a line of text at their owner's position."""

from __future__ import annotations

from typing import Optional, Sequence

from .gameobject import Component, GameObject
from .renderer import Renderer
from .resources import Font, ResourceManager, Texture2D

Color = tuple[int, int, int, int]
Rect = tuple[float, float, float, float]

WHITE: Color = (255, 255, 255, 255)


class TextureComponent(Component):
    """Draws a texture, or part of it, at the owner's world position."""

    def __init__(
        self,
        owner: Optional[GameObject],
        texture_file: str,
        depth: float = 0.0,
        scale: float = 1.0,
    ) -> None:
        super().__init__(owner)
        self._texture: Optional[Texture2D] = None
        self._src_rect: Rect = (0.0, 0.0, 0.0, 0.0)
        self.scale = scale
        self._depth = depth
        self.set_texture(texture_file)

    @property
    def texture(self) -> Optional[Texture2D]:
        return self._texture

    @property
    def src_rect(self) -> Rect:
        return self._src_rect

    @property
    def depth(self) -> float:
        return self._depth

    def update(self, delta_time: float) -> None:
        """Textures are static; nothing to advance."""

    def render(self) -> None:
        owner = self.owner
        if self._texture is None or owner is None:
            return
        x, y, _ = owner.world_position
        _, _, width, height = self._src_rect
        if width == 0.0 and height == 0.0:
            tex_w, tex_h = self._texture.size
            source: Rect = (0.0, 0.0, float(tex_w), float(tex_h))
        else:
            source = self._src_rect
        Renderer.get_instance().render_texture(
            self._texture, x, y, src_rect=source, scale=self.scale
        )

    def set_texture(self, filename: str) -> None:
        """Load ``filename`` through the resource manager and draw it from now on."""
        self._texture = ResourceManager.get_instance().load_texture(filename)

    def set_src_rect(self, src_rect: Sequence[float]) -> None:
        """Draw only the part (x, y, w, h); a zero width and height means all of it."""
        x, y, w, h = src_rect
        self._src_rect = (float(x), float(y), float(w), float(h))

    def set_depth(self, depth: float) -> None:
        self._depth = depth


class TextComponent(Component):
    """Draws a line of text at the owner's world position."""

    def __init__(self, owner: Optional[GameObject], text: str, font: Font) -> None:
        super().__init__(owner)
        self._needs_update = True
        self._text = text
        self._font = font
        self._texture: Optional[Texture2D] = None
        self._color: Color = WHITE

    @property
    def text(self) -> str:
        return self._text

    @property
    def color(self) -> Color:
        return self._color

    @property
    def texture(self) -> Optional[Texture2D]:
        """The rendered text, or None before the first update."""
        return self._texture

    def update(self, delta_time: float) -> None:
        if self._needs_update:
            self._texture = self._font.render(self._text, self._color)
            self._needs_update = False

    def render(self) -> None:
        owner = self.owner
        if self._texture is None or owner is None:
            return
        x, y, _ = owner.world_position
        Renderer.get_instance().render_texture(self._texture, x, y)

    def set_text(self, text: str) -> None:
        self._text = text
        self._needs_update = True

    def set_color(self, color: Sequence[int]) -> None:
        r, g, b, a = color
        self._color = (int(r), int(g), int(b), int(a))
        self._needs_update = True
"""Sprite-sheet animation that drives a texture component's source rectangle."""

from __future__ import annotations

from typing import Optional, Sequence

from ..gameobject import Component, GameObject


class AnimationComponent(Component):
    """Steps through frames laid out in rows and columns of a texture atlas.

    Frames advance only while auto-advance is on, and wrap inside the loop
    range, which covers every frame by default.
    """

    def __init__(
        self,
        owner: Optional[GameObject],
        texture_component,
        frame_size: Sequence[float],
        num_frames: int,
        frame_duration: float,
        rows: int,
        cols: int,
    ) -> None:
        super().__init__(owner)
        self._texture = texture_component
        width, height = frame_size
        self._frame_size = (int(width), int(height))
        self._num_frames = num_frames
        self._frame_duration = frame_duration
        self._rows = rows
        self._cols = cols
        self._acc_time = 0.0
        self._current_frame = 0
        self._loop_start = 0
        self._loop_end = num_frames - 1
        self._auto_advance = False

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def auto_advance(self) -> bool:
        return self._auto_advance

    @property
    def loop_range(self) -> tuple[int, int]:
        return (self._loop_start, self._loop_end)

    def _apply(self, frame_index: int) -> None:
        row, col = divmod(frame_index, self._cols)
        width, height = self._frame_size
        self._texture.set_src_rect(
            (float(col * width), float(row * height), float(width), float(height))
        )

    def update(self, delta_time: float) -> None:
        if not self._auto_advance:
            return
        self._acc_time += delta_time
        if self._acc_time >= self._frame_duration:
            self._acc_time -= self._frame_duration
            self._current_frame += 1
            if self._current_frame > self._loop_end:
                self._current_frame = self._loop_start
            self._apply(self._current_frame)

    def set_frame(self, frame_index: int) -> None:
        """Show ``frame_index`` right away."""
        self._current_frame = frame_index
        self._apply(frame_index)

    def set_loop_range(self, start_frame: int, end_frame: int) -> None:
        """Loop between two frames, clamped to the frames that exist."""
        last = self._num_frames - 1
        self._loop_start = min(max(start_frame, 0), last)
        self._loop_end = min(max(end_frame, self._loop_start), last)
        if not self._loop_start <= self._current_frame <= self._loop_end:
            self.set_frame(self._loop_start)

    def set_auto_advance(self, enable: bool) -> None:
        self._auto_advance = enable
"""The engine: opens the window, wires the subsystems and runs the game loop."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Union

import pygame

from .input import InputManager
from .renderer import Renderer
from .resources import ResourceManager
from .scene import SceneManager

logger = logging.getLogger(__name__)

FIXED_TIME_STEP = 0.016667


def _library_versions() -> dict[str, str]:
    """Return the versions of pygame and of the SDL it is linked against."""
    return {
        "pygame": pygame.version.ver,
        "SDL": ".".join(str(part) for part in pygame.get_sdl_version()),
    }


class Minigin:
    """Owns the window and runs the update/render loop of the active scene."""

    FIXED_TIME_STEP = FIXED_TIME_STEP

    def __init__(
        self,
        data_path: Union[str, Path],
        *,
        title: str = "Programming 4 assignment",
        size: tuple[int, int] = (640, 480),
        ms_per_frame: int = 16,
    ) -> None:
        self.versions = _library_versions()
        for library, version in self.versions.items():
            logger.info("Using %s version %s", library, version)
        self._ms_per_frame = ms_per_frame
        self._closed = False

        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL_Init Error: {exc}") from exc

        try:
            window = pygame.display.set_mode(size)
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"SDL_CreateWindow Error: {exc}") from exc
        pygame.display.set_caption(title)

        Renderer.get_instance().init(window)
        ResourceManager.get_instance().init(data_path)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run frames until input asks to quit or ``max_frames`` are done.

        Returns the number of frames run.
        """
        renderer = Renderer.get_instance()
        scenes = SceneManager.get_instance()
        input_manager = InputManager.get_instance()

        keep_going = True
        last_time = time.perf_counter()
        lag = 0.0
        frames = 0

        while keep_going and (max_frames is None or frames < max_frames):
            current_time = time.perf_counter()
            delta_time = current_time - last_time
            last_time = current_time
            lag += delta_time

            keep_going = input_manager.process_input()

            # Fixed-step updates would run here.
            while lag >= FIXED_TIME_STEP:
                lag -= FIXED_TIME_STEP

            scenes.update(delta_time)
            renderer.render(scenes)
            frames += 1

            sleep_time = current_time + self._ms_per_frame / 1000.0 - time.perf_counter()
            if sleep_time > 0:
                time.sleep(sleep_time)

        return frames

    def close(self) -> None:
        """Release the renderer and shut pygame down."""
        if self._closed:
            return
        self._closed = True
        Renderer.get_instance().destroy()
        pygame.display.quit()
        pygame.quit()

    def __enter__(self) -> Minigin:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
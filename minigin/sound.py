"""Sound services: a null service, a threaded mixer service and a locator."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .commands import Command

logger = logging.getLogger(__name__)


@dataclass
class SoundInfo:
    """Where a sound lives on disk and, once loaded, its audio data."""

    path: str
    chunk: Any = None


class AudioBackend(ABC):
    """The audio device operations the sound service relies on."""

    @abstractmethod
    def open(self) -> None:
        """Open the audio device."""

    @abstractmethod
    def load(self, path: str) -> Any:
        """Load the sound at ``path``; return None if it cannot be loaded."""

    @abstractmethod
    def play(self, chunk: Any) -> None:
        """Play a loaded sound once on a free channel."""

    @abstractmethod
    def set_volume(self, volume: float) -> None:
        """Set the volume of every channel, from 0.0 to 1.0."""

    @abstractmethod
    def close(self) -> None:
        """Close the audio device."""


class PygameAudioBackend(AudioBackend):
    """Audio through pygame's mixer."""

    def open(self) -> None:
        import pygame

        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)

    def load(self, path: str) -> Any:
        import pygame

        try:
            return pygame.mixer.Sound(path)
        except (pygame.error, OSError):
            logger.warning("could not load sound %s", path)
            return None

    def play(self, chunk: Any) -> None:
        chunk.play()

    def set_volume(self, volume: float) -> None:
        import pygame

        for channel in range(pygame.mixer.get_num_channels()):
            pygame.mixer.Channel(channel).set_volume(volume)

    def close(self) -> None:
        import pygame

        pygame.mixer.quit()


class LoadSoundCommand(Command):
    """Loads a registered sound unless it is already loaded."""

    def __init__(
        self,
        sound_id: str,
        sound_info: dict[str, SoundInfo],
        lock: threading.Lock,
        backend: AudioBackend,
    ) -> None:
        self._sound_id = sound_id
        self._sound_info = sound_info
        self._lock = lock
        self._backend = backend

    def execute(self) -> None:
        with self._lock:
            info = self._sound_info.get(self._sound_id)
            if info is None or info.chunk is not None:
                return
            info.chunk = self._backend.load(info.path)
            logger.debug("loaded sound %s", self._sound_id)


class PlaySoundCommand(Command):
    """Plays a registered sound, loading it first if needed."""

    def __init__(
        self,
        sound_id: str,
        sound_info: dict[str, SoundInfo],
        lock: threading.Lock,
        backend: AudioBackend,
    ) -> None:
        self._sound_id = sound_id
        self._sound_info = sound_info
        self._lock = lock
        self._backend = backend

    def execute(self) -> None:
        with self._lock:
            info = self._sound_info.get(self._sound_id)
            if info is None:
                return
            if info.chunk is None:
                info.chunk = self._backend.load(info.path)
                if info.chunk is None:
                    return
            chunk = info.chunk
        self._backend.play(chunk)


class SoundInterface(ABC):
    """What every sound service offers."""

    @abstractmethod
    def register_sound(self, sound_id: str, path: str) -> None:
        """Make the file at ``path`` playable under ``sound_id``."""

    @abstractmethod
    def play_sound(self, sound_id: str) -> None:
        """Play the sound registered under ``sound_id``."""

    @abstractmethod
    def toggle_mute(self) -> None:
        """Switch between muted and unmuted."""

    @abstractmethod
    def is_muted(self) -> bool:
        """Report whether sound is muted."""


class NullSoundService(SoundInterface):
    """A silent service that accepts every request and does nothing."""

    def register_sound(self, sound_id: str, path: str) -> None:
        pass

    def play_sound(self, sound_id: str) -> None:
        pass

    def toggle_mute(self) -> None:
        pass

    def is_muted(self) -> bool:
        return False


class SoundService(SoundInterface):
    """Loads and plays sounds on a background worker thread."""

    def __init__(self, backend: Optional[AudioBackend] = None) -> None:
        self._backend = backend if backend is not None else PygameAudioBackend()
        self._backend.open()

        self._queue_cv = threading.Condition()
        self._queue: deque[Command] = deque()
        self._running = True
        self._closed = False

        self._sound_lock = threading.Lock()
        self._sound_info: dict[str, SoundInfo] = {}
        self._muted = False

        self._worker = threading.Thread(target=self._work, daemon=True)
        self._worker.start()

    def _work(self) -> None:
        while True:
            with self._queue_cv:
                self._queue_cv.wait_for(lambda: self._queue or not self._running)
                if not self._running:
                    break
                batch, self._queue = self._queue, deque()
            for command in batch:
                try:
                    command.execute()
                except Exception:
                    logger.exception("sound command failed")

    def _enqueue(self, command: Command) -> None:
        with self._queue_cv:
            self._queue.append(command)
            self._queue_cv.notify()

    def register_sound(self, sound_id: str, path: str) -> None:
        """Register ``path`` under ``sound_id`` and load it in the background.

        A sound id that is already registered keeps its first path.
        """
        with self._sound_lock:
            if sound_id in self._sound_info:
                return
            self._sound_info[sound_id] = SoundInfo(path)
        self._enqueue(
            LoadSoundCommand(sound_id, self._sound_info, self._sound_lock, self._backend)
        )

    def play_sound(self, sound_id: str) -> None:
        self._enqueue(
            PlaySoundCommand(sound_id, self._sound_info, self._sound_lock, self._backend)
        )

    def toggle_mute(self) -> None:
        self._muted = not self._muted
        self._backend.set_volume(0.0 if self._muted else 1.0)

    def is_muted(self) -> bool:
        return self._muted

    def close(self) -> None:
        """Stop the worker, drop loaded sounds and close the audio device."""
        if self._closed:
            return
        self._closed = True
        with self._queue_cv:
            self._running = False
            self._queue_cv.notify_all()
        self._worker.join()
        with self._sound_lock:
            for info in self._sound_info.values():
                info.chunk = None
        self._backend.close()

    def __enter__(self) -> SoundService:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class SoundServiceLocator:
    """Gives access to the current sound service; silent until one is registered."""

    _service: ClassVar[SoundInterface] = NullSoundService()

    @classmethod
    def get_service(cls) -> SoundInterface:
        return cls._service

    @classmethod
    def register(cls, service: Optional[SoundInterface]) -> None:
        """Replace the current service; ``None`` leaves it unchanged."""
        if service is not None:
            SoundServiceLocator._service = service
"""A small multicast event with token-based unsubscription."""

from __future__ import annotations

from typing import Callable


class Event:
    """Holds handlers and calls them all when invoked."""

    def __init__(self) -> None:
        self._current_id = 0
        self._handlers: list[tuple[int, Callable[..., object]]] = []

    def subscribe(self, handler: Callable[..., object]) -> int:
        """Add a handler and return the token that removes it again."""
        self._current_id += 1
        self._handlers.append((self._current_id, handler))
        return self._current_id

    def unsubscribe(self, token: int) -> None:
        """Remove the handler registered under ``token``; unknown tokens are ignored."""
        self._handlers = [(tid, h) for tid, h in self._handlers if tid != token]

    def invoke(self, *args: object) -> None:
        """Call every handler with ``args``.

        Handlers run from a snapshot, so they may subscribe or unsubscribe safely.
        """
        for _, handler in list(self._handlers):
            handler(*args)

    def __call__(self, *args: object) -> None:
        self.invoke(*args)
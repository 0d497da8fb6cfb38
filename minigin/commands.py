"""Command objects that can be bound to input and executed on demand."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class Command(ABC):
    """An action that can be triggered, typically by an input binding."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""


class FunctionCommand(Command):
    """A command that calls a plain callable."""

    def __init__(self, action: Callable[[], object]) -> None:
        self._action = action

    def execute(self) -> None:
        self._action()
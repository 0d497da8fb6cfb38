"""Keyboard and controller input dispatch to bound commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

import pygame

from .commands import Command
from .controller import ControllerInput, GamepadButton, InputState
from .singleton import Singleton


@dataclass(frozen=True)
class KeyBinding:
    """A keyboard key paired with the input state that triggers it."""

    key: int
    state: InputState


def _pygame_key_held(key: int) -> bool:
    return bool(pygame.key.get_pressed()[key])


class InputManager(Singleton):
    """Runs commands bound to keyboard keys and controller buttons.

    ``key_state`` reports whether a key is currently held and drives the
    PRESSED bindings; ``controller`` handles the gamepad bindings.
    """

    def __init__(
        self,
        controller: Optional[ControllerInput] = None,
        key_state: Callable[[int], bool] = _pygame_key_held,
    ) -> None:
        self._controller = controller if controller is not None else ControllerInput()
        self._key_state = key_state
        self._bindings: dict[KeyBinding, Command] = {}

    def process_input(self, events: Optional[Iterable[object]] = None) -> bool:
        """Handle pending events; return False once a quit event is seen.

        ``events`` defaults to the events waiting in pygame's queue.
        """
        if events is None:
            events = pygame.event.get()

        for event in events:
            event_type = getattr(event, "type", None)
            if event_type == pygame.QUIT:
                return False
            if event_type == pygame.KEYDOWN:
                self._run(KeyBinding(event.key, InputState.DOWN))
            elif event_type == pygame.KEYUP:
                self._run(KeyBinding(event.key, InputState.UP))

        for binding, command in list(self._bindings.items()):
            if binding.state is InputState.PRESSED and self._key_state(binding.key):
                command.execute()

        return self._controller.process_input()

    def _run(self, binding: KeyBinding) -> None:
        command = self._bindings.get(binding)
        if command is not None:
            command.execute()

    def bind_keyboard_command(
        self, key: int, state: InputState, command: Command
    ) -> None:
        """Bind ``command`` to ``key`` in ``state``, replacing any earlier binding."""
        self._bindings[KeyBinding(key, state)] = command

    def bind_controller_command(
        self,
        controller_index: int,
        button: Union[GamepadButton, int],
        state: InputState,
        command: Command,
    ) -> None:
        self._controller.bind_command(controller_index, button, state, command)

    def clear_controller_commands(self) -> None:
        self._controller.reset_states()
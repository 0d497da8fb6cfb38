"""Gamepad buttons, input states and controller command bindings."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Union

from .commands import Command

MAX_CONTROLLERS = 4


class InputState(Enum):
    DOWN = "down"
    UP = "up"
    PRESSED = "pressed"


class GamepadButton(Enum):
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTH = "north"
    BACK = "back"
    START = "start"
    LEFT_STICK = "left_stick"
    RIGHT_STICK = "right_stick"
    LEFT_SHOULDER = "left_shoulder"
    RIGHT_SHOULDER = "right_shoulder"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"


_BUTTON_MASKS = {
    GamepadButton.DPAD_UP: 0x0001,
    GamepadButton.DPAD_DOWN: 0x0002,
    GamepadButton.DPAD_LEFT: 0x0004,
    GamepadButton.DPAD_RIGHT: 0x0008,
    GamepadButton.START: 0x0010,
    GamepadButton.BACK: 0x0020,
    GamepadButton.LEFT_STICK: 0x0040,
    GamepadButton.RIGHT_STICK: 0x0080,
    GamepadButton.LEFT_SHOULDER: 0x0100,
    GamepadButton.RIGHT_SHOULDER: 0x0200,
    GamepadButton.SOUTH: 0x1000,
    GamepadButton.EAST: 0x2000,
    GamepadButton.WEST: 0x4000,
    GamepadButton.NORTH: 0x8000,
}

# Joystick button indices of an XInput-style pad as reported by SDL.
_JOYSTICK_BUTTONS = {
    0: GamepadButton.SOUTH,
    1: GamepadButton.EAST,
    2: GamepadButton.WEST,
    3: GamepadButton.NORTH,
    4: GamepadButton.LEFT_SHOULDER,
    5: GamepadButton.RIGHT_SHOULDER,
    6: GamepadButton.BACK,
    7: GamepadButton.START,
    8: GamepadButton.LEFT_STICK,
    9: GamepadButton.RIGHT_STICK,
}

_joysticks: dict = {}


def button_mask(button: GamepadButton) -> int:
    """Return the bit that ``button`` occupies in a controller button mask."""
    return _BUTTON_MASKS.get(button, 0)


def poll_pygame_controller(index: int) -> Optional[int]:
    """Read controller ``index`` through pygame as a button mask, or None if absent."""
    import pygame

    if not pygame.joystick.get_init():
        pygame.joystick.init()
    if index >= pygame.joystick.get_count():
        _joysticks.pop(index, None)
        return None

    joystick = _joysticks.get(index)
    if joystick is None:
        joystick = pygame.joystick.Joystick(index)
        _joysticks[index] = joystick

    mask = 0
    button_count = joystick.get_numbuttons()
    for joystick_button, button in _JOYSTICK_BUTTONS.items():
        if joystick_button < button_count and joystick.get_button(joystick_button):
            mask |= button_mask(button)

    if joystick.get_numhats() > 0:
        hat_x, hat_y = joystick.get_hat(0)
        if hat_y > 0:
            mask |= button_mask(GamepadButton.DPAD_UP)
        elif hat_y < 0:
            mask |= button_mask(GamepadButton.DPAD_DOWN)
        if hat_x < 0:
            mask |= button_mask(GamepadButton.DPAD_LEFT)
        elif hat_x > 0:
            mask |= button_mask(GamepadButton.DPAD_RIGHT)
    return mask


class ControllerInput:
    """Runs commands bound to controller buttons.

    ``poller`` maps a controller index to its current button mask, or None
    when no controller is connected at that index.
    """

    def __init__(
        self, poller: Callable[[int], Optional[int]] = poll_pygame_controller
    ) -> None:
        self._poller = poller
        self._bindings: dict[int, dict[int, dict[InputState, Command]]] = {}
        self._previous: dict[int, int] = {}

    def bind_command(
        self,
        controller_index: int,
        button: Union[GamepadButton, int],
        state: InputState,
        command: Command,
    ) -> None:
        mask = button_mask(button) if isinstance(button, GamepadButton) else button
        buttons = self._bindings.setdefault(controller_index, {})
        buttons.setdefault(mask, {})[state] = command

    def reset_states(self) -> None:
        """Forget the remembered button states of every controller."""
        self._previous.clear()

    def process_input(self) -> bool:
        """Poll every controller and run the commands whose condition is met."""
        for index in range(MAX_CONTROLLERS):
            current = self._poller(index)
            if current is None:
                continue
            buttons = self._bindings.get(index)
            if buttons is None:
                continue
            previous = self._previous.get(index, 0)
            for mask, commands in buttons.items():
                is_pressed = bool(current & mask)
                was_pressed = bool(previous & mask)
                if is_pressed != was_pressed:
                    edge = InputState.DOWN if is_pressed else InputState.UP
                    if edge in commands:
                        commands[edge].execute()
                if is_pressed and InputState.PRESSED in commands:
                    commands[InputState.PRESSED].execute()
            self._previous[index] = current
        return True
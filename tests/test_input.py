import pygame
import pytest

from minigin.commands import FunctionCommand
from minigin.controller import ControllerInput, GamepadButton, InputState, button_mask
from minigin.input import InputManager, KeyBinding


def _no_controllers(index):
    return None


@pytest.fixture
def calls():
    return []


def _command(calls, label):
    return FunctionCommand(lambda: calls.append(label))


def _manager(held=(), poller=_no_controllers):
    return InputManager(
        controller=ControllerInput(poller), key_state=lambda key: key in held
    )


def test_key_binding_equality_and_hash():
    a = KeyBinding(pygame.K_a, InputState.DOWN)
    b = KeyBinding(pygame.K_a, InputState.DOWN)
    assert a == b
    assert hash(a) == hash(b)
    assert a != KeyBinding(pygame.K_a, InputState.UP)


def test_keydown_runs_down_binding(calls):
    manager = _manager()
    manager.bind_keyboard_command(pygame.K_a, InputState.DOWN, _command(calls, "down"))
    manager.bind_keyboard_command(pygame.K_a, InputState.UP, _command(calls, "up"))
    result = manager.process_input([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)])
    assert result is True
    assert calls == ["down"]


def test_keyup_runs_up_binding(calls):
    manager = _manager()
    manager.bind_keyboard_command(pygame.K_a, InputState.UP, _command(calls, "up"))
    manager.process_input([pygame.event.Event(pygame.KEYUP, key=pygame.K_a)])
    assert calls == ["up"]


def test_unbound_key_runs_nothing(calls):
    manager = _manager()
    manager.bind_keyboard_command(pygame.K_a, InputState.DOWN, _command(calls, "a"))
    manager.process_input([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_b)])
    assert calls == []


def test_quit_returns_false_and_stops(calls):
    manager = _manager()
    manager.bind_keyboard_command(pygame.K_a, InputState.DOWN, _command(calls, "a"))
    events = [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
    ]
    assert manager.process_input(events) is False
    assert calls == []


def test_pressed_binding_runs_while_held(calls):
    manager = _manager(held={pygame.K_w})
    manager.bind_keyboard_command(pygame.K_w, InputState.PRESSED, _command(calls, "w"))
    manager.bind_keyboard_command(pygame.K_s, InputState.PRESSED, _command(calls, "s"))
    manager.process_input([])
    manager.process_input([])
    assert calls == ["w", "w"]


def test_rebinding_replaces_command(calls):
    manager = _manager()
    manager.bind_keyboard_command(pygame.K_a, InputState.DOWN, _command(calls, "old"))
    manager.bind_keyboard_command(pygame.K_a, InputState.DOWN, _command(calls, "new"))
    manager.process_input([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)])
    assert calls == ["new"]


def test_controller_binding_runs_on_button_down(calls):
    mask = button_mask(GamepadButton.SOUTH)
    manager = _manager(poller=lambda index: mask if index == 0 else None)
    manager.bind_controller_command(
        0, GamepadButton.SOUTH, InputState.DOWN, _command(calls, "south")
    )
    assert manager.process_input([]) is True
    manager.process_input([])
    assert calls == ["south"]


def test_clear_controller_commands_keeps_held_state(calls):
    mask = button_mask(GamepadButton.NORTH)
    manager = _manager(poller=lambda index: mask if index == 0 else None)
    manager.bind_controller_command(
        0, GamepadButton.NORTH, InputState.DOWN, _command(calls, "north")
    )
    manager.process_input([])
    manager.clear_controller_commands()
    manager.process_input([])
    assert calls == ["north"]
import pytest

from minigin.gameobject import GameObject
from minigin.qbert.components import (
    DiscManager,
    FPSComponent,
    HealthComponent,
    KillCommand,
)
from minigin.rendering_components import TextComponent


@pytest.fixture
def discs():
    manager = DiscManager.get_instance()
    manager.clear()
    yield manager
    manager.clear()


def test_health_starts_with_three_lives():
    health = GameObject().add_component(HealthComponent)
    assert health.lives == 3


def test_take_damage_loses_one_life_and_notifies():
    health = GameObject().add_component(HealthComponent)
    seen = []
    health.on_health_changed.subscribe(lambda: seen.append(health.lives))
    before = health.lives
    health.take_damage()
    assert health.lives == before - 1
    assert seen == [before - 1]


def test_kill_command_damages_health():
    obj = GameObject()
    health = obj.add_component(HealthComponent)
    before = health.lives
    command = KillCommand(obj)
    command.execute()
    command.execute()
    assert health.lives == before - 2


def test_kill_command_on_object_without_health_keeps_components():
    obj = GameObject()
    KillCommand(obj).execute()
    assert obj.has_component(HealthComponent) is False


def test_fps_from_delta_time_and_text():
    obj = GameObject()
    text = obj.add_component(TextComponent, "", None)
    fps = obj.add_component(FPSComponent)
    fps.update(0.5)
    assert fps.fps == 2.0
    assert text.text == "2.0 FPS"


def test_fps_kept_on_zero_delta():
    fps = GameObject().add_component(FPSComponent)
    fps.update(0.25)
    first = fps.fps
    fps.update(0.0)
    assert fps.fps == first


def test_disc_manager_state_is_shared(discs):
    disc = GameObject()
    DiscManager.get_instance().register_disc((5, 5), disc)
    assert DiscManager.get_instance().get_disc_at((5, 5)) is disc
    assert DiscManager.get_instance().remaining_discs == 1


def test_register_and_find_disc(discs):
    disc = GameObject()
    discs.register_disc((3, -1), disc)
    assert discs.get_disc_at((3, -1)) is disc
    assert discs.get_disc_at([3, -1]) is disc


def test_missing_disc_is_none(discs):
    discs.register_disc((1, 1), GameObject())
    assert discs.get_disc_at((2, 2)) is None


def test_remaining_discs_counts_positions(discs):
    positions = [(0, -1), (1, 5), (4, 7)]
    for pos in positions:
        discs.register_disc(pos, GameObject())
    assert discs.remaining_discs == len(positions)


def test_register_same_position_replaces(discs):
    first, second = GameObject(), GameObject()
    discs.register_disc((2, 2), first)
    discs.register_disc((2, 2), second)
    assert discs.remaining_discs == 1
    assert discs.get_disc_at((2, 2)) is second


def test_clear_forgets_discs(discs):
    discs.register_disc((0, 0), GameObject())
    discs.clear()
    assert discs.remaining_discs == 0
    assert discs.get_disc_at((0, 0)) is None
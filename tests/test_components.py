import math

from minigin.components import RotationComponent, TranslationComponent
from minigin.gameobject import GameObject


def test_rotation_keeps_owner_on_circle():
    obj = GameObject()
    rotation = obj.add_component(RotationComponent, 5.0, 90.0)
    for _ in range(7):
        obj.update(0.3)
        x, y, z = obj.local_position
        assert math.isclose(math.hypot(x, y), 5.0)
        assert z == 0.0
        assert 0.0 <= rotation.angle < 360.0


def test_rotation_full_turn_wraps_to_start():
    obj = GameObject()
    rotation = obj.add_component(RotationComponent, 4.0, 360.0)
    obj.update(1.0)
    assert rotation.angle == 0.0
    x, y, _ = obj.local_position
    assert math.isclose(x, 4.0)
    assert math.isclose(y, 0.0, abs_tol=1e-9)


def test_rotation_without_owner_does_nothing():
    rotation = RotationComponent(None, 5.0, 90.0)
    rotation.update(1.0)
    assert rotation.angle == 0.0


def test_translate_adds_offset_to_world_position():
    obj = GameObject()
    obj.set_local_position((2, 3, 4))
    mover = obj.add_component(TranslationComponent)
    mover.translate((1, -1, 0))
    assert obj.local_position == (3.0, 2.0, 4.0)


def test_translate_child_uses_world_position():
    parent = GameObject()
    parent.set_local_position((10, 0, 0))
    child = GameObject()
    child.set_parent(parent)
    mover = child.add_component(TranslationComponent)
    before = child.world_position
    mover.translate((0, 0, 0))
    assert child.local_position == before
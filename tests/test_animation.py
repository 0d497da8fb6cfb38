import pytest

from minigin.gameobject import GameObject
from minigin.qbert.animation import AnimationComponent


class RecordingTexture:
    def __init__(self):
        self.rects = []

    def set_src_rect(self, rect):
        self.rects.append(tuple(rect))


@pytest.fixture
def texture():
    return RecordingTexture()


def make(texture, frame_size=(16, 32), num_frames=10, duration=0.2, rows=1, cols=10):
    owner = GameObject()
    return owner.add_component(
        AnimationComponent, texture, frame_size, num_frames, duration, rows, cols
    )


def test_set_frame_in_first_row(texture):
    anim = make(texture)
    anim.set_frame(3)
    assert anim.current_frame == 3
    assert texture.rects[-1] == (48.0, 0.0, 16.0, 32.0)


def test_set_frame_wraps_to_next_row(texture):
    anim = make(texture, frame_size=(16, 16), num_frames=8, rows=2, cols=4)
    anim.set_frame(5)
    assert texture.rects[-1] == (16.0, 16.0, 16.0, 16.0)


def test_set_frame_zero_is_top_left(texture):
    anim = make(texture, frame_size=(12, 16), num_frames=4, rows=2, cols=2)
    anim.set_frame(0)
    assert texture.rects[-1] == (0.0, 0.0, 12.0, 16.0)


def test_update_without_auto_advance_does_nothing(texture):
    anim = make(texture)
    anim.update(10.0)
    assert anim.current_frame == 0
    assert texture.rects == []


def test_update_waits_for_frame_duration(texture):
    anim = make(texture, duration=0.5)
    anim.set_auto_advance(True)
    anim.update(0.1)
    assert anim.current_frame == 0
    assert texture.rects == []


def test_auto_advance_moves_one_frame(texture):
    anim = make(texture, duration=0.2)
    anim.set_auto_advance(True)
    anim.update(0.2)
    assert anim.current_frame == 1
    assert len(texture.rects) == 1


def test_loop_range_moves_current_frame_inside(texture):
    anim = make(texture, num_frames=4, cols=4)
    anim.set_loop_range(2, 3)
    assert anim.current_frame == 2
    assert anim.loop_range == (2, 3)


def test_loop_wraps_to_start(texture):
    anim = make(texture, num_frames=4, cols=4, duration=0.2)
    anim.set_loop_range(2, 3)
    anim.set_auto_advance(True)
    seen = []
    for _ in range(4):
        anim.update(0.2)
        seen.append(anim.current_frame)
    assert seen == [3, 2, 3, 2]


def test_loop_range_is_clamped(texture):
    anim = make(texture, num_frames=4, cols=4)
    anim.set_loop_range(-5, 100)
    assert anim.loop_range == (0, 3)


def test_loop_end_not_below_start(texture):
    anim = make(texture, num_frames=4, cols=4)
    anim.set_loop_range(2, 1)
    assert anim.loop_range == (2, 2)


def test_frame_inside_new_range_is_kept(texture):
    anim = make(texture, num_frames=4, cols=4)
    anim.set_frame(1)
    texture.rects.clear()
    anim.set_loop_range(0, 3)
    assert anim.current_frame == 1
    assert texture.rects == []
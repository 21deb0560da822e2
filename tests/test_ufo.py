import random

import pytest

from invaders.assets import sprites
from invaders.ufo import (
    UFO_MAX_DELAY,
    UFO_MIN_DELAY,
    UFO_SPEED,
    UFO_START_X,
    UFO_Y,
    Ufo,
    new_ufo,
    random_ufo_delay,
)


def test_new_ufo_starts_at_right_edge():
    ufo = new_ufo()
    assert ufo.x == 320
    assert ufo.y == 16
    assert ufo.speed == 1
    assert ufo.frame_counter == 0


def test_new_ufo_takes_sprite_size():
    ufo = new_ufo()
    assert (ufo.width, ufo.height) == sprites().ufo.get_size()


def test_advance_moves_every_other_frame():
    ufo = Ufo(x=UFO_START_X, y=UFO_Y, width=16, height=8)
    ufo.advance()
    assert ufo.x == UFO_START_X
    assert ufo.frame_counter == 1
    ufo.advance()
    assert ufo.x == UFO_START_X - UFO_SPEED
    assert ufo.frame_counter == 2


@pytest.mark.parametrize("frames", [2, 10, 51])
def test_advance_total_distance(frames):
    ufo = Ufo(x=UFO_START_X, y=UFO_Y, width=16, height=8, speed=3)
    for _ in range(frames):
        ufo.advance()
    assert ufo.x == UFO_START_X - (frames // 2) * ufo.speed


def test_is_offscreen_only_when_fully_past_left_edge():
    ufo = Ufo(x=-16, y=UFO_Y, width=16, height=8)
    assert not ufo.is_offscreen()
    ufo.x = -17
    assert ufo.is_offscreen()


def test_is_offscreen_false_on_screen():
    assert not new_ufo().is_offscreen()


def test_random_ufo_delay_within_bounds():
    rng = random.Random(1234)
    seen = {random_ufo_delay(rng) for _ in range(3000)}
    assert seen == set(range(UFO_MIN_DELAY, UFO_MAX_DELAY + 1))


def test_random_ufo_delay_default_rng_in_range():
    for _ in range(100):
        delay = random_ufo_delay()
        assert UFO_MIN_DELAY <= delay <= UFO_MAX_DELAY


def test_random_ufo_delay_reproducible_with_seed():
    first = [random_ufo_delay(random.Random(7)) for _ in range(5)]
    second = [random_ufo_delay(random.Random(7)) for _ in range(5)]
    assert first == second
import pygame
import pytest

from invaders.controls import InputState, Key, poll_input


@pytest.fixture
def dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    yield
    pygame.display.quit()


def test_is_pressed_reflects_held_keys():
    state = InputState(held={Key.LEFT})
    assert state.is_pressed(Key.LEFT)
    assert not state.is_pressed(Key.RIGHT)


def test_just_pressed_only_on_first_frame():
    first = InputState(held={Key.SPACE})
    held_on = InputState(held={Key.SPACE}, previous={Key.SPACE})
    assert first.just_pressed(Key.SPACE)
    assert not held_on.just_pressed(Key.SPACE)
    assert held_on.is_pressed(Key.SPACE)


def test_sets_are_frozen():
    state = InputState(held=[Key.A, Key.A])
    assert state.held == frozenset({Key.A})


@pytest.mark.parametrize("key", [Key.SPACE, Key.ENTER, Key.ESCAPE])
def test_start_keys_count_while_held(key):
    assert InputState(held={key}, previous={key}).wants_start()


@pytest.mark.parametrize(
    "key", [Key.A, Key.S, Key.D, Key.W, Key.MOUSE_LEFT, Key.MOUSE_RIGHT]
)
def test_tapped_start_keys_need_fresh_press(key):
    assert InputState(held={key}).wants_start()
    assert not InputState(held={key}, previous={key}).wants_start()


def test_no_input_does_not_start():
    assert not InputState().wants_start()
    assert not InputState(held={Key.LEFT}).wants_start()


def test_poll_input_carries_previous_held(dummy_display):
    previous = InputState(held={Key.SPACE})
    state = poll_input(previous)
    assert state.previous == frozenset({Key.SPACE})
    assert state.held == frozenset()
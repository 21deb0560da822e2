"""Keyboard and mouse state sampled once per frame."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

import pygame


class Key(Enum):
    """Inputs the game reacts to."""

    LEFT = auto()
    RIGHT = auto()
    A = auto()
    D = auto()
    S = auto()
    W = auto()
    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    MOUSE_LEFT = auto()
    MOUSE_RIGHT = auto()


_KEYBOARD = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.A: pygame.K_a,
    Key.D: pygame.K_d,
    Key.S: pygame.K_s,
    Key.W: pygame.K_w,
    Key.SPACE: pygame.K_SPACE,
    Key.ENTER: pygame.K_RETURN,
    Key.ESCAPE: pygame.K_ESCAPE,
}

_MOUSE = {Key.MOUSE_LEFT: 0, Key.MOUSE_RIGHT: 2}

_START_HELD = (Key.SPACE, Key.ENTER, Key.ESCAPE)
_START_TAPPED = (Key.A, Key.S, Key.D, Key.W, Key.MOUSE_LEFT, Key.MOUSE_RIGHT)


@dataclass(frozen=True)
class InputState:
    """Inputs held this frame and those held in the frame before."""

    held: frozenset[Key] = field(default_factory=frozenset)
    previous: frozenset[Key] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "held", frozenset(self.held))
        object.__setattr__(self, "previous", frozenset(self.previous))

    def is_pressed(self, key: Key) -> bool:
        return key in self.held

    def just_pressed(self, key: Key) -> bool:
        """True only on the frame the input went down."""
        return key in self.held and key not in self.previous

    def wants_start(self) -> bool:
        """Whether the player asked to leave a title or end screen."""
        return any(self.is_pressed(k) for k in _START_HELD) or any(
            self.just_pressed(k) for k in _START_TAPPED
        )


def poll_input(previous: InputState | None = None) -> InputState:
    """Sample the current keyboard and mouse state."""
    pressed = pygame.key.get_pressed()
    buttons = pygame.mouse.get_pressed()
    held: Iterable[Key] = {k for k, code in _KEYBOARD.items() if pressed[code]} | {
        k for k, index in _MOUSE.items() if buttons[index]
    }
    before = previous.held if previous is not None else frozenset()
    return InputState(held=frozenset(held), previous=before)
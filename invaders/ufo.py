"""The mystery ship that crosses the top of the screen."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .assets import sprites

UFO_START_X = 320
UFO_Y = 16
UFO_SPEED = 1
UFO_MIN_DELAY = 10
UFO_MAX_DELAY = 30


@dataclass
class Ufo:
    """A mystery ship drifting leftwards, moving on every other frame."""

    x: int
    y: int
    width: int
    height: int
    speed: int = UFO_SPEED
    frame_counter: int = 0

    def advance(self) -> None:
        """Count one frame and step left on every second one."""
        self.frame_counter += 1
        if self.frame_counter % 2 == 0:
            self.x -= self.speed

    def is_offscreen(self) -> bool:
        """Whether the ship has fully left the screen on the left."""
        return self.x + self.width < 0


def new_ufo() -> Ufo:
    """Create a ship just beyond the right edge of the screen."""
    width, height = sprites().ufo.get_size()
    return Ufo(x=UFO_START_X, y=UFO_Y, width=width, height=height)


def random_ufo_delay(rng: random.Random | None = None) -> int:
    """Seconds to wait before the next ship, between 10 and 30 inclusive."""
    source = rng if rng is not None else random
    return source.randint(UFO_MIN_DELAY, UFO_MAX_DELAY)
"""The player's cannon and its missiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .assets import sprites
from .controls import InputState, Key
from .stopwatch import Stopwatch

GAME_WIDTH = 320
GAME_HEIGHT = 240
PLAYER_SPEED = 2
PLAYER_MISSILE_SPEED = 3
PLAYER_SHOOT_COOLDOWN = 0.5


class _Sounds(Protocol):
    def play(self, name: str, volume: float = 1.0) -> None: ...


@dataclass
class Missile:
    """A shot in flight, for either side."""

    x: int
    y: int
    width: int
    height: int


def _cooldown() -> Stopwatch:
    return Stopwatch(PLAYER_SHOOT_COOLDOWN)


@dataclass
class Player:
    x: int
    y: int
    width: int
    height: int
    shoot_timer: Stopwatch = field(default_factory=_cooldown)
    missiles: list[Missile] = field(default_factory=list)
    points: int = 0

    def spawn_missile(self) -> Missile:
        """Create a missile centred on the cannon."""
        shot_width, shot_height = sprites().player_shot.get_size()
        return Missile(
            x=self.x + self.width // 2 - shot_width // 2,
            y=self.y,
            width=shot_width,
            height=shot_height,
        )

    def update(self, controls: InputState, sounds: _Sounds | None = None) -> None:
        """Move, shoot and advance missiles for one frame."""
        if controls.is_pressed(Key.LEFT) or controls.is_pressed(Key.A):
            self.x -= PLAYER_SPEED
        if controls.is_pressed(Key.RIGHT) or controls.is_pressed(Key.D):
            self.x += PLAYER_SPEED

        self.x = max(self.x, 0)
        if self.x + self.width > GAME_WIDTH:
            self.x = GAME_WIDTH - self.width

        self.shoot_timer.update()
        if controls.just_pressed(Key.SPACE) and (
            not self.shoot_timer.is_running() or self.shoot_timer.is_done()
        ):
            self.missiles.append(self.spawn_missile())
            self.shoot_timer.reset()
            self.shoot_timer.start()
            if sounds is not None:
                sounds.play("shoot")

        for missile in self.missiles:
            missile.y -= PLAYER_MISSILE_SPEED
        self.missiles = [m for m in self.missiles if m.y + m.height > 0]


def new_player() -> Player:
    """Place a new cannon centred near the bottom of the screen."""
    width, height = sprites().player.get_size()
    return Player(
        x=(GAME_WIDTH - width) // 2,
        y=GAME_HEIGHT - height - 8,
        width=width,
        height=height,
    )
"""Invaders and the formation they arrive in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NUMBER_OF_ALIENS_IN_ROW = 12
ALIEN_SIZE = 16
PADDING = 64


class AlienType(Enum):
    SQUID = 0
    ARM = 1
    FOOT = 2


_POINTS = {AlienType.SQUID: 40, AlienType.ARM: 20, AlienType.FOOT: 10}


def alien_points(alien_type: AlienType) -> int:
    """Score awarded for shooting an alien of this type."""
    return _POINTS.get(alien_type, _POINTS[AlienType.FOOT])


@dataclass
class Alien:
    """One invader with its position and animation frame."""

    alien_type: AlienType
    x: int = 0
    y: int = 0
    points_value: int = 0
    current_frame: int = 0

    @property
    def width(self) -> int:
        return ALIEN_SIZE

    @property
    def height(self) -> int:
        return ALIEN_SIZE

    def toggle_frame(self) -> None:
        """Switch between the two animation frames."""
        self.current_frame = (self.current_frame + 1) % 2


def new_alien(alien_type: AlienType) -> Alien:
    return Alien(alien_type=alien_type, points_value=alien_points(alien_type))


_ROW_TYPES = (
    AlienType.SQUID,
    AlienType.ARM,
    AlienType.ARM,
    AlienType.FOOT,
    AlienType.FOOT,
)


def spawn_alien_wave() -> list[Alien]:
    """Build a fresh formation, column by column from the left."""
    aliens = []
    for column in range(NUMBER_OF_ALIENS_IN_ROW):
        for row, alien_type in enumerate(_ROW_TYPES, start=1):
            alien = new_alien(alien_type)
            alien.x = column * ALIEN_SIZE + PADDING
            alien.y = ALIEN_SIZE * row
            aliens.append(alien)
    return aliens
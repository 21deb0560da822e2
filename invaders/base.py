"""Destructible defensive bases."""

from __future__ import annotations

from dataclasses import dataclass, field

BLOCK_SIZE = 8
BLOCKS_PER_SIDE = 4
BASE_COUNT = 4
SCREEN_WIDTH = 320
MAX_DAMAGE = 3


@dataclass
class BaseBlock:
    """One block of a base; it disappears after three hits."""

    x: int
    y: int
    damage_level: int = 0
    exists: bool = True

    @property
    def frame(self) -> int:
        """Index of the damage sprite to draw."""
        return min(self.damage_level, MAX_DAMAGE - 1)

    def take_damage(self) -> None:
        if not self.exists:
            return
        self.damage_level += 1
        if self.damage_level >= MAX_DAMAGE:
            self.exists = False


@dataclass
class Base:
    x: int
    y: int
    blocks: list[BaseBlock] = field(default_factory=list)


def new_base(base_x: int, base_y: int) -> Base:
    """Build a 4x4 block base with an archway cut from the bottom middle."""
    base = Base(base_x, base_y)
    for row in range(BLOCKS_PER_SIDE):
        for col in range(BLOCKS_PER_SIDE):
            if row == BLOCKS_PER_SIDE - 1 and col in (1, 2):
                continue
            base.blocks.append(BaseBlock(base_x + col * BLOCK_SIZE, base_y + row * BLOCK_SIZE))
    return base


def create_bases(player_y: int) -> list[Base]:
    """Place four evenly spaced bases just above the player."""
    base_width = BLOCKS_PER_SIDE * BLOCK_SIZE
    spacing = (SCREEN_WIDTH - BASE_COUNT * base_width) // (BASE_COUNT + 1)
    base_y = player_y - 8 - BLOCKS_PER_SIDE * BLOCK_SIZE
    return [
        new_base(spacing + i * (base_width + spacing), base_y) for i in range(BASE_COUNT)
    ]
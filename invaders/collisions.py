"""Collision checks between missiles, invaders, the player and bases."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .alien import Alien
from .base import BLOCK_SIZE, Base
from .player import Missile, Player
from .ufo import Ufo

UFO_POINTS = 100

_Rect = tuple[int, int, int, int]


def _rect(x: int, y: int, width: int, height: int) -> _Rect:
    return (x, y, x + width, y + height)


def _overlaps(a: _Rect, b: _Rect) -> bool:
    """True when two half-open, non-empty rectangles share an area."""
    ax0, ay0, ax1, ay1 = a
    bx0, by0, bx1, by1 = b
    if ax0 >= ax1 or ay0 >= ay1 or bx0 >= bx1 or by0 >= by1:
        return False
    return ax0 < bx1 and bx0 < ax1 and ay0 < by1 and by0 < ay1


@dataclass
class MissileHits:
    """Outcome of checking the player's missiles against invaders and the UFO."""

    missiles: list[Missile] = field(default_factory=list)
    aliens: list[Alien] = field(default_factory=list)
    aliens_hit: list[Alien] = field(default_factory=list)
    ufo_hit: bool = False
    points: int = 0


def player_missile_hits(
    missiles: Iterable[Missile], aliens: Sequence[Alien], ufo: Ufo | None
) -> MissileHits:
    """Match each missile's centre against invaders first, then the UFO.

    Each invader and the UFO can be hit at most once; a missile that hits
    something is used up.
    """
    result = MissileHits()
    hit_ids: set[int] = set()
    target_ufo = ufo

    for missile in missiles:
        mx = missile.x + missile.width // 2 - 1
        my = missile.y + missile.height // 2 - 1
        centre = (mx, my, mx + 2, my + 2)

        struck = next(
            (
                alien
                for alien in aliens
                if id(alien) not in hit_ids
                and _overlaps(centre, _rect(alien.x, alien.y, alien.width, alien.height))
            ),
            None,
        )
        if struck is not None:
            hit_ids.add(id(struck))
            result.aliens_hit.append(struck)
            result.points += struck.points_value
            continue

        if target_ufo is not None and _overlaps(
            centre, _rect(target_ufo.x, target_ufo.y, target_ufo.width, target_ufo.height)
        ):
            result.points += UFO_POINTS
            result.ufo_hit = True
            target_ufo = None
            continue

        result.missiles.append(missile)

    result.aliens = [alien for alien in aliens if id(alien) not in hit_ids]
    return result


def alien_missile_hits_player(missiles: Iterable[Missile], player: Player) -> bool:
    """Whether any invader missile touches the player's cannon."""
    target = _rect(player.x, player.y, player.width, player.height)
    return any(_overlaps(_rect(m.x, m.y, m.width, m.height), target) for m in missiles)


def _block_rect(block) -> _Rect:
    return _rect(block.x, block.y, BLOCK_SIZE, BLOCK_SIZE)


def missiles_vs_bases(
    missiles: Iterable[Missile], bases: Sequence[Base], narrow: bool = False
) -> list[Missile]:
    """Damage the first standing block each missile touches.

    With ``narrow`` only a four-pixel strip down the missile's centre counts.
    Returns the missiles that hit nothing.
    """
    survivors = []
    for missile in missiles:
        if narrow:
            cx = missile.x + missile.width // 2 - 2
            area = (cx, missile.y, cx + 4, missile.y + missile.height)
        else:
            area = _rect(missile.x, missile.y, missile.width, missile.height)

        block = next(
            (
                block
                for base in bases
                for block in base.blocks
                if block.exists and _overlaps(area, _block_rect(block))
            ),
            None,
        )
        if block is None:
            survivors.append(missile)
        else:
            block.take_damage()
    return survivors


def aliens_vs_bases(aliens: Iterable[Alien], bases: Sequence[Base]) -> int:
    """Remove every standing block an invader overlaps; return how many went."""
    removed = 0
    for alien in aliens:
        area = _rect(alien.x, alien.y, alien.width, alien.height)
        for base in bases:
            for block in base.blocks:
                if block.exists and _overlaps(area, _block_rect(block)):
                    block.exists = False
                    removed += 1
    return removed
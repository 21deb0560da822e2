"""The playing field: the formation, the cannon, bases, missiles and the UFO."""

from __future__ import annotations

import random
from enum import Enum
from typing import Protocol

import pygame

from .alien import ALIEN_SIZE, Alien, AlienType, spawn_alien_wave
from .assets import SoundBank, sprites
from .base import Base, create_bases
from .collisions import (
    alien_missile_hits_player,
    aliens_vs_bases,
    missiles_vs_bases,
    player_missile_hits,
)
from .controls import InputState
from .player import Missile, Player, new_player
from .stopwatch import Stopwatch
from .ufo import Ufo, new_ufo, random_ufo_delay

GAME_WIDTH = 320
GAME_SCENE_HEIGHT = 240
STEP = 8
ALIEN_MS_PER_STEP = 20
FIRST_MOVE_DELAY = 1.0
WAVE_DELAY = 3.0
DEATH_DELAY = 1.5
STARTING_LIVES = 5
MAX_ALIEN_MISSILES = 3
SQUID_SHOT_CHANCE = 0.1
UFO_KILL_THRESHOLD = 10
BLOCK_DRAW_FACTOR = 0.5
TEXT_COLOUR = (220, 220, 255)
FONT_SIZE = 8


class Direction(Enum):
    LEFT = 0
    RIGHT = 1


def toggle_direction(current: Direction) -> Direction:
    """Return the opposite marching direction."""
    return Direction.RIGHT if current is Direction.LEFT else Direction.LEFT


class _Sounds(Protocol):
    def play(self, name: str, volume: float = 1.0) -> None: ...

    def start_loop(self, name: str, volume: float = 1.0) -> None: ...

    def stop_loop(self) -> None: ...


class GameScene:
    """State and rules of one game, advanced one frame per ``update``."""

    def __init__(self, scene_manager=None, sounds: _Sounds | None = None,
                 rng: random.Random | None = None) -> None:
        self.scene_manager = scene_manager
        self.sounds: _Sounds = sounds if sounds is not None else SoundBank()
        self.rng = rng if rng is not None else random.Random()
        self.aliens: list[Alien] = spawn_alien_wave()
        self.timer = Stopwatch(FIRST_MOVE_DELAY)
        self.current_direction = Direction.LEFT
        self.player: Player = new_player()
        self.wave_timer = Stopwatch(WAVE_DELAY)
        self.alien_missiles: list[Missile] = []
        self.death_timer = Stopwatch(DEATH_DELAY)
        self.player_dead = False
        self.bases: list[Base] = create_bases(self.player.y)
        self.ufo: Ufo | None = None
        self.ufo_timer: Stopwatch | None = None
        self.aliens_killed = 0
        self.player_lives = STARTING_LIVES
        self.game_over = False
        self._fonts: dict[int, pygame.font.Font] = {}

    # ------------------------------------------------------------------ rules

    def update(self, controls: InputState) -> None:
        """Advance the game by one frame."""
        current_speed = len(self.aliens) * ALIEN_MS_PER_STEP

        if self.player_dead:
            self.death_timer.update()
            if self.death_timer.is_done():
                if self.player_lives <= 0:
                    self._finish(with_score=True)
                    return
                self.player_dead = False
                self.player.x = (GAME_WIDTH - self.player.width) // 2
            return

        if not self.timer.is_running():
            self.timer.start()
        self.timer.update()
        if self.timer.is_done():
            self.move_aliens()
            self.timer = Stopwatch(current_speed / 1000)
            self.timer.start()

        if any(alien.y + alien.height >= GAME_SCENE_HEIGHT for alien in self.aliens):
            self._finish(with_score=False)
            return

        self.player.update(controls, self.sounds)

        self.check_player_missile_collision()
        self.check_alien_missile_player_collision()
        self.check_missile_base_collisions()

        self.update_ufo()

        if (
            self.aliens_killed >= UFO_KILL_THRESHOLD
            and self.ufo is None
            and (self.ufo_timer is None or self.ufo_timer.is_done())
        ):
            self.spawn_ufo()

        if self.ufo_timer is not None:
            self.ufo_timer.update()
            if self.ufo_timer.is_done():
                self.ufo_timer.stop()
                self.ufo_timer = None

        self.check_wave_status()
        self.wave_timer.update()
        if self.wave_timer.is_done():
            self.wave_timer.stop()
            self.wave_timer.reset()
            self.aliens = spawn_alien_wave()

        for missile in self.alien_missiles:
            missile.y += 1
        self.alien_missiles = [m for m in self.alien_missiles if m.y < GAME_SCENE_HEIGHT]

        self.update_ufo()

    def _finish(self, with_score: bool) -> None:
        self.sounds.stop_loop()
        self.game_over = True
        if self.scene_manager is None:
            return
        if with_score:
            self.scene_manager.transition_to_end_screen(self.player.points)
        else:
            from .scene_manager import SceneType

            self.scene_manager.transition_to(SceneType.END_SCREEN)

    def check_wave_status(self) -> None:
        """Start the countdown to a new wave once the formation is gone."""
        if not self.aliens and not self.wave_timer.is_running():
            self.wave_timer.reset()
            self.wave_timer.start()

    def move_aliens(self) -> None:
        """March the formation one step and let squids fire."""
        self.sounds.play("move")

        should_reverse = any(
            (self.current_direction is Direction.LEFT and alien.x - STEP <= 0)
            or (self.current_direction is Direction.RIGHT
                and alien.x + STEP >= GAME_WIDTH - ALIEN_SIZE)
            for alien in self.aliens
        )

        if should_reverse:
            self.current_direction = toggle_direction(self.current_direction)
            for alien in self.aliens:
                alien.y += STEP
                alien.toggle_frame()
        else:
            dx = -STEP if self.current_direction is Direction.LEFT else STEP
            for alien in self.aliens:
                alien.x += dx
                alien.toggle_frame()

        shot_width, shot_height = sprites().alien_shot.get_size()
        for alien in self.aliens:
            if (
                alien.alien_type is AlienType.SQUID
                and self.rng.random() < SQUID_SHOT_CHANCE
                and len(self.alien_missiles) < MAX_ALIEN_MISSILES
            ):
                self.alien_missiles.append(
                    Missile(
                        x=alien.x + alien.width // 2 - shot_width // 2,
                        y=alien.y + alien.height,
                        width=shot_width,
                        height=shot_height,
                    )
                )

    def check_player_missile_collision(self) -> None:
        """Score and remove invaders or the UFO struck by the player's missiles."""
        hits = player_missile_hits(self.player.missiles, self.aliens, self.ufo)
        self.player.points += hits.points
        self.aliens_killed += len(hits.aliens_hit)
        for _ in hits.aliens_hit:
            self.sounds.play("alien_explosion")
        if hits.ufo_hit:
            self.sounds.play("alien_explosion")
            self.ufo = None
            self.sounds.stop_loop()
            self.start_ufo_timer()
        self.player.missiles = hits.missiles
        self.aliens = hits.aliens

    def check_alien_missile_player_collision(self) -> None:
        """Cost a life when an invader missile reaches the cannon."""
        if self.player_dead:
            return
        if alien_missile_hits_player(self.alien_missiles, self.player):
            self.player_lives -= 1
            self.player_dead = True
            self.death_timer.reset()
            self.death_timer.start()
            self.alien_missiles = []
            self.sounds.play("player_death")

    def check_missile_base_collisions(self) -> None:
        """Let missiles from both sides chip away at the bases."""
        before = len(self.player.missiles)
        self.player.missiles = missiles_vs_bases(self.player.missiles, self.bases, narrow=True)
        hits = before - len(self.player.missiles)

        before = len(self.alien_missiles)
        self.alien_missiles = missiles_vs_bases(self.alien_missiles, self.bases)
        hits += before - len(self.alien_missiles)

        for _ in range(hits):
            self.sounds.play("alien_explosion")

    def check_alien_base_collisions(self) -> None:
        """Destroy every base block an invader touches."""
        aliens_vs_bases(self.aliens, self.bases)

    def spawn_ufo(self) -> None:
        """Send a mystery ship across if none is flying."""
        if self.ufo is None:
            self.ufo = new_ufo()
            self.sounds.start_loop("ufo", 0.5)

    def update_ufo(self) -> None:
        """Move the mystery ship and retire it once it leaves the screen."""
        if self.ufo is None:
            return
        self.ufo.advance()
        if self.ufo.is_offscreen():
            self.ufo = None
            self.sounds.stop_loop()
            self.start_ufo_timer()

    def start_ufo_timer(self) -> None:
        """Wait a random 10 to 30 seconds before the next ship may appear."""
        self.ufo_timer = Stopwatch(random_ufo_delay(self.rng))
        self.ufo_timer.start()

    # -------------------------------------------------------------- rendering

    def layout(self, outer_width: int, outer_height: int) -> tuple[int, int]:
        return outer_width, outer_height

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, screen: pygame.Surface) -> None:
        """Render the field scaled to fit and centred on ``screen``."""
        width, height = screen.get_size()
        scale = min(width / GAME_WIDTH, height / GAME_SCENE_HEIGHT)
        game_width = GAME_WIDTH * scale
        game_height = GAME_SCENE_HEIGHT * scale
        offset_x = (width - game_width) / 2
        offset_y = (height - game_height) / 2

        def blit(image: pygame.Surface, x: int, y: int, factor: float = 1.0) -> None:
            w, h = image.get_size()
            size = (max(1, round(w * scale * factor)), max(1, round(h * scale * factor)))
            screen.blit(pygame.transform.scale(image, size),
                        (round(x * scale + offset_x), round(y * scale + offset_y)))

        art = sprites()
        frames = {
            AlienType.SQUID: art.top_invader,
            AlienType.ARM: art.middle_invader,
        }

        screen.fill((0, 0, 0))
        for alien in self.aliens:
            blit(frames.get(alien.alien_type, art.bottom_invader)[alien.current_frame],
                 alien.x, alien.y)

        blit(art.player, self.player.x, self.player.y)
        for missile in self.player.missiles:
            blit(art.player_shot, missile.x, missile.y)
        for missile in self.alien_missiles:
            blit(art.alien_shot, missile.x, missile.y)

        for base in self.bases:
            for block in base.blocks:
                if block.exists:
                    blit(art.base[block.frame], block.x, block.y, BLOCK_DRAW_FACTOR)

        if self.ufo is not None:
            blit(art.ufo, self.ufo.x, self.ufo.y)

        font = self._font(max(1, round(FONT_SIZE * scale)))
        score = font.render(f"SCORE: {self.player.points}", True, TEXT_COLOUR)
        screen.blit(score, (round(offset_x + 15 * scale), round(offset_y + 15 * scale)))

        lives = font.render(f"LIVES: {self.player_lives}", True, TEXT_COLOUR)
        lives_x = offset_x + game_width - lives.get_width() - 23 * scale
        screen.blit(lives, (round(lives_x), round(offset_y + 15 * scale)))
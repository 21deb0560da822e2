"""Holds the game's scenes and routes frames to the active one."""

from __future__ import annotations

import random
from enum import Enum

import pygame

from .assets import SoundBank
from .controls import InputState
from .end_scene import EndScene
from .game_scene import GameScene
from .title_scene import TitleScene


class SceneType(Enum):
    TITLE_SCREEN = 0
    GAME = 1
    END_SCREEN = 2


class SceneManager:
    """Owns the title, game and end scenes and switches between them."""

    def __init__(self, sounds=None, rng: random.Random | None = None) -> None:
        self.sounds = sounds if sounds is not None else SoundBank()
        self.rng = rng if rng is not None else random.Random()
        self.scene_type = SceneType.TITLE_SCREEN
        self.title_scene = TitleScene(self)
        self.game_scene = GameScene(self, sounds=self.sounds, rng=self.rng)
        self.end_scene = EndScene(self, 0)
        self.current_scene = self.title_scene

    def update(self, controls: InputState) -> None:
        self.current_scene.update(controls)

    def draw(self, screen: pygame.Surface) -> None:
        self.current_scene.draw(screen)

    def layout(self, outer_width: int, outer_height: int) -> tuple[int, int]:
        return self.current_scene.layout(outer_width, outer_height)

    def transition_to(self, scene_type: SceneType) -> None:
        """Make the existing scene of the given type current."""
        scenes = {
            SceneType.TITLE_SCREEN: self.title_scene,
            SceneType.GAME: self.game_scene,
            SceneType.END_SCREEN: self.end_scene,
        }
        self.scene_type = scene_type
        self.current_scene = scenes[scene_type]

    def transition_to_end_screen(self, final_score: int) -> None:
        """Show a new end screen carrying the final score."""
        self.scene_type = SceneType.END_SCREEN
        self.end_scene = EndScene(self, final_score)
        self.current_scene = self.end_scene

    def current_scene_type(self) -> SceneType:
        return self.scene_type
"""The game-over screen showing the final score."""

from __future__ import annotations

import pygame

from .controls import InputState

BACKGROUND = (25, 10, 10)
TITLE_COLOUR = (255, 100, 100)
SCORE_COLOUR = (255, 200, 100)
SUBTITLE_COLOUR = (200, 150, 150)
TITLE_SIZE = 48
SUBTITLE_SIZE = 24
TITLE_TEXT = "Game Over"
SUBTITLE_TEXT = "Press any key to restart"


class EndScene:
    """Shows the final score and restarts with a fresh game on request."""

    def __init__(self, scene_manager, final_score: int = 0) -> None:
        self.scene_manager = scene_manager
        self.final_score = final_score
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def update(self, controls: InputState) -> None:
        """Start a brand-new game when the player presses a start input."""
        if controls.wants_start():
            from .game_scene import GameScene
            from .scene_manager import SceneType

            manager = self.scene_manager
            manager.game_scene = GameScene(manager, sounds=manager.sounds, rng=manager.rng)
            manager.transition_to(SceneType.GAME)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the game-over message, score and restart prompt."""
        screen.fill(BACKGROUND)
        width, height = screen.get_size()

        title = self._font(TITLE_SIZE).render(TITLE_TEXT, True, TITLE_COLOUR)
        title_y = height // 2 - 50
        screen.blit(title, ((width - title.get_width()) // 2, title_y))

        small = self._font(SUBTITLE_SIZE)
        score = small.render(f"Final Score: {self.final_score}", True, SCORE_COLOUR)
        screen.blit(score, ((width - score.get_width()) // 2, title_y + 50))

        subtitle = small.render(SUBTITLE_TEXT, True, SUBTITLE_COLOUR)
        screen.blit(subtitle, ((width - subtitle.get_width()) // 2, title_y + 100))

    def layout(self, outer_width: int, outer_height: int) -> tuple[int, int]:
        return outer_width, outer_height
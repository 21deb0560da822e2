"""The opening screen that waits for the player to start."""

from __future__ import annotations

import pygame

from .controls import InputState

BACKGROUND = (10, 15, 25)
TITLE_COLOUR = (220, 220, 255)
SUBTITLE_COLOUR = (180, 180, 200)
TITLE_SIZE = 48
SUBTITLE_SIZE = 24
TITLE_TEXT = "INVADERS"
SUBTITLE_TEXT = "Press any key to Start"


class TitleScene:
    """Shows the game's name and starts play on any start input."""

    def __init__(self, scene_manager) -> None:
        self.scene_manager = scene_manager
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def update(self, controls: InputState) -> None:
        """Switch to the game when the player presses a start input."""
        if controls.wants_start():
            from .scene_manager import SceneType

            self.scene_manager.transition_to(SceneType.GAME)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the centred title and prompt."""
        screen.fill(BACKGROUND)
        width, height = screen.get_size()

        title = self._font(TITLE_SIZE).render(TITLE_TEXT, True, TITLE_COLOUR)
        title_x = (width - title.get_width()) // 2
        title_y = height // 2 - 50
        screen.blit(title, (title_x, title_y))

        subtitle = self._font(SUBTITLE_SIZE).render(SUBTITLE_TEXT, True, SUBTITLE_COLOUR)
        subtitle_x = (width - subtitle.get_width()) // 2
        screen.blit(subtitle, (subtitle_x, title_y + 80))

    def layout(self, outer_width: int, outer_height: int) -> tuple[int, int]:
        return outer_width, outer_height
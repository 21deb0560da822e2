"""Command-line entry point that opens the window and runs the game loop."""

from __future__ import annotations

import argparse

import pygame

from .assets import SoundBank
from .controls import InputState, poll_input
from .scene_manager import SceneManager

WINDOW_TITLE = "Invaders"
WINDOW_SIZE = (640, 480)
FPS = 60


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="invaders", description="Play Invaders.")
    parser.add_argument("--mute", action="store_true", help="disable sound")
    parser.add_argument(
        "--frames",
        type=_non_negative,
        default=0,
        help="stop after this many frames (0 runs until the window closes)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parser().parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        manager = SceneManager(sounds=SoundBank(enabled=not args.mute))
        clock = pygame.time.Clock()
        controls = InputState()
        frame = 0

        while not args.frames or frame < args.frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            screen = pygame.display.get_surface()
            controls = poll_input(controls)
            manager.update(controls)
            manager.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
            frame += 1
    finally:
        pygame.quit()
    return 0
"""Sprite sheets and sound effects used by the game."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from functools import cache
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

ASSET_DIR = Path(__file__).resolve().parent / "data"
INVADER_SIZE = 16
BASE_TILE_SIZE = 16
SAMPLE_RATE = 44100

SOUND_FILES = {
    "move": "audio/move.ogg",
    "shoot": "audio/laserShoot.ogg",
    "alien_explosion": "audio/alienexplosion.ogg",
    "player_death": "audio/playerDeath.ogg",
    "ufo": "audio/ufo.ogg",
}

# Sizes and colours for stand-in art when image files are not installed.
_PLACEHOLDERS = {
    "invaders/topInvader.png": ((INVADER_SIZE * 2, INVADER_SIZE), (200, 80, 200)),
    "invaders/middleInvader.png": ((INVADER_SIZE * 2, INVADER_SIZE), (80, 200, 200)),
    "invaders/bottomInvader.png": ((INVADER_SIZE * 2, INVADER_SIZE), (80, 200, 80)),
    "player/Player.png": ((16, 8), (80, 255, 80)),
    "player/PlayerShot.png": ((2, 6), (255, 255, 255)),
    "invaders/AlienShot.png": ((3, 6), (255, 120, 120)),
    "invaders/ufo.png": ((16, 8), (255, 60, 60)),
    "player/base.png": ((BASE_TILE_SIZE * 3, BASE_TILE_SIZE), (60, 220, 60)),
}


def _resolve(name: str | Path) -> Path:
    return ASSET_DIR / name


def load_image(name: str | Path) -> pygame.Surface:
    """Load an image; relative names are looked up in the asset directory."""
    path = _resolve(name)
    if not path.is_file():
        raise FileNotFoundError(f"image not found: {path}")
    return pygame.image.load(str(path))


def load_audio(name: str | Path) -> bytes:
    """Return the raw bytes of an audio file from the asset directory."""
    path = _resolve(name)
    if not path.is_file():
        raise FileNotFoundError(f"audio not found: {path}")
    return path.read_bytes()


def split_frames(sheet: pygame.Surface, size: int, count: int) -> list[pygame.Surface]:
    """Cut ``count`` square frames of ``size`` pixels from a horizontal sheet."""
    return [sheet.subsurface(pygame.Rect(i * size, 0, size, size)) for i in range(count)]


@dataclass(frozen=True)
class Sprites:
    """Every image the game draws."""

    top_invader: tuple[pygame.Surface, ...]
    middle_invader: tuple[pygame.Surface, ...]
    bottom_invader: tuple[pygame.Surface, ...]
    player: pygame.Surface
    player_shot: pygame.Surface
    alien_shot: pygame.Surface
    ufo: pygame.Surface
    base: tuple[pygame.Surface, ...]


def _image_or_placeholder(name: str) -> pygame.Surface:
    try:
        return load_image(name)
    except FileNotFoundError:
        size, colour = _PLACEHOLDERS[name]
        log.debug("using placeholder for missing image %s", name)
        surface = pygame.Surface(size)
        surface.fill(colour)
        return surface


@cache
def sprites() -> Sprites:
    """Load the game's sprites once and share them."""

    def invader(name: str) -> tuple[pygame.Surface, ...]:
        return tuple(split_frames(_image_or_placeholder(name), INVADER_SIZE, 2))

    return Sprites(
        top_invader=invader("invaders/topInvader.png"),
        middle_invader=invader("invaders/middleInvader.png"),
        bottom_invader=invader("invaders/bottomInvader.png"),
        player=_image_or_placeholder("player/Player.png"),
        player_shot=_image_or_placeholder("player/PlayerShot.png"),
        alien_shot=_image_or_placeholder("invaders/AlienShot.png"),
        ufo=_image_or_placeholder("invaders/ufo.png"),
        base=tuple(split_frames(_image_or_placeholder("player/base.png"), BASE_TILE_SIZE, 3)),
    )


class SoundBank:
    """Plays named sound effects and at most one looping sound.

    Audio problems are logged and otherwise ignored so the game keeps running.
    """

    def __init__(self, enabled: bool = True, sample_rate: int = SAMPLE_RATE) -> None:
        self._enabled = enabled
        self._sample_rate = sample_rate
        self._ready: bool | None = None
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._loop_channel = None
        self.looping: str | None = None

    @staticmethod
    def _check(name: str) -> None:
        if name not in SOUND_FILES:
            raise KeyError(f"unknown sound: {name!r}")

    def _mixer_ready(self) -> bool:
        if not self._enabled:
            return False
        if self._ready is None:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init(frequency=self._sample_rate)
                self._ready = True
            except pygame.error as exc:
                log.warning("audio unavailable: %s", exc)
                self._ready = False
        return self._ready

    def _sound(self, name: str) -> pygame.mixer.Sound | None:
        if name not in self._sounds:
            try:
                data = load_audio(SOUND_FILES[name])
                self._sounds[name] = pygame.mixer.Sound(file=io.BytesIO(data))
            except (OSError, pygame.error) as exc:
                log.warning("error loading %s sound: %s", name, exc)
                return None
        return self._sounds[name]

    def play(self, name: str, volume: float = 1.0) -> None:
        """Play a sound effect once."""
        self._check(name)
        if not self._mixer_ready():
            return
        sound = self._sound(name)
        if sound is not None:
            sound.set_volume(volume)
            sound.play()

    def start_loop(self, name: str, volume: float = 1.0) -> None:
        """Start a sound that repeats until ``stop_loop`` is called."""
        self._check(name)
        self.stop_loop()
        self.looping = name
        if not self._mixer_ready():
            return
        sound = self._sound(name)
        if sound is not None:
            sound.set_volume(volume)
            self._loop_channel = sound.play(loops=-1)

    def stop_loop(self) -> None:
        """Stop the looping sound, if any."""
        if self._loop_channel is not None:
            self._loop_channel.stop()
            self._loop_channel = None
        self.looping = None
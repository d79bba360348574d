"""Engine-wide settings and default key bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

GAME_TITLE = "ffge - Free Fighting Game Engine"
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
COLOR_DEPTH = 32
TARGET_FPS = 60
MAX_PLAYERS = 2
MAX_ENEMIES = 4

SPRITES_PATH = "assets/sprites/"
SOUNDS_PATH = "assets/sounds/"
MUSIC_PATH = "assets/music/"
FONTS_PATH = "assets/fonts/"

# Key identifiers follow the names reported by pygame.key.name().
P1_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "left": "left",
        "right": "right",
        "up": "up",
        "down": "down",
        "bt1": "z",
        "bt2": "x",
        "bt3": "c",
        "bt4": "v",
        "start": "return",
        "select": "space",
    }
)

P2_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "left": "a",
        "right": "d",
        "up": "w",
        "down": "s",
        "bt1": "u",
        "bt2": "i",
        "bt3": "o",
        "bt4": "j",
        "start": "backspace",
        "select": "tab",
    }
)


@dataclass(frozen=True)
class Config:
    """General game settings."""

    title: str = GAME_TITLE
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    color_depth: int = COLOR_DEPTH
    target_fps: int = TARGET_FPS
    max_players: int = MAX_PLAYERS
    max_enemies: int = MAX_ENEMIES
    sprites_path: str = SPRITES_PATH
    sounds_path: str = SOUNDS_PATH
    music_path: str = MUSIC_PATH
    fonts_path: str = FONTS_PATH
    p1_keys: Mapping[str, str] = field(default_factory=lambda: P1_KEYS)
    p2_keys: Mapping[str, str] = field(default_factory=lambda: P2_KEYS)

    @property
    def resolution(self) -> tuple[int, int]:
        """Window size as (width, height)."""
        return (self.screen_width, self.screen_height)


def load_config() -> Config:
    """Return the game configuration; currently the built-in defaults."""
    return Config()
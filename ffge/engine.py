"""Engine lifecycle: subsystem start-up, exit signalling and the millisecond clock."""

from __future__ import annotations

import time
from typing import Collection

import pygame

from ffge.config import GAME_TITLE
from ffge.utils import log

EXIT_KEY = "escape"


class EngineError(RuntimeError):
    """Raised when a required subsystem cannot be started."""


class Engine:
    """Starts the multimedia subsystems and tracks whether the game should end."""

    def __init__(self, title: str = GAME_TITLE) -> None:
        self.title = title
        self.sound_enabled = False
        self._exit_requested = False
        self._started_at: float | None = None

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """Initialise display, keyboard and (optionally) sound; start the clock."""
        pygame.init()
        if not pygame.display.get_init():
            raise EngineError("could not initialise the display")
        pygame.display.set_caption(self.title)
        try:
            self.sound_enabled = bool(pygame.mixer.get_init())
        except (pygame.error, NotImplementedError):
            self.sound_enabled = False
        if not self.sound_enabled:
            log("could not initialise sound; continuing without it")
        self._started_at = time.monotonic()

    def request_exit(self) -> None:
        """Ask the game to end, as when the window is closed."""
        self._exit_requested = True

    def should_exit(self, pressed_keys: Collection[str]) -> bool:
        """True once an exit was requested or while the escape key is down."""
        return self._exit_requested or EXIT_KEY in pressed_keys

    def elapsed_ms(self) -> int:
        """Milliseconds since start()."""
        if self._started_at is None:
            raise RuntimeError("engine not started")
        return int((time.monotonic() - self._started_at) * 1000)

    def shutdown(self) -> None:
        """Stop the clock and release the subsystems."""
        self._started_at = None
        pygame.quit()
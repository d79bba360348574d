"""In-game editor for repositioning players and enemies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Collection, Sequence

from ffge.enemy import Enemy
from ffge.player import Player
from ffge.utils import delay

CURSOR_STEP = 4
DEBOUNCE_MS = 150
NO_SELECTION = -1


class EditorMode(IntEnum):
    NONE = 0
    STAGE = 1
    PLAYER = 2
    ENEMY = 3


@dataclass
class Editor:
    """Editor state: mode, cursor and the selected entity.

    In PLAYER mode the selected entity is a player number (1 for the first
    player); in ENEMY mode it is an enemy index starting at 0.
    """

    mode: EditorMode = EditorMode.NONE
    selected_entity: int = NO_SELECTION
    cursor_x: int = 100
    cursor_y: int = 100
    is_active: bool = False
    debounce_ms: int = DEBOUNCE_MS

    @property
    def cursor(self) -> tuple[int, int]:
        return (self.cursor_x, self.cursor_y)

    def toggle(self) -> None:
        """Switch the editor on (in stage mode) or off, clearing the selection."""
        self.is_active = not self.is_active
        self.mode = EditorMode.STAGE if self.is_active else EditorMode.NONE
        self.selected_entity = NO_SELECTION

    def update(
        self,
        pressed_keys: Collection[str],
        players: Sequence[Player],
        enemies: Sequence[Enemy],
    ) -> None:
        """Handle one frame of editor input and drag the selected entity."""
        if not self.is_active:
            return

        if "tab" in pressed_keys:
            self.mode = EditorMode((self.mode + 1) % len(EditorMode))
            delay(self.debounce_ms)

        if "left" in pressed_keys:
            self.cursor_x -= CURSOR_STEP
        if "right" in pressed_keys:
            self.cursor_x += CURSOR_STEP
        if "up" in pressed_keys:
            self.cursor_y -= CURSOR_STEP
        if "down" in pressed_keys:
            self.cursor_y += CURSOR_STEP

        if "return" in pressed_keys:
            if self.mode is EditorMode.PLAYER:
                self.selected_entity = 1
            elif self.mode is EditorMode.ENEMY:
                self.selected_entity = 0
            else:
                self.selected_entity = NO_SELECTION
            delay(self.debounce_ms)

        if self.selected_entity == NO_SELECTION:
            return
        target: Player | Enemy | None = None
        if self.mode is EditorMode.PLAYER:
            if 1 <= self.selected_entity <= len(players):
                target = players[self.selected_entity - 1]
        elif self.mode is EditorMode.ENEMY:
            if 0 <= self.selected_entity < len(enemies):
                target = enemies[self.selected_entity]
        if target is not None:
            target.x = self.cursor_x
            target.y = self.cursor_y

    def status_lines(self) -> list[str]:
        """Text the editor shows on screen; empty while inactive."""
        if not self.is_active:
            return []
        lines = [f"EDITOR ATIVO [{self.mode.name}]"]
        if self.selected_entity != NO_SELECTION:
            lines.append(f"Entidade selecionada: {self.selected_entity}")
        return lines
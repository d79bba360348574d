"""Scene rendering: players, enemies, the health bar and the editor overlay."""

from __future__ import annotations

from typing import Any, Sequence

import pygame

from ffge.config import Config, load_config

BACKGROUND = (70, 70, 70)
PLAYER_COLOR = (0, 0, 255)
ENEMY_COLOR = (255, 0, 0)
HUD_FRAME_COLOR = (255, 255, 255)
HUD_BAR_COLOR = (0, 255, 0)
EDITOR_COLOR = (255, 255, 0)
EDITOR_INFO_COLOR = (255, 255, 255)
MASK_COLOR = (255, 0, 255)

PLACEHOLDER_WIDTH = 40
PLACEHOLDER_HEIGHT = 80
CURSOR_RADIUS = 8
TEXT_LEFT = 10
TEXT_TOP = 10
TEXT_LINE_HEIGHT = 15
FONT_SIZE = 16


class GraphicsError(RuntimeError):
    """Raised when the video mode cannot be set up."""


class Renderer:
    """Draws a frame into an off-screen buffer and copies it to the screen.

    Without a target surface the renderer opens its own window.
    """

    def __init__(self, config: Config | None = None, surface: pygame.Surface | None = None) -> None:
        self.config = config or load_config()
        self._owns_display = surface is None
        if surface is None:
            try:
                if not pygame.display.get_init():
                    pygame.display.init()
                surface = pygame.display.set_mode(self.config.resolution)
                pygame.display.set_caption(self.config.title)
            except pygame.error as exc:
                raise GraphicsError(f"could not set the video mode: {exc}") from exc
        self.screen: pygame.Surface = surface
        self.buffer: pygame.Surface | None = pygame.Surface(self.config.resolution)
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _draw_entity(self, entity: Any, fallback_color: tuple[int, int, int]) -> None:
        if self.buffer is None:
            return
        sprite = entity.sprite
        if sprite is not None:
            if sprite.get_colorkey() is None:
                sprite.set_colorkey(MASK_COLOR)
            self.buffer.blit(sprite, (entity.x, entity.y))
        else:
            rect = pygame.Rect(entity.x, entity.y, PLACEHOLDER_WIDTH + 1, PLACEHOLDER_HEIGHT + 1)
            pygame.draw.rect(self.buffer, fallback_color, rect)

    def draw_player(self, player: Any) -> None:
        """Draw a player's sprite, or a blue box when it has none."""
        self._draw_entity(player, PLAYER_COLOR)

    def draw_enemy(self, enemy: Any) -> None:
        """Draw an enemy's sprite, or a red box when it has none."""
        self._draw_entity(enemy, ENEMY_COLOR)

    def _draw_hud(self, players: Sequence[Any]) -> None:
        assert self.buffer is not None
        pygame.draw.rect(self.buffer, HUD_FRAME_COLOR, pygame.Rect(10, 10, 101, 21), 1)
        if not players:
            return
        hp = players[0].hp
        left = min(11, 11 + hp)
        pygame.draw.rect(self.buffer, HUD_BAR_COLOR, pygame.Rect(left, 11, abs(hp) + 1, 19))

    def _draw_editor(self, editor: Any) -> None:
        assert self.buffer is not None
        if editor is None or not editor.is_active:
            return
        pygame.draw.circle(self.buffer, EDITOR_COLOR, editor.cursor, CURSOR_RADIUS, 1)
        font = self._get_font()
        colors = (EDITOR_COLOR, EDITOR_INFO_COLOR)
        for row, line in enumerate(editor.status_lines()):
            text = font.render(line, False, colors[min(row, 1)])
            self.buffer.blit(text, (TEXT_LEFT, TEXT_TOP + row * TEXT_LINE_HEIGHT))

    def render(self, players: Sequence[Any], enemies: Sequence[Any], editor: Any = None) -> None:
        """Draw the whole scene and show it; does nothing once closed."""
        if self.buffer is None:
            return
        self.buffer.fill(BACKGROUND)
        for player in players:
            self.draw_player(player)
        for enemy in enemies:
            self.draw_enemy(enemy)
        self._draw_hud(players)
        self._draw_editor(editor)
        self.screen.blit(self.buffer, (0, 0))
        if self._owns_display:
            pygame.display.flip()

    def close(self) -> None:
        """Release the buffer and, if the renderer opened it, the window."""
        self.buffer = None
        if self._owns_display and pygame.display.get_init():
            pygame.display.quit()
        self._owns_display = False
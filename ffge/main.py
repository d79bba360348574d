"""Game entry point: start the engine and run the main loop."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

import pygame

from ffge.config import load_config
from ffge.editor import Editor
from ffge.enemy import create_enemies
from ffge.engine import EXIT_KEY, Engine, EngineError
from ffge.graphics import MASK_COLOR, GraphicsError, Renderer
from ffge.input import P1_BINDINGS, P2_BINDINGS, InputManager
from ffge.player import Player, create_players
from ffge.utils import log

_EDITOR_KEYS = frozenset({"tab", "left", "right", "up", "down", "return"})


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ffge", description="Free Fighting Game Engine")
    parser.add_argument(
        "--frames",
        type=_positive_int,
        default=None,
        help="stop after this many frames",
    )
    return parser.parse_args(argv)


def _watched_keys(players: Iterable[Player]) -> dict[str, int]:
    names = set(P1_BINDINGS.values()) | set(P2_BINDINGS.values()) | _EDITOR_KEYS | {EXIT_KEY}
    for player in players:
        b = player.bindings
        names.update((b.left, b.right, b.up, b.down, b.attack))
    return {name: pygame.key.key_code(name) for name in names}


def _pressed_keys(watched: dict[str, int]) -> set[str]:
    state = pygame.key.get_pressed()
    return {name for name, code in watched.items() if state[code]}


def _attach_sprites(players: Iterable[Player]) -> None:
    for player in players:
        sprite = pygame.Surface(player.sprite_size)
        sprite.fill(player.sprite_color)
        sprite.set_colorkey(MASK_COLOR)
        player.sprite = sprite


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; returns the process exit status."""
    args = _parse_args(argv)
    engine = Engine()
    try:
        engine.start()
    except EngineError as exc:
        log(f"could not start the engine: {exc}")
        pygame.quit()
        return 1

    config = load_config()
    renderer: Renderer | None = None
    try:
        renderer = Renderer(config)
        players = create_players()
        _attach_sprites(players)
        enemies = create_enemies()
        inputs = InputManager()
        editor = Editor()
        watched = _watched_keys(players)
        clock = pygame.time.Clock()

        frames = 0
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    engine.request_exit()
            pressed = _pressed_keys(watched)
            if engine.should_exit(pressed):
                break
            inputs.update(pressed)
            for player in players:
                player.update(pressed)
            editor.update(pressed, players, enemies)
            renderer.render(players, enemies, editor)
            frames += 1
            if args.frames is not None and frames >= args.frames:
                break
            clock.tick(config.target_fps)
    except GraphicsError as exc:
        log(str(exc))
        return 1
    finally:
        if renderer is not None:
            renderer.close()
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
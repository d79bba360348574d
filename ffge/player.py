"""Fighters controlled from the keyboard, with their movement history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Collection, Iterable

SLOT_COUNT = 17
MOVE_STEP = 4

STATE_IDLE = 0
STATE_ATTACK = 1

SPRITE_SIZE = (480, 480)
SPRITE_COLOR = (255, 0, 255)


@dataclass(frozen=True)
class PlayerBindings:
    """Key names that move a player and trigger its attack."""

    left: str
    right: str
    up: str
    down: str
    attack: str


P1_BINDINGS = PlayerBindings(left="left", right="right", up="up", down="down", attack="z")
P2_BINDINGS = PlayerBindings(left="a", right="d", up="w", down="s", attack="l")


def _empty_slots() -> list[int]:
    return [0] * SLOT_COUNT


@dataclass
class Player:
    """One fighter: position, animation data and recent movement slots."""

    name: str
    x: int
    y: int
    bindings: PlayerBindings
    state: int = STATE_IDLE
    index_anim: int = 0
    start_frame: int = 0
    total_frames: int = 1
    frame_count: int = 1
    x_align: int = 0
    y_align: int = 0
    hp: int = 0
    slot: list[int] = field(default_factory=_empty_slots)
    bt_slot: list[int] = field(default_factory=_empty_slots)
    t_slot: list[int] = field(default_factory=_empty_slots)
    sprite_size: tuple[int, int] = SPRITE_SIZE
    sprite_color: tuple[int, int, int] = SPRITE_COLOR
    sprite: Any = None
    _last_position: tuple[int, int] = field(default=(0, 0), init=False, repr=False)

    def check_keys(self, pressed_keys: Collection[str]) -> None:
        """Move by the held direction keys and start an attack on the attack key."""
        keys = self.bindings
        if keys.left in pressed_keys:
            self.x -= MOVE_STEP
        if keys.right in pressed_keys:
            self.x += MOVE_STEP
        if keys.up in pressed_keys:
            self.y -= MOVE_STEP
        if keys.down in pressed_keys:
            self.y += MOVE_STEP
        if keys.attack in pressed_keys:
            self.state = STATE_ATTACK

    def record_movement(self) -> None:
        """Push the packed position onto the slot history when the player has moved."""
        position = (self.x, self.y)
        if position == self._last_position:
            return
        packed = (self.x << 8) | self.y
        self.slot[:] = [packed, *self.slot[: SLOT_COUNT - 1]]
        self._last_position = position

    def apply_state(self) -> None:
        """Resolve the current state; an attack returns to idle once performed."""
        if self.state == STATE_ATTACK:
            self.state = STATE_IDLE

    def update(self, pressed_keys: Collection[str]) -> None:
        """Advance this player by one frame."""
        self.check_keys(pressed_keys)
        self.record_movement()
        self.apply_state()


def create_players() -> list[Player]:
    """The two players at their starting positions."""
    return [
        Player(name="Player1", x=150, y=300, bindings=P1_BINDINGS),
        Player(name="Player2", x=350, y=300, bindings=P2_BINDINGS),
    ]


def update_players(players: Iterable[Player], pressed_keys: Collection[str]) -> None:
    """Advance every player by one frame, phase by phase."""
    players = list(players)
    for player in players:
        player.check_keys(pressed_keys)
    for player in players:
        player.record_movement()
    for player in players:
        player.apply_state()
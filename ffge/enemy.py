"""Patrolling enemies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ffge.config import MAX_ENEMIES

STATE_PATROL = 0
STATE_RETURN = 1

LEFT_BOUND = 100
RIGHT_BOUND = 400

SPRITE_SIZE = (480, 480)
SPRITE_COLOR = (128, 0, 0)


@dataclass
class Enemy:
    """An enemy that walks back and forth between two bounds."""

    index: int
    name: str
    x: int
    y: int
    state: int = STATE_PATROL
    index_anim: int = 0
    start_frame: int = 0
    total_frames: int = 1
    frame_count: int = 1
    x_align: int = 0
    y_align: int = 0
    hp: int = 100
    sprite_size: tuple[int, int] = SPRITE_SIZE
    sprite_color: tuple[int, int, int] = SPRITE_COLOR
    sprite: Any = None

    @property
    def direction(self) -> int:
        """Patrol direction: even enemies start to the right, odd ones to the left."""
        return 1 if self.index % 2 == 0 else -1

    def update(self) -> None:
        """Step one pixel and flip state when a bound is crossed."""
        if self.state == STATE_PATROL:
            self.x += self.direction
            if self.x > RIGHT_BOUND or self.x < LEFT_BOUND:
                self.state = STATE_RETURN
        elif self.state == STATE_RETURN:
            self.x -= self.direction
            if self.x < LEFT_BOUND or self.x > RIGHT_BOUND:
                self.state = STATE_PATROL


def create_enemies() -> list[Enemy]:
    """The enemies at their starting positions."""
    return [
        Enemy(index=i, name=f"Enemy{i + 1}", x=200 + i * 80, y=300)
        for i in range(MAX_ENEMIES)
    ]


def update_enemies(enemies: Iterable[Enemy]) -> None:
    """Advance every enemy by one frame."""
    for enemy in enemies:
        enemy.update()
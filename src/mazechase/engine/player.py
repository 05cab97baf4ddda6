# src/mazechase/engine/player.py
# Player actor: buffered turns and tile-by-tile stepping.
# The queued direction is adopted as soon as it becomes legal, so a held key
# takes effect at the next open corridor.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid import Grid
from .motion import LEFT, can_move, is_direction, translate

XY = Tuple[int, int]


@dataclass
class Player:
    x: int
    y: int
    direction: str = LEFT
    queued_direction: str = LEFT
    speed: int = 1
    start_x: Optional[int] = None
    start_y: Optional[int] = None

    def __post_init__(self) -> None:
        if self.start_x is None or self.start_y is None:
            self.start_x, self.start_y = self.x, self.y

    @property
    def pos(self) -> XY:
        return (self.x, self.y)

    @property
    def start(self) -> XY:
        return (self.start_x, self.start_y)

    def set_queued(self, direction: str) -> bool:
        if not is_direction(direction):
            return False
        self.queued_direction = direction
        return True

    def step(self, grid: Grid) -> bool:
        """Advance one tick. Returns True if the player changed cell."""
        if can_move(grid, self.pos, self.queued_direction):
            self.direction = self.queued_direction
        if not can_move(grid, self.pos, self.direction):
            return False
        self.x, self.y = translate(self.pos, self.direction, grid.width)
        return True

    def reset_to_start(self) -> None:
        self.x, self.y = self.start
        self.direction = LEFT
        self.queued_direction = LEFT

# src/mazechase/engine/motion.py
# Cardinal directions, wrap-around translation and wall checks shared by
# the player and the pursuers.

from __future__ import annotations

from typing import Dict, List, Tuple

from ..grid import Grid

XY = Tuple[int, int]

UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"

DIRECTIONS: Dict[str, XY] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Enumeration order doubles as the tie-break order for pursuers.
ALL_DIRECTIONS: List[str] = [UP, DOWN, LEFT, RIGHT]


def is_direction(name: object) -> bool:
    return name in DIRECTIONS


def wrap_x(x: int, width: int) -> int:
    if x < 0:
        return width - 1
    if x >= width:
        return 0
    return x


def translate(pos: XY, direction: str, width: int) -> XY:
    """Step one cell; x wraps across the board edge, y never does."""
    dx, dy = DIRECTIONS[direction]
    return (wrap_x(pos[0] + dx, width), pos[1] + dy)


def can_move(grid: Grid, pos: XY, direction: str) -> bool:
    if direction not in DIRECTIONS:
        return False
    nx, ny = translate(pos, direction, grid.width)
    if not (0 <= ny < grid.height):
        return False
    return not grid.is_wall((nx, ny))


def legal_directions(grid: Grid, pos: XY) -> List[str]:
    return [d for d in ALL_DIRECTIONS if can_move(grid, pos, d)]


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

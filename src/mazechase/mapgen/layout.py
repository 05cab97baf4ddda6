# src/mazechase/mapgen/layout.py
# Fixed maze layout and the per-round blueprint builder.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..grid import Grid

XY = Tuple[int, int]

# "#" wall, "." pellet, "o" power pellet, anything else open floor.
# "G" marks the player start cell.
MAZE: Tuple[str, ...] = (
    "###################",
    "#o....#.....#....o#",
    "#.###.#.###.#.###.#",
    "#.#...#.....#...#.#",
    "#.#.###.###.###.#.#",
    "#.#...........#.#.#",
    "#.#.###.#.#.###.#.#",
    "#.....#.#.#.#.....#",
    "###.#.#.#.#.#.#.###",
    "#...#.#.....#.#...#",
    "#.#.#.###.###.#.#.#",
    "#.#.#.#   #.#.#.#.#",
    "#.#.#.#.#.#.#.#.#.#",
    "#........G........#",
    "###.###.#.#.###.###",
    "#o....#.....#....o#",
    "###################",
)

PLAYER_START: XY = (9, 13)

PURSUER_STARTS: Tuple[XY, ...] = (
    (8, 11),
    (9, 11),
    (9, 9),
    (9, 10),
)


@dataclass(frozen=True)
class PursuerPreset:
    ident: str
    name: str
    color: str
    corner: str  # which scatter corner, resolved against the layout size


PURSUER_PRESETS: Tuple[PursuerPreset, ...] = (
    PursuerPreset("blinky", "Blinky", "#ff3c3c", "top-right"),
    PursuerPreset("pinky", "Pinky", "#ff9bff", "top-left"),
    PursuerPreset("inky", "Inky", "#4effff", "bottom-right"),
    PursuerPreset("clyde", "Clyde", "#ffb852", "bottom-left"),
)


def scatter_corner(corner: str, width: int, height: int) -> XY:
    """Interior corner cell just inside the border."""
    x = width - 2 if corner.endswith("right") else 1
    y = 1 if corner.startswith("top") else height - 2
    return (x, y)


@dataclass
class LevelBlueprint:
    grid: Grid
    player_start: XY
    pursuer_starts: List[XY]
    pellets: int


def build_level(
    rows: Sequence[str] = MAZE,
    *,
    player_start: XY = PLAYER_START,
    pursuer_starts: Optional[Sequence[XY]] = None,
) -> LevelBlueprint:
    """Parse a layout and clear every actor start cell.

    The pellet count is taken after clearing, so it always equals the
    collectibles left on the grid.
    """
    grid = Grid.from_rows(rows)
    starts = list(PURSUER_STARTS if pursuer_starts is None else pursuer_starts)
    for pos in [player_start, *starts]:
        grid.clear(pos)
    return LevelBlueprint(
        grid=grid,
        player_start=player_start,
        pursuer_starts=starts,
        pellets=grid.collectibles_remaining(),
    )

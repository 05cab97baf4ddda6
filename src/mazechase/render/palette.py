# src/mazechase/render/palette.py
# Shared RGBA colors for the pygame and Pillow renderers.
from typing import Tuple

from ..engine.pursuer import EVADABLE
from ..tiles import PELLET, POWER, WALL

RGBA = Tuple[int, int, int, int]

BACKGROUND: RGBA = (2, 6, 23, 255)
WALL_FILL: RGBA = (12, 74, 110, 255)
WALL_EDGE: RGBA = (14, 165, 233, 255)
PELLET_FILL: RGBA = (253, 224, 71, 255)
POWER_FILL: RGBA = (254, 249, 195, 255)
PLAYER_FILL: RGBA = (253, 224, 71, 255)
EYES_ONLY_FILL: RGBA = (241, 245, 249, 255)
EVADABLE_FILL: RGBA = (37, 99, 235, 255)


def hex_to_rgba(color: str) -> RGBA:
    s = color.lstrip("#")
    if len(s) != 6:
        raise ValueError(f"expected #rrggbb, got {color!r}")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16), 255)


def cell_fill(kind: str) -> RGBA:
    return WALL_FILL if kind == WALL else BACKGROUND


def pellet_radius(kind: str, tile: int) -> int:
    # 0 -> nothing to draw
    if kind == PELLET:
        return max(1, tile // 8)
    if kind == POWER:
        return max(2, tile // 4)
    return 0


def pursuer_fill(pursuer) -> RGBA:
    if pursuer.eyes_only:
        return EYES_ONLY_FILL
    if pursuer.mode == EVADABLE:
        return EVADABLE_FILL
    return hex_to_rgba(pursuer.color)

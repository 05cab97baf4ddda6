# src/mazechase/render/snapshot.py
# Render a round state to a Pillow image (headless; used by tools and tests).

from PIL import Image, ImageDraw

from ..tiles import POWER, WALL
from .palette import (
    BACKGROUND, PELLET_FILL, PLAYER_FILL, POWER_FILL, WALL_EDGE,
    cell_fill, pellet_radius, pursuer_fill,
)


def _disc(draw, x, y, tile, rgba, inset):
    draw.ellipse(
        [x * tile + inset, y * tile + inset, (x + 1) * tile - 1 - inset, (y + 1) * tile - 1 - inset],
        fill=rgba,
    )


def render_snapshot(state, tile_size: int = 16) -> Image.Image:
    grid = state.grid
    img = Image.new("RGBA", (grid.width * tile_size, grid.height * tile_size), color=BACKGROUND)
    draw = ImageDraw.Draw(img)

    for y, row in enumerate(grid.cells):
        for x, kind in enumerate(row):
            x0, y0 = x * tile_size, y * tile_size
            x1, y1 = x0 + tile_size - 1, y0 + tile_size - 1
            if kind == WALL:
                draw.rectangle([x0, y0, x1, y1], fill=cell_fill(kind), outline=WALL_EDGE)
                continue
            r = pellet_radius(kind, tile_size)
            if r:
                cx, cy = x0 + tile_size // 2, y0 + tile_size // 2
                color = POWER_FILL if kind == POWER else PELLET_FILL
                draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=color)

    inset = max(1, tile_size // 8)
    for p in state.pursuers:
        _disc(draw, p.x, p.y, tile_size, pursuer_fill(p), inset)
    px, py = state.player.pos
    _disc(draw, px, py, tile_size, PLAYER_FILL, inset)
    return img

from __future__ import annotations
import pygame
from functools import lru_cache

from ..tiles import POWER, WALL
from .palette import (
    PLAYER_FILL, POWER_FILL, PELLET_FILL, WALL_EDGE,
    cell_fill, pellet_radius, pursuer_fill,
)

class Tileset:
    """
    Tiny cached surface factory:
      - one square surface per cell kind
      - actors are drawn as discs on top
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=16)
    def cell(self, kind: str) -> pygame.Surface:
        t = self.tile_size
        img = pygame.Surface((t, t), pygame.SRCALPHA)
        img.fill(cell_fill(kind))
        if kind == WALL:
            pygame.draw.rect(img, WALL_EDGE, img.get_rect(), 1)
        r = pellet_radius(kind, t)
        if r:
            color = POWER_FILL if kind == POWER else PELLET_FILL
            pygame.draw.circle(img, color, (t // 2, t // 2), r)
        return img

    @lru_cache(maxsize=64)
    def disc(self, rgba: tuple) -> pygame.Surface:
        t = self.tile_size
        img = pygame.Surface((t, t), pygame.SRCALPHA)
        pygame.draw.circle(img, rgba, (t // 2, t // 2), max(2, t // 2 - 3))
        return img


def draw_board(screen: pygame.Surface, state, tiles: Tileset, origin=(0, 0)) -> None:
    """Blit grid, pursuers and player. Reads the state, never writes it."""
    ox, oy = origin
    t = tiles.tile_size
    for y, row in enumerate(state.grid.cells):
        for x, kind in enumerate(row):
            screen.blit(tiles.cell(kind), (ox + x * t, oy + y * t))
    for p in state.pursuers:
        screen.blit(tiles.disc(pursuer_fill(p)), (ox + p.x * t, oy + p.y * t))
    px, py = state.player.pos
    screen.blit(tiles.disc(PLAYER_FILL), (ox + px * t, oy + py * t))

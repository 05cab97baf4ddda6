from dataclasses import dataclass
from typing import Optional

from ..engine.state import GAME_OVER, LIFE_LOST, PAUSED, READY, ROUND_WON

STATUS_MESSAGES = {
    READY: "Press Space to Play",
    PAUSED: "Paused",
    LIFE_LOST: "Get Ready",
    GAME_OVER: "Game Over",
    ROUND_WON: "Level Cleared!",
}

@dataclass
class StatusBarState:
    score: int = 0
    best_score: int = 0
    lives: int = 3
    level: int = 1

    @classmethod
    def from_round(cls, state) -> "StatusBarState":
        return cls(score=state.score, best_score=state.best_score, lives=state.lives, level=state.level)

def status_message(status: str) -> Optional[str]:
    """Overlay text for a status; None while running."""
    return STATUS_MESSAGES.get(status)

def render_status_bar(screen, origin_xy: tuple[int, int], width: int, height: int, state: StatusBarState) -> None:
    """
    Draw a one-row text status bar. Does not touch the round state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, max(10, (height * 2) // 3))

    def label(x, text, color=(220, 220, 220)):
        img = font.render(text, True, color)
        screen.blit(img, (ox + x, oy + (height - img.get_height()) // 2))
        return x + img.get_width() + (height // 2)

    x = height // 2
    x = label(x, f"SCORE {state.score:06d}", (253, 224, 71))
    x = label(x, f"BEST {state.best_score:06d}")
    x = label(x, f"LIVES {max(0, min(99, state.lives))}")
    x = label(x, f"LEVEL {state.level}")

def render_overlay_message(screen, rect, status: str) -> None:
    import pygame
    text = status_message(status)
    if not text:
        return
    shade = pygame.Surface(rect.size, pygame.SRCALPHA)
    shade.fill((2, 6, 23, 180))
    screen.blit(shade, rect.topleft)
    font = pygame.font.SysFont(None, max(16, rect.width // 10))
    img = font.render(text, True, (253, 224, 71))
    screen.blit(img, img.get_rect(center=rect.center))

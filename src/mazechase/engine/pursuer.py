# src/mazechase/engine/pursuer.py
# Pursuer engine: per-tick mode transitions and direction choice.
# ----------------------------------------------------------------------------
# Direction choice
#   1) Legal set = cardinal steps that are in bounds (y) and not walls.
#      Empty legal set: keep facing and hold position.
#   2) The reverse of the current facing is dropped unless it is all that is left.
#   3) Target by mode:
#        pursue     -> player with chase_probability, else the scatter corner
#        retreating -> own home cell
#        evadable   -> no target, uniform pick among candidates
#   4) Toward-target picks the smallest Manhattan distance from the resulting
#      cell; first minimum in ALL_DIRECTIONS order wins.
#
# Mode transitions (before the step)
#   - Power pellet eaten this tick: every non-retreating pursuer becomes
#     evadable with a full countdown and eyes_only cleared.
#   - Otherwise evadable counts down and falls back to pursue at zero.
#   - Retreating at home -> pursue. Checked again after the step since the
#     arrival can happen on this very move.
# ----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import RULES, Rules
from ..grid import Grid
from .motion import LEFT, OPPOSITE, legal_directions, manhattan, translate
from .timing import TIMING, TimingModel

XY = Tuple[int, int]

PURSUE = "pursue"
EVADABLE = "evadable"
RETREATING = "retreating"


@dataclass
class Pursuer:
    ident: str
    x: int
    y: int
    scatter_target: XY
    name: str = ""
    color: str = "#ffffff"
    direction: str = LEFT
    mode: str = PURSUE
    evadable_ticks: int = 0
    speed: int = 1
    eyes_only: bool = False
    home_x: Optional[int] = None
    home_y: Optional[int] = None

    def __post_init__(self) -> None:
        if self.home_x is None or self.home_y is None:
            self.home_x, self.home_y = self.x, self.y
        if not self.name:
            self.name = self.ident.capitalize()

    @property
    def pos(self) -> XY:
        return (self.x, self.y)

    @property
    def home(self) -> XY:
        return (self.home_x, self.home_y)

    def frighten(self, ticks: int) -> None:
        self.mode = EVADABLE
        self.evadable_ticks = ticks
        self.eyes_only = False

    def capture_at(self, pos: XY) -> None:
        # Captured in place; pathing home starts next tick.
        self.x, self.y = pos
        self.mode = RETREATING
        self.evadable_ticks = 0
        self.eyes_only = True

    def reset_to_start(self) -> None:
        self.x, self.y = self.home
        self.direction = LEFT
        self.mode = PURSUE
        self.evadable_ticks = 0
        self.eyes_only = False

    def arrive_if_home(self) -> None:
        if self.mode == RETREATING and self.pos == self.home:
            self.mode = PURSUE
            self.eyes_only = False


def choose_direction_toward(pos: XY, target: XY, options: Sequence[str], width: int) -> str:
    chosen = options[0]
    best = None
    for direction in options:
        dist = manhattan(translate(pos, direction, width), target)
        if best is None or dist < best:
            best = dist
            chosen = direction
    return chosen


def candidate_directions(grid: Grid, p: Pursuer) -> List[str]:
    possible = legal_directions(grid, p.pos)
    forward = [d for d in possible if d != OPPOSITE.get(p.direction)]
    return forward or possible


def pick_direction(p: Pursuer, player_pos: XY, grid: Grid, rng, rules: Rules = RULES) -> Optional[str]:
    """Return the direction to step in, or None when boxed in on all sides."""
    options = candidate_directions(grid, p)
    if not options:
        return None

    if p.mode == RETREATING:
        return choose_direction_toward(p.pos, p.home, options, grid.width)

    if p.mode == EVADABLE:
        return rng.choice(options)

    target = player_pos if rng.random() < rules.chase_probability else p.scatter_target
    return choose_direction_toward(p.pos, target, options, grid.width)


def advance_pursuer(
    p: Pursuer,
    player_pos: XY,
    grid: Grid,
    rng,
    *,
    evadable_triggered: bool = False,
    rules: Rules = RULES,
    timing: TimingModel = TIMING,
) -> None:
    """Apply this tick's mode transitions, then take one step (in place)."""
    if evadable_triggered and p.mode != RETREATING:
        p.frighten(timing.evadable_ticks)
    elif p.mode == EVADABLE and p.evadable_ticks > 0:
        p.evadable_ticks -= 1
        if p.evadable_ticks == 0:
            p.mode = PURSUE

    p.arrive_if_home()

    direction = pick_direction(p, player_pos, grid, rng, rules)
    if direction is None:
        return
    p.direction = direction
    p.x, p.y = translate(p.pos, direction, grid.width)

    p.arrive_if_home()

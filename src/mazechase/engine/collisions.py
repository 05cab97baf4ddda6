# src/mazechase/engine/collisions.py
# Engine-side pickups and player/pursuer collision policy (no pygame).
#
# Policy per overlapping pursuer, in the fixed pursuer order:
#   evadable   -> captured: capture bonus, retreating, eyes_only, parked on the
#                 player's cell
#   retreating -> inert
#   pursue     -> fatal; the pass stops at the first fatal pursuer so later
#                 pursuers are neither captured nor scored this tick

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..config import RULES, Rules
from ..grid import Grid
from ..tiles import PELLET, POWER
from .pursuer import EVADABLE, RETREATING, Pursuer

XY = Tuple[int, int]


@dataclass
class PickupEvents:
    kind: str
    points: int = 0
    collected: bool = False
    evadable_triggered: bool = False


@dataclass
class CollisionEvents:
    fatal: bool = False
    captures: int = 0
    points_awarded: int = 0


def on_enter_player(grid: Grid, pos: XY, rules: Rules = RULES) -> PickupEvents:
    kind = grid.consume(pos)
    if kind == PELLET:
        return PickupEvents(kind=kind, points=rules.pellet_score, collected=True)
    if kind == POWER:
        return PickupEvents(kind=kind, points=rules.power_pellet_score, collected=True, evadable_triggered=True)
    return PickupEvents(kind=kind)


def resolve_collisions(player_pos: XY, pursuers: List[Pursuer], rules: Rules = RULES) -> CollisionEvents:
    """Single collision pass. Mutates captured pursuers in place."""
    ev = CollisionEvents()
    for p in pursuers:
        if p.pos != player_pos:
            continue
        if p.mode == EVADABLE:
            p.capture_at(player_pos)
            ev.captures += 1
            ev.points_awarded += rules.capture_score
            continue
        if p.mode == RETREATING:
            continue
        ev.fatal = True
        break
    return ev

# src/mazechase/engine/state.py
# Round state aggregate and the tick simulator.
#
# step() never mutates the state it is given: a running tick works on a copy
# and returns it, every other status returns the input object unchanged or a
# shallow replacement.

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from ..config import RULES, Rules
from ..grid import Grid
from ..mapgen.layout import PURSUER_PRESETS, LevelBlueprint, scatter_corner
from .collisions import CollisionEvents, on_enter_player, resolve_collisions
from .player import Player
from .pursuer import Pursuer, advance_pursuer
from .timing import TIMING, TimingModel

READY = "ready"
RUNNING = "running"
PAUSED = "paused"
LIFE_LOST = "life-lost"
GAME_OVER = "game-over"
ROUND_WON = "round-won"

# Statuses in which a tick changes nothing
_FROZEN = (READY, PAUSED, GAME_OVER, ROUND_WON)


@dataclass
class RoundState:
    grid: Grid
    player: Player
    pursuers: List[Pursuer] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    lives: int = 3
    pellets_remaining: int = 0
    level: int = 1
    status: str = READY
    respawn_ticks: int = 0

    def copy(self) -> "RoundState":
        return replace(
            self,
            grid=self.grid.copy(),
            player=replace(self.player),
            pursuers=[replace(p) for p in self.pursuers],
        )


def build_pursuers(blueprint: LevelBlueprint) -> List[Pursuer]:
    w, h = blueprint.grid.width, blueprint.grid.height
    out: List[Pursuer] = []
    for i, (x, y) in enumerate(blueprint.pursuer_starts):
        preset = PURSUER_PRESETS[i % len(PURSUER_PRESETS)]
        out.append(Pursuer(
            ident=preset.ident,
            name=preset.name,
            color=preset.color,
            x=x,
            y=y,
            scatter_target=scatter_corner(preset.corner, w, h),
        ))
    return out


def new_round(
    blueprint: LevelBlueprint,
    *,
    best_score: int = 0,
    score: int = 0,
    level: int = 1,
    status: str = READY,
    rules: Rules = RULES,
) -> RoundState:
    px, py = blueprint.player_start
    return RoundState(
        grid=blueprint.grid.copy(),
        player=Player(px, py),
        pursuers=build_pursuers(blueprint),
        score=score,
        best_score=max(best_score, score),
        lives=rules.starting_lives,
        pellets_remaining=blueprint.pellets,
        level=level,
        status=status,
        respawn_ticks=0,
    )


def reset_actors(state: RoundState) -> None:
    # Grid and score are left alone: eaten pellets stay eaten.
    state.player.reset_to_start()
    for p in state.pursuers:
        p.reset_to_start()


def _apply_collisions(state: RoundState, rules: Rules) -> CollisionEvents:
    ev = resolve_collisions(state.player.pos, state.pursuers, rules)
    if ev.points_awarded:
        state.score += ev.points_awarded
        state.best_score = max(state.best_score, state.score)
    return ev


def _lose_life(state: RoundState, timing: TimingModel) -> RoundState:
    state.lives -= 1
    if state.lives <= 0:
        # Terminal: actors stay where the collision happened.
        state.lives = 0
        state.status = GAME_OVER
        state.respawn_ticks = 0
        return state
    state.status = LIFE_LOST
    state.respawn_ticks = timing.respawn_delay_ticks
    reset_actors(state)
    return state


def step(
    state: RoundState,
    rng,
    *,
    rules: Rules = RULES,
    timing: TimingModel = TIMING,
) -> RoundState:
    """Advance the simulation by one tick and return the resulting state."""
    if state.status in _FROZEN:
        return state

    if state.status == LIFE_LOST:
        if state.respawn_ticks > 1:
            return replace(state, respawn_ticks=state.respawn_ticks - 1)
        return replace(state, status=RUNNING, respawn_ticks=0)

    nxt = state.copy()
    grid, player = nxt.grid, nxt.player

    # 1-2) Buffered turn, then move if the facing is open
    player.step(grid)

    # 3) Pickup
    pickup = on_enter_player(grid, player.pos, rules)
    if pickup.collected:
        nxt.score += pickup.points
        nxt.pellets_remaining -= 1

    # 4) Best score
    nxt.best_score = max(nxt.best_score, nxt.score)

    # 5-6) Pass A against pre-move pursuer positions
    if _apply_collisions(nxt, rules).fatal:
        return _lose_life(nxt, timing)

    # 7) Pursuers step
    for p in nxt.pursuers:
        advance_pursuer(
            p, player.pos, grid, rng,
            evadable_triggered=pickup.evadable_triggered,
            rules=rules,
            timing=timing,
        )

    # 8-9) Pass B, pursuers may have walked into the player
    if _apply_collisions(nxt, rules).fatal:
        return _lose_life(nxt, timing)

    # 10) Board cleared
    if nxt.pellets_remaining <= 0:
        nxt.status = ROUND_WON

    return nxt

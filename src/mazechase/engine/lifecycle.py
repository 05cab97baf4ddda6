# src/mazechase/engine/lifecycle.py
# GameController: owns the authoritative RoundState and applies commands and
# ticks to it. Timer and input callbacks both land here and each runs to
# completion, so no partial tick is ever visible.
#
#   ready -> running <-> paused
#   running -> life-lost -> running      (while lives remain)
#   running -> game-over                 (reset -> ready, start -> running)
#   running -> round-won                 (continue -> next level, start -> level 1)

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from ..config import RULES, Rules
from ..mapgen.layout import LevelBlueprint, build_level
from ..rng import PMRandom, seed_from_clock
from .state import (
    GAME_OVER,
    LIFE_LOST,
    PAUSED,
    READY,
    ROUND_WON,
    RUNNING,
    RoundState,
    new_round,
    step,
)
from .timing import TIMING, TimingModel

logger = logging.getLogger(__name__)


def _default_level(level: int) -> LevelBlueprint:
    # Every level reuses the fixed maze.
    return build_level()


class GameController:
    def __init__(
        self,
        *,
        best_score: int = 0,
        rng=None,
        rules: Rules = RULES,
        timing: TimingModel = TIMING,
        make_level: Callable[[int], LevelBlueprint] = _default_level,
        on_best_score: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.rules = rules
        self.timing = timing
        self.rng = rng if rng is not None else PMRandom(seed_from_clock())
        self.make_level = make_level
        self.on_best_score = on_best_score
        self._state = self._fresh(best_score=best_score)

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def status(self) -> str:
        return self._state.status

    # ---- Helpers ----
    def _fresh(self, *, best_score: int, level: int = 1, score: int = 0, status: str = READY) -> RoundState:
        return new_round(
            self.make_level(level),
            best_score=best_score,
            score=score,
            level=level,
            status=status,
            rules=self.rules,
        )

    def _commit(self, new: RoundState) -> RoundState:
        old = self._state
        self._state = new
        if new.status != old.status:
            if new.status == LIFE_LOST:
                logger.info("Life lost at level %d, %d remaining", new.level, new.lives)
            else:
                logger.info("Status %s -> %s (level %d, score %d)", old.status, new.status, new.level, new.score)
        if new.best_score != old.best_score and self.on_best_score is not None:
            self.on_best_score(new.best_score)
        return new

    # ---- Commands ----
    def start(self) -> RoundState:
        s = self._state
        if s.status == READY:
            return self._commit(self._replace_status(RUNNING))
        if s.status in (ROUND_WON, GAME_OVER):
            return self._commit(self._fresh(best_score=s.best_score, status=RUNNING))
        logger.debug("start ignored in %s", s.status)
        return s

    def toggle_pause(self) -> RoundState:
        s = self._state
        if s.status == RUNNING:
            return self._commit(self._replace_status(PAUSED))
        if s.status == PAUSED:
            return self._commit(self._replace_status(RUNNING))
        logger.debug("toggle_pause ignored in %s", s.status)
        return s

    def reset(self) -> RoundState:
        return self._commit(self._fresh(best_score=self._state.best_score))

    def continue_round(self) -> RoundState:
        s = self._state
        if s.status != ROUND_WON:
            logger.debug("continue ignored in %s", s.status)
            return s
        return self._commit(self._fresh(
            best_score=s.best_score,
            level=s.level + 1,
            score=s.score,
            status=RUNNING,
        ))

    def press_action(self) -> RoundState:
        """Start/reset composite bound to a single key."""
        s = self._state
        if s.status == READY:
            return self.start()
        if s.status == ROUND_WON:
            return self.continue_round()
        if s.status == GAME_OVER:
            return self.reset()
        if s.status in (RUNNING, PAUSED):
            return self.toggle_pause()
        return s

    def set_direction(self, direction: str) -> RoundState:
        player = replace(self._state.player)
        if not player.set_queued(direction):
            logger.debug("unknown direction %r ignored", direction)
            return self._state
        self._state = self._replace(player=player)
        return self._state

    def tick(self) -> RoundState:
        return self._commit(step(self._state, self.rng, rules=self.rules, timing=self.timing))

    # ---- Internals ----
    def _replace_status(self, status: str) -> RoundState:
        return self._replace(status=status)

    def _replace(self, **changes) -> RoundState:
        return replace(self._state, **changes)

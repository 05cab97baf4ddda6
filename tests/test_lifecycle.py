# tests/test_lifecycle.py
from dataclasses import replace

from mazechase.engine.lifecycle import GameController
from mazechase.engine.motion import RIGHT, UP
from mazechase.engine.state import (
    GAME_OVER, LIFE_LOST, PAUSED, READY, ROUND_WON, RUNNING,
)
from mazechase.mapgen.layout import build_level
from mazechase.rng import PMRandom

# One corridor of pellets, no pursuers: ticking right scores deterministically.
PELLET_ROW = (
    "#######",
    "# ....#",
    "#######",
)

def row_level(level):
    return build_level(PELLET_ROW, player_start=(1, 1), pursuer_starts=[])

def make_controller(**kw):
    kw.setdefault("rng", PMRandom(41))
    return GameController(**kw)

def test_initial_state():
    ctl = make_controller(best_score=700)
    s = ctl.state
    assert s.status == READY
    assert s.lives == 3 and s.score == 0 and s.level == 1
    assert s.pellets_remaining == 151
    assert s.best_score == 700
    assert [p.ident for p in s.pursuers] == ["blinky", "pinky", "inky", "clyde"]

def test_tick_while_ready_or_paused_is_noop():
    ctl = make_controller()
    before = ctl.state
    assert ctl.tick() is before
    ctl.start()
    ctl.toggle_pause()
    assert ctl.status == PAUSED
    paused = ctl.state
    assert ctl.tick() is paused

def test_start_pause_resume():
    ctl = make_controller()
    ctl.start()
    assert ctl.status == RUNNING
    ctl.toggle_pause()
    assert ctl.status == PAUSED
    ctl.toggle_pause()
    assert ctl.status == RUNNING
    # start is ignored while running
    s = ctl.state
    assert ctl.start() is s

def test_toggle_pause_only_from_running_or_paused():
    ctl = make_controller()
    ctl.toggle_pause()
    assert ctl.status == READY
    ctl._state = replace(ctl.state, status=LIFE_LOST, respawn_ticks=5)
    ctl.toggle_pause()
    assert ctl.status == LIFE_LOST

def test_reset_restores_everything_but_best_score():
    ctl = make_controller(make_level=row_level)
    ctl.set_direction(RIGHT)
    ctl.start()
    ctl.tick(); ctl.tick()
    assert ctl.state.score == 20
    ctl.reset()
    s = ctl.state
    assert s.status == READY
    assert s.score == 0 and s.lives == 3
    assert s.pellets_remaining == 4 and s.grid.collectibles_remaining() == 4
    assert s.best_score == 20

def test_start_after_game_over_begins_fresh_round():
    ctl = make_controller()
    ctl.start()
    ctl._state = replace(ctl.state, status=GAME_OVER, lives=0, score=90, best_score=90, level=3)
    ctl.start()
    s = ctl.state
    assert s.status == RUNNING
    assert s.level == 1 and s.lives == 3 and s.score == 0
    assert s.best_score == 90

def test_continue_after_round_won():
    ctl = make_controller(make_level=row_level)
    ctl.set_direction(RIGHT)
    ctl.start()
    for _ in range(4):
        ctl.tick()
    assert ctl.status == ROUND_WON
    assert ctl.state.score == 40
    ctl._state = replace(ctl.state, lives=1)
    ctl.continue_round()
    s = ctl.state
    assert s.status == RUNNING
    assert s.level == 2 and s.score == 40 and s.lives == 3
    assert s.pellets_remaining == 4
    assert s.player.pos == (1, 1)

def test_continue_ignored_unless_round_won():
    ctl = make_controller()
    s = ctl.state
    assert ctl.continue_round() is s

def test_press_action_composite():
    ctl = make_controller(make_level=row_level)
    ctl.press_action()
    assert ctl.status == RUNNING
    ctl.press_action()
    assert ctl.status == PAUSED
    ctl.press_action()
    assert ctl.status == RUNNING
    ctl._state = replace(ctl.state, status=ROUND_WON)
    ctl.press_action()
    assert ctl.status == RUNNING and ctl.state.level == 2
    ctl._state = replace(ctl.state, status=GAME_OVER)
    ctl.press_action()
    assert ctl.status == READY and ctl.state.level == 1

def test_direction_queued_in_any_state():
    ctl = make_controller()
    ctl.set_direction(UP)
    assert ctl.state.player.queued_direction == UP
    assert ctl.status == READY
    ctl.set_direction("nowhere")
    assert ctl.state.player.queued_direction == UP

def test_best_score_listener_fires_on_change():
    seen = []
    ctl = make_controller(make_level=row_level, best_score=15, on_best_score=seen.append)
    ctl.set_direction(RIGHT)
    ctl.start()
    ctl.tick()   # 10, below the old best
    ctl.tick()   # 20
    ctl.tick()   # 30
    assert seen == [20, 30]

def test_headless_run_keeps_invariants():
    ctl = make_controller(rng=PMRandom(7))
    intents = PMRandom(99)
    ctl.start()
    prev = ctl.state
    for n in range(600):
        if n % 5 == 0:
            ctl.set_direction(intents.choice([UP, RIGHT, "down", "left"]))
        s = ctl.tick()
        assert s.pellets_remaining == s.grid.collectibles_remaining()
        assert prev.pellets_remaining - s.pellets_remaining in (0, 1)
        assert s.score >= prev.score
        assert s.best_score >= prev.best_score
        for x, y in [s.player.pos] + [p.pos for p in s.pursuers]:
            assert 0 <= x < s.grid.width and 0 <= y < s.grid.height
            assert not s.grid.is_wall((x, y))
        if s.status not in (RUNNING, LIFE_LOST):
            break
        prev = s

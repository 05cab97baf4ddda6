# tests/test_collisions.py
from mazechase.config import Rules
from mazechase.engine.collisions import on_enter_player, resolve_collisions
from mazechase.engine.pursuer import EVADABLE, PURSUE, RETREATING, Pursuer
from mazechase.grid import Grid
from mazechase.tiles import EMPTY, PELLET, POWER

def make_grid():
    return Grid.from_rows([
        "#####",
        "#.o #",
        "#####",
    ])

def make_pursuer(ident, mode=PURSUE, pos=(3, 1)):
    return Pursuer(ident, pos[0], pos[1], scatter_target=(1, 1), mode=mode, home_x=1, home_y=1)

def test_pellet_pickup_scores_and_clears():
    g = make_grid()
    ev = on_enter_player(g, (1, 1))
    assert ev.kind == PELLET and ev.collected and ev.points == 10
    assert not ev.evadable_triggered
    assert g.cell_at((1, 1)) == EMPTY

def test_power_pickup_triggers_evadable():
    g = make_grid()
    ev = on_enter_player(g, (2, 1))
    assert ev.kind == POWER and ev.points == 50 and ev.evadable_triggered

def test_empty_cell_is_not_a_pickup():
    ev = on_enter_player(make_grid(), (3, 1))
    assert not ev.collected and ev.points == 0

def test_custom_rules_change_points():
    rules = Rules(pellet_score=1, capture_score=7)
    assert on_enter_player(make_grid(), (1, 1), rules).points == 1
    ps = [make_pursuer("a", EVADABLE)]
    assert resolve_collisions((3, 1), ps, rules).points_awarded == 7

def test_capture_relocates_and_marks_eyes():
    ps = [make_pursuer("a", EVADABLE), make_pursuer("b", EVADABLE)]
    ev = resolve_collisions((3, 1), ps)
    assert ev.captures == 2 and ev.points_awarded == 400 and not ev.fatal
    for p in ps:
        assert p.mode == RETREATING and p.eyes_only and p.pos == (3, 1)

def test_retreating_and_distant_pursuers_are_inert():
    ps = [make_pursuer("a", RETREATING), make_pursuer("b", PURSUE, pos=(2, 1))]
    ev = resolve_collisions((3, 1), ps)
    assert not ev.fatal and ev.captures == 0

def test_first_fatal_stops_the_pass():
    ps = [make_pursuer("a"), make_pursuer("b", EVADABLE)]
    ev = resolve_collisions((3, 1), ps)
    assert ev.fatal and ev.captures == 0
    assert ps[1].mode == EVADABLE

# tests/test_keymap.py
from mazechase.engine.lifecycle import GameController
from mazechase.engine.motion import DOWN, LEFT, UP
from mazechase.engine.state import PAUSED, READY, RUNNING
from mazechase.keymap import ACTION, PAUSE, apply_key, command_for_key
from mazechase.rng import PMRandom

def test_arrows_and_wasd_map_to_directions():
    assert command_for_key("up") == UP
    assert command_for_key("w") == UP
    assert command_for_key("S") == DOWN
    assert command_for_key("a") == LEFT
    assert command_for_key("p") == PAUSE
    assert command_for_key("space") == ACTION

def test_apply_key_dispatch():
    ctl = GameController(rng=PMRandom(1))
    assert apply_key(ctl, "down")
    assert ctl.state.player.queued_direction == DOWN
    assert apply_key(ctl, "space")
    assert ctl.status == RUNNING
    assert apply_key(ctl, "p")
    assert ctl.status == PAUSED

def test_unmapped_key_is_noop():
    ctl = GameController(rng=PMRandom(1))
    before = ctl.state
    assert not apply_key(ctl, "f12")
    assert ctl.state is before and ctl.status == READY

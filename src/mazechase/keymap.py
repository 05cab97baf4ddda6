# src/mazechase/keymap.py
# Raw key names (pygame.key.name spelling) -> controller commands.

from typing import Dict

from .engine.lifecycle import GameController
from .engine.motion import DOWN, LEFT, RIGHT, UP

PAUSE = "pause"
ACTION = "action"  # start/continue/reset composite

KEY_MAP: Dict[str, str] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
    "p": PAUSE,
    "space": ACTION,
}


def command_for_key(key_name: str):
    return KEY_MAP.get(key_name.lower())


def apply_key(controller: GameController, key_name: str) -> bool:
    """Dispatch one key press. Returns False for unmapped keys."""
    cmd = command_for_key(key_name)
    if cmd is None:
        return False
    if cmd == PAUSE:
        controller.toggle_pause()
    elif cmd == ACTION:
        controller.press_action()
    else:
        controller.set_direction(cmd)
    return True

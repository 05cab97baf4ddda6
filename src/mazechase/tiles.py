# Canonical cell kinds and layout characters

WALL = "wall"
PELLET = "pellet"
POWER = "power"
EMPTY = "empty"

_CHAR_TO_KIND = {
    "#": WALL,
    ".": PELLET,
    "o": POWER,
}

_KIND_TO_CHAR = {WALL: "#", PELLET: ".", POWER: "o", EMPTY: " "}


def kind_for_char(ch: str) -> str:
    # Anything not listed (spaces, actor markers) is open floor.
    return _CHAR_TO_KIND.get(ch, EMPTY)


def char_for_kind(kind: str) -> str:
    return _KIND_TO_CHAR.get(kind, " ")


def is_collectible(kind: str) -> bool:
    return kind in (PELLET, POWER)

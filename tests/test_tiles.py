from mazechase.tiles import EMPTY, PELLET, POWER, WALL, char_for_kind, is_collectible, kind_for_char

def test_layout_chars():
    assert kind_for_char("#") == WALL
    assert kind_for_char(".") == PELLET
    assert kind_for_char("o") == POWER
    assert kind_for_char(" ") == EMPTY
    assert kind_for_char("G") == EMPTY   # actor markers are floor

def test_collectibles_and_round_trip_chars():
    assert is_collectible(PELLET) and is_collectible(POWER)
    assert not is_collectible(WALL) and not is_collectible(EMPTY)
    for kind in (WALL, PELLET, POWER, EMPTY):
        assert kind_for_char(char_for_kind(kind)) == kind

from mazechase.rng import M, PMRandom, low16_signed_abs, normalize_seed, pm_next

def test_low16_signed_abs():
    assert low16_signed_abs(0x00008000) == 32768
    assert low16_signed_abs(0x0000FFFF) == 1
    assert low16_signed_abs(0x00000001) == 1

def test_park_miller_sequence():
    # Minimal standard: seed 1 -> 16807 -> 282475249
    r = PMRandom(1)
    assert r.next32() == 16807
    assert r.next32() == 282475249
    assert pm_next(16807) == 282475249

def test_zero_seed_is_folded():
    assert normalize_seed(0) == 1
    assert normalize_seed(M) == 1
    assert PMRandom(0).state == 1

def test_random_and_choice_ranges():
    r = PMRandom(41)
    items = ["up", "down", "left"]
    for _ in range(500):
        v = r.random()
        assert 0.0 <= v < 1.0
        assert r.choice(items) in items
        assert 1 <= r.bounded(4) <= 4

def test_same_seed_same_stream():
    a, b = PMRandom(1234), PMRandom(1234)
    assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]

import time
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def low16_signed_abs(x32: int) -> int:
    w = x32 & 0xFFFF
    if w & 0x8000:
        w = -((~w + 1) & 0xFFFF)
    return abs(w)


def normalize_seed(seed: int) -> int:
    # Park-Miller is stuck at 0; fold everything into 1..M-1.
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    """Park-Miller minimal standard generator.

    Exposes random() and choice() so it can stand in wherever the engine
    expects a random source (random.Random works there too).
    """
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Return 1..n inclusive."""
        assert n > 0
        w = low16_signed_abs(self.next32())
        return (w % n) + 1

    def random(self) -> float:
        # next32 yields 1..M-1
        return (self.next32() - 1) / (M - 1)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.bounded(len(seq)) - 1]


def seed_from_clock() -> int:
    return normalize_seed(time.time_ns())

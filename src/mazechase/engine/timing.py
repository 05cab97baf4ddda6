# src/mazechase/engine/timing.py
# Centralized timing model. The runner fires one engine tick per interval;
# everything inside the engine is counted in ticks, never wall-clock.

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TimingModel:
    # Wall-clock cadence of the external timer
    tick_interval_ms: int = 110

    # Durations in engine ticks
    evadable_ticks: int = 55       # power-pellet window
    respawn_delay_ticks: int = 12  # "Get Ready" hold after a life is lost

    # Global scalar to stretch/shrink the tick interval (menu speed slider)
    time_scalar_num: int = 1
    time_scalar_den: int = 1

    def scaled(self) -> "TimingModel":
        """Return a copy with the tick interval scaled by time_scalar.

        Tick-counted durations are left untouched so game balance does not
        depend on speed.
        """
        return TimingModel(
            tick_interval_ms=max(1, (self.tick_interval_ms * self.time_scalar_num) // self.time_scalar_den),
            evadable_ticks=self.evadable_ticks,
            respawn_delay_ticks=self.respawn_delay_ticks,
            time_scalar_num=1,
            time_scalar_den=1,
        )


# Index 0..4 where 2 is "normal"; rational so the mapping stays deterministic.
MENU_SPEED_TO_SCALAR = {
    0: (6, 5),   # 1.2x slower
    1: (11, 10), # 1.1x slower
    2: (1, 1),   # normal
    3: (9, 10),  # 1.1x faster
    4: (4, 5),   # 1.25x faster
}


def timing_for(menu_speed_index: int = 2) -> TimingModel:
    num, den = MENU_SPEED_TO_SCALAR.get(menu_speed_index, (1, 1))
    base = TimingModel()
    # Scalar applies to the interval directly: slower speed -> longer interval
    base.time_scalar_num = num
    base.time_scalar_den = den
    return base.scaled()


TIMING = TimingModel()

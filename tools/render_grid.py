#!/usr/bin/env python3
# Render a round to PNG using Pillow, optionally after N seeded ticks.

import argparse

from mazechase.engine.lifecycle import GameController
from mazechase.render.snapshot import render_snapshot
from mazechase.rng import PMRandom

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", type=str, required=True, help="PNG path")
    ap.add_argument("--tile", type=int, default=16, help="tile size in pixels")
    ap.add_argument("--ticks", type=int, default=0, help="ticks to simulate before rendering")
    ap.add_argument("--seed", type=int, default=41)
    args = ap.parse_args()

    ctl = GameController(rng=PMRandom(args.seed))
    if args.ticks:
        ctl.start()
        for _ in range(args.ticks):
            ctl.tick()

    img = render_snapshot(ctl.state, tile_size=args.tile)
    img.save(args.out)
    s = ctl.state
    print(f"Wrote {args.out} ({img.width}x{img.height}) status={s.status} score={s.score}")

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
import argparse, csv, logging
from mazechase.engine.lifecycle import GameController
from mazechase.engine.motion import ALL_DIRECTIONS
from mazechase.engine.state import LIFE_LOST, RUNNING
from mazechase.mapgen.layout import build_level
from mazechase.rng import PMRandom

def write_tsv(rows, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in rows:
            w.writerow(r)

def cmd_emit(args):
    bp = build_level()
    write_tsv(bp.grid.cells, args.out)
    print(f"Wrote {args.out} ({bp.grid.width}x{bp.grid.height}, {bp.pellets} collectibles)")

def run_headless(seed, ticks, turn_every):
    """Drive a controller with pseudo-random turns; returns the controller."""
    intents = PMRandom(seed ^ 0x5A5A5A5A)
    ctl = GameController(rng=PMRandom(seed))
    ctl.start()
    for n in range(ticks):
        if turn_every and n % turn_every == 0:
            ctl.set_direction(intents.choice(ALL_DIRECTIONS))
        ctl.tick()
        if ctl.status not in (RUNNING, LIFE_LOST):
            break
    return ctl

def cmd_simulate(args):
    ctl = run_headless(args.seed, args.ticks, args.turn_every)
    s = ctl.state
    print(f"status={s.status} level={s.level} score={s.score} best={s.best_score} "
          f"lives={s.lives} pellets_left={s.pellets_remaining}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('simulate')
    p2.add_argument('--seed', type=int, default=41)
    p2.add_argument('--ticks', type=int, default=2000)
    p2.add_argument('--turn-every', type=int, default=7)
    p2.set_defaults(func=cmd_simulate)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

if __name__ == '__main__':
    main()

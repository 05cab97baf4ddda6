# tools/run_game.py
# Interactive pygame runner. The engine ticks on a fixed USEREVENT timer;
# key presses go through the keymap into the controller. Rendering only reads
# controller.state.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

try:
    from mazechase.engine.lifecycle import GameController
    from mazechase.engine.timing import timing_for
    from mazechase.keymap import apply_key
    from mazechase.persistence import DEFAULT_PATH, BestScoreStore
    from mazechase.render.tileset import Tileset, draw_board
    from mazechase.rng import PMRandom, seed_from_clock
    from mazechase.ui.status_bar import StatusBarState, render_overlay_message, render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

TICK_EVENT = pygame.USEREVENT + 1


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="mazechase runtime")
    parser.add_argument("--tile", type=int, default=26, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=60, help="render frame rate")
    parser.add_argument("--speed", type=int, default=2, help="menu speed index 0..4 (2 = normal)")
    parser.add_argument("--seed", type=int, default=None, help="fixed RNG seed for a reproducible run")
    parser.add_argument("--best-file", type=str, default=DEFAULT_PATH, help="where the best score is kept")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    store = BestScoreStore(args.best_file)
    timing = timing_for(args.speed)
    controller = GameController(
        best_score=store.load(),
        rng=PMRandom(args.seed if args.seed is not None else seed_from_clock()),
        timing=timing,
        on_best_score=store.save,
    )

    pygame.init()
    grid = controller.state.grid
    board_w, board_h = grid.width * args.tile, grid.height * args.tile
    bar_h = args.tile
    screen = pygame.display.set_mode((board_w, board_h + bar_h))
    pygame.display.set_caption("mazechase")
    clock = pygame.time.Clock()
    tiles = Tileset(args.tile)
    board_rect = pygame.Rect(0, 0, board_w, board_h)

    pygame.time.set_timer(TICK_EVENT, timing.tick_interval_ms)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == TICK_EVENT:
                controller.tick()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    apply_key(controller, pygame.key.name(event.key))

        state = controller.state
        screen.fill((0, 0, 0))
        draw_board(screen, state, tiles)
        render_overlay_message(screen, board_rect, state.status)
        render_status_bar(screen, (0, board_h), board_w, bar_h, StatusBarState.from_round(state))
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

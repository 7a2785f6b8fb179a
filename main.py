# main.py

import argparse
import logging
import os
import random
import sys

import pygame

from config import (
    FPS, BG_COLOR, HUD_HEIGHT,
    DEFAULT_WINDOW_SIZE, WINDOW_TITLE
)
from game_logic import Game
from items import PlacementError
from rendering import draw_session

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
}


def handle_key_event(keys, event):
    """Apply a KEYDOWN/KEYUP to the input state. Returns True if it was bound."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return False
    direction = KEY_BINDINGS.get(event.key)
    if direction is None:
        return False
    keys.set(direction, event.type == pygame.KEYDOWN)
    return True


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="neon-maze",
        description="Collect the stars and escape a randomly generated maze.",
    )
    parser.add_argument("--seed", type=int, help="Seed for maze and item placement.")
    parser.add_argument("--rows", type=_positive_int, help="Fix the number of rows.")
    parser.add_argument("--cols", type=_positive_int, help="Fix the number of columns.")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Use SDL dummy drivers, no real window.",
    )
    parser.add_argument(
        "--max-frames",
        type=_positive_int,
        help="Quit after this many frames.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _env_flag_enabled(var_name):
    return os.environ.get(var_name, "").strip().lower() in {"1", "true", "yes", "on"}


def run(game, screen, max_frames=None):
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 28)
    frames = 0

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                handle_key_event(game.session.keys, event)

        game.update(pygame.time.get_ticks())

        screen.fill(BG_COLOR)
        draw_session(screen, game.session, font)
        pygame.display.flip()

        frames += 1
        if max_frames is not None and frames >= max_frames:
            running = False
        clock.tick(FPS)
    game.stop()
    return frames


def main(argv=None):
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.headless or _env_flag_enabled("NEON_MAZE_HEADLESS"):
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

    pygame.init()
    try:
        screen = pygame.display.set_mode(DEFAULT_WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        available = (screen.get_width(), screen.get_height() - HUD_HEIGHT)
        game = Game(available, rng=random.Random(args.seed),
                    rows=args.rows, cols=args.cols)
        try:
            game.start()
        except PlacementError as e:
            logger.error("cannot start: %s", e)
            return 2

        run(game, screen, max_frames=args.max_frames)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

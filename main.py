
import argparse
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_board import Board
from tetris_display import Display
from tetris_game import Game, Outcome
from tetris_input import GravityClock, decode_event
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import GENERATORS, make_generator

logger = logging.getLogger("tetris")


def get_args(argv=None):
    parser = argparse.ArgumentParser("""Falling-block puzzle""")
    parser.add_argument("--width", type=int, default=CONFIG["BOARD_WIDTH"])
    parser.add_argument("--height", type=int, default=CONFIG["BOARD_HEIGHT"])
    parser.add_argument("--gravity-ms", type=int, default=CONFIG["GRAVITY_MS"],
                        help="milliseconds per gravity step, 0 disables timed gravity")
    parser.add_argument("--generator", choices=sorted(GENERATORS), default=CONFIG["GENERATOR"])
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"])
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error(f"board size must be positive, got {args.width}x{args.height}")
    if args.gravity_ms < 0:
        parser.error(f"--gravity-ms must be >= 0, got {args.gravity_ms}")
    return args


def apply_args(args):
    CONFIG["BOARD_WIDTH"] = args.width
    CONFIG["BOARD_HEIGHT"] = args.height
    CONFIG["GRAVITY_MS"] = args.gravity_ms
    CONFIG["GENERATOR"] = args.generator
    CONFIG["SEED"] = args.seed


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(screen, game, display, render, big_font) -> int:
    """Render, merge key and gravity events into the game, repeat until quit."""
    clock = pygame.time.Clock()
    gravity = GravityClock()

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return 0
            key = decode_event(e)
            if key is None:
                continue
            was_over = game.game_over
            outcome = game.keypress(key)
            if outcome is Outcome.QUIT:
                return 0
            if outcome is Outcome.GAME_OVER and not was_over:
                logger.info("game over after %r", key)

        if not game.game_over:
            for _ in range(gravity.update(dt)):
                if game.tick() is Outcome.GAME_OVER:
                    logger.info("game over on gravity step")
                    break

        display.clear_buffer()
        game.render(display)
        render.draw_display(screen, display)
        if game.game_over:
            render.draw_game_over(screen, big_font)
        pygame.display.flip()


def main(argv=None) -> int:
    args = get_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    apply_args(args)

    pygame.init()
    try:
        dims = compute_dims()
        screen = recreate_window(dims)
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont("monospace", dims.cell, bold=True)
        big_font = pygame.font.SysFont(None, 42)

        board = Board()
        game = Game(board, make_generator(CONFIG["GENERATOR"], CONFIG["SEED"]))
        display = Display(board.width * 2 + 2, board.height + 2)
        render = RenderAssets(dims, font)
        logger.debug("starting %dx%d board, generator=%s", board.width, board.height, CONFIG["GENERATOR"])
        return run(screen, game, display, render, big_font)
    finally:
        pygame.quit()


if __name__ == '__main__':
    sys.exit(main())

import os
import unittest
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from main import get_args, run
from tetris_board import Board
from tetris_config import CONFIG
from tetris_display import Display
from tetris_game import Game
from tetris_layout import compute_dims
from tetris_piece import Color, Piece, Point
from tetris_render import RenderAssets
from tetris_rng import FixedSequence


def key_event(key, text=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=text)


def blocked_spawn_board():
    """A board whose full row 2 leaves the first T resting and no room for the next O."""
    board = Board(10, 20)
    shape = [[0] * 10 for _ in range(10)]
    shape[2] = [1] * 10
    board.lock_piece(Piece("filler", Color.RED, shape), Point(0, 0))
    return board


class RecordingRender:
    """Stands in for RenderAssets; posts events from inside game-over frames."""
    def __init__(self, quit_after=3, on_game_over=None):
        self.frames = 0
        self.game_over_frames = 0
        self.quit_after = quit_after
        self.on_game_over = on_game_over

    def draw_display(self, screen, display):
        self.frames += 1

    def draw_game_over(self, screen, big_font):
        self.game_over_frames += 1
        if self.on_game_over:
            self.on_game_over(self.game_over_frames)
        if self.game_over_frames == self.quit_after:
            pygame.event.post(pygame.event.Event(pygame.QUIT))


class RunLoopTests(unittest.TestCase):
    def setUp(self):
        pygame.init()
        self.dims = compute_dims(10, 20)
        self.screen = pygame.display.set_mode((self.dims.total_w, self.dims.total_h))
        self.font = pygame.font.Font(None, 16)
        self.display = Display(22, 22)
        pygame.event.clear()

    def tearDown(self):
        pygame.quit()

    def test_quit_key_returns_zero(self):
        game = Game(Board(10, 20))
        render = RenderAssets(self.dims, self.font)
        pygame.event.post(key_event(pygame.K_z, "z"))
        with mock.patch.dict(CONFIG, {"GRAVITY_MS": 0}):
            self.assertEqual(run(self.screen, game, self.display, render, self.font), 0)
        self.assertTrue(game.board.is_empty())
        self.assertEqual(game.origin, Point(3, 0))

    def test_window_close_returns_zero(self):
        game = Game(Board(10, 20))
        render = RenderAssets(self.dims, self.font)
        pygame.event.post(key_event(pygame.K_LEFT))
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        with mock.patch.dict(CONFIG, {"GRAVITY_MS": 0}):
            self.assertEqual(run(self.screen, game, self.display, render, self.font), 0)
        self.assertEqual(game.origin, Point(2, 0))

    def test_gravity_reaches_game_over_and_loop_waits_for_quit(self):
        game = Game(blocked_spawn_board(), FixedSequence(["O"]))

        def press_left(frame):
            if frame == 1:
                pygame.event.post(key_event(pygame.K_LEFT))

        render = RecordingRender(quit_after=3, on_game_over=press_left)
        with mock.patch.dict(CONFIG, {"GRAVITY_MS": 1}):
            self.assertEqual(run(self.screen, game, self.display, render, self.font), 0)
        self.assertTrue(game.game_over)
        self.assertEqual(render.game_over_frames, 3)
        # filler row plus the locked T, nothing more after game over
        self.assertEqual(game.board.occupied_count(), 14)
        self.assertEqual(game.origin, Point(3, 0))

    def test_game_over_logged_once(self):
        game = Game(blocked_spawn_board(), FixedSequence(["O"]))
        render = RenderAssets(self.dims, self.font)
        pygame.event.post(key_event(pygame.K_DOWN))
        pygame.event.post(key_event(pygame.K_DOWN))
        pygame.event.post(key_event(pygame.K_SPACE, " "))
        pygame.event.post(key_event(pygame.K_z, "z"))
        with mock.patch.dict(CONFIG, {"GRAVITY_MS": 0}):
            with self.assertLogs("tetris", level="INFO") as logs:
                self.assertEqual(run(self.screen, game, self.display, render, self.font), 0)
        self.assertTrue(game.game_over)
        self.assertEqual(sum("game over after" in line for line in logs.output), 1)


class ArgsTests(unittest.TestCase):
    def test_defaults(self):
        args = get_args([])
        self.assertEqual(args.width, CONFIG["BOARD_WIDTH"])
        self.assertEqual(args.gravity_ms, CONFIG["GRAVITY_MS"])

    def test_bad_board_size(self):
        with self.assertRaises(SystemExit):
            get_args(["--width", "0"])
        with self.assertRaises(SystemExit):
            get_args(["--height", "-4"])

    def test_negative_gravity(self):
        with self.assertRaises(SystemExit):
            get_args(["--gravity-ms", "-1"])

    def test_zero_gravity_allowed(self):
        self.assertEqual(get_args(["--gravity-ms", "0"]).gravity_ms, 0)


if __name__ == "__main__":
    unittest.main()

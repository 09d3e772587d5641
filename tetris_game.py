
"""Game state machine: move, rotate, lock, spawn, key dispatch"""
import logging
from enum import Enum
from typing import Optional
from tetris_board import Board
from tetris_input import Char, Key, KeyEvent, is_quit
from tetris_piece import Direction, Piece, Point
from tetris_rng import FixedSequence

logger = logging.getLogger(__name__)


class GameState(Enum):
    FALLING = "falling"
    GAME_OVER = "game_over"


class Outcome(Enum):
    CONTINUED = "continued"
    REJECTED = "rejected"
    GAME_OVER = "game_over"
    QUIT = "quit"


CHAR_ROTATIONS = {
    "q": Direction.COUNTER_CLOCKWISE,
    "e": Direction.CLOCKWISE,
}


class Game:
    """
    One board, one falling piece and its origin.

    Every operation either commits a fully valid new state or leaves the
    game untouched. Pieces after a lock come from the injected generator
    (anything with a next_piece() method).
    """

    def __init__(self, board: Optional[Board] = None, generator=None,
                 first_piece: Optional[Piece] = None):
        self.board = Board() if board is None else board
        self.generator = FixedSequence() if generator is None else generator
        self.piece: Piece = Piece.from_name("T")
        self.origin = Point(0, 0)
        self.state = GameState.FALLING
        first = Piece.from_name("T") if first_piece is None else first_piece
        if not self.place_new_piece(first):
            self._game_over()

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def _game_over(self):
        self.state = GameState.GAME_OVER
        logger.info("game over: no room to spawn at the top of the board")

    def move_piece(self, dx: int, dy: int) -> bool:
        """Returns True if the piece could be moved."""
        if self.game_over:
            return False
        candidate = self.origin + Point(dx, dy)
        if self.board.collision_test(self.piece, candidate):
            return False
        self.origin = candidate
        return True

    def rotate_piece(self, direction: Direction) -> bool:
        """Returns True if the piece was rotated. No wall kicks are tried."""
        if self.game_over:
            return False
        rotated = self.piece.clone()
        rotated.rotate(direction)
        if self.board.collision_test(rotated, self.origin):
            return False
        self.piece = rotated
        return True

    def spawn_origin(self, piece: Piece) -> Point:
        return Point((self.board.width - piece.size) // 2, 0)

    def place_new_piece(self, piece: Piece) -> bool:
        """Returns True if the new piece fit at the top-center spawn point."""
        if self.game_over:
            return False
        origin = self.spawn_origin(piece)
        if self.board.collision_test(piece, origin):
            return False
        self.piece = piece.clone()
        self.origin = origin
        logger.debug("spawned %r at (%d, %d)", self.piece, origin.x, origin.y)
        return True

    def lock(self):
        self.board.lock_piece(self.piece, self.origin)
        logger.debug("locked %r at (%d, %d)", self.piece, self.origin.x, self.origin.y)

    def advance_piece(self) -> bool:
        """Gravity step; locks and spawns when resting. False means game over."""
        if self.game_over:
            return False
        if not self.move_piece(0, 1):
            self.lock()
            if not self.place_new_piece(self.generator.next_piece()):
                self._game_over()
                return False
        return True

    def drop_piece(self) -> bool:
        if self.game_over:
            return False
        while self.move_piece(0, 1):
            pass
        return self.advance_piece()

    def tick(self) -> Outcome:
        """Timer-driven gravity step."""
        return self.keypress(Key.DOWN)

    def keypress(self, key: KeyEvent) -> Outcome:
        if is_quit(key):
            return Outcome.QUIT
        if self.game_over:
            return Outcome.GAME_OVER

        if key is Key.LEFT:
            ok = self.move_piece(-1, 0)
        elif key is Key.RIGHT:
            ok = self.move_piece(1, 0)
        elif key is Key.UP:
            ok = self.rotate_piece(Direction.COUNTER_CLOCKWISE)
        elif key is Key.DOWN:
            ok = self.advance_piece()
        elif key is Key.SPACE:
            ok = self.drop_piece()
        elif isinstance(key, Char) and key.c in CHAR_ROTATIONS:
            ok = self.rotate_piece(CHAR_ROTATIONS[key.c])
        else:
            ok = False

        if self.game_over:
            return Outcome.GAME_OVER
        return Outcome.CONTINUED if ok else Outcome.REJECTED

    def render(self, sink) -> None:
        self.board.render(sink)
        for r, c in self.piece.cells():
            x = 1 + 2 * (self.origin.x + c)
            y = self.origin.y + r
            sink.set_pixel("*", x, y, self.piece.color)


"""Board: cell grid, collision test, lock, border render"""
from typing import List, Optional
from tetris_config import CONFIG
from tetris_piece import Color, Piece, Point

Cells = List[List[Optional[Color]]]

BORDER_COLOR = Color.RED


class Board:
    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 hidden_rows: Optional[int] = None):
        self.width = CONFIG["BOARD_WIDTH"] if width is None else width
        self.height = CONFIG["BOARD_HEIGHT"] if height is None else height
        self.hidden_rows = CONFIG["HIDDEN_ROWS"] if hidden_rows is None else hidden_rows
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board must have positive dimensions, got {self.width}x{self.height}")
        self.cells: Cells = [[None] * self.width for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Optional[Color]:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")
        return self.cells[y][x]

    def collision_test(self, piece: Piece, origin: Point) -> bool:
        """Return True if the piece at origin leaves the board or overlaps a locked cell."""
        for r, c in piece.cells():
            x, y = origin.x + c, origin.y + r
            if not self.in_bounds(x, y):
                return True
            if self.cells[y][x] is not None:
                return True
        return False

    def lock_piece(self, piece: Piece, origin: Point) -> None:
        """Write the piece's color into the board (no collision check)."""
        for r, c in piece.cells():
            x, y = origin.x + c, origin.y + r
            if not self.in_bounds(x, y):
                raise IndexError(f"cannot lock {piece!r} cell at ({x}, {y})")
            self.cells[y][x] = piece.color

    def occupied_count(self) -> int:
        return sum(1 for row in self.cells for v in row if v is not None)

    def is_empty(self) -> bool:
        return self.occupied_count() == 0

    def render(self, sink) -> None:
        """Emit border and locked-cell glyphs to a display sink.

        Cell (col, row) maps to screen column 1 + 2*col; the spare column
        between cells keeps blocks roughly square in a terminal font.
        """
        right = self.width * 2
        for y in range(self.hidden_rows, self.height):
            sink.set_pixel("|", 0, y, BORDER_COLOR)
            sink.set_pixel("|", right, y, BORDER_COLOR)
        for x in range(right + 1):
            sink.set_pixel("-", x, self.height, BORDER_COLOR)
        for y, row in enumerate(self.cells):
            for x, color in enumerate(row):
                if color is not None:
                    sink.set_pixel("*", 1 + 2 * x, y, color)

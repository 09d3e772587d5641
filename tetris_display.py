
"""Glyph screen buffer: the display sink the game renders into"""
from typing import List, Optional, Tuple
from tetris_piece import Color

Pixel = Optional[Tuple[str, Color]]


class Display:
    """A width x height grid of (glyph, color) cells, written by set_pixel."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.buffer: List[List[Pixel]] = []
        self.clear_buffer()

    def clear_buffer(self):
        self.buffer = [[None] * self.width for _ in range(self.height)]

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} display")

    def set_pixel(self, glyph: str, x: int, y: int, color: Color):
        self._check(x, y)
        self.buffer[y][x] = (glyph, color)

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check(x, y)
        return self.buffer[y][x]

    def rows(self) -> List[str]:
        """Plain-text dump, one string per screen row."""
        return ["".join(p[0] if p else " " for p in row) for row in self.buffer]

    def __str__(self):
        return "\n".join(self.rows())

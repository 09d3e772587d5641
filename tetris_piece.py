
"""Piece model, shapes, in-place rotation"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Tuple


class Color(Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"


class Direction(Enum):
    CLOCKWISE = "cw"
    COUNTER_CLOCKWISE = "ccw"


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


SHAPES: Dict[str, Tuple[Color, List[List[int]]]] = {
    "I": (Color.CYAN,   [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]]),
    "J": (Color.BLUE,   [[1,0,0],[1,1,1],[0,0,0]]),
    "L": (Color.ORANGE, [[0,0,1],[1,1,1],[0,0,0]]),
    "O": (Color.YELLOW, [[1,1],[1,1]]),
    "S": (Color.GREEN,  [[0,1,1],[1,1,0],[0,0,0]]),
    "T": (Color.PURPLE, [[0,1,0],[1,1,1],[0,0,0]]),
    "Z": (Color.RED,    [[1,1,0],[0,1,1],[0,0,0]]),
}


class Piece:
    """A square occupancy matrix with a color and a name.

    Pieces carry no position; the Game pairs the current piece with an
    origin (the board coordinate of the matrix's top-left corner).
    """

    def __init__(self, name: str, color: Color, shape: List[List[int]]):
        if not shape or any(len(row) != len(shape) for row in shape):
            raise ValueError(f"piece {name!r} shape must be a non-empty square matrix")
        self.name = name
        self.color = color
        self.shape = [[1 if v else 0 for v in row] for row in shape]

    @staticmethod
    def from_name(name: str) -> "Piece":
        color, shape = SHAPES[name]
        return Piece(name, color, shape)

    @property
    def size(self) -> int:
        return len(self.shape)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) for every occupied cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield r, c

    def clone(self) -> "Piece":
        return Piece(self.name, self.color, [row[:] for row in self.shape])

    def rotate(self, direction: Direction) -> None:
        """Rotate the shape 90 degrees in place.

        Works ring by ring from the outside in; each position along a ring's
        top edge (minus the last corner) starts a 4-way cyclic swap with its
        left, bottom and right counterparts.
        """
        if not isinstance(direction, Direction):
            raise ValueError(f"unknown rotation direction {direction!r}")
        m = self.shape
        n = len(m)
        for k in range(n // 2):
            last = n - k - 1
            for i in range(k, last):
                opp = n - i - 1
                top = m[k][i]
                if direction is Direction.CLOCKWISE:
                    m[k][i] = m[opp][k]
                    m[opp][k] = m[last][opp]
                    m[last][opp] = m[i][last]
                    m[i][last] = top
                else:
                    m[k][i] = m[i][last]
                    m[i][last] = m[last][opp]
                    m[last][opp] = m[opp][k]
                    m[opp][k] = top

    def __eq__(self, other):
        if not isinstance(other, Piece):
            return NotImplemented
        return (self.name, self.color, self.shape) == (other.name, other.color, other.shape)

    def __repr__(self):
        return f"Piece({self.name!r}, {self.color.name})"

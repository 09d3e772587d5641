
"""Piece generators: fixed sequence, uniform random, 7-bag, NES-style"""
import random
from typing import List, Optional, Sequence
import pygame
from tetris_piece import SHAPES, Piece

PIECES = ["I","J","L","O","S","T","Z"]


class FixedSequence:
    """Cycles through a fixed list of piece names."""
    def __init__(self, names: Sequence[str] = ("L",)):
        if not names:
            raise ValueError("fixed sequence needs at least one piece name")
        for n in names:
            if n not in SHAPES:
                raise KeyError(n)
        self.names = list(names)
        self.index = 0

    def next_piece(self) -> Piece:
        name = self.names[self.index]
        self.index = (self.index + 1) % len(self.names)
        return Piece.from_name(name)


class RandomGenerator:
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_piece(self) -> Piece:
        return Piece.from_name(self.rng.choice(PIECES))


class BagGenerator:
    """7-bag: each run of seven pieces holds every tetromino exactly once."""
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.bag: List[str] = []

    def next_piece(self) -> Piece:
        if not self.bag:
            self.bag = PIECES[:]
            self.rng.shuffle(self.bag)
        return Piece.from_name(self.bag.pop())


class NESRandom:
    def __init__(self, seed: Optional[int] = None, avoid_szo_first: bool = True):
        if seed is None:
            seed = pygame.time.get_ticks() & 0xFFFFFFFF
        self.state = seed & 0xFFFFFFFF
        self.prev_index: Optional[int] = None
        self.avoid_szo_first = avoid_szo_first

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        return (self._lcg_next() >> 16) & 0x7FFF

    def _rand_choice7(self) -> int:
        return self._rand() % 7

    def next_name(self) -> str:
        cand = self._rand_choice7()
        # first piece is never S, Z or O
        if self.prev_index is None and self.avoid_szo_first:
            bad = {PIECES.index("S"), PIECES.index("Z"), PIECES.index("O")}
            while cand in bad:
                cand = self._rand_choice7()
        # a repeat gets one coin-flip reroll
        if self.prev_index is not None and cand == self.prev_index:
            if (self._rand() & 1) == 1:
                cand = self._rand_choice7()
        self.prev_index = cand
        return PIECES[cand]

    def next_piece(self) -> Piece:
        return Piece.from_name(self.next_name())


GENERATORS = {
    "fixed": lambda seed: FixedSequence(),
    "random": lambda seed: RandomGenerator(seed),
    "bag": lambda seed: BagGenerator(seed),
    "nes": lambda seed: NESRandom(seed),
}


def make_generator(kind: str, seed: Optional[int] = None):
    try:
        factory = GENERATORS[kind]
    except KeyError:
        raise ValueError(f"unknown piece generator {kind!r}; choose from {sorted(GENERATORS)}") from None
    return factory(seed)

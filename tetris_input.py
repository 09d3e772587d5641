
"""Key events, decoders and the gravity clock"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
import pygame
from tetris_config import CONFIG


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"


@dataclass(frozen=True)
class Char:
    c: str


KeyEvent = Union[Key, Char]

BYTE_KEYS = {
    "w": Key.UP,
    "a": Key.LEFT,
    "s": Key.DOWN,
    "d": Key.RIGHT,
    " ": Key.SPACE,
}

PYGAME_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}


def decode_byte(b: bytes) -> Optional[KeyEvent]:
    """Decode one byte read from a raw-mode terminal; None if undecodable."""
    try:
        s = b.decode("utf-8")
    except UnicodeDecodeError:
        return None
    if len(s) != 1:
        return None
    if s in BYTE_KEYS:
        return BYTE_KEYS[s]
    if not s.isprintable():
        return None
    return Char(s)


def decode_event(event) -> Optional[KeyEvent]:
    """Map a pygame KEYDOWN event to a key event; anything else is None."""
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in PYGAME_KEYS:
        return PYGAME_KEYS[event.key]
    text = getattr(event, "unicode", "")
    if not text:
        return None
    return decode_byte(text.encode("utf-8"))


def is_quit(key: Optional[KeyEvent]) -> bool:
    return isinstance(key, Char) and key.c in CONFIG["QUIT_KEYS"]


class GravityClock:
    """
    Turns elapsed frame time into gravity steps, independent of key input.

    • update(dt) accumulates milliseconds and returns how many steps are due.
    • An interval of 0 disables timed gravity.
    """
    def __init__(self, interval_ms: Optional[float] = None):
        self.interval_ms = CONFIG["GRAVITY_MS"] if interval_ms is None else interval_ms
        if self.interval_ms < 0:
            raise ValueError(f"gravity interval must be >= 0, got {self.interval_ms}")
        self.acc_ms = 0.0

    def reset(self):
        self.acc_ms = 0.0

    def update(self, dt_ms: float) -> int:
        if self.interval_ms == 0:
            return 0
        self.acc_ms += dt_ms
        steps = 0
        while self.acc_ms >= self.interval_ms:
            self.acc_ms -= self.interval_ms
            steps += 1
        return steps

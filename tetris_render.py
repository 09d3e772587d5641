
"""
Pygame rendering of the glyph display buffer.

- Pre-render one text Surface per (glyph, color) and blit those.
- Pre-render the static background once per Dims.
- Cache the game-over banner.
"""
from __future__ import annotations
import pygame
from typing import Dict, Tuple
from tetris_display import Display
from tetris_layout import Dims
from tetris_piece import Color

COLORS: Dict[Color, Tuple[int,int,int]] = {
    Color.RED:    (255,102,119),
    Color.ORANGE: (255,158,94),
    Color.YELLOW: (255,224,102),
    Color.GREEN:  (94,224,142),
    Color.CYAN:   (102,224,255),
    Color.BLUE:   (106,119,255),
    Color.PURPLE: (200,119,255),
}

BACKGROUND = (10,13,34)


class RenderAssets:
    """Holds pre-rendered glyph surfaces for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._banner = None
        self._make_static()

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BACKGROUND)

    def glyph(self, ch: str, color: Color) -> pygame.Surface:
        key = (ch, color)
        surf = self.glyphs.get(key)
        if surf is None:
            surf = self.font.render(ch, True, COLORS[color])
            self.glyphs[key] = surf
        return surf

    def draw_display(self, screen: pygame.Surface, display: Display):
        d = self.dims
        col_w = d.cell // 2
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(display.buffer):
            for x, px in enumerate(row):
                if px is None:
                    continue
                surf = self.glyph(*px)
                # center the glyph in its column x row slot
                rx = d.margin + x*col_w + (col_w - surf.get_width()) // 2
                ry = d.margin + y*d.cell + (d.cell - surf.get_height()) // 2
                screen.blit(surf, (rx, ry))

    def draw_game_over(self, screen: pygame.Surface, big_font: pygame.font.Font):
        if self._banner is None:
            self._banner = big_font.render("GAME OVER", True, (255,220,220))
        rect = self._banner.get_rect(center=(self.dims.total_w // 2, self.dims.total_h // 2))
        screen.blit(self._banner, rect)

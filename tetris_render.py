"""
Rendering for the character-grid screen.

compose_screen() is pure: it lays the field, the falling piece and the score
into a list of strings, one per screen row. RenderAssets turns such a buffer
into pixels.

Optimizations:
- Pre-render one block Surface per cell character (kind letters, border,
  completed marker, falling piece) and blit them.
- Cache font glyph Surfaces for every other character; render each only once.
"""
from __future__ import annotations
import pygame
from typing import Dict, List, Optional, Tuple
from tetris_board import Field, FIELD_W, FIELD_H
from tetris_layout import (Dims, SCREEN_COLS, SCREEN_ROWS, FIELD_OFFSET_X, FIELD_OFFSET_Y,
                           SCORE_ROW, SCORE_COL)
from tetris_piece import ActivePiece

PIECE_CHAR = "X"

# Colors per cell character
COLORS: Dict[str, Tuple[int,int,int]] = {
    "A": (102,224,255),
    "B": (200,119,255),
    "C": (255,224,102),
    "D": (94,224,142),
    "E": (255,158,94),
    "F": (255,102,119),
    "G": (106,119,255),
    "#": (60,70,110),
    "=": (240,240,250),
    PIECE_CHAR: (255,255,255),
}
TEXT_COLOR = (200,210,240)
BG_COLOR = (10,13,34)


def in_field(col: int, row: int) -> bool:
    return (FIELD_OFFSET_X <= col < FIELD_OFFSET_X + FIELD_W
            and FIELD_OFFSET_Y <= row < FIELD_OFFSET_Y + FIELD_H)


def score_text(score: int) -> str:
    return f"SCORE: {score:8d}"


def compose_screen(field: Field, piece: Optional[ActivePiece], score: int,
                   cols: int = SCREEN_COLS, rows: int = SCREEN_ROWS) -> List[str]:
    screen = [[" "] * cols for _ in range(rows)]

    for y in range(field.height):
        for x in range(field.width):
            screen[y + FIELD_OFFSET_Y][x + FIELD_OFFSET_X] = field.at(x, y)

    for i, ch in enumerate(score_text(score)):
        if SCORE_COL + i < cols:
            screen[SCORE_ROW][SCORE_COL + i] = ch

    if piece is not None:
        for x, y in piece.cells():
            # only the part already inside the field is visible
            if not field.in_arena(x, y):
                continue
            screen[y + FIELD_OFFSET_Y][x + FIELD_OFFSET_X] = PIECE_CHAR

    return ["".join(r) for r in screen]


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_cells()
        self.glyphs: Dict[str, pygame.Surface] = {}

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for ch, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[ch] = s

    def glyph(self, ch: str) -> pygame.Surface:
        g = self.glyphs.get(ch)
        if g is None:
            g = self.glyphs[ch] = self.font.render(ch, True, TEXT_COLOR)
        return g

    def cell_pos(self, col: int, row: int) -> Tuple[int, int]:
        d = self.dims
        return d.origin_x + col*d.cell, d.origin_y + row*d.cell

    def draw(self, screen: pygame.Surface, lines: List[str]):
        screen.fill(BG_COLOR)
        for row, line in enumerate(lines):
            for col, ch in enumerate(line):
                if ch == " ":
                    continue
                x, y = self.cell_pos(col, row)
                # blocks only inside the field; text elsewhere shares letters with kinds
                block = self.cell_surf.get(ch) if in_field(col, row) else None
                if block is not None:
                    screen.blit(block, (x+1, y+1))
                else:
                    screen.blit(self.glyph(ch), (x, y))

# tetris_layout.py
from dataclasses import dataclass
from tetris_board import FIELD_W
from tetris_config import CONFIG

SCREEN_COLS, SCREEN_ROWS = 40, 26
FIELD_OFFSET_X, FIELD_OFFSET_Y = 2, 6
SCORE_ROW, SCORE_COL = 2, FIELD_W + 6

@dataclass
class Dims:
    cell: int
    margin: int
    cols: int
    rows: int
    total_w: int
    total_h: int
    origin_x: int
    origin_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16

    total_w = margin + SCREEN_COLS * cell + margin
    total_h = margin + SCREEN_ROWS * cell + margin

    return Dims(
        cell=cell, margin=margin,
        cols=SCREEN_COLS, rows=SCREEN_ROWS,
        total_w=total_w, total_h=total_h,
        origin_x=margin, origin_y=margin,
    )

"""Field arena and helpers: fits, lock, scan_completed_rows, shift_rows_down"""
from typing import List
from tetris_piece import ActivePiece

FIELD_W, FIELD_H = 12, 18

EMPTY = " "
BORDER = "#"
COMPLETED = "="


class Field:
    """Flat cell buffer with the side walls and floor pre-populated as borders."""

    def __init__(self, width: int = FIELD_W, height: int = FIELD_H):
        self.width = width
        self.height = height
        self.cells: List[str] = []
        self.reset()

    def reset(self):
        w, h = self.width, self.height
        self.cells = [
            BORDER if x == 0 or x == w - 1 or y == h - 1 else EMPTY
            for y in range(h) for x in range(w)
        ]

    def in_arena(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> str:
        return self.cells[y * self.width + x]

    def put(self, x: int, y: int, value: str):
        self.cells[y * self.width + x] = value

    def row(self, y: int) -> str:
        return "".join(self.cells[y * self.width:(y + 1) * self.width])

    def interior_rows(self) -> range:
        return range(self.height - 1)

    def interior_cols(self) -> range:
        return range(1, self.width - 1)


def fits(piece: ActivePiece, field: Field) -> bool:
    for x, y in piece.cells():
        # still entering from above the field
        if y < 0:
            continue
        if not field.in_arena(x, y) or field.at(x, y) != EMPTY:
            return False
    return True


def lock(piece: ActivePiece, field: Field):
    """Cement the piece's occupied cells into the field (no fit check)."""
    letter = piece.kind.letter
    for x, y in piece.cells():
        if y >= 0 and field.in_arena(x, y):
            field.put(x, y, letter)


def scan_completed_rows(field: Field) -> List[int]:
    """Mark every full interior row with the completed marker and return their indices."""
    completed = []
    for y in field.interior_rows():
        if EMPTY in field.row(y):
            continue
        completed.append(y)
        for x in field.interior_cols():
            field.put(x, y, COMPLETED)
    return completed


def shift_rows_down(field: Field, rows: List[int]):
    for cleared in sorted(rows):
        for y in range(cleared, 0, -1):
            for x in field.interior_cols():
                field.put(x, y, field.at(x, y - 1))
        for x in field.interior_cols():
            field.put(x, 0, EMPTY)

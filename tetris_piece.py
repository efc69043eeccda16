"""Piece model, shape table, fixed-transform rotation"""
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Tuple

SIZE = 4
ENTRY_X, ENTRY_Y = 4, -2

Mask = Tuple[Tuple[int, ...], ...]


class PieceKind(Enum):
    LINE = 0
    TEE = 1
    CUBE = 2
    LEFT_L = 3
    RIGHT_L = 4
    LEFT_S = 5
    RIGHT_S = 6

    @property
    def letter(self) -> str:
        return "ABCDEFG"[self.value]


def _mask(*rows: str) -> Mask:
    return tuple(tuple(1 if ch == "X" else 0 for ch in row) for row in rows)

SHAPES = {
    PieceKind.LINE:    _mask("..X.", "..X.", "..X.", "..X."),
    PieceKind.TEE:     _mask("....", ".X..", ".XX.", ".X.."),
    PieceKind.CUBE:    _mask("....", ".XX.", ".XX.", "...."),
    PieceKind.LEFT_L:  _mask("....", ".X..", ".XX.", "..X."),
    PieceKind.RIGHT_L: _mask("....", ".X..", ".X..", ".XX."),
    PieceKind.LEFT_S:  _mask("....", "..X.", ".XX.", ".X.."),
    PieceKind.RIGHT_S: _mask("....", "..X.", "..X.", ".XX."),
}

# rotation index -> (x, y) -> (target x, target y)
_TRANSFORMS = {
    1: lambda x, y: (y, SIZE - 1 - x),
    2: lambda x, y: (SIZE - 1 - x, SIZE - 1 - y),
    3: lambda x, y: (SIZE - 1 - y, x),
}


@lru_cache(maxsize=None)
def rotate_mask(kind: PieceKind, rotation: int) -> Mask:
    """Return the 4x4 mask of ``kind`` turned ``rotation`` quarter turns."""
    base = SHAPES[kind]
    if rotation == 0:
        return base
    if rotation not in _TRANSFORMS:
        raise ValueError(f"rotation must be in 0..3, got {rotation!r}")
    transform = _TRANSFORMS[rotation]
    out = [[0] * SIZE for _ in range(SIZE)]
    for y in range(SIZE):
        for x in range(SIZE):
            tx, ty = transform(x, y)
            out[ty][tx] = base[y][x]
    return tuple(tuple(r) for r in out)


@dataclass(frozen=True)
class ActivePiece:
    kind: PieceKind
    x: int = ENTRY_X
    y: int = ENTRY_Y
    rotation: int = 0

    @property
    def mask(self) -> Mask:
        return rotate_mask(self.kind, self.rotation)

    def cells(self):
        """Yield (field x, field y) of every occupied mask cell."""
        for j, row in enumerate(self.mask):
            for i, v in enumerate(row):
                if v:
                    yield self.x + i, self.y + j

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        return ActivePiece(self.kind, self.x + dx, self.y + dy, self.rotation)

    def rotated(self, clockwise: bool = True) -> "ActivePiece":
        rotation = (self.rotation + (1 if clockwise else -1)) % 4
        return ActivePiece(self.kind, self.x, self.y, rotation)

    @staticmethod
    def spawn(kind: PieceKind) -> "ActivePiece":
        return ActivePiece(kind, ENTRY_X, ENTRY_Y, 0)

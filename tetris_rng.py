"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import PieceKind


class PieceRandom:
    PIECES = list(PieceKind)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> PieceKind:
        return self._rng.choice(self.PIECES)

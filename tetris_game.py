"""
Game controller: one fixed tick of the piece/field state machine.

Per tick, in order:

  • finish a line clear left pending by the previous tick
  • spawn a piece if none is active; a spawn that does not fit ends the game
  • rotate on the rotate edge (no kicks, a blocked rotation is dropped)
  • step one column on a left/right edge when exactly one of them is held
  • descend on soft drop or when the gravity counter reaches the period;
    a blocked descent locks the piece, or ends the game if it rests above row 0

Rendering and timing belong to the caller (see main.py); the controller only
reports what happened through TickResult.
"""
from dataclasses import dataclass, field as dc_field
from enum import Enum, auto
from typing import List, Optional

from tetris_board import Field, fits, lock, scan_completed_rows, shift_rows_down
from tetris_config import CONFIG
from tetris_input import Controls, InputLatches
from tetris_piece import ActivePiece
from tetris_rng import PieceRandom

PIECE_POINTS = 25
LINE_BONUS_BASE = 100


def line_bonus(lines: int) -> int:
    return (LINE_BONUS_BASE << lines) if lines else 0


def score_for_lock(lines: int) -> int:
    return PIECE_POINTS + line_bonus(lines)


class GameState(Enum):
    NO_ACTIVE_PIECE = auto()
    FALLING = auto()
    LINE_CLEAR = auto()
    GAME_OVER = auto()


@dataclass
class Session:
    score: int = 0
    pieces_placed: int = 0
    gravity_period: int = dc_field(default_factory=lambda: CONFIG["GRAVITY_PERIOD"])
    gravity_counter: int = 0

    @classmethod
    def new(cls) -> "Session":
        period = max(CONFIG["GRAVITY_FLOOR"], int(CONFIG["GRAVITY_PERIOD"]))
        return cls(gravity_period=period)

    def count_locked_piece(self):
        """Count a locked piece and speed gravity up every SPEEDUP_EVERY pieces."""
        self.pieces_placed += 1
        if (self.pieces_placed % CONFIG["SPEEDUP_EVERY"] == 0
                and self.gravity_period > CONFIG["GRAVITY_FLOOR"]):
            self.gravity_period -= 1


@dataclass
class TickResult:
    locked: bool = False
    completed_rows: List[int] = dc_field(default_factory=list)
    game_over: bool = False


class Game:
    def __init__(self, rng=None, session: Optional[Session] = None, board: Optional[Field] = None):
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.session = session if session is not None else Session.new()
        self.field = board if board is not None else Field()
        self.latches = InputLatches()
        self.piece: Optional[ActivePiece] = None
        self.pending_rows: List[int] = []
        self.state = GameState.NO_ACTIVE_PIECE

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def spawn(self) -> ActivePiece:
        self.piece = ActivePiece.spawn(self.rng.next_piece())
        self.state = GameState.FALLING
        return self.piece

    def try_rotate(self) -> bool:
        trial = self.piece.rotated(clockwise=True)
        if not fits(trial, self.field):
            return False
        self.piece = trial
        return True

    def try_shift(self, dx: int) -> bool:
        trial = self.piece.moved(dx, 0)
        if not fits(trial, self.field):
            return False
        self.piece = trial
        return True

    def clear_lines(self):
        """Drop the rows above each completed row; called after the flash."""
        if self.pending_rows:
            shift_rows_down(self.field, self.pending_rows)
            self.pending_rows = []
        if self.state is GameState.LINE_CLEAR:
            self.state = GameState.NO_ACTIVE_PIECE

    def tick(self, held: Controls) -> TickResult:
        if self.game_over:
            return TickResult(game_over=True)
        self.clear_lines()

        if self.piece is None:
            self.spawn()
        if not fits(self.piece, self.field):
            return self._end()

        actions = self.latches.update(held)
        if actions.rotate:
            self.try_rotate()
        if held.left != held.right:
            if actions.left:
                self.try_shift(-1)
            elif actions.right:
                self.try_shift(1)

        s = self.session
        if held.soft_drop:
            s.gravity_counter = 0
            due = True
        else:
            s.gravity_counter += 1
            due = s.gravity_counter >= s.gravity_period
            if due:
                s.gravity_counter = 0
        if due:
            return self._descend()
        return TickResult()

    def _descend(self) -> TickResult:
        trial = self.piece.moved(0, 1)
        if fits(trial, self.field):
            self.piece = trial
            return TickResult()
        if self.piece.y < 0:
            return self._end()
        return self._lock()

    def _lock(self) -> TickResult:
        lock(self.piece, self.field)
        self.piece = None
        self.session.count_locked_piece()
        rows = scan_completed_rows(self.field)
        self.session.score += score_for_lock(len(rows))
        self.pending_rows = rows
        self.state = GameState.LINE_CLEAR if rows else GameState.NO_ACTIVE_PIECE
        return TickResult(locked=True, completed_rows=list(rows))

    def _end(self) -> TickResult:
        self.state = GameState.GAME_OVER
        return TickResult(game_over=True)

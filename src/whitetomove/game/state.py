"""Game state: snapshot history, captured tallies and terminal status."""

from __future__ import annotations

from dataclasses import dataclass, field

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color, GameStatus
from whitetomove.core.executor import apply_move
from whitetomove.core.move import Move
from whitetomove.core.move_generator import MoveGenerator
from whitetomove.core.notation import (
    STARTING_FEN,
    move_label,
    position_from_fen,
    position_to_fen,
)
from whitetomove.core.piece import Piece
from whitetomove.core.rules import Rules
from whitetomove.core.types import Square


@dataclass(frozen=True)
class HistoryEntry:
    """One position in the game history.

    The castling rights are stored next to the board they belong to so
    that navigating the history never mixes snapshots.  The first entry
    has no move.
    """

    board: Board
    castling: CastlingRights
    side_to_move: Color
    move: Move | None = None
    label: str = ""
    captured: Piece | None = None


def _empty_tally() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class GameState:
    """Manages game data: history, view step, captures and status.

    This is a pure data/logic class — no threading, no UI.
    """

    history: list[HistoryEntry] = field(default_factory=list, init=False)
    view_step: int = field(default=0, init=False)
    captured: dict[Color, list[Piece]] = field(default_factory=_empty_tally, init=False)
    status: GameStatus = field(default=GameStatus.IN_PROGRESS, init=False)
    resigned: Color | None = field(default=None, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        board, side, castling = position_from_fen(self.start_fen)
        self.history = [HistoryEntry(board, castling, side)]
        self.view_step = 0
        self.captured = _empty_tally()
        self.resigned = None
        self._refresh_status()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> HistoryEntry:
        """Apply a validated move and return the new history entry.

        Caller is responsible for legality check.
        """
        latest = self.latest
        piece = latest.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        castling = latest.castling.after_move(latest.board, move.from_sq)
        outcome = apply_move(latest.board, move.from_sq, move.to_sq, move.promotion)

        entry = HistoryEntry(
            board=outcome.board,
            castling=castling,
            side_to_move=latest.side_to_move.opposite,
            move=move,
            label=move_label(piece, move),
            captured=outcome.captured,
        )
        self.history.append(entry)
        self.view_step = len(self.history) - 1
        if outcome.captured is not None:
            self.captured[piece.color].append(outcome.captured)

        self._refresh_status()
        return entry

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if len(self.history) == 1:
            return None

        entry = self.history.pop()
        if entry.captured is not None:
            self.captured[entry.side_to_move.opposite].pop()
        self.view_step = len(self.history) - 1
        self.resigned = None
        self._refresh_status()
        return entry.move

    def resign(self, color: Color) -> None:
        self.resigned = color

    # ── History navigation ───────────────────────────────────────────────

    def jump_to(self, step: int) -> int:
        """View history entry *step* (clamped); returns the new view step."""
        self.view_step = max(0, min(len(self.history) - 1, step))
        return self.view_step

    def step_back(self) -> int:
        return self.jump_to(self.view_step - 1)

    def step_forward(self) -> int:
        return self.jump_to(self.view_step + 1)

    @property
    def is_at_latest(self) -> bool:
        return self.view_step == len(self.history) - 1

    @property
    def viewed_board(self) -> Board:
        return self.history[self.view_step].board

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def latest(self) -> HistoryEntry:
        return self.history[-1]

    @property
    def board(self) -> Board:
        return self.latest.board

    @property
    def castling(self) -> CastlingRights:
        return self.latest.castling

    @property
    def side_to_move(self) -> Color:
        return self.latest.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.resigned is not None or self.status != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Color | None:
        if self.resigned is not None:
            return self.resigned.opposite
        if self.status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history) - 1

    @property
    def move_labels(self) -> list[str]:
        return [entry.label for entry in self.history[1:]]

    def legal_moves(self, sq: Square) -> set[Move]:
        """Legal moves of the piece on *sq* for the side to move."""
        latest = self.latest
        return MoveGenerator(latest.board, latest.castling).legal_moves(
            sq, latest.side_to_move
        )

    def all_legal_moves(self) -> set[Move]:
        latest = self.latest
        return MoveGenerator(latest.board, latest.castling).all_legal_moves(
            latest.side_to_move
        )

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.board, self.side_to_move)

    def position_fen(self) -> str:
        """Position string of the latest entry, as sent to the opponent engine."""
        latest = self.latest
        return position_to_fen(latest.board, latest.side_to_move, latest.castling)

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        latest = self.latest
        self.status = Rules.game_status(
            latest.board, latest.side_to_move, latest.castling
        )

"""GameController — the central orchestrator of a chess game.

Coordinates: Players, GameState and the ply state machine
(selection → destination → optional promotion → apply → status).
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from whitetomove.core.enums import Color, PieceType
from whitetomove.core.move import Move
from whitetomove.core.types import Square
from whitetomove.game.interfaces import GamePhase, IGameController, IPlayer
from whitetomove.game.state import GameState, HistoryEntry

_LOGGER = logging.getLogger(__name__)

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[HistoryEntry, GameState], None]
GameOverCallback = Callable[[GameState], None]
PhaseCallback = Callable[[GamePhase], None]

_INPUT_PHASES = (GamePhase.AWAITING_MOVE, GamePhase.SQUARE_SELECTED)


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, runs the ply
    state machine, switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Engine answers arrive through
    :class:`~whitetomove.engine.session.EngineSession` on that thread.
    """

    __slots__ = (
        "_state",
        "_players",
        "_phase",
        "_selected",
        "_selected_moves",
        "_pending_promotion",
        "events",
    )

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._selected: Square | None = None
        self._selected_moves: set[Move] = set()
        self._pending_promotion: Move | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def selected_moves(self) -> set[Move]:
        return set(self._selected_moves)

    @property
    def pending_promotion(self) -> Move | None:
        return self._pending_promotion

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(fen)
        self._clear_selection()

        if self._state.is_game_over:
            self._finish()
            return
        self._prompt_current_player()

    def select_square(self, sq: Square) -> set[Move]:
        if not self._accepts_human_input():
            return set()

        piece = self._state.board[sq]
        if piece is None or piece.color != self._state.side_to_move:
            self._clear_selection()
            self._set_phase(GamePhase.AWAITING_MOVE)
            return set()

        self._selected = sq
        self._selected_moves = self._state.legal_moves(sq)
        self._set_phase(GamePhase.SQUARE_SELECTED)
        return set(self._selected_moves)

    def choose_destination(self, sq: Square) -> bool:
        if self._phase != GamePhase.SQUARE_SELECTED or not self._accepts_human_input():
            return False

        move = next((m for m in self._selected_moves if m.to_sq == sq), None)
        if move is None:
            return False

        if self._is_promotion(move):
            self._pending_promotion = move
            self._set_phase(GamePhase.PROMOTION_PENDING)
            return True

        self._commit(move)
        return True

    def click(self, sq: Square) -> bool:
        """Board click: move to *sq* if it is a destination, else (re)select.

        Returns True when a move was applied or a promotion is now pending.
        """
        if self._phase == GamePhase.SQUARE_SELECTED and any(
            m.to_sq == sq for m in self._selected_moves
        ):
            return self.choose_destination(sq)
        self.select_square(sq)
        return False

    def choose_promotion(self, piece_type: PieceType) -> bool:
        if self._phase != GamePhase.PROMOTION_PENDING or self._pending_promotion is None:
            return False
        if piece_type not in PROMOTION_CHOICES:
            return False
        self._commit(self._pending_promotion.with_promotion(piece_type))
        return True

    def cancel_promotion(self) -> None:
        if self._phase != GamePhase.PROMOTION_PENDING:
            return
        self._clear_selection()
        self._set_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._phase not in (*_INPUT_PHASES, GamePhase.THINKING):
            return False

        # Validate legality; generated moves carry no promotion choice
        if move.with_promotion(None) not in self._state.all_legal_moves():
            _LOGGER.warning("Rejected illegal move %s", move)
            return False
        if move.promotion is not None and (
            move.promotion not in PROMOTION_CHOICES or not self._is_promotion(move)
        ):
            _LOGGER.warning("Rejected invalid promotion %s", move)
            return False

        self._commit(move)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()
        self._state.resign(color)
        self._finish()

    def undo_move(self) -> bool:
        if self._state.is_game_over or self._state.ply_count == 0:
            return False

        # Cancel AI if it's thinking
        cp = self.current_player
        if cp and not cp.is_human:
            cp.cancel()

        self._state.undo_last_move()
        self._clear_selection()
        self._prompt_current_player()
        return True

    # ── History navigation (view only) ───────────────────────────────────

    def step_back(self) -> int:
        self._clear_selection()
        if self._phase in (GamePhase.SQUARE_SELECTED, GamePhase.PROMOTION_PENDING):
            self._set_phase(GamePhase.AWAITING_MOVE)
        return self._state.step_back()

    def step_forward(self) -> int:
        return self._state.step_forward()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _accepts_human_input(self) -> bool:
        if self._phase not in _INPUT_PHASES or not self._state.is_at_latest:
            return False
        cp = self.current_player
        return cp is None or cp.is_human

    def _is_promotion(self, move: Move) -> bool:
        piece = self._state.board[move.from_sq]
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and move.to_sq[0] in (0, 7)
        )

    def _commit(self, move: Move) -> None:
        entry = self._state.apply_move(move)
        self._clear_selection()
        _LOGGER.debug("Applied %s (%s)", move, entry.label)

        for cb in self.events.on_move:
            cb(entry, self._state)

        if self._state.is_game_over:
            self._finish()
            return
        self._prompt_current_player()

    def _finish(self) -> None:
        _LOGGER.info(
            "Game over: status=%s winner=%s",
            self._state.status.name,
            self._state.winner,
        )
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._state)

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None or cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
            return
        self._set_phase(GamePhase.THINKING)
        cp.request_move(self._state)

    def _clear_selection(self) -> None:
        self._selected = None
        self._selected_moves = set()
        self._pending_promotion = None

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

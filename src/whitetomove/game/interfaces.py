"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from whitetomove.core.enums import Color, PieceType

if TYPE_CHECKING:
    from whitetomove.core.move import Move
    from whitetomove.core.types import Square
    from whitetomove.game.state import GameState


# ── Ply FSM states ───────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a single ply."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # nothing selected
    SQUARE_SELECTED = auto()  # own piece picked, destinations known
    PROMOTION_PENDING = auto()  # pawn reached the last rank
    THINKING = auto()  # opponent engine is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, state: GameState) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For AI this submits the position to the opponent engine.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def select_square(self, sq: Square) -> set[Move]:
        """Select an own piece; returns its legal moves (empty clears)."""

    @abstractmethod
    def choose_destination(self, sq: Square) -> bool:
        """Move the selected piece to *sq*. Returns True if accepted."""

    @abstractmethod
    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Complete a pending promotion. Returns True if applied."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""

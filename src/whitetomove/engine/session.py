"""Opponent-engine session: one outstanding request at a time."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color
from whitetomove.core.move import Move
from whitetomove.core.notation import position_to_fen
from whitetomove.engine.search import SearchLimits
from whitetomove.game.player import AIPlayer

if TYPE_CHECKING:
    from whitetomove.engine.qt_bridge import EngineWorker
    from whitetomove.game.controller import GameController
    from whitetomove.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class EngineState(Enum):
    """Request slot of the session."""

    IDLE = auto()
    AWAITING_RESPONSE = auto()


class EngineBusyError(RuntimeError):
    """A request was submitted while another one is still outstanding."""


class _EngineCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    request_move = pyqtSignal(str, int)
    depth_changed = pyqtSignal(int)


class EngineSession:
    """Owns the request slot and the move handoff to the controller.

    ``submit`` refuses a second request while one is pending.  ``stop``
    supersedes the pending request without waiting for the engine; any
    answer that still arrives for it is dropped.
    """

    _MAX_FAILURE_RETRIES = 1

    __slots__ = (
        "__weakref__",
        "_controller",
        "_on_no_move",
        "_on_error",
        "_command_bus",
        "_worker",
        "_limits",
        "_state",
        "_request_id",
        "_pending_request",
        "_pending_fen",
        "_remaining_failure_retries",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        on_no_move: Callable[[], None] | None = None,
        on_error: Callable[[str], None] | None = None,
        limits: SearchLimits | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._controller = controller
        self._on_no_move = on_no_move
        self._on_error = on_error
        self._command_bus = _EngineCommandBus(parent)
        self._worker: EngineWorker | None = None
        self._limits = limits if limits is not None else SearchLimits()
        self._state = EngineState.IDLE
        self._request_id = 0
        self._pending_request: int | None = None
        self._pending_fen: str | None = None
        self._remaining_failure_retries = 0

    # ── Wiring ───────────────────────────────────────────────────────────

    def bind(self, worker: EngineWorker) -> None:
        """Connect *worker*; moving it to a thread is the embedder's job."""
        if self._worker is not None:
            raise RuntimeError("Engine session is already bound to a worker")
        self._worker = worker
        self._command_bus.request_move.connect(worker.request_move)
        self._command_bus.depth_changed.connect(worker.set_depth)
        worker.best_move_ready.connect(self._on_best_move)
        worker.search_no_move.connect(self._on_no_move_reply)
        worker.search_cancelled.connect(self._on_cancelled)
        worker.search_error.connect(self._on_engine_error)
        worker.set_depth(self._limits.depth)

    def set_limits(self, limits: SearchLimits) -> None:
        """Update limits for subsequent requests."""
        self._limits = limits
        self._command_bus.depth_changed.emit(limits.depth)

    def create_ai_player(self, color: Color, name: str = "Stockfish AI") -> AIPlayer:
        """Create an AI player that hands its positions to this session."""
        return AIPlayer(color, submit=self.request_ai_move, stop=self.stop, name=name)

    # ── Requests ─────────────────────────────────────────────────────────

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def pending_request(self) -> int | None:
        return self._pending_request

    def submit(self, board: Board, side_to_move: Color, castling: CastlingRights) -> int:
        """Send one position to the engine and return the request id.

        Raises :class:`EngineBusyError` while a request is outstanding.
        """
        self._ensure_idle()
        self._remaining_failure_retries = self._MAX_FAILURE_RETRIES
        return self._dispatch(position_to_fen(board, side_to_move, castling))

    def request_ai_move(self, state: GameState) -> int | None:
        """Submit the latest position of *state*; None when the engine is busy."""
        try:
            return self.submit(state.board, state.side_to_move, state.castling)
        except EngineBusyError:
            _LOGGER.warning("Engine busy, request %s still pending", self._pending_request)
            return None

    def stop(self) -> None:
        """Supersede the pending request, if any."""
        if self._state is EngineState.IDLE:
            return
        _LOGGER.debug("Superseding request %s", self._pending_request)
        self._clear_pending_request()
        if self._worker is not None:
            # Event-backed and thread-safe: reaches a busy worker immediately.
            self._worker.stop()

    # ── Worker replies ───────────────────────────────────────────────────

    def _on_best_move(self, request_id: int, move_obj: object) -> None:
        if not self._is_current(request_id):
            return
        fen = self._pending_fen
        self._clear_pending_request()

        if not isinstance(move_obj, Move):
            self._report_error(f"Engine returned {move_obj!r}")
            return
        if fen != self._controller.state.position_fen():
            _LOGGER.warning("Dropping %s: position changed since request", move_obj)
            return
        if not self._controller.submit_move(move_obj):
            self._report_error(f"Engine proposed an illegal move: {move_obj}")

    def _on_no_move_reply(self, request_id: int) -> None:
        if not self._is_current(request_id):
            return
        self._clear_pending_request()
        # The position is already terminal; nothing to apply.
        _LOGGER.info("Engine reports no move for request %d", request_id)
        if self._on_no_move is not None:
            self._on_no_move()

    def _on_cancelled(self, request_id: int) -> None:
        if not self._is_current(request_id):
            return
        self._clear_pending_request()

    def _on_engine_error(self, request_id: int, message: str) -> None:
        if not self._is_current(request_id):
            return
        fen = self._pending_fen
        self._clear_pending_request()

        if fen is not None and self._remaining_failure_retries > 0:
            self._remaining_failure_retries -= 1
            _LOGGER.warning("Retrying after engine error: %s", message)
            self._dispatch(fen)
            return
        self._report_error(message)

    # ── Internal ─────────────────────────────────────────────────────────

    def _ensure_idle(self) -> None:
        if self._state is EngineState.AWAITING_RESPONSE:
            raise EngineBusyError(
                f"Engine request {self._pending_request} is still outstanding"
            )

    def _dispatch(self, fen: str) -> int:
        self._ensure_idle()
        self._request_id += 1
        request_id = self._request_id
        self._pending_request = request_id
        self._pending_fen = fen
        self._state = EngineState.AWAITING_RESPONSE
        # A direct connection may deliver the reply before emit() returns.
        self._command_bus.request_move.emit(fen, request_id)
        return request_id

    def _is_current(self, request_id: int) -> bool:
        if self._state is EngineState.AWAITING_RESPONSE and (
            request_id == self._pending_request
        ):
            return True
        _LOGGER.debug("Ignoring stale reply for request %d", request_id)
        return False

    def _clear_pending_request(self) -> None:
        self._state = EngineState.IDLE
        self._pending_request = None
        self._pending_fen = None

    def _report_error(self, message: str) -> None:
        _LOGGER.warning("Engine failure: %s", message)
        if self._on_error is not None:
            self._on_error(message)

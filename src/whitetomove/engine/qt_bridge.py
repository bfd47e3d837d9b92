"""Qt bridge to run opponent-engine requests in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from whitetomove.core.notation import parse_bestmove
from whitetomove.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that asks the opponent engine for a move."""

    best_move_ready = pyqtSignal(int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(self, engine: IEngine, *, depth: int = 10) -> None:
        super().__init__()
        self._engine = engine
        self._limits = SearchLimits(depth=depth)
        self._cancel_event = threading.Event()

    @pyqtSlot(str, int)
    def request_move(self, fen: str, request_id: int) -> None:
        """Ask the engine for the best move in *fen* and emit the result."""
        self._cancel_event.clear()
        _LOGGER.debug("Request %d: %s (depth %d)", request_id, fen, self._limits.depth)
        try:
            answer = self._engine.best_move(
                fen,
                self._limits,
                is_cancelled=self._cancel_event.is_set,
            )
            move = parse_bestmove(answer)
        except Exception as exc:
            _LOGGER.warning("Request %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, move)

    @pyqtSlot()
    def stop(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, depth: int) -> None:
        """Update the search depth (takes effect on the next request)."""
        self._limits = SearchLimits(depth=depth)

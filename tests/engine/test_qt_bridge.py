"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from whitetomove.core.move import Move
from whitetomove.core.notation import STARTING_FEN
from whitetomove.core.types import E2, E4
from whitetomove.engine.qt_bridge import EngineWorker
from whitetomove.engine.search import CancelCheck, SearchLimits

pytestmark = pytest.mark.usefixtures("qapp")


class _ScriptedEngine:
    """Returns a fixed answer and records what it was asked."""

    def __init__(self, answer: str) -> None:
        self.answer = answer
        self.calls: list[tuple[str, int]] = []
        self.cancel_checks: list[CancelCheck | None] = []

    def best_move(
        self,
        fen: str,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> str:
        self.calls.append((fen, limits.depth))
        self.cancel_checks.append(is_cancelled)
        return self.answer


class _FailingEngine:
    def best_move(
        self,
        _fen: str,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> str:
        del is_cancelled
        raise RuntimeError("engine crashed")


class _CancellingEngine:
    def __init__(self) -> None:
        self.worker: EngineWorker | None = None

    def best_move(
        self,
        _fen: str,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> str:
        assert self.worker is not None
        self.worker.stop()
        assert is_cancelled is not None and is_cancelled()
        return "e2e4"


class TestEngineWorker:
    def test_emits_best_move(self) -> None:
        engine = _ScriptedEngine("bestmove e2e4 ponder e7e5")
        worker = EngineWorker(engine)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(STARTING_FEN, 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        assert best_moves[0][1] == Move(E2, E4)
        assert len(errors) == 0
        assert engine.calls == [(STARTING_FEN, 10)]

    def test_emits_no_move_for_sentinel(self) -> None:
        worker = EngineWorker(_ScriptedEngine("bestmove (none)"))
        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(STARTING_FEN, 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0

    def test_emits_error_when_engine_raises(self) -> None:
        worker = EngineWorker(_FailingEngine())
        errors = QSignalSpy(worker.search_error)

        worker.request_move(STARTING_FEN, 5)

        assert len(errors) == 1
        assert errors[0][0] == 5
        assert "engine crashed" in errors[0][1]

    def test_emits_error_for_malformed_answer(self) -> None:
        worker = EngineWorker(_ScriptedEngine("zz99"))
        errors = QSignalSpy(worker.search_error)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(STARTING_FEN, 2)

        assert len(errors) == 1
        assert len(best_moves) == 0

    def test_emits_cancelled_when_stopped_mid_search(self) -> None:
        engine = _CancellingEngine()
        worker = EngineWorker(engine)
        engine.worker = worker
        cancelled = QSignalSpy(worker.search_cancelled)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(STARTING_FEN, 7)

        assert len(cancelled) == 1
        assert cancelled[0][0] == 7
        assert len(best_moves) == 0

    def test_new_request_clears_previous_stop(self) -> None:
        engine = _ScriptedEngine("e2e4")
        worker = EngineWorker(engine)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.stop()
        worker.request_move(STARTING_FEN, 1)

        assert len(best_moves) == 1
        check = engine.cancel_checks[0]
        assert check is not None and not check()

    def test_depth_is_forwarded(self) -> None:
        engine = _ScriptedEngine("e2e4")
        worker = EngineWorker(engine, depth=4)
        worker.request_move(STARTING_FEN, 1)
        worker.set_depth(2)
        worker.request_move(STARTING_FEN, 2)
        assert [depth for _, depth in engine.calls] == [4, 2]


class TestSearchLimits:
    def test_default_depth(self) -> None:
        assert SearchLimits().depth == 10

    def test_rejects_non_positive_depth(self) -> None:
        with pytest.raises(ValueError):
            SearchLimits(depth=0)

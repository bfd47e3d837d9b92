"""Tests for Player implementations."""

from __future__ import annotations

from whitetomove.core.enums import Color
from whitetomove.game.player import AIPlayer, HumanPlayer
from whitetomove.game.state import GameState


class _FakeEngine:
    """Hands out request ids, or refuses while *busy*."""

    def __init__(self, busy: bool = False) -> None:
        self.busy = busy
        self.positions: list[GameState] = []
        self.stops = 0

    def submit(self, state: GameState) -> int | None:
        if self.busy:
            return None
        self.positions.append(state)
        return len(self.positions)

    def stop(self) -> None:
        self.stops += 1

    def player(self, color: Color = Color.BLACK) -> AIPlayer:
        return AIPlayer(color, submit=self.submit, stop=self.stop)


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_names(self) -> None:
        assert HumanPlayer(Color.WHITE).name == "Player 1"
        assert HumanPlayer(Color.BLACK).name == "Player 2"

    def test_request_move_noop(self) -> None:
        p = HumanPlayer(Color.WHITE)
        p.request_move(GameState())  # should not raise

    def test_cancel_noop(self) -> None:
        HumanPlayer(Color.WHITE).cancel()


class TestAIPlayer:
    def test_properties(self) -> None:
        p = _FakeEngine().player()
        assert p.color == Color.BLACK
        assert p.name == "Stockfish AI"
        assert p.is_human is False
        assert p.last_request is None

    def test_custom_name(self) -> None:
        engine = _FakeEngine()
        p = AIPlayer(Color.WHITE, submit=engine.submit, stop=engine.stop, name="Depth 2")
        assert p.name == "Depth 2"

    def test_request_move_submits_position(self) -> None:
        engine = _FakeEngine()
        p = engine.player()
        state = GameState()
        p.request_move(state)
        assert engine.positions == [state]
        assert p.last_request == 1

    def test_each_request_recorded(self) -> None:
        engine = _FakeEngine()
        p = engine.player()
        p.request_move(GameState())
        p.request_move(GameState())
        assert p.last_request == 2

    def test_refused_request_keeps_previous_id(self) -> None:
        engine = _FakeEngine()
        p = engine.player()
        p.request_move(GameState())
        engine.busy = True
        p.request_move(GameState())
        assert p.last_request == 1
        assert len(engine.positions) == 1

    def test_cancel_stops_engine_and_forgets_request(self) -> None:
        engine = _FakeEngine()
        p = engine.player()
        p.request_move(GameState())
        p.cancel()
        assert engine.stops == 1
        assert p.last_request is None

    def test_cancel_without_request(self) -> None:
        engine = _FakeEngine()
        p = engine.player()
        p.cancel()
        assert engine.stops == 1
        assert p.last_request is None

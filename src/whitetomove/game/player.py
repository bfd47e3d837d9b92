"""Game participants: a human at the board and the opponent engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from whitetomove.core.enums import Color
from whitetomove.game.interfaces import IPlayer

if TYPE_CHECKING:
    from whitetomove.game.state import GameState

_LOGGER = logging.getLogger(__name__)

SubmitPosition = Callable[["GameState"], "int | None"]

_DEFAULT_HUMAN_NAMES: dict[Color, str] = {
    Color.WHITE: "Player 1",
    Color.BLACK: "Player 2",
}


class _Seat(IPlayer):
    """Color and display name shared by every participant."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str) -> None:
        self._color = color
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color}, {self._name!r})"


class HumanPlayer(_Seat):
    """Moves arrive through the controller's square selection."""

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or _DEFAULT_HUMAN_NAMES[color])

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, state: GameState) -> None:
        del state

    def cancel(self) -> None:
        return None


class AIPlayer(_Seat):
    """The opponent engine's seat at the table.

    Prompting hands the latest position to *submit*, which answers with
    the engine request id, or ``None`` when the engine refused the
    request.  The move itself comes back later through
    :meth:`GameController.submit_move`.  In production the pair is
    :meth:`EngineSession.request_ai_move` / :meth:`EngineSession.stop`,
    see :meth:`EngineSession.create_ai_player`.
    """

    __slots__ = ("_submit", "_stop", "_last_request")

    def __init__(
        self,
        color: Color,
        *,
        submit: SubmitPosition,
        stop: Callable[[], None],
        name: str = "Stockfish AI",
    ) -> None:
        super().__init__(color, name)
        self._submit = submit
        self._stop = stop
        self._last_request: int | None = None

    @property
    def is_human(self) -> bool:
        return False

    @property
    def last_request(self) -> int | None:
        """Id of the most recent accepted request, cleared on cancel."""
        return self._last_request

    def request_move(self, state: GameState) -> None:
        request_id = self._submit(state)
        if request_id is None:
            _LOGGER.warning("%s: engine refused the position", self._name)
            return
        self._last_request = request_id
        _LOGGER.debug("%s thinking (request %d)", self._name, request_id)

    def cancel(self) -> None:
        self._last_request = None
        self._stop()

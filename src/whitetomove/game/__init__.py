"""Game management layer: controller, players, snapshot history.

Quick start::

    from whitetomove.core import Color, E2, E4
    from whitetomove.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    ctrl.select_square(E2)
    ctrl.choose_destination(E4)
"""

from whitetomove.game.controller import PROMOTION_CHOICES, GameController, GameEvents
from whitetomove.game.interfaces import GamePhase, IGameController, IPlayer
from whitetomove.game.player import AIPlayer, HumanPlayer
from whitetomove.game.state import GameState, HistoryEntry

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HistoryEntry",
    "HumanPlayer",
    "PROMOTION_CHOICES",
]

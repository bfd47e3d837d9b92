"""Notation package: FEN, engine move tokens and history labels."""

from whitetomove.core.notation.fen import (
    STARTING_FEN,
    board_to_placement,
    position_from_fen,
    position_to_fen,
)
from whitetomove.core.notation.labels import move_label
from whitetomove.core.notation.models import ParsedFen
from whitetomove.core.notation.uci import NO_MOVE_TOKENS, parse_bestmove, parse_uci_move

__all__ = [
    "NO_MOVE_TOKENS",
    "STARTING_FEN",
    "ParsedFen",
    "board_to_placement",
    "move_label",
    "parse_bestmove",
    "parse_uci_move",
    "position_from_fen",
    "position_to_fen",
]

"""Shared notation-layer data models."""

from __future__ import annotations

from typing import NamedTuple

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color


class ParsedFen(NamedTuple):
    """Position fields recovered from a FEN string."""

    board: Board
    side_to_move: Color
    castling: CastlingRights

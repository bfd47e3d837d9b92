"""Decoding of opponent-engine move tokens (``e2e4``, ``e7e8q``)."""

from __future__ import annotations

from whitetomove.core.enums import PieceType
from whitetomove.core.move import Move
from whitetomove.core.types import parse_square

NO_MOVE_TOKENS: frozenset[str] = frozenset({"(none)", "0000", ""})

_PROMO_TYPES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}


def parse_uci_move(token: str) -> Move | None:
    """Map ``<file><rank><file><rank>[promo]`` to a :class:`Move`.

    Returns ``None`` for the engine's "no move available" sentinels.
    """
    token = token.strip()
    if token in NO_MOVE_TOKENS:
        return None
    if len(token) not in (4, 5):
        raise ValueError(f"Invalid UCI move: {token!r}")

    from_sq = parse_square(token[0:2])
    to_sq = parse_square(token[2:4])
    promotion: PieceType | None = None
    if len(token) == 5:
        promotion = _PROMO_TYPES.get(token[4].lower())
        if promotion is None:
            raise ValueError(f"Invalid UCI promotion piece: {token!r}")
    return Move(from_sq, to_sq, promotion)


def parse_bestmove(line: str) -> Move | None:
    """Decode a ``bestmove <move> [ponder <move>]`` response line.

    A bare move token is accepted as well.
    """
    fields = line.split()
    if not fields:
        return None
    if fields[0] == "bestmove":
        return parse_uci_move(fields[1]) if len(fields) > 1 else None
    if len(fields) != 1:
        raise ValueError(f"Invalid engine response: {line!r}")
    return parse_uci_move(fields[0])

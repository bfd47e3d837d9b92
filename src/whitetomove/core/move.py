"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass, replace

from whitetomove.core.enums import PieceType
from whitetomove.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable proposal to move the piece on *from_sq* to *to_sq*.

    ``promotion`` is only meaningful for a pawn reaching the last rank;
    the generator leaves it unset and the player's choice fills it in.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def with_promotion(self, promotion: PieceType | None) -> Move:
        return replace(self, promotion=promotion)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

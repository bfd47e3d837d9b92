"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from whitetomove.core.enums import Color, PieceType
from whitetomove.core.piece import Piece
from whitetomove.core.types import Square

Row = tuple[Piece | None, ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Read-only 8x8 snapshot; every change produces a new board."""

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[Row, ...]) -> None:
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board needs exactly 8 rows of 8 squares")
        self._rows = rows

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._rows[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for r, row in enumerate(self._rows):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield (r, c), piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it is missing."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == king:
                return sq
        return None

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """Return a copy with the given squares overwritten."""
        grid = [list(row) for row in self._rows]
        for (r, c), piece in changes.items():
            grid[r][c] = piece
        return Board(tuple(tuple(row) for row in grid))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls(tuple((None,) * 8 for _ in range(8)))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        black_back = tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK)
        white_back = tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK)
        black_pawns = (Piece(Color.BLACK, PieceType.PAWN),) * 8
        white_pawns = (Piece(Color.WHITE, PieceType.PAWN),) * 8
        blank: Row = (None,) * 8
        return cls(
            (black_back, black_pawns, blank, blank, blank, blank, white_pawns, white_back)
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for r, row in enumerate(self._rows):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{8 - r} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)

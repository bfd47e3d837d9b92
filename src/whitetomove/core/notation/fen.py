"""FEN parsing and serialization."""

from __future__ import annotations

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color
from whitetomove.core.notation.models import ParsedFen
from whitetomove.core.piece import Piece
from whitetomove.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# En passant and the move counters are not tracked by the rules engine.
_UNTRACKED_FIELDS = "- 0 1"


def position_from_fen(fen: str) -> ParsedFen:
    """Parse a FEN string into board, side to move and castling rights.

    The en-passant square and the clocks are validated for shape only
    and then dropped.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement (rank 8 first, which is row 0)
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    changes: dict[Square, Piece | None] = {}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                changes[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    board = Board.empty().replace(changes)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.from_fen_token(castling_part)

    # 4. En passant (unsupported, shape check only)
    if ep_part != "-" and (
        len(ep_part) != 2 or ep_part[0] not in "abcdefgh" or ep_part[1] not in "36"
    ):
        raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")

    # 5–6. Clocks (optional)
    for text in parts[4:]:
        if not text.isdigit():
            raise ValueError(f"Invalid FEN clock field: {text!r}")

    return ParsedFen(board, side, castling)


def board_to_placement(board: Board) -> str:
    """Piece-placement field, rank 8 to rank 1 with run-length empties."""
    segments: list[str] = []
    for row in board.rows:
        empty = 0
        segment = ""
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                segment += str(empty)
                empty = 0
            segment += str(piece)
        if empty:
            segment += str(empty)
        segments.append(segment)
    return "/".join(segments)


def position_to_fen(board: Board, side_to_move: Color, castling: CastlingRights) -> str:
    """Serialise a position to the single-line string sent to the opponent engine."""
    side_str = "w" if side_to_move == Color.WHITE else "b"
    return (
        f"{board_to_placement(board)} {side_str} {castling.fen_token()} "
        f"{_UNTRACKED_FIELDS}"
    )

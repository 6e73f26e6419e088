"""FEN piece-placement parsing and serialization.

Only the first FEN field is supported; side to move is tracked by the turn
controller and castling/en-passant rights do not exist in this rules set.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import Coord

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a FEN placement field, e.g. ``'8/8/8/8/3R4/8/8/8'``."""
    ranks = placement.strip().split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 8 - rank_idx
        file = 1
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file > 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[Coord(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 9:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != 9:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialize *board* to a FEN placement field."""
    rows: list[str] = []
    for rank in range(8, 0, -1):
        row = ""
        empty = 0
        for file in range(1, 9):
            piece = board.occupant_at(Coord(file, rank))
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)

"""Board - sparse piece placement keyed by coordinate."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Coord

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
    """Mutable placement of pieces.

    A square without an entry is empty. The board knows nothing about
    legality; callers validate moves before applying them.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: dict[Coord, Piece] | None = None) -> None:
        self._pieces: dict[Coord, Piece] = dict(pieces) if pieces else {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Piece | None:
        return self._pieces.get(coord)

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        if piece is None:
            self._pieces.pop(coord, None)
        else:
            self._pieces[coord] = piece

    def __delitem__(self, coord: Coord) -> None:
        del self._pieces[coord]

    def __contains__(self, coord: object) -> bool:
        return coord in self._pieces

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def items(self) -> list[tuple[Coord, Piece]]:
        return list(self._pieces.items())

    # -- Queries ------------------------------------------------------------

    def occupant_at(self, coord: Coord) -> Piece | None:
        """Piece on *coord*, or ``None`` if the square is empty."""
        return self._pieces.get(coord)

    def is_occupied(self, coord: Coord) -> bool:
        return coord in self._pieces

    def is_occupied_by(self, coord: Coord, color: Color) -> bool:
        """True iff *coord* holds a piece of *color*."""
        piece = self._pieces.get(coord)
        return piece is not None and piece.color == color

    def pieces(self, color: Color) -> list[tuple[Coord, Piece]]:
        """All ``(coord, piece)`` entries belonging to *color*."""
        return [(c, p) for c, p in self._pieces.items() if p.color == color]

    # -- Mutation / copying -------------------------------------------------

    def apply_move(self, origin: Coord, destination: Coord) -> None:
        """Move the piece on *origin* to *destination*.

        Whatever stood on *destination* is discarded. *origin* must be
        occupied; an empty origin raises ``KeyError``.
        """
        self._pieces[destination] = self._pieces.pop(origin)

    def copy(self) -> Board:
        return Board(self._pieces)

    def clear(self) -> None:
        self._pieces.clear()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, pt in enumerate(_BACK_RANK, start=1):
            b[Coord(file, 1)] = Piece(Color.WHITE, pt)
            b[Coord(file, 2)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Coord(file, 7)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Coord(file, 8)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in range(1, 9):
                p = self._pieces.get(Coord(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

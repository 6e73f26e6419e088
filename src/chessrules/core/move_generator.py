"""Pseudo-legal destination generation.

Generated destinations obey piece movement and occupancy rules but are not
filtered against leaving the mover's own king in check. Castling, en passant
and promotion are not generated.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import (
    BISHOP_DIRECTIONS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_DIRECTIONS,
    Coord,
    DirectionOffset,
)

# Pawn forward rank delta and starting rank per color.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}


class MoveGenerator:
    """Computes destination squares for a single piece on a :class:`Board`.

    The generator never mutates the board and keeps no state between calls;
    the result depends only on ``(color, piece_type, board, origin)``.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(
        self, color: Color, piece_type: PieceType, origin: Coord
    ) -> list[Coord]:
        """Pseudo-legal destinations for a *color* *piece_type* on *origin*."""
        match piece_type:
            case PieceType.PAWN:
                return self._gen_pawn(color, origin)
            case PieceType.KNIGHT:
                return self._gen_steps(color, origin, KNIGHT_OFFSETS)
            case PieceType.BISHOP:
                return self._gen_sliding(color, origin, BISHOP_DIRECTIONS)
            case PieceType.ROOK:
                return self._gen_sliding(color, origin, ROOK_DIRECTIONS)
            case PieceType.QUEEN:
                return self._gen_sliding(
                    color, origin, ROOK_DIRECTIONS
                ) + self._gen_sliding(color, origin, BISHOP_DIRECTIONS)
            case PieceType.KING:
                return self._gen_steps(color, origin, KING_OFFSETS)
            case _:
                raise ValueError(f"Unknown piece type: {piece_type!r}")

    def destinations_from(self, origin: Coord) -> list[Coord]:
        """Destinations for whatever stands on *origin* (empty if nothing)."""
        piece = self._board.occupant_at(origin)
        if piece is None:
            return []
        return self.destinations(piece.color, piece.piece_type, origin)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, color: Color, origin: Coord) -> list[Coord]:
        board = self._board
        forward = _PAWN_FORWARD[color]
        moves: list[Coord] = []

        one_step = origin.offset(forward, 0)
        if one_step is not None and not board.is_occupied(one_step):
            moves.append(one_step)
            if origin.rank == _PAWN_START_RANK[color]:
                two_step = origin.offset(2 * forward, 0)
                if two_step is not None and not board.is_occupied(two_step):
                    moves.append(two_step)

        enemy = color.opposite
        for file_delta in (-1, 1):
            capture = origin.offset(forward, file_delta)
            if capture is not None and board.is_occupied_by(capture, enemy):
                moves.append(capture)
        return moves

    def _gen_steps(
        self,
        color: Color,
        origin: Coord,
        offsets: tuple[DirectionOffset, ...],
    ) -> list[Coord]:
        board = self._board
        moves: list[Coord] = []
        for rank_delta, file_delta in offsets:
            target = origin.offset(rank_delta, file_delta)
            if target is not None and not board.is_occupied_by(target, color):
                moves.append(target)
        return moves

    def _gen_sliding(
        self,
        color: Color,
        origin: Coord,
        directions: tuple[DirectionOffset, ...],
    ) -> list[Coord]:
        board = self._board
        moves: list[Coord] = []
        for rank_delta, file_delta in directions:
            target = origin.offset(rank_delta, file_delta)
            while target is not None:
                occupant = board.occupant_at(target)
                if occupant is None:
                    moves.append(target)
                    target = target.offset(rank_delta, file_delta)
                    continue
                if occupant.color != color:
                    moves.append(target)
                break
        return moves

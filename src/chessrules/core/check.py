"""Check detection: is a king attacked, and by which pieces."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Coord

_LOGGER = logging.getLogger(__name__)


class KingNotFoundError(ValueError):
    """The board has no king of the queried color."""


@dataclass(frozen=True, slots=True)
class ThreateningPiece:
    """An enemy piece whose destinations include the king's square."""

    color: Color
    piece_type: PieceType
    coord: Coord

    def __str__(self) -> str:
        return f"{self.color} {self.piece_type} on {self.coord}"


@dataclass(frozen=True, slots=True)
class CheckStatus:
    """Check state of one color's king."""

    color: Color
    in_check: bool
    attackers: tuple[ThreateningPiece, ...] = ()


@dataclass(frozen=True, slots=True)
class CheckReport:
    """Check state of both kings after a move."""

    white: CheckStatus
    black: CheckStatus

    @property
    def in_check(self) -> bool:
        """Whether either king is attacked."""
        return self.white.in_check or self.black.in_check

    def status(self, color: Color) -> CheckStatus:
        return self.white if color == Color.WHITE else self.black


class CheckDetector:
    """Stateless check queries over a :class:`Board`.

    Attacks are derived from the same pseudo-legal destinations the
    :class:`MoveGenerator` hands to players, recomputed on every call.
    """

    @staticmethod
    def find_king(board: Board, color: Color) -> Coord:
        """Square of *color*'s king. Raises :class:`KingNotFoundError`."""
        for coord, piece in board.items():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return coord
        raise KingNotFoundError(f"No {color.name} king on board")

    @staticmethod
    def is_king_in_check(board: Board, color: Color) -> CheckStatus:
        king_coord = CheckDetector.find_king(board, color)
        gen = MoveGenerator(board)
        attackers: list[ThreateningPiece] = []

        for coord, piece in board.pieces(color.opposite):
            if king_coord in gen.destinations(piece.color, piece.piece_type, coord):
                attackers.append(ThreateningPiece(piece.color, piece.piece_type, coord))

        return CheckStatus(color, bool(attackers), tuple(attackers))

    @staticmethod
    def report(board: Board, *, log: bool = True) -> CheckReport:
        """Check status of both colors; logs every threatened king."""
        result = CheckReport(
            white=CheckDetector.is_king_in_check(board, Color.WHITE),
            black=CheckDetector.is_king_in_check(board, Color.BLACK),
        )
        if log:
            for status in (result.white, result.black):
                if not status.in_check:
                    continue
                _LOGGER.info(
                    "%s is in check by %d %s piece(s)",
                    status.color,
                    len(status.attackers),
                    status.color.opposite,
                )
                for attacker in status.attackers:
                    _LOGGER.info("%s is threatening the king", attacker)
        return result

"""Core domain layer: pure rules logic with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, Coord, MoveGenerator, PieceType

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.destinations(Color.WHITE, PieceType.KNIGHT, Coord.parse("b1")))
"""

from chessrules.core.board import Board
from chessrules.core.check import (
    CheckDetector,
    CheckReport,
    CheckStatus,
    KingNotFoundError,
    ThreateningPiece,
)
from chessrules.core.enums import Color, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessrules.core.piece import Piece
from chessrules.core.types import (
    Coord,
    DirectionOffset,
    InvalidCoordinateError,
    next_file,
    previous_file,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Coord",
    "DirectionOffset",
    "InvalidCoordinateError",
    "next_file",
    "previous_file",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    # Check detection
    "CheckDetector",
    "CheckReport",
    "CheckStatus",
    "KingNotFoundError",
    "ThreateningPiece",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]

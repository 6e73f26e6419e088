"""Tests for Piece."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_letter_ignores_color(self) -> None:
        assert Piece(Color.BLACK, PieceType.BISHOP).letter == "B"

    def test_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.PAWN)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert str(Color.WHITE) == "white"

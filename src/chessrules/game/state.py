"""Turn state and the records emitted for each applied move."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.check import CheckReport
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import Coord
from chessrules.game.interfaces import TurnPhase


@dataclass(frozen=True, slots=True)
class Selection:
    """An accepted origin and the destinations remembered for it."""

    origin: Coord
    piece: Piece
    destinations: tuple[Coord, ...]

    def allows(self, coord: Coord) -> bool:
        return coord in self.destinations


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One applied ply, for notation formatters and logs."""

    ply: int
    color: Color
    piece: Piece
    origin: Coord
    destination: Coord
    captured: Piece | None
    check: CheckReport

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def gives_check(self) -> bool:
        """Whether the opponent's king is attacked after this ply."""
        return self.check.status(self.color.opposite).in_check

    @property
    def uci(self) -> str:
        """Coordinate notation, e.g. ``e2e4``."""
        return f"{self.origin}{self.destination}"

    @property
    def long_algebraic(self) -> str:
        """Long algebraic notation, e.g. ``Nb1-c3`` or ``Pe4xd5+``."""
        sep = "x" if self.is_capture else "-"
        suffix = "+" if self.gives_check else ""
        return f"{self.piece.letter}{self.origin}{sep}{self.destination}{suffix}"

    def __str__(self) -> str:
        return self.long_algebraic


@dataclass
class TurnState:
    """Whose turn it is and where the selection protocol stands.

    Owned and mutated only by :class:`~chessrules.game.controller.TurnController`.
    """

    phase: TurnPhase = TurnPhase.AWAITING_SELECTION
    active_color: Color = Color.WHITE
    selection: Selection | None = None
    ply: int = 0

    def reset(self) -> None:
        self.phase = TurnPhase.AWAITING_SELECTION
        self.active_color = Color.WHITE
        self.selection = None
        self.ply = 0

    @property
    def fullmove_number(self) -> int:
        """Current full-move number for display."""
        return (self.ply // 2) + 1

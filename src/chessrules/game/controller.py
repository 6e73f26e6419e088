"""TurnController: sequences origin selection, destination selection,
move application and check reporting.

Emits events via simple callbacks so a UI / notation writer / tests can
subscribe. The controller is the only component that mutates the board.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.check import CheckDetector, CheckReport
from chessrules.core.enums import Color
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import board_from_placement
from chessrules.core.types import Coord
from chessrules.game.interfaces import Rejection, TurnPhase
from chessrules.game.settings import GameSettings
from chessrules.game.state import MoveRecord, Selection, TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

DestinationsCallback = Callable[[list[Coord]], None]
MoveCallback = Callable[[MoveRecord], None]
CheckReportCallback = Callable[[CheckReport], None]
PhaseCallback = Callable[[TurnPhase], None]
RejectionCallback = Callable[[Rejection], None]


@dataclass
class TurnEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_destinations: list[DestinationsCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_check_report: list[CheckReportCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_rejected: list[RejectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController:
    """Owns the board and turn state of one game session.

    Calls are expected one at a time from a single input loop; nothing here
    is thread-safe. Destinations are pseudo-legal, so a player may leave
    their own king in check.
    """

    __slots__ = (
        "_board",
        "_state",
        "_settings",
        "_last_rejection",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._board = board if board is not None else self._starting_board()
        self._state = TurnState()
        self._last_rejection = Rejection.NONE
        self.events = TurnEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def active_color(self) -> Color:
        return self._state.active_color

    @property
    def phase(self) -> TurnPhase:
        return self._state.phase

    @property
    def legal_destinations(self) -> tuple[Coord, ...]:
        """Destinations of the selected piece (empty when nothing is selected)."""
        selection = self._state.selection
        return selection.destinations if selection is not None else ()

    @property
    def last_rejection(self) -> Rejection:
        return self._last_rejection

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        """Start over with *board* (or the configured starting placement)."""
        self._board = board if board is not None else self._starting_board()
        self._state.reset()
        self._last_rejection = Rejection.NONE
        self._emit_phase(TurnPhase.AWAITING_SELECTION)

    # ── Selection protocol ───────────────────────────────────────────────

    def select_origin(self, coord: Coord) -> bool:
        """Select the piece to move. Returns True if destinations are shown.

        Selecting again while a destination set is highlighted replaces
        the previous selection.
        """
        self._state.selection = None

        piece = self._board.occupant_at(coord)
        if piece is None:
            return self._reject(Rejection.NO_PIECE_AT_ORIGIN, coord)
        if piece.color != self._state.active_color:
            return self._reject(Rejection.WRONG_COLOR_SELECTION, coord)

        gen = MoveGenerator(self._board)
        destinations = gen.destinations(piece.color, piece.piece_type, coord)
        if not destinations:
            return self._reject(Rejection.NO_LEGAL_MOVES, coord)

        self._state.selection = Selection(coord, piece, tuple(destinations))
        self._last_rejection = Rejection.NONE
        self._set_phase(TurnPhase.DESTINATION_HIGHLIGHTED)
        self._emit_destinations(destinations)
        return True

    def select_destination(self, coord: Coord) -> bool:
        """Move the selected piece to *coord*. Returns True if applied.

        A destination outside the highlighted set deselects the piece and
        leaves the board untouched.
        """
        selection = self._state.selection
        if selection is None or not selection.allows(coord):
            return self._reject(Rejection.ILLEGAL_DESTINATION, coord)

        mover = self._state.active_color
        if self._settings.verify_destination and self._board.is_occupied_by(
            coord, mover
        ):
            return self._reject(Rejection.ILLEGAL_DESTINATION, coord)

        # Report on the resulting position first: a KingNotFoundError must
        # leave board and turn state as they were.
        after = self._board.copy()
        after.apply_move(selection.origin, coord)
        report = CheckDetector.report(after, log=self._settings.log_check_reports)

        captured = self._board.occupant_at(coord)
        self._board.apply_move(selection.origin, coord)
        self._state.ply += 1
        self._state.active_color = mover.opposite
        self._state.selection = None
        self._last_rejection = Rejection.NONE
        self._set_phase(TurnPhase.AWAITING_SELECTION)

        record = MoveRecord(
            ply=self._state.ply,
            color=mover,
            piece=selection.piece,
            origin=selection.origin,
            destination=coord,
            captured=captured,
            check=report,
        )
        _LOGGER.debug("Ply %d: %s %s", record.ply, mover, record.long_algebraic)

        self._emit_move(record)
        self._emit_check_report(report)
        return True

    def select_square(self, coord: Coord) -> bool:
        """Route a square click to the entry point for the current phase."""
        if self._state.phase == TurnPhase.DESTINATION_HIGHLIGHTED:
            return self.select_destination(coord)
        return self.select_origin(coord)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _starting_board(self) -> Board:
        return board_from_placement(self._settings.starting_placement)

    def _reject(self, reason: Rejection, coord: Coord) -> bool:
        _LOGGER.debug(
            "Rejected %s at %s (%s to move)",
            reason.name,
            coord,
            self._state.active_color,
        )
        self._last_rejection = reason
        self._state.selection = None
        self._set_phase(TurnPhase.AWAITING_SELECTION)
        for cb in self.events.on_rejected:
            cb(reason)
        return False

    def _set_phase(self, phase: TurnPhase) -> None:
        if self._state.phase == phase:
            return
        self._state.phase = phase
        self._emit_phase(phase)

    def _emit_destinations(self, destinations: list[Coord]) -> None:
        for cb in self.events.on_destinations:
            cb(list(destinations))

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_check_report(self, report: CheckReport) -> None:
        for cb in self.events.on_check_report:
            cb(report)

    def _emit_phase(self, phase: TurnPhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

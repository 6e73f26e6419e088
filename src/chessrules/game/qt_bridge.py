"""Qt bridge relaying turn-controller events as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.check import CheckReport
from chessrules.core.types import Coord, InvalidCoordinateError
from chessrules.game.controller import TurnController
from chessrules.game.interfaces import Rejection, TurnPhase
from chessrules.game.state import MoveRecord


class TurnSignals(QObject):
    """Exposes a :class:`TurnController` to a Qt board view.

    The view maps a click to ``(file, rank)`` and calls :meth:`select_square`;
    highlighting, redraws and notation follow from the emitted signals.
    """

    destinations_ready = pyqtSignal(object)  # list[Coord]
    move_applied = pyqtSignal(object)  # MoveRecord
    check_reported = pyqtSignal(object)  # CheckReport
    phase_changed = pyqtSignal(int)  # TurnPhase
    selection_rejected = pyqtSignal(int)  # Rejection

    def __init__(self, controller: TurnController | None = None) -> None:
        super().__init__()
        self._controller = controller or TurnController()
        events = self._controller.events
        events.on_destinations.append(self._on_destinations)
        events.on_move.append(self._on_move)
        events.on_check_report.append(self._on_check_report)
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_rejected.append(self._on_rejected)

    @property
    def controller(self) -> TurnController:
        return self._controller

    @pyqtSlot(int, int, result=bool)
    def select_square(self, file: int, rank: int) -> bool:
        """Forward a clicked square; off-board input is rejected, not raised."""
        try:
            coord = Coord(file, rank)
        except InvalidCoordinateError:
            self.selection_rejected.emit(int(Rejection.INVALID_COORDINATE))
            return False
        return self._controller.select_square(coord)

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    # -- Controller callbacks -----------------------------------------------

    def _on_destinations(self, destinations: list[Coord]) -> None:
        self.destinations_ready.emit(destinations)

    def _on_move(self, record: MoveRecord) -> None:
        self.move_applied.emit(record)

    def _on_check_report(self, report: CheckReport) -> None:
        self.check_reported.emit(report)

    def _on_phase_changed(self, phase: TurnPhase) -> None:
        self.phase_changed.emit(int(phase))

    def _on_rejected(self, reason: Rejection) -> None:
        self.selection_rejected.emit(int(reason))

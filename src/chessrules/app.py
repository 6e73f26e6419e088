"""Console entry point: play by typing square names."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable

from chessrules.core.check import CheckReport
from chessrules.core.types import Coord, InvalidCoordinateError
from chessrules.game.controller import TurnController
from chessrules.game.interfaces import Rejection
from chessrules.game.state import MoveRecord

_LOGGER = logging.getLogger(__name__)

_REJECTION_TEXT: dict[Rejection, str] = {
    Rejection.NO_PIECE_AT_ORIGIN: "No piece on that square.",
    Rejection.WRONG_COLOR_SELECTION: "That piece belongs to the other player.",
    Rejection.NO_LEGAL_MOVES: "That piece has no moves.",
    Rejection.ILLEGAL_DESTINATION: "Not a valid destination; selection cleared.",
    Rejection.INVALID_COORDINATE: "Not a square.",
}


def run(
    lines: Iterable[str],
    write: Callable[[str], None],
    controller: TurnController | None = None,
) -> TurnController:
    """Feed square names from *lines* into a controller until ``quit``.

    Output callbacks are attached for the duration of the call only, so the
    same *controller* can be passed to several sessions.
    """
    ctrl = controller or TurnController()

    def on_destinations(destinations: list[Coord]) -> None:
        write("Destinations: " + " ".join(str(c) for c in sorted(destinations)))

    def on_move(record: MoveRecord) -> None:
        write(f"{record.ply}. {record.color} {record.long_algebraic}")
        write(repr(ctrl.board))

    def on_check_report(report: CheckReport) -> None:
        for status in (report.white, report.black):
            if status.in_check:
                attackers = ", ".join(str(a) for a in status.attackers)
                write(f"{status.color} king in check by {attackers}")

    def on_rejected(reason: Rejection) -> None:
        write(_REJECTION_TEXT[reason])

    hooks = (
        (ctrl.events.on_destinations, on_destinations),
        (ctrl.events.on_move, on_move),
        (ctrl.events.on_check_report, on_check_report),
        (ctrl.events.on_rejected, on_rejected),
    )
    for handlers, cb in hooks:
        handlers.append(cb)

    try:
        write(repr(ctrl.board))
        for line in lines:
            text = line.strip()
            if not text:
                continue
            if text.lower() in ("q", "quit", "exit"):
                break
            try:
                coord = Coord.parse(text)
            except InvalidCoordinateError:
                write(_REJECTION_TEXT[Rejection.INVALID_COORDINATE])
                continue
            ctrl.select_square(coord)
    finally:
        for handlers, cb in hooks:
            handlers.remove(cb)
    return ctrl


def main(argv: list[str] | None = None) -> int:
    """Launch the console game on stdin/stdout."""
    args = sys.argv[1:] if argv is None else argv
    level = logging.DEBUG if "-v" in args or "--verbose" in args else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    _LOGGER.debug("Starting console game")

    def write(text: str) -> None:
        print(text, flush=True)

    run(sys.stdin, write)
    return 0


if __name__ == "__main__":
    sys.exit(main())

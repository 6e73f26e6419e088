"""Game management layer: turn controller, turn state, settings.

Quick start::

    from chessrules.core import Coord
    from chessrules.game import TurnController

    ctrl = TurnController()
    ctrl.select_origin(Coord.parse("e2"))
    ctrl.select_destination(Coord.parse("e4"))

The Qt signal bridge lives in :mod:`chessrules.game.qt_bridge` and is not
imported here so the game layer stays usable without a Qt runtime.
"""

from chessrules.game.controller import TurnController, TurnEvents
from chessrules.game.interfaces import Rejection, TurnPhase
from chessrules.game.settings import GameSettings
from chessrules.game.state import MoveRecord, Selection, TurnState

__all__ = [
    # Enums
    "Rejection",
    "TurnPhase",
    # Concrete
    "GameSettings",
    "MoveRecord",
    "Selection",
    "TurnController",
    "TurnEvents",
    "TurnState",
]

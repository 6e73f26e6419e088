"""Turn state machine enums shared by the controller and its observers."""

from __future__ import annotations

from enum import IntEnum, auto


class TurnPhase(IntEnum):
    """Finite-state-machine states for turn input.

    The title screen that precedes a game belongs to the UI and has no
    counterpart here.
    """

    AWAITING_SELECTION = auto()
    DESTINATION_HIGHLIGHTED = auto()


class Rejection(IntEnum):
    """Why a selection was refused. ``NONE`` means nothing was rejected."""

    NONE = 0
    NO_PIECE_AT_ORIGIN = auto()
    WRONG_COLOR_SELECTION = auto()
    NO_LEGAL_MOVES = auto()
    ILLEGAL_DESTINATION = auto()
    INVALID_COORDINATE = auto()

"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.notation import STARTING_PLACEMENT


@dataclass
class GameSettings:
    """All configurable behaviour of a :class:`TurnController`."""

    # FEN placement field used by ``new_game`` when no board is supplied
    starting_placement: str = STARTING_PLACEMENT

    # Re-check that a destination is not held by the mover's own color
    verify_destination: bool = True

    # Log every threatened king after each move
    log_check_reports: bool = True

"""Board coordinates and direction offsets.

Files and ranks are both numbered 1-8::

    a1 = Coord(file=1, rank=1)
    h8 = Coord(file=8, rank=8)

Direction offsets are ``(rank_delta, file_delta)`` pairs, so ``NORTH`` moves
towards rank 8 (White's forward direction).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

BOARD_SIZE = 8


class InvalidCoordinateError(ValueError):
    """A file or rank outside 1-8 reached a coordinate constructor."""


def in_bounds(file: int, rank: int) -> bool:
    """Whether ``(file, rank)`` lies on the board."""
    return 1 <= file <= BOARD_SIZE and 1 <= rank <= BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Immutable board square. Always on the board."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if type(self.file) is not int or type(self.rank) is not int:
            raise InvalidCoordinateError(
                f"Coordinate components must be integers: "
                f"file={self.file!r}, rank={self.rank!r}"
            )
        if not in_bounds(self.file, self.rank):
            raise InvalidCoordinateError(
                f"Coordinate out of range: file={self.file!r}, rank={self.rank!r}"
            )

    @classmethod
    def parse(cls, name: str) -> Coord:
        """Parse a square name, e.g. ``'e4'`` -> ``Coord(5, 4)``."""
        text = name.strip().lower()
        if len(text) != 2 or text[0] not in FILE_NAMES or text[1] not in RANK_NAMES:
            raise InvalidCoordinateError(f"Invalid square name: {name!r}")
        return cls(FILE_NAMES.index(text[0]) + 1, RANK_NAMES.index(text[1]) + 1)

    def offset(self, rank_delta: int, file_delta: int) -> Coord | None:
        """Square shifted by the given deltas, or ``None`` if off the board."""
        file = self.file + file_delta
        rank = self.rank + rank_delta
        if not in_bounds(file, rank):
            return None
        return Coord(file, rank)

    @property
    def name(self) -> str:
        return FILE_NAMES[self.file - 1] + RANK_NAMES[self.rank - 1]

    def __str__(self) -> str:
        return self.name


def next_file(file_name: str) -> str:
    """File to the right, e.g. ``'a'`` -> ``'b'``."""
    if len(file_name) != 1 or file_name not in FILE_NAMES[:-1]:
        raise ValueError(f"No file after {file_name!r}")
    return FILE_NAMES[FILE_NAMES.index(file_name) + 1]


def previous_file(file_name: str) -> str:
    """File to the left, e.g. ``'b'`` -> ``'a'``."""
    if len(file_name) != 1 or file_name not in FILE_NAMES[1:]:
        raise ValueError(f"No file before {file_name!r}")
    return FILE_NAMES[FILE_NAMES.index(file_name) - 1]


# ── Direction offsets ───────────────────────────────────────────────────────

DirectionOffset: TypeAlias = tuple[int, int]  # (rank_delta, file_delta)

NORTH: DirectionOffset = (1, 0)
NORTH_EAST: DirectionOffset = (1, 1)
EAST: DirectionOffset = (0, 1)
SOUTH_EAST: DirectionOffset = (-1, 1)
SOUTH: DirectionOffset = (-1, 0)
SOUTH_WEST: DirectionOffset = (-1, -1)
WEST: DirectionOffset = (0, -1)
NORTH_WEST: DirectionOffset = (1, -1)

ROOK_DIRECTIONS: tuple[DirectionOffset, ...] = (NORTH, EAST, SOUTH, WEST)
BISHOP_DIRECTIONS: tuple[DirectionOffset, ...] = (
    NORTH_EAST,
    SOUTH_EAST,
    SOUTH_WEST,
    NORTH_WEST,
)
KING_OFFSETS: tuple[DirectionOffset, ...] = ROOK_DIRECTIONS + BISHOP_DIRECTIONS

KNIGHT_OFFSETS: tuple[DirectionOffset, ...] = (
    (2, -1),
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (1, -2),
    (-1, -2),
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coord(f, 1) for f in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coord(f, 2) for f in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coord(f, 3) for f in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coord(f, 4) for f in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coord(f, 5) for f in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coord(f, 6) for f in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coord(f, 7) for f in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coord(f, 8) for f in range(1, 9))

ALL_COORDS: tuple[Coord, ...] = tuple(
    Coord(f, r) for r in range(1, 9) for f in range(1, 9)
)

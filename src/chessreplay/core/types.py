"""Board coordinates and file/rank lookup tables.

Board layout: row 0 is rank 1 (White's back rank), col 0 is file a.
    a1=(0, 0), h1=(0, 7), a8=(7, 0), h8=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from chessreplay.core.errors import InvalidCoordinateError

BOARD_SIZE = 8

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

# Immutable symbol <-> index tables.
FILE_TO_COL = MappingProxyType({ch: idx for idx, ch in enumerate(FILE_NAMES)})
RANK_TO_ROW = MappingProxyType({ch: idx for idx, ch in enumerate(RANK_NAMES)})


@dataclass(frozen=True, slots=True)
class Coord:
    """Zero-based board coordinate. Not validated on construction."""

    row: int
    col: int

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Coord:
        return Coord(self.row + d_row, self.col + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Coord(3, 4)`` -> ``'e4'``."""
        return coord_name(self)

    def __str__(self) -> str:
        return self.name if self.in_bounds else f"({self.row}, {self.col})"


def coord_name(coord: Coord) -> str:
    if not coord.in_bounds:
        raise InvalidCoordinateError(f"Coordinate out of bounds: {coord.row}, {coord.col}")
    return FILE_NAMES[coord.col] + RANK_NAMES[coord.row]


def parse_coord(name: str) -> Coord:
    """Parse a square name, case-insensitively: ``'E4'`` -> ``Coord(3, 4)``."""
    if len(name) != 2:
        raise InvalidCoordinateError(
            f"Algebraic notation must be exactly 2 characters; got {name!r}"
        )
    file_ch = name[0].lower()
    rank_ch = name[1]
    if file_ch not in FILE_TO_COL or rank_ch not in RANK_TO_ROW:
        raise InvalidCoordinateError(f"Bad position: {name!r}")
    return Coord(RANK_TO_ROW[rank_ch], FILE_TO_COL[file_ch])

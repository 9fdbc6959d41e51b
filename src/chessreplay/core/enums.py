"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def label(self) -> str:
        """Player label used in game records: ``W`` or ``B``."""
        return "W" if self is Color.WHITE else "B"

    @property
    def home_row(self) -> int:
        """Back-rank row index of this side."""
        return 0 if self is Color.WHITE else 7

    @property
    def forward(self) -> int:
        """Row delta of a pawn advance."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Occupant kind of a square. ``EMPTY`` is a valid occupant."""

    EMPTY = 0
    KING = 1
    QUEEN = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    PAWN = 6


class CastleKind(IntEnum):
    """Castling side."""

    KINGSIDE = 1
    QUEENSIDE = 2


class GameResult(IntEnum):
    """Outcome of a game as declared by its record."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

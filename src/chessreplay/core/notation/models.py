"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from chessreplay.core.enums import CastleKind, Color, PieceKind
from chessreplay.core.types import Coord


@dataclass(frozen=True, slots=True)
class MoveToken:
    """A single unresolved ply as read from a game record."""

    player_label: str
    color: Color
    raw_text: str

    @classmethod
    def for_color(cls, color: Color, text: str) -> MoveToken:
        return cls(color.label, color, text)


@dataclass(frozen=True, slots=True)
class ParsedMove:
    """Decoded algebraic shorthand.

    Rank fields are row indexes and file fields column indexes; ``None``
    means the shorthand did not specify them.
    """

    text: str
    piece_kind: PieceKind
    color: Color
    departure_rank: int | None = None
    departure_file: int | None = None
    destination_rank: int | None = None
    destination_file: int | None = None
    is_check: bool = False
    is_capture: bool = False
    castle: CastleKind | None = None
    promotion: PieceKind | None = None
    is_en_passant: bool = False

    @property
    def destination(self) -> Coord | None:
        if self.destination_rank is None or self.destination_file is None:
            return None
        return Coord(self.destination_rank, self.destination_file)

    @property
    def is_castle(self) -> bool:
        return self.castle is not None

    def matches_departure(self, coord: Coord) -> bool:
        if self.departure_file is not None and coord.col != self.departure_file:
            return False
        if self.departure_rank is not None and coord.row != self.departure_rank:
            return False
        return True

    def matches_destination(self, coord: Coord) -> bool:
        if self.destination_file is not None and coord.col != self.destination_file:
            return False
        if self.destination_rank is not None and coord.row != self.destination_rank:
            return False
        return True


@dataclass(slots=True)
class ParsedPgn:
    """One game's tag pairs and unresolved mainline plies."""

    tags: dict[str, str]
    moves: list[MoveToken]
    result_token: str

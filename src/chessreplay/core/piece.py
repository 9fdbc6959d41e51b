"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessreplay.core.enums import Color, PieceKind

# FEN character <-> (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable occupant of one square.

    ``en_passant_eligible`` is set only on a pawn that has just advanced two
    rows; the board clears it on the mover's next move.
    """

    kind: PieceKind
    color: Color = Color.WHITE
    en_passant_eligible: bool = False

    @property
    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    def with_en_passant(self, eligible: bool) -> Piece:
        if self.en_passant_eligible == eligible:
            return self
        return replace(self, en_passant_eligible=eligible)

    def promoted(self, kind: PieceKind) -> Piece:
        return Piece(kind, self.color)

    # -- Serialisation ------------------------------------------------------

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '.' = empty)."""
        if self.is_empty:
            return "."
        return _FEN_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' -> white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color)


EMPTY = Piece(PieceKind.EMPTY)

"""Pseudo-legal move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessreplay.core.types import Coord


@dataclass(frozen=True, slots=True)
class ValidMove:
    """A move obeying a piece's movement pattern, not yet checked for
    own-king safety."""

    from_: Coord
    to: Coord
    is_capture: bool = False
    is_en_passant: bool = False
    gives_check: bool = False

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.from_}{sep}{self.to}"

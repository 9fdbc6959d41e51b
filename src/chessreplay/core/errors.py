"""Exception taxonomy shared by the board, notation and replay layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from chessreplay.core.enums import Color
    from chessreplay.core.types import Coord


class ChessReplayError(ValueError):
    """Base class for every error raised by this package."""


class InvalidCoordinateError(ChessReplayError):
    """A two-character square name could not be decoded."""


class FenError(ChessReplayError):
    """A FEN placement string is malformed."""


# -- Board mutation ---------------------------------------------------------


class BoardError(ChessReplayError):
    """Low-level board mutation failed; indicates an upstream logic error."""


class OutOfBoundsError(BoardError):
    def __init__(self, coord: Coord) -> None:
        super().__init__(f"Coordinate out of bounds: ({coord.row}, {coord.col})")
        self.coord = coord


class EmptySquareError(BoardError):
    def __init__(self, coord: Coord) -> None:
        super().__init__(f"No piece to move at ({coord.row}, {coord.col})")
        self.coord = coord


# -- Notation ---------------------------------------------------------------


class UnparseableMovetextError(ChessReplayError):
    """A movetext token matches none of the recognised shorthand forms."""

    def __init__(self, token: str, reason: str = "") -> None:
        message = f"Unparseable movetext: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.token = token


class PgnSyntaxError(ChessReplayError):
    """Lexical or structural error in game-record text.

    ``games`` holds what was fully parsed before the failure: ``ParsedPgn``
    records from :func:`~chessreplay.core.notation.pgn.parse_pgn`, ``Game``
    objects from :func:`~chessreplay.game.loader.parse_games`.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Parse error - line {line}, char {column}: {message}")
        self.line = line
        self.column = column
        self.games: list[Any] = []


# -- Replay -----------------------------------------------------------------


class IllegalMoveError(ChessReplayError):
    """No piece on the board satisfies a decoded move (ambiguous or illegal)."""

    def __init__(self, ply: int, text: str, color: Color, reason: str = "") -> None:
        message = f"Illegal or ambiguous move {text!r} at ply {ply} ({color} to move)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.ply = ply
        self.text = text
        self.color = color

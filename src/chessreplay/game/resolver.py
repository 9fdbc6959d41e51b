"""Piece locator: resolves decoded shorthand against the current board."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from chessreplay.core.board import Board
from chessreplay.core.enums import CastleKind, PieceKind
from chessreplay.core.errors import IllegalMoveError
from chessreplay.core.move import ValidMove
from chessreplay.core.move_generator import MoveGenerator
from chessreplay.core.notation.models import ParsedMove
from chessreplay.core.notation.san import piece_letter
from chessreplay.core.piece import EMPTY, Piece
from chessreplay.core.rules import Rules
from chessreplay.core.types import Coord
from chessreplay.game.options import ReplayOptions

_LOGGER = logging.getLogger(__name__)

# castle kind -> (king to col, rook from col, rook to col)
_CASTLE_COLUMNS: dict[CastleKind, tuple[int, int, int]] = {
    CastleKind.KINGSIDE: (6, 7, 5),
    CastleKind.QUEENSIDE: (2, 0, 3),
}
_KING_HOME_COL = 4


@dataclass(frozen=True, slots=True)
class ResolvedMove:
    """A recorded ply bound to concrete board squares."""

    ply: int
    parsed: ParsedMove
    from_: Coord
    to: Coord
    captured: Piece = EMPTY
    is_en_passant: bool = False
    promotion: PieceKind | None = None
    gives_check: bool = False
    rook_from: Coord | None = None
    rook_to: Coord | None = None

    @property
    def is_castle(self) -> bool:
        return self.rook_from is not None

    @property
    def is_capture(self) -> bool:
        return not self.captured.is_empty

    @property
    def captured_square(self) -> Coord:
        if self.is_en_passant:
            return Coord(self.from_.row, self.to.col)
        return self.to

    def __str__(self) -> str:
        """Long algebraic form, e.g. ``Ng1-f3`` or ``e5xd6``."""
        if self.is_castle:
            return self.parsed.text.rstrip("+#!?")
        sep = "x" if self.is_capture else "-"
        text = f"{piece_letter(self.parsed.piece_kind)}{self.from_}{sep}{self.to}"
        if self.promotion is not None:
            text += "=" + piece_letter(self.promotion)
        return text


class MoveResolver:
    """Finds the piece a :class:`ParsedMove` refers to on *board*."""

    __slots__ = ("_board", "_options")

    def __init__(self, board: Board, options: ReplayOptions | None = None) -> None:
        self._board = board
        self._options = options or ReplayOptions()

    def resolve(self, parsed: ParsedMove, *, ply: int = 0) -> ResolvedMove:
        """Bind *parsed* to the first surviving candidate.

        Raises :class:`IllegalMoveError` when no piece qualifies.
        """
        if parsed.castle is not None:
            return self._resolve_castle(parsed, ply)

        for move in self.candidates(parsed):
            return self._bind(parsed, move, ply)
        raise IllegalMoveError(
            ply, parsed.text, parsed.color, "no piece can make this move"
        )

    def candidates(self, parsed: ParsedMove) -> Iterator[ValidMove]:
        """Pseudo-legal moves matching *parsed* that keep the mover's king safe."""
        board = self._board
        options = self._options
        gen = MoveGenerator(board)
        last_row = parsed.color.opposite.home_row

        for coord in board.pieces(parsed.color, parsed.piece_kind):
            if not parsed.matches_departure(coord):
                continue
            for move in gen.moves_from(coord):
                if not parsed.matches_destination(move.to):
                    continue
                if parsed.promotion is not None and move.to.row != last_row:
                    continue
                if options.strict_captures and move.is_capture != parsed.is_capture:
                    continue
                if options.check_king_safety and Rules.leaves_king_in_check(
                    board, move
                ):
                    _LOGGER.debug(
                        "Rejected %s for %r: leaves king in check", move, parsed.text
                    )
                    continue
                yield move

    # -- Binding ------------------------------------------------------------

    def _bind(self, parsed: ParsedMove, move: ValidMove, ply: int) -> ResolvedMove:
        board = self._board
        if move.is_en_passant:
            captured = board[Coord(move.from_.row, move.to.col)]
        else:
            captured = board[move.to]
        return ResolvedMove(
            ply=ply,
            parsed=parsed,
            from_=move.from_,
            to=move.to,
            captured=captured,
            is_en_passant=move.is_en_passant,
            promotion=parsed.promotion,
            gives_check=move.gives_check,
        )

    def _resolve_castle(self, parsed: ParsedMove, ply: int) -> ResolvedMove:
        assert parsed.castle is not None
        board = self._board
        color = parsed.color
        row = color.home_row
        king_to_col, rook_from_col, rook_to_col = _CASTLE_COLUMNS[parsed.castle]

        king_from = Coord(row, _KING_HOME_COL)
        rook_from = Coord(row, rook_from_col)
        king_home = board[king_from] == Piece(PieceKind.KING, color)
        rook_home = board[rook_from] == Piece(PieceKind.ROOK, color)
        if not (king_home and rook_home):
            raise IllegalMoveError(
                ply, parsed.text, color, "king and rook are not on their home squares"
            )

        return ResolvedMove(
            ply=ply,
            parsed=parsed,
            from_=king_from,
            to=Coord(row, king_to_col),
            rook_from=rook_from,
            rook_to=Coord(row, rook_to_col),
        )

"""Check detection over pseudo-legal opponent moves."""

from __future__ import annotations

from chessreplay.core.board import Board
from chessreplay.core.enums import Color
from chessreplay.core.move import ValidMove
from chessreplay.core.move_generator import MoveGenerator
from chessreplay.core.piece import EMPTY
from chessreplay.core.types import Coord


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def checkers(board: Board, color: Color) -> list[Coord]:
        """Squares of every opposing piece attacking *color*'s king.

        A board without a *color* king has no checkers.
        """
        king_sq = board.find_king(color)
        if king_sq is None:
            return []
        gen = MoveGenerator(board)
        return [
            coord
            for coord in board.pieces(color.opposite)
            if gen.attacks(coord, king_sq)
        ]

    @staticmethod
    def count_checkers(board: Board, color: Color) -> int:
        return len(Rules.checkers(board, color))

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = board.find_king(color)
        if king_sq is None:
            return False
        gen = MoveGenerator(board)
        return any(
            gen.attacks(coord, king_sq) for coord in board.pieces(color.opposite)
        )

    @staticmethod
    def apply_to_copy(board: Board, move: ValidMove) -> Board:
        """Return a scratch copy of *board* with *move* played on it.

        An en passant capture also removes the pawn it passed.
        """
        scratch = board.copy()
        scratch.move_piece(move.from_, move.to)
        if move.is_en_passant:
            scratch[Coord(move.from_.row, move.to.col)] = EMPTY
        return scratch

    @staticmethod
    def leaves_king_in_check(board: Board, move: ValidMove) -> bool:
        """Would playing *move* leave the mover's own king attacked?"""
        mover = board[move.from_]
        scratch = Rules.apply_to_copy(board, move)
        return Rules.is_in_check(scratch, mover.color)


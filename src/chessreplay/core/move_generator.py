"""Pseudo-legal move generation for a single piece."""

from __future__ import annotations

from dataclasses import replace

from chessreplay.core.board import Board
from chessreplay.core.enums import Color, PieceKind
from chessreplay.core.errors import EmptySquareError
from chessreplay.core.move import ValidMove
from chessreplay.core.piece import EMPTY, Piece
from chessreplay.core.types import Coord

# Offsets and directions are (d_row, d_col).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (2, -1),
    (2, 1),
    (-1, -2),
    (1, -2),
    (-1, 2),
    (1, 2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDING_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}
_FIXED_OFFSETS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.KNIGHT: KNIGHT_OFFSETS,
    PieceKind.KING: KING_OFFSETS,
}
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


class MoveGenerator:
    """Generates pseudo-legal moves against a :class:`Board`.

    Moves are not checked for own-king safety; see
    :meth:`chessreplay.core.rules.Rules.leaves_king_in_check`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def moves_from(self, coord: Coord, *, lookahead: bool = True) -> list[ValidMove]:
        """Pseudo-legal moves of the piece on *coord*.

        With *lookahead*, each move is tagged ``gives_check`` when the moved
        piece alone could capture the enemy king from its destination.
        """
        piece = self._board[coord]
        if piece.is_empty:
            raise EmptySquareError(coord)

        moves: list[ValidMove] = []
        kind = piece.kind
        if kind == PieceKind.PAWN:
            self._gen_pawn(coord, piece.color, moves)
        elif kind in _SLIDING_DIRS:
            self._gen_sliding(coord, piece.color, _SLIDING_DIRS[kind], moves)
        else:
            self._gen_fixed(coord, piece.color, _FIXED_OFFSETS[kind], moves)

        if lookahead:
            return [self._tag_check(piece, move) for move in moves]
        return moves

    def all_moves(self, color: Color, *, lookahead: bool = False) -> list[ValidMove]:
        """All pseudo-legal moves of *color*'s pieces."""
        moves: list[ValidMove] = []
        for coord in self._board.pieces(color):
            moves.extend(self.moves_from(coord, lookahead=lookahead))
        return moves

    def attacks(self, coord: Coord, target: Coord) -> bool:
        """Whether the piece on *coord* has a pseudo-legal move onto *target*."""
        return any(m.to == target for m in self.moves_from(coord, lookahead=False))

    # -- Piece-specific generators (private) -------------------------------

    def _probe(self, color: Color, to: Coord) -> tuple[bool, bool]:
        """``(valid, capture)`` for a *color* piece landing on *to*."""
        if not to.in_bounds:
            return False, False
        target = self._board[to]
        if target.is_empty:
            return True, False
        if target.color != color:
            return True, True
        return False, False

    def _gen_sliding(
        self,
        sq: Coord,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[ValidMove],
    ) -> None:
        for d_row, d_col in directions:
            to = sq.offset(d_row, d_col)
            while True:
                valid, capture = self._probe(color, to)
                if not valid:
                    break
                moves.append(ValidMove(sq, to, is_capture=capture))
                if capture:
                    break
                to = to.offset(d_row, d_col)

    def _gen_fixed(
        self,
        sq: Coord,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[ValidMove],
    ) -> None:
        for d_row, d_col in offsets:
            to = sq.offset(d_row, d_col)
            valid, capture = self._probe(color, to)
            if valid:
                moves.append(ValidMove(sq, to, is_capture=capture))

    def _gen_pawn(self, sq: Coord, color: Color, moves: list[ValidMove]) -> None:
        board = self._board
        step = color.forward

        one_step = sq.offset(step, 0)
        if one_step.in_bounds and board.is_empty(one_step):
            moves.append(ValidMove(sq, one_step))
            if sq.row == _PAWN_HOME_ROW[color]:
                two_step = sq.offset(2 * step, 0)
                if board.is_empty(two_step):
                    moves.append(ValidMove(sq, two_step))

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not cap_sq.in_bounds:
                continue
            target = board[cap_sq]
            if not target.is_empty:
                if target.color != color:
                    moves.append(ValidMove(sq, cap_sq, is_capture=True))
                continue

            # En passant: the enemy pawn sits beside us, not on cap_sq.
            beside = board[sq.offset(0, d_col)]
            if (
                beside.kind == PieceKind.PAWN
                and beside.color != color
                and beside.en_passant_eligible
            ):
                moves.append(
                    ValidMove(sq, cap_sq, is_capture=True, is_en_passant=True)
                )

    # -- Check lookahead ----------------------------------------------------

    def _tag_check(self, piece: Piece, move: ValidMove) -> ValidMove:
        # Only the moved piece is relocated and only its own replies are
        # generated, so this never recurses past one step.
        scratch = self._board.copy()
        scratch[move.from_] = EMPTY
        scratch[move.to] = piece
        replies = MoveGenerator(scratch).moves_from(move.to, lookahead=False)
        for reply in replies:
            target = scratch[reply.to]
            if target.kind == PieceKind.KING and target.color != piece.color:
                return replace(move, gives_check=True)
        return move


def possible_moves(board: Board, coord: Coord) -> list[ValidMove]:
    """Pseudo-legal moves of the piece on *coord*, tagged with ``gives_check``."""
    return MoveGenerator(board).moves_from(coord)

"""FEN piece-placement import and export."""

from __future__ import annotations

from chessreplay.core.board import Board
from chessreplay.core.enums import PieceKind
from chessreplay.core.errors import FenError, InvalidCoordinateError
from chessreplay.core.piece import Piece
from chessreplay.core.types import BOARD_SIZE, Coord, parse_coord

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def board_from_fen(fen: str) -> Board:
    """Build a :class:`Board` from a FEN string.

    Only the placement field is required. When the en-passant field names a
    target square, the pawn that just double-stepped past it is marked
    ``en_passant_eligible``. Side to move, castling and clocks are ignored.
    """
    parts = fen.split()
    if not parts:
        raise FenError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[Coord(row, col)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"Invalid FEN piece {ch!r}: {fen!r}") from exc
                col += 1
            if col > BOARD_SIZE:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise FenError(f"Invalid FEN rank width: {fen!r}")

    if len(parts) >= 4 and parts[3] != "-":
        _mark_en_passant(board, parts[3], fen)

    return board


def _mark_en_passant(board: Board, field: str, fen: str) -> None:
    try:
        target = parse_coord(field)
    except InvalidCoordinateError as exc:
        raise FenError(f"Invalid FEN en-passant square: {field!r}") from exc

    # Target on row 2 means White just pushed; row 5 means Black did.
    if target.row == 2:
        pawn_sq = Coord(3, target.col)
    elif target.row == 5:
        pawn_sq = Coord(4, target.col)
    else:
        raise FenError(f"Invalid FEN en-passant square: {field!r}")

    pawn = board[pawn_sq]
    if pawn.kind != PieceKind.PAWN:
        raise FenError(f"No pawn beyond en-passant square {field!r}: {fen!r}")
    board[pawn_sq] = pawn.with_en_passant(True)


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement of *board* (first FEN field only)."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[Coord(row, col)]
            if piece.is_empty:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)

"""Tests for Board."""

import pytest

from chessreplay.core.board import Board
from chessreplay.core.enums import Color, PieceKind
from chessreplay.core.errors import EmptySquareError, OutOfBoundsError
from chessreplay.core.piece import EMPTY, Piece
from chessreplay.core.types import Coord, parse_coord


class TestBoardSetup:
    def test_white_king_position(self, start_board: Board) -> None:
        assert start_board[parse_coord("e1")] == Piece(PieceKind.KING, Color.WHITE)

    def test_black_king_position(self, start_board: Board) -> None:
        assert start_board[parse_coord("e8")] == Piece(PieceKind.KING, Color.BLACK)

    def test_back_ranks(self, start_board: Board) -> None:
        expected = [
            PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
            PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
        ]
        for col, kind in enumerate(expected):
            assert start_board[Coord(0, col)] == Piece(kind, Color.WHITE)
            assert start_board[Coord(7, col)] == Piece(kind, Color.BLACK)

    def test_pawn_rows(self, start_board: Board) -> None:
        assert all(c.row == 1 for c in start_board.pieces(Color.WHITE, PieceKind.PAWN))
        assert all(c.row == 6 for c in start_board.pieces(Color.BLACK, PieceKind.PAWN))

    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_piece_counts(self, start_board: Board, color: Color) -> None:
        assert start_board.count(color, PieceKind.PAWN) == 8
        assert start_board.count(color, PieceKind.ROOK) == 2
        assert start_board.count(color, PieceKind.KNIGHT) == 2
        assert start_board.count(color, PieceKind.BISHOP) == 2
        assert start_board.count(color, PieceKind.QUEEN) == 1
        assert start_board.count(color, PieceKind.KING) == 1
        assert len(start_board.pieces(color)) == 16

    def test_empty_middle(self, start_board: Board) -> None:
        for row in range(2, 6):
            for col in range(8):
                assert start_board.is_empty(Coord(row, col))

    def test_setup_is_idempotent(self) -> None:
        board = Board()
        board.setup()
        board.move_piece(parse_coord("e2"), parse_coord("e4"))
        board.setup()
        board.setup()
        assert board == Board.initial()


class TestMovePiece:
    def test_relocates_piece(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("g1"), parse_coord("f3"))
        assert start_board[parse_coord("f3")] == Piece(PieceKind.KNIGHT, Color.WHITE)
        assert start_board[parse_coord("g1")] == EMPTY

    def test_capture_overwrites_occupant(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("d1"), parse_coord("d7"))
        assert start_board[parse_coord("d7")] == Piece(PieceKind.QUEEN, Color.WHITE)
        assert start_board.count(Color.BLACK, PieceKind.PAWN) == 7

    def test_out_of_bounds_raises(self, start_board: Board) -> None:
        with pytest.raises(OutOfBoundsError):
            start_board.move_piece(parse_coord("a1"), Coord(8, 0))
        with pytest.raises(OutOfBoundsError):
            start_board.move_piece(Coord(-1, 3), parse_coord("a3"))

    def test_empty_source_raises(self, start_board: Board) -> None:
        with pytest.raises(EmptySquareError, match="No piece to move"):
            start_board.move_piece(parse_coord("e4"), parse_coord("e5"))

    def test_board_errors_are_value_errors(self, start_board: Board) -> None:
        with pytest.raises(ValueError):
            start_board.move_piece(parse_coord("e4"), parse_coord("e5"))


class TestEnPassantFlag:
    def test_double_step_sets_flag(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("e2"), parse_coord("e4"))
        assert start_board[parse_coord("e4")].en_passant_eligible

    def test_single_step_does_not_set_flag(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("e2"), parse_coord("e3"))
        assert not start_board[parse_coord("e3")].en_passant_eligible

    def test_opponent_move_keeps_flag(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("e2"), parse_coord("e4"))
        start_board.move_piece(parse_coord("d7"), parse_coord("d5"))
        assert start_board[parse_coord("e4")].en_passant_eligible
        assert start_board[parse_coord("d5")].en_passant_eligible

    def test_own_next_move_clears_flag(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("e2"), parse_coord("e4"))
        start_board.move_piece(parse_coord("d7"), parse_coord("d5"))
        start_board.move_piece(parse_coord("g1"), parse_coord("f3"))
        assert not start_board[parse_coord("e4")].en_passant_eligible
        assert start_board[parse_coord("d5")].en_passant_eligible

    def test_at_most_one_flag_per_color(self, start_board: Board) -> None:
        start_board.move_piece(parse_coord("e2"), parse_coord("e4"))
        start_board.move_piece(parse_coord("a7"), parse_coord("a6"))
        start_board.move_piece(parse_coord("d2"), parse_coord("d4"))
        flagged = [
            c for c, p in start_board.occupied()
            if p.color == Color.WHITE and p.en_passant_eligible
        ]
        assert flagged == [parse_coord("d4")]


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(PieceKind.PAWN, Color.WHITE)
        board[parse_coord("e4")] = piece
        assert board[parse_coord("e4")] == piece
        assert board.is_empty(parse_coord("e2"))

    def test_copy_independence(self, start_board: Board) -> None:
        copy = start_board.copy()
        assert start_board == copy
        copy[parse_coord("e1")] = EMPTY
        assert start_board != copy
        assert start_board[parse_coord("e1")] == Piece(PieceKind.KING, Color.WHITE)

    def test_king_square(self, start_board: Board) -> None:
        assert start_board.king_square(Color.WHITE) == parse_coord("e1")
        assert start_board.king_square(Color.BLACK) == parse_coord("e8")

    def test_king_square_missing_raises(self) -> None:
        with pytest.raises(ValueError, match="No WHITE king"):
            Board().king_square(Color.WHITE)

    def test_clear(self, start_board: Board) -> None:
        start_board.clear()
        assert list(start_board.occupied()) == []

    def test_repr_not_empty(self, start_board: Board) -> None:
        text = repr(start_board)
        assert "K" in text
        assert "a b c d e f g h" in text

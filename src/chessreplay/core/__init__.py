"""Core domain layer - board, move generation, check detection and notation.

Quick start::

    from chessreplay.core import Board, MoveGenerator, parse_coord

    board = Board.initial()
    for move in MoveGenerator(board).moves_from(parse_coord("g1")):
        print(move)
"""

from chessreplay.core.board import Board
from chessreplay.core.enums import CastleKind, Color, GameResult, PieceKind
from chessreplay.core.errors import (
    BoardError,
    ChessReplayError,
    EmptySquareError,
    FenError,
    IllegalMoveError,
    InvalidCoordinateError,
    OutOfBoundsError,
    PgnSyntaxError,
    UnparseableMovetextError,
)
from chessreplay.core.move import ValidMove
from chessreplay.core.move_generator import MoveGenerator, possible_moves
from chessreplay.core.notation import (
    STARTING_FEN,
    MoveToken,
    ParsedMove,
    ParsedPgn,
    board_from_fen,
    board_to_fen,
    parse_pgn,
    parse_san,
)
from chessreplay.core.piece import EMPTY, Piece
from chessreplay.core.rules import Rules
from chessreplay.core.types import Coord, coord_name, parse_coord

__all__ = [
    # Enums
    "CastleKind",
    "Color",
    "GameResult",
    "PieceKind",
    # Types / helpers
    "Coord",
    "coord_name",
    "parse_coord",
    # Domain objects
    "EMPTY",
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    "ValidMove",
    "possible_moves",
    # Errors
    "BoardError",
    "ChessReplayError",
    "EmptySquareError",
    "FenError",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "OutOfBoundsError",
    "PgnSyntaxError",
    "UnparseableMovetextError",
    # Notation
    "STARTING_FEN",
    "MoveToken",
    "ParsedMove",
    "ParsedPgn",
    "board_from_fen",
    "board_to_fen",
    "parse_pgn",
    "parse_san",
]

"""Notation package: SAN decoding, PGN parsing, FEN placement."""

from chessreplay.core.notation.fen import STARTING_FEN, board_from_fen, board_to_fen
from chessreplay.core.notation.models import MoveToken, ParsedMove, ParsedPgn
from chessreplay.core.notation.pgn import (
    RESULT_TOKENS,
    PgnParser,
    game_result_from_pgn,
    parse_pgn,
    pgn_result_token,
)
from chessreplay.core.notation.san import parse_san, piece_letter

__all__ = [
    "STARTING_FEN",
    "RESULT_TOKENS",
    "MoveToken",
    "ParsedMove",
    "ParsedPgn",
    "PgnParser",
    "board_from_fen",
    "board_to_fen",
    "game_result_from_pgn",
    "parse_pgn",
    "parse_san",
    "piece_letter",
    "pgn_result_token",
]

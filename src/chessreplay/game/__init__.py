"""Game replay layer - resolves recorded plies and applies them to a board.

Quick start::

    from chessreplay.game import parse_games

    for game in parse_games(pgn_text):
        game.execute()
        print(game.board)
"""

from chessreplay.game.game import Game
from chessreplay.game.loader import iter_games, parse_games, read_games
from chessreplay.game.options import ReplayOptions
from chessreplay.game.resolver import MoveResolver, ResolvedMove

__all__ = [
    "Game",
    "MoveResolver",
    "ReplayOptions",
    "ResolvedMove",
    "iter_games",
    "parse_games",
    "read_games",
]

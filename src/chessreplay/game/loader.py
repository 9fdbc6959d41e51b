"""Build replayable games from PGN text or a PGN file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from chessreplay.core.errors import PgnSyntaxError
from chessreplay.core.notation.pgn import PgnParser
from chessreplay.game.game import Game
from chessreplay.game.options import ReplayOptions


def iter_games(text: str, options: ReplayOptions | None = None) -> Iterator[Game]:
    """Yield games one by one; a syntax error stops iteration at that game."""
    for parsed in PgnParser(text):
        yield Game.from_pgn(parsed, options)


def parse_games(text: str, options: ReplayOptions | None = None) -> list[Game]:
    """Parse every game in *text*.

    On a syntax error the games parsed before it are attached to the raised
    :class:`PgnSyntaxError` as ``games``.
    """
    games: list[Game] = []
    try:
        for game in iter_games(text, options):
            games.append(game)
    except PgnSyntaxError as exc:
        exc.games = games
        raise
    return games


def read_games(file_path: Path | str, options: ReplayOptions | None = None) -> list[Game]:
    """Parse every game in a single PGN file."""
    pgn_text = Path(file_path).read_text(encoding="utf-8-sig")
    return parse_games(pgn_text, options)

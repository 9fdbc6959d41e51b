"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessreplay.core.board import Board
from chessreplay.core.enums import Color
from chessreplay.core.notation import MoveToken, board_from_fen
from chessreplay.game import Game, ReplayOptions

GameFactory = Callable[..., Game]


def tokens(*sans: str) -> list[MoveToken]:
    """Alternate White/Black move tokens starting with White."""
    return [
        MoveToken.for_color(Color.WHITE if idx % 2 == 0 else Color.BLACK, san)
        for idx, san in enumerate(sans)
    ]


@pytest.fixture
def start_board() -> Board:
    return Board.initial()


@pytest.fixture
def make_game() -> GameFactory:
    """Build an unplayed game from SAN tokens, optionally on a FEN position."""

    def _make(
        *sans: str,
        fen: str | None = None,
        options: ReplayOptions | None = None,
    ) -> Game:
        board = board_from_fen(fen) if fen is not None else Board.initial()
        return Game(
            moves=tokens(*sans),
            board=board,
            options=options or ReplayOptions(),
        )

    return _make

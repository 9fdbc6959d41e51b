"""Game replay - a turn-by-turn state machine over recorded plies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessreplay.core.board import Board
from chessreplay.core.enums import Color, GameResult
from chessreplay.core.notation.models import MoveToken, ParsedPgn
from chessreplay.core.notation.pgn import RESULT_TOKENS, game_result_from_pgn
from chessreplay.core.notation.san import parse_san
from chessreplay.core.piece import EMPTY
from chessreplay.core.rules import Rules
from chessreplay.game.options import ReplayOptions
from chessreplay.game.resolver import MoveResolver, ResolvedMove

_LOGGER = logging.getLogger(__name__)


@dataclass
class Game:
    """Tags, unresolved plies and the board they are replayed on.

    ``cursor`` counts the plies already applied to ``board``; it only ever
    increases. A failing ply leaves the cursor on it and the board as it was
    after the previous ply.
    """

    tags: dict[str, str] = field(default_factory=dict)
    moves: list[MoveToken] = field(default_factory=list)
    board: Board = field(default_factory=Board.initial)
    result_token: str = "*"
    options: ReplayOptions = field(default_factory=ReplayOptions)
    cursor: int = field(default=0, init=False)
    history: list[ResolvedMove] = field(default_factory=list, init=False)

    @classmethod
    def from_pgn(cls, parsed: ParsedPgn, options: ReplayOptions | None = None) -> Game:
        """New game at the starting position, nothing replayed yet."""
        return cls(
            tags=dict(parsed.tags),
            moves=list(parsed.moves),
            result_token=parsed.result_token,
            options=options or ReplayOptions(),
        )

    # -- Properties ---------------------------------------------------------

    @property
    def remaining(self) -> int:
        return len(self.moves) - self.cursor

    @property
    def is_finished(self) -> bool:
        return self.cursor >= len(self.moves)

    @property
    def side_to_move(self) -> Color:
        if not self.is_finished:
            return self.moves[self.cursor].color
        return Color.WHITE if self.cursor % 2 == 0 else Color.BLACK

    @property
    def result(self) -> GameResult:
        """Declared result: the movetext result, else the ``Result`` tag."""
        if self.result_token != "*":
            return game_result_from_pgn(self.result_token)
        tag = self.tags.get("Result", "*")
        if tag not in RESULT_TOKENS:
            return GameResult.IN_PROGRESS
        return game_result_from_pgn(tag)

    # -- Replay -------------------------------------------------------------

    def execute(self, n: int = -1) -> int:
        """Apply up to *n* plies, or every remaining ply if *n* is negative.

        Returns the number of plies applied. The first ply that cannot be
        decoded or resolved raises; earlier plies stay applied.
        """
        applied = 0
        while not self.is_finished and (n < 0 or applied < n):
            self.step()
            applied += 1
        return applied

    def step(self) -> ResolvedMove | None:
        """Apply the next ply; ``None`` once every ply has been applied."""
        if self.is_finished:
            return None

        ply = self.cursor
        token = self.moves[ply]
        parsed = parse_san(token.raw_text, token.color)
        resolved = MoveResolver(self.board, self.options).resolve(parsed, ply=ply)
        self._apply(resolved)

        self.history.append(resolved)
        self.cursor += 1

        if self.options.verify_check_markers:
            self._verify_check_marker(resolved)
        return resolved

    def _apply(self, resolved: ResolvedMove) -> None:
        board = self.board
        board.move_piece(resolved.from_, resolved.to)

        if resolved.rook_from is not None and resolved.rook_to is not None:
            board.move_piece(resolved.rook_from, resolved.rook_to)
            _LOGGER.debug(
                "Ply %d %s: castled %s -> %s",
                resolved.ply,
                resolved.parsed.text,
                resolved.from_,
                resolved.to,
            )
            return

        if resolved.promotion is not None:
            board[resolved.to] = board[resolved.to].promoted(resolved.promotion)
            _LOGGER.debug("Ply %d: promoted to %s", resolved.ply, resolved.promotion.name)

        if resolved.is_en_passant:
            board[resolved.captured_square] = EMPTY
            _LOGGER.debug(
                "Ply %d: en passant removed pawn on %s",
                resolved.ply,
                resolved.captured_square,
            )

        _LOGGER.debug(
            "Ply %d %s: %s -> %s",
            resolved.ply,
            resolved.parsed.text,
            resolved.from_,
            resolved.to,
        )

    def _verify_check_marker(self, resolved: ResolvedMove) -> None:
        mover = resolved.parsed.color
        in_check = Rules.is_in_check(self.board, mover.opposite)
        if in_check != resolved.parsed.is_check:
            _LOGGER.warning(
                "Ply %d %r: check marker %s but %s king is %sin check",
                resolved.ply,
                resolved.parsed.text,
                "present" if resolved.parsed.is_check else "absent",
                mover.opposite,
                "" if in_check else "not ",
            )

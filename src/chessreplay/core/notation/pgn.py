"""PGN game-record parsing.

A hand-written recursive-descent parser over a character scanner. One
:class:`PgnParser` consumes a whole file, one game per :meth:`parse_game`
call, so that line and column numbers stay accurate across games.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from chessreplay.core.enums import Color, GameResult
from chessreplay.core.errors import PgnSyntaxError
from chessreplay.core.notation.models import MoveToken, ParsedPgn

_LOGGER = logging.getLogger(__name__)

RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})

_OPEN_TAG = "["
_CLOSE_TAG = "]"
_QUOTES = "\"'"
_TOKEN_DELIMITERS = "{}();[$"
_MOVE_NUMBER_RE = re.compile(r"^(\d+)(\.+)(.*)$")


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def game_result_from_pgn(token: str) -> GameResult:
    """Convert PGN result token to :class:`GameResult`."""
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token == "1/2-1/2":
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


class _Scanner:
    """Character cursor with 1-based line/column tracking."""

    __slots__ = ("_text", "_pos", "line", "column")

    def __init__(self, text: str) -> None:
        # A leading byte-order mark is not part of the first line.
        self._text = text.removeprefix("\ufeff")
        self._pos = 0
        self.line = 1
        self.column = 0  # column of the last consumed character

    def peek(self) -> str:
        """Next character, or ``""`` at end of input."""
        if self._pos >= len(self._text):
            return ""
        return self._text[self._pos]

    def advance(self) -> str:
        ch = self.peek()
        if not ch:
            return ch
        self._pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def skip_line(self) -> None:
        while True:
            ch = self.advance()
            if not ch or ch == "\n":
                return


class PgnParser:
    """Parses zero or more games from PGN text."""

    __slots__ = ("_scanner", "_pending")

    def __init__(self, text: str) -> None:
        self._scanner = _Scanner(text)
        # Single-token pushback: the part of a fused token such as "2.Nf3"
        # left over after its turn number was consumed.
        self._pending: str | None = None

    def __iter__(self) -> Iterator[ParsedPgn]:
        while True:
            game = self.parse_game()
            if game is None:
                return
            yield game

    # -- Games --------------------------------------------------------------

    def parse_game(self) -> ParsedPgn | None:
        """Parse the next game; ``None`` once the input holds no more games."""
        self._pending = None
        tags = self._parse_tags()
        if tags is None:
            return None

        moves: list[MoveToken] = []
        while True:
            result = self._parse_turn(moves)
            if result is not None:
                break

        _LOGGER.debug(
            "Parsed game: %d tags, %d plies, result %s", len(tags), len(moves), result
        )
        return ParsedPgn(tags=tags, moves=moves, result_token=result)

    # -- Tag pairs ----------------------------------------------------------

    def _parse_tags(self) -> dict[str, str] | None:
        """Parse tag pairs up to the start of movetext.

        Returns ``None`` if the input ends before any tag or movetext.
        """
        scanner = self._scanner
        tags: dict[str, str] = {}

        while True:
            ch = scanner.peek()
            if not ch:
                if tags:
                    raise self._error("unexpected end of input, expecting movetext")
                return None
            if ch.isspace():
                scanner.advance()
                continue
            if ch == ";" or (ch == "%" and scanner.column == 0):
                scanner.skip_line()
                continue
            if ch.isdigit() or ch in "*{":
                return tags
            if ch != _OPEN_TAG:
                raise self._error(
                    f"Expecting open tag '{_OPEN_TAG}' or beginning of movetext"
                )
            name, value = self._parse_tag()
            tags[name] = value

    def _parse_tag(self) -> tuple[str, str]:
        scanner = self._scanner
        scanner.advance()  # '['

        name = self._parse_tag_name()
        value = self._parse_tag_value()

        self._skip_whitespace()
        ch = scanner.peek()
        if not ch:
            raise self._error("unexpected end of input inside tag")
        if ch != _CLOSE_TAG:
            raise self._error(f"Expecting close tag '{_CLOSE_TAG}'")
        scanner.advance()
        return name, value

    def _parse_tag_name(self) -> str:
        scanner = self._scanner
        self._skip_whitespace()
        name = ""
        while True:
            ch = scanner.peek()
            if not ch:
                raise self._error("unexpected end of input inside tag")
            if ch.isspace() or ch in _QUOTES or ch == _CLOSE_TAG:
                break
            name += scanner.advance()
        if not name:
            raise self._error("Expecting tag name")
        return name

    def _parse_tag_value(self) -> str:
        """Quoted value; ``\\"`` and ``\\\\`` are unescaped."""
        scanner = self._scanner
        self._skip_whitespace()
        quote = scanner.peek()
        if not quote:
            raise self._error("unexpected end of input inside tag")
        if quote not in _QUOTES:
            raise self._error("Expecting quoted tag value")
        scanner.advance()

        value = ""
        escaped = False
        while True:
            ch = scanner.advance()
            if not ch:
                raise self._error("unterminated tag value")
            if escaped:
                value += ch
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                return value
            else:
                value += ch

    # -- Movetext -----------------------------------------------------------

    def _parse_turn(self, moves: list[MoveToken]) -> str | None:
        """Parse one numbered turn into *moves*.

        Returns the result token once the game is over, else ``None``.
        """
        token = self._next_token()
        if token in RESULT_TOKENS:
            return token
        if not self._consume_move_number(token):
            raise self._error(f"Expected turn number, got {token!r}")

        for color in (Color.WHITE, Color.BLACK):
            text = self._read_move(color)
            if text in RESULT_TOKENS:
                return text
            moves.append(MoveToken.for_color(color, text))
        return None

    def _consume_move_number(self, token: str) -> bool:
        match = _MOVE_NUMBER_RE.match(token)
        if match is None:
            return False
        rest = match.group(3)
        if rest:
            self._pending = rest
        return True

    def _read_move(self, color: Color) -> str:
        token = self._next_token()
        match = _MOVE_NUMBER_RE.match(token)
        if match is None:
            return token
        # Only "N..." continuation markers may appear inside a turn.
        if len(match.group(2)) < 3:
            raise self._error(f"Expected {color} move, got turn number {token!r}")
        rest = match.group(3)
        return rest if rest else self._next_token()

    def _next_token(self) -> str:
        """Next movetext token, skipping comments, NAGs and variations."""
        if self._pending is not None:
            token, self._pending = self._pending, None
            return token

        scanner = self._scanner
        while True:
            ch = scanner.peek()
            if not ch:
                raise self._error("unexpected end of input in movetext")
            if ch.isspace():
                scanner.advance()
            elif ch == "{":
                self._skip_comment()
            elif ch == ";":
                scanner.skip_line()
            elif ch == "(":
                self._skip_variation()
            elif ch == "$":
                scanner.advance()
                while scanner.peek().isdigit():
                    scanner.advance()
            elif ch == _OPEN_TAG:
                raise self._error("Expected a move or end-of-game result; not a tag")
            elif ch in "})":
                raise self._error(f"Unbalanced {ch!r}")
            else:
                return self._read_word()

    def _read_word(self) -> str:
        scanner = self._scanner
        word = ""
        while True:
            ch = scanner.peek()
            if not ch or ch.isspace() or ch in _TOKEN_DELIMITERS:
                return word
            word += scanner.advance()

    def _skip_comment(self) -> None:
        scanner = self._scanner
        scanner.advance()  # '{'
        while True:
            ch = scanner.advance()
            if not ch:
                raise self._error("unterminated comment")
            if ch == "}":
                return

    def _skip_variation(self) -> None:
        scanner = self._scanner
        depth = 0
        while True:
            ch = scanner.peek()
            if not ch:
                raise self._error("unterminated variation")
            if ch == "{":
                self._skip_comment()
                continue
            if ch == ";":
                scanner.skip_line()
                continue
            scanner.advance()
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    return

    # -- Helpers ------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        scanner = self._scanner
        while scanner.peek().isspace():
            scanner.advance()

    def _error(self, message: str) -> PgnSyntaxError:
        scanner = self._scanner
        ch = scanner.peek()
        if ch and not message.startswith("unexpected end of input"):
            message = f"{message} (have {ch!r})"
        return PgnSyntaxError(message, scanner.line, scanner.column + 1)


def parse_pgn(text: str) -> list[ParsedPgn]:
    """Parse every game in *text*.

    On a syntax error the records parsed before it are attached to the raised
    :class:`PgnSyntaxError` as ``games``.
    """
    games: list[ParsedPgn] = []
    try:
        for game in PgnParser(text):
            games.append(game)
    except PgnSyntaxError as exc:
        exc.games = games
        raise
    return games

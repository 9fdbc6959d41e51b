"""Tests for the PGN game-record parser."""

import pytest

from chessreplay.core.enums import Color, GameResult
from chessreplay.core.errors import PgnSyntaxError
from chessreplay.core.notation import (
    ParsedPgn,
    PgnParser,
    game_result_from_pgn,
    parse_pgn,
    pgn_result_token,
)

SIMPLE = """\
[Event "Casual"]
[White "Player One"]
[Black "Player Two"]
[Result "1-0"]

1. e4 e5 2. Nf3 d6 1-0
"""


def raw(game: ParsedPgn) -> list[str]:
    return [m.raw_text for m in game.moves]


class TestTags:
    def test_tags_and_moves(self) -> None:
        (game,) = parse_pgn(SIMPLE)
        assert game.tags == {
            "Event": "Casual",
            "White": "Player One",
            "Black": "Player Two",
            "Result": "1-0",
        }
        assert raw(game) == ["e4", "e5", "Nf3", "d6"]
        assert game.result_token == "1-0"

    def test_player_labels_alternate(self) -> None:
        (game,) = parse_pgn(SIMPLE)
        assert [m.player_label for m in game.moves] == ["W", "B", "W", "B"]
        assert [m.color for m in game.moves] == [Color.WHITE, Color.BLACK] * 2

    def test_escaped_quote_in_value(self) -> None:
        (game,) = parse_pgn('[Event "A \\"quoted\\" name"]\n1. e4 *')
        assert game.tags["Event"] == 'A "quoted" name'

    def test_escaped_backslash_in_value(self) -> None:
        (game,) = parse_pgn('[Site "C:\\\\games"]\n1. e4 *')
        assert game.tags["Site"] == "C:\\games"

    def test_single_quoted_value(self) -> None:
        (game,) = parse_pgn("[Event 'Casual']\n1. e4 *")
        assert game.tags["Event"] == "Casual"

    def test_no_tags(self) -> None:
        (game,) = parse_pgn("1. e4 e5 *")
        assert game.tags == {}
        assert raw(game) == ["e4", "e5"]

    def test_comment_and_escape_lines_before_tags(self) -> None:
        text = '% produced by some tool\n; a comment\n[Event "x"]\n1. e4 *'
        (game,) = parse_pgn(text)
        assert game.tags == {"Event": "x"}

    def test_leading_byte_order_mark(self) -> None:
        (game,) = parse_pgn("\ufeff[Event \"x\"]\n1. e4 *")
        assert game.tags == {"Event": "x"}
        assert raw(game) == ["e4"]


class TestMovetext:
    def test_fused_move_numbers(self) -> None:
        (game,) = parse_pgn("1.e4 e5 2.Nf3 Nc6 *")
        assert raw(game) == ["e4", "e5", "Nf3", "Nc6"]

    def test_comments_variations_and_nags(self) -> None:
        text = (
            "1. e4 {best by test} e5 (1... c5 2. Nf3 (2. c3)) "
            "2. Nf3 $1 Nc6 ; rest of line\n*"
        )
        (game,) = parse_pgn(text)
        assert raw(game) == ["e4", "e5", "Nf3", "Nc6"]

    def test_comment_glued_to_move(self) -> None:
        (game,) = parse_pgn("1. e4{king pawn} e5{reply} *")
        assert raw(game) == ["e4", "e5"]

    def test_continuation_marker(self) -> None:
        (game,) = parse_pgn("1. e4 {comment} 1... e5 2. Nf3 2...Nc6 *")
        assert raw(game) == ["e4", "e5", "Nf3", "Nc6"]

    def test_result_after_white_move(self) -> None:
        (game,) = parse_pgn("1. e4 e5 2. Qh5 1-0")
        assert raw(game) == ["e4", "e5", "Qh5"]
        assert game.result_token == "1-0"

    def test_zero_move_game(self) -> None:
        (game,) = parse_pgn('[Result "*"]\n*')
        assert game.moves == []
        assert game.result_token == "*"

    @pytest.mark.parametrize("token", ["1-0", "0-1", "1/2-1/2", "*"])
    def test_result_tokens(self, token: str) -> None:
        (game,) = parse_pgn(f"1. e4 e5 {token}")
        assert game.result_token == token

    def test_annotations_kept_on_token(self) -> None:
        (game,) = parse_pgn("1. e4! e5?! 2. Qh5+ *")
        assert raw(game) == ["e4!", "e5?!", "Qh5+"]


class TestMultipleGames:
    def test_two_games(self) -> None:
        text = SIMPLE + '\n[Event "Second"]\n\n1. d4 d5 0-1\n'
        games = parse_pgn(text)
        assert len(games) == 2
        assert games[1].tags == {"Event": "Second"}
        assert raw(games[1]) == ["d4", "d5"]
        assert games[1].result_token == "0-1"

    def test_empty_input(self) -> None:
        assert parse_pgn("") == []
        assert parse_pgn("  \n\n ") == []

    def test_parser_is_iterable(self) -> None:
        parser = PgnParser("1. e4 * 1. d4 *")
        assert [raw(g) for g in parser] == [["e4"], ["d4"]]

    def test_parse_game_returns_none_at_end(self) -> None:
        parser = PgnParser("1. e4 *")
        assert parser.parse_game() is not None
        assert parser.parse_game() is None


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ('[Event "x"]', "unexpected end of input, expecting movetext"),
            ("hello", "Expecting open tag"),
            ('[Event "x" junk]', "Expecting close tag"),
            ('[Event "x\n', "unterminated tag value"),
            ("[Event x]", "Expecting quoted tag value"),
            ('1. e4 e5 [Event "x"]', "not a tag"),
            ("1. e4 e5 2. Nf3", "unexpected end of input in movetext"),
            ("1. e4 e5 Nf3 Nc6 *", "Expected turn number, got 'Nf3'"),
            ("1. e4 2. d4 *", "Expected black move, got turn number '2.'"),
            ("1. e4 } *", "Unbalanced"),
            ("1. e4 {open comment", "unterminated comment"),
            ("1. e4 (1. d4 e5", "unterminated variation"),
        ],
    )
    def test_messages(self, text: str, message: str) -> None:
        with pytest.raises(PgnSyntaxError) as excinfo:
            parse_pgn(text)
        assert message in str(excinfo.value)
        assert str(excinfo.value).startswith("Parse error - line ")

    def test_position_of_first_character(self) -> None:
        with pytest.raises(PgnSyntaxError) as excinfo:
            parse_pgn("hello")
        assert excinfo.value.line == 1
        assert excinfo.value.column == 1
        assert "(have 'h')" in str(excinfo.value)

    def test_line_number(self) -> None:
        with pytest.raises(PgnSyntaxError) as excinfo:
            parse_pgn('[Event "x"]\n\n1. e4 e5 Nf3 *')
        assert excinfo.value.line == 3

    def test_line_number_in_second_game(self) -> None:
        text = SIMPLE + "\n1. d4 d5 c4 *\n"
        with pytest.raises(PgnSyntaxError) as excinfo:
            parse_pgn(text)
        assert excinfo.value.line == SIMPLE.count("\n") + 2

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_pgn("hello")

    def test_partial_records_attached_to_error(self) -> None:
        with pytest.raises(PgnSyntaxError) as excinfo:
            parse_pgn("1. e4 *\n1. d4 d5 *\n[Event")
        assert [raw(g) for g in excinfo.value.games] == [["e4"], ["d4", "d5"]]

    def test_no_records_before_first_game_error(self) -> None:
        with pytest.raises(PgnSyntaxError) as excinfo:
            parse_pgn("hello")
        assert excinfo.value.games == []


class TestResultTokens:
    @pytest.mark.parametrize(
        ("token", "result"),
        [
            ("1-0", GameResult.WHITE_WINS),
            ("0-1", GameResult.BLACK_WINS),
            ("1/2-1/2", GameResult.DRAW),
            ("*", GameResult.IN_PROGRESS),
        ],
    )
    def test_conversion(self, token: str, result: GameResult) -> None:
        assert game_result_from_pgn(token) == result
        assert pgn_result_token(result) == token

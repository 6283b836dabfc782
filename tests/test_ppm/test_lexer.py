"""Tests for the P3 lexical scanner."""

from __future__ import annotations

from itertools import islice
from pathlib import Path

import pytest

from ppmedit.ppm.errors import LexError
from ppmedit.ppm.lexer import dump_tokens, iter_tokens, lex_file, tokenize
from ppmedit.ppm.token import Token, TokenKind


def _values(tokens: list[Token]) -> list[object]:
    return ["P3" if t.is_marker else t.value for t in tokens]


class TestTokenize:
    def test_header_and_pixels(self, two_by_one: str) -> None:
        tokens = tokenize(two_by_one)
        assert _values(tokens) == ["P3", 2, 1, 255, 10, 20, 30, 40, 50, 60]

    def test_records_positions(self) -> None:
        tokens = tokenize("P3\n# comment\n2 1\n255\n")
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert (tokens[1].line, tokens[1].column) == (3, 1)
        assert (tokens[2].line, tokens[2].column) == (3, 3)
        assert (tokens[3].line, tokens[3].column) == (4, 1)

    def test_all_whitespace_kinds_skipped(self) -> None:
        assert _values(tokenize(" P3\t1\r\n2  \n")) == ["P3", 1, 2]

    def test_comment_runs_to_end_of_line(self) -> None:
        assert _values(tokenize("P3 # 99 P4 junk\n7")) == ["P3", 7]

    def test_unterminated_comment_ends_cleanly(self) -> None:
        assert _values(tokenize("P3 12 # no newline here")) == ["P3", 12]

    def test_leading_zeros(self) -> None:
        assert tokenize("007")[0].value == 7

    def test_empty_source(self) -> None:
        assert tokenize("") == []


class TestLexErrors:
    def test_unknown_character(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("P3\nx")
        err = exc_info.value
        assert err.char == "x"
        assert err.code == 120
        assert (err.line, err.column) == (2, 1)
        assert "code 120" in str(err)

    def test_sign_is_not_a_number(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("P3 -5")
        assert exc_info.value.char == "-"

    def test_p_not_followed_by_3(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("P6")
        assert exc_info.value.char == "6"
        assert "expected '3'" in str(exc_info.value)

    def test_p_at_end_of_input(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("P")
        assert exc_info.value.code is None


class TestIterTokens:
    def test_is_lazy(self) -> None:
        # The bad character is never reached.
        tokens = list(islice(iter_tokens("P3 1 x"), 2))
        assert _values(tokens) == ["P3", 1]


class TestLexFile:
    def test_reads_file(self, write_ppm, two_by_one: str) -> None:
        path = write_ppm(two_by_one)
        assert len(lex_file(path)) == 10

    def test_non_ascii_bytes_are_lex_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.ppm"
        path.write_bytes(b"P3\n\xff")
        with pytest.raises(LexError) as exc_info:
            lex_file(path)
        assert exc_info.value.code == 0xFF

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            lex_file(tmp_path / "nope.ppm")


class TestToken:
    def test_str(self) -> None:
        assert str(Token.number(42)) == "(42,Number)"
        assert str(Token.marker()) == "(0,P3)"

    def test_negative_number_rejected(self) -> None:
        with pytest.raises(ValueError):
            Token.number(-1)

    def test_dump(self) -> None:
        tokens = [Token.marker(), Token(TokenKind.NUMBER, 3)]
        assert dump_tokens(tokens) == "(0,P3)\n(3,Number)\n"

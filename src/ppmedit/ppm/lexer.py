"""Lexical scanner for P3 (plain-text PPM) files.

Turns raw source text into a sequence of :class:`Token` objects.
Whitespace and ``#`` comments are consumed and never emitted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from ppmedit.ppm.errors import LexError
from ppmedit.ppm.token import Token

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily yield tokens from *source*.

    Raises:
        LexError: On any character that is not whitespace, a digit, part
            of a comment, or the ``P3`` marker.
    """
    return _Lexer(source).scan()


def tokenize(source: str) -> list[Token]:
    """Tokenize a complete P3 document into a list."""
    tokens = list(iter_tokens(source))
    logger.debug("Lexed %d tokens", len(tokens))
    return tokens


def lex_file(path: str | Path, encoding: str = "latin-1") -> list[Token]:
    """Read *path* and tokenize its contents.

    The file handle is closed before this returns or raises.
    """
    path = Path(path)
    with path.open("r", encoding=encoding, newline="") as fh:
        source = fh.read()
    logger.debug("Read %d characters from %s", len(source), path)
    return tokenize(source)


def dump_tokens(tokens: list[Token]) -> str:
    """One ``(value,KIND)`` entry per line, for debugging."""
    return "".join(f"{token}\n" for token in tokens)


class _Lexer:
    def __init__(self, source: str) -> None:
        self._src = source
        self._pos = 0
        self._line = 1
        self._col = 1

    def _peek(self) -> str:
        if self._pos < len(self._src):
            return self._src[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._src[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def scan(self) -> Iterator[Token]:
        while True:
            ch = self._peek()
            if not ch:
                return
            if ch in WHITESPACE:
                self._advance()
            elif ch == "#":
                self._skip_comment()
            elif ch in DIGITS:
                yield self._read_number()
            elif ch == "P":
                yield self._read_marker()
            else:
                raise LexError(f"Invalid token {ch!r}", ch, self._line, self._col)

    def _skip_comment(self) -> None:
        # A comment runs to end of line; end of input also closes it.
        while self._peek() and self._peek() != "\n":
            self._advance()

    def _read_number(self) -> Token:
        line, col = self._line, self._col
        start = self._pos
        while self._peek() in DIGITS:
            self._advance()
        return Token.number(int(self._src[start:self._pos]), line, col)

    def _read_marker(self) -> Token:
        line, col = self._line, self._col
        self._advance()
        ch = self._peek()
        if ch != "3":
            raise LexError(
                "Invalid token after 'P': expected '3'"
                + (f", got {ch!r}" if ch else ", got end of input"),
                ch,
                self._line,
                self._col,
            )
        self._advance()
        return Token.marker(line, col)

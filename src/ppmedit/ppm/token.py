"""Lexical tokens produced by the P3 lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    MARKER = "P3"
    NUMBER = "Number"


@dataclass(frozen=True)
class Token:
    """A single lexical unit: the ``P3`` format marker or a number.

    ``line`` and ``column`` are 1-based and point at the first character
    of the token in the source text.
    """

    kind: TokenKind
    value: int = 0
    line: int = 0
    column: int = 0

    @classmethod
    def marker(cls, line: int = 0, column: int = 0) -> Token:
        return cls(TokenKind.MARKER, 0, line, column)

    @classmethod
    def number(cls, value: int, line: int = 0, column: int = 0) -> Token:
        if value < 0:
            raise ValueError(f"Number tokens are non-negative, got {value}")
        return cls(TokenKind.NUMBER, value, line, column)

    @property
    def is_marker(self) -> bool:
        return self.kind is TokenKind.MARKER

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    def __str__(self) -> str:
        return f"({self.value},{self.kind.value})"

"""Structural parser for P3 token sequences.

Walks the tokens in a single forward pass::

    marker -> width -> height -> max colour -> pixel(0,0) ... pixel(h-1,w-1)

and returns a fully populated :class:`Image`.  Channel values are collected
as they are read and the grid is only allocated after the last pixel, so a
header promising more pixels than the file holds fails on the missing value.
Nothing is returned on failure.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

import numpy as np

from ppmedit.ppm import MAX_COLOR_VALUE
from ppmedit.ppm.errors import StructuralError, UnexpectedEndError
from ppmedit.ppm.image import CHANNELS, Image
from ppmedit.ppm.lexer import lex_file, tokenize
from ppmedit.ppm.token import Token

logger = logging.getLogger(__name__)

MAX_DIMENSION = np.iinfo(np.intp).max // 3


def parse_tokens(
    tokens: Iterable[Token],
    *,
    reject_trailing_tokens: bool = False,
    reject_empty_dimensions: bool = True,
) -> Image:
    """Validate *tokens* and build the image they describe.

    Raises:
        StructuralError: On a missing or out-of-range header field or
            channel value.
        UnexpectedEndError: If the tokens run out before the last pixel.
    """
    return _Parser(
        iter(tokens),
        reject_trailing_tokens=reject_trailing_tokens,
        reject_empty_dimensions=reject_empty_dimensions,
    ).parse()


def parse_text(source: str, **options: bool) -> Image:
    """Lex and parse a P3 document held in memory."""
    return parse_tokens(tokenize(source), **options)


def parse_file(path: str | Path, encoding: str = "latin-1", **options: bool) -> Image:
    """Lex and parse the P3 file at *path*."""
    return parse_tokens(lex_file(path, encoding=encoding), **options)


class _Parser:
    def __init__(
        self,
        tokens: Iterator[Token],
        *,
        reject_trailing_tokens: bool,
        reject_empty_dimensions: bool,
    ) -> None:
        self._tokens = tokens
        self._reject_trailing = reject_trailing_tokens
        self._reject_empty = reject_empty_dimensions

    def _next(
        self, missing: str, field: str, row: int | None = None, column: int | None = None,
    ) -> Token:
        try:
            return next(self._tokens)
        except StopIteration:
            raise UnexpectedEndError(
                f"reached end of file, {missing}", field=field, row=row, column=column,
            ) from None

    def _expect_number(self, field: str) -> int:
        token = self._next(f"missing {field}", field)
        if not token.is_number:
            raise StructuralError(f"missing {field}", field=field)
        return token.value

    # -- Header ---------------------------------------------------------

    def parse(self) -> Image:
        self._expect_marker()
        width = self._expect_dimension("width")
        height = self._expect_dimension("height")
        max_color = self._expect_number("max color value")
        if max_color != MAX_COLOR_VALUE:
            raise StructuralError(
                f"invalid max color value {max_color}, expected {MAX_COLOR_VALUE}",
                field="max color value",
            )
        logger.debug("Header: %dx%d, max color %d", width, height, max_color)

        channels: list[int] = []
        for r in range(height):
            for c in range(width):
                channels.extend(self._expect_pixel(r, c, max_color))

        self._check_trailing()
        return Image.from_channels(width, height, channels, max_color)

    def _expect_marker(self) -> None:
        token = self._next("missing 'P3' format marker", "marker")
        if not token.is_marker:
            raise StructuralError("missing 'P3' format marker", field="marker")

    def _expect_dimension(self, field: str) -> int:
        value = self._expect_number(field)
        if value == 0 and self._reject_empty:
            raise StructuralError(f"invalid {field} 0", field=field)
        if value > MAX_DIMENSION:
            raise StructuralError(f"invalid {field} {value}, too large", field=field)
        return value

    # -- Pixels ---------------------------------------------------------

    def _expect_pixel(self, row: int, column: int, max_color: int) -> tuple[int, int, int]:
        values = []
        for channel in CHANNELS:
            field = f"pixel color value - {channel}"
            token = self._next(
                f"missing {field} (row {row}, column {column})", channel, row, column,
            )
            if not token.is_number:
                raise StructuralError(
                    f"missing {field} (row {row}, column {column})",
                    field=channel, row=row, column=column,
                )
            if not 0 <= token.value <= max_color:
                raise StructuralError(
                    f"pixel row {row}, column {column}: {channel} value "
                    f"{token.value} out of range 0..{max_color}",
                    field=channel, row=row, column=column,
                )
            values.append(token.value)
        return values[0], values[1], values[2]

    def _check_trailing(self) -> None:
        extra = next(self._tokens, None)
        if extra is None:
            return
        if self._reject_trailing:
            raise StructuralError(
                f"unexpected trailing token {extra} at line {extra.line}, column {extra.column}",
                field="trailing",
            )
        logger.warning(
            "Ignoring trailing tokens after the last pixel (first at line %d, column %d)",
            extra.line, extra.column,
        )

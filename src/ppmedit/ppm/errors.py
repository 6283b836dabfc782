"""Exception hierarchy for reading, editing and writing P3 images.

Every failure is fatal to a run; callers catch :class:`PPMError` at the
command boundary and report ``str(exc)`` as a single line.
"""

from __future__ import annotations


class PPMError(Exception):
    """Base class for all ppmedit errors."""


class UsageError(PPMError):
    """Malformed invocation: unknown operation or bad blur length."""


class LexError(PPMError):
    """Raised when the scanner meets a character it cannot tokenize.

    Attributes:
        char: The offending character ("" at end of input).
        line: 1-based line number of the character.
        column: 1-based column number of the character.
    """

    def __init__(self, message: str, char: str, line: int, column: int) -> None:
        code = f" (code {ord(char)})" if char else ""
        super().__init__(f"{message}{code} at line {line}, column {column}")
        self.char = char
        self.line = line
        self.column = column

    @property
    def code(self) -> int | None:
        return ord(self.char) if self.char else None


class StructuralError(PPMError):
    """Raised when the token sequence does not describe a valid image.

    ``field`` names the header field or pixel channel at fault; pixel
    errors also carry the ``row`` and ``column`` of the pixel.
    """

    def __init__(
        self,
        detail: str,
        *,
        field: str = "",
        row: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(f"Invalid file format ({detail})")
        self.detail = detail
        self.field = field
        self.row = row
        self.column = column


class UnexpectedEndError(StructuralError):
    """The token sequence ran out before the image was complete."""

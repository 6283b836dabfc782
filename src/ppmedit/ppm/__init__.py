"""P3 pixel-map subsystem.

Provides the lexer, parser, in-memory image model, transformation
engine and serializer for the plain-text PPM format.
"""

from __future__ import annotations

MAX_COLOR_VALUE = 255
"""The only max color value this editor accepts."""

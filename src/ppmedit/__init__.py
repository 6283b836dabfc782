"""ppmedit — plain-text (P3) pixel-map editor.

Reads an ASCII PPM image, applies one pixel-level transformation
(invert, grayscale, emboss, motion blur) and writes the result back out
in the same format.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]

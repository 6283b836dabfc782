"""Render an :class:`Image` back to P3 text."""

from __future__ import annotations

import logging
from pathlib import Path

from ppmedit.ppm.image import Image

logger = logging.getLogger(__name__)

DEFAULT_COMMENT = "Created by ppmedit"


def serialize(image: Image, comment: str | None = DEFAULT_COMMENT) -> str:
    """Return the P3 document for *image*.

    Layout: ``P3``, an optional ``#`` comment line, ``width height``, the
    max color value, then one channel value per line in row-major pixel
    order (red, green, blue).
    """
    if comment is not None and ("\n" in comment or "\r" in comment):
        raise ValueError("Header comment must be a single line")

    lines = ["P3"]
    if comment is not None:
        lines.append(f"# {comment}" if comment else "#")
    lines.append(f"{image.width} {image.height}")
    lines.append(str(image.max_color_value))
    lines.extend(str(v) for v in image.pixels.reshape(-1).tolist())
    return "\n".join(lines) + "\n"


def write_image(
    image: Image, path: str | Path, comment: str | None = DEFAULT_COMMENT,
) -> Path:
    """Serialize *image* and write it to *path*.

    The document is rendered in full before the file is opened.
    """
    path = Path(path)
    text = serialize(image, comment=comment)
    path.write_text(text, encoding="ascii")
    logger.debug("Wrote %d bytes to %s", len(text), path)
    return path

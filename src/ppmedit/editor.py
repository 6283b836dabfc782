"""The read → transform → write pipeline behind ``ppmedit edit``."""

from __future__ import annotations

import logging
from pathlib import Path

from ppmedit.config.settings import Settings, get_settings
from ppmedit.ppm.image import Image
from ppmedit.ppm.parser import parse_file
from ppmedit.ppm.serializer import write_image
from ppmedit.ppm.transforms import apply_operation, describe_operation, validate_operation

logger = logging.getLogger(__name__)


def load_image(path: str | Path, settings: Settings | None = None) -> Image:
    """Lex and parse *path* using the configured parser options."""
    cfg = (settings or get_settings()).parser
    return parse_file(
        path,
        encoding=cfg.encoding,
        reject_trailing_tokens=cfg.reject_trailing_tokens,
        reject_empty_dimensions=cfg.reject_empty_dimensions,
    )


def edit_file(
    input_path: str | Path,
    output_path: str | Path,
    operation: str,
    length: int | None = None,
    settings: Settings | None = None,
) -> str:
    """Apply *operation* to the image at *input_path* and save it.

    Returns the status line describing the applied operation.  The output
    file is only written after the whole image has been parsed and
    transformed.

    Raises:
        UsageError: Before any I/O, for a bad operation request.
        LexError, StructuralError: If the input is not a valid image.
        OSError: If either file cannot be read or written.
    """
    settings = settings or get_settings()
    validate_operation(operation, length)

    logger.info("Editing %s -> %s (%s)", input_path, output_path, operation)
    image = load_image(input_path, settings)
    apply_operation(image, operation, length)
    write_image(image, output_path, comment=settings.output.comment)

    status = describe_operation(operation, length)
    logger.info("%s: wrote %dx%d image to %s", status, image.width, image.height, output_path)
    return status

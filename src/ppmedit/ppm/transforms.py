"""Pixel transformation engine.

Each operation is a pure function over a ``(height, width, 3)`` grid that
returns a new grid; :func:`apply_operation` runs one of them and writes
the result back into the :class:`Image` in place.  Operations are
registered in ``OPERATIONS`` under the names accepted on the command
line.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from ppmedit.ppm import MAX_COLOR_VALUE
from ppmedit.ppm.errors import UsageError
from ppmedit.ppm.image import Grid, Image

logger = logging.getLogger(__name__)

Transform = Callable[..., Grid]

EMBOSS_BASE = 128


# ---------------------------------------------------------------------------
# Per-pixel operations
# ---------------------------------------------------------------------------


def invert(grid: Grid, max_value: int = MAX_COLOR_VALUE) -> Grid:
    """channel = max_value - channel, per channel."""
    return (max_value - grid).copy()


def grayscale(grid: Grid, max_value: int = MAX_COLOR_VALUE) -> Grid:
    """Set every channel to the truncated mean of the pixel's three channels."""
    avg = grid.sum(axis=2, keepdims=True) // 3
    return np.repeat(avg, 3, axis=2)


# ---------------------------------------------------------------------------
# Neighbourhood operations
# ---------------------------------------------------------------------------


def emboss(grid: Grid, max_value: int = MAX_COLOR_VALUE) -> Grid:
    """Emboss against the up-left neighbour.

    For every pixel with an up-left neighbour the per-channel differences
    ``pixel - neighbour`` are taken, and the one with the largest
    magnitude wins (red before green before blue on ties).  All three
    output channels become ``clip(diff + 128, 0, max_value)``.  Pixels in
    the first row or column become 128.
    """
    h, w, _ = grid.shape
    result = np.full_like(grid, EMBOSS_BASE)
    if h < 2 or w < 2:
        return result

    diffs = grid[1:, 1:] - grid[:-1, :-1]
    # argmax returns the first maximum, which keeps the red/green/blue tie order.
    pick = np.abs(diffs).argmax(axis=2)[..., np.newaxis]
    greatest = np.take_along_axis(diffs, pick, axis=2)
    result[1:, 1:] = np.clip(greatest + EMBOSS_BASE, 0, max_value)
    return result


def motion_blur(grid: Grid, length: int, max_value: int = MAX_COLOR_VALUE) -> Grid:
    """Forward horizontal blur over ``length`` columns.

    Each channel of pixel ``(r, c)`` becomes the truncated mean of columns
    ``c .. c + length - 1`` of row ``r``, cut off at the right edge.  A
    length of 0 averages nothing and yields 0.
    """
    if length < 0:
        raise ValueError(f"Blur length must be non-negative, got {length}")
    h, w, _ = grid.shape
    if length == 0 or w == 0:
        return np.zeros_like(grid)
    # Windows end at the row edge.
    length = min(length, w)

    # Prefix sums along each row: window [c, end) = cs[end] - cs[c].
    cs = np.zeros((h, w + 1, 3), dtype=np.int64)
    np.cumsum(grid, axis=1, out=cs[:, 1:])
    start = np.arange(w)
    end = np.minimum(start + length, w)
    sums = cs[:, end] - cs[:, start]
    counts = (end - start)[np.newaxis, :, np.newaxis]
    return np.clip(sums // counts, 0, max_value).astype(grid.dtype)


# ---------------------------------------------------------------------------
# Registry and dispatch
# ---------------------------------------------------------------------------

OPERATIONS: dict[str, Transform] = {
    "invert": invert,
    "grayscale": grayscale,
    "emboss": emboss,
    "motionblur": motion_blur,
}

PARAMETERISED = frozenset({"motionblur"})

_STATUS = {
    "invert": "Image Inverted",
    "grayscale": "Image Grayscaled",
    "emboss": "Image Embossed",
}


def validate_operation(name: str, length: int | None = None) -> None:
    """Check an operation request before any file is touched.

    Raises:
        UsageError: If *name* is unknown, a blur length is missing or
            negative, or a length is given to an operation that takes none.
    """
    if name not in OPERATIONS:
        raise UsageError(
            f"Unknown operation {name!r}; expected one of: {', '.join(OPERATIONS)}"
        )
    if name in PARAMETERISED:
        if length is None:
            raise UsageError(f"Operation {name!r} requires a blur length")
        if length < 0:
            raise UsageError(f"Blur length must be non-negative, got {length}")
    elif length is not None:
        raise UsageError(f"Operation {name!r} takes no length argument")


def describe_operation(name: str, length: int | None = None) -> str:
    """The status line reported after a successful edit."""
    if name == "motionblur":
        return f"Image Blurred ({length})"
    return _STATUS[name]


def apply_operation(image: Image, name: str, length: int | None = None) -> None:
    """Apply operation *name* to every pixel of *image*, in place.

    The result is computed from a snapshot of the pre-edit grid and only
    written back once complete.
    """
    validate_operation(name, length)
    snapshot = image.snapshot()
    logger.debug(
        "Applying %s%s to %dx%d image", name,
        f" (length={length})" if length is not None else "",
        image.width, image.height,
    )
    fn = OPERATIONS[name]
    if name in PARAMETERISED:
        result = fn(snapshot, length, max_value=image.max_color_value)
    else:
        result = fn(snapshot, max_value=image.max_color_value)
    image.pixels[...] = np.clip(result, 0, image.max_color_value)

"""In-memory model of a decoded P3 image."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ppmedit.ppm import MAX_COLOR_VALUE

Grid = np.ndarray  # (height, width, 3) array of ints, channels in RGB order

CHANNELS = ("red", "green", "blue")


@dataclass(frozen=True)
class Pixel:
    """One RGB value; a read-only view of a grid cell."""

    red: int
    green: int
    blue: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass
class Image:
    """A fully populated row-major pixel grid.

    ``pixels[r, c]`` holds the red, green and blue values of the pixel in
    row ``r`` and column ``c``.  Every channel lies in
    ``[0, max_color_value]``.
    """

    width: int
    height: int
    max_color_value: int
    pixels: Grid

    def __post_init__(self) -> None:
        expected = (self.height, self.width, 3)
        if self.pixels.shape != expected:
            raise ValueError(
                f"Pixel grid shape {self.pixels.shape} does not match {expected}"
            )
        if self.pixels.size and (
            self.pixels.min() < 0 or self.pixels.max() > self.max_color_value
        ):
            raise ValueError(
                f"Channel values must lie in 0..{self.max_color_value}"
            )

    @classmethod
    def from_channels(
        cls,
        width: int,
        height: int,
        channels: list[int],
        max_color_value: int = MAX_COLOR_VALUE,
    ) -> Image:
        """Build an image from a flat row-major list of r, g, b values."""
        grid = np.array(channels, dtype=np.int64).reshape(height, width, 3)
        return cls(width=width, height=height, max_color_value=max_color_value, pixels=grid)

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width) of the image."""
        return (self.height, self.width)

    def pixel(self, row: int, column: int) -> Pixel:
        r, g, b = (int(v) for v in self.pixels[row, column])
        return Pixel(r, g, b)

    def snapshot(self) -> Grid:
        """A read-only copy of the current pixel values."""
        snap = self.pixels.copy()
        snap.setflags(write=False)
        return snap

    def same_pixels(self, other: Image) -> bool:
        """True when both images have the same size, ceiling and pixels."""
        return (
            self.shape == other.shape
            and self.max_color_value == other.max_color_value
            and np.array_equal(self.pixels, other.pixels)
        )

"""Pixel buffer for rendered images.

The image is a row-major flat buffer of RGB float colors. Row 0 is the bottom
of the camera viewport (t = 0), matching the renderer's internal row index;
exporters flip rows so the top of the viewport is written first.

Render workers produce disjoint bands of rows, which the renderer copies
into the buffer without overlap.
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from weekend_raytracer.core.ray import Vec3


class Image:
    """A width x height RGB float image.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        pixels: Flat array of shape (width * height, 3); pixel (i, j) lives
            at index j * width + i.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black image.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions ({width}x{height}) must be positive")
        self.width = width
        self.height = height
        self.pixels: npt.NDArray[np.float64] = np.zeros((width * height, 3), dtype=np.float64)

    def index(self, i: int, j: int) -> int:
        """Flat buffer index of pixel column i, row j."""
        return j * self.width + i

    def set_pixel(self, i: int, j: int, color: Vec3) -> None:
        """Store a color at column i, row j."""
        self.pixels[j * self.width + i] = color

    def get_pixel(self, i: int, j: int) -> Vec3:
        """Read the color at column i, row j."""
        r, g, b = self.pixels[j * self.width + i].tolist()
        return Vec3(r, g, b)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return the image as an array of shape (height, width, 3).

        Rows are ordered top of the viewport first, the standard image
        layout used by Pillow and the PPM writer.
        """
        image = self.pixels.reshape(self.height, self.width, 3)
        return np.flipud(image).copy()

    @classmethod
    def from_numpy(cls, array: npt.ArrayLike) -> Image:
        """Build an image from a (height, width, 3) top-row-first array."""
        data = np.asarray(array, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (H, W, 3), got {data.shape}")
        image = cls(data.shape[1], data.shape[0])
        image.pixels[:] = np.flipud(data).reshape(-1, 3)
        return image

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"


# Largest channel value kept before quantization; 0.999 * 256 truncates to 255
MAX_CHANNEL = 0.999


def clamp(x: float, low: float, high: float) -> float:
    """Clamp x to [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def resolve_color(total: Vec3, samples: int) -> Vec3:
    """Turn an accumulated sample sum into a displayable pixel color.

    Averages the samples, applies gamma-2 correction (square root per
    channel) and clamps to [0, MAX_CHANNEL]. NaN channels become 0.

    Args:
        total: Sum of the sample colors for the pixel.
        samples: Number of samples that were summed.

    Returns:
        The final color stored in the image buffer.
    """
    scale = 1.0 / samples
    channels = []
    for c in total:
        c *= scale
        if math.isnan(c) or c <= 0.0:
            channels.append(0.0)
        else:
            channels.append(clamp(math.sqrt(c), 0.0, MAX_CHANNEL))
    return Vec3(channels[0], channels[1], channels[2])

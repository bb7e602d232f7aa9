"""Image export utilities for rendered images.

This module provides functions for saving rendered images to files. The
renderer already averages, gamma-corrects and clamps every pixel, so export
only quantizes channels to 8 bits.

Supported formats:
    - PPM (ASCII "P3")
    - PNG (8-bit via Pillow)

Quantization multiplies each channel, clamped to [0, 0.999], by 256 and
truncates, so 1.0 maps to 255 and never wraps to 256.

Example:
    >>> from weekend_raytracer.preview.export import save_image
    >>> # image = renderer.render()
    >>> # save_image(image, "spheres.ppm")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from weekend_raytracer.core.image import MAX_CHANNEL, Image

PPM_MAX_VALUE = 255


def quantize(channel: float) -> int:
    """Convert one [0, 1] float channel to an integer in [0, 255]."""
    if channel < 0.0 or channel != channel:
        channel = 0.0
    elif channel > MAX_CHANNEL:
        channel = MAX_CHANNEL
    return int(256 * channel)


def image_to_uint8(image: Image) -> npt.NDArray[np.uint8]:
    """Convert an Image to an 8-bit array for display/export.

    Returns:
        Array of shape (height, width, 3), top row first, dtype uint8.
    """
    data = np.nan_to_num(image.to_numpy(), nan=0.0)
    data = np.clip(data, 0.0, MAX_CHANNEL)
    return (data * 256).astype(np.uint8)


def format_ppm(image: Image) -> str:
    """Serialize an image as ASCII PPM ("P3").

    The header is ``P3``, ``<width> <height>`` and ``255``; then one line per
    image row, starting at the top of the viewport (internal row height-1)
    and ending at the bottom (row 0).

    Args:
        image: The rendered image.

    Returns:
        The complete PPM text, ending with a newline.
    """
    lines = ["P3", f"{image.width} {image.height}", str(PPM_MAX_VALUE)]
    for j in range(image.height - 1, -1, -1):
        values = []
        for i in range(image.width):
            r, g, b = image.get_pixel(i, j)
            values.append(f"{quantize(r)} {quantize(g)} {quantize(b)}")
        lines.append(" ".join(values))
    return "\n".join(lines) + "\n"


def save_ppm(image: Image, filepath: str | Path) -> None:
    """Save the rendered image as an ASCII PPM file.

    Args:
        image: The rendered image.
        filepath: Output file path (should end in .ppm).

    Raises:
        OSError: If the file cannot be opened or written.
    """
    Path(filepath).write_text(format_ppm(image), encoding="ascii")


def save_png(image: Image, filepath: str | Path) -> None:
    """Save the rendered image as an 8-bit PNG file.

    Args:
        image: The rendered image.
        filepath: Output file path (should end in .png).

    Raises:
        OSError: If the file cannot be opened or written.
    """
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(str(filepath))


def save_image(image: Image, filepath: str | Path) -> Path:
    """Save the image in the format implied by the file suffix.

    ``.ppm`` writes ASCII PPM; ``.png`` writes PNG.

    Returns:
        The path that was written.

    Raises:
        ValueError: If the suffix is not a supported format.
        OSError: If the file cannot be opened or written.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        save_ppm(image, path)
    elif suffix == ".png":
        save_png(image, path)
    else:
        raise ValueError(f"Unsupported output format {suffix!r}; use .ppm or .png")
    return path


def compute_rmse(image_a: Image, image_b: Image) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image.
        image_b: Second image (must have the same dimensions).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image dimensions don't match.
    """
    if (image_a.width, image_a.height) != (image_b.width, image_b.height):
        raise ValueError(
            f"Image dimensions must match: {image_a.width}x{image_a.height} "
            f"vs {image_b.width}x{image_b.height}"
        )

    diff = image_a.pixels - image_b.pixels
    return float(np.sqrt(np.mean(diff**2)))

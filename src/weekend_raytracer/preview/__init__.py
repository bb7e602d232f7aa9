"""Preview module for image output.

This module handles writing rendered images:

Components:
    export: PPM/PNG image export utilities

Example:
    >>> from weekend_raytracer.preview import save_image
    >>> # save_image(image, "spheres.png")
"""

from weekend_raytracer.preview.export import (
    compute_rmse,
    format_ppm,
    image_to_uint8,
    quantize,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "format_ppm",
    "save_ppm",
    "save_png",
    "save_image",
    "image_to_uint8",
    "quantize",
    "compute_rmse",
]

"""Row-parallel renderer.

This module maps image pixels onto a fixed pool of worker processes:
- Rows are split into contiguous, disjoint bands, one per worker
- The last band absorbs the remainder when the height does not divide evenly
- Each worker returns the pixels of its own band; the parent copies them
  into the image buffer
- The scene, materials and camera are immutable and pickled to each worker
- Every row draws from its own generator seeded by (seed, row)

Processes rather than threads are used because the integrator is pure Python
and holds the GIL for the whole render. Because randomness is keyed by row
rather than by worker, the same settings produce pixel-identical images for
any worker count.

Example:
    >>> from weekend_raytracer.camera.thin_lens import setup_camera
    >>> from weekend_raytracer.core.renderer import Renderer, RenderSettings
    >>> from weekend_raytracer.scene.demo import three_spheres_scene
    >>>
    >>> scene, camera_config = three_spheres_scene(aspect_ratio=2.0)
    >>> settings = RenderSettings(width=200, height=100, samples_per_pixel=10, threads=4)
    >>> renderer = Renderer(scene, setup_camera(camera_config), settings)
    >>> image = renderer.render()
"""

from __future__ import annotations

import os
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

from weekend_raytracer.camera.thin_lens import Camera
from weekend_raytracer.core.image import Image, resolve_color
from weekend_raytracer.core.integrator import MAX_DEPTH, T_MAX, T_MIN, normal_color, ray_color
from weekend_raytracer.core.ray import BLACK, Vec3
from weekend_raytracer.core.sampling import make_row_rng

if TYPE_CHECKING:
    from weekend_raytracer.scene.intersection import Scene

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

ShadingMode = Literal["path", "normals"]

SHADING_MODES = ("path", "normals")


def _default_threads() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class RenderSettings:
    """Fixed configuration for one render.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        samples_per_pixel: Jittered samples averaged per pixel.
        max_depth: Bounce budget per path.
        threads: Number of worker processes.
        seed: Base seed; each row uses SeedSequence([seed, row]).
        t_min: Self-intersection offset for hit tests.
        t_max: Far bound for hit tests. Geometry further than this from a
            ray origin is clipped and the ray sees sky instead.
        shading: "path" for full path tracing, "normals" to visualize
            surface normals.
    """

    width: int = 400
    height: int = 225
    samples_per_pixel: int = 100
    max_depth: int = MAX_DEPTH
    threads: int = field(default_factory=_default_threads)
    seed: int = 0
    t_min: float = T_MIN
    t_max: float = T_MAX
    shading: ShadingMode = "path"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions ({self.width}x{self.height}) must be positive")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel = {self.samples_per_pixel} must be positive")
        if self.max_depth < 0:
            raise ValueError(f"max_depth = {self.max_depth} must be non-negative")
        if self.threads <= 0:
            raise ValueError(f"threads = {self.threads} must be positive")
        if self.seed < 0:
            raise ValueError(f"seed = {self.seed} must be non-negative")
        if not 0.0 <= self.t_min < self.t_max:
            raise ValueError(f"Hit window [{self.t_min}, {self.t_max}] is empty or negative")
        if self.shading not in SHADING_MODES:
            raise ValueError(f"Unknown shading mode {self.shading!r}; expected one of {SHADING_MODES}")

    @classmethod
    def from_aspect_ratio(cls, width: int, aspect_ratio: float, **kwargs) -> RenderSettings:
        """Build settings whose height is derived from width / aspect_ratio."""
        if aspect_ratio <= 0.0:
            raise ValueError(f"Aspect ratio = {aspect_ratio} must be positive")
        return cls(width=width, height=max(1, int(width / aspect_ratio)), **kwargs)


def partition_rows(height: int, workers: int) -> list[range]:
    """Split rows 0..height-1 into contiguous bands, one per worker.

    Every band has height // workers rows except the last, which also takes
    the remainder. The worker count is capped at the height so no band is
    empty.

    Args:
        height: Number of image rows.
        workers: Requested number of workers.

    Returns:
        Disjoint ranges covering every row exactly once, in order.
    """
    workers = max(1, min(workers, height))
    rows_per_band = height // workers
    bands = [range(k * rows_per_band, (k + 1) * rows_per_band) for k in range(workers - 1)]
    bands.append(range((workers - 1) * rows_per_band, height))
    return bands


class Renderer:
    """Renders a scene through a camera with a fixed pool of processes.

    Attributes:
        scene: The scene to render (read-only during rendering).
        camera: The derived camera.
        settings: The render configuration.
    """

    def __init__(self, scene: Scene, camera: Camera, settings: RenderSettings) -> None:
        self.scene = scene
        self.camera = camera
        self.settings = settings

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.settings.width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.settings.height

    def render_pixel(self, i: int, j: int, rng: np.random.Generator) -> Vec3:
        """Render all samples for pixel (i, j) and resolve the final color.

        Each sample jitters the pixel coordinate by a uniform offset in
        [0, 1) before mapping to normalized camera coordinates.

        Args:
            i: Pixel column (0 = left).
            j: Pixel row (0 = bottom).
            rng: The generator of row j.

        Returns:
            The averaged, gamma-corrected and clamped color.
        """
        settings = self.settings
        u_scale = max(settings.width - 1, 1)
        v_scale = max(settings.height - 1, 1)

        total = BLACK
        for _ in range(settings.samples_per_pixel):
            du, dv = rng.random(2).tolist()
            s = (i + du) / u_scale
            t = (j + dv) / v_scale
            ray = self.camera.get_ray(s, t, rng)
            if settings.shading == "normals":
                color = normal_color(ray, self.scene, settings.t_min, settings.t_max)
            else:
                color = ray_color(
                    ray,
                    self.scene,
                    settings.max_depth,
                    rng,
                    settings.t_min,
                    settings.t_max,
                )
            total = total + color

        return resolve_color(total, settings.samples_per_pixel)

    def render_row(self, j: int) -> npt.NDArray[np.float64]:
        """Render every pixel of row j; returns a (width, 3) array."""
        rng = make_row_rng(self.settings.seed, j)
        row = np.empty((self.settings.width, 3), dtype=np.float64)
        for i in range(self.settings.width):
            row[i] = self.render_pixel(i, j, rng)
        return row

    def render_band(self, rows: range) -> npt.NDArray[np.float64]:
        """Render a contiguous band of rows.

        Args:
            rows: The rows to render, bottom first.

        Returns:
            A (len(rows) * width, 3) array laid out like Image.pixels.
        """
        band = np.empty((len(rows) * self.settings.width, 3), dtype=np.float64)
        for k, j in enumerate(rows):
            band[k * self.settings.width : (k + 1) * self.settings.width] = self.render_row(j)
        return band

    def render(self, callback: ProgressCallback | None = None) -> Image:
        """Render the full image.

        Dispatches one band per worker process and copies each returned band
        into the image as it arrives. A single band is rendered in this
        process. If a worker raises, the exception propagates once the pool
        has shut down.

        Args:
            callback: Optional callback invoked in the calling process after
                each band finishes. Receives (rows_completed, total_rows).

        Returns:
            The finished image.
        """
        image = Image(self.settings.width, self.settings.height)
        bands = partition_rows(self.settings.height, self.settings.threads)

        if len(bands) == 1:
            image.pixels[:] = self.render_band(bands[0])
            if callback is not None:
                callback(self.settings.height, self.settings.height)
            return image

        with ProcessPoolExecutor(max_workers=len(bands)) as pool:
            futures = {pool.submit(self.render_band, band): band for band in bands}
            rows_done = 0
            for future in as_completed(futures):
                band = futures[future]
                image.pixels[band.start * self.width : band.stop * self.width] = future.result()
                rows_done += len(band)
                if callback is not None:
                    callback(rows_done, self.settings.height)

        return image

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"samples={self.settings.samples_per_pixel}, threads={self.settings.threads})"
        )


def render_image(
    scene: Scene,
    camera: Camera,
    settings: RenderSettings,
    callback: ProgressCallback | None = None,
) -> Image:
    """Render a scene in one call; see Renderer.render()."""
    return Renderer(scene, camera, settings).render(callback)

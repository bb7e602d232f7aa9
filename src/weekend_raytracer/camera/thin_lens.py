"""Thin-lens camera model with depth of field.

The camera supports:
- Look-at positioning (lookfrom, lookat, vup)
- Vertical field of view in degrees
- Arbitrary aspect ratios
- Defocus blur through a circular aperture focused at focus_dist

The camera builds an orthonormal basis (u, v, w) from the view parameters:
- w: points from lookat toward lookfrom (opposite view direction)
- u: points right in the image plane
- v: points up in the image plane

The viewport is placed on the plane of perfect focus, focus_dist in front of
the camera. Rays start from a random point on the lens disk and pass through
the corresponding viewport point, so only geometry on the focus plane is
sharp. An aperture of 0 degenerates to a pinhole camera.

Example:
    >>> from weekend_raytracer.camera.thin_lens import ThinLensCamera, setup_camera
    >>> config = ThinLensCamera(
    ...     lookfrom=(13.0, 2.0, 3.0),
    ...     lookat=(0.0, 0.0, 0.0),
    ...     vup=(0.0, 1.0, 0.0),
    ...     vfov=20.0,
    ...     aspect_ratio=3.0 / 2.0,
    ...     aperture=0.1,
    ...     focus_dist=10.0,
    ... )
    >>> camera = setup_camera(config)
    >>> # ray = camera.get_ray(0.5, 0.5, rng)  # Ray through the image center
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from weekend_raytracer.core.ray import Ray, Vec3
from weekend_raytracer.core.sampling import random_in_unit_disk

if TYPE_CHECKING:
    import numpy.typing as npt

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass
class ThinLensCamera:
    """Configuration for a thin-lens (depth of field) camera.

    Attributes:
        lookfrom: Camera position in world space (x, y, z).
        lookat: Point the camera is looking at in world space (x, y, z).
        vup: Up direction vector for camera orientation (typically (0, 1, 0)).
        vfov: Vertical field of view in degrees, in (0, 180).
        aspect_ratio: Width divided by height of the output image.
        aperture: Lens diameter. 0 gives a pinhole camera.
        focus_dist: Distance from the lens to the plane of perfect focus.
    """

    lookfrom: tuple[float, float, float] = (0.0, 0.0, 0.0)
    lookat: tuple[float, float, float] = (0.0, 0.0, -1.0)
    vup: tuple[float, float, float] = (0.0, 1.0, 0.0)
    vfov: float = 90.0
    aspect_ratio: float = 16.0 / 9.0
    aperture: float = 0.0
    focus_dist: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"Vertical field of view = {self.vfov} must be in (0, 180) degrees")
        if self.aspect_ratio <= 0.0:
            raise ValueError(f"Aspect ratio = {self.aspect_ratio} must be positive")
        if self.aperture < 0.0:
            raise ValueError(f"Aperture = {self.aperture} must be non-negative")
        if self.focus_dist <= 0.0:
            raise ValueError(f"Focus distance = {self.focus_dist} must be positive")


@dataclass(frozen=True)
class Camera:
    """Derived, immutable camera state used for ray generation.

    Built once by setup_camera() and shared read-only by all render workers.

    Attributes:
        origin: Camera position (center of the lens).
        u: Right direction in world space.
        v: Up direction in world space.
        w: Backward direction (opposite the view direction).
        horizontal: Full viewport width vector on the focus plane.
        vertical: Full viewport height vector on the focus plane.
        lower_left_corner: Lower-left corner of the viewport.
        lens_radius: Half the aperture.
    """

    origin: Vec3
    u: Vec3
    v: Vec3
    w: Vec3
    horizontal: Vec3
    vertical: Vec3
    lower_left_corner: Vec3
    lens_radius: float

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generate a ray through normalized image coordinates (s, t).

        The coordinates are normalized:
        - s = 0: left edge of image, s = 1: right edge
        - t = 0: bottom edge of image, t = 1: top edge

        With a positive lens radius the origin is jittered on the lens disk;
        otherwise no random numbers are consumed.

        Args:
            s: Horizontal coordinate in [0, 1] (left to right).
            t: Vertical coordinate in [0, 1] (bottom to top).
            rng: The generator of the row being rendered.

        Returns:
            A Ray from the (possibly jittered) lens point toward the
            specified point on the focus plane.
        """
        origin = self.origin
        if self.lens_radius > 0.0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        return Ray(origin, target - origin)


# =============================================================================
# Camera Setup
# =============================================================================


def _as_array(values: tuple[float, float, float]) -> npt.NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


def _as_vec3(array: npt.NDArray[np.float64]) -> Vec3:
    x, y, z = array.tolist()
    return Vec3(x, y, z)


def setup_camera(config: ThinLensCamera) -> Camera:
    """Compute the camera basis and viewport from configuration.

    Args:
        config: Camera configuration with position, orientation, FOV and lens.

    Returns:
        The derived Camera.

    Raises:
        ValueError: If lookfrom equals lookat, or vup is parallel to the
            view direction (the basis would be degenerate).
    """
    theta = math.radians(config.vfov)
    h = math.tan(theta / 2.0)

    # Viewport dimensions at unit distance
    viewport_height = 2.0 * h
    viewport_width = config.aspect_ratio * viewport_height

    lookfrom = _as_array(config.lookfrom)
    lookat = _as_array(config.lookat)
    vup = _as_array(config.vup)

    # w points from lookat toward lookfrom (backward)
    w = lookfrom - lookat
    w_norm = np.linalg.norm(w)
    if w_norm == 0.0:
        raise ValueError("Camera lookfrom and lookat must be different points")
    w = w / w_norm

    # u points right (perpendicular to w and vup)
    u = np.cross(vup, w)
    u_norm = np.linalg.norm(u)
    if u_norm < 1e-12:
        raise ValueError("Camera vup must not be parallel to the view direction")
    u = u / u_norm

    # v points up in the camera's frame
    v = np.cross(w, u)

    # Viewport lies on the focus plane
    horizontal = config.focus_dist * viewport_width * u
    vertical = config.focus_dist * viewport_height * v
    lower_left = lookfrom - horizontal / 2.0 - vertical / 2.0 - config.focus_dist * w

    return Camera(
        origin=_as_vec3(lookfrom),
        u=_as_vec3(u),
        v=_as_vec3(v),
        w=_as_vec3(w),
        horizontal=_as_vec3(horizontal),
        vertical=_as_vec3(vertical),
        lower_left_corner=_as_vec3(lower_left),
        lens_radius=config.aperture / 2.0,
    )


# =============================================================================
# Utility Functions
# =============================================================================


def get_camera_info(camera: Camera) -> dict[str, tuple[float, float, float]]:
    """Get derived camera vectors for debugging.

    Returns:
        Dictionary with origin, u, v, w, horizontal, vertical, lower_left.
    """
    return {
        "origin": tuple(camera.origin),
        "u": tuple(camera.u),
        "v": tuple(camera.v),
        "w": tuple(camera.w),
        "horizontal": tuple(camera.horizontal),
        "vertical": tuple(camera.vertical),
        "lower_left": tuple(camera.lower_left_corner),
    }

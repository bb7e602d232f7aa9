"""Path tracing integrator for Monte Carlo light transport.

This module computes the color carried back along a single camera ray. Rays
bounce off surfaces according to their materials until they escape to the
sky, are absorbed, or exhaust the bounce budget.

Key features:
    - Material dispatch (Lambertian, Metal, Dielectric)
    - Hard bounce limit: a path still bouncing after ``depth`` scatters
      contributes black
    - Sky gradient from white to light blue as the only light source
    - Self-intersection avoidance with a small t_min
    - Normal visualization mode for debugging geometry

Example:
    >>> from weekend_raytracer.core.integrator import ray_color
    >>> from weekend_raytracer.core.sampling import make_row_rng
    >>> # color = ray_color(ray, scene, depth=50, rng=make_row_rng(0, row))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weekend_raytracer.core.ray import BLACK, WHITE, Ray, Vec3
from weekend_raytracer.materials.material import scatter

if TYPE_CHECKING:
    import numpy as np

    from weekend_raytracer.scene.intersection import Scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Maximum ray bounces (path length)
MAX_DEPTH = 50

# t_min avoids re-hitting the surface a ray just left
T_MIN = 0.001

# Default far bound; geometry beyond it is not seen and rays escape to the sky
T_MAX = 100.0

# Sky gradient endpoints
SKY_HORIZON_COLOR = WHITE
SKY_ZENITH_COLOR = Vec3(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Vec3:
    """Background color for a ray that escapes the scene.

    Linearly blends white and sky blue by the vertical component of the
    normalized ray direction.

    Args:
        ray: The escaping ray.

    Returns:
        The sky color seen along the ray.
    """
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON_COLOR * (1.0 - t) + SKY_ZENITH_COLOR * t


def ray_color(
    ray: Ray,
    scene: Scene,
    depth: int,
    rng: np.random.Generator,
    t_min: float = T_MIN,
    t_max: float = T_MAX,
) -> Vec3:
    """Trace a path through the scene and return its color.

    Equivalent to the recursive definition

        ray_color(r, d) = 0                                  if d <= 0
                        = attenuation * ray_color(scattered, d - 1)  on scatter
                        = 0                                  on absorption
                        = sky_color(r)                       on a miss

    evaluated as a loop that carries the product of attenuations.

    Args:
        ray: The ray to trace.
        scene: The scene to intersect.
        depth: Remaining bounce budget.
        rng: The generator of the row being rendered.
        t_min: Lower bound on accepted hit distances.
        t_max: Upper bound on accepted hit distances.

    Returns:
        The estimated color (RGB) for this path.
    """
    throughput = WHITE
    while depth > 0:
        record = scene.hit(ray, t_min, t_max)
        if record is None:
            return throughput * sky_color(ray)

        result = scatter(record.material, ray, record, rng)
        if result is None:
            # Ray was absorbed
            return BLACK

        throughput = throughput * result.attenuation
        ray = result.scattered
        depth -= 1

    return BLACK


def normal_color(
    ray: Ray,
    scene: Scene,
    t_min: float = T_MIN,
    t_max: float = T_MAX,
) -> Vec3:
    """Shade the first hit by its surface normal mapped from [-1, 1] to [0, 1].

    Misses show the sky gradient. Deterministic; no bounces are traced.
    """
    record = scene.hit(ray, t_min, t_max)
    if record is None:
        return sky_color(ray)
    return (record.normal + WHITE) * 0.5

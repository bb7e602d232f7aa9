"""Lambertian (ideal diffuse) material implementation.

A diffuse surface scatters incoming light in a random direction biased toward
the surface normal: the scattered direction is the normal plus a uniformly
sampled point inside the unit sphere. Light is attenuated by the albedo.

Example:
    >>> from weekend_raytracer.core.ray import Vec3
    >>> from weekend_raytracer.materials.lambertian import Lambertian
    >>> matte = Lambertian((0.8, 0.8, 0.0))
    >>> matte.albedo
    Vec3(x=0.8, y=0.8, z=0.0)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from weekend_raytracer.core.ray import Ray, ScatterResult, Vec3
from weekend_raytracer.core.sampling import random_in_unit_sphere

if TYPE_CHECKING:
    import numpy as np

    from weekend_raytracer.geometry.sphere import HitRecord


def validate_albedo(albedo: Sequence[float]) -> Vec3:
    """Coerce an albedo to Vec3 and check that every channel is in [0, 1].

    Raises:
        ValueError: If the albedo does not have three components or any
            component is outside [0, 1].
    """
    if len(albedo) != 3:
        raise ValueError(f"Albedo must have 3 components, got {len(albedo)}")
    for i, component in enumerate(albedo):
        if component < 0.0 or component > 1.0:
            raise ValueError(
                f"Albedo component {i} = {component} is outside [0, 1]. "
                "This would violate energy conservation."
            )
    return Vec3(float(albedo[0]), float(albedo[1]), float(albedo[2]))


@dataclass(frozen=True)
class Lambertian:
    """Lambertian (ideal diffuse) material properties.

    Attributes:
        albedo: The diffuse reflectance color (RGB, each component in [0, 1]).
    """

    albedo: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", validate_albedo(self.albedo))


def scatter_lambertian(
    material: Lambertian,
    ray_in: Ray,
    hit: HitRecord,
    rng: np.random.Generator,
) -> ScatterResult:
    """Scatter a ray off a diffuse surface.

    Diffuse surfaces always scatter. If the random offset nearly cancels the
    normal, the normal itself is used so the scattered ray never degenerates.

    Args:
        material: The Lambertian material that was hit.
        ray_in: The incoming ray (unused; diffuse scattering ignores it).
        hit: The intersection record.
        rng: The generator of the row being rendered.

    Returns:
        The albedo and the scattered ray leaving the hit point.
    """
    direction = hit.normal + random_in_unit_sphere(rng)
    if direction.near_zero():
        direction = hit.normal
    return ScatterResult(material.albedo, Ray(hit.point, direction))

"""Metal (specular reflective) material implementation.

This module implements the metal material, which models specular reflection
with optional fuzziness. Perfect metals (fuzz=0) produce mirror-like
reflections, while fuzzier metals perturb the reflected ray within a sphere
whose radius is the fuzz value.

The reflection formula is:
    R = I - 2(I . N)N

where I is the unit incident direction and N is the surface normal.

Example:
    >>> from weekend_raytracer.materials.metal import Metal
    >>> mirror = Metal((0.8, 0.8, 0.8), fuzz=0.0)
    >>> brushed = Metal((0.8, 0.6, 0.2), fuzz=0.3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weekend_raytracer.core.ray import Ray, ScatterResult, Vec3, reflect
from weekend_raytracer.core.sampling import random_in_unit_sphere
from weekend_raytracer.materials.lambertian import validate_albedo

if TYPE_CHECKING:
    import numpy as np

    from weekend_raytracer.geometry.sphere import HitRecord


@dataclass(frozen=True)
class Metal:
    """Metal (specular reflective) material properties.

    Attributes:
        albedo: The reflective color (RGB, each component in [0, 1]).
        fuzz: The reflection fuzziness in [0, 1].
            0 = perfect mirror, 1 = maximum fuzz.
    """

    albedo: Vec3
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", validate_albedo(self.albedo))
        if self.fuzz < 0.0 or self.fuzz > 1.0:
            raise ValueError(
                f"Fuzz = {self.fuzz} is outside [0, 1]. "
                "Fuzz must be between 0 (perfect mirror) and 1 (maximum fuzz)."
            )
        object.__setattr__(self, "fuzz", float(self.fuzz))


def scatter_metal(
    material: Metal,
    ray_in: Ray,
    hit: HitRecord,
    rng: np.random.Generator,
) -> ScatterResult | None:
    """Reflect a ray off a metal surface.

    The ray is absorbed if the fuzzed direction ends up at or below the
    surface. A perfect mirror (fuzz=0) consumes no random numbers.

    Args:
        material: The Metal material that was hit.
        ray_in: The incoming ray.
        hit: The intersection record.
        rng: The generator of the row being rendered.

    Returns:
        The albedo and the reflected ray, or None if the ray was absorbed.
    """
    reflected = reflect(ray_in.direction.unit(), hit.normal)
    if material.fuzz > 0.0:
        reflected = reflected + random_in_unit_sphere(rng) * material.fuzz

    if reflected.dot(hit.normal) <= 0.0:
        return None
    return ScatterResult(material.albedo, Ray(hit.point, reflected))

"""Material union type and scatter dispatch.

Materials form a closed set of immutable variants. ``scatter`` dispatches on
the variant with a ``match`` statement, so adding a variant without handling
it fails loudly instead of silently rendering black.

Materials are frozen dataclasses: a single instance may be attached to any
number of spheres and read concurrently from every render worker.

Example:
    >>> from weekend_raytracer.materials.material import Lambertian, Metal, scatter
    >>> ground = Lambertian((0.8, 0.8, 0.0))
    >>> # result = scatter(ground, ray, hit_record, rng)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from weekend_raytracer.core.ray import Ray, ScatterResult
from weekend_raytracer.materials.dielectric import Dielectric, scatter_dielectric
from weekend_raytracer.materials.lambertian import Lambertian, scatter_lambertian
from weekend_raytracer.materials.metal import Metal, scatter_metal

if TYPE_CHECKING:
    import numpy as np

    from weekend_raytracer.geometry.sphere import HitRecord

Material = Union[Lambertian, Metal, Dielectric]


def scatter(
    material: Material,
    ray_in: Ray,
    hit: HitRecord,
    rng: np.random.Generator,
) -> ScatterResult | None:
    """Scatter an incoming ray according to the hit material.

    Args:
        material: The material of the surface that was hit.
        ray_in: The incoming ray.
        hit: The intersection record.
        rng: The generator of the row being rendered.

    Returns:
        The attenuation and scattered ray, or None if the ray was absorbed.

    Raises:
        TypeError: If the material is not one of the supported variants.
    """
    match material:
        case Lambertian():
            return scatter_lambertian(material, ray_in, hit, rng)
        case Metal():
            return scatter_metal(material, ray_in, hit, rng)
        case Dielectric():
            return scatter_dielectric(material, ray_in, hit, rng)
        case _:
            raise TypeError(f"Unsupported material type: {type(material).__name__}")

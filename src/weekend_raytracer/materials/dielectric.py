"""Dielectric (glass/water) material implementation.

This module implements clear dielectrics that both reflect and refract.

Key physics:
    - Snell's law for refraction: n1 * sin(theta1) = n2 * sin(theta2)
    - Schlick's approximation for Fresnel reflectance
    - Total internal reflection when ratio * sin(theta) > 1

The material randomly chooses between reflection and refraction based on
the Fresnel reflectance, which increases toward grazing angles.

Example:
    >>> from weekend_raytracer.materials.dielectric import Dielectric
    >>> glass = Dielectric(1.5)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from weekend_raytracer.core.ray import WHITE, Ray, ScatterResult, reflect, refract, schlick_fresnel

if TYPE_CHECKING:
    import numpy as np

    from weekend_raytracer.geometry.sphere import HitRecord


@dataclass(frozen=True)
class Dielectric:
    """Dielectric (glass/water) material properties.

    Attributes:
        ir: Index of refraction. Common values:
            - Air: 1.0
            - Water: 1.33
            - Glass: 1.5
            - Diamond: 2.4
    """

    ir: float = 1.5

    def __post_init__(self) -> None:
        if not self.ir > 0.0 or not math.isfinite(self.ir):
            raise ValueError(
                f"Index of refraction = {self.ir} is invalid. "
                "It must be a finite positive number."
            )
        object.__setattr__(self, "ir", float(self.ir))


def refraction_ratio(material: Dielectric, front_face: bool) -> float:
    """Ratio n_incident / n_transmitted for a ray hitting the given face.

    Entering the material from outside (front face) gives 1/ir; leaving it
    from inside gives ir.
    """
    return 1.0 / material.ir if front_face else material.ir


def will_reflect(cos_theta: float, ratio: float) -> bool:
    """Check whether refraction is impossible (total internal reflection)."""
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    return ratio * sin_theta > 1.0


def scatter_dielectric(
    material: Dielectric,
    ray_in: Ray,
    hit: HitRecord,
    rng: np.random.Generator,
) -> ScatterResult:
    """Reflect or refract a ray through a dielectric surface.

    Dielectrics never absorb: attenuation is always white. One uniform draw
    is taken per scatter and compared against the Schlick reflectance.

    Args:
        material: The Dielectric material that was hit.
        ray_in: The incoming ray.
        hit: The intersection record (front_face selects the ratio).
        rng: The generator of the row being rendered.

    Returns:
        White attenuation and the reflected or refracted ray.
    """
    ratio = refraction_ratio(material, hit.front_face)
    unit_direction = ray_in.direction.unit()
    cos_theta = min(-unit_direction.dot(hit.normal), 1.0)

    cannot_refract = will_reflect(cos_theta, ratio)
    draw = float(rng.random())
    if cannot_refract or draw < schlick_fresnel(cos_theta, ratio):
        direction = reflect(unit_direction, hit.normal)
    else:
        direction = refract(unit_direction, hit.normal, ratio)

    return ScatterResult(WHITE, Ray(hit.point, direction))

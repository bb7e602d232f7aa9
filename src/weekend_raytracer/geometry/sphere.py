"""Sphere primitive with ray-sphere intersection.

This module provides the Sphere dataclass, the HitRecord produced by an
intersection, and the half-b quadratic intersection test.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = radius^2

which expands to a*t^2 + 2*half_b*t + c = 0 with
    a = dot(direction, direction)
    half_b = dot(direction, origin - center)
    c = |origin - center|^2 - radius^2

A negative radius is allowed: the outward normal flips, which turns a sphere
into a hollow shell when nested inside a positive sphere of the same
dielectric material.

Example:
    >>> from weekend_raytracer.core.ray import Ray, Vec3
    >>> from weekend_raytracer.geometry.sphere import Sphere, hit_sphere
    >>> from weekend_raytracer.materials.lambertian import Lambertian
    >>> sphere = Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.5, 0.5, 0.5)))
    >>> record = hit_sphere(sphere, Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, 100.0)
    >>> record.t
    0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from weekend_raytracer.core.ray import Ray, Vec3

if TYPE_CHECKING:
    from weekend_raytracer.materials.material import Material

# Squared direction lengths below this cannot be intersected reliably
MIN_DIRECTION_LENGTH_SQUARED = 1e-16


class HitRecord:
    """Record of a ray-surface intersection.

    Attributes:
        point: The 3D point where the ray intersected the surface.
        normal: The surface normal at the hit point (unit length). Always
            oriented against the incoming ray.
        t: The ray parameter of the intersection.
        front_face: True if the ray hit the outside of the surface.
        material: The material of the primitive that was hit.
    """

    __slots__ = ("point", "normal", "t", "front_face", "material")

    def __init__(
        self,
        point: Vec3,
        normal: Vec3,
        t: float,
        front_face: bool,
        material: Material,
    ) -> None:
        self.point = point
        self.normal = normal
        self.t = t
        self.front_face = front_face
        self.material = material

    @classmethod
    def from_outward_normal(
        cls,
        ray: Ray,
        point: Vec3,
        outward_normal: Vec3,
        t: float,
        material: Material,
    ) -> HitRecord:
        """Build a record, flipping the outward normal to oppose the ray."""
        front_face = ray.direction.dot(outward_normal) < 0.0
        normal = outward_normal if front_face else -outward_normal
        return cls(point, normal, t, front_face, material)

    def __repr__(self) -> str:
        return (
            f"HitRecord(t={self.t}, point={tuple(self.point)}, "
            f"normal={tuple(self.normal)}, front_face={self.front_face})"
        )


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and material.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere. Negative values invert the normal
            (hollow shell); zero is rejected.
        material: The material shared with any number of other spheres.
    """

    center: Vec3
    radius: float
    material: Material

    def __post_init__(self) -> None:
        if self.radius == 0.0 or not math.isfinite(self.radius):
            raise ValueError(
                f"Sphere radius = {self.radius} is invalid. "
                "Radius must be finite and non-zero (negative radii make hollow shells)."
            )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test the ray against this sphere; see hit_sphere()."""
        return hit_sphere(self, ray, t_min, t_max)


def hit_sphere(sphere: Sphere, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
    """Test for ray-sphere intersection.

    The nearer root is tried first and accepted if it lies in
    (t_min, t_max]; otherwise the farther root is tried.

    Args:
        sphere: The sphere to test intersection against.
        ray: The ray (direction need not be normalized).
        t_min: Lower bound (exclusive), avoids self-intersection.
        t_max: Upper bound (inclusive), usually the closest hit so far.

    Returns:
        A HitRecord for the accepted root, or None if there is no hit. A ray
        with a near-zero direction never hits.
    """
    oc = ray.origin - sphere.center
    direction = ray.direction
    a = direction.length_squared()
    if a < MIN_DIRECTION_LENGTH_SQUARED:
        return None

    half_b = oc.dot(direction)
    c = oc.length_squared() - sphere.radius * sphere.radius
    discriminant = half_b * half_b - a * c
    if discriminant < 0.0:
        return None

    sqrt_d = math.sqrt(discriminant)

    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_d) / a
    if root <= t_min or root > t_max:
        root = (-half_b + sqrt_d) / a
        if root <= t_min or root > t_max:
            return None

    point = ray.at(root)
    outward_normal = (point - sphere.center) / sphere.radius
    return HitRecord.from_outward_normal(ray, point, outward_normal, root, sphere.material)

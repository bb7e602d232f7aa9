"""Scene-level ray intersection testing.

The Scene is a flat, ordered list of spheres scanned linearly for every query.
It is built once by the caller and then only read while rendering, so a single
instance is pickled unchanged to every render worker.

Example:
    >>> from weekend_raytracer.core.ray import Ray, Vec3
    >>> from weekend_raytracer.materials.lambertian import Lambertian
    >>> from weekend_raytracer.scene.intersection import Scene
    >>> scene = Scene()
    >>> grey = Lambertian(Vec3(0.5, 0.5, 0.5))
    >>> scene.add_sphere(Vec3(0, 0, -1), 0.5, grey)
    0
    >>> scene.add_sphere(Vec3(0, -100.5, -1), 100, grey)
    1
    >>> scene.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, 100.0).t
    0.5
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from weekend_raytracer.core.ray import Ray, Vec3
from weekend_raytracer.geometry.sphere import HitRecord, Sphere, hit_sphere

if TYPE_CHECKING:
    from weekend_raytracer.materials.material import Material


class Scene:
    """An ordered aggregate of spheres returning the nearest hit.

    Attributes:
        objects: The spheres in insertion order.
    """

    def __init__(self, objects: Iterable[Sphere] = ()) -> None:
        self.objects: list[Sphere] = list(objects)

    def add(self, sphere: Sphere) -> int:
        """Append a sphere to the scene.

        Returns:
            The index of the added sphere.
        """
        self.objects.append(sphere)
        return len(self.objects) - 1

    def add_sphere(self, center: Vec3, radius: float, material: Material) -> int:
        """Create a sphere and append it to the scene.

        Args:
            center: The center point of the sphere.
            radius: The radius (negative for a hollow shell).
            material: The material, which may be shared with other spheres.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If the radius is zero or not finite.
        """
        return self.add(Sphere(Vec3(*map(float, center)), float(radius), material))

    def clear(self) -> None:
        """Remove all spheres."""
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Find the closest intersection along the ray.

        Each accepted hit shrinks the upper bound, so later objects can only
        win with a strictly closer t. Equal distances resolve to the object
        that was added first.

        Args:
            ray: The ray to test.
            t_min: Lower bound (exclusive) on the ray parameter.
            t_max: Upper bound (inclusive) on the ray parameter.

        Returns:
            The nearest HitRecord, or None if nothing was hit.
        """
        closest: HitRecord | None = None
        closest_so_far = t_max
        for sphere in self.objects:
            record = hit_sphere(sphere, ray, t_min, closest_so_far)
            if record is not None and (closest is None or record.t < closest.t):
                closest = record
                closest_so_far = record.t
        return closest

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"Scene(spheres={len(self.objects)})"

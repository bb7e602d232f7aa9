"""Ray data structure and vector utilities for CPU ray tracing.

This module provides the fundamental Vec3 value type, the Ray class and the
vector helpers (reflection, refraction, Fresnel) shared by the geometry,
material and camera modules. Everything here is pure and immutable so it can
be shared freely between render workers.

Example:
    >>> from weekend_raytracer.core.ray import Ray, Vec3
    >>> origin = Vec3(0.0, 0.0, 0.0)
    >>> direction = Vec3(0.0, 0.0, -1.0)
    >>> ray = Ray(origin, direction)
    >>> ray.at(5.0)  # Point 5 units along the ray
    Vec3(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

import math
from typing import NamedTuple

# Components below this magnitude are treated as zero
NEAR_ZERO_EPSILON = 1e-8


class Vec3(NamedTuple):
    """Immutable 3-component vector used for points, directions and colors.

    Arithmetic is component-wise. Multiplying two vectors gives the
    component-wise (Hadamard) product, which is how colors are attenuated.
    """

    x: float
    y: float
    z: float

    # numpy operators return NotImplemented so np.float64 * Vec3 uses __rmul__
    __array_ufunc__ = None

    def __add__(self, other: Vec3) -> Vec3:  # type: ignore[override]
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:  # type: ignore[override]
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vec3:  # type: ignore[override]
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, t: float) -> Vec3:
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Compute the cross product self x other."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        """Squared Euclidean length (avoids the square root)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def unit(self) -> Vec3:
        """Return the vector scaled to unit length.

        A zero-length vector is returned unchanged rather than producing NaN.
        """
        n = self.length()
        if n == 0.0:
            return self
        return Vec3(self.x / n, self.y / n, self.z / n)

    def near_zero(self) -> bool:
        """Check whether every component is within NEAR_ZERO_EPSILON of zero."""
        s = NEAR_ZERO_EPSILON
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s


# Convenience constructors and constants
def vec3(x: float, y: float, z: float) -> Vec3:
    """Build a Vec3 from three numbers, coercing them to float."""
    return Vec3(float(x), float(y), float(z))


ZERO = Vec3(0.0, 0.0, 0.0)
WHITE = Vec3(1.0, 1.0, 1.0)
BLACK = ZERO


class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length; intersection and scattering code normalizes where needed.
    """

    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vec3, direction: Vec3) -> None:
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vec3:
        """Compute the point origin + t * direction."""
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={tuple(self.origin)}, direction={tuple(self.direction)})"


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product of two vectors."""
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product of two vectors."""
    return a.cross(b)


def unit_vector(v: Vec3) -> Vec3:
    """Normalize a vector to unit length."""
    return v.unit()


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Reflect an incident vector about a normal.

    Computes R = I - 2(I . N)N. The normal should be unit length.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - normal * (2.0 * incident.dot(normal))


def refract(incident: Vec3, normal: Vec3, eta: float) -> Vec3:
    """Refract a unit incident vector through a surface using Snell's law.

    The perpendicular and parallel components of the transmitted direction
    are computed separately. The caller is responsible for checking total
    internal reflection first.

    Args:
        incident: The incoming direction (unit length).
        normal: The surface normal facing the incident ray (unit length).
        eta: The ratio of refractive indices (n_incident / n_transmitted).

    Returns:
        The refracted direction vector.
    """
    cos_theta = min(-incident.dot(normal), 1.0)
    r_out_perp = (incident + normal * cos_theta) * eta
    r_out_parallel = normal * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick_fresnel(cosine: float, ref_idx: float) -> float:
    """Compute Fresnel reflectance using Schlick's approximation.

    Args:
        cosine: Cosine of the angle between incident direction and normal.
        ref_idx: Refractive index (or ratio of indices; r0 is symmetric
            under inversion).

    Returns:
        The approximate Fresnel reflectance coefficient.
    """
    r0 = ((1.0 - ref_idx) / (1.0 + ref_idx)) ** 2
    return r0 + (1.0 - r0) * ((1.0 - cosine) ** 5)


class ScatterResult(NamedTuple):
    """Outcome of a successful material scatter.

    Attributes:
        attenuation: Color multiplier applied to light arriving along
            ``scattered``.
        scattered: The continuation ray leaving the surface.
    """

    attenuation: Vec3
    scattered: Ray

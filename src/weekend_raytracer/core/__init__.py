"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Vec3 value type, Ray, and vector utilities
    sampling: Random number generation keyed by image row
    integrator: Light transport (path tracing with a sky light)
    image: Pixel buffer and final color resolution
    renderer: Row-parallel scheduling over a fixed process pool
"""

from .ray import (
    BLACK,
    WHITE,
    ZERO,
    Ray,
    ScatterResult,
    Vec3,
    cross,
    dot,
    reflect,
    refract,
    schlick_fresnel,
    unit_vector,
    vec3,
)
from .sampling import (
    make_row_rng,
    random_color,
    random_double,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
)

# Note: integrator, image and renderer are NOT imported here to avoid circular
# imports with the materials package. Import them directly, e.g.
#   from weekend_raytracer.core.renderer import Renderer, RenderSettings

__all__ = [
    "Vec3",
    "vec3",
    "Ray",
    "ScatterResult",
    "ZERO",
    "BLACK",
    "WHITE",
    "dot",
    "cross",
    "unit_vector",
    "reflect",
    "refract",
    "schlick_fresnel",
    "make_row_rng",
    "random_double",
    "random_color",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_in_unit_disk",
]

"""Materials module for light scattering.

This module implements the material models used by the path tracer:

Components:
    lambertian: Ideal diffuse reflection
    metal: Specular reflection with optional fuzz
    dielectric: Glass-like materials with refraction (Schlick Fresnel)
    material: Material union type and scatter dispatch

Each material provides a ``scatter_*`` function returning either a
ScatterResult (attenuation, scattered ray) or None when the ray is absorbed.
"""

from .dielectric import (
    Dielectric,
    refraction_ratio,
    scatter_dielectric,
    will_reflect,
)
from .lambertian import (
    Lambertian,
    scatter_lambertian,
    validate_albedo,
)
from .material import (
    Material,
    scatter,
)
from .metal import (
    Metal,
    scatter_metal,
)

__all__ = [
    # Lambertian
    "Lambertian",
    "scatter_lambertian",
    "validate_albedo",
    # Metal
    "Metal",
    "scatter_metal",
    # Dielectric
    "Dielectric",
    "scatter_dielectric",
    "refraction_ratio",
    "will_reflect",
    # Dispatch
    "Material",
    "scatter",
]

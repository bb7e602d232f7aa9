"""Geometry module for shape primitives.

This module provides geometric primitives and intersection algorithms:

Components:
    sphere: Sphere primitive with ray-sphere intersection and hit records

Ray-object intersection follows the pattern:
    record = hit_sphere(sphere, ray, t_min, t_max)  # HitRecord or None
"""

from .sphere import HitRecord, Sphere, hit_sphere

__all__ = [
    "Sphere",
    "HitRecord",
    "hit_sphere",
]

"""Scene module for scene management and demo scenes.

This module handles scene representation and ray-scene queries:

Components:
    intersection: Scene container returning the nearest hit
    demo: Ready-made scenes with matching camera configurations

Scenes are plain ordered lists of spheres. There is no acceleration
structure; every query scans every sphere.
"""

from .demo import (
    SCENES,
    get_scene_factory,
    random_scene,
    three_spheres_scene,
)
from .intersection import Scene

__all__ = [
    # Intersection module
    "Scene",
    # Demo scenes
    "SCENES",
    "get_scene_factory",
    "random_scene",
    "three_spheres_scene",
]

"""Demo scene configurations.

This module provides factory functions for ready-made scenes. Each factory
returns the scene together with a matching camera configuration:

- ``three_spheres_scene``: a diffuse ball flanked by a hollow glass ball and a
  metal ball, resting on a large diffuse ground sphere, viewed through a wide
  aperture so the defocus blur is visible.
- ``random_scene``: the classic cover image with a field of small random
  spheres and three large feature spheres.

Example:
    >>> from weekend_raytracer.camera.thin_lens import setup_camera
    >>> from weekend_raytracer.scene.demo import random_scene
    >>>
    >>> scene, camera_config = random_scene(seed=7)
    >>> camera = setup_camera(camera_config)
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from weekend_raytracer.camera.thin_lens import ThinLensCamera
from weekend_raytracer.core.ray import Vec3
from weekend_raytracer.core.sampling import random_color, random_double
from weekend_raytracer.materials.dielectric import Dielectric
from weekend_raytracer.materials.lambertian import Lambertian
from weekend_raytracer.materials.metal import Metal
from weekend_raytracer.scene.intersection import Scene

# Type alias for scene factories
# Every factory accepts (seed, aspect_ratio) keywords
SceneFactory = Callable[..., tuple[Scene, ThinLensCamera]]

# Glass index used by every demo dielectric
GLASS_IR = 1.5


def three_spheres_scene(seed: int = 0, aspect_ratio: float = 16.0 / 9.0) -> tuple[Scene, ThinLensCamera]:
    """Create the three-sphere scene.

    The left ball is a hollow glass shell: an outer sphere of radius 0.5 and
    an inner sphere of radius -0.45 sharing the same dielectric.

    Args:
        seed: Unused; the layout is fixed. Accepted so every factory in
            SCENES can be called the same way.
        aspect_ratio: Width divided by height of the output image.

    Returns:
        Tuple of (scene, camera configuration).
    """
    ground = Lambertian((0.8, 0.8, 0.0))
    center = Lambertian((0.1, 0.2, 0.5))
    glass = Dielectric(GLASS_IR)
    gold = Metal((0.8, 0.6, 0.2), fuzz=0.0)

    scene = Scene()
    scene.add_sphere(Vec3(0.0, -100.5, -1.0), 100.0, ground)
    scene.add_sphere(Vec3(0.0, 0.0, -1.0), 0.5, center)
    scene.add_sphere(Vec3(-1.0, 0.0, -1.0), 0.5, glass)
    scene.add_sphere(Vec3(-1.0, 0.0, -1.0), -0.45, glass)
    scene.add_sphere(Vec3(1.0, 0.0, -1.0), 0.5, gold)

    lookfrom = (3.0, 3.0, 2.0)
    lookat = (0.0, 0.0, -1.0)
    focus_dist = (Vec3(*lookfrom) - Vec3(*lookat)).length()
    camera = ThinLensCamera(
        lookfrom=lookfrom,
        lookat=lookat,
        vup=(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=2.0,
        focus_dist=focus_dist,
    )
    return scene, camera


def random_scene(seed: int = 0, aspect_ratio: float = 3.0 / 2.0) -> tuple[Scene, ThinLensCamera]:
    """Create the random-spheres cover scene.

    Small spheres are placed on a jittered 22 x 22 grid. Each picks a
    material at random: 80% diffuse, 15% metal, 5% glass. Spheres that would
    overlap the large metal ball are skipped.

    Args:
        seed: Seed for scene generation (independent of the render seed).
        aspect_ratio: Width divided by height of the output image.

    Returns:
        Tuple of (scene, camera configuration).
    """
    rng = np.random.default_rng(seed)
    scene = Scene()

    scene.add_sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian((0.5, 0.5, 0.5)))

    clearance_point = Vec3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double(rng)
            center = Vec3(a + 0.9 * random_double(rng), 0.2, b + 0.9 * random_double(rng))
            if (center - clearance_point).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_color(rng) * random_color(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                albedo = random_color(rng, 0.5, 1.0)
                fuzz = random_double(rng, 0.0, 0.5)
                material = Metal(albedo, fuzz)
            else:
                # glass
                material = Dielectric(GLASS_IR)
            scene.add_sphere(center, 0.2, material)

    scene.add_sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(GLASS_IR))
    scene.add_sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian((0.4, 0.2, 0.1)))
    scene.add_sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal((0.7, 0.6, 0.5), 0.0))

    camera = ThinLensCamera(
        lookfrom=(13.0, 2.0, 3.0),
        lookat=(0.0, 0.0, 0.0),
        vup=(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )
    return scene, camera


SCENES: dict[str, SceneFactory] = {
    "random": random_scene,
    "three-spheres": three_spheres_scene,
}


def get_scene_factory(name: str) -> SceneFactory:
    """Look up a scene factory by name.

    Raises:
        ValueError: If no scene with that name exists.
    """
    try:
        return SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; expected one of {sorted(SCENES)}") from None

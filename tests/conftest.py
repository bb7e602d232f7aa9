"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: seeded
generators, stand-in generators with scripted draws, and small scenes.
"""

import numpy as np
import pytest


class FixedRandom:
    """Stand-in generator whose uniform draws all map to the same value.

    ``random()`` returns ``value``; ``uniform(low, high)`` returns
    ``low + (high - low) * value``. With the default 0.5 every point sampled
    inside the unit sphere or disk is the origin.
    """

    def __init__(self, value: float = 0.5) -> None:
        self.value = value

    def random(self, size=None):
        if size is None:
            return self.value
        return np.full(size, self.value)

    def uniform(self, low=0.0, high=1.0, size=None):
        v = low + (high - low) * self.value
        if size is None:
            return v
        return np.full(size, v)


class ScriptedRandom(FixedRandom):
    """Stand-in generator returning scripted vectors from ``uniform``.

    Each call to ``uniform`` pops the next scripted vector, so rejection
    sampling loops receive exactly the points a test wants.
    """

    def __init__(self, uniform_draws, value: float = 0.5) -> None:
        super().__init__(value)
        self._draws = [np.asarray(d, dtype=np.float64) for d in uniform_draws]

    def uniform(self, low=0.0, high=1.0, size=None):
        return self._draws.pop(0)


@pytest.fixture
def rng():
    """A seeded generator for reproducible sampling tests."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_rng():
    """A generator stand-in whose draws are all 0.5."""
    return FixedRandom(0.5)


@pytest.fixture
def make_fixed_rng():
    """Factory for FixedRandom with a chosen draw value."""
    return FixedRandom


@pytest.fixture
def make_scripted_rng():
    """Factory for ScriptedRandom with scripted unit-sphere points."""
    return ScriptedRandom


@pytest.fixture
def grey():
    """A mid-grey Lambertian material."""
    from weekend_raytracer.materials.lambertian import Lambertian

    return Lambertian((0.5, 0.5, 0.5))


@pytest.fixture
def single_sphere_scene(grey):
    """A scene with one grey sphere of radius 0.5 at (0, 0, -1)."""
    from weekend_raytracer.core.ray import Vec3
    from weekend_raytracer.scene.intersection import Scene

    scene = Scene()
    scene.add_sphere(Vec3(0.0, 0.0, -1.0), 0.5, grey)
    return scene


@pytest.fixture
def pinhole_camera():
    """A square 90 degree pinhole camera at the origin looking down -z."""
    from weekend_raytracer.camera.thin_lens import ThinLensCamera, setup_camera

    config = ThinLensCamera(
        lookfrom=(0.0, 0.0, 0.0),
        lookat=(0.0, 0.0, -1.0),
        vup=(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=1.0,
        aperture=0.0,
        focus_dist=1.0,
    )
    return setup_camera(config)

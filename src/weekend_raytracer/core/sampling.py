"""Random sampling utilities for Monte Carlo integration.

Every function takes the random generator explicitly. The renderer creates
one ``numpy.random.Generator`` per image row, seeded from ``(seed, row)``,
so no generator is ever shared between workers and renders are reproducible
regardless of how rows are distributed across workers.

Example:
    >>> from weekend_raytracer.core.sampling import make_row_rng, random_in_unit_sphere
    >>> rng = make_row_rng(seed=42, row=0)
    >>> p = random_in_unit_sphere(rng)
    >>> p.length_squared() < 1.0
    True
"""

import numpy as np

from weekend_raytracer.core.ray import Vec3


def make_row_rng(seed: int, row: int) -> np.random.Generator:
    """Create the generator that owns all randomness for one image row.

    The stream depends only on ``(seed, row)``.

    Args:
        seed: Global render seed.
        row: Internal row index (0 = bottom of the viewport).

    Returns:
        A fresh PCG64-backed generator.
    """
    return np.random.default_rng(np.random.SeedSequence([seed, row]))


def random_double(rng: np.random.Generator, low: float = 0.0, high: float = 1.0) -> float:
    """Draw a uniform float in [low, high)."""
    return low + (high - low) * float(rng.random())


def random_in_unit_sphere(rng: np.random.Generator) -> Vec3:
    """Generate a random point inside the unit sphere by rejection sampling.

    Returns:
        A point with length strictly less than 1.
    """
    while True:
        x, y, z = rng.uniform(-1.0, 1.0, 3).tolist()
        if x * x + y * y + z * z < 1.0:
            return Vec3(x, y, z)


def random_unit_vector(rng: np.random.Generator) -> Vec3:
    """Generate a random unit vector uniformly distributed on the sphere."""
    return random_in_unit_sphere(rng).unit()


def random_in_unit_disk(rng: np.random.Generator) -> Vec3:
    """Generate a random point inside the unit disk in the xy-plane.

    Used by the thin-lens camera to jitter ray origins across the aperture.

    Returns:
        A point (x, y, 0) with x^2 + y^2 < 1.
    """
    while True:
        x, y = rng.uniform(-1.0, 1.0, 2).tolist()
        if x * x + y * y < 1.0:
            return Vec3(x, y, 0.0)


def random_color(rng: np.random.Generator, low: float = 0.0, high: float = 1.0) -> Vec3:
    """Draw a color with each channel uniform in [low, high)."""
    r, g, b = rng.uniform(low, high, 3).tolist()
    return Vec3(r, g, b)

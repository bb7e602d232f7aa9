"""Unit tests for the path tracing integrator.

Tests cover:
- Sky gradient for escaping rays
- Bounce budget exhaustion
- Absorption and attenuation along a path
- Far-bound clipping
- Normal visualization
"""

import pytest


class TestSkyColor:
    """Tests for the background gradient."""

    def test_straight_up_is_sky_blue(self):
        """Test the zenith color."""
        from weekend_raytracer.core.integrator import sky_color
        from weekend_raytracer.core.ray import Ray, Vec3

        color = sky_color(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 5.0, 0.0)))
        assert color == Vec3(0.5, 0.7, 1.0)

    def test_straight_down_is_white(self):
        """Test the nadir color."""
        from weekend_raytracer.core.integrator import sky_color
        from weekend_raytracer.core.ray import WHITE, Ray, Vec3

        assert sky_color(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, -1.0, 0.0))) == WHITE

    def test_horizon_is_halfway(self):
        """Test a horizontal ray blends both colors equally."""
        from weekend_raytracer.core.integrator import sky_color
        from weekend_raytracer.core.ray import Ray, Vec3

        color = sky_color(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0)))
        assert color.x == pytest.approx(0.75)
        assert color.y == pytest.approx(0.85)
        assert color.z == pytest.approx(1.0)


class TestRayColor:
    """Tests for ray_color."""

    def test_zero_depth_is_black(self, fixed_rng):
        """Test that no bounce budget means no light, even for a miss."""
        from weekend_raytracer.core.integrator import ray_color
        from weekend_raytracer.core.ray import BLACK, Ray, Vec3
        from weekend_raytracer.scene.intersection import Scene

        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
        assert ray_color(ray, Scene(), 0, fixed_rng) == BLACK

    def test_miss_returns_sky(self, fixed_rng):
        """Test that an escaping ray returns the sky gradient."""
        from weekend_raytracer.core.integrator import ray_color, sky_color
        from weekend_raytracer.core.ray import Ray, Vec3
        from weekend_raytracer.scene.intersection import Scene

        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.3, 0.4, -1.0))
        assert ray_color(ray, Scene(), 50, fixed_rng) == sky_color(ray)

    def test_single_diffuse_bounce_attenuates_sky(self, fixed_rng):
        """Test one bounce off a grey ground: half the zenith color."""
        from weekend_raytracer.core.integrator import ray_color
        from weekend_raytracer.core.ray import Ray, Vec3
        from weekend_raytracer.materials.lambertian import Lambertian
        from weekend_raytracer.scene.intersection import Scene

        scene = Scene()
        scene.add_sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian((0.5, 0.5, 0.5)))
        ray = Ray(Vec3(0.0, 1.0, 0.0), Vec3(0.0, -1.0, 0.0))

        # The fixed generator scatters exactly along the normal (straight up)
        color = ray_color(ray, scene, 50, fixed_rng)

        assert color.x == pytest.approx(0.25)
        assert color.y == pytest.approx(0.35)
        assert color.z == pytest.approx(0.5)

    def test_budget_exhausted_after_hit_is_black(self, single_sphere_scene, fixed_rng):
        """Test that a path still bouncing when the budget runs out is black."""
        from weekend_raytracer.core.integrator import ray_color
        from weekend_raytracer.core.ray import BLACK, Ray, Vec3

        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
        assert ray_color(ray, single_sphere_scene, 1, fixed_rng) == BLACK

    def test_black_albedo_absorbs_everything(self, rng):
        """Test that a zero-albedo surface renders black."""
        from weekend_raytracer.core.integrator import ray_color
        from weekend_raytracer.core.ray import BLACK, Ray, Vec3
        from weekend_raytracer.materials.lambertian import Lambertian
        from weekend_raytracer.scene.intersection import Scene

        scene = Scene()
        scene.add_sphere(Vec3(0.0, 0.0, -1.0), 0.5, Lambertian((0.0, 0.0, 0.0)))
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))

        for _ in range(10):
            assert ray_color(ray, scene, 50, rng) == BLACK

    def test_enclosing_mirror_never_escapes(self):
        """Test that a ray trapped inside a perfect mirror sphere ends black."""
        from weekend_raytracer.core.integrator import ray_color
        from weekend_raytracer.core.ray import BLACK, Ray, Vec3
        from weekend_raytracer.materials.metal import Metal
        from weekend_raytracer.scene.intersection import Scene

        scene = Scene()
        scene.add_sphere(Vec3(0.0, 0.0, 0.0), 10.0, Metal((1.0, 1.0, 1.0), 0.0))
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))

        # A perfect mirror draws no random numbers
        assert ray_color(ray, scene, 5, None) == BLACK

    def test_geometry_beyond_t_max_is_invisible(self, fixed_rng):
        """Test that spheres past the far bound show the sky instead."""
        from weekend_raytracer.core.integrator import T_MAX, ray_color, sky_color
        from weekend_raytracer.core.ray import BLACK, Ray, Vec3
        from weekend_raytracer.materials.lambertian import Lambertian
        from weekend_raytracer.scene.intersection import Scene

        scene = Scene()
        scene.add_sphere(Vec3(0.0, 0.0, -200.0), 1.0, Lambertian((0.0, 0.0, 0.0)))
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))

        assert T_MAX == 100.0
        assert ray_color(ray, scene, 50, fixed_rng) == sky_color(ray)
        assert ray_color(ray, scene, 50, fixed_rng, t_max=1000.0) == BLACK


class TestNormalColor:
    """Tests for normal visualization."""

    def test_facing_normal_is_blue(self, single_sphere_scene):
        """Test that a normal pointing at the camera maps to (0.5, 0.5, 1)."""
        from weekend_raytracer.core.integrator import normal_color
        from weekend_raytracer.core.ray import Ray, Vec3

        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
        assert normal_color(ray, single_sphere_scene) == Vec3(0.5, 0.5, 1.0)

    def test_miss_shows_sky(self, single_sphere_scene):
        """Test that a miss falls back to the sky gradient."""
        from weekend_raytracer.core.integrator import normal_color, sky_color
        from weekend_raytracer.core.ray import Ray, Vec3

        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
        assert normal_color(ray, single_sphere_scene) == sky_color(ray)

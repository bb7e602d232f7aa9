"""Unit tests for Vec3, Ray and vector utilities.

Tests cover:
- Vec3 arithmetic (component-wise and scalar)
- Dot and cross products, length, normalization
- Ray point evaluation
- Reflection, refraction and Schlick reflectance
"""

import math

import numpy as np

import pytest


class TestVec3:
    """Tests for the Vec3 value type."""

    def test_addition_and_subtraction(self):
        """Test component-wise addition and subtraction."""
        from weekend_raytracer.core.ray import Vec3

        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(0.5, -1.0, 2.0)
        assert a + b == Vec3(1.5, 1.0, 5.0)
        assert a - b == Vec3(0.5, 3.0, 1.0)

    def test_scalar_multiplication_both_sides(self):
        """Test scaling by a number on either side."""
        from weekend_raytracer.core.ray import Vec3

        v = Vec3(1.0, -2.0, 0.5)
        assert v * 2.0 == Vec3(2.0, -4.0, 1.0)
        assert 2.0 * v == Vec3(2.0, -4.0, 1.0)
        assert v / 2.0 == Vec3(0.5, -1.0, 0.25)

    def test_numpy_scalar_times_vector_stays_vec3(self):
        """Test that numpy scalars on the left scale the vector."""
        from weekend_raytracer.core.ray import Vec3

        scaled = np.float64(2.0) * Vec3(1.0, 2.0, 3.0)

        assert isinstance(scaled, Vec3)
        assert scaled == Vec3(2.0, 4.0, 6.0)
        assert isinstance(Vec3(1.0, 2.0, 3.0) * np.float64(0.5), Vec3)

    def test_vector_multiplication_is_component_wise(self):
        """Test that multiplying two vectors attenuates per channel."""
        from weekend_raytracer.core.ray import Vec3

        color = Vec3(0.5, 0.5, 1.0)
        albedo = Vec3(0.2, 1.0, 0.0)
        assert color * albedo == Vec3(0.1, 0.5, 0.0)

    def test_negation(self):
        """Test unary negation."""
        from weekend_raytracer.core.ray import Vec3

        assert -Vec3(1.0, -2.0, 3.0) == Vec3(-1.0, 2.0, -3.0)

    def test_dot_and_cross(self):
        """Test dot and cross products of basis vectors."""
        from weekend_raytracer.core.ray import Vec3, cross, dot

        x = Vec3(1.0, 0.0, 0.0)
        y = Vec3(0.0, 1.0, 0.0)
        assert dot(x, y) == 0.0
        assert dot(x, x) == 1.0
        assert cross(x, y) == Vec3(0.0, 0.0, 1.0)
        assert cross(y, x) == Vec3(0.0, 0.0, -1.0)

    def test_length_and_unit(self):
        """Test length and normalization."""
        from weekend_raytracer.core.ray import Vec3

        v = Vec3(3.0, 4.0, 0.0)
        assert v.length_squared() == 25.0
        assert v.length() == 5.0
        unit = v.unit()
        assert unit.x == pytest.approx(0.6)
        assert unit.y == pytest.approx(0.8)
        assert unit.length() == pytest.approx(1.0)

    def test_unit_of_zero_vector_is_zero(self):
        """Test that normalizing a zero vector does not produce NaN."""
        from weekend_raytracer.core.ray import ZERO

        assert ZERO.unit() == ZERO

    def test_near_zero(self):
        """Test near-zero detection threshold."""
        from weekend_raytracer.core.ray import Vec3

        assert Vec3(1e-9, -1e-9, 0.0).near_zero()
        assert not Vec3(1e-6, 0.0, 0.0).near_zero()

    def test_vec3_is_immutable_and_unpackable(self):
        """Test that Vec3 behaves as an immutable triple."""
        from weekend_raytracer.core.ray import Vec3

        v = Vec3(1.0, 2.0, 3.0)
        x, y, z = v
        assert (x, y, z) == (1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0  # type: ignore[misc]


class TestRay:
    """Tests for Ray."""

    def test_at_evaluates_parametric_point(self):
        """Test origin + t * direction."""
        from weekend_raytracer.core.ray import Ray, Vec3

        ray = Ray(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0))
        assert ray.at(0.0) == Vec3(1.0, 0.0, 0.0)
        assert ray.at(1.5) == Vec3(1.0, 3.0, 0.0)
        assert ray.at(-1.0) == Vec3(1.0, -2.0, 0.0)


class TestReflectRefract:
    """Tests for reflection, refraction and Fresnel helpers."""

    def test_reflect_straight_down(self):
        """Test that a ray going straight down reflects straight up."""
        from weekend_raytracer.core.ray import Vec3, reflect

        assert reflect(Vec3(0.0, -1.0, 0.0), Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 1.0, 0.0)

    def test_reflect_45_degrees(self):
        """Test that reflection keeps the tangential component."""
        from weekend_raytracer.core.ray import Vec3, reflect

        r = reflect(Vec3(1.0, -1.0, 0.0), Vec3(0.0, 1.0, 0.0))
        assert r == Vec3(1.0, 1.0, 0.0)

    def test_refract_with_unit_ratio_does_not_bend(self):
        """Test that eta = 1 leaves the direction unchanged."""
        from weekend_raytracer.core.ray import Vec3, refract

        incident = Vec3(1.0, -1.0, 0.0).unit()
        out = refract(incident, Vec3(0.0, 1.0, 0.0), 1.0)
        assert out.x == pytest.approx(incident.x)
        assert out.y == pytest.approx(incident.y)
        assert out.z == pytest.approx(0.0)

    def test_refract_bends_toward_normal_entering_glass(self):
        """Test Snell's law entering a denser medium."""
        from weekend_raytracer.core.ray import Vec3, refract

        sin_i = math.sin(math.radians(30.0))
        incident = Vec3(sin_i, -math.cos(math.radians(30.0)), 0.0)
        out = refract(incident, Vec3(0.0, 1.0, 0.0), 1.0 / 1.5)
        assert out.length() == pytest.approx(1.0)
        # sin(theta_t) = sin(theta_i) / 1.5
        assert out.x == pytest.approx(sin_i / 1.5)
        assert out.y < 0.0

    def test_schlick_at_normal_incidence_is_r0(self):
        """Test Schlick reflectance for glass at normal incidence."""
        from weekend_raytracer.core.ray import schlick_fresnel

        assert schlick_fresnel(1.0, 1.5) == pytest.approx(0.04)
        # r0 is the same for the inverted ratio
        assert schlick_fresnel(1.0, 1.0 / 1.5) == pytest.approx(0.04)

    def test_schlick_at_grazing_is_one(self):
        """Test that reflectance reaches 1 at grazing incidence."""
        from weekend_raytracer.core.ray import schlick_fresnel

        assert schlick_fresnel(0.0, 1.5) == pytest.approx(1.0)

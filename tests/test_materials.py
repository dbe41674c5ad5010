"""Unit tests for the three surface models and the scatter dispatcher."""

import math

import pytest

from spheretrace.core.ray import Ray
from spheretrace.core.utils import reflect
from spheretrace.core.vector import Color, Vector3
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials import (
    MATERIAL_TYPES,
    Dielectric,
    Lambertian,
    Metal,
    scatter,
)
from spheretrace.materials.presets import ColorPresets, DielectricPresets, MetalPresets

UP = Vector3(0.0, 1.0, 0.0)


def hit_record(material, normal=UP, front_face=True):
    return HitRecord(point=Vector3(0.0, 0.0, 0.0), normal=normal, t=1.0,
                     front_face=front_face, material=material)


def incoming(angle_degrees, time=0.0):
    """Downward ray in the xy plane, ``angle_degrees`` away from the -y axis."""
    theta = math.radians(angle_degrees)
    return Ray(Vector3(-math.sin(theta), math.cos(theta), 0.0),
               Vector3(math.sin(theta), -math.cos(theta), 0.0), time)


def assert_vectors_close(a, b, tol=1e-9):
    assert abs(a.x - b.x) < tol and abs(a.y - b.y) < tol and abs(a.z - b.z) < tol, (a, b)


class TestLambertian:
    """Tests for diffuse scattering."""

    def test_always_scatters_into_hemisphere(self, rng):
        albedo = Color(0.2, 0.4, 0.6)
        material = Lambertian(albedo)
        rec = hit_record(material)
        total_cos = 0.0
        for _ in range(2000):
            result = material.scatter(rng, incoming(30), rec)
            assert result is not None
            assert result.attenuation is albedo
            cos = result.ray.direction.normalize().dot(UP)
            assert cos >= -1e-12
            total_cos += cos
        # Cosine-weighted directions average well above zero.
        assert total_cos / 2000 > 0.4

    def test_scattered_ray_starts_at_hit_and_keeps_time(self, rng):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        rec = hit_record(material)
        rec.point = Vector3(1.0, 2.0, 3.0)
        result = material.scatter(rng, incoming(0, time=0.25), rec)
        assert result.ray.origin == Vector3(1.0, 2.0, 3.0)
        assert result.ray.time == 0.25

    def test_degenerate_direction_falls_back_to_normal(self, scripted_rng):
        """A random vector cancelling the normal must not produce a zero direction."""
        material = Lambertian(Color(0.5, 0.5, 0.5))
        result = material.scatter(scripted_rng([0.0, -0.5, 0.0]), incoming(0), hit_record(material))
        assert result.ray.direction == UP


class TestMetal:
    """Tests for specular reflection."""

    def test_mirror_reflects_exactly(self, scripted_rng):
        material = Metal(Color(0.8, 0.6, 0.4), fuzz=0.0)
        ray = incoming(45)
        # A perfect mirror never draws from the random source.
        result = material.scatter(scripted_rng(), ray, hit_record(material))
        assert result.ray.direction == reflect(ray.direction.normalize(), UP)
        assert result.attenuation == Color(0.8, 0.6, 0.4)

    def test_fuzz_into_surface_absorbs(self, scripted_rng):
        material = Metal(Color(0.8, 0.8, 0.8), fuzz=1.0)
        grazing = Ray(Vector3(-1.0, 0.01, 0.0), Vector3(1.0, -0.01, 0.0))
        result = material.scatter(scripted_rng([0.0, -0.5, 0.0]), grazing, hit_record(material))
        assert result is None

    def test_fuzzed_directions_stay_above_surface(self, rng):
        material = Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)
        rec = hit_record(material)
        for _ in range(500):
            result = material.scatter(rng, incoming(20), rec)
            if result is not None:
                assert result.ray.direction.dot(UP) > 0

    def test_negative_fuzz_rejected(self):
        with pytest.raises(ValueError):
            Metal(Color(0.5, 0.5, 0.5), fuzz=-0.1)


class TestDielectric:
    """Tests for refraction and reflection at dielectric boundaries."""

    @pytest.mark.parametrize("front_face", [True, False])
    def test_index_one_passes_straight_through(self, scripted_rng, front_face):
        material = Dielectric(1.0)
        ray = incoming(0)
        normal = UP if front_face else -UP
        rec = hit_record(material, normal=normal, front_face=front_face)
        if not front_face:
            ray = Ray(ray.origin, -ray.direction)
        result = material.scatter(scripted_rng([0.5]), ray, rec)
        assert_vectors_close(result.ray.direction.normalize(), ray.direction.normalize())

    def test_index_one_oblique(self, scripted_rng):
        material = Dielectric(1.0)
        ray = incoming(45)
        result = material.scatter(scripted_rng([0.99]), ray, hit_record(material))
        assert_vectors_close(result.ray.direction.normalize(), ray.direction.normalize())

    def test_attenuation_is_white(self, rng):
        material = Dielectric(1.5)
        for _ in range(50):
            result = material.scatter(rng, incoming(30), hit_record(material))
            assert result.attenuation == Color(1.0, 1.0, 1.0)

    def test_snell_when_entering(self, scripted_rng):
        material = Dielectric(1.5)
        ray = incoming(45)
        result = material.scatter(scripted_rng([0.999]), ray, hit_record(material))
        out = result.ray.direction.normalize()
        assert out.y < 0
        assert out.x == pytest.approx(math.sin(math.radians(45)) / 1.5, rel=1e-9)

    def test_total_internal_reflection(self, scripted_rng):
        """Leaving glass at 60 degrees exceeds the critical angle (about 41.8)."""
        material = Dielectric(1.5)
        ray = incoming(60)
        rec = hit_record(material, normal=UP, front_face=False)
        result = material.scatter(scripted_rng(), ray, rec)
        assert_vectors_close(result.ray.direction, reflect(ray.direction.normalize(), UP))

    def test_schlick_chooses_reflection(self, scripted_rng):
        material = Dielectric(1.5)
        ray = incoming(45)
        result = material.scatter(scripted_rng([0.0]), ray, hit_record(material))
        assert result.ray.direction.y > 0

    @pytest.mark.parametrize("index", [0.0, -1.5])
    def test_non_positive_index_rejected(self, index):
        with pytest.raises(ValueError):
            Dielectric(index)


class TestDispatch:
    """Tests for the closed material set."""

    def test_dispatches_each_material(self, rng):
        for material in (Lambertian(Color(0.5, 0.5, 0.5)), Metal(Color(0.5, 0.5, 0.5)), Dielectric(1.5)):
            assert scatter(material, rng, incoming(10), hit_record(material)) is not None

    def test_unknown_material_rejected(self, rng):
        class Emissive:
            pass

        with pytest.raises(TypeError):
            scatter(Emissive(), rng, incoming(0), hit_record(None))

    def test_material_tags(self):
        assert MATERIAL_TYPES == {"Lambertian": Lambertian, "Metal": Metal, "Dielectric": Dielectric}

    def test_equality_by_parameters(self):
        assert Metal(Color(0.5, 0.5, 0.5), 0.1) == Metal(Color(0.5, 0.5, 0.5), 0.1)
        assert Metal(Color(0.5, 0.5, 0.5), 0.1) != Metal(Color(0.5, 0.5, 0.5), 0.2)
        assert Lambertian(Color(0.5, 0.5, 0.5)) != Metal(Color(0.5, 0.5, 0.5))


class TestPresets:
    def test_presets_build_valid_materials(self):
        assert isinstance(MetalPresets.gold(), Metal)
        assert MetalPresets.mirror().fuzz == 0.0
        assert DielectricPresets.glass().index_of_refraction == 1.5
        assert DielectricPresets.air_bubble().index_of_refraction == pytest.approx(1 / 1.5)
        assert ColorPresets.matte(ColorPresets.BROWN).albedo == ColorPresets.BROWN

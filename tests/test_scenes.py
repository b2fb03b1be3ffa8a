"""Unit tests for the demo scene catalog."""

import math

import numpy as np
import pytest
from PIL import Image

from pathtracer import config
from pathtracer.core.random import RandomSource
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.errors import PathTracerError, SceneNotFoundError
from pathtracer.scenes import SCENES, Scene, build_scene


@pytest.fixture
def earth_texture(tmp_path, monkeypatch):
    path = tmp_path / "earthmap.png"
    Image.fromarray(np.full((4, 8, 3), 128, dtype=np.uint8)).save(path)
    monkeypatch.setattr(config, "EARTH_TEXTURE", path)
    return path


class TestCatalog:
    """Tests for building named scenes."""

    def test_catalog_names(self):
        assert set(SCENES) == {
            "random_spheres", "two_spheres", "two_perlin_spheres", "earth",
            "simple_light", "cornell_box", "cornell_smoke", "final_scene",
        }

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_builds_every_scene(self, name, earth_texture):
        scene = build_scene(name, RandomSource(1), 1.5)
        assert isinstance(scene, Scene)
        assert scene.name == name
        assert scene.background == Vector3(0, 0, 0)
        assert scene.world.bounding_box(0.0, 1.0) is not None

    def test_unknown_scene(self):
        with pytest.raises(SceneNotFoundError) as excinfo:
            build_scene("teapot", RandomSource(1))
        assert isinstance(excinfo.value, PathTracerError)
        assert isinstance(excinfo.value, KeyError)

    def test_earth_requires_texture(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "EARTH_TEXTURE", tmp_path / "missing.jpg")
        with pytest.raises(FileNotFoundError):
            build_scene("earth", RandomSource(1))

    def test_same_seed_same_scene(self):
        a = build_scene("random_spheres", RandomSource(8), 1.5)
        b = build_scene("random_spheres", RandomSource(8), 1.5)
        ray = Ray(Vector3(13, 2, 3), Vector3(-13, -2, -3))
        hit_a = a.world.hit(ray, 0.001, math.inf)
        hit_b = b.world.hit(ray, 0.001, math.inf)
        assert hit_a.t == hit_b.t

    def test_cornell_box_walls_surround_interior(self):
        scene = build_scene("cornell_box", RandomSource(2), 1.0)
        rng = RandomSource(3)
        for _ in range(50):
            direction = rng.random_unit_vector()
            # The box is open towards the camera at z = 0.
            direction = Vector3(direction.x, direction.y, abs(direction.z))
            ray = Ray(Vector3(278, 278, 278), direction)
            assert scene.world.hit(ray, 0.001, math.inf, rng) is not None

    def test_camera_sees_cornell_box(self):
        scene = build_scene("cornell_box", RandomSource(2), 1.0)
        rng = RandomSource(4)
        ray = scene.camera.get_ray(0.5, 0.5, rng)
        rec = scene.world.hit(ray, 0.001, math.inf, rng)
        assert rec is not None
        assert rec.p.z >= -1e-6

"""Unit tests for textures and image loading."""

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.random import RandomSource
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials import CheckerTexture, ImageTexture, Lambertian, NoiseTexture, SolidTexture
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import create_image_material, load_texture
from pathtracer.materials.textures import as_texture

ORIGIN_UV = UV(0.0, 0.0)
RED = Vector3(1, 0, 0)
GREEN = Vector3(0, 1, 0)


@pytest.fixture
def checker_png(tmp_path):
    """A 2x2 image: red top-left, green top-right, blue bottom-left, white bottom-right."""
    pixels = np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [255, 255, 255]],
    ], dtype=np.uint8)
    path = tmp_path / "checker.png"
    Image.fromarray(pixels).save(path)
    return path


class TestSolidAndChecker:
    """Tests for constant and checker textures."""

    def test_solid(self):
        assert SolidTexture(RED).sample(ORIGIN_UV, Vector3(5, 5, 5)) == RED

    def test_as_texture(self):
        texture = SolidTexture(GREEN)
        assert as_texture(texture) is texture
        assert as_texture(RED).sample(ORIGIN_UV, Vector3(0, 0, 0)) == RED

    def test_checker_alternates(self):
        checker = CheckerTexture(RED, GREEN)
        assert checker.sample(ORIGIN_UV, Vector3(0.05, 0.05, 0.05)) == GREEN
        assert checker.sample(ORIGIN_UV, Vector3(-0.05, 0.05, 0.05)) == RED
        assert checker.sample(ORIGIN_UV, Vector3(-0.05, -0.05, 0.05)) == GREEN


class TestNoise:
    """Tests for Perlin noise and the marble texture."""

    def test_noise_vanishes_on_lattice(self, rng):
        perlin = Perlin(rng)
        for p in (Vector3(0, 0, 0), Vector3(3, -2, 7), Vector3(-10, 4, 1)):
            assert perlin.noise(p) == 0.0

    def test_same_seed_same_noise(self):
        a = Perlin(RandomSource(5))
        b = Perlin(RandomSource(5))
        p = Vector3(1.3, -0.7, 2.2)
        assert a.noise(p) == b.noise(p)
        assert a.turb(p) == b.turb(p)

    def test_turbulence_non_negative(self, rng):
        perlin = Perlin(rng)
        for _ in range(50):
            assert perlin.turb(rng.random_vector(-5, 5)) >= 0.0

    def test_marble_in_unit_range(self, rng):
        texture = NoiseTexture(rng, 4.0)
        for _ in range(50):
            color = texture.sample(ORIGIN_UV, rng.random_vector(-5, 5))
            assert 0.0 <= color.x <= 1.0
            assert color.x == color.y == color.z


class TestImageTexture:
    """Tests for image-backed textures."""

    def test_samples_pixels(self, checker_png):
        texture = ImageTexture(str(checker_png))
        assert texture.width == 2 and texture.height == 2
        assert texture.sample(UV(0.0, 1.0), Vector3(0, 0, 0)) == Vector3(1, 0, 0)
        assert texture.sample(UV(0.99, 0.99), Vector3(0, 0, 0)) == Vector3(0, 1, 0)
        assert texture.sample(UV(0.0, 0.0), Vector3(0, 0, 0)) == Vector3(0, 0, 1)
        assert texture.sample(UV(0.99, 0.01), Vector3(0, 0, 0)) == Vector3(1, 1, 1)

    def test_coordinates_are_clamped(self, checker_png):
        texture = ImageTexture(str(checker_png))
        assert texture.sample(UV(-3.0, 5.0), Vector3(0, 0, 0)) == Vector3(1, 0, 0)
        assert texture.sample(UV(2.0, -1.0), Vector3(0, 0, 0)) == Vector3(1, 1, 1)

    def test_missing_file_returns_marker(self, tmp_path, caplog):
        texture = ImageTexture(str(tmp_path / "missing.png"))
        assert texture.data is None
        assert texture.sample(UV(0.5, 0.5), Vector3(0, 0, 0)) == ImageTexture.MISSING_COLOR
        assert "missing.png" in caplog.text

    def test_load_texture(self, checker_png):
        assert isinstance(load_texture(checker_png), ImageTexture)

    def test_load_texture_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(tmp_path / "missing.png")

    def test_create_image_material(self, checker_png):
        material = create_image_material(checker_png, Lambertian)
        assert isinstance(material, Lambertian)
        assert isinstance(material.texture, ImageTexture)

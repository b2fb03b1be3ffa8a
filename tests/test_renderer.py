"""Unit tests for the render driver and image output."""

import numpy as np
import pytest
from PIL import Image

from pathtracer.camera import Camera
from pathtracer.core.random import RandomSource
from pathtracer.core.vector import Vector3
from pathtracer.geometry import HittableList, Sphere
from pathtracer.materials import Lambertian, Metal
from pathtracer.renderer import Renderer, gamma_correct, render_row, save_png
from pathtracer.renderer.raytracer import format_duration
from pathtracer.scenes import Scene

WHITE = Vector3(1, 1, 1)


def make_camera(aspect_ratio=2.0):
    return Camera(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0), 40.0, aspect_ratio)


def white_furnace_scene():
    """A white diffuse sphere under a white sky: every path carries exactly 1."""
    world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, Lambertian(WHITE))])
    return Scene(world, make_camera(), WHITE, "furnace")


def mixed_scene():
    world = HittableList([
        Sphere(Vector3(-0.6, 0, 0), 0.5, Lambertian(Vector3(0.7, 0.2, 0.2))),
        Sphere(Vector3(0.6, 0, 0), 0.5, Metal(Vector3(0.8, 0.8, 0.8), 0.3)),
        Sphere(Vector3(0, -100.5, 0), 100, Lambertian(Vector3(0.5, 0.5, 0.5))),
    ])
    world.build_bvh()
    return Scene(world, make_camera(), Vector3(0.5, 0.7, 1.0), "mixed")


class TestRenderer:
    """Tests for whole-image rendering."""

    def test_buffer_shape_and_sums(self):
        renderer = Renderer(6, 3, samples_per_pixel=2, max_depth=5, workers=1, seed=3)
        buffer = renderer.render(white_furnace_scene())
        assert buffer.shape == (3, 6, 3)
        assert np.all(buffer == 2.0)

    def test_same_seed_same_image(self):
        first = Renderer(8, 4, 3, 5, workers=1, seed=11).render(mixed_scene())
        second = Renderer(8, 4, 3, 5, workers=1, seed=11).render(mixed_scene())
        assert np.array_equal(first, second)

    def test_different_seed_different_image(self):
        first = Renderer(8, 4, 3, 5, workers=1, seed=11).render(mixed_scene())
        second = Renderer(8, 4, 3, 5, workers=1, seed=12).render(mixed_scene())
        assert not np.array_equal(first, second)

    def test_worker_count_does_not_change_image(self):
        inline = Renderer(8, 4, 2, 5, workers=1, seed=5).render(mixed_scene())
        pooled = Renderer(8, 4, 2, 5, workers=2, seed=5).render(mixed_scene())
        assert np.array_equal(inline, pooled)

    @pytest.mark.parametrize("kwargs", [
        {"width": 0, "height": 4},
        {"width": 4, "height": 4, "samples_per_pixel": 0},
        {"width": 4, "height": 4, "max_depth": 0},
    ])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ValueError):
            Renderer(**kwargs)

    def test_render_row(self):
        row = render_row(white_furnace_scene(), 0, 5, 3, 4, 5, RandomSource(1))
        assert row.shape == (5, 3)
        assert np.all(row == 4.0)

    def test_single_pixel_image(self):
        buffer = Renderer(1, 1, 1, 3, workers=1, seed=0).render(white_furnace_scene())
        assert buffer.shape == (1, 1, 3)


class TestToneMapping:
    """Tests for gamma correction and quantization."""

    def test_gamma_and_quantize(self):
        buffer = np.array([[[0.0, 0.25, 1.0], [4.0, -1.0, np.nan]]])
        image = gamma_correct(buffer, 1)
        assert image.dtype == np.uint8
        assert image.tolist() == [[[0, 128, 255], [255, 0, 0]]]

    def test_averages_over_samples(self):
        buffer = np.full((1, 1, 3), 1.0)
        assert gamma_correct(buffer, 4).tolist() == [[[128, 128, 128]]]

    def test_furnace_render_is_white(self):
        buffer = Renderer(4, 2, 3, 5, workers=1, seed=1).render(white_furnace_scene())
        assert np.all(gamma_correct(buffer, 3) == 255)

    def test_rejects_bad_input(self):
        with pytest.raises(ValueError):
            gamma_correct(np.zeros((2, 2, 3)), 0)
        with pytest.raises(ValueError):
            gamma_correct(np.zeros((2, 2)), 1)

    def test_save_png(self, tmp_path):
        image = np.zeros((3, 5, 3), dtype=np.uint8)
        image[0, 0] = [255, 10, 20]
        path = save_png(image, tmp_path / "nested" / "out.png")
        assert path.exists()
        with Image.open(path) as saved:
            assert saved.size == (5, 3)
            assert saved.mode == "RGB"
            assert saved.getpixel((0, 0)) == (255, 10, 20)


class TestFormatDuration:
    """Tests for the progress ETA formatting."""

    def test_seconds(self):
        assert format_duration(5) == "5 sec."

    def test_minutes(self):
        assert format_duration(65) == "1 min. 5 sec."

    def test_hours(self):
        assert format_duration(3725) == "1 h. 2 min. 5 sec."

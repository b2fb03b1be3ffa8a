"""Tests for the command line entry point and ambient setup."""

import logging

import pytest
from PIL import Image

from pathtracer import config
from pathtracer.logging_config import setup_logging
from pathtracer.main import main, parse_args
from pathtracer.scenes import SCENES


class TestCommandLine:
    """Tests for the pathtracer command."""

    def test_defaults_come_from_config(self):
        args = parse_args([])
        assert args.scene == config.DEFAULT_SCENE
        assert args.width == config.IMAGE_WIDTH
        assert args.samples == config.SAMPLES_PER_PIXEL
        assert args.max_depth == config.MAX_DEPTH
        assert args.output is None

    def test_list_scenes(self, capsys):
        assert main(["--list-scenes"]) == 0
        assert capsys.readouterr().out.split() == list(SCENES)

    def test_renders_png(self, tmp_path):
        output = tmp_path / "two_spheres.png"
        code = main([
            "--scene", "two_spheres", "--width", "8", "--aspect-ratio", "2",
            "--samples", "1", "--max-depth", "3", "--workers", "1", "--seed", "1",
            "--output", str(output), "--log-level", "WARNING",
        ])
        assert code == 0
        with Image.open(output) as image:
            assert image.size == (8, 4)

    def test_same_seed_same_file(self, tmp_path):
        outputs = []
        for name in ("a.png", "b.png"):
            output = tmp_path / name
            main(["--scene", "two_perlin_spheres", "--width", "6", "--aspect-ratio", "1.5",
                  "--samples", "2", "--max-depth", "3", "--workers", "1", "--seed", "9",
                  "--output", str(output), "--log-level", "WARNING"])
            outputs.append(output.read_bytes())
        assert outputs[0] == outputs[1]

    def test_missing_texture_fails_cleanly(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "EARTH_TEXTURE", tmp_path / "missing.jpg")
        code = main(["--scene", "earth", "--width", "4", "--samples", "1", "--workers", "1",
                     "--output", str(tmp_path / "earth.png"), "--log-level", "WARNING"])
        assert code == 1
        assert not (tmp_path / "earth.png").exists()

    def test_unknown_scene_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--scene", "teapot"])
        assert excinfo.value.code == 2


class TestLogging:
    """Tests for logging setup."""

    def test_setup_is_idempotent(self):
        logger = setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "render.log"
        logger = setup_logging("INFO", log_file=log_file)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        setup_logging("WARNING")

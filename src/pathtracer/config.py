"""Configuration for the path tracer, read from environment variables."""

import os
from pathlib import Path
from typing import Optional

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Image settings
IMAGE_WIDTH = int(os.getenv("PATHTRACER_WIDTH", "400"))
ASPECT_RATIO = float(os.getenv("PATHTRACER_ASPECT_RATIO", str(16.0 / 9.0)))

# Sampling settings
SAMPLES_PER_PIXEL = int(os.getenv("PATHTRACER_SAMPLES", "100"))
MAX_DEPTH = int(os.getenv("PATHTRACER_MAX_DEPTH", "50"))
# Smallest accepted hit distance; rejects self-intersections at the origin.
T_MIN = float(os.getenv("PATHTRACER_T_MIN", "0.001"))

# Parallelism
WORKERS = int(os.getenv("PATHTRACER_WORKERS", str(os.cpu_count() or 1)))
_seed = os.getenv("PATHTRACER_SEED")
SEED: Optional[int] = int(_seed) if _seed else None

# Paths
OUTPUT_DIR = Path(os.getenv("PATHTRACER_OUTPUT_DIR", PROJECT_ROOT / "renders"))
EARTH_TEXTURE = Path(os.getenv("PATHTRACER_EARTH_TEXTURE", PROJECT_ROOT / "earthmap.jpg"))

# Scene
DEFAULT_SCENE = os.getenv("PATHTRACER_SCENE", "random_spheres")

# Logging settings
LOG_LEVEL = os.getenv("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PATHTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

__all__ = [
    "PROJECT_ROOT",
    "IMAGE_WIDTH",
    "ASPECT_RATIO",
    "SAMPLES_PER_PIXEL",
    "MAX_DEPTH",
    "T_MIN",
    "WORKERS",
    "SEED",
    "OUTPUT_DIR",
    "EARTH_TEXTURE",
    "DEFAULT_SCENE",
    "LOG_LEVEL",
    "LOG_FORMAT",
]

# renderer/tone_mapping.py
import logging
import math
from pathlib import Path
import numpy as np
from numba import njit
from PIL import Image

logger = logging.getLogger(__name__)


@njit(cache=False)
def gamma_quantize_kernel(accumulated, scale, output_image):
    height, width, _ = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = accumulated[y, x, c] * scale
                # Also catches NaN.
                if not value > 0.0:
                    value = 0.0
                # Gamma 2 correction
                value = math.sqrt(value)
                if value > 0.999:
                    value = 0.999
                output_image[y, x, c] = int(256.0 * value)


def gamma_correct(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Average a (height, width, 3) buffer of radiance sums over ``samples``,
    apply gamma 2 and quantize to 8-bit RGB.
    """
    if samples < 1:
        raise ValueError(f"samples must be at least 1, got {samples}")
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    if accumulated.ndim != 3 or accumulated.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) buffer, got shape {accumulated.shape}")
    output = np.empty(accumulated.shape, dtype=np.uint8)
    gamma_quantize_kernel(accumulated, 1.0 / samples, output)
    return output


def save_png(image: np.ndarray, path) -> Path:
    """
    Write an 8-bit RGB image to ``path`` as PNG, creating parent directories.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path, format="PNG")
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], path)
    return path

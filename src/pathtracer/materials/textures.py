# materials/textures.py
import logging
import math
from typing import Union
import numpy as np
from PIL import Image
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin

logger = logging.getLogger(__name__)


class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, p: Vector3) -> Vector3:
        """Sample the texture at given UV coordinates and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; pass textures through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        return self.color


class CheckerTexture(Texture):
    """A 3D checker pattern alternating on the sign of sin(x)sin(y)sin(z)."""
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture], scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        sines = math.sin(self.scale * p.x) * math.sin(self.scale * p.y) * math.sin(self.scale * p.z)
        if sines < 0:
            return self.odd.sample(uv, p)
        return self.even.sample(uv, p)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, rng, scale: float = 1.0):
        self.noise = Perlin(rng)
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        value = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p)))
        return Vector3(value, value, value)


class ImageTexture(Texture):
    """A texture from an image file."""
    # Marker color used when the image could not be loaded.
    MISSING_COLOR = Vector3(1.0, 0.0, 0.0)

    def __init__(self, image_path: str):
        self.image_path = image_path
        try:
            with Image.open(image_path) as img:
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Convert to numpy array for faster access
                self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
                self.width = img.width
                self.height = img.height
        except OSError as e:
            logger.error("Error loading texture %s: %s", image_path, e)
            self.data = None
            self.width = 0
            self.height = 0

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        if self.data is None:
            return self.MISSING_COLOR

        u = min(max(uv.u, 0.0), 1.0)
        v = 1.0 - min(max(uv.v, 0.0), 1.0)  # Flip V to image coordinates

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

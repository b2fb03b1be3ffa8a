"""Scattering models and the textures that drive them."""
from pathtracer.materials.material import Material, Scatter
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric, reflectance
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    SolidTexture,
    Texture,
)

__all__ = [
    "Material",
    "Scatter",
    "Lambertian",
    "Metal",
    "Dielectric",
    "reflectance",
    "DiffuseLight",
    "Isotropic",
    "Texture",
    "SolidTexture",
    "CheckerTexture",
    "NoiseTexture",
    "ImageTexture",
]

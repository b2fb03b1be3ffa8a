# materials/isotropic.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter
from pathtracer.materials.textures import Texture, as_texture


class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in every
    direction.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Scatter:
        scattered = Ray(rec.p, rng.random_unit_vector(), ray_in.time)
        return Scatter(self.texture.sample(rec.uv, rec.p), scattered)

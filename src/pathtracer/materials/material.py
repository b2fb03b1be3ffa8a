# materials/material.py
from typing import NamedTuple, Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord

BLACK = Vector3(0.0, 0.0, 0.0)


class Scatter(NamedTuple):
    """Outcome of a scattering event: color filter and continuation ray."""
    attenuation: Vector3
    scattered: Ray


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Scatter]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scatter or None if the path is absorbed here.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Radiance emitted by the surface; black unless the material is a light.
        """
        return BLACK

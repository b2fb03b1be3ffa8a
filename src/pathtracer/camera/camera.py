# camera/camera.py
import math
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians
from pathtracer.core.vector import Vector3


class Camera:
    """
    Thin-lens camera looking from ``lookfrom`` towards ``lookat``.

    ``vfov`` is the vertical field of view in degrees. Rays are cast at a
    random time within ``[time0, time1]`` for motion blur and from a random
    point on the lens when ``aperture`` is non-zero.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: Optional[float] = None, time0: float = 0.0, time1: float = 0.0):
        self.position = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist if focus_dist is not None else (lookfrom - lookat).length()
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        viewport_height = 2.0 * math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.position - self.lookat).normalize()
        self.right = self.vup.cross(self.w).normalize()
        self.up = self.w.cross(self.right)

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through image-plane coordinates (s, t) in [0, 1]."""
        if self.lens_radius > 0:
            rd = rng.random_in_unit_disk() * self.lens_radius
            offset = self.right * rd.x + self.up * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = rng.random(self.time0, self.time1) if self.time1 > self.time0 else self.time0
        return Ray(ray_origin, ray_direction, time)

# geometry/rect.py
"""
Axis-aligned rectangles. Each lies in a plane ``axis = k`` and spans
``[a0, a1] x [b0, b1]`` over the two remaining axes.
"""
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis so the box has non-zero volume.
PADDING = 0.0001


class AxisAlignedRect(Hittable):
    # Axis indices: plane normal axis, first and second in-plane axes.
    normal_axis = None
    a_axis = None
    b_axis = None

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _outward_normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.normal_axis] = 1.0
        return Vector3(*n)

    def _corner(self, a: float, b: float, k: float) -> Vector3:
        c = [0.0, 0.0, 0.0]
        c[self.a_axis] = a
        c[self.b_axis] = b
        c[self.normal_axis] = k
        return Vector3(*c)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d = ray.direction[self.normal_axis]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.normal_axis]) / d
        if t <= t_min or t > t_max:
            return None
        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None
        rec = HitRecord()
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0), (b - self.b0) / (self.b1 - self.b0))
        rec.t = t
        rec.material = self.material
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self._outward_normal())
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self._corner(self.a0, self.b0, self.k - PADDING),
                    self._corner(self.a1, self.b1, self.k + PADDING))


class XYRect(AxisAlignedRect):
    normal_axis, a_axis, b_axis = 2, 0, 1

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AxisAlignedRect):
    normal_axis, a_axis, b_axis = 1, 0, 2

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AxisAlignedRect):
    normal_axis, a_axis, b_axis = 0, 1, 2

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)

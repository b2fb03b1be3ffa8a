"""Ray-intersectable primitives, instancing wrappers and the BVH."""
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere, MovingSphere
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box
from pathtracer.geometry.transform import Translate, RotateY
from pathtracer.geometry.medium import ConstantMedium

__all__ = [
    "Hittable",
    "HitRecord",
    "BVHNode",
    "HittableList",
    "Sphere",
    "MovingSphere",
    "XYRect",
    "XZRect",
    "YZRect",
    "Box",
    "Translate",
    "RotateY",
    "ConstantMedium",
]

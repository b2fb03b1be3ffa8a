# materials/perlin.py
import math
from typing import List
from pathtracer.core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient noise over random unit vectors with Hermite-smoothed
    trilinear interpolation.
    """
    def __init__(self, rng):
        self.ran_vec: List[Vector3] = [rng.random_vector(-1.0, 1.0).normalize()
                                       for _ in range(POINT_COUNT)]
        self.perm_x = rng.permutation(POINT_COUNT)
        self.perm_y = rng.permutation(POINT_COUNT)
        self.perm_z = rng.permutation(POINT_COUNT)

    def noise(self, p: Vector3) -> float:
        u = p.x - math.floor(p.x)
        v = p.y - math.floor(p.y)
        w = p.z - math.floor(p.z)

        i = math.floor(p.x)
        j = math.floor(p.y)
        k = math.floor(p.z)

        # Hermite cubic smoothing
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    gradient = self.ran_vec[self.perm_x[(i + di) & 255]
                                            ^ self.perm_y[(j + dj) & 255]
                                            ^ self.perm_z[(k + dk) & 255]]
                    weight_v = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * gradient.dot(weight_v))
        return accum

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """
        Sum of ``depth`` octaves of noise, each at twice the frequency and
        half the weight of the previous one.
        """
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)

# core/random.py
"""
Seedable random source threaded explicitly through every sampling call.

Each worker and each image row owns its own stream spawned from a single
``numpy.random.SeedSequence``, so a render is reproducible from its seed no
matter how the work is scheduled.
"""
from typing import List, Optional, Union

import numpy as np

from pathtracer.core.vector import Vector3


class RandomSource:
    def __init__(self, seed: Optional[Union[int, np.random.SeedSequence]] = None):
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._gen = np.random.default_rng(self._seed_seq)

    def random(self, min: float = 0.0, max: float = 1.0) -> float:
        """
        Returns a uniform float in [min, max).
        """
        return min + (max - min) * float(self._gen.random())

    def random_int(self, low: int, high: int) -> int:
        """
        Returns a uniform integer in [low, high] (both ends inclusive).
        """
        return int(self._gen.integers(low, high + 1))

    def random_vector(self, min: float = 0.0, max: float = 1.0) -> Vector3:
        x, y, z = self._gen.uniform(min, max, 3)
        return Vector3(float(x), float(y), float(z))

    def random_in_unit_sphere(self) -> Vector3:
        while True:
            p = self.random_vector(-1.0, 1.0)
            if p.length_squared() < 1.0:
                return p

    def random_unit_vector(self) -> Vector3:
        """
        Returns a random unit vector (uniformly distributed over the sphere).
        """
        while True:
            p = self.random_in_unit_sphere()
            # Points too close to the center normalize badly.
            if p.length_squared() > 1e-160:
                return p.normalize()

    def random_in_unit_disk(self) -> Vector3:
        while True:
            x, y = self._gen.uniform(-1.0, 1.0, 2)
            p = Vector3(float(x), float(y), 0.0)
            if p.length_squared() < 1.0:
                return p

    def permutation(self, n: int) -> List[int]:
        return self._gen.permutation(n).tolist()

    def spawn(self, n: int) -> List["RandomSource"]:
        """
        Creates n statistically independent child streams.
        """
        return [RandomSource(child) for child in self._seed_seq.spawn(n)]

# renderer/integrator.py
"""
Iterative path tracing integrator.

One call traces one light path and returns one Monte Carlo sample of the
radiance arriving along the camera ray. The accumulator starts at white and
is updated per event:

* miss: ``acc *= background``, stop (escaped)
* hit, material scatters: ``acc = acc * attenuation + emitted``, follow the
  scattered ray; stop once ``max_depth`` scattering events have happened
* hit, material absorbs: ``acc *= emitted``, stop
"""
import enum
import math
from typing import NamedTuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.config import MAX_DEPTH, T_MIN


class Termination(enum.Enum):
    ESCAPED = "escaped"
    ABSORBED = "absorbed"
    DEPTH_EXHAUSTED = "depth_exhausted"


class PathSample(NamedTuple):
    color: Vector3
    bounces: int
    termination: Termination


def trace_path(ray: Ray, world, background: Vector3, rng,
               max_depth: int = MAX_DEPTH, t_min: float = T_MIN) -> PathSample:
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    acc = Vector3(1.0, 1.0, 1.0)
    bounces = 0
    while True:
        rec = world.hit(ray, t_min, math.inf, rng)
        if rec is None:
            return PathSample(acc * background, bounces, Termination.ESCAPED)

        material = rec.material
        emitted = material.emitted(rec.uv.u, rec.uv.v, rec.p)
        result = material.scatter(ray, rec, rng)
        if result is None:
            return PathSample(acc * emitted, bounces, Termination.ABSORBED)

        acc = acc * result.attenuation + emitted
        ray = result.scattered
        bounces += 1
        if bounces >= max_depth:
            return PathSample(acc, bounces, Termination.DEPTH_EXHAUSTED)


def ray_color(ray: Ray, world, background: Vector3, rng,
              max_depth: int = MAX_DEPTH, t_min: float = T_MIN) -> Vector3:
    return trace_path(ray, world, background, rng, max_depth, t_min).color

"""Offline Monte Carlo path tracer.

Subpackages:
    core: vectors, rays, bounding boxes and the seedable random source
    geometry: primitives, instancing wrappers, participating media and the BVH
    materials: scattering models and textures
    camera: thin-lens camera with motion blur
    renderer: path tracing integrator, parallel render driver, image output
"""

__version__ = "0.1.0"

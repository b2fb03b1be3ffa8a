"""Path tracing integrator, render driver and image output."""
from pathtracer.renderer.integrator import PathSample, Termination, ray_color, trace_path
from pathtracer.renderer.raytracer import Renderer, render_row
from pathtracer.renderer.tone_mapping import gamma_correct, save_png

__all__ = [
    "PathSample",
    "Termination",
    "ray_color",
    "trace_path",
    "Renderer",
    "render_row",
    "gamma_correct",
    "save_png",
]

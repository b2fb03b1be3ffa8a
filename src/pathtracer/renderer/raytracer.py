# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional
import numpy as np
from pathtracer.config import MAX_DEPTH, SAMPLES_PER_PIXEL, T_MIN, WORKERS
from pathtracer.core.random import RandomSource
from pathtracer.renderer.integrator import ray_color

logger = logging.getLogger(__name__)

# Scene and settings of the current worker process, set by the pool initializer.
_worker_state = {}


def render_row(scene, row: int, width: int, height: int, samples_per_pixel: int,
               max_depth: int, rng: RandomSource, t_min: float = T_MIN) -> np.ndarray:
    """
    Sum ``samples_per_pixel`` path samples for every pixel of one image row.

    Row 0 is the top of the image. Returns a (width, 3) array of radiance sums.
    """
    out = np.zeros((width, 3), dtype=np.float64)
    j = height - 1 - row
    u_scale = 1.0 / max(width - 1, 1)
    v_scale = 1.0 / max(height - 1, 1)
    camera = scene.camera
    world = scene.world
    background = scene.background
    for i in range(width):
        r = g = b = 0.0
        for _ in range(samples_per_pixel):
            u = (i + rng.random()) * u_scale
            v = (j + rng.random()) * v_scale
            ray = camera.get_ray(u, v, rng)
            color = ray_color(ray, world, background, rng, max_depth, t_min)
            r += color.x
            g += color.y
            b += color.z
        out[i, 0] = r
        out[i, 1] = g
        out[i, 2] = b
    return out


def _init_worker(scene, width, height, samples_per_pixel, max_depth, t_min):
    _worker_state["scene"] = scene
    _worker_state["settings"] = (width, height, samples_per_pixel, max_depth)
    _worker_state["t_min"] = t_min


def _render_row_task(row: int, rng: RandomSource):
    width, height, samples_per_pixel, max_depth = _worker_state["settings"]
    return row, render_row(_worker_state["scene"], row, width, height,
                           samples_per_pixel, max_depth, rng, _worker_state["t_min"])


class Renderer:
    """
    Renders a scene into a buffer of per-pixel radiance sums.

    Every image row is an independent unit of work with its own random
    stream spawned from ``seed``, so the result does not depend on how rows
    are distributed over ``workers`` processes.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = SAMPLES_PER_PIXEL,
                 max_depth: int = MAX_DEPTH, workers: int = WORKERS, seed: Optional[int] = None,
                 t_min: float = T_MIN):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = max(1, workers)
        self.seed = seed
        self.t_min = t_min
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)

    def render(self, scene) -> np.ndarray:
        """
        Render ``scene`` and return the (height, width, 3) radiance sums.
        Divide by samples_per_pixel for the average.
        """
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        row_rngs = RandomSource(self.seed).spawn(self.height)
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, self.workers)
        progress = _Progress(self.height)

        if self.workers == 1:
            for row, rng in enumerate(row_rngs):
                self.accumulation_buffer[row] = render_row(
                    scene, row, self.width, self.height, self.samples_per_pixel,
                    self.max_depth, rng, self.t_min)
                progress.update()
        else:
            with ProcessPoolExecutor(
                max_workers=self.workers,
                initializer=_init_worker,
                initargs=(scene, self.width, self.height, self.samples_per_pixel,
                          self.max_depth, self.t_min),
            ) as executor:
                futures = [executor.submit(_render_row_task, row, rng)
                           for row, rng in enumerate(row_rngs)]
                for future in as_completed(futures):
                    row, data = future.result()
                    self.accumulation_buffer[row] = data
                    progress.update()

        logger.info("Render finished in %.1f s", progress.elapsed())
        return self.accumulation_buffer


class _Progress:
    """Logs completion and ETA each time another whole percent of rows is done."""
    def __init__(self, total: int):
        self.total = total
        self.done = 0
        self.percent = 0
        self.start = time.monotonic()

    def elapsed(self) -> float:
        return time.monotonic() - self.start

    def update(self):
        self.done += 1
        percent = self.done * 100 // self.total
        if percent > self.percent:
            self.percent = percent
            elapsed = self.elapsed()
            eta = elapsed / self.done * (self.total - self.done)
            logger.info("%d%% - ETA: %s", percent, format_duration(eta))


def format_duration(seconds: float) -> str:
    seconds = int(round(seconds))
    if seconds >= 3600:
        return f"{seconds // 3600} h. {(seconds % 3600) // 60} min. {seconds % 60} sec."
    if seconds >= 60:
        return f"{seconds // 60} min. {seconds % 60} sec."
    return f"{seconds} sec."

# renderer/raytracer.py
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Optional, Tuple
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.config import DEFAULT_SAMPLES
from pathtracer.core.color import Color
from pathtracer.core.grid import Grid
from pathtracer.core.metrics import Metrics
from pathtracer.core.vector import Vector3
from pathtracer.renderer.image_writer import write_image
from pathtracer.renderer.integrator import color_for

logger = logging.getLogger(__name__)

# (ray, scene, depth, rng) -> Color
Integrator = Callable

def render_row(y: int, scene, camera: Camera, integrator: Integrator,
               width: int, height: int, samples: int,
               seed_seq: np.random.SeedSequence) -> Tuple[int, np.ndarray]:
    """
    Render image row `y` (0 is the top) into a (width, 3) byte array.

    Runs inside a worker process. The row owns its generator, built from
    its own SeedSequence, so results do not depend on which worker runs it.
    """
    rng = np.random.default_rng(seed_seq)
    row = np.empty((width, 3), dtype=np.uint8)
    for x in range(width):
        # Antialiasing: average jittered samples inside the pixel, in linear space.
        total = Vector3.zero()
        for _ in range(samples):
            u = (x + rng.random()) / width
            v = (height - y + rng.random()) / height
            ray = camera.get_ray(u, v)
            total = total + integrator(ray, scene, 0, rng).vec()
        row[x] = Color.from_vector(total / samples).to_rgb_gamma_corrected()
    return y, row

class Renderer:
    """
    Drives the integrator once per sample for every pixel of a width x height
    image and collects the gamma-corrected result in a Grid.

    Rows are rendered in parallel worker processes. With a fixed `seed` the
    output is identical for any number of workers.
    """
    def __init__(self, width: int, height: int, camera: Optional[Camera] = None,
                 samples: int = DEFAULT_SAMPLES, seed: Optional[int] = None,
                 workers: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"image dimensions must be positive, got {width}x{height}")
        if samples < 1:
            raise ValueError(f"samples per pixel must be at least 1, got {samples}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.width = width
        self.height = height
        self.camera = camera if camera is not None else Camera.default()
        self.samples = samples
        self.seed = seed
        self.workers = workers

    def _worker_count(self) -> int:
        workers = self.workers if self.workers is not None else (os.cpu_count() or 1)
        return max(1, min(workers, self.height))

    def render(self, scene, integrator: Integrator = color_for) -> Tuple[Grid, Metrics]:
        """
        Render `scene` and return the pixel grid with the metrics of the pass.
        """
        grid = Grid(self.width, self.height)
        metrics = Metrics(rays_traced_total=self.width * self.height * self.samples)
        row_seeds = np.random.SeedSequence(self.seed).spawn(self.height)
        workers = self._worker_count()

        logger.debug("Rendering %dx%d at %d samples per pixel on %d worker(s)",
                     self.width, self.height, self.samples, workers)

        start = time.perf_counter()
        if workers == 1:
            for y in range(self.height):
                _, row = render_row(y, scene, self.camera, integrator,
                                    self.width, self.height, self.samples, row_seeds[y])
                grid.set_row(y, row)
        else:
            with ProcessPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(render_row, y, scene, self.camera, integrator,
                                    self.width, self.height, self.samples, row_seeds[y])
                    for y in range(self.height)
                ]
                for future in as_completed(futures):
                    y, row = future.result()
                    grid.set_row(y, row)
        metrics.time_spent = time.perf_counter() - start

        logger.info("%s", metrics.describe())
        return grid, metrics

    def render_to_file(self, scene, path: str, integrator: Integrator = color_for) -> Metrics:
        """
        Render `scene` and write the image to `path`.

        Raises:
            ImageWriteError: If the image cannot be written.
        """
        grid, metrics = self.render(scene, integrator)
        write_image(grid, path)
        return metrics

def render(scene, camera: Camera, samples_per_pixel: int, width: int, height: int,
           integrator: Integrator = color_for, seed: Optional[int] = None,
           workers: Optional[int] = None) -> Tuple[Grid, Metrics]:
    """
    Render `scene` through `camera` into a width x height grid.

    Args:
        scene: A Sphere or HittableList (may be empty).
        camera: Maps image-plane (u, v) to rays.
        samples_per_pixel: Jittered samples averaged per pixel, at least 1.
        width: Image width in pixels.
        height: Image height in pixels.
        integrator: Radiance function (ray, scene, depth, rng) -> Color.
            Must be picklable (a module-level function) when workers > 1.
        seed: Seed for the per-row generators; None draws fresh entropy.
        workers: Worker processes; None uses every CPU, 1 renders in-process.

    Returns:
        (grid, metrics)
    """
    renderer = Renderer(width, height, camera=camera, samples=samples_per_pixel,
                        seed=seed, workers=workers)
    return renderer.render(scene, integrator)

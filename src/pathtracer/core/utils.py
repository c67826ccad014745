# core/utils.py
from pathtracer.core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere.

    `rng` is a numpy Generator (anything with `uniform(low, high)` works).
    Each caller passes its own generator, nothing global is touched.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.squared_length() < 1.0:
            return p

from typing import Union
from pathtracer.materials.material import Scatter
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

# Every surface is one of these; each exposes scatter(ray_in, rec, rng).
Material = Union[Lambertian, Metal]

__all__ = ["Material", "Lambertian", "Metal", "Scatter"]

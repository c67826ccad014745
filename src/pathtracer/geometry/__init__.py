from pathtracer.geometry.hittable import HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Hittable, HittableList

__all__ = ["HitRecord", "Hittable", "HittableList", "Sphere"]

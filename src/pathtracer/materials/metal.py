# materials/metal.py
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Scatter, check_albedo

class Metal:
    """
    Metal material with reflective properties. `fuzz` in [0, 1] blurs the
    mirror reflection; 0 is a perfect mirror.
    """
    __slots__ = ("albedo", "fuzz")

    def __init__(self, albedo: Vector3, fuzz: float):
        if not 0.0 <= fuzz <= 1.0:
            raise ValueError(f"metal fuzz must be in [0, 1], got {fuzz}")
        self.albedo = check_albedo(albedo)
        self.fuzz = float(fuzz)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Scatter]:
        reflected = ray_in.direction.unit().reflect(rec.normal)
        direction = reflected + random_in_unit_sphere(rng) * self.fuzz

        if direction.dot(rec.normal) > 0:
            return Scatter(self.albedo, Ray(rec.p, direction))

        return None  # Absorb the ray if it does not scatter forward

    def __eq__(self, other) -> bool:
        if not isinstance(other, Metal):
            return NotImplemented
        return self.albedo == other.albedo and self.fuzz == other.fuzz

    def __hash__(self) -> int:
        return hash(("metal", self.albedo, self.fuzz))

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"

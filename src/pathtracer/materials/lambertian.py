# materials/lambertian.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Scatter, check_albedo

class Lambertian:
    """
    Diffuse material. Always scatters, attenuating by its albedo.
    """
    __slots__ = ("albedo",)

    def __init__(self, albedo: Vector3):
        self.albedo = check_albedo(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Scatter:
        """
        Scatter a ray toward a random point in the unit sphere sitting on the
        surface normal. Returns a Scatter; diffuse surfaces never absorb.
        """
        scatter_direction = rec.normal + random_in_unit_sphere(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.length() < 1e-8:
            scatter_direction = rec.normal

        return Scatter(self.albedo, Ray(rec.p, scatter_direction))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Lambertian):
            return NotImplemented
        return self.albedo == other.albedo

    def __hash__(self) -> int:
        return hash(("lambertian", self.albedo))

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"

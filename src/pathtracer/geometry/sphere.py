# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import HitRecord

class Sphere:
    """
    Represents a sphere defined by its center, radius, and material.
    """
    __slots__ = ("center", "radius", "material")

    def __init__(self, center: Vector3, radius: float, material):
        if not radius > 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # A grazing ray (one real root) counts as a miss.
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root strictly inside (t_min, t_max)
        root = (-half_b - sqrt_disc) / a
        if not t_min < root < t_max:
            root = (-half_b + sqrt_disc) / a
            if not t_min < root < t_max:
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        return HitRecord(root, p, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"

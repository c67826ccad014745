# geometry/hittable.py
from pathtracer.core.vector import Vector3

class HitRecord:
    """
    Records details of a ray-object intersection.

    Built by an intersection query and consumed straight away by the
    integrator. The normal is unit length and points out of the surface.
    """
    __slots__ = ("t", "p", "normal", "material")

    def __init__(self, t: float, p: Vector3, normal: Vector3, material):
        self.t = t                  # Ray parameter at intersection
        self.p = p                  # Intersection point
        self.normal = normal        # Outward surface normal
        self.material = material    # Material of the struck primitive

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"

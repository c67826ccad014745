# geometry/world.py
from typing import Iterable, List, Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import HitRecord
from pathtracer.geometry.sphere import Sphere

class HittableList:
    """
    An ordered list of hittables (spheres or nested lists).

    Intersection is a brute-force scan of every child; there is no
    acceleration structure.
    """
    __slots__ = ("objects",)

    def __init__(self, objects: Optional[Iterable["Hittable"]] = None):
        self.objects: List["Hittable"] = list(objects) if objects is not None else []

    def add(self, obj: "Hittable"):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Shrinking the upper bound discards farther hits; on an exact tie
        # the earlier child wins because later ones must be strictly closer.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def __repr__(self) -> str:
        return f"HittableList({self.objects!r})"

# Everything a ray can be tested against.
Hittable = Union[Sphere, HittableList]

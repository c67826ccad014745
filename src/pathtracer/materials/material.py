# materials/material.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

class Scatter:
    """
    Result of a ray scattering off a surface: the outgoing ray and the
    per-channel factor applied to whatever light it brings back.
    """
    __slots__ = ("attenuation", "scattered")

    def __init__(self, attenuation: Vector3, scattered: Ray):
        self.attenuation = attenuation
        self.scattered = scattered

    def __repr__(self) -> str:
        return f"Scatter({self.attenuation!r}, {self.scattered!r})"

def check_albedo(albedo: Vector3) -> Vector3:
    """
    Validates that every channel of an albedo lies in [0, 1].
    """
    for f in albedo:
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"albedo {albedo!r} has a component outside [0, 1]")
    return albedo

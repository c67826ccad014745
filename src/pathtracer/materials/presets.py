# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)

    @staticmethod
    def brushed() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class ColorPresets:
    """Common albedos for diffuse materials."""

    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.8, 0.3, 0.8)
    GRAY = Vector3(0.5, 0.5, 0.5)
    CHARCOAL = Vector3(0.2, 0.2, 0.2)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

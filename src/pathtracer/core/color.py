# core/color.py
import math
from typing import Tuple
from pathtracer.config import RGB_CORRECTION
from pathtracer.core.vector import Vector3

def _check_probability(name: str, f: float):
    if not 0.0 <= f <= 1.0:
        raise ValueError(f"color component {name}={f} is outside [0, 1]")

class Color:
    """
    An RGB color with every channel in [0, 1].

    Out-of-range components are rejected rather than clamped, so a scene
    that produces one fails loudly instead of rendering a subtly wrong image.
    """
    __slots__ = ("_v",)

    def __init__(self, r: float, g: float, b: float):
        _check_probability("r", r)
        _check_probability("g", g)
        _check_probability("b", b)
        self._v = Vector3(r, g, b)

    @classmethod
    def from_vector(cls, v: Vector3) -> "Color":
        return cls(v.x, v.y, v.z)

    @classmethod
    def uniform(cls, f: float) -> "Color":
        return cls(f, f, f)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @property
    def r(self) -> float:
        return self._v.x

    @property
    def g(self) -> float:
        return self._v.y

    @property
    def b(self) -> float:
        return self._v.z

    def vec(self) -> Vector3:
        return self._v

    def to_rgb(self) -> Tuple[int, int, int]:
        """Linear channels as three bytes, truncated."""
        return (
            int(self.r * RGB_CORRECTION),
            int(self.g * RGB_CORRECTION),
            int(self.b * RGB_CORRECTION),
        )

    def to_rgb_gamma_corrected(self) -> Tuple[int, int, int]:
        """Gamma 2 (square root) before the truncating byte conversion."""
        return (
            int(math.sqrt(self.r) * RGB_CORRECTION),
            int(math.sqrt(self.g) * RGB_CORRECTION),
            int(math.sqrt(self.b) * RGB_CORRECTION),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._v == other._v

    def __hash__(self) -> int:
        return hash(self._v)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

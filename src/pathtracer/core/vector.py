# core/vector.py
import math

class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    reflection and linear interpolation. Used for points, directions and
    colors alike. Operations always return new vectors.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def uniform(cls, f: float) -> "Vector3":
        """Vector with every component equal to f."""
        return cls(f, f, f)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def squared_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> "Vector3":
        """
        Returns the unit vector pointing the same way.
        Raises ValueError for the zero vector.
        """
        l = self.length()
        if l == 0:
            raise ValueError("cannot take the unit vector of a zero-length vector")
        return self / l

    def reflect(self, normal: "Vector3") -> "Vector3":
        """Mirror this vector about the given (unit) normal: d - 2(d.n)n."""
        return self - normal * (2 * self.dot(normal))

    def interpolate(self, other: "Vector3", t: float) -> "Vector3":
        # (1 - t) * self + t * other; t is not clamped
        return self * (1.0 - t) + other * t

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

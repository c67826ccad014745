# camera/camera.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray

class Camera:
    """
    A pinhole camera: rays start at `origin` and pass through the view
    rectangle spanned by `horizontal` and `vertical` from `lower_left_corner`.
    """
    __slots__ = ("origin", "lower_left_corner", "horizontal", "vertical")

    def __init__(self, origin: Vector3, lower_left_corner: Vector3,
                 horizontal: Vector3, vertical: Vector3):
        self.origin = origin
        self.lower_left_corner = lower_left_corner
        self.horizontal = horizontal
        self.vertical = vertical

    @classmethod
    def default(cls) -> "Camera":
        """Eye at the origin looking down -z through a 4 x 2 rectangle at z = -1."""
        return cls(
            origin=Vector3(0, 0, 0),
            lower_left_corner=Vector3(-2.0, -1.0, -1.0),
            horizontal=Vector3(4.0, 0.0, 0.0),
            vertical=Vector3(0.0, 2.0, 0.0),
        )

    @classmethod
    def from_fov(cls, position: Vector3, yaw: float, pitch: float,
                 fov: float, aspect_ratio: float) -> "Camera":
        """
        Builds the view rectangle one unit in front of `position`.

        Args:
            position: Eye point.
            yaw: Rotation about +y in radians, 0 looks down -z.
            pitch: Elevation in radians, positive looks up.
            fov: Vertical field of view in radians.
            aspect_ratio: Width / height of the image.
        """
        global_up = Vector3(0, 1, 0)

        forward = Vector3(
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            -math.cos(yaw) * math.cos(pitch)
        ).unit()
        right = forward.cross(global_up).unit()
        up = right.cross(forward).unit()

        viewport_height = 2.0 * math.tan(fov / 2)
        viewport_width = aspect_ratio * viewport_height

        horizontal = right * viewport_width
        vertical = up * viewport_height
        lower_left_corner = (position + forward -
                             horizontal * 0.5 -
                             vertical * 0.5)
        return cls(position, lower_left_corner, horizontal, vertical)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Ray from the eye through the image-plane point (u, v); (0, 0) is the
        lower left corner and (1, 1) the upper right.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, lower_left_corner={self.lower_left_corner!r}, "
                f"horizontal={self.horizontal!r}, vertical={self.vertical!r})")

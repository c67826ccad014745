"""A small CPU path tracer for scenes of diffuse and metal spheres."""

from pathtracer.camera.camera import Camera
from pathtracer.core.color import Color
from pathtracer.core.grid import Grid
from pathtracer.core.metrics import Metrics
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Hittable, HittableList
from pathtracer.materials import Lambertian, Material, Metal, Scatter
from pathtracer.renderer.image_writer import ImageWriteError, write_image
from pathtracer.renderer.integrator import background, color_for
from pathtracer.renderer.raytracer import Renderer, render

__version__ = "0.1.0"

__all__ = [
    "Camera", "Color", "Grid", "Metrics", "Ray", "Vector3",
    "HitRecord", "Hittable", "HittableList", "Sphere",
    "Lambertian", "Material", "Metal", "Scatter",
    "ImageWriteError", "write_image", "background", "color_for",
    "Renderer", "render",
]

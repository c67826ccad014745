# scenes.py
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, MetalPresets

def ground(material=None) -> Sphere:
    """A huge sphere whose top acts as a floor at y = -0.5."""
    if material is None:
        material = Lambertian(ColorPresets.CHARCOAL)
    return Sphere(Vector3(0.0, -100.5, -1.0), 100.0, material)

def two_spheres() -> HittableList:
    """A small diffuse sphere at z = -1 sitting on the ground sphere."""
    little_sphere = Sphere(Vector3(0.0, 0.0, -1.0), 0.5,
                           Lambertian(Vector3(0.8, 0.3, 0.8)))
    return HittableList([ground(), little_sphere])

def spheres() -> HittableList:
    """Diffuse sphere in the middle flanked by a polished and a fuzzy metal one."""
    world = two_spheres()
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5,
                     Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.1)))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5,
                     Metal(Vector3(0.3, 0.7, 0.7), fuzz=0.9)))
    return world

def metals() -> HittableList:
    """A row of preset metals on a matte floor."""
    world = HittableList([ground(ColorPresets.matte(ColorPresets.GRAY))])
    presets = [MetalPresets.gold(), MetalPresets.mirror(), MetalPresets.copper()]
    for i, material in enumerate(presets):
        world.add(Sphere(Vector3(-1.1 + 1.1 * i, 0.0, -1.2), 0.5, material))
    # Small nested group in front, to exercise composite-in-composite scenes.
    world.add(HittableList([
        Sphere(Vector3(-0.4, -0.35, -0.6), 0.15, ColorPresets.matte(ColorPresets.RED)),
        Sphere(Vector3(0.4, -0.35, -0.6), 0.15, MetalPresets.brushed()),
    ]))
    return world

def empty() -> HittableList:
    return HittableList()

SCENES = {
    "spheres": spheres,
    "two-spheres": two_spheres,
    "metals": metals,
    "empty": empty,
}

# renderer/integrator.py
from pathtracer.config import MAX_DEPTH, T_MIN, T_MAX
from pathtracer.core.color import Color
from pathtracer.core.ray import Ray

WHITE = Color.uniform(1.0)
SKY_BLUE = Color(0.8, 1.0, 1.0)

def background(ray: Ray) -> Color:
    """
    The blue/white sky seen by rays that escape the scene.
    """
    t = ray.direction.unit().y * 0.5 + 1.0
    return Color.from_vector(WHITE.vec().interpolate(SKY_BLUE.vec(), t))

def color_for(ray: Ray, scene, depth: int, rng) -> Color:
    """
    Linear radiance arriving along `ray`.

    Bounces recursively off whatever the ray hits until it escapes to the
    background or `depth` reaches MAX_DEPTH, at which point the path
    contributes black. `rng` feeds the material scattering and is the only
    state this touches.
    """
    rec = scene.hit(ray, T_MIN, T_MAX)
    if rec is None:
        return background(ray)

    if depth >= MAX_DEPTH:
        return Color.black()

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return Color.black()

    incoming = color_for(scatter.scattered, scene, depth + 1, rng)
    return Color.from_vector(incoming.vec() * scatter.attenuation)

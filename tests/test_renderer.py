import math

import numpy as np
import pytest
from PIL import Image

from pathtracer.camera.camera import Camera
from pathtracer.config import RGB_CORRECTION
from pathtracer.core.color import Color
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.metal import Metal
from pathtracer.renderer.raytracer import Renderer, render, render_row
from pathtracer.scenes import spheres, two_spheres

WIDTH, HEIGHT = 20, 10


def sky_red_byte(u, v):
    """Gamma-corrected red byte of the sky seen through image point (u, v) of the default camera."""
    dx, dy, dz = -2.0 + 4.0 * u, -1.0 + 2.0 * v, -1.0
    unit_y = dy / math.sqrt(dx * dx + dy * dy + dz * dz)
    t = unit_y * 0.5 + 1.0
    return int(math.sqrt(1.0 - 0.2 * t) * RGB_CORRECTION)


def sky_red_bounds(x, y, width, height):
    """Smallest and largest red byte over the corners of pixel (x, y)."""
    values = [sky_red_byte((x + jx) / width, (height - y + jy) / height)
              for jx in (0.0, 1.0) for jy in (0.0, 1.0)]
    return min(values), max(values)


def assert_sky_pixel(pixel, x, y, width, height):
    r, g, b = (int(c) for c in pixel)
    low, high = sky_red_bounds(x, y, width, height)
    assert low - 1 <= r <= high + 1, (x, y, r, low, high)
    assert g == 255
    assert b == 255


# Plain-tuple re-derivation of the path tracer, used as the expected image.
# It draws from the per-row generators in the same order as the renderer.

def _add(a, b):
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a, s):
    return (a[0] * s, a[1] * s, a[2] * s)


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _in_unit_sphere(rng):
    while True:
        p = (rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
        if _dot(p, p) < 1.0:
            return p


def _flatten(scene):
    if isinstance(scene, Sphere):
        return [scene]
    return [s for obj in scene.objects for s in _flatten(obj)]


def _closest_hit(shapes, origin, d):
    best, closest = None, math.inf
    for sphere in shapes:
        center, radius = tuple(sphere.center), sphere.radius
        oc = _sub(origin, center)
        a = _dot(d, d)
        half_b = _dot(oc, d)
        c = _dot(oc, oc) - radius * radius
        disc = half_b * half_b - a * c
        if disc <= 0:
            continue
        root = (-half_b - math.sqrt(disc)) / a
        if not 0.001 < root < closest:
            root = (-half_b + math.sqrt(disc)) / a
            if not 0.001 < root < closest:
                continue
        p = _add(origin, _scale(d, root))
        normal = tuple(x / radius for x in _sub(p, center))
        best, closest = (p, normal, sphere.material), root
    return best


def _trace(shapes, origin, d, depth, rng):
    hit = _closest_hit(shapes, origin, d)
    if hit is None:
        t = d[1] / math.sqrt(_dot(d, d)) * 0.5 + 1.0
        return (1.0 * (1.0 - t) + 0.8 * t, 1.0 * (1.0 - t) + 1.0 * t, 1.0 * (1.0 - t) + 1.0 * t)
    if depth >= 50:
        return (0.0, 0.0, 0.0)
    p, normal, material = hit
    if isinstance(material, Metal):
        length = math.sqrt(_dot(d, d))
        unit = (d[0] / length, d[1] / length, d[2] / length)
        reflected = _sub(unit, _scale(normal, 2 * _dot(unit, normal)))
        direction = _add(reflected, _scale(_in_unit_sphere(rng), material.fuzz))
        if not _dot(direction, normal) > 0:
            return (0.0, 0.0, 0.0)
    else:
        direction = _add(normal, _in_unit_sphere(rng))
        if math.sqrt(_dot(direction, direction)) < 1e-8:
            direction = normal
    incoming = _trace(shapes, p, direction, depth + 1, rng)
    albedo = tuple(material.albedo)
    return (incoming[0] * albedo[0], incoming[1] * albedo[1], incoming[2] * albedo[2])


def expected_pixels(scene, width, height, samples, seed):
    """Bytes the default camera should produce for `scene`."""
    shapes = _flatten(scene)
    eye, corner = (0.0, 0.0, 0.0), (-2.0, -1.0, -1.0)
    across, up = (4.0, 0.0, 0.0), (0.0, 2.0, 0.0)
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    for y, row_seed in enumerate(np.random.SeedSequence(seed).spawn(height)):
        rng = np.random.default_rng(row_seed)
        for x in range(width):
            total = (0.0, 0.0, 0.0)
            for _ in range(samples):
                u = (x + rng.random()) / width
                v = (height - y + rng.random()) / height
                d = _sub(_add(_add(corner, _scale(across, u)), _scale(up, v)), eye)
                total = _add(total, _trace(shapes, eye, d, 0, rng))
            pixels[y, x] = [int(math.sqrt(c / samples) * RGB_CORRECTION) for c in total]
    return pixels


@pytest.mark.parametrize("kwargs", [
    dict(width=0, height=10),
    dict(width=10, height=-1),
    dict(width=10, height=10, samples=0),
    dict(width=10, height=10, workers=0),
])
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        Renderer(**kwargs)


def test_render_fills_grid_and_counts_rays(camera):
    grid, metrics = render(HittableList(), camera, samples_per_pixel=3,
                           width=WIDTH, height=HEIGHT, seed=1, workers=1)
    assert grid.width == WIDTH
    assert grid.height == HEIGHT
    assert grid.pixels.shape == (HEIGHT, WIDTH, 3)
    assert metrics.rays_traced_total == WIDTH * HEIGHT * 3
    assert metrics.time_spent >= 0.0


def test_empty_scene_renders_the_sky_gradient(camera):
    grid, _ = render(HittableList(), camera, samples_per_pixel=2,
                     width=WIDTH, height=HEIGHT, seed=11, workers=1)
    for y in range(HEIGHT):
        for x in range(WIDTH):
            assert_sky_pixel(grid.pixels[y, x], x, y, WIDTH, HEIGHT)


def test_empty_scene_top_row_is_darker_than_bottom_row(camera):
    grid, _ = render(HittableList(), camera, samples_per_pixel=1,
                     width=WIDTH, height=HEIGHT, seed=5, workers=1)
    # Looking up means more blue, so less red.
    assert grid.pixels[0, WIDTH // 2, 0] < grid.pixels[HEIGHT - 1, WIDTH // 2, 0]


def test_two_sphere_regression_render(camera):
    """
    20x10 render of the ground + little sphere scene at 1 sample per pixel.
    The bytes must match the plain-tuple tracer exactly, on every run and for
    any number of worker processes.
    """
    expected = expected_pixels(two_spheres(), WIDTH, HEIGHT, 1, 2024)
    serial, metrics = render(two_spheres(), camera, 1, WIDTH, HEIGHT, seed=2024, workers=1)
    again, _ = render(two_spheres(), camera, 1, WIDTH, HEIGHT, seed=2024, workers=1)
    parallel, _ = render(two_spheres(), camera, 1, WIDTH, HEIGHT, seed=2024, workers=3)

    assert metrics.rays_traced_total == WIDTH * HEIGHT
    np.testing.assert_array_equal(serial.pixels, expected)
    np.testing.assert_array_equal(serial.pixels, again.pixels)
    np.testing.assert_array_equal(serial.pixels, parallel.pixels)

    # The top row looks above both spheres.
    for x in range(WIDTH):
        assert_sky_pixel(serial.pixels[0, x], x, 0, WIDTH, HEIGHT)
    # The bottom row lands on the ground sphere, whose albedo is 0.2.
    ground_limit = int(math.sqrt(0.2) * RGB_CORRECTION)
    assert serial.pixels[HEIGHT - 1].max() <= ground_limit


def test_metal_scene_matches_plain_tuple_tracer(camera):
    expected = expected_pixels(spheres(), WIDTH, HEIGHT, 2, 7)
    grid, _ = render(spheres(), camera, 2, WIDTH, HEIGHT, seed=7, workers=2)
    np.testing.assert_array_equal(grid.pixels, expected)


def test_different_seeds_give_different_images(camera):
    a, _ = render(two_spheres(), camera, 1, WIDTH, HEIGHT, seed=1, workers=1)
    b, _ = render(two_spheres(), camera, 1, WIDTH, HEIGHT, seed=2, workers=1)
    assert not np.array_equal(a.pixels, b.pixels)


def test_samples_are_averaged_before_gamma(camera):
    calls = []

    def alternating(ray, scene, depth, rng):
        calls.append(depth)
        return Color.uniform(1.0) if len(calls) % 2 else Color.uniform(0.0)

    grid, _ = render(HittableList(), camera, samples_per_pixel=2,
                     width=2, height=1, integrator=alternating, seed=0, workers=1)
    # mean 0.5 in linear space -> sqrt(0.5) * 255.9999 = 181.02
    assert grid.get(0, 0) == (181, 181, 181)
    assert grid.get(1, 0) == (181, 181, 181)
    assert calls == [0, 0, 0, 0]


def test_render_row_jitters_inside_its_pixel(camera):
    seen = []

    def record(ray, scene, depth, rng):
        seen.append(ray.direction)
        return Color.black()

    seed_seq = np.random.SeedSequence(3).spawn(1)[0]
    y, row = render_row(1, HittableList(), camera, record, 4, 2, 5, seed_seq)
    assert y == 1
    assert row.shape == (4, 3)
    assert len(seen) == 4 * 5
    for i, direction in enumerate(seen):
        x = i // 5
        u = (direction.x + 2.0) / 4.0
        v = (direction.y + 1.0) / 2.0
        assert x / 4 <= u < (x + 1) / 4
        # Row y samples v in [(h - y) / h, (h - y + 1) / h).
        assert 0.5 <= v < 1.0


def test_render_to_file(tmp_path):
    renderer = Renderer(8, 4, samples=1, seed=9, workers=1)
    path = tmp_path / "out" / "two_spheres.png"
    metrics = renderer.render_to_file(two_spheres(), str(path))
    assert metrics.rays_traced_total == 32
    with Image.open(path) as img:
        assert img.size == (8, 4)
        assert img.mode == "RGB"


def test_render_logs_metrics(caplog, camera):
    with caplog.at_level("INFO", logger="pathtracer"):
        render(HittableList(), camera, 1, 2, 2, seed=0, workers=1)
    records = [rec for rec in caplog.records if "ns per ray, 4 rays" in rec.getMessage()]
    assert len(records) == 1
    # Formatting is left to the logging framework.
    assert records[0].msg == "%s"
    assert records[0].name == "pathtracer.renderer.raytracer"


def test_renderer_defaults_to_classic_camera():
    renderer = Renderer(4, 2)
    assert renderer.camera.lower_left_corner == Camera.default().lower_left_corner

"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """A fresh, seeded generator for each test."""
    return np.random.default_rng(1234)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def camera():
    return Camera.default()

# config.py
"""Render constants and defaults shared by the library and the CLI."""
import math
import os

# Bounce budget for one camera ray.
MAX_DEPTH = 50

# Minimum hit distance, keeps scattered rays from re-hitting their own surface.
T_MIN = 0.001
T_MAX = math.inf

# Truncating float -> byte scale; 1.0 maps to 255.
RGB_CORRECTION = 255.9999

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 200
DEFAULT_SAMPLES = 100
DEFAULT_SEED = 42
DEFAULT_OUTPUT = os.path.join("output", "render.png")

LOG_LEVEL = os.environ.get("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Quality presets for the command line: samples per pixel and a resolution scale.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "scale": 0.5},
    "balanced": {"samples": 32, "scale": 1.0},
    "high_quality": {"samples": 200, "scale": 2.0},
}

# core/grid.py
from typing import Sequence, Tuple
import numpy as np

class Grid:
    """
    A fixed width x height buffer of RGB byte triples.

    Stored as a numpy uint8 array of shape (height, width, 3), row 0 at the
    top, so it can be handed to an image encoder without copying.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def num_cells(self) -> int:
        return self.width * self.height

    def to_point(self, i: int) -> Tuple[int, int]:
        """Row-major index -> (x, y)."""
        return i % self.width, i // self.width

    def to_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def set(self, x: int, y: int, rgb: Sequence[int]):
        self.pixels[y, x] = rgb

    def set_row(self, y: int, row: np.ndarray):
        """Write a whole (width, 3) row at once."""
        self.pixels[y, :, :] = row

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

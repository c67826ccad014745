# renderer/image_writer.py
import logging
import os
from PIL import Image
from pathtracer.core.grid import Grid

logger = logging.getLogger(__name__)

class ImageWriteError(OSError):
    """Raised when a rendered image cannot be written to disk."""

def write_image(grid: Grid, path: str) -> str:
    """
    Encode a pixel grid and write it to `path`.

    The format comes from the file suffix (PNG when there is none that
    Pillow recognises). Missing parent directories are created.

    Args:
        grid: Fully rendered pixel buffer.
        path: Destination file.

    Returns:
        The path written.

    Raises:
        ImageWriteError: If the file cannot be opened or encoded.
    """
    ext = os.path.splitext(path)[1].lower()
    fmt = Image.registered_extensions().get(ext, "PNG")

    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        img = Image.fromarray(grid.pixels)
        with open(path, "wb") as fh:
            img.save(fh, format=fmt)
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"Error writing image {path}: {e}") from e

    logger.info("Wrote %dx%d %s image to %s", grid.width, grid.height, fmt, path)
    return path

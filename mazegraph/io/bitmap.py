"""
Raster image access for maze images.

``Bitmap`` wraps an RGB pixel array loaded through Pillow. The maze code only
cares whether a pixel is pure white (open) or anything else (wall), so the
class exposes both per-pixel access and a vectorized passable mask.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image, UnidentifiedImageError

from mazegraph.geometry.directions import is_white
from mazegraph.utils.exceptions import ImageAccessError
from mazegraph.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

BLACK = (0, 0, 0)


class Bitmap:
    """
    In-memory RGB raster indexed by ``(x, y)``.

    Args:
        pixels: ``uint8`` array of shape ``(height, width, 3)``
    """

    def __init__(self, pixels: NDArray[np.uint8]):
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (height, width, 3), got {pixels.shape}")
        self.pixels = pixels

    @classmethod
    def blank(cls, width: int, height: int, color: tuple[int, int, int] = BLACK) -> Bitmap:
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = color
        return cls(pixels)

    @classmethod
    def from_mask(cls, mask: NDArray[np.bool_]) -> Bitmap:
        """Build a two-color bitmap: ``True`` becomes white, ``False`` black."""
        gray = np.where(mask, 255, 0).astype(np.uint8)
        return cls(np.stack([gray, gray, gray], axis=-1))

    @classmethod
    def open(cls, path: str | Path) -> Bitmap:
        """
        Load an image from disk, converting it to RGB.

        Raises:
            ImageAccessError: If the file is missing or cannot be decoded
        """
        try:
            with Image.open(path) as image:
                rgb = image.convert("RGB")
        except FileNotFoundError as e:
            logger.error(f"Failed to open {path}: file not found")
            raise ImageAccessError(path, "file not found", component="Bitmap") from e
        except (UnidentifiedImageError, OSError) as e:
            logger.error(f"Failed to decode {path}: {e}")
            raise ImageAccessError(path, str(e), component="Bitmap") from e

        return cls(np.asarray(rgb, dtype=np.uint8).copy())

    def save(self, path: str | Path) -> None:
        """Write the bitmap; the format follows the file suffix."""
        try:
            Image.fromarray(self.pixels).save(path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save {path}: {e}")
            raise ImageAccessError(path, str(e), component="Bitmap") from e
        logger.debug(f"Saved {self.width}x{self.height} bitmap to {path}")

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def set_pixel(self, x: int, y: int, color: tuple[int, int, int]) -> None:
        self.pixels[y, x] = color

    def is_white(self, x: int, y: int) -> bool:
        """Pixels outside the image count as walls."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return is_white(self.get_pixel(x, y))

    def passable_mask(self) -> NDArray[np.bool_]:
        """Boolean ``(height, width)`` array, ``True`` where the pixel is pure white."""
        return np.all(self.pixels == 255, axis=-1)

"""Image input/output for maze bitmaps."""

from .bitmap import BLACK, Bitmap

__all__ = ["BLACK", "Bitmap"]

# noise_field/image_io.py

"""
================================================================================
RASTER IMAGE OUTPUT
================================================================================
Serializes packed RGB8 buffers to PNG with Pillow. This is the only place the
renderer touches an image container format.

Every failure (a buffer that does not match the stated size, or Pillow/OS
errors while encoding or writing) is reported as an ImageEncodeError with the
original exception chained. Nothing is retried.
================================================================================
"""
import os

from PIL import Image

class ImageEncodeError(Exception):
    """Raised when a pixel buffer cannot be serialized to an image file."""

def _to_image(pixels: bytes, width: int, height: int) -> Image.Image:
    expected = width * height * 3
    if len(pixels) != expected:
        raise ImageEncodeError(
            f"RGB buffer has {len(pixels)} bytes, expected {width}x{height}x3={expected}"
        )
    try:
        return Image.frombytes('RGB', (width, height), bytes(pixels))
    except ValueError as e:
        raise ImageEncodeError(f"Failed to build {width}x{height} RGB image: {e}") from e

def save_png(pixels: bytes, width: int, height: int, path: str) -> str:
    """Writes the buffer to `path` as a PNG and returns the path."""
    img = _to_image(pixels, width, height)
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        img.save(path, 'PNG')
    except (OSError, ValueError) as e:
        raise ImageEncodeError(f"Failed to write PNG to '{path}': {e}") from e
    return path

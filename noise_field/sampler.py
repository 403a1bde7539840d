# noise_field/sampler.py

"""
================================================================================
NOISE FIELD SAMPLER
================================================================================
Builds the dense scalar field by evaluating a continuous noise source at the
normalized coordinates of every grid cell.

Data Contract:
---------------
- Inputs:
    - noise_source: Any object satisfying the NoiseSource protocol (a point
      function `get`, optionally a vectorized `sample_grid`).
    - width, height: Positive grid dimensions.
    - time: The third noise coordinate, passed through unmodified.
- Outputs:
    - A flat, row-major float64 array of length width*height
      (index = x + y*width).
- Side Effects: None.
- Invariants: For a fixed noise source the output is bit-for-bit reproducible.
================================================================================
"""
import numpy as np

from .noise import NoiseSource

def get_coordinate_grid(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Returns (x, y) grids of shape (height, width) holding i/width and
    j/height, both in [0, 1).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    x_coords = np.arange(width, dtype=np.float64) / width
    y_coords = np.arange(height, dtype=np.float64) / height
    return np.meshgrid(x_coords, y_coords)

def sample_field(noise_source: NoiseSource, width: int, height: int, time: float) -> np.ndarray:
    """Samples the noise source over the grid and flattens the result row by row."""
    x_grid, y_grid = get_coordinate_grid(width, height)

    sample_grid = getattr(noise_source, 'sample_grid', None)
    if sample_grid is not None:
        samples = sample_grid(x_grid, y_grid, time)
    else:
        # Point-only sources are evaluated cell by cell.
        samples = np.vectorize(noise_source.get, otypes=[np.float64])(x_grid, y_grid, time)
    samples = np.asarray(samples, dtype=np.float64)

    if samples.shape != (height, width):
        raise ValueError(
            f"Noise source returned shape {samples.shape}, expected {(height, width)}"
        )
    return samples.ravel()

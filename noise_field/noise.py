# noise_field/noise.py

"""
================================================================================
NOISE GENERATION UTILITIES
================================================================================
This module provides a continuous, deterministic 3D Perlin noise function and
the small wrapper object that the field sampler consumes. The third axis is
used as a time coordinate, so successive frames drift smoothly.

Data Contract:
---------------
- Inputs:
    - p: A pre-shuffled NumPy permutation table (int array, 512 entries).
    - x, y: NumPy arrays of coordinates (same shape), z: a float.
    - scale: The spatial frequency applied to every coordinate.
- Outputs:
    - A NumPy array of noise values (approximately in the range [-1, 1]).
- Side Effects: None.
- Invariants: The shape of the output array matches the shape of input x and y.
  The same table and coordinates always give bit-identical output.
================================================================================
"""
from typing import Protocol

import numpy as np
from numba import njit

from . import config as DEFAULTS

# The twelve cube-edge gradients, padded to sixteen so a 4-bit hash selects one.
_GRADIENT_VECTORS = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
    [1, 1, 0], [-1, 1, 0], [0, -1, 1], [0, -1, -1],
], dtype=np.float64)

@njit
def _lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def _gradient(h, x, y, z):
    """Calculates the dot product between a gradient vector and coordinates."""
    g = _GRADIENT_VECTORS[h & 15]
    return g[0] * x + g[1] * y + g[2] * z

@njit
def perlin_noise_3d_point(p, x, y, z):
    """
    Evaluates 3D Perlin noise at a single point. Integer lattice points
    always evaluate to 0.
    """
    xi = int(np.floor(x))
    yi = int(np.floor(y))
    zi = int(np.floor(z))

    xf = x - xi
    yf = y - yi
    zf = z - zi

    u = _fade(xf)
    v = _fade(yf)
    w = _fade(zf)

    x0 = xi % 256
    y0 = yi % 256
    z0 = zi % 256

    # The doubled table lets every lookup below stay in bounds without wrapping.
    a = p[x0] + y0
    aa = p[a] + z0
    ab = p[a + 1] + z0
    b = p[x0 + 1] + y0
    ba = p[b] + z0
    bb = p[b + 1] + z0

    x1 = _lerp(_gradient(p[aa], xf, yf, zf), _gradient(p[ba], xf - 1, yf, zf), u)
    x2 = _lerp(_gradient(p[ab], xf, yf - 1, zf), _gradient(p[bb], xf - 1, yf - 1, zf), u)
    y1 = _lerp(x1, x2, v)

    x3 = _lerp(_gradient(p[aa + 1], xf, yf, zf - 1), _gradient(p[ba + 1], xf - 1, yf, zf - 1), u)
    x4 = _lerp(_gradient(p[ab + 1], xf, yf - 1, zf - 1), _gradient(p[bb + 1], xf - 1, yf - 1, zf - 1), u)
    y2 = _lerp(x3, x4, v)

    return _lerp(y1, y2, w)

@njit
def perlin_noise_3d(p, x, y, z, scale):
    """
    Generate 3D Perlin noise over a 2D grid of (x, y) coordinates at depth z.
    Every coordinate is multiplied by `scale` before evaluation.
    This function is JIT-compiled with Numba for maximum performance.
    """
    rows, cols = x.shape
    total_noise = np.zeros((rows, cols))
    z_sample = z * scale

    for i in range(rows):
        for j in range(cols):
            total_noise[i, j] = perlin_noise_3d_point(
                p, x[i, j] * scale, y[i, j] * scale, z_sample
            )

    return total_noise

def create_permutation_table(seed: int) -> np.ndarray:
    """Shuffles 0..255 deterministically from the seed and doubles the table."""
    p = np.arange(DEFAULTS.PERMUTATION_SIZE, dtype=np.int64)
    rng = np.random.default_rng(seed)
    rng.shuffle(p)
    return np.stack([p, p]).flatten()

class NoiseSource(Protocol):
    """
    The interface the field sampler expects from a noise generator. Any
    deterministic, total function of (x, y, z) that is approximately bounded
    to [-1, 1] can stand in, which keeps the sampler testable with stubs.

    Only `get` is required. Sources may also provide
    `sample_grid(x, y, z) -> np.ndarray` to evaluate a whole coordinate grid
    at once; the sampler uses it when present.
    """
    def get(self, x: float, y: float, z: float) -> float: ...

class ScaledNoise:
    """
    Perlin noise with a fixed spatial frequency: evaluating (x, y, z) samples
    the underlying noise at (scale*x, scale*y, scale*z).
    """
    def __init__(self, permutation_table: np.ndarray, scale: float = DEFAULTS.NOISE_SCALE):
        if len(permutation_table) != 2 * DEFAULTS.PERMUTATION_SIZE:
            raise ValueError(
                f"Permutation table must have {2 * DEFAULTS.PERMUTATION_SIZE} entries, "
                f"got {len(permutation_table)}"
            )
        self._p = np.ascontiguousarray(permutation_table, dtype=np.int64)
        self.scale = float(scale)

    @classmethod
    def from_seed(cls, seed: int, scale: float = DEFAULTS.NOISE_SCALE) -> "ScaledNoise":
        return cls(create_permutation_table(seed), scale)

    @property
    def permutation_table(self) -> np.ndarray:
        return self._p

    def get(self, x: float, y: float, z: float) -> float:
        return float(perlin_noise_3d_point(
            self._p, x * self.scale, y * self.scale, z * self.scale
        ))

    def sample_grid(self, x: np.ndarray, y: np.ndarray, z: float) -> np.ndarray:
        x = np.ascontiguousarray(x, dtype=np.float64)
        y = np.ascontiguousarray(y, dtype=np.float64)
        return perlin_noise_3d(self._p, x, y, float(z), self.scale)

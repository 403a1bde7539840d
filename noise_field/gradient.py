# noise_field/gradient.py

"""
================================================================================
GRADIENT ESTIMATOR
================================================================================
Derives a 2D finite-difference vector for every cell of a scalar field from
its four orthogonal neighbours.

For each cell the vector starts at zero and each available neighbour adds
(neighbour - centre) times the unit vector pointing towards it. "Up" is the
previous row and maps to +y. Cells on the border simply skip the missing
neighbours (no wraparound, no reflection), so their vectors are built from
fewer terms than interior vectors and are not directly comparable in length.

Data Contract:
---------------
- Inputs: A flat row-major scalar field of length width*height.
- Outputs: A (width*height, 2) float64 array with the same indexing.
- Side Effects: None.
================================================================================
"""
import numpy as np
from numba import njit

# --- Neighbour Directions ---
R_DIR = np.array([1.0, 0.0])
U_DIR = np.array([0.0, 1.0])
L_DIR = np.array([-1.0, 0.0])
D_DIR = np.array([0.0, -1.0])

@njit
def _accumulate_gradient(data, width, height):
    """Applies the 4-neighbour stencil to every cell. Compiled with Numba."""
    deriv = np.zeros((width * height, 2))

    for j in range(height):
        for i in range(width):
            c = data[i + j * width]
            vx = 0.0
            vy = 0.0

            if j > 0:
                diff = data[i + (j - 1) * width] - c
                vx += diff * U_DIR[0]
                vy += diff * U_DIR[1]
            if j + 1 < height:
                diff = data[i + (j + 1) * width] - c
                vx += diff * D_DIR[0]
                vy += diff * D_DIR[1]
            if i > 0:
                diff = data[i - 1 + j * width] - c
                vx += diff * L_DIR[0]
                vy += diff * L_DIR[1]
            if i + 1 < width:
                diff = data[i + 1 + j * width] - c
                vx += diff * R_DIR[0]
                vy += diff * R_DIR[1]

            deriv[i + j * width, 0] = vx
            deriv[i + j * width, 1] = vy

    return deriv

def derive_gradient(scalar_field, width: int, height: int) -> np.ndarray:
    """
    Computes the gradient field of a flat scalar field.

    Raises:
        ValueError: If the grid is empty or the field length is not
            width*height. Either means the caller built the field wrongly.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    data = np.ascontiguousarray(scalar_field, dtype=np.float64).ravel()
    if data.size != width * height:
        raise ValueError(
            f"Scalar field has {data.size} values, expected {width}x{height}={width * height}"
        )
    return _accumulate_gradient(data, width, height)

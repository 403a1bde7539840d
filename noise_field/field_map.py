# noise_field/field_map.py

"""
================================================================================
FIELD MAP
================================================================================
The FieldMap is the immutable composite value produced by one render: the
sampled scalar field together with the gradient field derived from it.

Data Contract:
---------------
- Inputs (on construction): a noise source, grid size and time, or an
  existing scalar field (`FieldMap(width, height, scalar_field)`).
- Public Properties:
    - width, height (ints)
    - scalar_field: flat (width*height,) float64 array, row-major.
    - gradient_field: (width*height, 2) float64 array, same indexing.
- Public Methods:
    - encode_data(color_map) / encode_deriv(color_map): RGB8 byte buffers.
- Invariants: Both fields hold width*height cells. The gradient field is
  derived only from the scalar field. Both arrays are read-only.
================================================================================
"""
import numpy as np

from . import color_maps
from .encoder import encode_gradient, encode_scalar
from .gradient import derive_gradient
from .noise import NoiseSource
from .sampler import sample_field

class FieldMap:
    """A sampled scalar field and its gradient, frozen after construction."""

    def __init__(self, width: int, height: int, scalar_field: np.ndarray):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        data = np.array(scalar_field, dtype=np.float64).ravel()
        deriv = derive_gradient(data, width, height)

        data.flags.writeable = False
        deriv.flags.writeable = False

        self._width = width
        self._height = height
        self._scalar_field = data
        self._gradient_field = deriv

    @classmethod
    def generate(cls, noise_source: NoiseSource, width: int, height: int, time: float) -> "FieldMap":
        """Samples the noise source over the grid and derives the gradient."""
        return cls(width, height, sample_field(noise_source, width, height, time))

    def __repr__(self):
        return f"FieldMap({self._width}x{self._height})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def scalar_field(self) -> np.ndarray:
        return self._scalar_field

    @property
    def gradient_field(self) -> np.ndarray:
        return self._gradient_field

    def encode_data(self, color_map: color_maps.ColorMap = color_maps.MAGMA) -> bytes:
        return encode_scalar(self._scalar_field, self._width, self._height, color_map)

    def encode_deriv(self, color_map: color_maps.ColorMap = color_maps.TWILIGHT) -> bytes:
        return encode_gradient(self._gradient_field, color_map)

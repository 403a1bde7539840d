# noise_field/__init__.py

# This file makes the 'noise_field' directory a Python package.
# We can also use it to define the public API of the package.

from .color_maps import MAGMA, TWILIGHT, ColorMap, interpolate
from .encoder import encode_gradient, encode_scalar
from .field_map import FieldMap
from .generator import FieldGenerator
from .gradient import derive_gradient
from .image_io import ImageEncodeError, save_png
from .noise import ScaledNoise
from .sampler import sample_field

__all__ = [
    "MAGMA", "TWILIGHT", "ColorMap", "interpolate",
    "encode_gradient", "encode_scalar",
    "FieldMap", "FieldGenerator", "derive_gradient",
    "ImageEncodeError", "save_png", "ScaledNoise", "sample_field",
]

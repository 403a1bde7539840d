# noise_field/encoder.py

"""
================================================================================
FIELD ENCODERS
================================================================================
Turns the two fields of a FieldMap into packed RGB8 byte buffers, ready to be
handed to the image writer.

- Scalar path: v in [-1, 1] -> t = (v + 1) / 2 -> magnitude color map.
- Gradient path: the signed angle from the vector to (1, 0), divided by pi,
  -> t = (angle + 1) / 2 -> cyclic color map. The zero vector has angle 0.

Both paths scale the interpolated [0, 1] channels by 255 and round.

Data Contract:
---------------
- Inputs: A field (read-only) and a ColorMap.
- Outputs: `bytes` of length cells*3, row-major, RGB order.
- Side Effects: None. The input fields are never modified.
================================================================================
"""
import numpy as np

from .color_maps import ColorMap, quantize_channels

def scalar_to_unit(scalar_field) -> np.ndarray:
    """Remaps nominal [-1, 1] noise values to [0, 1]. Out-of-range values pass through."""
    return (np.asarray(scalar_field, dtype=np.float64) + 1.0) * 0.5

def gradient_angles(gradient_field) -> np.ndarray:
    """
    Signed angle from each vector to the +x axis, normalized to [-1, 1].
    Zero vectors are assigned an angle of 0.
    """
    vectors = np.asarray(gradient_field, dtype=np.float64).reshape(-1, 2)
    dx = vectors[:, 0]
    dy = vectors[:, 1]

    angles = np.arctan2(-dy, dx) / np.pi
    angles[(dx == 0.0) & (dy == 0.0)] = 0.0
    return angles

def encode_scalar(scalar_field, width: int, height: int, color_map: ColorMap) -> bytes:
    """Encodes the scalar field through the magnitude color map."""
    values = np.asarray(scalar_field, dtype=np.float64).ravel()
    if values.size != width * height:
        raise ValueError(
            f"Scalar field has {values.size} values, expected {width}x{height}={width * height}"
        )

    colors = color_map.interpolate_array(scalar_to_unit(values))
    return quantize_channels(colors).tobytes()

def encode_gradient(gradient_field, color_map: ColorMap) -> bytes:
    """Encodes the direction of each gradient vector through the cyclic color map."""
    t = (gradient_angles(gradient_field) + 1.0) / 2.0
    colors = color_map.interpolate_array(t)
    return quantize_channels(colors).tobytes()

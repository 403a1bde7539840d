# noise_field/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module contains the color map tables and the interpolation functions used
to turn normalized field values into RGB colors.

Two maps are provided:
    - MAGMA: a perceptually uniform dark-to-bright ramp for scalar magnitudes.
    - TWILIGHT: a perceptually cyclic ramp for angles. Its first and last
      stops are (almost) identical, so an angle wrapping around at +/-pi does
      not produce a visible seam.

Both tables are sampled at nine evenly spaced points from the well-known
perceptual maps of the same names.

Data Contract:
---------------
- Inputs: A (N, 3) table of RGB stops in [0, 1], evenly spaced over [0, 1],
  and scalar or array values t.
- Outputs: RGB floats in [0, 1], or uint8 channels after quantization.
- Side Effects: None.
- Invariants: t is clamped to [0, 1]. t=0 yields the first stop exactly and
  t=1 yields the last stop exactly.
================================================================================
"""
import numpy as np

# --- Color Map Stops ---
MAGMA_STOPS = (
    (0.001462, 0.000466, 0.013866),
    (0.113094, 0.065492, 0.276784),
    (0.316654, 0.071690, 0.485380),
    (0.512831, 0.125776, 0.506970),
    (0.716387, 0.214982, 0.475290),
    (0.894305, 0.322927, 0.412003),
    (0.986700, 0.535582, 0.382210),
    (0.995131, 0.766837, 0.528444),
    (0.987053, 0.991438, 0.749504),
)

TWILIGHT_STOPS = (
    (0.885750, 0.850009, 0.887658),
    (0.641802, 0.714229, 0.809839),
    (0.384390, 0.524020, 0.766270),
    (0.370320, 0.284810, 0.628640),
    (0.185710, 0.070360, 0.227950),
    (0.451390, 0.125220, 0.318340),
    (0.693060, 0.315040, 0.307510),
    (0.818540, 0.613330, 0.556360),
    (0.885711, 0.849869, 0.887622),
)

def _as_stop_table(stops) -> np.ndarray:
    table = np.asarray(stops, dtype=np.float64)
    if table.ndim != 2 or table.shape[1] != 3 or table.shape[0] == 0:
        raise ValueError(f"Color stops must be a non-empty (N, 3) table, got shape {table.shape}")
    return table

def interpolate_array(stops, values) -> np.ndarray:
    """
    Maps an array of values in [0, 1] onto the stop table. Values outside the
    range are clamped to the nearest end stop.

    Returns an array with shape `values.shape + (3,)`.
    """
    table = _as_stop_table(stops)
    t = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    positions = np.linspace(0.0, 1.0, table.shape[0])

    channels = [np.interp(t, positions, table[:, c]) for c in range(3)]
    return np.stack(channels, axis=-1)

def interpolate(stops, t: float) -> tuple[float, float, float]:
    """Interpolates a single RGB triple from the stop table."""
    r, g, b = interpolate_array(stops, t)
    return float(r), float(g), float(b)

class ColorMap:
    """A named, read-only table of evenly spaced RGB stops."""
    def __init__(self, name: str, stops):
        self.name = name
        self._stops = _as_stop_table(stops)
        self._stops.flags.writeable = False

    def __repr__(self):
        return f"ColorMap({self.name!r}, {len(self)} stops)"

    def __len__(self):
        return self._stops.shape[0]

    @property
    def stops(self) -> np.ndarray:
        return self._stops

    def interpolate(self, t: float) -> tuple[float, float, float]:
        return interpolate(self._stops, t)

    def interpolate_array(self, values) -> np.ndarray:
        return interpolate_array(self._stops, values)

MAGMA = ColorMap("magma", MAGMA_STOPS)
TWILIGHT = ColorMap("twilight", TWILIGHT_STOPS)

# --- Quantization ---
def quantize_channels(colors: np.ndarray) -> np.ndarray:
    """Scales [0, 1] channel values to [0, 255] and rounds them to uint8."""
    scaled = np.rint(np.asarray(colors, dtype=np.float64) * 255.0)
    return np.clip(scaled, 0, 255).astype(np.uint8)

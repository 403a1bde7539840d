# noise_field/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
field renderer. These values are used if they are not explicitly provided by
the user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC RENDER.
Instead, pass a configuration dictionary to the FieldGenerator instance.
================================================================================
"""

# --- Noise Generation ---
DEFAULT_SEED = 1337
# Spatial frequency applied to the normalized [0, 1) grid coordinates (and to
# the time axis). 8.0 gives roughly eight noise cycles across the image.
NOISE_SCALE = 8.0
# Size of the base permutation table before it is doubled for wrap-free lookups.
PERMUTATION_SIZE = 256

# --- Grid ---
# The grid extent is fixed; it is not part of the user configuration.
GRID_WIDTH = 800
GRID_HEIGHT = 600

# --- Time Axis ---
# The third noise coordinate. 0.0 renders the first frame.
DEFAULT_TIME = 0.0

# --- Output ---
DEFAULT_OUTPUT_DIR = "output"
DATA_FILENAME = "data.png"
DERIV_FILENAME = "deriv.png"
GENERATION_CONFIG_FILENAME = "generation_config.json"

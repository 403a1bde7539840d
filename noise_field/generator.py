# noise_field/generator.py

"""
================================================================================
FIELD GENERATOR
================================================================================
This module contains the FieldGenerator class, which owns the render settings
and the noise source, and produces FieldMaps from them.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): Parameters which can override the internal defaults.
      Recognized keys: 'seed', 'noise_scale', 'time', 'output_dir',
      'data_filename', 'deriv_filename'. The grid size is fixed.
    - logger: A configured Python logging object for runtime messages.
    - permutation_table (optional): An injected noise permutation table.
- Outputs (from methods):
    - FieldMap instances.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same seed and configuration, the output is deterministic.
================================================================================
"""
import logging
import time

import numpy as np

from . import config as DEFAULTS
from .field_map import FieldMap
from .noise import ScaledNoise, create_permutation_table

class FieldGenerator:
    """
    Generates FieldMaps from a seeded, frequency-scaled noise source.
    This class does no file I/O.
    """
    def __init__(self, config: dict, logger: logging.Logger = None, permutation_table: np.ndarray = None):
        """
        Initializes the field generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger, optional): The logger instance for all output.
            permutation_table (np.ndarray, optional): A pre-computed noise
                permutation table. If None, one will be generated from the seed.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.user_config = config

        # --- Consolidate Configuration ---
        self.settings = {
            'seed': self.user_config.get('seed', DEFAULTS.DEFAULT_SEED),
            'noise_scale': self.user_config.get('noise_scale', DEFAULTS.NOISE_SCALE),
            'time': self.user_config.get('time', DEFAULTS.DEFAULT_TIME),
            'output_dir': self.user_config.get('output_dir', DEFAULTS.DEFAULT_OUTPUT_DIR),
            'data_filename': self.user_config.get('data_filename', DEFAULTS.DATA_FILENAME),
            'deriv_filename': self.user_config.get('deriv_filename', DEFAULTS.DERIV_FILENAME),
        }

        ignored = sorted(set(self.user_config) - set(self.settings))
        if ignored:
            self.logger.warning(f"Ignoring unknown configuration keys: {', '.join(ignored)}")

        # The grid extent is fixed and never read from the user config.
        self.settings['grid_width'] = DEFAULTS.GRID_WIDTH
        self.settings['grid_height'] = DEFAULTS.GRID_HEIGHT

        self.seed = self.settings['seed']

        # --- Initialize Noise ---
        if permutation_table is not None:
            p = permutation_table
            self.logger.debug("Initialized with injected permutation table.")
        else:
            self.logger.debug("No permutation table provided, generating new one from seed.")
            p = create_permutation_table(self.seed)

        self.noise_source = ScaledNoise(p, scale=self.settings['noise_scale'])

        self.logger.info(
            f"FieldGenerator initialized with seed: {self.seed}, "
            f"noise scale: {self.settings['noise_scale']}"
        )

    def generate(self, width: int = None, height: int = None, time_value: float = None) -> FieldMap:
        """
        Samples a FieldMap. Arguments left as None fall back to the fixed grid
        size and the configured time.
        """
        width = self.settings['grid_width'] if width is None else width
        height = self.settings['grid_height'] if height is None else height
        time_value = self.settings['time'] if time_value is None else time_value

        self.logger.info(f"Sampling {width}x{height} field at time {time_value}...")
        start_time = time.perf_counter()
        field_map = FieldMap.generate(self.noise_source, width, height, time_value)
        elapsed = time.perf_counter() - start_time

        data = field_map.scalar_field
        self.logger.info(
            f"Field sampled in {elapsed:.2f} seconds "
            f"(min {data.min():.3f}, max {data.max():.3f})."
        )
        return field_map

# render_field.py

"""
================================================================================
NOISE FIELD RENDER SCRIPT
================================================================================
This script is a command-line tool for rendering one frame of the noise field
to two PNG images:
    - data.png:  the scalar noise values through the magma color map.
    - deriv.png: the direction of the local gradient through the cyclic
                 twilight color map.

The resolved settings are written next to the images as
generation_config.json so the render can be reproduced exactly.

Usage:
    python render_field.py [--config path/to/config.json] [--output-dir DIR]

The config file may contain a 'field_parameters' object with any of the keys
accepted by FieldGenerator (seed, noise_scale, time, output_dir, ...).
================================================================================
"""
import os
import sys
import json
import logging
import argparse
import time

from noise_field.generator import FieldGenerator
from noise_field.field_map import FieldMap
from noise_field.image_io import ImageEncodeError, save_png
from noise_field import color_maps
from noise_field import config as DEFAULTS

def render_field(field_generator: FieldGenerator, logger: logging.Logger, field_map: FieldMap = None) -> dict:
    """
    Samples (unless a FieldMap is given), encodes and saves both images.

    Returns:
        dict: The written file paths, keyed by 'data', 'deriv' and 'config'.

    Raises:
        ImageEncodeError: If either image cannot be written.
        OSError: If the output directory or the settings file cannot be written.
    """
    settings = field_generator.settings

    # The output directory must exist before any sampling starts.
    output_dir = settings['output_dir']
    os.makedirs(output_dir, exist_ok=True)
    logger.info(f"Output directory set to '{output_dir}'")

    if field_map is None:
        field_map = field_generator.generate()

    start_time = time.perf_counter()
    outputs = {
        'deriv': (field_map.encode_deriv(color_maps.TWILIGHT), settings['deriv_filename']),
        'data': (field_map.encode_data(color_maps.MAGMA), settings['data_filename']),
    }

    paths = {}
    for name, (pixels, filename) in outputs.items():
        path = os.path.join(output_dir, filename)
        save_png(pixels, field_map.width, field_map.height, path)
        logger.info(f"Saved {name} image to '{path}'")
        paths[name] = path

    # Save the "birth certificate" so the render can be reproduced.
    config_path = os.path.join(output_dir, DEFAULTS.GENERATION_CONFIG_FILENAME)
    with open(config_path, 'w') as f:
        json.dump(settings, f, indent=4)
    paths['config'] = config_path

    logger.info(f"Encoding complete. Total time: {time.perf_counter() - start_time:.2f} seconds.")
    return paths

def load_config(config_path: str) -> dict:
    """
    Reads the 'field_parameters' object from a JSON config file.

    Raises:
        ValueError: If the file (or its 'field_parameters' entry) is not a
            JSON object. json.JSONDecodeError is a subclass.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a JSON object, got {type(config).__name__}")

    field_params = config.get('field_parameters', {})
    if not isinstance(field_params, dict):
        raise ValueError(
            f"'field_parameters' must be a JSON object, got {type(field_params).__name__}"
        )
    return field_params

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render a noise field and its gradient direction to PNG.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON configuration file with a 'field_parameters' object."
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the rendered images (overrides the config file)."
    )
    args = parser.parse_args(argv)

    # 1. --- Setup Logging ---
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("FieldRenderer")

    # 2. --- Load Configuration ---
    field_params = {}
    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        try:
            field_params = load_config(args.config)
        except (OSError, ValueError) as e:
            logger.critical(f"Failed to load or parse config file: {e}")
            return 1
    if args.output_dir:
        field_params['output_dir'] = args.output_dir

    # 3. --- Render ---
    field_generator = FieldGenerator(config=field_params, logger=logger)
    try:
        render_field(field_generator, logger)
    except ImageEncodeError as e:
        logger.critical(f"Failed to write output image: {e}")
        return 1
    except OSError as e:
        logger.critical(f"Failed to write render output: {e}")
        return 1

    logger.info("--- Render Complete ---")
    return 0

# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())

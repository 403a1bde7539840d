import logging

import numpy as np

from noise_field import config as DEFAULTS
from noise_field.generator import FieldGenerator
from noise_field.noise import create_permutation_table

logger = logging.getLogger("test")


def test_defaults():
    generator = FieldGenerator(config={}, logger=logger)
    assert generator.seed == DEFAULTS.DEFAULT_SEED
    assert generator.settings['noise_scale'] == DEFAULTS.NOISE_SCALE
    assert generator.settings['time'] == DEFAULTS.DEFAULT_TIME
    assert generator.settings['grid_width'] == 800
    assert generator.settings['grid_height'] == 600


def test_overrides():
    generator = FieldGenerator(config={'seed': 5, 'noise_scale': 2.0, 'time': 0.5}, logger=logger)
    assert generator.seed == 5
    assert generator.noise_source.scale == 2.0
    assert generator.settings['time'] == 0.5


def test_grid_size_is_not_configurable(caplog):
    with caplog.at_level(logging.WARNING, logger="test"):
        generator = FieldGenerator(config={'grid_width': 10}, logger=logger)
    assert generator.settings['grid_width'] == DEFAULTS.GRID_WIDTH
    assert "grid_width" in caplog.text


def test_injected_permutation_table():
    table = create_permutation_table(99)
    generator = FieldGenerator(config={'seed': 1}, logger=logger, permutation_table=table)
    assert np.array_equal(generator.noise_source.permutation_table, table)


def test_generate_is_deterministic():
    a = FieldGenerator(config={'seed': 21}, logger=logger).generate(24, 16)
    b = FieldGenerator(config={'seed': 21}, logger=logger).generate(24, 16)
    assert np.array_equal(a.scalar_field, b.scalar_field)
    assert np.array_equal(a.gradient_field, b.gradient_field)


def test_different_seeds_differ():
    a = FieldGenerator(config={'seed': 21}, logger=logger).generate(24, 16)
    b = FieldGenerator(config={'seed': 22}, logger=logger).generate(24, 16)
    assert not np.array_equal(a.scalar_field, b.scalar_field)


def test_generate_uses_configured_time():
    generator = FieldGenerator(config={'time': 0.4}, logger=logger)
    assert np.array_equal(
        generator.generate(8, 8).scalar_field,
        generator.generate(8, 8, time_value=0.4).scalar_field,
    )

import numpy as np
import pytest

from noise_field import color_maps
from noise_field.color_maps import (
    MAGMA, TWILIGHT, ColorMap, interpolate, interpolate_array, quantize_channels
)

GRAY = ((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))


@pytest.mark.parametrize("stops", [color_maps.MAGMA_STOPS, color_maps.TWILIGHT_STOPS, GRAY])
def test_endpoints_are_exact(stops):
    assert interpolate(stops, 0.0) == tuple(stops[0])
    assert interpolate(stops, 1.0) == tuple(stops[-1])


def test_linear_blend_between_stops():
    r, g, b = interpolate(((0.0, 0.0, 0.0), (1.0, 0.5, 0.0), (1.0, 1.0, 1.0)), 0.25)
    assert r == pytest.approx(0.5)
    assert g == pytest.approx(0.25)
    assert b == pytest.approx(0.0)


def test_out_of_range_is_clamped():
    assert interpolate(color_maps.MAGMA_STOPS, -3.0) == tuple(color_maps.MAGMA_STOPS[0])
    assert interpolate(color_maps.MAGMA_STOPS, 7.5) == tuple(color_maps.MAGMA_STOPS[-1])


def test_single_stop_table():
    assert interpolate(((0.2, 0.4, 0.6),), 0.7) == (0.2, 0.4, 0.6)


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        interpolate((), 0.5)


def test_array_matches_scalar():
    values = np.array([[0.0, 0.1, 0.5], [0.77, 0.9, 1.0]])
    colors = interpolate_array(color_maps.TWILIGHT_STOPS, values)
    assert colors.shape == (2, 3, 3)
    assert tuple(colors[1, 0]) == interpolate(color_maps.TWILIGHT_STOPS, 0.77)


def test_twilight_is_cyclic():
    first = np.array(TWILIGHT.interpolate(0.0))
    last = np.array(TWILIGHT.interpolate(1.0))
    assert np.all(np.abs(first - last) < 0.01)
    assert np.any(np.abs(np.array(MAGMA.interpolate(0.0)) - np.array(MAGMA.interpolate(1.0))) > 0.5)


def test_color_map_stops_are_read_only():
    with pytest.raises(ValueError):
        MAGMA.stops[0, 0] = 1.0


def test_color_map_len_and_repr():
    cmap = ColorMap("gray", GRAY)
    assert len(cmap) == 2
    assert "gray" in repr(cmap)


def test_quantize_channels_scales_and_rounds():
    q = quantize_channels(np.array([0.0, 0.5, 1.0, 1.2, -0.1]))
    assert q.dtype == np.uint8
    assert q.tolist() == [0, 128, 255, 255, 0]

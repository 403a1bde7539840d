import numpy as np
import pytest

from noise_field.noise import ScaledNoise
from noise_field.sampler import get_coordinate_grid, sample_field


class LinearNoise:
    """Deterministic stand-in that exposes the coordinates it was given."""
    def get(self, x, y, z):
        return x + 10.0 * y + 100.0 * z

    def sample_grid(self, x, y, z):
        return x + 10.0 * y + 100.0 * z


def test_coordinate_grid_is_normalized():
    x, y = get_coordinate_grid(4, 2)
    assert x.shape == (2, 4)
    assert x[0].tolist() == [0.0, 0.25, 0.5, 0.75]
    assert y[:, 0].tolist() == [0.0, 0.5]


def test_sample_is_row_major():
    field = sample_field(LinearNoise(), 4, 2, 0.0)
    assert field.shape == (8,)
    # index = x + y*width
    assert field[1] == pytest.approx(0.25)
    assert field[4] == pytest.approx(5.0)
    assert field[7] == pytest.approx(0.75 + 5.0)


def test_time_passes_through_unmodified():
    field = sample_field(LinearNoise(), 2, 2, 0.5)
    assert field[0] == pytest.approx(50.0)


@pytest.mark.parametrize("width,height", [(1, 1), (3, 7), (16, 9)])
def test_length(width, height):
    assert sample_field(ScaledNoise.from_seed(1), width, height, 0.0).size == width * height


def test_determinism_with_fresh_generators():
    a = sample_field(ScaledNoise.from_seed(42), 32, 24, 0.25)
    b = sample_field(ScaledNoise.from_seed(42), 32, 24, 0.25)
    assert np.array_equal(a, b)


def test_time_changes_the_field():
    noise = ScaledNoise.from_seed(42)
    a = sample_field(noise, 16, 16, 0.0)
    b = sample_field(noise, 16, 16, 0.3)
    assert not np.array_equal(a, b)


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        sample_field(LinearNoise(), 0, 5, 0.0)


class PointOnlyNoise:
    """A source that only offers the point function."""
    def __init__(self):
        self.calls = []

    def get(self, x, y, z):
        self.calls.append((x, y, z))
        return x + 10.0 * y + 100.0 * z


def test_point_only_source_is_sampled_per_cell():
    noise = PointOnlyNoise()
    field = sample_field(noise, 3, 2, 0.25)
    assert field.shape == (6,)
    assert field.dtype == np.float64
    assert field.tolist() == pytest.approx(sample_field(LinearNoise(), 3, 2, 0.25).tolist())
    assert all(z == 0.25 for _, _, z in noise.calls)


def test_point_only_scaled_noise_matches_grid_sampling():
    grid_noise = ScaledNoise.from_seed(17)

    class PointOnly:
        def get(self, x, y, z):
            return grid_noise.get(x, y, z)

    a = sample_field(PointOnly(), 6, 4, 0.1)
    b = sample_field(grid_noise, 6, 4, 0.1)
    assert a.tolist() == pytest.approx(b.tolist())

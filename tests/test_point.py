import random

import pytest

from graybmp.grid import SampleGrid
from graybmp.processing.point import adjust_brightness, adjust_contrast, invert


@pytest.fixture
def noisy_grid() -> SampleGrid:
    rng = random.Random(162)
    return SampleGrid(7, 5, bytes(rng.randrange(256) for _ in range(35)))


def test_invert_is_involutive(noisy_grid):
    assert invert(invert(noisy_grid)) == noisy_grid


def test_invert_maps_extremes():
    grid = SampleGrid.from_rows([[0, 255, 100]])

    assert list(invert(grid).samples) == [255, 0, 155]


def test_brightness_zero_is_identity(noisy_grid):
    result = adjust_brightness(noisy_grid, 0)

    assert result == noisy_grid
    assert result is not noisy_grid


def test_brightness_saturates_high():
    grid = SampleGrid.from_rows([[250, 10, 245]])

    assert list(adjust_brightness(grid, 10).samples) == [255, 20, 255]


def test_brightness_saturates_low():
    grid = SampleGrid.from_rows([[250, 10, 0]])

    assert list(adjust_brightness(grid, -20).samples) == [230, 0, 0]


def test_contrast_scale_one_is_identity(noisy_grid):
    assert adjust_contrast(noisy_grid, 1.0) == noisy_grid


def test_contrast_truncates_and_saturates():
    grid = SampleGrid.from_rows([[3, 100, 200]])

    assert list(adjust_contrast(grid, 0.5).samples) == [1, 50, 100]
    assert list(adjust_contrast(grid, 2.0).samples) == [6, 200, 255]


def test_contrast_zero_blackens():
    assert set(adjust_contrast(SampleGrid.filled(3, 3, 200), 0).samples) == {0}


def test_contrast_rejects_negative_factor(noisy_grid):
    with pytest.raises(ValueError):
        adjust_contrast(noisy_grid, -0.5)


@pytest.mark.parametrize("factor", [float("inf"), float("nan")])
def test_contrast_rejects_non_finite_factor(noisy_grid, factor):
    with pytest.raises(ValueError):
        adjust_contrast(noisy_grid, factor)

import numpy as np
import pytest

from stencilbench.datasets import DataType
from stencilbench.heat3d import init_heat3d, kernel_heat3d
from stencilbench.heat3d_variants import run_variant, variant_points


def test_variant_points_cover_the_larger_stencils():
    points = variant_points()
    assert 25 in points
    assert 31 in points
    assert list(points) == sorted(points)


@pytest.mark.parametrize("points", [25, 31])
def test_zero_steps_leave_initial_cube(points):
    expected, _ = init_heat3d(12)
    np.testing.assert_array_equal(run_variant(points, 0, 12), expected)


@pytest.mark.parametrize("points,radius", [(25, 4), (31, 5)])
def test_matches_kernel_with_radius(points, radius):
    a, b = init_heat3d(14)
    expected = kernel_heat3d(2, a, b, radius)
    np.testing.assert_array_equal(run_variant(points, 2, 14), expected)


@pytest.mark.parametrize("points,radius", [(25, 4), (31, 5)])
def test_border_is_untouched_and_interior_changes(points, radius):
    initial, _ = init_heat3d(14)
    result = run_variant(points, 1, 14)
    mask = np.ones(result.shape, dtype=bool)
    mask[radius:-radius, radius:-radius, radius:-radius] = False
    np.testing.assert_array_equal(result[mask], initial[mask])
    assert not np.array_equal(result[~mask], initial[~mask])


def test_cube_too_small_is_unchanged():
    initial, _ = init_heat3d(10)
    np.testing.assert_array_equal(run_variant(31, 3, 10), initial)


def test_dtype_follows_request():
    assert run_variant(25, 1, 12, DataType.DOUBLE).dtype == np.float64
    assert run_variant(25, 1, 12).dtype == np.float32


@pytest.mark.parametrize("points", [9, 0, 37])
def test_unknown_variant_rejected(points):
    with pytest.raises(ValueError):
        run_variant(points, 1, 12)
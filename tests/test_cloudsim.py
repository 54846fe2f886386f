import numpy as np
import pytest

from stencilbench.cloudsim import (
    celsius_to_kelvin,
    cloudsim,
    dew_point,
    hpa_to_mmhg,
    init_cloud,
    init_wind,
    millibars_to_mmhg,
    real_pressure_vapor,
)


def test_celsius_to_kelvin_offset():
    assert celsius_to_kelvin(0.0) == pytest.approx(273.15, rel=1e-6)
    assert celsius_to_kelvin(-3.0) - celsius_to_kelvin(0.0) == pytest.approx(-3.0, abs=1e-4)


def test_pressure_conversion_factor():
    assert hpa_to_mmhg(1.0) == pytest.approx(0.750062, rel=1e-6)
    assert millibars_to_mmhg(700.0) == hpa_to_mmhg(700.0)


def test_vapour_pressure_falls_with_pressure():
    kelvin = celsius_to_kelvin(-3.0)
    assert real_pressure_vapor(kelvin, 500.0) > real_pressure_vapor(kelvin, 600.0)


def test_vapour_pressure_rejects_non_positive_temperature():
    with pytest.raises(ValueError):
        real_pressure_vapor(0.0, 500.0)


def test_dew_point_below_air_temperature():
    point = dew_point(celsius_to_kelvin(-3.0), hpa_to_mmhg(700.0))
    assert point < -3.0


def test_dew_point_rises_with_temperature():
    pressure = hpa_to_mmhg(700.0)
    assert dew_point(celsius_to_kelvin(5.0), pressure) > dew_point(
        celsius_to_kelvin(-3.0), pressure
    )


def test_dew_point_rejects_negative_vapour_pressure():
    with pytest.raises(ValueError):
        dew_point(200.0, 500.0)


def test_init_wind_ranges():
    wind_x, wind_y = init_wind(16, 24, np.random.default_rng(3))
    assert wind_x.shape == (16, 24) and wind_y.shape == (16, 24)
    assert wind_x.dtype == np.float32
    assert wind_x.min() >= 14.9 - 1e-5 and wind_x.max() <= 15.1 + 1e-5
    assert wind_y.min() >= 11.9 - 1e-5 and wind_y.max() <= 12.1 + 1e-5


def test_init_wind_is_deterministic_for_a_seed():
    first = init_wind(8, 8, np.random.default_rng(7))
    second = init_wind(8, 8, np.random.default_rng(7))
    assert np.array_equal(first[0], second[0])
    assert np.array_equal(first[1], second[1])


def test_init_cloud_layout():
    a, b = init_cloud(64, 64, np.random.default_rng(5))
    dew = dew_point(celsius_to_kelvin(-3.0), hpa_to_mmhg(700.0))
    assert np.all(b == np.float32(-3.0))
    assert a[0, 0] == np.float32(-3.0)
    cloud = a[a != np.float32(-3.0)]
    assert cloud.size > 0
    assert cloud.min() >= dew - 0.5 - 1e-4
    assert cloud.max() <= dew + 0.5 + 1e-4
    assert dew - 0.5 - 1e-4 <= a[32, 32] <= dew + 0.5 + 1e-4


def test_init_cloud_is_deterministic_by_default():
    first, _ = init_cloud(64, 64)
    second, _ = init_cloud(64, 64)
    assert np.array_equal(first, second)


def test_init_cloud_rejects_small_grid():
    with pytest.raises(ValueError):
        init_cloud(10, 10)


def test_zero_steps_leave_grid_unchanged():
    a, b = init_cloud(64, 64)
    wind_x, wind_y = init_wind(64, 64)
    before = a.copy()
    cloudsim(0, a, b, wind_x, wind_y)
    assert np.array_equal(a, before)


def test_uniform_field_single_step():
    a = np.full((8, 8), -3.0, dtype=np.float32)
    b = np.zeros_like(a)
    wind_x, wind_y = init_wind(8, 8)
    cloudsim(1, a, b, wind_x, wind_y)
    nan_positions = set(zip(*np.nonzero(np.isnan(a))))
    assert nan_positions == {(0, 2)}
    assert np.all(a[~np.isnan(a)] == np.float32(-3.0))


def test_uniform_field_two_steps_spreads_nan():
    a = np.full((8, 8), -3.0, dtype=np.float32)
    b = np.zeros_like(a)
    wind_x, wind_y = init_wind(8, 8)
    cloudsim(2, a, b, wind_x, wind_y)
    nan_positions = {(int(i), int(j)) for i, j in zip(*np.nonzero(np.isnan(a)))}
    assert nan_positions == {(0, 1), (0, 2), (0, 3), (1, 2)}


def test_result_copied_into_scratch_grid():
    a, b = init_cloud(64, 64)
    wind_x, wind_y = init_wind(64, 64)
    cloudsim(2, a, b, wind_x, wind_y)
    np.testing.assert_array_equal(a, b)


def test_wind_term_never_applies():
    first, scratch_one = init_cloud(64, 64)
    second, scratch_two = first.copy(), scratch_one.copy()
    cloudsim(1, first, scratch_one, *init_wind(64, 64, np.random.default_rng(2)))
    cloudsim(1, second, scratch_two, *init_wind(64, 64, np.random.default_rng(9)))
    np.testing.assert_array_equal(first, second)


def test_rejects_non_square_grid():
    a = np.zeros((4, 6), dtype=np.float32)
    with pytest.raises(ValueError):
        cloudsim(1, a, a.copy(), a.copy(), a.copy())


def test_rejects_shape_mismatch():
    a = np.zeros((4, 4), dtype=np.float32)
    with pytest.raises(ValueError):
        cloudsim(1, a, np.zeros((5, 5), dtype=np.float32), a.copy(), a.copy())


def test_rejects_negative_steps():
    a = np.zeros((4, 4), dtype=np.float32)
    with pytest.raises(ValueError):
        cloudsim(-1, a, a.copy(), a.copy(), a.copy())
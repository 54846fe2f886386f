"""Cellular-automaton simulation of cloud temperature under conduction and wind."""

from __future__ import annotations

import math

import numpy as np

_f32 = np.float32

WIND_X_BASE = 15
WIND_Y_BASE = 12
DISTURB = _f32(0.1)
CELL_LENGTH = _f32(0.1)
K = _f32(0.0243)
DELTA_DEW_POINT = _f32(0.5)
DELTA_T = _f32(0.001)
CLOUD_RADIUS = 20
ATMOSPHERIC_TEMPERATURE = _f32(-3.0)
ATMOSPHERIC_PRESSURE = _f32(700.0)


def _rng(rng) -> np.random.Generator:
    return np.random.default_rng(1) if rng is None else rng


def celsius_to_kelvin(celsius: float) -> float:
    """Celsius to Kelvin in single precision."""
    return float(_f32(celsius) + _f32(273.15))


def hpa_to_mmhg(hpa: float) -> float:
    """Hectopascals to millimetres of mercury in single precision."""
    return float(_f32(hpa) * _f32(0.750062))


def millibars_to_mmhg(millibars: float) -> float:
    """Millibars to millimetres of mercury in single precision."""
    return float(_f32(millibars) * _f32(0.750062))


def real_pressure_vapor(temperature_kelvin: float, pressure_mmhg: float) -> float:
    """Real vapour pressure from temperature and pressure (psychrometric formula)."""
    if temperature_kelvin <= 0:
        raise ValueError(f"temperature must be positive kelvin: {temperature_kelvin}")
    kelvin = _f32(temperature_kelvin)
    pressure = _f32(pressure_mmhg)
    constant = _f32(6.7) * _f32(10.0 ** -4)
    depression = _f32(1.2)
    exponent = (
        float(_f32(-2937.4) / kelvin)
        - float(_f32(4.9283)) * math.log10(float(kelvin))
        + float(_f32(23.5470))
    )
    saturated = _f32(10.0 ** exponent)
    return float(
        _f32(millibars_to_mmhg(saturated)) - constant * pressure * depression
    )


def dew_point(temperature_kelvin: float, pressure_mmhg: float) -> float:
    """Dew point in Celsius; raises ValueError if the vapour pressure is not positive."""
    vapour = real_pressure_vapor(temperature_kelvin, pressure_mmhg)
    if vapour <= 0:
        raise ValueError(f"vapour pressure is not positive: {vapour}")
    log_vapour = math.log10(vapour)
    value = (float(_f32(186.4905)) - float(_f32(237.3)) * log_vapour) / (
        log_vapour - float(_f32(8.2859))
    )
    return float(_f32(value))


def init_wind(ni: int, nj: int, rng=None):
    """Wind components near 15 (x) and 12 (y), each disturbed by up to 0.1."""
    if ni < 0 or nj < 0:
        raise ValueError(f"invalid sizes: {ni} x {nj}")
    draws = _rng(rng).random((ni, nj, 2)).astype(np.float32)
    spread = _f32(2) * DISTURB
    wind_x = (_f32(WIND_X_BASE) - DISTURB) + draws[..., 0] * spread
    wind_y = (_f32(WIND_Y_BASE) - DISTURB) + draws[..., 1] * spread
    return wind_x.astype(np.float32), wind_y.astype(np.float32)


def init_cloud(ni: int, nj: int, rng=None):
    """Ambient temperature everywhere, with a disc of cells near the dew point.

    Returns the temperature grid and a scratch grid of the same shape.
    Raises ValueError if the disc falls outside the grid.
    """
    if ni <= 0 or nj <= 0:
        raise ValueError(f"invalid sizes: {ni} x {nj}")
    generator = _rng(rng)
    a = np.full((ni, nj), ATMOSPHERIC_TEMPERATURE, dtype=np.float32)
    b = a.copy()
    dew = _f32(
        dew_point(
            celsius_to_kelvin(ATMOSPHERIC_TEMPERATURE),
            hpa_to_mmhg(ATMOSPHERIC_PRESSURE),
        )
    )
    low = dew - DELTA_DEW_POINT
    high = dew + DELTA_DEW_POINT
    x0, y0 = nj // 2, ni // 2
    radius = CLOUD_RADIUS
    flat = a.reshape(-1)
    for i in range(x0 - radius, x0 + radius):
        reach = math.sqrt(float(radius) ** 2 - float(x0 - i) ** 2)
        y = int(-math.floor(reach - y0))
        top = y0 + (y0 - y)
        if top < y:
            continue
        cells = i * nj + np.arange(top, y - 1, -1)
        if cells.min() < 0 or cells.max() >= flat.size:
            raise ValueError(f"a {ni} x {nj} grid is too small for the cloud")
        draws = generator.random(cells.size).astype(np.float32)
        flat[cells] = low + draws * (high - low)
    return a, b


def cloudsim(tsteps: int, a: np.ndarray, b: np.ndarray, wind_x, wind_y) -> np.ndarray:
    """Advance the square temperature grid ``a`` by ``tsteps`` steps.

    Each step writes every cell into ``b`` and copies ``b`` back to ``a``.
    The neighbour count that divides the conduction term starts at four and
    is lowered once for every grid edge a visited cell touches; it runs on
    across cells and steps without being reset, and the wind term is only
    added while it still equals four.
    """
    if tsteps < 0:
        raise ValueError(f"time steps must not be negative: {tsteps}")
    wind_x = np.asarray(wind_x)
    wind_y = np.asarray(wind_y)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"expected a square grid, got shape {a.shape}")
    for other in (b, wind_x, wind_y):
        if other.shape != a.shape:
            raise ValueError(f"shape mismatch: {a.shape} vs {other.shape}")
    if not np.issubdtype(a.dtype, np.floating):
        raise ValueError(f"expected a floating grid, got {a.dtype}")
    n = a.shape[0]
    if n == 0 or tsteps == 0:
        return a

    kind = a.dtype
    rows, cols = np.indices((n, n))
    edges = (
        (cols == 0).astype(np.int64)
        + (rows == 0)
        + (cols == n - 1)
        + (rows == n - 1)
    )
    visited = np.cumsum(edges.ravel()).reshape(n, n)
    per_step = int(visited[-1, -1])

    k = kind.type(K)
    dt = kind.type(DELTA_T)
    cell = kind.type(CELL_LENGTH)
    four = kind.type(4)
    zero = kind.type(0)
    blows_east = wind_x > 0
    blows_south = wind_y > 0
    speed_x = np.where(blows_east, wind_x, -wind_x).astype(kind)
    speed_y = np.where(blows_south, wind_y, -wind_y).astype(kind)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for step in range(tsteps):
            count = 4 - step * per_step - visited
            padded = np.pad(a, 1, mode="edge")
            north = padded[:-2, 1:-1]
            south = padded[2:, 1:-1]
            west = padded[1:-1, :-2]
            east = padded[1:-1, 2:]
            total = four * a - (north + west + east + south)
            conduction = -k * (total / count.astype(kind)) * dt
            result = a + conduction
            neighbour_x = np.where(blows_east, east, west)
            neighbour_y = np.where(blows_south, south, north)
            advection = (-speed_x * ((a - neighbour_x) / cell)) - (
                speed_y * ((a - neighbour_y) / cell)
            )
            b[...] = result + np.where(count == 4, advection * dt, zero)
            a[...] = b
    return a
"""Three-dimensional heat-equation stencils of growing radius."""

from __future__ import annotations

import numpy as np

from stencilbench.datasets import DataType

WEIGHT = 0.125
CENTRE_FACTOR = 2.0


def _dtype(dtype) -> np.dtype:
    if isinstance(dtype, DataType):
        return dtype.numpy_dtype()
    return np.dtype(dtype)


def radius_for_points(points: int) -> int:
    """Stencil radius for a 3D star stencil of ``points`` points (6 r + 1)."""
    if points < 7 or (points - 1) % 6 != 0:
        raise ValueError(f"a 3D star stencil has 6 r + 1 points, not {points}")
    return (points - 1) // 6


def init_heat3d(n: int, dtype=DataType.FLOAT):
    """Two equal cubes with ``a[i, j, k] = (i + j + (n - k)) * 10 / n``."""
    if n <= 0:
        raise ValueError(f"size must be positive: {n}")
    kind = _dtype(dtype)
    i, j, k = np.indices((n, n, n))
    base = i + j + (n - k)
    if np.issubdtype(kind, np.integer):
        a = (base * 10 // n).astype(kind)
    else:
        a = (base.astype(kind) * kind.type(10) / kind.type(n)).astype(kind)
    return a, a.copy()


def _shift(x: np.ndarray, radius: int, axis: int, offset: int) -> np.ndarray:
    n = x.shape
    index = [slice(radius, n[d] - radius) for d in range(3)]
    index[axis] = slice(radius + offset, n[axis] - radius + offset)
    return x[tuple(index)]


def _sweep(src: np.ndarray, radius: int, axes, sign: int, c, two) -> np.ndarray:
    """Sum of the per-axis second-difference terms plus the weighted centre."""
    centre = _shift(src, radius, 0, 0)
    total = None
    for axis in axes:
        for d in range(radius, 0, -1):
            plus = _shift(src, radius, axis, d)
            minus = _shift(src, radius, axis, -d)
            inner = plus + two * centre if sign > 0 else plus - two * centre
            term = c * (inner + minus)
            total = term if total is None else total + term
    return total + c * centre


def kernel_heat3d(tsteps: int, a: np.ndarray, b: np.ndarray, radius: int) -> np.ndarray:
    """Run ``tsteps`` steps of the star stencil of the given radius.

    Each step writes a smoothing sweep of ``a`` into the interior of ``b``
    and then a second-difference sweep of ``b`` back into ``a``; cells
    within ``radius`` of a face are left untouched.
    """
    if tsteps < 0:
        raise ValueError(f"time steps must not be negative: {tsteps}")
    if radius < 1:
        raise ValueError(f"radius must be at least 1: {radius}")
    if a.ndim != 3 or b.ndim != 3:
        raise ValueError("expected 3-dimensional arrays")
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")
    if min(a.shape) <= 2 * radius:
        return a

    floating = np.issubdtype(a.dtype, np.floating)
    if floating:
        c = a.dtype.type(WEIGHT)
        two = a.dtype.type(CENTRE_FACTOR)
    else:
        c = WEIGHT
        two = CENTRE_FACTOR
    first_axes = (0, 1, 2) if radius == 1 else (2, 1, 0)
    interior = tuple(slice(radius, n - radius) for n in a.shape)

    for _ in range(tsteps):
        src = a if floating else a.astype(np.float64)
        b[interior] = _sweep(src, radius, first_axes, +1, c, two)
        src = b if floating else b.astype(np.float64)
        a[interior] = _sweep(src, radius, (0, 1, 2), -1, c, two)
    return a
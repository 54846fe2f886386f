"""One- and two-dimensional Jacobi stencils."""

from __future__ import annotations

import numpy as np

from stencilbench.datasets import DataType

JACOBI1D_WEIGHT = 0.33333
JACOBI2D_WEIGHT = 0.2


def _dtype(dtype) -> np.dtype:
    if isinstance(dtype, DataType):
        return dtype.numpy_dtype()
    return np.dtype(dtype)


def _check(tsteps: int, a: np.ndarray, b: np.ndarray, ndim: int) -> None:
    if tsteps < 0:
        raise ValueError(f"time steps must not be negative: {tsteps}")
    if a.ndim != ndim or b.ndim != ndim:
        raise ValueError(f"expected {ndim}-dimensional arrays")
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")


def _check_size(*sizes: int) -> None:
    if any(size < 0 for size in sizes):
        raise ValueError(f"sizes must not be negative: {sizes}")


def _ratio(numerator: np.ndarray, n: int, kind: np.dtype) -> np.ndarray:
    """``numerator / n`` in the element type; integers are truncated."""
    if np.issubdtype(kind, np.integer):
        return (numerator // n).astype(kind)
    return (numerator.astype(kind) / kind.type(n)).astype(kind)


def _double_scale(weight: float, total: np.ndarray) -> np.ndarray:
    """A double-precision weight applied to a sum in the element type."""
    return weight * total.astype(np.float64)


def _typed_scale(weight: float, total: np.ndarray) -> np.ndarray:
    """A weight first converted to the element type, then applied."""
    return total.dtype.type(weight) * total


def _scalar_scale(weight: float, total: np.ndarray) -> np.ndarray:
    """The weight in the element type for floats, in double otherwise."""
    if np.issubdtype(total.dtype, np.floating):
        return _typed_scale(weight, total)
    return _double_scale(weight, total)


def _three_point(x: np.ndarray) -> np.ndarray:
    return x[:-2] + x[1:-1] + x[2:]


def _five_point(x: np.ndarray) -> np.ndarray:
    return (
        x[1:-1, 1:-1]
        + x[1:-1, :-2]
        + x[1:-1, 2:]
        + x[2:, 1:-1]
        + x[:-2, 1:-1]
    )


def init_jacobi1d(n: int, dtype=DataType.DOUBLE):
    """Arrays ``a[i] = (i + 2) / n`` and ``b[i] = (i + 3) / n``."""
    _check_size(n)
    kind = _dtype(dtype)
    i = np.arange(n).astype(kind)
    a = _ratio(i + kind.type(2), n, kind)
    b = _ratio(i + kind.type(3), n, kind)
    return a, b


def kernel_jacobi1d_imper(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Average each interior point with its neighbours into ``b``, copy back to ``a``."""
    _check(tsteps, a, b, 1)
    for _ in range(tsteps):
        b[1:-1] = _double_scale(JACOBI1D_WEIGHT, _three_point(a))
        a[1:-1] = b[1:-1]
    return a


def kernel_jacobi1d(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Alternate three-point averaging from ``a`` into ``b`` and back."""
    _check(tsteps, a, b, 1)
    for _ in range(tsteps):
        b[1:-1] = _double_scale(JACOBI1D_WEIGHT, _three_point(a))
        a[1:-1] = _double_scale(JACOBI1D_WEIGHT, _three_point(b))
    return a


def init_jacobi2d(n: int, dtype=DataType.DOUBLE):
    """Arrays ``a[i, j] = (i (j + 2) + 2) / n`` and ``b[i, j] = (i (j + 3) + 3) / n``."""
    _check_size(n)
    kind = _dtype(dtype)
    i, j = np.indices((n, n))
    rows = i.astype(kind)
    a = _ratio(rows * (j + 2).astype(kind) + kind.type(2), n, kind)
    b = _ratio(rows * (j + 3).astype(kind) + kind.type(3), n, kind)
    return a, b


def kernel_jacobi2d_imper(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Five-point averaging into ``b`` with a double weight, copied back to ``a``."""
    _check(tsteps, a, b, 2)
    for _ in range(tsteps):
        b[1:-1, 1:-1] = _double_scale(JACOBI2D_WEIGHT, _five_point(a))
        a[1:-1, 1:-1] = b[1:-1, 1:-1]
    return a


def kernel_jacobi2d(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Alternate five-point averaging from ``a`` into ``b`` and back.

    The weight is taken in the element type for floating arrays.
    """
    _check(tsteps, a, b, 2)
    for _ in range(tsteps):
        b[1:-1, 1:-1] = _scalar_scale(JACOBI2D_WEIGHT, _five_point(a))
        a[1:-1, 1:-1] = _scalar_scale(JACOBI2D_WEIGHT, _five_point(b))
    return a


def init_four_point(ni: int, nj: int, dtype=DataType.FLOAT):
    """Arrays ``a[i, j] = (i (j + 2) + 2) / ni`` and ``b[i, j] = (i (j + 3) + 3) / ni``."""
    _check_size(ni, nj)
    kind = _dtype(dtype)
    i, j = np.indices((ni, nj))
    rows = i.astype(kind)
    a = _ratio(rows * (j + 2).astype(kind) + kind.type(2), ni, kind)
    b = _ratio(rows * (j + 3).astype(kind) + kind.type(3), ni, kind)
    return a, b


def jacobi2d_four_point(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Average the four direct neighbours (centre excluded), copied back to ``a``.

    The weight is converted to the element type before it is applied.
    """
    _check(tsteps, a, b, 2)
    for _ in range(tsteps):
        total = a[1:-1, :-2] + a[1:-1, 2:] + a[2:, 1:-1] + a[:-2, 1:-1]
        b[1:-1, 1:-1] = _typed_scale(JACOBI2D_WEIGHT, total)
        a[1:-1, 1:-1] = b[1:-1, 1:-1]
    return a


def jacobi1d_two_point(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Average the two neighbours of each interior point, copied back to ``a``."""
    _check(tsteps, a, b, 1)
    for _ in range(tsteps):
        b[1:-1] = _typed_scale(JACOBI2D_WEIGHT, a[2:] + a[:-2])
        a[1:-1] = b[1:-1]
    return a
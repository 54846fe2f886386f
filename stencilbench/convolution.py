"""Two- and three-dimensional convolution stencils."""

from __future__ import annotations

import numpy as np

from stencilbench.datasets import DataType

# Weights of the 3x3 neighbourhood, indexed by (di, dj) offset.
_CONV2D_WEIGHTS = (
    (0.2, -1, -1), (0.5, -1, 0), (-0.8, -1, 1),
    (-0.3, 0, -1), (0.6, 0, 0), (-0.9, 0, 1),
    (0.4, 1, -1), (0.7, 1, 0), (0.1, 1, 1),
)

# Terms of the 3D stencil in evaluation order, as (weight, di, dj, dk).
_CONV3D_TERMS = (
    (2, -1, -1, -1), (4, 1, -1, -1),
    (5, -1, -1, -1), (7, 1, -1, -1),
    (-8, -1, -1, -1), (10, 1, -1, -1),
    (-3, 0, -1, 0),
    (6, 0, 0, 0),
    (-9, 0, 1, 0),
    (2, -1, -1, 1), (4, 1, -1, 1),
    (5, -1, 0, 1), (7, 1, 0, 1),
    (-8, -1, 1, 1), (10, 1, 1, 1),
)


def _dtype(dtype) -> np.dtype:
    if isinstance(dtype, DataType):
        return dtype.numpy_dtype()
    return np.dtype(dtype)


def _check(a: np.ndarray, b: np.ndarray, ndim: int) -> None:
    if a.ndim != ndim or b.ndim != ndim:
        raise ValueError(f"expected {ndim}-dimensional arrays")
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")


def _shifted(a: np.ndarray, *offsets: int) -> np.ndarray:
    return a[tuple(slice(1 + d, n - 1 + d) for d, n in zip(offsets, a.shape))]


def init_conv2d(ni: int, nj: int, dtype=DataType.FLOAT):
    """Input ``a[i, j] = (i + j) / nj`` and a zeroed output of the same shape."""
    if ni < 0 or nj <= 0:
        raise ValueError(f"invalid sizes: {ni} x {nj}")
    kind = _dtype(dtype)
    i, j = np.indices((ni, nj))
    a = ((i + j).astype(kind) / kind.type(nj)).astype(kind)
    return a, np.zeros((ni, nj), dtype=kind)


def kernel_conv2d(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Write the 3x3 convolution of ``a`` into the interior of ``b``."""
    _check(a, b, 2)
    if min(a.shape) < 3:
        return b
    wide = a.astype(np.float64)
    total = np.zeros(_shifted(wide, 0, 0).shape, dtype=np.float64)
    for weight, di, dj in _CONV2D_WEIGHTS:
        total = total + weight * _shifted(wide, di, dj)
    b[1:-1, 1:-1] = total
    return b


def init_conv3d(ni: int, nj: int, nk: int, dtype=DataType.FLOAT):
    """Input ``a[i, j, k] = i % 12 + 2 (j % 7) + 3 (k % 13)`` and a zeroed output."""
    if ni < 0 or nj < 0 or nk < 0:
        raise ValueError(f"invalid sizes: {ni} x {nj} x {nk}")
    kind = _dtype(dtype)
    i, j, k = np.indices((ni, nj, nk))
    a = (i % 12 + 2 * (j % 7) + 3 * (k % 13)).astype(kind)
    return a, np.zeros((ni, nj, nk), dtype=kind)


def kernel_conv3d(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Write the 15-term 3D convolution of ``a`` into the interior of ``b``."""
    _check(a, b, 3)
    if min(a.shape) < 3:
        return b
    weight, di, dj, dk = _CONV3D_TERMS[0]
    total = weight * _shifted(a, di, dj, dk)
    for weight, di, dj, dk in _CONV3D_TERMS[1:]:
        total = total + weight * _shifted(a, di, dj, dk)
    b[1:-1, 1:-1, 1:-1] = total
    return b
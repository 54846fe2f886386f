"""Padded array allocation and the array dump format used by the benchmarks."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from stencilbench.datasets import DataType

MAX_DIMENSIONS = 5
DUMP_START = "==BEGIN DUMP_ARRAYS==\n"
DUMP_FINISH = "==END   DUMP_ARRAYS==\n"


def _dtype(dtype) -> np.dtype:
    if isinstance(dtype, DataType):
        return dtype.numpy_dtype()
    return np.dtype(dtype)


def alloc_array(shape, dtype=DataType.DOUBLE, padding: int = 0) -> np.ndarray:
    """A zeroed array of 1 to 5 dimensions, each grown by ``padding`` elements."""
    dims: tuple[int, ...] = (shape,) if isinstance(shape, int) else tuple(shape)
    if not 1 <= len(dims) <= MAX_DIMENSIONS:
        raise ValueError(
            f"arrays have 1 to {MAX_DIMENSIONS} dimensions, not {len(dims)}"
        )
    if padding < 0:
        raise ValueError(f"padding must not be negative: {padding}")
    if any(d < 0 for d in dims):
        raise ValueError(f"dimensions must not be negative: {dims}")
    return np.zeros(tuple(d + padding for d in dims), dtype=_dtype(dtype))


def dump_array(
    name: str,
    values: Iterable,
    data_type: DataType = DataType.DOUBLE,
    line_every: int = 20,
) -> str:
    """Render an array in the dump format, elements in row-major order.

    A line break is written before every element whose flat index is a
    multiple of ``line_every``.
    """
    if line_every <= 0:
        raise ValueError(f"line_every must be positive: {line_every}")
    flat = np.asarray(values).ravel().tolist()
    parts = [DUMP_START, f"begin dump: {name}"]
    for index, value in enumerate(flat):
        if index % line_every == 0:
            parts.append("\n")
        parts.append(data_type.format(value))
    parts.append(f"\nend   dump: {name}\n")
    parts.append(DUMP_FINISH)
    return "".join(parts)
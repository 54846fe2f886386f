"""Timing and result-comparison helpers shared by the benchmarks."""

from __future__ import annotations

import math
import time

import numpy as np

SMALL_FLOAT_VAL = float(np.float32(0.00000001))


def _f32(value: float) -> float:
    return float(np.float32(value))


def rtclock() -> float:
    """Wall-clock time in seconds."""
    return time.time()


def abs_val(a: float) -> float:
    """Absolute value in single precision."""
    a = _f32(a)
    return -a if a < 0 else a


def percent_diff(val1: float, val2: float) -> float:
    """Relative difference of two values in percent, in single precision.

    Both values below 0.01 in magnitude count as equal.
    """
    if abs_val(val1) < 0.01 and abs_val(val2) < 0.01:
        return 0.0
    numerator = abs_val(val1 - val2)
    denominator = abs_val(val1 + SMALL_FLOAT_VAL)
    if denominator == 0.0:
        return math.inf if numerator else math.nan
    return _f32(100.0 * abs_val(_f32(numerator / denominator)))


def count_mismatches(expected, actual, threshold: float) -> int:
    """Count element pairs whose percent difference exceeds the threshold."""
    left = np.asarray(expected)
    right = np.asarray(actual)
    if left.shape != right.shape:
        raise ValueError(f"shape mismatch: {left.shape} vs {right.shape}")
    return sum(
        percent_diff(a, b) > threshold
        for a, b in zip(left.ravel().tolist(), right.ravel().tolist())
    )
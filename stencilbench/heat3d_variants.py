"""The family of 3D heat stencils, selected by their number of points."""

from __future__ import annotations

import numpy as np

from stencilbench.datasets import DataType
from stencilbench.heat3d import init_heat3d, kernel_heat3d, radius_for_points

VARIANT_POINTS = (7, 13, 19, 25, 31)
"""Point counts of the available star stencils (radius 1 to 5)."""


def variant_points() -> tuple[int, ...]:
    """Point counts of the available 3D heat stencils, smallest first."""
    return VARIANT_POINTS


def run_variant(
    points: int, tsteps: int, n: int, dtype=DataType.FLOAT
) -> np.ndarray:
    """Initialise an ``n``-cube and run ``tsteps`` steps of the chosen stencil.

    Returns the first array, which holds the result.
    """
    if points not in VARIANT_POINTS:
        raise ValueError(
            f"no {points}-point variant; choose one of {VARIANT_POINTS}"
        )
    a, b = init_heat3d(n, dtype)
    return kernel_heat3d(tsteps, a, b, radius_for_points(points))
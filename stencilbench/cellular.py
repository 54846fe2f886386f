"""Binary cellular automata: a game-of-life variant and a fur-pattern model."""

from __future__ import annotations

import numpy as np

FUR_LEVEL = 1
FUR_POWER = np.float32(2.0)


def init_grid(ni: int, nj: int):
    """Two equal int grids with ``a[i, j] = (i (j + 2) + 3) % 2``."""
    if ni < 0 or nj < 0:
        raise ValueError(f"invalid sizes: {ni} x {nj}")
    i, j = np.indices((ni, nj))
    a = ((i * (j + 2) + 3) % 2).astype(np.int32)
    return a, a.copy()


def _check(tsteps: int, a: np.ndarray, b: np.ndarray) -> None:
    if tsteps < 0:
        raise ValueError(f"time steps must not be negative: {tsteps}")
    if a.ndim != 2 or b.ndim != 2:
        raise ValueError("expected 2-dimensional grids")
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")


def game_of_life(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Advance the grid ``tsteps`` steps, leaving the border fixed.

    Only the four diagonal neighbours are counted, and the count is a
    running total over the cells in row-major order and over all steps,
    never reset. A cell becomes 1 when the total is 3, or 2 while the cell
    is alive, and 0 otherwise.
    """
    _check(tsteps, a, b)
    if min(a.shape) < 3:
        return a
    carried = 0
    for _ in range(tsteps):
        src = a.astype(np.int64)
        diagonals = src[:-2, :-2] + src[:-2, 2:] + src[2:, :-2] + src[2:, 2:]
        running = carried + np.cumsum(diagonals.ravel()).reshape(diagonals.shape)
        carried = int(running[-1, -1])
        alive = src[1:-1, 1:-1] != 0
        born = (running == 3) | ((running == 2) & alive)
        b[1:-1, 1:-1] = np.where(born, 1, 0)
        a[1:-1, 1:-1] = b[1:-1, 1:-1]
    return a


def _fur_offsets(nj: int):
    level = FUR_LEVEL
    activators = [
        y * nj + x
        for y in range(-level, level + 1)
        for x in range(-level, level + 1)
        if x != 0 or y != 0
    ]
    inhibitors = [
        y * nj + x
        for y in range(-2 * level, 2 * level + 1)
        for x in range(-2 * level, 2 * level + 1)
        if (x != 0 or y != 0)
        and not (-level <= x <= level and -level <= y <= level)
    ]
    return activators, inhibitors


def fur(tsteps: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Advance the activator-inhibitor fur pattern ``tsteps`` steps.

    Activators are the 8 nearest cells, inhibitors the ring of 16 around
    them, each weighted by 2. Neighbours are addressed in the flattened
    grid, so columns past an edge wrap into the adjacent row; cells
    outside the grid read as 0. Both sums run on across cells and steps
    without being reset. A cell becomes 0 when activation is below the
    weighted inhibition, 1 when above, and keeps its value when equal.
    """
    _check(tsteps, a, b)
    ni, nj = a.shape
    if ni < 3 or nj < 3:
        return a
    activators, inhibitors = _fur_offsets(nj)
    pad = 2 * nj + 2
    rows, cols = np.indices((ni - 2, nj - 2))
    positions = ((rows + 1) * nj + (cols + 1)).ravel() + pad
    carry_a = 0
    carry_i = 0
    for _ in range(tsteps):
        flat = np.concatenate(
            [
                np.zeros(pad, dtype=np.int64),
                a.ravel().astype(np.int64),
                np.zeros(pad, dtype=np.int64),
            ]
        )
        sum_a = sum(flat[positions + offset] for offset in activators)
        sum_i = sum(flat[positions + offset] for offset in inhibitors)
        running_a = carry_a + np.cumsum(sum_a)
        running_i = carry_i + np.cumsum(sum_i)
        carry_a = int(running_a[-1])
        carry_i = int(running_i[-1])
        diff = running_a.astype(np.float32) - running_i.astype(np.float32) * FUR_POWER
        centre = a[1:-1, 1:-1].ravel()
        updated = np.where(diff < 0, 0, np.where(diff > 0, 1, centre))
        b[1:-1, 1:-1] = updated.reshape(ni - 2, nj - 2)
        a[1:-1, 1:-1] = b[1:-1, 1:-1]
    return a
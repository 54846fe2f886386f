"""Timing, cache flushing and padded allocation used around benchmark kernels."""

from __future__ import annotations

from typing import Callable

import numpy as np

from stencilbench.utils import rtclock

DEFAULT_CACHE_SIZE_KB = 32770
"""Size of the buffer read to evict the last-level cache, in KiB."""

FLOPS_WARNING = (
    "[PolyBench][WARNING] Program flops not defined, "
    "use polybench_set_program_flops(value)"
)


def flush_cache(size_kb: int = DEFAULT_CACHE_SIZE_KB) -> float:
    """Read a zeroed buffer of ``size_kb`` KiB to push other data out of cache.

    Returns the sum of the buffer, which is always zero.
    """
    if size_kb < 0:
        raise ValueError(f"cache size must not be negative: {size_kb}")
    count = size_kb * 1024 // np.dtype(np.float64).itemsize
    total = float(np.zeros(count, dtype=np.float64).sum())
    if total > 10.0:
        raise RuntimeError(f"cache flush buffer was not zeroed: sum {total}")
    return total


class Timer:
    """Wall-clock timer around a kernel run; also usable as a context manager."""

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        flush: bool = True,
        cache_size_kb: int = DEFAULT_CACHE_SIZE_KB,
    ) -> None:
        self._clock = clock if clock is not None else rtclock
        self._flush = flush
        self._cache_size_kb = cache_size_kb
        self._start: float | None = None
        self._end: float | None = None

    def start(self) -> None:
        """Prepare the machine (flush the cache if enabled) and start timing."""
        if self._flush:
            flush_cache(self._cache_size_kb)
        self._end = None
        self._start = self._clock()

    def stop(self) -> None:
        """Stop timing."""
        if self._start is None:
            raise RuntimeError("timer stopped before it was started")
        self._end = self._clock()

    def elapsed(self) -> float:
        """Seconds between the last start and stop."""
        if self._start is None or self._end is None:
            raise RuntimeError("timer has not been started and stopped")
        return self._end - self._start

    def report(self, flops: float | None = None) -> str:
        """Render the measurement.

        Without ``flops`` the elapsed seconds are given to six decimals.
        With ``flops`` the rate in GFLOP/s is given to two decimals; a flop
        count of zero gives a warning line followed by the elapsed seconds.
        """
        seconds = self.elapsed()
        if flops is None:
            return f"{seconds:0.6f}"
        if flops == 0:
            return f"{FLOPS_WARNING}\n{seconds:0.6f}"
        if seconds == 0:
            raise ZeroDivisionError("cannot compute a rate over zero seconds")
        return f"{flops / seconds / 1_000_000_000:0.2f}"

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class AllocTable:
    """Allocator applying growing inter-array padding and tracking live blocks.

    Each allocation grows the padding by ``padding_factor`` bytes. The block
    handed out is a view that starts after the padding; the whole block can
    be released through either that view or its base array.
    """

    def __init__(self, padding_factor: int = 0) -> None:
        if padding_factor < 0:
            raise ValueError(f"padding factor must not be negative: {padding_factor}")
        self._padding_factor = padding_factor
        self._padding = 0
        self._entries: list[tuple[np.ndarray, np.ndarray]] = []

    def alloc(self, n: int, elt_size: int) -> np.ndarray:
        """Allocate ``n`` elements of ``elt_size`` bytes; return the byte view."""
        if n < 0 or elt_size < 0:
            raise ValueError(f"invalid allocation: {n} elements of {elt_size} bytes")
        size = n * elt_size
        self._padding += self._padding_factor
        real = np.zeros(size + self._padding, dtype=np.uint8)
        view = real[self._padding:]
        self._entries.append((view, real))
        return view

    def free(self, handle: np.ndarray) -> bool:
        """Release the block ``handle`` belongs to; False if it is not tracked."""
        for position, (view, real) in enumerate(self._entries):
            if handle is view or handle is real:
                del self._entries[position]
                return True
        return False

    def __len__(self) -> int:
        return len(self._entries)
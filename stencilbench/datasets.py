"""Problem-size tables and element types for the stencil benchmarks."""

from __future__ import annotations

import enum

import numpy as np


class Dataset(enum.Enum):
    """Named problem sizes."""

    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    STANDARD = "standard"
    LARGE = "large"
    EXTRALARGE = "extralarge"


class DataType(enum.Enum):
    """Element type of the benchmark arrays."""

    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"

    def format(self, value) -> str:
        """Render one element the way the benchmark dumps print it."""
        if self is DataType.INT:
            return f"{int(value)} "
        return f"{float(value):0.2f} "

    def numpy_dtype(self) -> np.dtype:
        """The numpy dtype matching this element type."""
        return np.dtype(
            {
                DataType.INT: np.int32,
                DataType.FLOAT: np.float32,
                DataType.DOUBLE: np.float64,
            }[self]
        )


def _square(tsteps: int, n: int) -> dict[str, int]:
    return {"TSTEPS": tsteps, "N": n}


def _cube(size: int) -> dict[str, int]:
    return {"TSTEPS": 5, "X": size, "Y": size, "Z": size, "N": size}


_PSKEL_KEYS = (
    "X", "Y", "Z", "N", "M", "NI", "NJ", "NK", "NL", "NM", "NQ", "NR", "NP",
    "NX", "NY", "CZ", "CYM", "CXM", "LARGE_N", "LENGTH", "TSTEPS", "ITER",
    "MAXGRID",
)


def _pskel(*values: int) -> dict[str, int]:
    return dict(zip(_PSKEL_KEYS, values, strict=True))


_TABLES: dict[str, tuple[Dataset, dict[Dataset, dict[str, int]]]] = {
    "common": (
        Dataset.STANDARD,
        {
            Dataset.MINI: _cube(32),
            Dataset.SMALL: _cube(64),
            Dataset.STANDARD: _cube(128),
            Dataset.LARGE: _cube(256),
            Dataset.EXTRALARGE: _cube(512),
        },
    ),
    "conv2d": (
        Dataset.LARGE,
        {
            Dataset.MINI: {"NI": 64, "NJ": 64},
            Dataset.SMALL: {"NI": 1024, "NJ": 1024},
            Dataset.STANDARD: {"NI": 2048, "NJ": 2048},
            Dataset.LARGE: {"NI": 4096, "NJ": 4096},
            Dataset.EXTRALARGE: {"NI": 8192, "NJ": 8192},
        },
    ),
    "conv3d": (
        Dataset.LARGE,
        {
            Dataset.MINI: {"NI": 64, "NJ": 64, "NK": 64},
            Dataset.SMALL: {"NI": 128, "NJ": 128, "NK": 128},
            Dataset.STANDARD: {"NI": 192, "NJ": 192, "NK": 192},
            Dataset.LARGE: {"NI": 256, "NJ": 256, "NK": 256},
            Dataset.EXTRALARGE: {"NI": 384, "NJ": 384, "NK": 384},
        },
    ),
    "jacobi-1d-imper": (
        Dataset.STANDARD,
        {
            Dataset.MINI: _square(2, 500),
            Dataset.SMALL: _square(10, 1000),
            Dataset.STANDARD: _square(100, 10000),
            Dataset.LARGE: _square(1000, 100000),
            Dataset.EXTRALARGE: _square(1000, 1000000),
        },
    ),
    "jacobi-2d-imper": (
        Dataset.STANDARD,
        {
            Dataset.MINI: _square(2, 32),
            Dataset.SMALL: _square(10, 500),
            Dataset.STANDARD: _square(20, 1000),
            Dataset.LARGE: _square(20, 2000),
            Dataset.EXTRALARGE: _square(100, 4000),
        },
    ),
    "jacobi1d": (
        Dataset.LARGE,
        {
            Dataset.MINI: _square(20, 30),
            Dataset.SMALL: _square(40, 120),
            Dataset.MEDIUM: _square(100, 400),
            Dataset.LARGE: _square(500, 2000),
            Dataset.EXTRALARGE: _square(1000, 4000),
        },
    ),
    "jacobi2d": (
        Dataset.LARGE,
        {
            Dataset.MINI: _square(20, 30),
            Dataset.SMALL: _square(40, 90),
            Dataset.MEDIUM: _square(100, 250),
            Dataset.LARGE: _square(500, 1300),
            Dataset.EXTRALARGE: _square(1000, 2800),
        },
    ),
    "pskel": (
        Dataset.STANDARD,
        {
            Dataset.MINI: _pskel(
                32, 32, 32, 32, 32, 32, 32, 32, 32, 32, 10, 10, 10,
                32, 32, 32, 32, 32, 500, 32, 2, 10, 2,
            ),
            Dataset.SMALL: _pskel(
                64, 64, 64, 256, 256, 128, 128, 128, 128, 128, 32, 32, 32,
                500, 500, 64, 64, 64, 1000, 50, 10, 10, 8,
            ),
            Dataset.STANDARD: _pskel(
                128, 128, 128, 1024, 1024, 1024, 1024, 1024, 1024, 1024,
                128, 128, 128, 4000, 4000, 256, 256, 256, 10000, 50, 10,
                10, 32,
            ),
            Dataset.LARGE: _pskel(
                256, 256, 256, 2048, 2048, 2048, 2048, 2048, 2048, 2048,
                256, 256, 256, 4096, 4096, 512, 512, 512, 2048 * 2048, 500,
                10, 100, 128,
            ),
            Dataset.EXTRALARGE: _pskel(
                512, 512, 512, 4000, 4000, 4000, 4000, 4000, 4000, 4000,
                1000, 1000, 1000, 100000, 100000, 1000, 1000, 1000,
                10000000, 500, 10, 1000, 512,
            ),
        },
    ),
}

# The game of life fixes its own size whatever dataset is asked for.
_GOL_SIZES = {"N": 256, "TSTEPS": 2}
_TABLES["gol"] = (Dataset.STANDARD, {d: dict(_GOL_SIZES) for d in Dataset})

_ALIASES = {
    "heat3d": "common",
    "cloudsim": "pskel",
    "fur": "pskel",
    "convolution-2d": "conv2d",
    "convolution-3d": "conv3d",
}


def _table(benchmark: str) -> tuple[Dataset, dict[Dataset, dict[str, int]]]:
    key = benchmark.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return _TABLES[key]
    except KeyError:
        raise ValueError(f"unknown benchmark: {benchmark!r}") from None


def parse_dataset(name: str | Dataset) -> Dataset:
    """Accept 'large', 'LARGE' or 'LARGE_DATASET' and return the Dataset."""
    if isinstance(name, Dataset):
        return name
    key = name.strip().lower()
    if key.endswith("_dataset"):
        key = key[: -len("_dataset")]
    try:
        return Dataset(key)
    except ValueError:
        raise ValueError(f"unknown dataset: {name!r}") from None


def default_dataset(benchmark: str) -> Dataset:
    """The dataset a benchmark uses when none is chosen."""
    return _table(benchmark)[0]


def sizes(benchmark: str, dataset: str | Dataset | None = None) -> dict[str, int]:
    """Problem sizes of a benchmark for a dataset (its default if None)."""
    default, table = _table(benchmark)
    chosen = default if dataset is None else parse_dataset(dataset)
    try:
        return dict(table[chosen])
    except KeyError:
        raise ValueError(
            f"benchmark {benchmark!r} has no {chosen.value} dataset"
        ) from None
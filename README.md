# stencilbench

Stencil computations for benchmarking, written with NumPy arrays. Each
benchmark has an initialiser that builds its input arrays and a kernel that
updates them in place.

| Module | Contents |
| --- | --- |
| `stencilbench.jacobi` | 1D and 2D Jacobi iterations: `kernel_jacobi1d`, `kernel_jacobi1d_imper`, `kernel_jacobi2d`, `kernel_jacobi2d_imper`, `jacobi1d_two_point`, `jacobi2d_four_point`, with `init_jacobi1d`, `init_jacobi2d`, `init_four_point` |
| `stencilbench.convolution` | 3x3 2D convolution and 15-term 3D convolution: `init_conv2d`, `kernel_conv2d`, `init_conv3d`, `kernel_conv3d` |
| `stencilbench.heat3d` | 3D heat-equation star stencils of any radius: `init_heat3d`, `kernel_heat3d`, `radius_for_points` |
| `stencilbench.heat3d_variants` | the 7, 13, 19, 25 and 31-point stencils by point count: `variant_points`, `run_variant` |
| `stencilbench.cellular` | a game-of-life variant and an activator/inhibitor fur automaton: `init_grid`, `game_of_life`, `fur` |
| `stencilbench.cloudsim` | a cellular-automaton cloud temperature simulation with conduction and wind: `init_cloud`, `init_wind`, `cloudsim`, plus the unit conversions and `dew_point` it uses |
| `stencilbench.datasets` | dataset size presets (`Dataset`, `sizes`, `default_dataset`, `parse_dataset`) and element types (`DataType`) |
| `stencilbench.instruments` | `Timer` (also a context manager), `flush_cache`, and `AllocTable`, an allocator with growing inter-array padding |
| `stencilbench.arrays` | `alloc_array` for padded zeroed arrays and `dump_array`, which renders an array in a text dump format |
| `stencilbench.utils` | `rtclock`, `abs_val`, `percent_diff` and `count_mismatches` for comparing results |

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Use

```python
from stencilbench.datasets import default_dataset, sizes
from stencilbench.jacobi import init_jacobi2d, kernel_jacobi2d
from stencilbench.instruments import Timer

dataset = default_dataset("jacobi2d")      # Dataset.LARGE
print(sizes("jacobi2d", "mini"))           # {'TSTEPS': 20, 'N': 30}

a, b = init_jacobi2d(30, "float64")
with Timer() as timer:
    kernel_jacobi2d(20, a, b)
print(timer.report())                      # elapsed seconds, six decimals
```

`Timer.report(flops)` gives a GFLOP/s rate instead when a flop count is
passed. By default `Timer.start()` first reads a 32770 KiB buffer to flush
the cache; pass `flush=False` to skip it.

Arrays can be written out in the dump format, a line break before every
twentieth element:

```python
from stencilbench.arrays import dump_array
from stencilbench.datasets import DataType

print(dump_array("A", a, DataType.DOUBLE))
```

Two results can be compared with `percent_diff`, which treats two values
both below 0.01 in magnitude as equal, and `count_mismatches`, which counts
element pairs whose percent difference exceeds a threshold:

```python
from stencilbench.utils import count_mismatches

count_mismatches(expected, actual, 0.05)
```

The 3D heat stencils are selected by point count:

```python
from stencilbench.heat3d_variants import run_variant, variant_points

print(variant_points())                    # (7, 13, 19, 25, 31)
result = run_variant(13, tsteps=2, n=16)
```

## Dataset presets

`sizes(benchmark, dataset)` knows the tables `common` (alias `heat3d`),
`conv2d` / `convolution-2d`, `conv3d` / `convolution-3d`, `jacobi-1d-imper`,
`jacobi-2d-imper`, `jacobi1d`, `jacobi2d`, `pskel` (aliases `cloudsim` and
`fur`) and `gol`. Dataset names may be given as `"large"`, `"LARGE"`,
`"LARGE_DATASET"` or a `Dataset` member; a benchmark asked for a dataset it
does not define raises `ValueError`.

## What it does not do

There is no command-line program and no ready-made runner that picks a
benchmark by name, times it and prints the result: benchmarks are run by
calling the initialiser, kernel and `Timer` from Python as shown above.
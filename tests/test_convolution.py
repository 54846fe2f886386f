import numpy as np
import pytest

from stencilbench.convolution import (
    init_conv2d,
    init_conv3d,
    kernel_conv2d,
    kernel_conv3d,
)
from stencilbench.datasets import DataType


def test_init_conv2d_shapes_and_types():
    a, b = init_conv2d(4, 5, DataType.FLOAT)
    assert a.shape == b.shape == (4, 5)
    assert a.dtype == np.float32
    assert a[0, 0] == 0
    assert a[2, 3] == pytest.approx(1.0)
    assert not b.any()


def test_init_conv2d_symmetric_in_indices():
    a, _ = init_conv2d(6, 6, DataType.DOUBLE)
    assert np.array_equal(a, a.T)


def test_init_conv2d_rejects_zero_columns():
    with pytest.raises(ValueError):
        init_conv2d(3, 0)


def test_kernel_conv2d_impulse_gives_weights():
    a = np.zeros((5, 5))
    a[2, 2] = 1.0
    b = kernel_conv2d(a, np.zeros((5, 5)))
    assert b[3, 3] == pytest.approx(0.2)
    assert b[2, 2] == pytest.approx(0.6)
    assert b[1, 1] == pytest.approx(0.1)
    assert b[3, 1] == pytest.approx(-0.8)


def test_kernel_conv2d_leaves_border_and_is_linear():
    a, b = init_conv2d(8, 8, DataType.DOUBLE)
    b[:] = 7.0
    once = kernel_conv2d(a, b.copy())
    twice = kernel_conv2d(2 * a, b.copy())
    assert np.all(once[0, :] == 7.0)
    assert np.all(once[:, -1] == 7.0)
    assert np.allclose(twice[1:-1, 1:-1], 2 * once[1:-1, 1:-1])


def test_kernel_conv2d_shape_mismatch():
    with pytest.raises(ValueError):
        kernel_conv2d(np.zeros((4, 4)), np.zeros((4, 5)))


def test_init_conv3d_periodicity():
    a, b = init_conv3d(13, 8, 14, DataType.FLOAT)
    assert a.shape == b.shape == (13, 8, 14)
    assert a[12, 0, 0] == a[0, 0, 0] == 0
    assert a[0, 7, 0] == a[0, 0, 0]
    assert a[0, 0, 13] == a[0, 0, 0]
    assert a[1, 1, 1] == 6


def test_kernel_conv3d_impulse():
    a = np.zeros((5, 5, 5))
    a[2, 2, 2] = 1.0
    b = kernel_conv3d(a, np.zeros((5, 5, 5)))
    assert b[2, 2, 2] == 6
    assert b[2, 1, 2] == -9
    assert b[3, 3, 3] == -1


def test_kernel_conv3d_zero_input_gives_zero():
    a = np.zeros((6, 6, 6), dtype=np.float32)
    b = np.full((6, 6, 6), 3.0, dtype=np.float32)
    kernel_conv3d(a, b)
    assert not b[1:-1, 1:-1, 1:-1].any()
    assert np.all(b[0] == 3.0)


def test_kernel_conv3d_rejects_2d():
    with pytest.raises(ValueError):
        kernel_conv3d(np.zeros((4, 4)), np.zeros((4, 4)))
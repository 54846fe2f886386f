import numpy as np
import pytest

from stencilbench.arrays import alloc_array, dump_array
from stencilbench.datasets import DataType


def test_alloc_without_padding_matches_shape():
    a = alloc_array((3, 4), DataType.FLOAT)
    assert a.shape == (3, 4)
    assert a.dtype == np.float32
    assert not a.any()


def test_alloc_padding_grows_every_dimension():
    a = alloc_array((2, 3, 4), DataType.DOUBLE, padding=2)
    assert a.shape == (4, 5, 6)


def test_alloc_accepts_int_shape():
    a = alloc_array(7, np.int32)
    assert a.shape == (7,)
    assert a.dtype == np.int32


def test_alloc_five_dimensions_allowed():
    assert alloc_array((1, 1, 1, 1, 1)).ndim == 5


@pytest.mark.parametrize("shape", [(), (1, 1, 1, 1, 1, 1)])
def test_alloc_rejects_dimension_count(shape):
    with pytest.raises(ValueError):
        alloc_array(shape)


def test_alloc_rejects_negative_values():
    with pytest.raises(ValueError):
        alloc_array((3, -1))
    with pytest.raises(ValueError):
        alloc_array((3, 3), padding=-1)


def test_dump_frames():
    text = dump_array("A", np.zeros(3))
    assert text.startswith("==BEGIN DUMP_ARRAYS==\nbegin dump: A")
    assert text.endswith("\nend   dump: A\n==END   DUMP_ARRAYS==\n")


def test_dump_contains_every_element():
    values = np.arange(45, dtype=np.float64)
    text = dump_array("B", values)
    body = text.split("begin dump: B", 1)[1].split("\nend   dump", 1)[0]
    assert len(body.split()) == 45
    assert body.count("\n") == 3


def test_dump_int_format():
    text = dump_array("C", np.array([[1, 2], [3, 4]]), DataType.INT, line_every=2)
    assert "\n1 2 \n3 4 \nend   dump: C" in text


def test_dump_rejects_bad_line_every():
    with pytest.raises(ValueError):
        dump_array("A", [1.0], DataType.DOUBLE, 0)
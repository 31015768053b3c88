from unittest import TestCase
import array
import unittest

import numpy as np

from src.ndview.domain._dimension import D1, D2, D3, D4, DN
from src.ndview.domain._dtype import DataType
from src.ndview.domain._errors import (
    ConstructionError,
    SliceError,
    UnsupportedTypeError,
)
from src.ndview.infrastructure.creation import (
    arange,
    d1array,
    d2array,
    d3array,
    d4array,
    dnarray,
    empty,
    full,
    identity,
    linspace,
    ndarray,
    ndarray_of,
    ones,
    to_ndarray,
    zeros,
)


class TestFilledBuilders(TestCase):

    def test_empty_is_zero_initialized(self):
        a = empty((2, 3), dtype="int32")
        self.assertEqual(a.to_list(), [[0, 0, 0], [0, 0, 0]])
        self.assertIs(a.dim, D2())
        self.assertIs(zeros(4).dtype, DataType.FLOAT64)

    def test_declared_dimension_is_checked(self):
        self.assertIs(empty((2, 3), dim=D2).dim, D2())
        self.assertEqual(empty((2, 3, 4, 5, 6), dim=DN).ndim, 5)
        with self.assertRaises(ConstructionError):
            empty((2, 3), dim=D3)

    def test_ones_full_identity(self):
        self.assertEqual(ones(3, dtype=int).to_list(), [1, 1, 1])
        self.assertEqual(full((2, 2), 7.5).to_list(), [[7.5, 7.5], [7.5, 7.5]])
        self.assertEqual(identity(3, dtype="int8").to_list(), [[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_negative_shape(self):
        with self.assertRaises(ConstructionError):
            empty((2, -1))


class TestNdarrayFromValues(TestCase):

    def test_nested_lists(self):
        a = ndarray([[1, 2, 3], [4, 5, 6]], dtype="int32")
        self.assertEqual(a.shape, (2, 3))
        self.assertIs(a.dtype, DataType.INT32)
        self.assertEqual(a.strides, (3, 1))

    def test_inferred_kind(self):
        self.assertIs(ndarray([1, 2]).dtype, DataType.INT64)
        self.assertIs(ndarray([[1, 2.5]]).dtype, DataType.FLOAT64)

    def test_ragged_input(self):
        with self.assertRaises(ConstructionError) as cm:
            ndarray([[1, 2, 3], [4, 5]])
        self.assertIn("[1]", str(cm.exception))
        with self.assertRaises(ConstructionError):
            ndarray([[1, 2], [3, [4]]])
        with self.assertRaises(ConstructionError):
            ndarray([[1, 2], 3])

    def test_flat_values_with_shape(self):
        a = ndarray([1, 2, 3, 4, 5, 6], shape=(2, 3))
        self.assertEqual(a.to_list(), [[1, 2, 3], [4, 5, 6]])
        with self.assertRaises(ConstructionError):
            ndarray([1, 2, 3], shape=(2, 2))

    def test_three_and_four_dimensional_input(self):
        self.assertIs(ndarray([[[1], [2]]]).dim, D3())
        self.assertEqual(ndarray([[[[1, 2]]]]).shape, (1, 1, 1, 2))

    def test_scalar_input(self):
        a = ndarray(5)
        self.assertEqual(a.ndim, 0)
        self.assertEqual(a.item(), 5)

    def test_numpy_input_is_adopted(self):
        host = np.arange(6, dtype=np.float32).reshape(2, 3)
        a = ndarray(host)
        self.assertIs(a.dtype, DataType.FLOAT32)
        a.set(0, 0, 100.0)
        self.assertEqual(host[0, 0], 100.0)

    def test_numpy_input_with_other_kind_is_converted(self):
        host = np.arange(3, dtype=np.int64)
        a = ndarray(host, dtype="float64")
        a.set(0, 9.0)
        self.assertEqual(host[0], 0)

    def test_typed_buffer_is_adopted(self):
        host = array.array("d", [1.0, 2.0, 3.0, 4.0])
        a = ndarray(host, shape=(2, 2))
        a.set(1, 1, 40.0)
        self.assertEqual(host[3], 40.0)

    def test_ndarray_input_is_copied(self):
        src = arange(4)
        a = ndarray(src, dtype="int32")
        self.assertIs(a.dtype, DataType.INT32)
        self.assertIsNot(a.data, src.data)
        self.assertEqual(ndarray(src, shape=(2, 2)).to_list(), [[0, 1], [2, 3]])

    def test_unsupported_elements(self):
        with self.assertRaises(UnsupportedTypeError):
            ndarray([True, False])
        with self.assertRaises(UnsupportedTypeError):
            ndarray(np.array([1, 2], dtype=np.uint16))

    def test_ndarray_of_and_to_ndarray(self):
        self.assertEqual(ndarray_of(1, 2, 3).to_list(), [1, 2, 3])
        self.assertIs(ndarray_of(1, 2, dtype="int8").dtype, DataType.INT8)
        a = to_ndarray(x * x for x in range(4))
        self.assertEqual(a.to_list(), [0, 1, 4, 9])
        self.assertIs(a.dim, D1())


class TestGeneratedBuilders(TestCase):

    def test_init_called_once_in_row_major_order(self):
        seen = []

        def init(i):
            seen.append(i)
            return i * 10

        a = d2array(2, 3, init)
        self.assertEqual(seen, [0, 1, 2, 3, 4, 5])
        self.assertEqual(a.to_list(), [[0, 10, 20], [30, 40, 50]])
        self.assertIs(a.dtype, DataType.INT64)

    def test_each_rank(self):
        self.assertIs(d1array(3, float).dim, D1())
        self.assertEqual(d1array(3, float).to_list(), [0.0, 1.0, 2.0])
        self.assertIs(d3array(1, 2, 2, lambda i: i).dim, D3())
        self.assertIs(d4array(1, 1, 1, 2, lambda i: i, dtype="int16").dim, D4())
        a = dnarray((1, 1, 1, 1, 2), lambda i: i + 1)
        self.assertEqual(a.ndim, 5)
        self.assertEqual(list(a.flat()), [1, 2])


class TestRanges(TestCase):

    def test_arange(self):
        self.assertEqual(arange(5).to_list(), [0, 1, 2, 3, 4])
        self.assertEqual(arange(2, 11, 3).to_list(), [2, 5, 8])
        self.assertEqual(arange(5, 0, -2).to_list(), [5, 3, 1])
        self.assertIs(arange(3).dtype, DataType.INT64)
        self.assertEqual(arange(0, 1, 0.25).to_list(), [0.0, 0.25, 0.5, 0.75])
        self.assertEqual(arange(3, 3).size, 0)

    def test_arange_step_errors(self):
        with self.assertRaises(SliceError):
            arange(0, 5, -1)
        with self.assertRaises(SliceError):
            arange(5, 0, 1)
        with self.assertRaises(SliceError):
            arange(0, 5, 0)

    def test_linspace(self):
        a = linspace(0, 1, 5)
        self.assertEqual(a.to_list(), [0.0, 0.25, 0.5, 0.75, 1.0])
        self.assertEqual(linspace(0.1, 0.7, 7).get(6), 0.7)
        self.assertEqual(linspace(3, 9, 1).to_list(), [9.0])
        self.assertIs(linspace(0, 4, 3, dtype="int32").dtype, DataType.INT32)
        with self.assertRaises(ConstructionError):
            linspace(0, 1, 0)


if __name__ == "__main__":
    unittest.main()

from unittest import TestCase
import unittest

import numpy as np

from src.ndview.domain._dtype import DataType
from src.ndview.domain._errors import ShapeError, UnsupportedTypeError
from src.ndview.domain._layout import Layout
from src.ndview.infrastructure.creation import arange, ndarray


class TestToNumpy(TestCase):

    def test_contiguous_view_shares_buffer(self):
        a = arange(6, dtype="int32").reshape(2, 3)
        row = a[1]
        self.assertIs(row.layout, Layout.CONTIGUOUS)
        values = row.to_numpy()
        self.assertEqual(values.tolist(), [3, 4, 5])
        self.assertTrue(np.shares_memory(values, a.data.data))
        self.assertFalse(np.shares_memory(row.to_numpy(copy=True), a.data.data))

    def test_strided_view_is_gathered(self):
        a = arange(6, dtype="int32").reshape(2, 3)
        col = a[:, 2]
        self.assertIs(col.layout, Layout.STRIDED)
        values = col.to_numpy()
        self.assertEqual(values.dtype, np.int32)
        self.assertEqual(values.tolist(), [2, 5])

    def test_array_protocol(self):
        a = arange(4).reshape(2, 2).T
        np.testing.assert_array_equal(np.asarray(a), [[0, 2], [1, 3]])
        self.assertEqual(np.asarray(a, dtype=np.float32).dtype, np.float32)

    def test_to_list(self):
        self.assertEqual(arange(4).reshape(2, 2).to_list(), [[0, 1], [2, 3]])
        self.assertEqual(arange(4)[2:3].squeeze().to_list(), 2)


class TestCopies(TestCase):

    def test_copy_is_dense_and_independent(self):
        a = arange(12).reshape(3, 4)[::2, 1:3]
        c = a.copy()
        self.assertEqual(c, a)
        self.assertTrue(c.is_contiguous())
        self.assertEqual(c.strides, (2, 1))
        self.assertIsNone(c.base)
        c.set(0, 0, -1)
        self.assertEqual(a.get(0, 0), 1)

    def test_as_type_converts(self):
        a = ndarray([1.9, -1.9, 3.0])
        i8 = a.as_type(DataType.INT8)
        self.assertIs(i8.dtype, DataType.INT8)
        self.assertEqual(i8.to_list(), [1, -1, 3])

    def test_as_type_narrowing_integer_wraps(self):
        a = ndarray([127, 128, 256], dtype="int32")
        self.assertEqual(a.as_type("int8").to_list(), [127, -128, 0])

    def test_as_type_is_a_copy(self):
        a = ndarray([1, 2], dtype="int32")
        b = a.as_type("int32")
        b.set(0, 5)
        self.assertEqual(a.get(0), 1)


class TestInPlaceWrites(TestCase):

    def test_fill_through_strided_view(self):
        a = arange(6).reshape(2, 3)
        a[:, 0].fill(7)
        self.assertEqual(a.to_list(), [[7, 1, 2], [7, 4, 5]])

    def test_assign_broadcasts_array(self):
        a = ndarray([[0, 0, 0], [0, 0, 0]], dtype="float32")
        a.assign(ndarray([1.0, 2.0, 3.0]))
        self.assertEqual(a.to_list(), [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]])

    def test_assign_from_overlapping_view(self):
        a = arange(5)
        a[1:5].assign(a[0:4])
        self.assertEqual(a.to_list(), [0, 0, 1, 2, 3])

    def test_assign_shape_mismatch_writes_nothing(self):
        a = arange(4)
        with self.assertRaises(ShapeError):
            a.assign([1, 2])
        self.assertEqual(a.to_list(), [0, 1, 2, 3])

    def test_assign_rejects_non_numeric(self):
        a = arange(2)
        with self.assertRaises(UnsupportedTypeError):
            a.assign(True)
        with self.assertRaises(UnsupportedTypeError):
            a.assign(["a", "b"])


if __name__ == "__main__":
    unittest.main()

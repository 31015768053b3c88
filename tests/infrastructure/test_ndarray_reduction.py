from unittest import TestCase
import unittest

from src.ndview.domain._dimension import D1
from src.ndview.domain._dtype import DataType
from src.ndview.domain._errors import BoundsError, ShapeError
from src.ndview.infrastructure.creation import arange, empty, ndarray


class TestWholeArrayReductions(TestCase):

    def setUp(self):
        self.a = ndarray([[1, 5, 3], [4, 2, 6]], dtype="int32")

    def test_sum_min_max_mean(self):
        self.assertEqual(self.a.sum(), 21)
        self.assertEqual(self.a.min(), 1)
        self.assertEqual(self.a.max(), 6)
        self.assertEqual(self.a.mean(), 3.5)
        self.assertIsInstance(self.a.sum(), int)
        self.assertIsInstance(self.a.mean(), float)

    def test_strided_and_broadcast_views(self):
        col = self.a[:, 1]
        self.assertEqual(col.sum(), 7)
        self.assertEqual(col.max(), 5)
        b = ndarray([1, 2]).broadcast_to(3, 2)
        self.assertEqual(b.sum(), 9)

    def test_integer_sum_keeps_kind(self):
        a = ndarray([100, 100], dtype="int8")
        self.assertEqual(a.sum(), -56)

    def test_empty_arrays(self):
        e = empty((0,), dtype="int32")
        self.assertEqual(e.sum(), 0)
        for name in ("min", "max", "mean"):
            with self.subTest(name=name):
                with self.assertRaises(ShapeError):
                    getattr(e, name)()


class TestAxisReductions(TestCase):

    def setUp(self):
        self.a = arange(6, dtype="int64").reshape(2, 3)

    def test_sum_along_axes(self):
        s0 = self.a.sum(axis=0)
        self.assertEqual(s0.to_list(), [3, 5, 7])
        self.assertIs(s0.dim, D1())
        self.assertIs(s0.dtype, DataType.INT64)
        self.assertEqual(self.a.sum(axis=-1).to_list(), [3, 12])

    def test_min_max_mean_along_axis(self):
        self.assertEqual(self.a.min(axis=1).to_list(), [0, 3])
        self.assertEqual(self.a.T.max(axis=0).to_list(), [2, 5])
        m = self.a.mean(axis=0)
        self.assertIs(m.dtype, DataType.FLOAT64)
        self.assertEqual(m.to_list(), [1.5, 2.5, 3.5])

    def test_one_dimensional_axis_reduction_is_zero_dimensional(self):
        s = arange(4).sum(axis=0)
        self.assertEqual(s.ndim, 0)
        self.assertEqual(s.item(), 6)

    def test_axis_out_of_range(self):
        with self.assertRaises(BoundsError):
            self.a.sum(axis=2)

    def test_empty_reduced_axis(self):
        e = empty((3, 0), dtype="int32")
        self.assertEqual(e.max(axis=0).shape, (0,))
        with self.assertRaises(ShapeError):
            e.max(axis=1)
        self.assertEqual(e.sum(axis=1).to_list(), [0, 0, 0])


if __name__ == "__main__":
    unittest.main()

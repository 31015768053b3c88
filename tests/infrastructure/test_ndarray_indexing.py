from unittest import TestCase
import unittest

from src.ndview.domain._dimension import D1, D2
from src.ndview.domain._errors import BoundsError, ShapeError, SliceError
from src.ndview.domain._slice import Slice, r
from src.ndview.infrastructure.creation import arange, ndarray


class TestElementAccess(TestCase):

    def setUp(self):
        self.a = ndarray([[1, 2, 3], [4, 5, 6]], dtype="int32")

    def test_get_and_set(self):
        self.assertEqual(self.a.get(1, 2), 6)
        self.a.set(1, 2, 60)
        self.assertEqual(self.a.get(1, 2), 60)
        self.assertIsInstance(self.a.get(0, 0), int)

    def test_arity_must_match(self):
        with self.assertRaises(BoundsError):
            self.a.get(1)
        with self.assertRaises(BoundsError):
            self.a.get(0, 0, 0)
        with self.assertRaises(BoundsError):
            self.a.set(0, 7)

    def test_out_of_range_and_negative_indices(self):
        with self.assertRaises(BoundsError) as cm:
            self.a.get(0, 3)
        self.assertEqual(cm.exception.axis, 1)
        with self.assertRaises(IndexError):
            self.a.get(-1, 0)

    def test_item(self):
        self.assertEqual(self.a[1, 1:2].item(), 5)
        with self.assertRaises(ShapeError):
            self.a.item()


class TestSubscript(TestCase):

    def setUp(self):
        self.a = arange(12, dtype="int64").reshape(3, 4)

    def test_full_integer_key_reads_element(self):
        self.assertEqual(self.a[2, 3], 11)
        self.assertEqual(self.a[r(1), r(2)], 6)

    def test_partial_key_yields_row_view(self):
        row = self.a[1]
        self.assertEqual(row.shape, (4,))
        self.assertIs(row.dim, D1())
        self.assertIs(row.data, self.a.data)
        self.assertEqual(row.to_list(), [4, 5, 6, 7])

    def test_mixed_keys_consume_axes_left_to_right(self):
        col = self.a[Slice(0, 3, 2), 1]
        self.assertEqual(col.to_list(), [1, 9])
        block = self.a[1:, ::2]
        self.assertIs(block.dim, D2())
        self.assertEqual(block.to_list(), [[4, 6], [8, 10]])

    def test_slice_key_on_all_axes(self):
        self.assertEqual(self.a[r(0).to(2), Slice(2, 4)].to_list(), [[2, 3], [6, 7]])

    def test_too_many_indices(self):
        with self.assertRaises(BoundsError):
            self.a[0, 0, 0]

    def test_reversed_builtin_slices_are_rejected(self):
        v = arange(5)
        with self.assertRaises(SliceError):
            v[::-1]
        with self.assertRaises(SliceError):
            v[4:0:-1]
        with self.assertRaises(SliceError):
            v[3:1]
        with self.assertRaises(SliceError):
            self.a[:, 3:1]
        self.assertEqual(v[2:2].to_list(), [])

    def test_invalid_selectors(self):
        with self.assertRaises(TypeError):
            self.a[True, 0]
        with self.assertRaises(TypeError):
            self.a["x"]

    def test_element_assignment(self):
        self.a[0, 0] = 100
        self.assertEqual(self.a.get(0, 0), 100)

    def test_view_assignment_broadcasts_and_aliases(self):
        self.a[:, 1] = 0
        self.assertEqual(self.a.to_list(), [[0, 0, 2, 3], [4, 0, 6, 7], [8, 0, 10, 11]])
        self.a[1] = [9, 9, 9, 9]
        self.assertEqual(self.a[1].to_list(), [9, 9, 9, 9])

    def test_failed_view_assignment_writes_nothing(self):
        before = self.a.to_list()
        with self.assertRaises(ShapeError):
            self.a[0] = [1, 2, 3]
        self.assertEqual(self.a.to_list(), before)


if __name__ == "__main__":
    unittest.main()

from unittest import TestCase
import unittest

from src.ndview.domain._errors import BoundsError, SliceError
from src.ndview.domain._slice import RESERVED_STEP, RInt, Slice, r, range_to


class TestSliceNormalization(TestCase):

    def test_plain_bounds_are_kept(self):
        s = Slice(1, 5, 2)
        self.assertEqual((s.start, s.stop, s.step), (1, 5, 2))

    def test_reversed_bounds_are_swapped(self):
        s = Slice(5, 1, 1)
        self.assertEqual((s.start, s.stop, s.step), (1, 5, 1))

    def test_negative_step_is_stored_as_magnitude(self):
        s = Slice(0, 6, -2)
        self.assertEqual(s.step, 2)

    def test_zero_step_on_empty_range_is_canonical_empty(self):
        self.assertEqual(Slice(0, 0, 0), Slice.EMPTY)
        self.assertEqual(Slice(5, 5, 0), Slice.EMPTY)
        self.assertTrue(Slice(5, 5, 0).is_empty())

    def test_zero_step_on_non_empty_range_raises(self):
        with self.assertRaises(SliceError) as cm:
            Slice(0, 4, 0)
        self.assertEqual((cm.exception.start, cm.exception.stop, cm.exception.step), (0, 4, 0))

    def test_reserved_step_raises(self):
        with self.assertRaises(SliceError):
            Slice(0, 4, RESERVED_STEP)
        self.assertEqual(Slice(0, 4, RESERVED_STEP + 1).step, 2**31 - 1)

    def test_slice_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Slice(1, 2, 0)


class TestSliceBehavior(TestCase):

    def test_length(self):
        self.assertEqual(Slice(0, 10, 3).length(), 4)
        self.assertEqual(Slice(0, 10, 3).length(5), 2)
        self.assertEqual(Slice.EMPTY.length(), 0)

    def test_indices_clamps_stop(self):
        self.assertEqual(Slice(1, 100).indices(4), (1, 4, 1))

    def test_indices_allows_start_at_size(self):
        self.assertEqual(Slice(4, 9).indices(4), (4, 4, 1))

    def test_indices_rejects_start_past_size(self):
        with self.assertRaises(BoundsError):
            Slice(5, 9).indices(4)

    def test_negative_bounds_are_not_wrapped(self):
        with self.assertRaises(BoundsError):
            Slice(-1, 3).indices(4)
        with self.assertRaises(BoundsError):
            Slice(1, -1).indices(4)

    def test_contains(self):
        s = Slice(1, 7, 2)
        self.assertIn(3, s)
        self.assertNotIn(4, s)
        self.assertNotIn(7, s)
        self.assertNotIn(0, Slice.EMPTY)

    def test_by_replaces_step(self):
        self.assertEqual(Slice(0, 8).by(2).by(4), Slice(0, 8, 4))
        self.assertEqual(Slice(0, 8).by(r(3)), Slice(0, 8, 3))

    def test_equality_and_hash(self):
        self.assertEqual(Slice(1, 4, 1), Slice(4, 1, 1))
        self.assertEqual(hash(Slice(1, 4)), hash(Slice(1, 4)))
        self.assertEqual(hash(Slice(2, 2, 1)), hash(Slice.EMPTY))
        self.assertNotEqual(Slice(1, 4, 1), Slice(1, 4, 2))

    def test_text_forms(self):
        self.assertEqual(repr(Slice(1, 4, 2)), "Slice(1, 4, 2)")
        self.assertEqual(str(Slice(1, 4, 2)), "1..4..2")

    def test_from_builtin_resolves_missing_bounds(self):
        self.assertEqual(Slice.from_builtin(slice(None), 5), Slice(0, 5, 1))
        self.assertEqual(Slice.from_builtin(slice(2, None, 2), 5), Slice(2, 5, 2))

    def test_from_builtin_rejects_reversed_direction(self):
        with self.assertRaises(SliceError):
            Slice.from_builtin(slice(None, None, -1), 5)
        with self.assertRaises(SliceError) as cm:
            Slice.from_builtin(slice(4, 0, -1), 5)
        self.assertEqual((cm.exception.start, cm.exception.stop, cm.exception.step), (4, 0, -1))
        with self.assertRaises(SliceError):
            Slice.from_builtin(slice(3, 1), 5)

    def test_from_builtin_keeps_implicit_bounds_lenient(self):
        self.assertEqual(Slice.from_builtin(slice(7, None), 5).length(5), 0)
        self.assertEqual(Slice.from_builtin(slice(2, 2), 5).length(5), 0)

    def test_length_is_exact_for_large_bounds(self):
        big = 2**60 + 1
        self.assertEqual(Slice(0, big, 3).length(), (big + 2) // 3)
        self.assertEqual(Slice(0, big).length(), big)


class TestRInt(TestCase):

    def test_range_building(self):
        self.assertEqual(r(1).to(4), Slice(1, 4, 1))
        self.assertEqual(r(1).to(r(4)), Slice(1, 4, 1))
        self.assertEqual(range_to(2, r(6)), Slice(2, 6, 1))

    def test_int_protocols(self):
        i = RInt(3)
        self.assertEqual(int(i), 3)
        self.assertEqual([10, 11, 12, 13][i], 13)
        self.assertEqual(i, r(3))
        self.assertEqual(hash(i), hash(r(3)))


if __name__ == "__main__":
    unittest.main()

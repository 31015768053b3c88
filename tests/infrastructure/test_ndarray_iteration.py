from unittest import TestCase
import unittest

from src.ndview.infrastructure.creation import arange, ndarray


class TestIteration(TestCase):

    def test_one_dimensional_yields_elements(self):
        self.assertEqual(list(arange(3)), [0, 1, 2])

    def test_higher_rank_yields_sub_views(self):
        a = arange(6).reshape(2, 3)
        rows = list(a)
        self.assertEqual([r.to_list() for r in rows], [[0, 1, 2], [3, 4, 5]])
        self.assertIs(rows[0].data, a.data)

    def test_zero_dimensional_is_not_iterable(self):
        with self.assertRaises(TypeError):
            iter(arange(1).reshape())

    def test_iteration_is_restartable(self):
        a = arange(3)
        self.assertEqual(list(a), list(a))

    def test_flat_follows_logical_order(self):
        t = arange(6).reshape(2, 3).T
        self.assertEqual(list(t.flat()), [0, 3, 1, 4, 2, 5])

    def test_flat_repeats_broadcast_elements(self):
        b = ndarray([1, 2]).broadcast_to(3, 2)
        self.assertEqual(list(b.flat()), [1, 2, 1, 2, 1, 2])

    def test_ndenumerate(self):
        a = ndarray([[1, 2], [3, 4]])[:, 1]
        self.assertEqual(list(a.ndenumerate()), [((0,), 2), ((1,), 4)])

    def test_empty(self):
        self.assertEqual(list(arange(0)), [])
        self.assertEqual(list(arange(6).reshape(2, 3)[:, 3:].flat()), [])


if __name__ == "__main__":
    unittest.main()

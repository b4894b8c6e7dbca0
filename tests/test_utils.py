# tests/test_utils.py

import unittest

from sweeper.utils import get_neighbors, in_bounds, safe_zone


class TestNeighborhood(unittest.TestCase):

    def test_corner_has_three_neighbors(self):
        self.assertEqual(set(get_neighbors(0, 0, 5, 5)), {(1, 0), (0, 1), (1, 1)})
        self.assertEqual(set(get_neighbors(4, 4, 5, 5)), {(3, 4), (4, 3), (3, 3)})

    def test_edge_has_five_neighbors(self):
        neighbors = get_neighbors(2, 0, 5, 5)
        self.assertEqual(len(neighbors), 5)
        self.assertEqual(set(neighbors), {(1, 0), (3, 0), (1, 1), (2, 1), (3, 1)})

    def test_interior_has_eight_neighbors(self):
        neighbors = get_neighbors(2, 2, 5, 5)
        self.assertEqual(len(neighbors), 8)
        self.assertNotIn((2, 2), neighbors)

    def test_non_square_bounds(self):
        self.assertEqual(len(get_neighbors(6, 1, 7, 3)), 5)
        self.assertTrue(in_bounds(6, 2, 7, 3))
        self.assertFalse(in_bounds(2, 6, 7, 3))

    def test_safe_zone(self):
        self.assertEqual(safe_zone((0, 0), 5, 5), {(0, 0), (1, 0), (0, 1), (1, 1)})
        self.assertEqual(len(safe_zone((2, 2), 5, 5)), 9)
        self.assertEqual(safe_zone(None, 5, 5), set())


if __name__ == "__main__":
    unittest.main()

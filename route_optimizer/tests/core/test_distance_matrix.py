import unittest
import numpy as np

from route_optimizer.core.distance_matrix import DistanceMatrixBuilder
from route_optimizer.core.types_1 import Location


class TestDistanceMatrixBuilder(unittest.TestCase):
    """Test cases for DistanceMatrixBuilder."""

    def setUp(self):
        """Set up test fixtures."""
        self.locations = [
            Location(id=1, x=0.0, y=0.0, name="Origin"),
            Location(id=2, x=3.0, y=4.0, name="Corner"),
            Location(id=5, x=-3.0, y=0.0, name="West"),
        ]

    def test_create_distance_matrix_euclidean(self):
        matrix, ids = DistanceMatrixBuilder.create_distance_matrix(self.locations)

        self.assertEqual(ids, [1, 2, 5])
        self.assertEqual(matrix.shape, (3, 3))
        self.assertAlmostEqual(matrix[0, 1], 5.0)
        self.assertAlmostEqual(matrix[0, 2], 3.0)
        self.assertAlmostEqual(matrix[1, 2], np.sqrt(36 + 16))

    def test_matrix_is_symmetric_with_zero_diagonal(self):
        matrix, _ = DistanceMatrixBuilder.create_distance_matrix(self.locations)
        np.testing.assert_allclose(matrix, matrix.T)
        np.testing.assert_array_equal(np.diag(matrix), np.zeros(3))

    def test_empty_locations(self):
        matrix, ids = DistanceMatrixBuilder.create_distance_matrix([])
        self.assertEqual(matrix.shape, (0, 0))
        self.assertEqual(ids, [])

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(ValueError):
            DistanceMatrixBuilder.create_distance_matrix([
                Location(id=1, x=0.0, y=0.0),
                Location(id=1, x=1.0, y=1.0),
            ])


if __name__ == '__main__':
    unittest.main()

import unittest

from route_optimizer.core.exceptions import NotFoundError, UnknownLocationError
from route_optimizer.core.geo_model import GeoModel
from route_optimizer.core.types_1 import Location, Edge


class TestGeoModel(unittest.TestCase):

    def setUp(self):
        self.geo = GeoModel(
            [
                Location(id=7, x=10.0, y=0.0, name="East"),
                Location(id=1, x=0.0, y=0.0, name="Origin"),
                Location(id=3, x=3.0, y=4.0, name="Corner"),
            ],
            [
                Edge(source=1, destination=7, distance=12.0, traffic_factor=2.0),
                Edge(source=1, destination=3, distance=5.0),
                Edge(source=42, destination=1, distance=1.0),
            ]
        )

    def test_location_ids_ascending(self):
        self.assertEqual(self.geo.location_ids, [1, 3, 7])
        self.assertEqual(len(self.geo), 3)

    def test_membership(self):
        self.assertIn(3, self.geo)
        self.assertNotIn(4, self.geo)
        self.assertEqual(self.geo.get_location(7).name, "East")

    def test_distance(self):
        self.assertAlmostEqual(self.geo.distance(1, 3), 5.0)
        self.assertAlmostEqual(self.geo.distance(3, 1), 5.0)
        self.assertEqual(self.geo.distance(7, 7), 0.0)

    def test_distance_unknown_location(self):
        with self.assertRaises(UnknownLocationError) as ctx:
            self.geo.distance(1, 99)
        self.assertIsInstance(ctx.exception, NotFoundError)
        self.assertEqual(ctx.exception.identifier, 99)
        self.assertEqual(str(ctx.exception), "Location 99 not found")

    def test_get_location_unknown(self):
        with self.assertRaises(UnknownLocationError):
            self.geo.get_location(99)

    def test_edges_from_sorted_by_destination(self):
        edges = self.geo.edges_from(1)
        self.assertEqual([e.destination for e in edges], [3, 7])
        self.assertEqual(edges[1].weight, 24.0)

    def test_edges_from_without_edges(self):
        self.assertEqual(self.geo.edges_from(3), ())
        self.assertEqual(self.geo.edges_from(99), ())

    def test_edge_with_unknown_source_is_ignored(self):
        self.assertEqual(self.geo.edges_from(42), ())

    def test_route_length(self):
        self.assertAlmostEqual(self.geo.route_length([1, 3, 1]), 10.0)
        self.assertEqual(self.geo.route_length([1]), 0.0)
        self.assertEqual(self.geo.route_length([]), 0.0)

    def test_empty_model(self):
        geo = GeoModel([])
        self.assertEqual(len(geo), 0)
        self.assertEqual(geo.location_ids, [])


if __name__ == '__main__':
    unittest.main()

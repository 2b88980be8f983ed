import unittest

from route_optimizer.core.geo_model import GeoModel
from route_optimizer.core.route_builder import RouteBuilder
from route_optimizer.core.types_1 import Location, RouteOrder, Stop


class TestRouteBuilder(unittest.TestCase):
    """Test cases for the greedy pickup and dropoff route builder."""

    def setUp(self):
        self.geo = GeoModel([
            Location(id=1, x=0.0, y=0.0, name="Pizza Place"),
            Location(id=2, x=1.0, y=0.0, name="Burger Joint"),
            Location(id=3, x=10.0, y=0.0, name="Customer A"),
            Location(id=4, x=2.0, y=0.0, name="Customer B"),
            Location(id=5, x=3.0, y=4.0, name="Customer C"),
        ])
        self.builder = RouteBuilder(self.geo)

    def assert_pickups_first(self, route, orders):
        for order in orders:
            if order.customer_location_id in route and order.restaurant_location_id in route:
                self.assertLessEqual(
                    route.index(order.restaurant_location_id),
                    route.index(order.customer_location_id),
                    f"Order {order.id} dropped off before pickup in {route}"
                )

    def test_no_orders(self):
        self.assertEqual(self.builder.build_route([], current_location_id=1), [])

    def test_single_order(self):
        orders = [RouteOrder(id=1, restaurant_location_id=1, customer_location_id=5)]
        self.assertEqual(self.builder.build_route(orders), [1, 5])

    def test_nearest_neighbour_with_precedence(self):
        orders = [
            RouteOrder(id=1, restaurant_location_id=1, customer_location_id=3),
            RouteOrder(id=2, restaurant_location_id=2, customer_location_id=4),
        ]
        route = self.builder.build_route(orders)
        self.assertEqual(route, [1, 2, 4, 3])
        self.assert_pickups_first(route, orders)

    def test_customer_waits_for_pickup(self):
        # Customer B is closest to the start but its restaurant is not picked up yet
        orders = [
            RouteOrder(id=1, restaurant_location_id=1, customer_location_id=3),
            RouteOrder(id=2, restaurant_location_id=5, customer_location_id=2),
        ]
        route = self.builder.build_route(orders)
        self.assertEqual(route, [1, 5, 2, 3])
        self.assert_pickups_first(route, orders)

    def test_shared_locations_are_collapsed(self):
        orders = [
            RouteOrder(id=1, restaurant_location_id=1, customer_location_id=5),
            RouteOrder(id=2, restaurant_location_id=1, customer_location_id=5),
        ]
        self.assertEqual(self.builder.build_route(orders), [1, 5])

    def test_delivered_orders_are_skipped(self):
        orders = [
            RouteOrder(id=1, restaurant_location_id=2, customer_location_id=4, status='Delivered'),
            RouteOrder(id=2, restaurant_location_id=1, customer_location_id=5),
        ]
        self.assertEqual(self.builder.build_route(orders), [1, 5])

    def test_unknown_stop_is_dropped(self):
        orders = [RouteOrder(id=1, restaurant_location_id=1, customer_location_id=99)]
        self.assertEqual(self.builder.build_route(orders), [1])

    def test_customer_only_when_restaurant_unknown(self):
        orders = [RouteOrder(id=1, restaurant_location_id=99, customer_location_id=4)]
        self.assertEqual(self.builder.build_route(orders), [4])

    def test_fallback_lists_pickups_then_dropoffs(self):
        # Pickup and dropoff share a location, so the greedy walk stays at one entry
        orders = [RouteOrder(id=1, restaurant_location_id=2, customer_location_id=2)]
        self.assertEqual(self.builder.build_route(orders), [2, 2])

    def test_route_is_deterministic(self):
        orders = [
            RouteOrder(id=1, restaurant_location_id=1, customer_location_id=3),
            RouteOrder(id=2, restaurant_location_id=2, customer_location_id=4),
            RouteOrder(id=3, restaurant_location_id=5, customer_location_id=3),
        ]
        first = self.builder.build_route(orders, current_location_id=3)
        second = self.builder.build_route(orders, current_location_id=3)
        self.assertEqual(first, second)
        self.assertEqual(first, [1, 2, 4, 5, 3])
        self.assert_pickups_first(first, orders)

    def test_collect_stops_order(self):
        orders = [
            RouteOrder(id=1, restaurant_location_id=1, customer_location_id=3),
            RouteOrder(id=2, restaurant_location_id=2, customer_location_id=4),
        ]
        self.assertEqual(self.builder.collect_stops(orders), [
            Stop(order_id=1, location_id=1, is_restaurant=True),
            Stop(order_id=1, location_id=3, is_restaurant=False),
            Stop(order_id=2, location_id=2, is_restaurant=True),
            Stop(order_id=2, location_id=4, is_restaurant=False),
        ])


if __name__ == '__main__':
    unittest.main()

"""
Multi-stop route construction for a single driver.

Routes are built with a greedy nearest-neighbour walk over the pickup and
dropoff stops of the driver's orders. A dropoff only becomes eligible once the
pickup for the same order has been visited.
"""
import logging
from typing import Dict, List, Optional, Sequence

from route_optimizer.core.constants import ORDER_STATUS_DELIVERED
from route_optimizer.core.geo_model import GeoModel
from route_optimizer.core.types_1 import RouteOrder, Stop

logger = logging.getLogger(__name__)


class RouteBuilder:
    """
    Orders a driver's pending pickups and dropoffs into a stop sequence.
    """

    def __init__(self, geo_model: GeoModel):
        self.geo_model = geo_model

    def collect_stops(self, orders: Sequence[RouteOrder]) -> List[Stop]:
        """
        Expand orders into stops: restaurant first, then customer, per order.

        Delivered orders are skipped and stops at unknown locations dropped.
        """
        stops: List[Stop] = []
        for order in orders:
            if order.status == ORDER_STATUS_DELIVERED:
                continue
            if self.geo_model.has_location(order.restaurant_location_id):
                stops.append(Stop(order.id, order.restaurant_location_id, True))
            else:
                logger.warning(f"Order {order.id}: restaurant location {order.restaurant_location_id} is unknown.")
            if self.geo_model.has_location(order.customer_location_id):
                stops.append(Stop(order.id, order.customer_location_id, False))
            else:
                logger.warning(f"Order {order.id}: customer location {order.customer_location_id} is unknown.")
        return stops

    def build_route(
        self,
        orders: Sequence[RouteOrder],
        current_location_id: Optional[int] = None
    ) -> List[int]:
        """
        Build the ordered list of location ids the driver should visit.

        Args:
            orders: The driver's orders in roster order.
            current_location_id: Driver position, only used when no stop
                can serve as a starting point.

        Returns:
            Location ids in visiting order, shared locations collapsed.
            Empty when there is nothing to visit.
        """
        stops = self.collect_stops(orders)
        if not stops:
            return []

        start = self._choose_start(stops, current_location_id)
        if start is None:
            return []

        route = [start]
        in_route = {start}
        picked_up: Dict[int, bool] = {}
        for stop in stops:
            if stop.is_restaurant and stop.location_id == start:
                picked_up[stop.order_id] = True

        visited = [False] * len(stops)
        current = start

        while True:
            best_index = -1
            best_distance = float('inf')
            for index, stop in enumerate(stops):
                if visited[index]:
                    continue
                if not stop.is_restaurant and not picked_up.get(stop.order_id):
                    continue
                distance = self.geo_model.distance(current, stop.location_id)
                if distance < best_distance:
                    best_distance = distance
                    best_index = index

            if best_index == -1:
                break

            chosen = stops[best_index]
            if chosen.location_id not in in_route:
                route.append(chosen.location_id)
                in_route.add(chosen.location_id)
            if chosen.is_restaurant:
                picked_up[chosen.order_id] = True
            visited[best_index] = True
            current = chosen.location_id

        if len(route) < 2 and len(stops) >= 2:
            logger.debug(f"Greedy route {route} too short for {len(stops)} stops, using pickup-then-dropoff order.")
            route = [s.location_id for s in stops if s.is_restaurant]
            route += [s.location_id for s in stops if not s.is_restaurant]

        return route

    @staticmethod
    def _choose_start(stops: Sequence[Stop], current_location_id: Optional[int]) -> Optional[int]:
        for stop in stops:
            if stop.is_restaurant:
                return stop.location_id
        if stops:
            return stops[0].location_id
        return current_location_id

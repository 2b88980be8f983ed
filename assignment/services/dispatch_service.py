"""
Operations behind the delivery API: orders, drivers, locations and paths.

Views call into DispatchService only; it composes the stores with the
dispatch matcher, the route builder and the path finder.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.db import transaction

from assignment.clients import LocationStore, OrderStore, DriverStore
from assignment.services.dispatch_matcher import DispatchMatcher, dispatch_lock
from route_optimizer.core.constants import DEFAULT_TRAFFIC_FACTOR
from route_optimizer.core.dijkstra import DijkstraPathFinder
from route_optimizer.core.exceptions import InvalidInputError, NotFoundError
from route_optimizer.core.route_builder import RouteBuilder
from route_optimizer.core.types_1 import AssignmentResult, DriverState, ShortestPathResult
from route_optimizer.utils.helpers import format_route_for_display

logger = logging.getLogger(__name__)


@dataclass
class OrderPlacement:
    """A freshly placed order together with the outcome of its first dispatch."""
    order_id: int
    assignment: AssignmentResult
    driver: Optional[DriverState] = None
    route: List[int] = field(default_factory=list)


class DispatchService:
    def __init__(
        self,
        location_store: Optional[LocationStore] = None,
        order_store: Optional[OrderStore] = None,
        driver_store: Optional[DriverStore] = None,
        matcher: Optional[DispatchMatcher] = None
    ):
        self.location_store = location_store or LocationStore()
        self.order_store = order_store or OrderStore()
        self.driver_store = driver_store or DriverStore()
        self.matcher = matcher or DispatchMatcher(self.location_store, self.order_store, self.driver_store)

    # --- Orders ---

    def place_order(self, restaurant_id: int, customer_id: int) -> OrderPlacement:
        """
        Create an order and try to dispatch it straight away.

        Raises:
            NotFoundError: If either location is unknown.
        """
        geo_model = self.location_store.snapshot()
        for location_id in (restaurant_id, customer_id):
            if not geo_model.has_location(location_id):
                raise NotFoundError('location', location_id)

        order_id = self.order_store.create(restaurant_id, customer_id)
        assignment = self.matcher.assign(order_id)
        placement = OrderPlacement(order_id=order_id, assignment=assignment)
        if assignment.assigned:
            placement.driver = self.driver_store.get(assignment.driver_id)
            placement.route = self.driver_route(assignment.driver_id)
            if logger.isEnabledFor(logging.DEBUG):
                names = {loc.id: loc.name for loc in self.location_store.all()}
                logger.debug(f"Driver {assignment.driver_id} route: {format_route_for_display(placement.route, names)}")
        return placement

    def assign_order(self, order_id: int) -> AssignmentResult:
        return self.matcher.assign(order_id)

    def complete_order(self, order_id: int) -> bool:
        """
        Remove a delivered order from its driver's roster and delete it.

        Returns:
            False when the order does not exist.
        """
        with dispatch_lock, transaction.atomic():
            if self.order_store.get(order_id) is None:
                logger.warning(f"Cannot complete order {order_id}: not found.")
                return False
            driver_id = self.driver_store.remove_order(order_id)
            deleted = self.order_store.delete(order_id)

        if deleted:
            logger.info(f"Order {order_id} completed (driver {driver_id}).")
        return deleted

    # --- Drivers ---

    def add_driver(self, speed: float, location_id: Optional[int] = None) -> int:
        """
        Register a driver, placing it at the lowest-id location by default.

        Raises:
            InvalidInputError: If speed is not positive or there is no
                location to place the driver at.
            NotFoundError: If ``location_id`` is unknown.
        """
        if speed is None or speed <= 0:
            raise InvalidInputError("Driver speed must be positive")

        geo_model = self.location_store.snapshot()
        if location_id is None:
            if not geo_model.location_ids:
                raise InvalidInputError("No locations available to place the driver at")
            location_id = geo_model.location_ids[0]
        elif not geo_model.has_location(location_id):
            raise NotFoundError('location', location_id)

        return self.driver_store.create(speed, location_id)

    def move_driver(self, driver_id: int, location_id: int) -> None:
        if self.driver_store.get(driver_id) is None:
            raise NotFoundError('driver', driver_id)
        if not self.location_store.snapshot().has_location(location_id):
            raise NotFoundError('location', location_id)
        self.driver_store.set_location(driver_id, location_id)

    def list_drivers(self) -> List[DriverState]:
        return self.driver_store.all()

    def driver_route(self, driver_id: int) -> List[int]:
        """
        The stop sequence for a driver's current roster. Unknown drivers and
        drivers without orders get an empty route.
        """
        driver = self.driver_store.get(driver_id)
        if driver is None or not driver.assigned_order_ids:
            return []
        orders = self.order_store.get_many(driver.assigned_order_ids)
        return RouteBuilder(self.location_store.snapshot()).build_route(orders, driver.current_location_id)

    # --- Locations and paths ---

    def add_location(self, location_id: int, name: str, x: float, y: float):
        if self.location_store.get(location_id) is not None:
            raise InvalidInputError(f"Location {location_id} already exists")
        return self.location_store.create(location_id, name, x, y)

    def list_locations(self):
        return self.location_store.all()

    def add_edge(self, source: int, destination: int, distance: float, traffic_factor: float = DEFAULT_TRAFFIC_FACTOR):
        if distance < 0:
            raise InvalidInputError("Edge distance must not be negative")
        if traffic_factor <= 0:
            raise InvalidInputError("Traffic factor must be positive")
        geo_model = self.location_store.snapshot()
        for location_id in (source, destination):
            if not geo_model.has_location(location_id):
                raise NotFoundError('location', location_id)
        if any(edge.destination == destination for edge in geo_model.edges_from(source)):
            raise InvalidInputError(f"Edge {source}->{destination} already exists")
        return self.location_store.create_edge(source, destination, distance, traffic_factor)

    def list_edges(self):
        return self.location_store.edges()

    def shortest_path(self, start: int, end: int) -> ShortestPathResult:
        """
        Raises:
            NotFoundError: If either endpoint is unknown.
        """
        geo_model = self.location_store.snapshot()
        for location_id in (start, end):
            if not geo_model.has_location(location_id):
                raise NotFoundError('location', location_id)
        return DijkstraPathFinder(geo_model).find_path(start, end)

import logging
import threading
from typing import Dict, List, Optional, Sequence

from django.conf import settings
from django.db import transaction

from assignment.clients import LocationStore, OrderStore, DriverStore
from route_optimizer.core.constants import (
    MAX_ORDERS_PER_DRIVER,
    LOAD_FACTOR_PER_ORDER,
    SPEED_BONUS_NUMERATOR,
    BACKTRACK_RATIO,
    DETOUR_DIVISOR,
    ORDER_STATUS_ASSIGNED,
    ORDER_STATUS_PENDING,
    ORDER_STATUS_PREPARING,
    REASON_ASSIGNED,
    REASON_NO_DRIVERS,
    REASON_AT_CAPACITY,
    REASON_BACKTRACKING,
)
from route_optimizer.core.exceptions import NotFoundError
from route_optimizer.core.geo_model import GeoModel
from route_optimizer.core.route_builder import RouteBuilder
from route_optimizer.core.types_1 import AssignmentResult, DriverScore, DriverState, RouteOrder

logger = logging.getLogger(__name__)

# Serialises every roster mutation in this process. Row locks taken with
# select_for_update cover other processes on databases that support them.
dispatch_lock = threading.Lock()


class DispatchMatcher:
    """
    Picks the driver for an order by scoring every driver with free capacity.

    score = load factor + speed bonus + route compatibility, lowest wins.
    """

    def __init__(
        self,
        location_store: Optional[LocationStore] = None,
        order_store: Optional[OrderStore] = None,
        driver_store: Optional[DriverStore] = None,
        max_orders: Optional[int] = None,
        backtrack_ratio: Optional[float] = None
    ):
        self.location_store = location_store or LocationStore()
        self.order_store = order_store or OrderStore()
        self.driver_store = driver_store or DriverStore()
        if max_orders is None:
            max_orders = getattr(settings, 'DISPATCH_MAX_ORDERS_PER_DRIVER', MAX_ORDERS_PER_DRIVER)
        if backtrack_ratio is None:
            backtrack_ratio = getattr(settings, 'DISPATCH_BACKTRACK_RATIO', BACKTRACK_RATIO)
        self.max_orders = max_orders
        self.backtrack_ratio = backtrack_ratio

    def score_driver(
        self,
        driver: DriverState,
        order: RouteOrder,
        geo_model: GeoModel,
        roster_orders: Sequence[RouteOrder]
    ) -> Optional[DriverScore]:
        """
        Score one driver for an order.

        Args:
            driver: Candidate driver.
            order: Order being dispatched.
            geo_model: Location graph snapshot.
            roster_orders: The driver's current orders in roster order.

        Returns:
            The score breakdown, with ``backtracking`` set when the order
            would stretch the driver's route too far. None when the driver is
            already at capacity.
        """
        if driver.load >= self.max_orders:
            return None

        score = DriverScore(
            driver_id=driver.id,
            load_factor=LOAD_FACTOR_PER_ORDER * driver.load,
            speed_bonus=SPEED_BONUS_NUMERATOR / driver.speed,
        )

        route = RouteBuilder(geo_model).build_route(roster_orders, driver.current_location_id)
        if len(route) >= 2:
            current_length = geo_model.route_length(route)
            test_length = geo_model.route_length(
                route + [order.restaurant_location_id, order.customer_location_id]
            )
            score.current_route_length = current_length
            score.test_route_length = test_length
            if test_length > self.backtrack_ratio * current_length:
                score.backtracking = True
                return score
            score.compatibility_score = (test_length - current_length) / DETOUR_DIVISOR
        else:
            to_restaurant = geo_model.distance(driver.current_location_id, order.restaurant_location_id)
            to_customer = geo_model.distance(order.restaurant_location_id, order.customer_location_id)
            score.compatibility_score = (to_restaurant + to_customer) / driver.speed

        return score

    def select_driver(
        self,
        order: RouteOrder,
        drivers: Sequence[DriverState],
        geo_model: GeoModel,
        roster_orders: Dict[int, List[RouteOrder]]
    ) -> AssignmentResult:
        """
        Choose the best driver without touching any store.

        Drivers are compared in ascending id order and only a strictly lower
        score replaces the current best, so ties go to the lowest id.
        """
        result = AssignmentResult(order_id=order.id, reason=REASON_NO_DRIVERS)
        if not drivers:
            return result

        best: Optional[DriverScore] = None
        for driver in sorted(drivers, key=lambda d: d.id):
            score = self.score_driver(driver, order, geo_model, roster_orders.get(driver.id, []))
            if score is None:
                logger.debug(f"Order {order.id}: driver {driver.id} at capacity ({driver.load} orders).")
                continue
            result.evaluated.append(score)
            if score.backtracking:
                logger.debug(
                    f"Order {order.id}: driver {driver.id} rejected for backtracking "
                    f"({score.test_route_length:.2f} > {self.backtrack_ratio} x {score.current_route_length:.2f})."
                )
                continue
            logger.debug(
                f"Order {order.id}: driver {driver.id} score {score.total:.3f} "
                f"(load {score.load_factor}, speed {score.speed_bonus:.3f}, route {score.compatibility_score:.3f})"
            )
            if best is None or score.total < best.total:
                best = score

        if best is not None:
            result.driver_id = best.driver_id
            result.score = best.total
            result.reason = REASON_ASSIGNED
        elif result.evaluated:
            result.reason = REASON_BACKTRACKING
        else:
            result.reason = REASON_AT_CAPACITY
        return result

    def assign(self, order_id: int) -> AssignmentResult:
        """
        Dispatch an order, re-dispatching it when it already has a driver.

        Raises:
            NotFoundError: If the order does not exist.
            StoreFailureError: If reading or writing state fails. Nothing is
                committed in that case.
        """
        with dispatch_lock, transaction.atomic():
            order = self.order_store.get(order_id)
            if order is None:
                raise NotFoundError('order', order_id)

            if order.assigned_driver_id is not None or order.status != ORDER_STATUS_PREPARING:
                previous_driver = self.driver_store.remove_order(order_id)
                if previous_driver is not None:
                    logger.info(f"Order {order_id} released from driver {previous_driver} for reassignment.")
                self.order_store.set_assigned_driver(order_id, None)
                self.order_store.set_status(order_id, ORDER_STATUS_PREPARING)
                order = self.order_store.get(order_id)

            drivers = self.driver_store.all(for_update=True)
            geo_model = self.location_store.snapshot()
            roster_orders = {
                driver.id: self.order_store.get_many(driver.assigned_order_ids)
                for driver in drivers
            }

            result = self.select_driver(order, drivers, geo_model, roster_orders)

            if result.assigned:
                self.driver_store.append_order(result.driver_id, order_id)
                self.order_store.set_assigned_driver(order_id, result.driver_id)
                self.order_store.set_status(order_id, ORDER_STATUS_ASSIGNED)
                logger.info(f"Order {order_id} assigned to driver {result.driver_id} (score {result.score:.3f}).")
            else:
                self.order_store.set_assigned_driver(order_id, None)
                self.order_store.set_status(order_id, ORDER_STATUS_PENDING)
                logger.info(f"Order {order_id} left pending: {result.reason}.")

        return result

"""
Core data types for the route optimizer and the dispatch engine.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Optional, Any
import logging

from route_optimizer.core.constants import (
    DEFAULT_TRAFFIC_FACTOR,
    ORDER_STATUS_PREPARING,
    ORDER_STATUS_ASSIGNED,
    REASON_ASSIGNED,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """
    A named point on the delivery plane.
    """
    id: int
    x: float
    y: float
    name: str = ''

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Location':
        return Location(
            id=int(data['id']),
            x=float(data['x']),
            y=float(data['y']),
            name=str(data.get('name', '')),
        )


@dataclass(frozen=True)
class Edge:
    """
    A directed road segment between two locations.

    The effective weight used by path finding is ``distance * traffic_factor``.
    """
    source: int
    destination: int
    distance: float
    traffic_factor: float = DEFAULT_TRAFFIC_FACTOR

    @property
    def weight(self) -> float:
        return self.distance * self.traffic_factor


@dataclass(frozen=True)
class Stop:
    """A single pickup (restaurant) or dropoff (customer) belonging to one order."""
    order_id: int
    location_id: int
    is_restaurant: bool


@dataclass(frozen=True)
class RouteOrder:
    """Read-only view of an order as seen by the routing and dispatch core."""
    id: int
    restaurant_location_id: int
    customer_location_id: int
    status: str = ORDER_STATUS_PREPARING
    assigned_driver_id: Optional[int] = None

    @property
    def is_assigned(self) -> bool:
        return self.status == ORDER_STATUS_ASSIGNED and self.assigned_driver_id is not None


@dataclass(frozen=True)
class DriverState:
    """Read-only view of a driver and its ordered roster of order ids."""
    id: int
    current_location_id: int
    speed: float
    assigned_order_ids: Tuple[int, ...] = ()

    @property
    def load(self) -> int:
        return len(self.assigned_order_ids)


@dataclass
class DriverScore:
    """Breakdown of a candidate driver's dispatch score. Lower is better."""
    driver_id: int
    load_factor: float = 0.0
    speed_bonus: float = 0.0
    compatibility_score: float = 0.0
    current_route_length: Optional[float] = None
    test_route_length: Optional[float] = None
    backtracking: bool = False

    @property
    def total(self) -> float:
        return self.load_factor + self.speed_bonus + self.compatibility_score


@dataclass
class AssignmentResult:
    """Outcome of a single dispatch attempt."""
    order_id: int
    driver_id: Optional[int] = None
    score: Optional[float] = None
    reason: str = REASON_ASSIGNED
    evaluated: List[DriverScore] = field(default_factory=list)

    @property
    def assigned(self) -> bool:
        return self.driver_id is not None


@dataclass
class ShortestPathResult:
    """
    Result of a point-to-point path query.

    ``cost`` is the traffic-weighted length the search settled on, ``distance``
    is the plain Euclidean length along ``path``.
    """
    start: int
    end: int
    path: List[int] = field(default_factory=list)
    cost: Optional[float] = None
    distance: float = 0.0

    @property
    def reachable(self) -> bool:
        return bool(self.path)

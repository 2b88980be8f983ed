from route_optimizer.core.exceptions import StoreFailureError
from route_optimizer.core.types_1 import Location as LocationDTO, Edge as EdgeDTO, RouteOrder, DriverState


def map_location_model(location_model):
    return LocationDTO(
        id=location_model.id,
        x=float(location_model.x),
        y=float(location_model.y),
        name=location_model.name,
    )


def map_edge_model(edge_model):
    return EdgeDTO(
        source=edge_model.source_id,
        destination=edge_model.destination_id,
        distance=float(edge_model.distance),
        traffic_factor=float(edge_model.traffic_factor),
    )


def map_order_model(order_model):
    return RouteOrder(
        id=order_model.id,
        restaurant_location_id=order_model.restaurant_id,
        customer_location_id=order_model.customer_location_id,
        status=order_model.status,
        assigned_driver_id=order_model.assigned_driver_id,
    )


def map_driver_model(driver_model):
    """
    Expects the driver's ``roster`` to be prefetched or cheap to query.

    Raises:
        StoreFailureError: If the stored speed is not positive.
    """
    if driver_model.speed is None or driver_model.speed <= 0:
        raise StoreFailureError(f"Driver {driver_model.id} has non-positive speed {driver_model.speed}")

    return DriverState(
        id=driver_model.id,
        current_location_id=driver_model.current_location_id,
        speed=float(driver_model.speed),
        assigned_order_ids=tuple(entry.order_id for entry in driver_model.roster.all()),
    )

from .location_store import LocationStore
from .order_store import OrderStore
from .driver_store import DriverStore

import logging

from django.db.models import Max

from assignment.clients.base import store_operation
from assignment.models import RosterEntry
from assignment.services.mappers import map_driver_model
from fleet.models import Driver
from route_optimizer.models import Location

logger = logging.getLogger(__name__)


class DriverStore:
    def get(self, driver_id):
        with store_operation(f"load driver {driver_id}"):
            driver = Driver.objects.prefetch_related('roster').filter(id=driver_id).first()
            return map_driver_model(driver) if driver else None

    def all(self, for_update=False):
        """
        List every driver in ascending id order.

        Args:
            for_update (bool): Lock the driver rows. Must run inside a
                transaction.

        Returns:
            list of DriverState
        """
        with store_operation("list drivers"):
            qs = Driver.objects.order_by('id')
            if for_update:
                qs = qs.select_for_update()
            return [map_driver_model(driver) for driver in qs.prefetch_related('roster')]

    def create(self, speed, location_id):
        with store_operation("create driver"):
            driver = Driver.objects.create(speed=speed, current_location_id=location_id)
        logger.info(f"Created driver {driver.id} at location {location_id} with speed {speed}")
        return driver.id

    def append_order(self, driver_id, order_id):
        with store_operation(f"append order {order_id} to driver {driver_id}"):
            last = RosterEntry.objects.filter(driver_id=driver_id).aggregate(last=Max('sequence'))['last']
            RosterEntry.objects.create(driver_id=driver_id, order_id=order_id, sequence=(last or 0) + 1)

    def remove_order(self, order_id):
        """
        Take an order off whichever roster holds it.

        Returns:
            The id of the driver that held the order, or None.
        """
        with store_operation(f"remove order {order_id} from roster"):
            entry = RosterEntry.objects.filter(order_id=order_id).first()
            if entry is None:
                return None
            driver_id = entry.driver_id
            entry.delete()
        return driver_id

    def set_location(self, driver_id, location_id):
        with store_operation(f"move driver {driver_id}"):
            driver = Driver.objects.filter(id=driver_id).first()
            location = Location.objects.filter(id=location_id).first()
            if driver is None or location is None:
                return False
            driver.update_location(location)
        logger.info(f"Driver {driver_id} moved to location {location_id}")
        return True

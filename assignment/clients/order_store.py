import logging

from assignment.clients.base import store_operation
from assignment.services.mappers import map_order_model
from orders.models import Order

logger = logging.getLogger(__name__)


class OrderStore:
    def get(self, order_id):
        with store_operation(f"load order {order_id}"):
            order = Order.objects.filter(id=order_id).first()
        return map_order_model(order) if order else None

    def get_many(self, order_ids):
        """
        Fetch several orders, keeping the order of ``order_ids``.

        Ids with no stored order are left out.
        """
        order_ids = list(order_ids)
        with store_operation("load orders"):
            found = {order.id: order for order in Order.objects.filter(id__in=order_ids)}
        return [map_order_model(found[order_id]) for order_id in order_ids if order_id in found]

    def all(self, status=None):
        with store_operation("list orders"):
            qs = Order.objects.order_by('id')
            if status:
                qs = qs.filter(status=status)
            return [map_order_model(order) for order in qs]

    def create(self, restaurant_id, customer_id):
        with store_operation("create order"):
            order = Order.objects.create(restaurant_id=restaurant_id, customer_location_id=customer_id)
        logger.info(f"Created order {order.id}: {restaurant_id} -> {customer_id}")
        return order.id

    def set_status(self, order_id, status):
        with store_operation(f"update status of order {order_id}"):
            updated = Order.objects.filter(id=order_id).update(status=status)
        return updated > 0

    def set_assigned_driver(self, order_id, driver_id):
        with store_operation(f"update driver of order {order_id}"):
            updated = Order.objects.filter(id=order_id).update(assigned_driver_id=driver_id)
        return updated > 0

    def delete(self, order_id):
        with store_operation(f"delete order {order_id}"):
            deleted, _ = Order.objects.filter(id=order_id).delete()
        return deleted > 0

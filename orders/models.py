from django.core.exceptions import ValidationError
from django.db import models

from fleet.models import Driver
from route_optimizer.core.constants import (
    ORDER_STATUS_CHOICES,
    ORDER_STATUS_PREPARING,
    ORDER_STATUS_ASSIGNED,
)
from route_optimizer.models import Location


class Order(models.Model):
    """
    A delivery from a restaurant location to a customer location.

    ``status == 'Assigned'`` holds exactly when ``assigned_driver`` is set.
    Completed orders are deleted rather than kept as 'Delivered'.
    """
    STATUS_CHOICES = ORDER_STATUS_CHOICES

    restaurant = models.ForeignKey(Location, on_delete=models.PROTECT, related_name='restaurant_orders')
    customer_location = models.ForeignKey(Location, on_delete=models.PROTECT, related_name='customer_orders')

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=ORDER_STATUS_PREPARING)
    assigned_driver = models.ForeignKey(
        Driver,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='orders'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        indexes = [
            models.Index(fields=['status']),
        ]

    def clean(self):
        if (self.status == ORDER_STATUS_ASSIGNED) != (self.assigned_driver_id is not None):
            raise ValidationError("An order has a driver exactly when its status is Assigned.")

    def __str__(self):
        return f"Order #{self.id} {self.restaurant_id}->{self.customer_location_id} ({self.status})"

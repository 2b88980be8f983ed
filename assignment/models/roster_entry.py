from django.db import models

from fleet.models import Driver
from orders.models import Order


class RosterEntry(models.Model):
    """
    One order on a driver's roster. A driver's roster is its entries ordered
    by ``sequence``; an order sits on at most one roster.
    """
    driver = models.ForeignKey(Driver, on_delete=models.CASCADE, related_name='roster')
    order = models.OneToOneField(Order, on_delete=models.CASCADE, related_name='roster_entry')
    sequence = models.PositiveIntegerField()  # 1st, 2nd, 3rd order taken, etc.
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['sequence', 'id']
        constraints = [
            models.UniqueConstraint(fields=['driver', 'sequence'], name='unique_roster_sequence'),
        ]

    def __str__(self):
        return f"Order {self.order_id} on Driver {self.driver_id} roster (#{self.sequence})"

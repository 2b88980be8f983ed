from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from route_optimizer.models import Location


def validate_positive(value):
    if value is None or value <= 0:
        raise ValidationError(f"{value} is not a positive number.")


class Driver(models.Model):
    """
    Model representing a delivery driver in the fleet.

    The ordered list of orders a driver carries lives in
    ``assignment.RosterEntry`` (related name ``roster``).
    """
    current_location = models.ForeignKey(
        Location,
        on_delete=models.PROTECT,
        related_name='drivers',
        help_text="Location the driver currently stands at"
    )
    speed = models.FloatField(
        validators=[validate_positive],
        help_text="Travel speed in plane units per time unit, must be positive"
    )
    last_location_update = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        constraints = [
            models.CheckConstraint(condition=models.Q(speed__gt=0), name='driver_speed_positive'),
        ]

    def __str__(self):
        return f"Driver #{self.id} at {self.current_location_id} (speed {self.speed})"

    def update_location(self, location):
        """Move the driver and stamp the update time."""
        self.current_location = location
        self.last_location_update = timezone.now()
        self.save(update_fields=['current_location', 'last_location_update', 'updated_at'])

    @property
    def assigned_order_ids(self):
        return [entry.order_id for entry in self.roster.all()]

from django.core.validators import MinValueValidator
from django.db import models

from route_optimizer.core.constants import DEFAULT_TRAFFIC_FACTOR


class Location(models.Model):
    """
    A named point on the delivery plane. Ids are supplied by the client.
    """
    id = models.IntegerField(primary_key=True)
    name = models.CharField(max_length=255)
    x = models.FloatField()
    y = models.FloatField()

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.name} #{self.id} ({self.x}, {self.y})"


class Edge(models.Model):
    """
    Directed road segment. Path finding weighs it as distance * traffic_factor.
    """
    source = models.ForeignKey(Location, on_delete=models.CASCADE, related_name='outgoing_edges')
    destination = models.ForeignKey(Location, on_delete=models.CASCADE, related_name='incoming_edges')
    distance = models.FloatField(validators=[MinValueValidator(0.0)])
    traffic_factor = models.FloatField(default=DEFAULT_TRAFFIC_FACTOR)

    class Meta:
        ordering = ['source_id', 'destination_id']
        constraints = [
            models.UniqueConstraint(fields=['source', 'destination'], name='unique_edge_per_direction'),
        ]

    def __str__(self):
        return f"{self.source_id} -> {self.destination_id} ({self.distance} x {self.traffic_factor})"

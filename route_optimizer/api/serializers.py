"""
Serializers for the location graph API.

Field names follow the JSON the delivery dashboard already speaks
(camelCase), mapped onto the snake_case dataclass attributes.
"""
import logging
from rest_framework import serializers

from route_optimizer.core.constants import DEFAULT_TRAFFIC_FACTOR

logger = logging.getLogger(__name__)


class LocationSerializer(serializers.Serializer):
    """Serializer for Location objects."""
    id = serializers.IntegerField(help_text="Client supplied unique identifier of the location.")
    name = serializers.CharField(max_length=255, help_text="Human-readable name, e.g. 'Pizza Place'.")
    x = serializers.FloatField(help_text="X coordinate on the delivery plane.")
    y = serializers.FloatField(help_text="Y coordinate on the delivery plane.")


class EdgeSerializer(serializers.Serializer):
    """Serializer for directed road segments."""
    source = serializers.IntegerField(help_text="Id of the location the edge leaves from.")
    destination = serializers.IntegerField(help_text="Id of the location the edge arrives at.")
    distance = serializers.FloatField(min_value=0.0, help_text="Length of the segment, must not be negative.")
    trafficFactor = serializers.FloatField(
        source='traffic_factor',
        default=DEFAULT_TRAFFIC_FACTOR,
        help_text="Multiplier applied to the distance when finding paths. Must be positive, defaults to 1.0."
    )

    def validate_trafficFactor(self, value):
        if value <= 0:
            raise serializers.ValidationError("Traffic factor must be positive.")
        return value


class ShortestPathRequestSerializer(serializers.Serializer):
    start = serializers.IntegerField(help_text="Id of the starting location.")
    end = serializers.IntegerField(help_text="Id of the target location.")


class ShortestPathResponseSerializer(serializers.Serializer):
    path = serializers.ListField(
        child=serializers.IntegerField(),
        help_text="Location ids from start to end, both included. Empty when no path exists."
    )
    distance = serializers.FloatField(help_text="Euclidean length along the path.")

from rest_framework import serializers


class DriverSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    currentLocation = serializers.IntegerField(source='current_location_id', read_only=True)
    speed = serializers.FloatField(read_only=True)
    assignedOrders = serializers.ListField(
        child=serializers.IntegerField(),
        source='assigned_order_ids',
        read_only=True,
        help_text="Order ids on the driver's roster, in the order they were assigned."
    )


class DriverCreateSerializer(serializers.Serializer):
    speed = serializers.FloatField(help_text="Travel speed, must be positive.")
    startLocation = serializers.IntegerField(
        source='start_location',
        required=False,
        allow_null=True,
        help_text="Location to place the driver at. Defaults to the lowest-id location."
    )

    def validate_speed(self, value):
        if value <= 0:
            raise serializers.ValidationError("Speed must be positive.")
        return value


class DriverLocationSerializer(serializers.Serializer):
    driverId = serializers.IntegerField(source='driver_id')
    locationId = serializers.IntegerField(source='location_id')


class DriverRouteSerializer(serializers.Serializer):
    route = serializers.ListField(child=serializers.IntegerField())

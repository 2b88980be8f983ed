from rest_framework import serializers


class OrderSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    restaurantId = serializers.IntegerField(source='restaurant_location_id', read_only=True)
    customerLocationId = serializers.IntegerField(source='customer_location_id', read_only=True)
    status = serializers.CharField(read_only=True)
    assignedDriverId = serializers.IntegerField(source='assigned_driver_id', read_only=True, allow_null=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # Unassigned orders carry no driver key at all
        if data.get('assignedDriverId') is None:
            data.pop('assignedDriverId', None)
        return data


class OrderCreateSerializer(serializers.Serializer):
    restaurantId = serializers.IntegerField(source='restaurant_id', help_text="Location id of the restaurant.")
    customerLocationId = serializers.IntegerField(source='customer_location_id', help_text="Location id of the customer.")


class OrderReferenceSerializer(serializers.Serializer):
    orderId = serializers.IntegerField(source='order_id')

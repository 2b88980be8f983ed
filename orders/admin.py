from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'get_restaurant',
        'get_customer',
        'status',
        'assigned_driver',
        'created_at'
    )
    list_filter = ('status',)
    search_fields = ('id', 'restaurant__name', 'customer_location__name')
    raw_id_fields = ('restaurant', 'customer_location', 'assigned_driver')
    ordering = ('-created_at',)

    @admin.display(description="Restaurant")
    def get_restaurant(self, obj):
        return f"{obj.restaurant.name} (#{obj.restaurant_id})"

    @admin.display(description="Customer")
    def get_customer(self, obj):
        return f"{obj.customer_location.name} (#{obj.customer_location_id})"

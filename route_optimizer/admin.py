from django.contrib import admin

from .models import Location, Edge


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'x', 'y')
    search_fields = ('id', 'name')


@admin.register(Edge)
class EdgeAdmin(admin.ModelAdmin):
    list_display = ('source', 'destination', 'distance', 'traffic_factor')
    list_filter = ('traffic_factor',)
    raw_id_fields = ('source', 'destination')

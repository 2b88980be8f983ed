from django.contrib import admin

from .models import Driver


@admin.register(Driver)
class DriverAdmin(admin.ModelAdmin):
    list_display = ('id', 'current_location', 'speed', 'last_location_update')
    search_fields = ('id', 'current_location__name')
    readonly_fields = ('created_at', 'updated_at', 'last_location_update')
    raw_id_fields = ('current_location',)

    fieldsets = (
        ('Driver', {
            'fields': ('current_location', 'speed', 'last_location_update')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

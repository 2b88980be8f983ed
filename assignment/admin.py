from django.contrib import admin

from .models import RosterEntry


@admin.register(RosterEntry)
class RosterEntryAdmin(admin.ModelAdmin):
    list_display = ('driver', 'sequence', 'order', 'created_at')
    list_filter = ('driver',)
    raw_id_fields = ('driver', 'order')
    ordering = ('driver', 'sequence')

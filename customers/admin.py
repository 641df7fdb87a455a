from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('get_full_name', 'email', 'phone_number', 'driver_license_number', 'created_at')
    search_fields = ('first_name', 'last_name', 'email', 'phone_number', 'driver_license_number')
    list_filter = ('created_at',)
    readonly_fields = ('created_at', 'updated_at')

    def get_full_name(self, obj):
        return obj.full_name
    get_full_name.short_description = 'Name'

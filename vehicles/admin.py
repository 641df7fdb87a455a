from django.contrib import admin

from .models import Car, Motorcycle, Truck, Vehicle


class VariantAdmin(admin.ModelAdmin):
    list_filter = ('available', 'created_at')
    search_fields = ('brand', 'model')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ('brand', 'model', 'year', 'vehicle_type', 'daily_rate', 'available')
    list_filter = ('vehicle_type', 'available')
    search_fields = ('brand', 'model')
    readonly_fields = ('vehicle_type', 'created_at', 'updated_at')

    def has_add_permission(self, request):
        # Vehicles are added through their Car/Motorcycle/Truck pages
        return False


@admin.register(Car)
class CarAdmin(VariantAdmin):
    list_display = ('brand', 'model', 'year', 'fuel_type', 'automatic', 'daily_rate', 'available')
    list_filter = ('fuel_type', 'automatic') + VariantAdmin.list_filter


@admin.register(Motorcycle)
class MotorcycleAdmin(VariantAdmin):
    list_display = ('brand', 'model', 'year', 'engine_size', 'type', 'daily_rate', 'available')


@admin.register(Truck)
class TruckAdmin(VariantAdmin):
    list_display = ('brand', 'model', 'year', 'get_capacity', 'four_wheel_drive', 'daily_rate', 'available')
    list_filter = ('four_wheel_drive',) + VariantAdmin.list_filter

    def get_capacity(self, obj):
        return f"{obj.capacity} kg"
    get_capacity.short_description = 'Capacity'

import logging

from django.db import transaction
from django.db.models import ProtectedError

from rental_backend.exceptions import ConflictError, NotFoundError

from .models import Car, FuelType, Motorcycle, Truck, Vehicle

logger = logging.getLogger(__name__)


def get_all_vehicles():
    return Vehicle.objects.with_variants()


def get_available_vehicles():
    return Vehicle.objects.with_variants().available()


def get_vehicle(vehicle_id):
    try:
        return Vehicle.objects.with_variants().get(pk=vehicle_id)
    except Vehicle.DoesNotExist:
        raise NotFoundError(f"Vehicle not found with id: {vehicle_id}")


def parse_fuel_type(value):
    """Map a fuel type name, in any case, onto FuelType."""
    name = str(value or '').strip().upper()
    if name not in FuelType.values:
        raise ConflictError(f"Invalid fuel type: {value}")
    return FuelType(name)


def create_car(brand, model, year, daily_rate, doors, fuel_type, automatic=False):
    car = Car.objects.create(
        brand=brand,
        model=model,
        year=year,
        daily_rate=daily_rate,
        doors=doors,
        fuel_type=parse_fuel_type(fuel_type),
        automatic=automatic,
    )
    logger.info("Created car %s: %s", car.pk, car)
    return car


def create_motorcycle(brand, model, year, daily_rate, engine_size, type):
    motorcycle = Motorcycle.objects.create(
        brand=brand,
        model=model,
        year=year,
        daily_rate=daily_rate,
        engine_size=engine_size,
        type=type,
    )
    logger.info("Created motorcycle %s: %s", motorcycle.pk, motorcycle)
    return motorcycle


def create_truck(brand, model, year, daily_rate, capacity, four_wheel_drive=False):
    truck = Truck.objects.create(
        brand=brand,
        model=model,
        year=year,
        daily_rate=daily_rate,
        capacity=capacity,
        four_wheel_drive=four_wheel_drive,
    )
    logger.info("Created truck %s: %s", truck.pk, truck)
    return truck


def update_vehicle_availability(vehicle_id, available):
    """
    Set the availability flag directly. This does not touch rentals, so it
    must not be used to end an active rental.
    """
    with transaction.atomic():
        try:
            vehicle = Vehicle.objects.select_for_update().get(pk=vehicle_id)
        except Vehicle.DoesNotExist:
            raise NotFoundError(f"Vehicle not found with id: {vehicle_id}")
        vehicle.available = available
        vehicle.save(update_fields=['available', 'updated_at'])
    logger.info("Vehicle %s availability set to %s", vehicle_id, available)
    return get_vehicle(vehicle_id)


def delete_vehicle(vehicle_id):
    with transaction.atomic():
        try:
            vehicle = Vehicle.objects.get(pk=vehicle_id)
        except Vehicle.DoesNotExist:
            raise NotFoundError(f"Vehicle not found with id: {vehicle_id}")
        try:
            vehicle.delete()
        except ProtectedError:
            raise ConflictError(f"Vehicle {vehicle_id} has rentals and cannot be deleted")
    logger.info("Deleted vehicle %s", vehicle_id)


def search_vehicles(brand=None, model=None, min_year=None, max_year=None,
                    min_price=None, max_price=None, vehicle_type=None):
    vehicles = Vehicle.objects.with_variants()

    if brand:
        vehicles = vehicles.filter(brand__icontains=brand)
    if model:
        vehicles = vehicles.filter(model__icontains=model)
    if min_year is not None:
        vehicles = vehicles.filter(year__gte=min_year)
    if max_year is not None:
        vehicles = vehicles.filter(year__lte=max_year)
    if min_price is not None:
        vehicles = vehicles.filter(daily_rate__gte=min_price)
    if max_price is not None:
        vehicles = vehicles.filter(daily_rate__lte=max_price)
    if vehicle_type:
        vehicles = vehicles.filter(vehicle_type=vehicle_type.strip().upper())

    return vehicles

from django.core.validators import MinValueValidator
from django.db import models

from . import pricing


class VehicleType(models.TextChoices):
    CAR = 'CAR', 'Car'
    MOTORCYCLE = 'MOTORCYCLE', 'Motorcycle'
    TRUCK = 'TRUCK', 'Truck'


class FuelType(models.TextChoices):
    GASOLINE = 'GASOLINE', 'Gasoline'
    DIESEL = 'DIESEL', 'Diesel'
    ELECTRIC = 'ELECTRIC', 'Electric'
    HYBRID = 'HYBRID', 'Hybrid'


# Reverse one-to-one accessor of each variant table on the base row
VARIANT_ACCESSORS = {
    VehicleType.CAR: 'car',
    VehicleType.MOTORCYCLE: 'motorcycle',
    VehicleType.TRUCK: 'truck',
}


class VehicleQuerySet(models.QuerySet):
    def with_variants(self):
        return self.select_related(*VARIANT_ACCESSORS.values())

    def available(self):
        return self.filter(available=True)


class Vehicle(models.Model):
    """
    Shared base row for every rentable vehicle.

    Variant attributes live in the Car, Motorcycle and Truck tables, keyed by
    this row's id; ``vehicle_type`` says which one holds them.
    """
    VEHICLE_TYPE = None

    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year = models.PositiveIntegerField(validators=[MinValueValidator(1900)])
    daily_rate = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(pricing.MIN_DAILY_RATE)],
    )
    available = models.BooleanField(default=True, db_index=True)
    vehicle_type = models.CharField(max_length=10, choices=VehicleType.choices, editable=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = VehicleQuerySet.as_manager()

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.brand} {self.model} ({self.year})"

    def save(self, *args, **kwargs):
        if not self.vehicle_type:
            self.vehicle_type = self.get_vehicle_type()
        super().save(*args, **kwargs)

    def get_vehicle_type(self):
        return self.VEHICLE_TYPE or self.vehicle_type

    def as_variant(self):
        """Return the Car, Motorcycle or Truck row behind this vehicle."""
        return getattr(self, VARIANT_ACCESSORS[self.get_vehicle_type()])

    def calculate_rental_price(self, days):
        return pricing.calculate_rental_price(self.as_variant(), days)


class Car(Vehicle):
    VEHICLE_TYPE = VehicleType.CAR

    doors = models.PositiveSmallIntegerField(validators=[MinValueValidator(2)])
    fuel_type = models.CharField(max_length=10, choices=FuelType.choices)
    automatic = models.BooleanField(default=False)

    def as_variant(self):
        return self


class Motorcycle(Vehicle):
    VEHICLE_TYPE = VehicleType.MOTORCYCLE

    engine_size = models.PositiveIntegerField(validators=[MinValueValidator(50)], help_text="Engine size in cc")
    type = models.CharField(max_length=50, help_text="Category, e.g. SPORT, NAKED, CRUISER")

    def as_variant(self):
        return self


class Truck(Vehicle):
    VEHICLE_TYPE = VehicleType.TRUCK

    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1000)], help_text="Load capacity in kg")
    four_wheel_drive = models.BooleanField(default=False)

    def as_variant(self):
        return self

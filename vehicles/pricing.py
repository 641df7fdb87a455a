"""
Rental price calculation.

Every vehicle pays ``daily_rate * days``; each vehicle type then adds its own
per-day surcharges. Truck surcharges stack.
"""
from decimal import Decimal

MIN_DAILY_RATE = Decimal('0.01')
CENTS = Decimal('0.01')

AUTOMATIC_SURCHARGE = Decimal('10.00')
LARGE_ENGINE_SURCHARGE = Decimal('15.00')
LARGE_ENGINE_THRESHOLD = 1000  # cc
FOUR_WHEEL_DRIVE_SURCHARGE = Decimal('25.00')
HEAVY_LOAD_SURCHARGE = Decimal('20.00')
HEAVY_LOAD_THRESHOLD = 5000  # kg


def as_decimal(value):
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def car_surcharge(car, days):
    if car.automatic:
        return AUTOMATIC_SURCHARGE * days
    return Decimal('0')


def motorcycle_surcharge(motorcycle, days):
    if motorcycle.engine_size > LARGE_ENGINE_THRESHOLD:
        return LARGE_ENGINE_SURCHARGE * days
    return Decimal('0')


def truck_surcharge(truck, days):
    surcharge = Decimal('0')
    if truck.four_wheel_drive:
        surcharge += FOUR_WHEEL_DRIVE_SURCHARGE * days
    if truck.capacity > HEAVY_LOAD_THRESHOLD:
        surcharge += HEAVY_LOAD_SURCHARGE * days
    return surcharge


SURCHARGES = {
    'CAR': car_surcharge,
    'MOTORCYCLE': motorcycle_surcharge,
    'TRUCK': truck_surcharge,
}


def rental_days(start_date, end_date):
    """Whole days between two datetimes, any partial day dropped."""
    return (end_date - start_date).days


def calculate_rental_price(vehicle, days):
    """
    Total price for renting ``vehicle`` (a Car, Motorcycle or Truck) for
    ``days`` days. The caller is expected to reject empty date ranges.
    """
    base = as_decimal(vehicle.daily_rate) * days
    surcharge = SURCHARGES[vehicle.get_vehicle_type()](vehicle, days)
    return (base + surcharge).quantize(CENTS)

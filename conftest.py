from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from customers.models import Customer
from vehicles.models import Car, FuelType, Motorcycle, Truck


@pytest.fixture
def now():
    return timezone.now().replace(microsecond=0)


@pytest.fixture
def customer(db):
    return Customer.objects.create(
        first_name='Ada',
        last_name='Lovelace',
        email='ada@example.com',
        phone_number='+44 20 7946 0958',
        driver_license_number='XH123456',
    )


@pytest.fixture
def other_customer(db):
    return Customer.objects.create(
        first_name='Alan',
        last_name='Turing',
        email='alan@example.com',
        phone_number='+44 20 7946 0000',
        driver_license_number='DL654321',
    )


@pytest.fixture
def car(db):
    return Car.objects.create(
        brand='Range Rover',
        model='Autobiography',
        year=2022,
        daily_rate=Decimal('50.00'),
        doors=4,
        fuel_type=FuelType.GASOLINE,
        automatic=True,
    )


@pytest.fixture
def motorcycle(db):
    return Motorcycle.objects.create(
        brand='Ducati',
        model='Multistrada V4',
        year=2023,
        daily_rate=Decimal('40.00'),
        engine_size=1200,
        type='TOURING',
    )


@pytest.fixture
def truck(db):
    return Truck.objects.create(
        brand='Volvo',
        model='FH16',
        year=2021,
        daily_rate=Decimal('100.00'),
        capacity=6000,
        four_wheel_drive=True,
    )


@pytest.fixture
def booking_window(now):
    """A three-day window starting tomorrow."""
    start = now + timedelta(days=1)
    return start, start + timedelta(days=3)

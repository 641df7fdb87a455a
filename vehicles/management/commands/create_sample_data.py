from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.utils import timezone

from customers.models import Customer
from rentals.models import Rental
from rentals.services import create_rental
from vehicles.models import Car, FuelType, Motorcycle, Truck


class Command(BaseCommand):
    help = 'Create demo vehicles and customers (safe to run more than once)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--with-rental',
            action='store_true',
            help='Also book the first car for the first customer when no rental exists yet',
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('Creating sample data...'))

        car_data = [
            ('Volkswagen', 'Golf R', 2024, Decimal('120.00'), 4, FuelType.GASOLINE, True),
            ('BMW', 'M5', 2023, Decimal('250.00'), 4, FuelType.HYBRID, True),
            ('Renault', 'Clio', 2021, Decimal('45.00'), 5, FuelType.DIESEL, False),
        ]
        cars = []
        for brand, model, year, rate, doors, fuel_type, automatic in car_data:
            car, created = Car.objects.get_or_create(
                brand=brand, model=model, year=year,
                defaults={'daily_rate': rate, 'doors': doors, 'fuel_type': fuel_type, 'automatic': automatic},
            )
            cars.append(car)
            if created:
                self.stdout.write(f'Created car: {car}')

        motorcycle_data = [
            ('Yamaha', 'MT-10', 2022, Decimal('75.00'), 998, 'NAKED'),
            ('Honda', 'CBR1000RR-R Fireblade', 2022, Decimal('85.00'), 1000, 'SPORT'),
            ('Harley-Davidson', 'Road Glide', 2023, Decimal('95.00'), 1923, 'TOURING'),
        ]
        motorcycles = []
        for brand, model, year, rate, engine_size, category in motorcycle_data:
            motorcycle, created = Motorcycle.objects.get_or_create(
                brand=brand, model=model, year=year,
                defaults={'daily_rate': rate, 'engine_size': engine_size, 'type': category},
            )
            motorcycles.append(motorcycle)
            if created:
                self.stdout.write(f'Created motorcycle: {motorcycle}')

        truck_data = [
            ('Ford', 'F-150 Raptor', 2025, Decimal('275.00'), 3500, True),
            ('Volvo', 'FH16', 2022, Decimal('400.00'), 18000, False),
        ]
        trucks = []
        for brand, model, year, rate, capacity, four_wheel_drive in truck_data:
            truck, created = Truck.objects.get_or_create(
                brand=brand, model=model, year=year,
                defaults={'daily_rate': rate, 'capacity': capacity, 'four_wheel_drive': four_wheel_drive},
            )
            trucks.append(truck)
            if created:
                self.stdout.write(f'Created truck: {truck}')

        customer_data = [
            ('Alice', 'Martin', 'alice.martin@example.com', '+33 6 12 34 56 78', 'DL100200300'),
            ('Bruno', 'Keller', 'bruno.keller@example.com', '+41 79 555 01 02', 'DL400500600'),
            ('Chloe', 'Nguyen', 'chloe.nguyen@example.com', '+1 (555) 010-4477', 'DL700800900'),
        ]
        customers = []
        for first_name, last_name, email, phone, license_number in customer_data:
            customer, created = Customer.objects.get_or_create(
                email=email,
                defaults={
                    'first_name': first_name,
                    'last_name': last_name,
                    'phone_number': phone,
                    'driver_license_number': license_number,
                },
            )
            customers.append(customer)
            if created:
                self.stdout.write(f'Created customer: {customer}')

        rentals_created = 0
        if options['with_rental'] and not Rental.objects.exists() and cars[0].available:
            start = timezone.now()
            rental = create_rental(customers[0].pk, cars[0].pk, start, start + timedelta(days=3))
            rentals_created = 1
            self.stdout.write(f'Created rental: {rental}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Sample data ready:\n'
                f'- {len(cars)} cars\n'
                f'- {len(motorcycles)} motorcycles\n'
                f'- {len(trucks)} trucks\n'
                f'- {len(customers)} customers\n'
                f'- {rentals_created} new rental(s)'
            )
        )

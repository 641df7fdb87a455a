"""
Rental lifecycle.

A rental starts ACTIVE and ends either COMPLETED or CANCELLED; nothing moves
it back. Creating a rental takes the vehicle out of circulation and ending it
puts the vehicle back, in the same transaction as the status change. The
vehicle row is locked for the duration so concurrent bookings of one vehicle
are serialized.
"""
import logging

from django.db import transaction
from django.utils import timezone

from customers.services import get_customer
from rental_backend.exceptions import ConflictError, InvalidStateError, NotFoundError
from vehicles import pricing
from vehicles.models import Vehicle

from .models import Rental, RentalStatus

logger = logging.getLogger(__name__)


def get_all_rentals():
    return Rental.objects.with_related()


def get_rental(rental_id):
    try:
        return Rental.objects.with_related().get(pk=rental_id)
    except Rental.DoesNotExist:
        raise NotFoundError(f"Rental not found with id: {rental_id}")


def get_customer_rentals(customer_id):
    return Rental.objects.with_related().filter(customer_id=customer_id)


def get_overdue_rentals(now=None):
    """Active rentals whose end date has passed, as of ``now``."""
    if now is None:
        now = timezone.now()
    return Rental.objects.with_related().overdue(now)


def lock_vehicle(vehicle_id):
    try:
        return Vehicle.objects.select_for_update().get(pk=vehicle_id)
    except Vehicle.DoesNotExist:
        raise NotFoundError(f"Vehicle not found with id: {vehicle_id}")


def check_bookable(vehicle, start_date, end_date):
    """Raise ConflictError unless ``vehicle`` can be booked for the dates."""
    if not vehicle.available:
        raise ConflictError("Vehicle is not available for rental")
    if end_date <= start_date:
        raise ConflictError("End date must be after start date")
    if Rental.objects.overlapping(vehicle.pk, start_date, end_date).exists():
        raise ConflictError("Vehicle is already rented for the selected dates")


def create_rental(customer_id, vehicle_id, start_date, end_date):
    with transaction.atomic():
        customer = get_customer(customer_id)
        vehicle = lock_vehicle(vehicle_id)

        try:
            check_bookable(vehicle, start_date, end_date)
        except ConflictError as e:
            logger.warning("Booking of vehicle %s for customer %s refused: %s", vehicle_id, customer_id, e.message)
            raise

        days = pricing.rental_days(start_date, end_date)
        variant = vehicle.as_variant()
        rental = Rental.objects.create(
            customer=customer,
            vehicle=vehicle,
            start_date=start_date,
            end_date=end_date,
            total_price=pricing.calculate_rental_price(variant, days),
            status=RentalStatus.ACTIVE,
        )

        # The variant row is cached on the vehicle and is what callers serialize
        vehicle.available = variant.available = False
        vehicle.save(update_fields=['available', 'updated_at'])

    logger.info("Rental %s created: vehicle %s for customer %s, %s day(s), total %s",
                rental.pk, vehicle_id, customer_id, days, rental.total_price)
    return rental


def end_rental(rental_id, status, refusal):
    with transaction.atomic():
        try:
            rental = Rental.objects.select_for_update().get(pk=rental_id)
        except Rental.DoesNotExist:
            raise NotFoundError(f"Rental not found with id: {rental_id}")

        if not rental.is_active():
            raise InvalidStateError(refusal)

        rental.status = status
        rental.save(update_fields=['status'])

        vehicle = lock_vehicle(rental.vehicle_id)
        vehicle.available = True
        vehicle.save(update_fields=['available', 'updated_at'])
        rental.vehicle = vehicle

    logger.info("Rental %s %s, vehicle %s released", rental.pk, status.label.lower(), vehicle.pk)
    return rental


def complete_rental(rental_id):
    return end_rental(rental_id, RentalStatus.COMPLETED, "Rental is not active")


def cancel_rental(rental_id):
    return end_rental(rental_id, RentalStatus.CANCELLED, "Only active rentals can be cancelled")

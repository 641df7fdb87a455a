import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError, Q

from rental_backend.exceptions import ConflictError, NotFoundError

from .models import Customer

logger = logging.getLogger(__name__)


def get_all_customers():
    return Customer.objects.all()


def get_customer(customer_id):
    try:
        return Customer.objects.get(pk=customer_id)
    except Customer.DoesNotExist:
        raise NotFoundError(f"Customer not found with id: {customer_id}")


def check_unique(email, driver_license_number, exclude_id=None):
    """Reject an email or license number already held by another customer."""
    others = Customer.objects.all()
    if exclude_id is not None:
        others = others.exclude(pk=exclude_id)

    if others.filter(email__iexact=email).exists():
        raise ConflictError(f"Email already exists: {email}")
    if others.filter(driver_license_number__iexact=driver_license_number).exists():
        raise ConflictError(f"Driver license number already exists: {driver_license_number}")


def create_customer(first_name, last_name, email, phone_number, driver_license_number):
    try:
        with transaction.atomic():
            check_unique(email, driver_license_number)
            customer = Customer.objects.create(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone_number=phone_number,
                driver_license_number=driver_license_number,
            )
    except IntegrityError:
        # A concurrent write took the email or license number first
        raise ConflictError("Email or driver license number already exists")
    logger.info("Created customer %s: %s", customer.pk, customer.full_name)
    return customer


def update_customer(customer_id, first_name, last_name, email, phone_number, driver_license_number):
    """Replace every editable field of a customer; created_at is kept."""
    try:
        with transaction.atomic():
            customer = get_customer(customer_id)
            check_unique(email, driver_license_number, exclude_id=customer.pk)
            customer.first_name = first_name
            customer.last_name = last_name
            customer.email = email
            customer.phone_number = phone_number
            customer.driver_license_number = driver_license_number
            customer.save()
    except IntegrityError:
        raise ConflictError("Email or driver license number already exists")
    logger.info("Updated customer %s", customer.pk)
    return customer


def delete_customer(customer_id):
    with transaction.atomic():
        customer = get_customer(customer_id)
        try:
            customer.delete()
        except ProtectedError:
            raise ConflictError(f"Customer {customer_id} has rentals and cannot be deleted")
    logger.info("Deleted customer %s", customer_id)


def search_customers_by_name(name):
    return Customer.objects.filter(Q(first_name__icontains=name) | Q(last_name__icontains=name))

import pytest
from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.core.management import call_command

from customers.models import Customer
from rental_backend.exceptions import ConflictError
from rentals import services as rental_services
from rentals.forms import RentalAdminForm
from rentals.models import Rental, RentalStatus
from rentals.services import create_rental
from vehicles.models import Car, Motorcycle, Truck, Vehicle

pytestmark = pytest.mark.django_db


def admin_form_data(customer, vehicle, start, end):
    return {
        'customer': customer.pk,
        'vehicle': vehicle.pk,
        'start_date': start.isoformat(),
        'end_date': end.isoformat(),
    }


def test_admin_form_offers_only_available_vehicles(car, truck):
    Vehicle.objects.filter(pk=truck.pk).update(available=False)
    form = RentalAdminForm()
    assert [v.pk for v in form.fields['vehicle'].queryset] == [car.pk]


def test_admin_form_reports_overlap(customer, car, booking_window):
    create_rental(customer.pk, car.pk, *booking_window)
    Vehicle.objects.filter(pk=car.pk).update(available=True)

    form = RentalAdminForm(data=admin_form_data(customer, car, *booking_window))
    assert not form.is_valid()
    assert form.non_field_errors() == ['Vehicle is already rented for the selected dates']


def test_admin_add_goes_through_lifecycle(admin_client, customer, truck, booking_window):
    start, end = booking_window
    response = admin_client.post('/admin/rentals/rental/add/', {
        'customer': customer.pk,
        'vehicle': truck.pk,
        'start_date_0': start.date().isoformat(),
        'start_date_1': start.time().isoformat(),
        'end_date_0': end.date().isoformat(),
        'end_date_1': end.time().isoformat(),
    })
    assert response.status_code == 302

    rental = Rental.objects.get()
    assert rental.total_price == 435
    assert Vehicle.objects.get(pk=truck.pk).available is False


def test_admin_actions_end_rentals(admin_client, customer, car, motorcycle, booking_window):
    first = create_rental(customer.pk, car.pk, *booking_window)
    second = create_rental(customer.pk, motorcycle.pk, *booking_window)

    response = admin_client.post('/admin/rentals/rental/', {
        'action': 'complete_selected',
        '_selected_action': [first.pk, second.pk],
    })
    assert response.status_code == 302
    assert set(Rental.objects.values_list('status', flat=True)) == {RentalStatus.COMPLETED}
    assert Vehicle.objects.filter(available=True).count() == 2

    # Already completed rentals are reported, not changed
    admin_client.post('/admin/rentals/rental/', {
        'action': 'cancel_selected',
        '_selected_action': [first.pk],
    })
    first.refresh_from_db()
    assert first.status == RentalStatus.COMPLETED


def test_admin_pages_render(admin_client, customer, car, booking_window):
    create_rental(customer.pk, car.pk, *booking_window)
    for url in ['/admin/rentals/rental/', '/admin/rentals/rental/add/', '/admin/vehicles/car/',
                '/admin/vehicles/vehicle/', '/admin/customers/customer/']:
        assert admin_client.get(url).status_code == 200


def test_create_sample_data_is_idempotent():
    call_command('create_sample_data')
    call_command('create_sample_data')

    assert Car.objects.count() == 3
    assert Motorcycle.objects.count() == 3
    assert Truck.objects.count() == 2
    assert Customer.objects.count() == 3
    assert not Rental.objects.exists()


def test_create_sample_data_with_rental():
    call_command('create_sample_data', with_rental=True)
    call_command('create_sample_data', with_rental=True)

    rental = Rental.objects.get()
    assert rental.status == RentalStatus.ACTIVE
    assert Vehicle.objects.get(pk=rental.vehicle_id).available is False


@pytest.mark.django_db(transaction=True)
def test_init_app_creates_superuser_once(settings):
    settings.ADMIN_USERNAME = 'root'
    call_command('init_app')
    call_command('init_app')

    superusers = get_user_model().objects.filter(is_superuser=True)
    assert [u.username for u in superusers] == ['root']


def test_customer_admin_refuses_case_variant_email(admin_client, customer):
    response = admin_client.post('/admin/customers/customer/add/', {
        'first_name': 'Ada',
        'last_name': 'King',
        'email': 'ADA@example.com',
        'phone_number': '+44 20 7946 0000',
        'driver_license_number': 'zz000001',
    })
    assert response.status_code == 200
    assert 'A customer with this email already exists.' in response.content.decode()
    assert Customer.objects.count() == 1


def test_admin_add_reports_booking_lost_to_another(admin_client, customer, car, booking_window, monkeypatch):
    def refuse(*args):
        raise ConflictError('Vehicle is not available for rental')
    monkeypatch.setattr(rental_services, 'create_rental', refuse)

    start, end = booking_window
    response = admin_client.post('/admin/rentals/rental/add/', {
        'customer': customer.pk,
        'vehicle': car.pk,
        'start_date_0': start.date().isoformat(),
        'start_date_1': start.time().isoformat(),
        'end_date_0': end.date().isoformat(),
        'end_date_1': end.time().isoformat(),
    })
    assert response.status_code == 302
    assert response.url == '/admin/rentals/rental/add/'
    assert not Rental.objects.exists()
    assert [str(m) for m in get_messages(response.wsgi_request)] == [
        'Rental not created: Vehicle is not available for rental',
    ]


def test_select2_routes_are_not_exposed(client):
    assert client.get('/select2/fields/auto.json').status_code == 404

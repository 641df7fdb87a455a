import json
from datetime import timedelta

import pytest

from customers.models import Customer
from rentals.models import Rental
from vehicles.models import Vehicle

pytestmark = pytest.mark.django_db


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


CAR_PAYLOAD = {
    'brand': 'Range Rover',
    'model': 'Autobiography',
    'year': 2022,
    'daily_rate': 250.0,
    'doors': 4,
    'fuel_type': 'GASOLINE',
    'automatic': True,
}

CUSTOMER_PAYLOAD = {
    'first_name': 'Grace',
    'last_name': 'Hopper',
    'email': 'grace@example.com',
    'phone_number': '+1 555 010 2030',
    'driver_license_number': 'ny998877',
}


class TestVehicleEndpoints:

    def test_create_car(self, client):
        response = post_json(client, '/api/vehicles/cars/', CAR_PAYLOAD)
        assert response.status_code == 201
        body = response.json()
        assert body['vehicle_type'] == 'CAR'
        assert body['doors'] == 4
        assert body['available'] is True

    def test_create_car_with_unknown_fuel_type_conflicts(self, client):
        response = post_json(client, '/api/vehicles/cars/', dict(CAR_PAYLOAD, fuel_type='STEAM'))
        assert response.status_code == 409
        assert response.json() == {'success': False, 'error': 'Invalid fuel type: STEAM'}

    def test_create_car_validates_fields(self, client):
        response = post_json(client, '/api/vehicles/cars/', dict(CAR_PAYLOAD, doors=1, daily_rate=-5))
        assert response.status_code == 400
        errors = response.json()['errors']
        assert 'doors' in errors
        assert 'daily_rate' in errors
        assert not Vehicle.objects.exists()

    def test_create_motorcycle_and_truck(self, client):
        motorcycle = post_json(client, '/api/vehicles/motorcycles/', {
            'brand': 'Yamaha', 'model': 'MT-10', 'year': 2022, 'daily_rate': 75,
            'engine_size': 998, 'type': 'naked',
        })
        truck = post_json(client, '/api/vehicles/trucks/', {
            'brand': 'Ford', 'model': 'F-150', 'year': 2025, 'daily_rate': 275,
            'capacity': 3500, 'four_wheel_drive': True,
        })
        assert motorcycle.status_code == 201
        assert motorcycle.json()['type'] == 'NAKED'
        assert truck.status_code == 201
        assert truck.json()['capacity'] == 3500

    def test_small_engine_motorcycle_rejected(self, client):
        response = post_json(client, '/api/vehicles/motorcycles/', {
            'brand': 'Honda', 'model': 'Cub', 'year': 2020, 'daily_rate': 10,
            'engine_size': 49, 'type': 'SCOOTER',
        })
        assert response.status_code == 400
        assert 'engine_size' in response.json()['errors']

    def test_list_get_and_search(self, client, car, motorcycle, truck):
        assert len(client.get('/api/vehicles/').json()['vehicles']) == 3
        assert client.get(f'/api/vehicles/{truck.pk}/').json()['four_wheel_drive'] is True
        found = client.get('/api/vehicles/search/', {'brand': 'duc', 'min_price': '10'}).json()['vehicles']
        assert [v['id'] for v in found] == [motorcycle.pk]

    def test_search_rejects_non_numeric_bounds(self, client):
        response = client.get('/api/vehicles/search/', {'min_year': 'soon'})
        assert response.status_code == 400

    def test_missing_vehicle_is_404(self, client):
        response = client.get('/api/vehicles/999/')
        assert response.status_code == 404
        assert response.json()['error'] == 'Vehicle not found with id: 999'

    def test_availability_patch(self, client, car):
        response = client.patch(f'/api/vehicles/{car.pk}/availability/?available=false')
        assert response.status_code == 200
        assert response.json()['available'] is False
        available = client.get('/api/vehicles/available/').json()['vehicles']
        assert available == []

    def test_availability_requires_boolean(self, client, car):
        response = client.patch(f'/api/vehicles/{car.pk}/availability/?available=maybe')
        assert response.status_code == 400

    def test_delete_vehicle(self, client, car):
        assert client.delete(f'/api/vehicles/{car.pk}/').status_code == 204
        assert client.delete(f'/api/vehicles/{car.pk}/').status_code == 404

    def test_wrong_method(self, client):
        assert client.post('/api/vehicles/').status_code == 405


class TestCustomerEndpoints:

    def test_create_and_get_customer(self, client):
        response = post_json(client, '/api/customers/', CUSTOMER_PAYLOAD)
        assert response.status_code == 201
        body = response.json()
        assert body['full_name'] == 'Grace Hopper'
        assert body['driver_license_number'] == 'NY998877'
        assert client.get(f"/api/customers/{body['id']}/").json()['email'] == 'grace@example.com'

    def test_duplicate_email_conflicts(self, client, customer):
        response = post_json(client, '/api/customers/', dict(CUSTOMER_PAYLOAD, email=customer.email))
        assert response.status_code == 409

    def test_invalid_phone_and_email(self, client):
        response = post_json(client, '/api/customers/', dict(CUSTOMER_PAYLOAD, phone_number='12', email='nope'))
        assert response.status_code == 400
        assert set(response.json()['errors']) == {'phone_number', 'email'}

    def test_malformed_json(self, client):
        response = client.post('/api/customers/', data='{not json', content_type='application/json')
        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid JSON body'

    def test_update_customer(self, client, customer):
        payload = dict(CUSTOMER_PAYLOAD, email=customer.email)
        response = client.put(f'/api/customers/{customer.pk}/', data=json.dumps(payload),
                              content_type='application/json')
        assert response.status_code == 200
        assert response.json()['first_name'] == 'Grace'

    def test_search_and_delete(self, client, customer, other_customer):
        found = client.get('/api/customers/search/', {'name': 'tur'}).json()['customers']
        assert [c['id'] for c in found] == [other_customer.pk]
        assert client.get('/api/customers/search/').status_code == 400
        assert client.delete(f'/api/customers/{other_customer.pk}/').status_code == 204
        assert list(Customer.objects.values_list('pk', flat=True)) == [customer.pk]


class TestRentalEndpoints:

    def book(self, client, customer, vehicle, start, end):
        return post_json(client, '/api/rentals/', {
            'customer_id': customer.pk,
            'vehicle_id': vehicle.pk,
            'start_date': start.isoformat(),
            'end_date': end.isoformat(),
        })

    def test_rental_lifecycle(self, client, customer, truck, booking_window):
        response = self.book(client, customer, truck, *booking_window)
        assert response.status_code == 201
        rental = response.json()
        assert rental['status'] == 'ACTIVE'
        assert rental['total_price'] == 435.0
        assert rental['vehicle']['available'] is False
        assert rental['customer']['id'] == customer.pk

        completed = client.post(f"/api/rentals/{rental['id']}/complete/")
        assert completed.status_code == 200
        assert completed.json()['status'] == 'COMPLETED'
        assert completed.json()['vehicle']['available'] is True

        again = client.post(f"/api/rentals/{rental['id']}/complete/")
        assert again.status_code == 409
        assert again.json()['error'] == 'Rental is not active'

    def test_cancel(self, client, customer, car, booking_window):
        rental_id = self.book(client, customer, car, *booking_window).json()['id']
        response = client.post(f'/api/rentals/{rental_id}/cancel/')
        assert response.json()['status'] == 'CANCELLED'
        assert client.get(f'/api/rentals/{rental_id}/').json()['status'] == 'CANCELLED'

    def test_second_booking_conflicts(self, client, customer, car, booking_window):
        assert self.book(client, customer, car, *booking_window).status_code == 201
        response = self.book(client, customer, car, *booking_window)
        assert response.status_code == 409
        assert response.json()['error'] == 'Vehicle is not available for rental'
        assert Rental.objects.count() == 1

    def test_unknown_customer_is_404(self, client, car, booking_window):
        start, end = booking_window
        response = post_json(client, '/api/rentals/', {
            'customer_id': 999, 'vehicle_id': car.pk,
            'start_date': start.isoformat(), 'end_date': end.isoformat(),
        })
        assert response.status_code == 404

    def test_end_date_in_the_past_is_rejected(self, client, customer, car, now):
        response = self.book(client, customer, car, now - timedelta(days=3), now - timedelta(days=1))
        assert response.status_code == 400
        assert 'end_date' in response.json()['errors']

    def test_listings(self, client, customer, other_customer, car, truck, booking_window):
        self.book(client, customer, car, *booking_window)
        self.book(client, other_customer, truck, *booking_window)

        assert len(client.get('/api/rentals/').json()['rentals']) == 2
        mine = client.get(f'/api/rentals/customer/{customer.pk}/').json()['rentals']
        assert [r['vehicle']['id'] for r in mine] == [car.pk]
        assert client.get('/api/rentals/overdue/').json()['rentals'] == []

    def test_missing_rental(self, client):
        assert client.get('/api/rentals/5/').status_code == 404
        assert client.post('/api/rentals/5/cancel/').status_code == 404

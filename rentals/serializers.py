from customers.serializers import serialize_customer
from vehicles.serializers import serialize_vehicle


def serialize_rental(rental):
    return {
        'id': rental.pk,
        'customer': serialize_customer(rental.customer),
        'vehicle': serialize_vehicle(rental.vehicle),
        'start_date': rental.start_date.isoformat(),
        'end_date': rental.end_date.isoformat(),
        'total_price': float(rental.total_price),
        'status': str(rental.status),
        'created_at': rental.created_at.isoformat(),
    }

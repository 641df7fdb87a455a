def serialize_customer(customer):
    return {
        'id': customer.pk,
        'first_name': customer.first_name,
        'last_name': customer.last_name,
        'full_name': customer.full_name,
        'email': customer.email,
        'phone_number': customer.phone_number,
        'driver_license_number': customer.driver_license_number,
        'created_at': customer.created_at.isoformat(),
    }

from .models import VehicleType


def car_fields(car):
    return {
        'doors': car.doors,
        'fuel_type': car.fuel_type,
        'automatic': car.automatic,
    }


def motorcycle_fields(motorcycle):
    return {
        'engine_size': motorcycle.engine_size,
        'type': motorcycle.type,
    }


def truck_fields(truck):
    return {
        'capacity': truck.capacity,
        'four_wheel_drive': truck.four_wheel_drive,
    }


VARIANT_FIELDS = {
    VehicleType.CAR: car_fields,
    VehicleType.MOTORCYCLE: motorcycle_fields,
    VehicleType.TRUCK: truck_fields,
}


def serialize_vehicle(vehicle):
    variant = vehicle.as_variant()
    vehicle_type = variant.get_vehicle_type()
    data = {
        'id': variant.pk,
        'brand': variant.brand,
        'model': variant.model,
        'year': variant.year,
        'daily_rate': float(variant.daily_rate),
        'available': variant.available,
        'vehicle_type': str(vehicle_type),
    }
    data.update(VARIANT_FIELDS[vehicle_type](variant))
    return data

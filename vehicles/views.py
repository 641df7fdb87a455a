from decimal import Decimal

from django.http import HttpResponse, JsonResponse

from rental_backend.http import api_view, json_body, parse_bool, parse_number, validated

from . import services
from .forms import CarForm, MotorcycleForm, TruckForm
from .serializers import serialize_vehicle


def vehicle_list_response(vehicles):
    return JsonResponse({'vehicles': [serialize_vehicle(v) for v in vehicles]})


@api_view(['GET'])
def vehicle_list(request):
    """List every vehicle"""
    return vehicle_list_response(services.get_all_vehicles())


@api_view(['GET'])
def available_vehicle_list(request):
    """List vehicles that can currently be rented"""
    return vehicle_list_response(services.get_available_vehicles())


@api_view(['GET'])
def vehicle_search(request):
    params = request.GET
    vehicles = services.search_vehicles(
        brand=params.get('brand'),
        model=params.get('model'),
        min_year=parse_number(params.get('min_year'), 'min_year'),
        max_year=parse_number(params.get('max_year'), 'max_year'),
        min_price=parse_number(params.get('min_price'), 'min_price', Decimal),
        max_price=parse_number(params.get('max_price'), 'max_price', Decimal),
        vehicle_type=params.get('vehicle_type'),
    )
    return vehicle_list_response(vehicles)


@api_view(['GET', 'DELETE'])
def vehicle_detail(request, vehicle_id):
    if request.method == 'DELETE':
        services.delete_vehicle(vehicle_id)
        return HttpResponse(status=204)
    return JsonResponse(serialize_vehicle(services.get_vehicle(vehicle_id)))


@api_view(['POST'])
def create_car(request):
    data = validated(CarForm(json_body(request)))
    car = services.create_car(**data)
    return JsonResponse(serialize_vehicle(car), status=201)


@api_view(['POST'])
def create_motorcycle(request):
    data = validated(MotorcycleForm(json_body(request)))
    motorcycle = services.create_motorcycle(**data)
    return JsonResponse(serialize_vehicle(motorcycle), status=201)


@api_view(['POST'])
def create_truck(request):
    data = validated(TruckForm(json_body(request)))
    truck = services.create_truck(**data)
    return JsonResponse(serialize_vehicle(truck), status=201)


@api_view(['PATCH'])
def vehicle_availability(request, vehicle_id):
    """Set the availability flag from the ?available= query parameter"""
    available = parse_bool(request.GET.get('available'), 'available')
    vehicle = services.update_vehicle_availability(vehicle_id, available)
    return JsonResponse(serialize_vehicle(vehicle))

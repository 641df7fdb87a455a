from django.http import JsonResponse

from rental_backend.http import api_view, json_body, validated

from . import services
from .forms import RentalForm
from .serializers import serialize_rental


def rental_list_response(rentals):
    return JsonResponse({'rentals': [serialize_rental(r) for r in rentals]})


@api_view(['GET', 'POST'])
def rental_list(request):
    """List rentals, or book a vehicle for a customer"""
    if request.method == 'POST':
        data = validated(RentalForm(json_body(request)))
        rental = services.create_rental(**data)
        return JsonResponse(serialize_rental(rental), status=201)
    return rental_list_response(services.get_all_rentals())


@api_view(['GET'])
def rental_detail(request, rental_id):
    return JsonResponse(serialize_rental(services.get_rental(rental_id)))


@api_view(['POST'])
def complete_rental(request, rental_id):
    return JsonResponse(serialize_rental(services.complete_rental(rental_id)))


@api_view(['POST'])
def cancel_rental(request, rental_id):
    return JsonResponse(serialize_rental(services.cancel_rental(rental_id)))


@api_view(['GET'])
def customer_rentals(request, customer_id):
    return rental_list_response(services.get_customer_rentals(customer_id))


@api_view(['GET'])
def overdue_rentals(request):
    """Active rentals past their end date"""
    return rental_list_response(services.get_overdue_rentals())

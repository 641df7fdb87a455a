from django.http import HttpResponse, JsonResponse

from rental_backend.http import InvalidPayloadError, api_view, json_body, validated

from . import services
from .forms import CustomerForm
from .serializers import serialize_customer


def customer_list_response(customers):
    return JsonResponse({'customers': [serialize_customer(c) for c in customers]})


@api_view(['GET', 'POST'])
def customer_list(request):
    """List customers, or register a new one"""
    if request.method == 'POST':
        data = validated(CustomerForm(json_body(request)))
        customer = services.create_customer(**data)
        return JsonResponse(serialize_customer(customer), status=201)
    return customer_list_response(services.get_all_customers())


@api_view(['GET', 'PUT', 'DELETE'])
def customer_detail(request, customer_id):
    if request.method == 'PUT':
        data = validated(CustomerForm(json_body(request)))
        customer = services.update_customer(customer_id, **data)
        return JsonResponse(serialize_customer(customer))
    if request.method == 'DELETE':
        services.delete_customer(customer_id)
        return HttpResponse(status=204)
    return JsonResponse(serialize_customer(services.get_customer(customer_id)))


@api_view(['GET'])
def customer_search(request):
    name = request.GET.get('name', '').strip()
    if not name:
        raise InvalidPayloadError("Query parameter 'name' is required")
    return customer_list_response(services.search_customers_by_name(name))
